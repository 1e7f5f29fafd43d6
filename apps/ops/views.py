"""
Operations views:
  - Liveness probe
  - Deep health check (DB, disk)
  - Prometheus-formatted shipment metrics
"""

import os
import logging

from django.conf import settings
from django.db.models import Count
from django.http import HttpResponse
from django.utils import timezone
from rest_framework.views import APIView
from drf_spectacular.utils import extend_schema

from apps.shipments.envelope import envelope
from .health import check_store

logger = logging.getLogger("capitalcargo.ops")


# ── GET /api/health/ ─────────────────────────────────────────────────────────
@extend_schema(tags=["Ops"], summary="Liveness probe", responses=None)
class HealthView(APIView):
    throttle_classes = []

    def get(self, request):
        return envelope(
            message="Capital Cargo API is running",
            timestamp=timezone.now().isoformat(),
            environment=getattr(settings, "ENVIRONMENT", "development"),
        )


# ── GET /api/health/deep/ ─────────────────────────────────────────────────────
@extend_schema(tags=["Ops"], summary="Deep health check — DB, disk", responses=None)
class DeepHealthView(APIView):
    throttle_classes = []

    def get(self, request):
        checks = {}

        store = check_store()
        checks["database"] = store.detail

        try:
            stat  = os.statvfs("/")
            free_gb = (stat.f_bavail * stat.f_frsize) / (1024 ** 3)
            checks["disk_free_gb"] = round(free_gb, 2)
            checks["disk"] = "ok" if free_gb > 1 else "low"
        except (AttributeError, OSError) as exc:
            checks["disk"] = f"error: {exc}"

        overall = "ok" if store.available and checks["disk"] == "ok" else "degraded"
        return envelope({"status": overall, "checks": checks})


# ── GET /api/ops/metrics/ ────────────────────────────────────────────────────
@extend_schema(tags=["Ops"], summary="Prometheus-formatted shipment metrics", responses=None)
class MetricsView(APIView):

    def get(self, request):
        from apps.shipments.models import Shipment, DeletionRecord

        shipment_counts = dict(
            Shipment.objects.order_by().values_list("status").annotate(c=Count("id"))
        )
        deleted = DeletionRecord.objects.count()

        lines = [
            "# HELP capitalcargo_shipments_total Shipments by status",
            "# TYPE capitalcargo_shipments_total gauge",
        ]
        for status in Shipment.Status.values:
            lines.append(f'capitalcargo_shipments_total{{status="{status}"}} {shipment_counts.get(status, 0)}')
        lines += [
            "",
            "# HELP capitalcargo_shipments_deleted_total Shipments removed through confirmed delete",
            "# TYPE capitalcargo_shipments_deleted_total counter",
            f"capitalcargo_shipments_deleted_total {deleted}",
        ]
        return HttpResponse("\n".join(lines), content_type="text/plain; version=0.0.4")
