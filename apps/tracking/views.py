"""
Public tracking views.

The single-code lookup reports an unreachable database as 503 with `fallback: true`
so the web client can switch to its offline demo data.
"""

import logging

from drf_spectacular.utils import extend_schema
from rest_framework.views import APIView

from apps.ops.health import check_store
from apps.shipments.envelope import envelope
from apps.shipments.exceptions import StoreUnavailable
from apps.shipments.serializers import ShipmentSerializer, TrackBatchSerializer
from apps.shipments.views import shipment_service

logger = logging.getLogger("capitalcargo.tracking")


class TrackShipmentView(APIView):
    """GET /api/track/{tracking_id}/ — case-insensitive public lookup."""
    degraded_mode_fallback = True
    service = shipment_service

    @extend_schema(tags=["Tracking"], summary="Track a shipment by tracking code", responses=ShipmentSerializer)
    def get(self, request, tracking_id):
        return self.track(tracking_id, check_store())

    def track(self, tracking_id, health):
        if not health.available:
            logger.warning("Tracking %s in degraded mode: %s", tracking_id, health.detail)
            raise StoreUnavailable()

        shipment = self.service.find_by_tracking_code(tracking_id)
        return envelope(ShipmentSerializer(shipment).data)


class TrackBatchView(APIView):
    """POST /api/track/batch/ — returns whichever of the codes exist."""
    service = shipment_service

    @extend_schema(tags=["Tracking"], summary="Track several shipments at once",
                   request=TrackBatchSerializer, responses=ShipmentSerializer(many=True))
    def post(self, request):
        ser = TrackBatchSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        shipments = self.service.track_many(ser.validated_data["codes"])
        return envelope(ShipmentSerializer(shipments, many=True).data)
