"""
ShipmentService — the only code path that writes shipments.

Lookup:   resolve(identifier)  →  24 hex chars ? internal id : tracking code
Writes:   create → update / change_status / append_event / set_estimated_delivery → delete / confirm_delete

Every status change goes through append_event, so `status` always matches the
latest status-changing event.
"""

import logging
import random
import re
import string

from django.conf import settings
from django.db import IntegrityError, transaction
from django.db.models import Q
from django.utils import timezone
from rest_framework import serializers

from .exceptions import DuplicateTrackingCode, InvalidTransition, ShipmentNotFound
from .lifecycle import STATUS_DESCRIPTIONS, can_transition, is_valid_status, valid_statuses
from .models import DeletionRecord, Shipment, TrackingEvent

logger = logging.getLogger("capitalcargo.shipments")
audit_logger = logging.getLogger("capitalcargo.audit")

INTERNAL_ID_RE = re.compile(r"^[0-9a-fA-F]{24}$")

INITIAL_EVENT_DESCRIPTION = "Shipment received and processing has begun"
MAX_CODE_ATTEMPTS = 20


def _generate_tracking_code():
    prefix = getattr(settings, "TRACKING_CODE_PREFIX", "CC")
    digits = "".join(random.choices(string.digits, k=6))
    return f"{prefix}{digits}"


def is_internal_id(identifier) -> bool:
    return bool(INTERNAL_ID_RE.match(identifier or ""))


def normalize_tracking_code(code) -> str:
    return str(code).strip().upper()


def search_filter(term) -> Q:
    """Case-insensitive substring match on tracking code, customer name or email."""
    return (
        Q(tracking_code__icontains=term)
        | Q(customer_name__icontains=term)
        | Q(customer_email__icontains=term)
    )


class ShipmentService:
    """
    Shipment lifecycle operations.
    The tracking-code generator is injectable so tests can force collisions.
    """

    def __init__(self, code_generator=None):
        self.generate_code = code_generator or _generate_tracking_code

    # ── Lookup ────────────────────────────────────────────────────────────────
    def find_by_internal_id(self, internal_id) -> Shipment:
        shipment = Shipment.objects.filter(pk=str(internal_id).lower()).first()
        if shipment is None:
            raise ShipmentNotFound()
        return shipment

    def find_by_tracking_code(self, code) -> Shipment:
        # Codes are stored upper-cased, so an exact match on the normalised code is case-insensitive.
        shipment = Shipment.objects.filter(tracking_code=normalize_tracking_code(code)).first()
        if shipment is None:
            raise ShipmentNotFound()
        return shipment

    def resolve(self, identifier) -> Shipment:
        """Resolve either identifier form to a shipment."""
        if is_internal_id(identifier):
            return self.find_by_internal_id(identifier)
        return self.find_by_tracking_code(identifier)

    def track_many(self, codes):
        normalized = {normalize_tracking_code(c) for c in codes if isinstance(c, str) and c.strip()}
        return (
            Shipment.objects.filter(tracking_code__in=normalized)
            .prefetch_related("events")
            .order_by("-created_at")
        )

    # ── Create ────────────────────────────────────────────────────────────────
    @transaction.atomic
    def create_shipment(self, validated_data: dict) -> Shipment:
        """
        Create a shipment in `processing` with one seeded event at the origin.
        A caller-supplied tracking code must be unused; otherwise one is generated.
        """
        data = dict(validated_data)
        data.pop("status", None)
        requested = data.pop("tracking_code", None)

        if requested:
            tracking_code = normalize_tracking_code(requested)
            if Shipment.objects.filter(tracking_code=tracking_code).exists():
                raise DuplicateTrackingCode()
        else:
            tracking_code = self._unused_code()

        try:
            with transaction.atomic():
                shipment = Shipment.objects.create(
                    tracking_code=tracking_code,
                    status=Shipment.Status.PROCESSING,
                    **data,
                )
        except IntegrityError:
            # Lost a race with a concurrent create for the same code.
            raise DuplicateTrackingCode()

        TrackingEvent.objects.create(
            shipment=shipment,
            status=Shipment.Status.PROCESSING,
            description=INITIAL_EVENT_DESCRIPTION,
            location=shipment.origin,
            completed=False,
        )
        logger.info("Shipment %s created (%s → %s)", tracking_code, shipment.origin, shipment.destination)
        return shipment

    # ── Update ────────────────────────────────────────────────────────────────
    @transaction.atomic
    def update_shipment(self, shipment: Shipment, validated_data: dict) -> Shipment:
        """Merge validated fields into the shipment. A status change is recorded as an event."""
        data = dict(validated_data)
        data.pop("tracking_code", None)
        new_status = data.pop("status", None)

        for field, value in data.items():
            setattr(shipment, field, value)
        shipment.save()

        if new_status is not None and new_status != shipment.status:
            shipment = self.change_status(shipment, new_status)

        logger.info("Shipment %s updated (%s)", shipment.tracking_code, ", ".join(sorted(validated_data)))
        return shipment

    @transaction.atomic
    def append_event(self, shipment: Shipment, status, description, location, completed=True) -> Shipment:
        """Append a tracking event and move the shipment to the event's status."""
        if not is_valid_status(status):
            raise serializers.ValidationError(f"Invalid status. Must be one of: {', '.join(valid_statuses())}")
        if not can_transition(shipment.status, status):
            raise InvalidTransition(shipment.status, status)

        return self._record_event(shipment, status, description, location, completed)

    def change_status(self, shipment: Shipment, status, description=None, location=None) -> Shipment:
        """Set a canonical status directly, synthesising the event description and location."""
        if not description and is_valid_status(status):
            description = STATUS_DESCRIPTIONS[status]
        return self.append_event(shipment, status, description, location or shipment.destination)

    @transaction.atomic
    def set_estimated_delivery(self, shipment: Shipment, when) -> Shipment:
        shipment.estimated_delivery = when
        shipment.save(update_fields=["estimated_delivery", "updated_at"])
        logger.info("Shipment %s ETA set to %s", shipment.tracking_code, when.isoformat())
        return shipment

    # ── Delete ────────────────────────────────────────────────────────────────
    def delete_shipment(self, shipment: Shipment) -> bool:
        deleted, _ = Shipment.objects.filter(pk=shipment.pk).delete()
        if deleted:
            logger.info("Shipment %s deleted", shipment.tracking_code)
        return deleted > 0

    @transaction.atomic
    def confirm_delete(self, shipment: Shipment, reason: str) -> DeletionRecord:
        """
        Close the shipment with a final `cancelled` event, persist a tombstone and delete it.
        The final event bypasses the transition table: deletion is always allowed.
        The tombstone keeps the status the shipment had before deletion.
        """
        previous = shipment.status
        self._record_event(
            shipment,
            Shipment.Status.CANCELLED,
            f"Shipment deleted: {reason}",
            shipment.destination or "System",
            completed=True,
        )
        record = DeletionRecord.objects.create(
            tracking_code = shipment.tracking_code,
            customer_name = shipment.customer_name or "Unknown",
            status        = previous,
            origin        = shipment.origin or "Unknown",
            destination   = shipment.destination or "Unknown",
            reason        = reason,
        )
        audit_logger.info(
            "Shipment deletion audit",
            extra={
                "tracking_id":   record.tracking_code,
                "customer_name": record.customer_name,
                "origin":        record.origin,
                "destination":   record.destination,
                "status":        record.status,
                "reason":        reason,
                "deleted_at":    record.deleted_at.isoformat(),
            },
        )
        self.delete_shipment(shipment)
        return record

    # ── Internals ─────────────────────────────────────────────────────────────
    def _unused_code(self):
        for _ in range(MAX_CODE_ATTEMPTS):
            code = normalize_tracking_code(self.generate_code())
            if not Shipment.objects.filter(tracking_code=code).exists():
                return code
        logger.error("No unused tracking code after %d attempts", MAX_CODE_ATTEMPTS)
        raise DuplicateTrackingCode()

    def _record_event(self, shipment, status, description, location, completed):
        TrackingEvent.objects.create(
            shipment=shipment,
            status=status,
            description=description,
            location=location,
            completed=completed,
        )
        previous = shipment.status
        shipment.status = status
        update_fields = ["status", "updated_at"]
        if status == Shipment.Status.DELIVERED and shipment.actual_delivery is None:
            shipment.actual_delivery = timezone.now()
            update_fields.append("actual_delivery")
        shipment.save(update_fields=update_fields)

        logger.info("Shipment %s: %s → %s (%s)", shipment.tracking_code, previous, status, location)
        return shipment
