"""Shipment serializers. The wire format nests customer and cargo fields the way the web client expects."""

from decimal import Decimal, ROUND_HALF_UP

from django.utils import timezone
from rest_framework import serializers

from .models import Shipment, TrackingEvent, DeletionRecord


class TrackingEventSerializer(serializers.ModelSerializer):
    class Meta:
        model  = TrackingEvent
        fields = ["id", "status", "description", "location", "timestamp", "completed"]


class CustomerInfoSerializer(serializers.Serializer):
    name    = serializers.CharField(source="customer_name",    max_length=120)
    email   = serializers.EmailField(source="customer_email")
    phone   = serializers.CharField(source="customer_phone",   max_length=40)
    address = serializers.CharField(source="customer_address", max_length=255)


class DimensionsSerializer(serializers.Serializer):
    length = serializers.FloatField(min_value=0)
    width  = serializers.FloatField(min_value=0)
    height = serializers.FloatField(min_value=0)


class ShipmentDetailsSerializer(serializers.Serializer):
    origin      = serializers.CharField(max_length=120)
    destination = serializers.CharField(max_length=120)
    weight      = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=Decimal("0.01"),
                                           rounding=ROUND_HALF_UP, coerce_to_string=False)
    dimensions  = DimensionsSerializer(required=False, allow_null=True)
    serviceType = serializers.CharField(source="service_type", max_length=80)
    description = serializers.CharField(max_length=255)
    value       = serializers.DecimalField(source="declared_value", max_digits=12, decimal_places=2,
                                           min_value=Decimal("0"), rounding=ROUND_HALF_UP,
                                           coerce_to_string=False, required=False, allow_null=True)


class ShipmentSerializer(serializers.Serializer):
    """Full shipment document; also validates create payloads."""
    id                = serializers.CharField(read_only=True)
    trackingId        = serializers.CharField(source="tracking_code", max_length=20, required=False)
    customerInfo      = CustomerInfoSerializer(source="*")
    shipmentDetails   = ShipmentDetailsSerializer(source="*")
    status            = serializers.ChoiceField(choices=Shipment.Status.choices, required=False)
    events            = TrackingEventSerializer(many=True, read_only=True)
    estimatedDelivery = serializers.DateTimeField(source="estimated_delivery")
    actualDelivery    = serializers.DateTimeField(source="actual_delivery", read_only=True)
    createdAt         = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt         = serializers.DateTimeField(source="updated_at", read_only=True)

    def validate_trackingId(self, value):
        value = value.strip().upper()
        if not value.isalnum():
            raise serializers.ValidationError("Tracking ID must be alphanumeric.")
        return value


class ShipmentUpdateSerializer(ShipmentSerializer):
    """Merge-update payload. The tracking code is fixed once assigned."""
    trackingId = serializers.CharField(source="tracking_code", read_only=True)


class DeletionRecordSerializer(serializers.ModelSerializer):
    trackingId = serializers.CharField(source="tracking_code")
    deletedAt  = serializers.DateTimeField(source="deleted_at")

    class Meta:
        model  = DeletionRecord
        fields = ["trackingId", "deletedAt", "reason"]


# ── Action payloads ───────────────────────────────────────────────────────────
def _messages(text, *keys):
    return {key: text for key in ("required", "null", "blank", *keys)}


class RequiredChoiceField(serializers.ChoiceField):
    """A ChoiceField that reports an empty string as missing rather than as a bad choice."""

    def to_internal_value(self, data):
        if data == "":
            self.fail("required")
        return super().to_internal_value(data)


INVALID_STATUS = f"Invalid status. Must be one of: {', '.join(Shipment.Status.values)}"
INVALID_DELIVERY_STATUS = f"Invalid delivery status. Must be one of: {', '.join(Shipment.Status.values)}"


class StatusChangeSerializer(serializers.Serializer):
    status      = RequiredChoiceField(choices=Shipment.Status.choices,
                                      error_messages={**_messages("Status is required"),
                                                      "invalid_choice": INVALID_STATUS})
    description = serializers.CharField(max_length=255, required=False, allow_blank=True, allow_null=True)
    location    = serializers.CharField(max_length=120, required=False, allow_blank=True, allow_null=True)


class TrackingEventInputSerializer(serializers.Serializer):
    """All three fields are mandatory; the status is checked against the lifecycle by the service."""
    REQUIRED = "status, description, and location are required"

    status      = serializers.CharField(max_length=60,  error_messages=_messages(REQUIRED))
    description = serializers.CharField(max_length=255, error_messages=_messages(REQUIRED))
    location    = serializers.CharField(max_length=120, error_messages=_messages(REQUIRED))


class DeliveryStatusSerializer(serializers.Serializer):
    deliveryStatus = RequiredChoiceField(choices=Shipment.Status.choices,
                                         error_messages={**_messages("Delivery status is required"),
                                                         "invalid_choice": INVALID_DELIVERY_STATUS})


class EstimatedDeliverySerializer(serializers.Serializer):
    """ISO-8601 datetime or date; naive values are read in the default (UTC) time zone."""
    estimatedDelivery = serializers.DateTimeField(error_messages={
        **_messages("Estimated delivery time is required"),
        "invalid": "Invalid date format. Please use ISO date format (YYYY-MM-DDTHH:mm:ss.sssZ)",
        "date":    "Invalid date format. Please use ISO date format (YYYY-MM-DDTHH:mm:ss.sssZ)",
    })

    def validate_estimatedDelivery(self, value):
        if value <= timezone.now():
            raise serializers.ValidationError("Estimated delivery time must be in the future")
        return value


class ConfirmDeleteSerializer(serializers.Serializer):
    CONFIRM = "Delete confirmation required. Set confirmDelete: true"
    REASON  = "Deletion reason is required (minimum 3 characters)"

    confirmDelete = serializers.BooleanField(error_messages=_messages(CONFIRM, "invalid"))
    reason        = serializers.CharField(min_length=3, error_messages=_messages(REASON, "invalid", "min_length"))

    def validate_confirmDelete(self, value):
        # Only the JSON literal true confirms; "true", 1 and friends do not.
        if self.initial_data.get("confirmDelete") is not True:
            raise serializers.ValidationError(self.CONFIRM)
        return value


class TrackBatchSerializer(serializers.Serializer):
    REQUIRED = "trackingIds array is required"

    trackingIds   = serializers.ListField(child=serializers.CharField(max_length=20), required=False,
                                          error_messages={"not_a_list": REQUIRED, "null": REQUIRED})
    trackingCodes = serializers.ListField(child=serializers.CharField(max_length=20), required=False,
                                          error_messages={"not_a_list": REQUIRED, "null": REQUIRED})

    def validate(self, attrs):
        codes = attrs.get("trackingIds", attrs.get("trackingCodes"))
        if codes is None:
            raise serializers.ValidationError(self.REQUIRED)
        return {"codes": codes}
