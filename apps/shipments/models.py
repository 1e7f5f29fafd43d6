"""
Shipment models.
A Shipment is reachable by two keys: its 24-hex internal id and its public tracking code.
Tracking events hang off the shipment in insertion order and are never rewritten.
"""

import secrets

from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone


def generate_internal_id():
    """24 lowercase hex characters, the shape clients treat as an internal id."""
    return secrets.token_hex(12)


class Shipment(models.Model):
    """Core shipment record."""

    class Status(models.TextChoices):
        PROCESSING       = "processing",       "Processing"
        PICKED_UP        = "picked-up",        "Picked Up"
        IN_TRANSIT       = "in-transit",       "In Transit"
        OUT_FOR_DELIVERY = "out-for-delivery", "Out for Delivery"
        DELIVERED        = "delivered",        "Delivered"
        FAILED_DELIVERY  = "failed-delivery",  "Failed Delivery"
        RETURNED         = "returned",         "Returned"
        CANCELLED        = "cancelled",        "Cancelled"

    id            = models.CharField(primary_key=True, max_length=24, default=generate_internal_id, editable=False)
    tracking_code = models.CharField(max_length=20, unique=True, db_index=True, editable=False)
    status        = models.CharField(max_length=20, choices=Status.choices, default=Status.PROCESSING)

    # Customer
    customer_name    = models.CharField(max_length=120)
    customer_email   = models.EmailField()
    customer_phone   = models.CharField(max_length=40)
    customer_address = models.CharField(max_length=255)

    # Cargo
    origin         = models.CharField(max_length=120)
    destination    = models.CharField(max_length=120)
    weight         = models.DecimalField(max_digits=10, decimal_places=2,
                                         validators=[MinValueValidator(0.01)])
    dimensions     = models.JSONField(null=True, blank=True)  # {"length", "width", "height"}
    service_type   = models.CharField(max_length=80)
    description    = models.CharField(max_length=255)
    declared_value = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True,
                                         validators=[MinValueValidator(0)])

    estimated_delivery = models.DateTimeField()
    actual_delivery    = models.DateTimeField(null=True, blank=True)
    created_at         = models.DateTimeField(auto_now_add=True)
    updated_at         = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        indexes  = [
            models.Index(fields=["status"],         name="shipment_status_idx"),
            models.Index(fields=["created_at"],     name="shipment_created_idx"),
            models.Index(fields=["customer_email"], name="shipment_email_idx"),
        ]

    def __str__(self):
        return f"{self.tracking_code} [{self.status}]"


class TrackingEvent(models.Model):
    """One entry in a shipment's tracking history. Labels are free-form."""
    shipment    = models.ForeignKey(Shipment, on_delete=models.CASCADE, related_name="events")
    status      = models.CharField(max_length=60)
    description = models.CharField(max_length=255)
    location    = models.CharField(max_length=120)
    timestamp   = models.DateTimeField(default=timezone.now)
    completed   = models.BooleanField(default=False)

    class Meta:
        ordering = ["id"]

    def __str__(self):
        return f"{self.shipment_id}: {self.status} @ {self.location}"


class DeletionRecord(models.Model):
    """Tombstone written by a confirmed delete; outlives the shipment it describes."""
    tracking_code = models.CharField(max_length=20, db_index=True)
    customer_name = models.CharField(max_length=120)
    status        = models.CharField(max_length=20)
    origin        = models.CharField(max_length=120)
    destination   = models.CharField(max_length=120)
    reason        = models.TextField()
    deleted_at    = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ["-deleted_at"]

    def __str__(self):
        return f"{self.tracking_code} deleted {self.deleted_at:%Y-%m-%d %H:%M}"
