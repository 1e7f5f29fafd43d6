"""
Management command: seed the demo shipments the web client shows while offline.

Usage:
    python manage.py seed_shipments
"""

from datetime import datetime, timedelta, timezone as dt_timezone
from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from apps.shipments.models import Shipment, TrackingEvent


def _utc(*args):
    return datetime(*args, tzinfo=dt_timezone.utc)


def _shipments(now):
    return [
        {
            "tracking_code": "CC001234",
            "status": Shipment.Status.IN_TRANSIT,
            "customer": ("John Doe", "john@example.com", "+977-9800000000", "Kathmandu, Nepal"),
            "cargo": ("Kathmandu, Nepal", "New York, USA", "2.50", "Air Cargo Express", "Documents and handicrafts", "150"),
            "estimated_delivery": now + timedelta(days=4),
            "events": [
                ("processing", "Package collected from sender",                "Kathmandu, Nepal",         now - timedelta(days=3), True),
                ("picked-up",  "Package cleared customs and ready for export", "Kathmandu Airport, Nepal", now - timedelta(days=2), True),
                ("in-transit", "Package arrived at transit hub",               "Dubai, UAE",               now - timedelta(days=1), True),
            ],
        },
        {
            "tracking_code": "CC005678",
            "status": Shipment.Status.DELIVERED,
            "customer": ("Sarah Wilson", "sarah@example.com", "+44-7000000000", "London, UK"),
            "cargo": ("Kathmandu, Nepal", "London, UK", "5.20", "Sea Freight", "Traditional carpets", "800"),
            "estimated_delivery": _utc(2024, 2, 1, 18, 0),
            "actual_delivery": _utc(2024, 2, 1, 14, 20),
            "events": [
                ("processing", "Package collected from sender",    "Kathmandu, Nepal",    _utc(2024, 1, 10, 9, 0),   True),
                ("picked-up",  "Package loaded onto cargo vessel", "Kolkata Port, India", _utc(2024, 1, 15, 16, 30), True),
                ("in-transit", "Package in transit via sea route", "Arabian Sea",         _utc(2024, 1, 20, 12, 0),  True),
                ("delivered",  "Package successfully delivered",   "London, UK",          _utc(2024, 2, 1, 14, 20),  True),
            ],
        },
        {
            "tracking_code": "DEMO123",
            "status": Shipment.Status.IN_TRANSIT,
            "customer": ("Demo User", "demo@example.com", "+1-555-0000", "Demo City, USA"),
            "cargo": ("New York, USA", "Kathmandu, Nepal", "10.00", "Express", "Demo Electronics", "500"),
            "estimated_delivery": now + timedelta(days=3),
            "events": [
                ("picked-up",  "Shipment picked up from sender.", "New York, USA", now - timedelta(days=4), True),
                ("in-transit", "Shipment is on the way.",         "Dubai, UAE",    now - timedelta(days=2), False),
            ],
        },
    ]


class Command(BaseCommand):
    help = "Seed demo shipments (CC001234, CC005678, DEMO123)"

    @transaction.atomic
    def handle(self, *args, **options):
        created = 0
        for spec in _shipments(timezone.now()):
            if Shipment.objects.filter(tracking_code=spec["tracking_code"]).exists():
                continue

            name, email, phone, address = spec["customer"]
            origin, destination, weight, service_type, description, value = spec["cargo"]
            shipment = Shipment.objects.create(
                tracking_code      = spec["tracking_code"],
                status             = spec["status"],
                customer_name      = name,
                customer_email     = email,
                customer_phone     = phone,
                customer_address   = address,
                origin             = origin,
                destination        = destination,
                weight             = Decimal(weight),
                service_type       = service_type,
                description        = description,
                declared_value     = Decimal(value),
                estimated_delivery = spec["estimated_delivery"],
                actual_delivery    = spec.get("actual_delivery"),
            )
            TrackingEvent.objects.bulk_create([
                TrackingEvent(shipment=shipment, status=status, description=desc,
                              location=location, timestamp=ts, completed=done)
                for status, desc, location, ts, done in spec["events"]
            ])
            created += 1

        self.stdout.write(self.style.SUCCESS(f"Seeded {created} demo shipments."))
