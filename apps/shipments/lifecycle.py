"""
Shipment status lifecycle.

Every status is reachable from every other by default. SHIPMENT_STRICT_TRANSITIONS
closes the terminal states so a delivered, returned or cancelled shipment stays put.
"""

from django.conf import settings

from .models import Shipment

Status = Shipment.Status

# Description recorded on the synthesized event when a status is set directly.
STATUS_DESCRIPTIONS = {
    Status.PROCESSING:       "Order is being processed",
    Status.PICKED_UP:        "Package has been picked up by carrier",
    Status.IN_TRANSIT:       "Package is in transit to destination",
    Status.OUT_FOR_DELIVERY: "Package is out for delivery",
    Status.DELIVERED:        "Package has been delivered successfully",
    Status.FAILED_DELIVERY:  "Delivery attempt failed",
    Status.RETURNED:         "Package has been returned to sender",
    Status.CANCELLED:        "Shipment has been cancelled",
}

# Short descriptions for the admin dropdown.
STATUS_OPTIONS = [
    {"value": Status.PROCESSING.value,       "label": "Processing",       "description": "Order is being processed"},
    {"value": Status.PICKED_UP.value,        "label": "Picked Up",        "description": "Package picked up by carrier"},
    {"value": Status.IN_TRANSIT.value,       "label": "In Transit",       "description": "Package is on the way"},
    {"value": Status.OUT_FOR_DELIVERY.value, "label": "Out for Delivery", "description": "Package is out for delivery"},
    {"value": Status.DELIVERED.value,        "label": "Delivered",        "description": "Package delivered successfully"},
    {"value": Status.FAILED_DELIVERY.value,  "label": "Failed Delivery",  "description": "Delivery attempt failed"},
    {"value": Status.RETURNED.value,         "label": "Returned",         "description": "Package returned to sender"},
    {"value": Status.CANCELLED.value,        "label": "Cancelled",        "description": "Shipment cancelled"},
]

TERMINAL_STATUSES = frozenset({Status.DELIVERED, Status.RETURNED, Status.CANCELLED})

TRANSITIONS = {status: frozenset(Status.values) for status in Status.values}

STRICT_TRANSITIONS = {
    status: (frozenset({status}) if status in TERMINAL_STATUSES else frozenset(Status.values))
    for status in Status.values
}


def valid_statuses():
    return list(Status.values)


def is_valid_status(value) -> bool:
    return value in Status.values


def can_transition(from_status: str, to_status: str) -> bool:
    table = STRICT_TRANSITIONS if getattr(settings, "SHIPMENT_STRICT_TRANSITIONS", False) else TRANSITIONS
    return to_status in table.get(from_status, frozenset())
