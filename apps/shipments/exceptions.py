"""Shipment store errors, mapped onto HTTP statuses by the envelope exception handler."""

from rest_framework import status
from rest_framework.exceptions import APIException


class ShipmentNotFound(APIException):
    status_code    = status.HTTP_404_NOT_FOUND
    default_detail = "Shipment not found"
    default_code   = "not_found"


class DuplicateTrackingCode(APIException):
    status_code    = status.HTTP_400_BAD_REQUEST
    default_detail = "Tracking ID already exists"
    default_code   = "duplicate_key"


class InvalidTransition(APIException):
    status_code    = status.HTTP_400_BAD_REQUEST
    default_detail = "Status transition not allowed"
    default_code   = "invalid_transition"

    def __init__(self, from_status, to_status):
        super().__init__(f"Cannot change status from {from_status} to {to_status}")
        self.from_status = from_status
        self.to_status   = to_status


class StoreUnavailable(APIException):
    """The database could not be reached. Only the public tracking route reports 503."""
    status_code    = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Database not available. Please try again later."
    default_code   = "store_unavailable"
