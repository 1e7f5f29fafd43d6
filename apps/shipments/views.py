"""Shipment management API views."""

import logging

from django_filters.rest_framework import DjangoFilterBackend
from drf_spectacular.utils import extend_schema
from rest_framework import generics, status
from rest_framework.views import APIView

from .envelope import envelope
from .filters import ShipmentFilter
from .lifecycle import STATUS_OPTIONS
from .models import Shipment
from .pagination import EnvelopePagination
from .service import ShipmentService
from . import serializers as sz

logger = logging.getLogger("capitalcargo.shipments")
shipment_service = ShipmentService()


class ShipmentLookupMixin:
    """
    Resolves the `id` URL kwarg for every single-shipment route:
    24 hex characters → internal id, anything else → tracking code.
    """
    service = shipment_service

    def get_shipment(self) -> Shipment:
        return self.service.resolve(self.kwargs["id"])


# ── GET/POST /api/shipments/ ──────────────────────────────────────────────────
class ShipmentListCreateView(generics.GenericAPIView):
    serializer_class = sz.ShipmentSerializer
    pagination_class = EnvelopePagination
    filter_backends  = [DjangoFilterBackend]
    filterset_class  = ShipmentFilter
    service = shipment_service

    def get_queryset(self):
        return Shipment.objects.prefetch_related("events").order_by("-created_at")

    @extend_schema(tags=["Shipments"], summary="List shipments (paginated, ?status= and ?search=)")
    def get(self, request):
        queryset = self.filter_queryset(self.get_queryset())
        page = self.paginate_queryset(queryset)
        data = self.get_serializer(page, many=True).data
        return self.get_paginated_response(data)

    @extend_schema(tags=["Shipments"], summary="Create a shipment")
    def post(self, request):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        shipment = self.service.create_shipment(serializer.validated_data)
        return envelope(
            sz.ShipmentSerializer(shipment).data,
            "Shipment created successfully",
            status=status.HTTP_201_CREATED,
        )


# ── GET/PUT/PATCH/DELETE /api/shipments/{id}/ ─────────────────────────────────
class ShipmentDetailView(ShipmentLookupMixin, APIView):

    @extend_schema(tags=["Shipments"], summary="Retrieve a shipment by internal id or tracking code",
                   responses=sz.ShipmentSerializer)
    def get(self, request, id):
        return envelope(sz.ShipmentSerializer(self.get_shipment()).data)

    @extend_schema(tags=["Shipments"], summary="Update a shipment (fields are merged)",
                   request=sz.ShipmentUpdateSerializer, responses=sz.ShipmentSerializer)
    def put(self, request, id):
        shipment = self.get_shipment()
        serializer = sz.ShipmentUpdateSerializer(shipment, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        shipment = self.service.update_shipment(shipment, serializer.validated_data)
        return envelope(sz.ShipmentSerializer(shipment).data, "Shipment updated successfully")

    patch = put

    @extend_schema(tags=["Shipments"], summary="Delete a shipment", responses=None)
    def delete(self, request, id):
        self.service.delete_shipment(self.get_shipment())
        return envelope(message="Shipment deleted successfully")


# ── PUT /api/shipments/{id}/status/ ───────────────────────────────────────────
class ShipmentStatusView(ShipmentLookupMixin, APIView):

    @extend_schema(tags=["Shipments"], summary="Set shipment status (records a tracking event)",
                   request=sz.StatusChangeSerializer, responses=sz.ShipmentSerializer)
    def put(self, request, id):
        ser = sz.StatusChangeSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        data = ser.validated_data

        shipment = self.service.change_status(
            self.get_shipment(),
            data["status"],
            description=data.get("description") or None,
            location=data.get("location") or None,
        )
        return envelope(sz.ShipmentSerializer(shipment).data, "Shipment status updated successfully")


# ── POST /api/shipments/{id}/events/ ──────────────────────────────────────────
class ShipmentEventView(ShipmentLookupMixin, APIView):

    @extend_schema(tags=["Shipments"], summary="Append a tracking event",
                   request=sz.TrackingEventInputSerializer, responses=sz.ShipmentSerializer)
    def post(self, request, id):
        ser = sz.TrackingEventInputSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        data = ser.validated_data

        shipment = self.service.append_event(
            self.get_shipment(), data["status"], data["description"], data["location"],
        )
        return envelope(sz.ShipmentSerializer(shipment).data, "Tracking event added successfully")


# ── PUT /api/shipments/{id}/delivery-status/ ──────────────────────────────────
class DeliveryStatusView(ShipmentLookupMixin, APIView):

    @extend_schema(tags=["Shipments"], summary="Set delivery status from the fixed option list",
                   request=sz.DeliveryStatusSerializer, responses=sz.ShipmentSerializer)
    def put(self, request, id):
        ser = sz.DeliveryStatusSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        delivery_status = ser.validated_data["deliveryStatus"]

        shipment = self.service.change_status(self.get_shipment(), delivery_status)
        return envelope(
            sz.ShipmentSerializer(shipment).data,
            f"Delivery status updated to: {delivery_status}",
        )


# ── PUT /api/shipments/{id}/estimated-delivery/ ───────────────────────────────
class EstimatedDeliveryView(ShipmentLookupMixin, APIView):

    @extend_schema(tags=["Shipments"], summary="Reschedule the estimated delivery time",
                   request=sz.EstimatedDeliverySerializer, responses=sz.ShipmentSerializer)
    def put(self, request, id):
        ser = sz.EstimatedDeliverySerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        when = ser.validated_data["estimatedDelivery"]

        shipment = self.service.set_estimated_delivery(self.get_shipment(), when)
        return envelope(
            sz.ShipmentSerializer(shipment).data,
            f"Estimated delivery time updated to: {when.isoformat()}",
        )


# ── DELETE /api/shipments/{id}/confirm/ ───────────────────────────────────────
class ConfirmDeleteView(ShipmentLookupMixin, APIView):

    @extend_schema(tags=["Shipments"], summary="Delete a shipment with confirmation and an audit reason",
                   request=sz.ConfirmDeleteSerializer, responses=None)
    def delete(self, request, id):
        ser = sz.ConfirmDeleteSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        record = self.service.confirm_delete(self.get_shipment(), ser.validated_data["reason"])
        return envelope(
            message="Shipment deleted successfully",
            auditInfo=sz.DeletionRecordSerializer(record).data,
        )


# ── GET /api/delivery-status-options/ ─────────────────────────────────────────
class DeliveryStatusOptionsView(APIView):

    @extend_schema(tags=["Shipments"], summary="Delivery status options for admin dropdowns", responses=None)
    def get(self, request):
        return envelope(STATUS_OPTIONS, "Available delivery status options")
