from django.urls import path
from .views import (
    ShipmentListCreateView, ShipmentDetailView, ShipmentStatusView, ShipmentEventView,
    DeliveryStatusView, EstimatedDeliveryView, ConfirmDeleteView, DeliveryStatusOptionsView,
)

urlpatterns = [
    path("shipments/",                               ShipmentListCreateView.as_view(),   name="shipment-list"),
    path("shipments/<str:id>/",                      ShipmentDetailView.as_view(),       name="shipment-detail"),
    path("shipments/<str:id>/status/",               ShipmentStatusView.as_view(),       name="shipment-status"),
    path("shipments/<str:id>/events/",               ShipmentEventView.as_view(),        name="shipment-events"),
    path("shipments/<str:id>/delivery-status/",      DeliveryStatusView.as_view(),       name="shipment-delivery-status"),
    path("shipments/<str:id>/estimated-delivery/",   EstimatedDeliveryView.as_view(),    name="shipment-estimated-delivery"),
    path("shipments/<str:id>/confirm/",              ConfirmDeleteView.as_view(),        name="shipment-confirm-delete"),
    path("delivery-status-options/",                 DeliveryStatusOptionsView.as_view(), name="delivery-status-options"),
]
