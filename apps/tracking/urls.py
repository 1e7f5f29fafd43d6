from django.urls import path
from .views import TrackShipmentView, TrackBatchView

urlpatterns = [
    path("track/batch/",              TrackBatchView.as_view(),    name="track-batch"),
    path("track/<str:tracking_id>/",  TrackShipmentView.as_view(), name="track-shipment"),
]
