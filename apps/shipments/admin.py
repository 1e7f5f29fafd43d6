from django.contrib import admin
from .models import Shipment, TrackingEvent, DeletionRecord


class TrackingEventInline(admin.TabularInline):
    model           = TrackingEvent
    extra           = 0
    readonly_fields = ("status", "description", "location", "timestamp", "completed")
    can_delete      = False


@admin.register(Shipment)
class ShipmentAdmin(admin.ModelAdmin):
    list_display  = ("tracking_code", "status", "customer_name", "origin", "destination", "weight", "estimated_delivery", "created_at")
    list_filter   = ("status", "service_type")
    search_fields = ("tracking_code", "customer_name", "customer_email")
    readonly_fields = ("id", "tracking_code", "actual_delivery", "created_at", "updated_at")
    ordering      = ("-created_at",)
    inlines       = [TrackingEventInline]


@admin.register(DeletionRecord)
class DeletionRecordAdmin(admin.ModelAdmin):
    list_display  = ("tracking_code", "customer_name", "status", "reason", "deleted_at")
    search_fields = ("tracking_code", "customer_name")
    readonly_fields = ("tracking_code", "customer_name", "status", "origin", "destination", "reason", "deleted_at")
