import django_filters

from .models import Shipment
from .service import search_filter


class ShipmentFilter(django_filters.FilterSet):
    """?status= exact match, ?search= across tracking code, customer name and email."""
    status = django_filters.CharFilter(field_name="status")
    search = django_filters.CharFilter(method="filter_search")

    class Meta:
        model  = Shipment
        fields = ["status"]

    def filter_search(self, queryset, name, value):
        return queryset.filter(search_filter(value))
