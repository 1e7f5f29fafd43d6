import math

from rest_framework.pagination import BasePagination

from .envelope import envelope


def _positive_int(raw, default, cutoff=None):
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return default
    if value < 1:
        return default
    if cutoff is not None:
        value = min(value, cutoff)
    return value


class EnvelopePagination(BasePagination):
    """
    1-indexed page/limit pagination.
    Unlike PageNumberPagination, a page past the end is an empty page, not a 404.
    """
    page_query_param  = "page"
    limit_query_param = "limit"
    default_limit     = 10
    max_limit         = 100

    def paginate_queryset(self, queryset, request, view=None):
        self.page  = _positive_int(request.query_params.get(self.page_query_param), 1)
        self.limit = _positive_int(request.query_params.get(self.limit_query_param),
                                   self.default_limit, self.max_limit)
        self.total = queryset.count()
        offset = (self.page - 1) * self.limit
        return list(queryset[offset:offset + self.limit])

    def get_paginated_response(self, data):
        return envelope(data, pagination={
            "page":  self.page,
            "limit": self.limit,
            "total": self.total,
            "pages": math.ceil(self.total / self.limit),
        })

    def get_paginated_response_schema(self, schema):
        return {
            "type": "object",
            "properties": {
                "success": {"type": "boolean"},
                "data": schema,
                "pagination": {
                    "type": "object",
                    "properties": {
                        "page":  {"type": "integer"},
                        "limit": {"type": "integer"},
                        "total": {"type": "integer"},
                        "pages": {"type": "integer"},
                    },
                },
            },
        }
