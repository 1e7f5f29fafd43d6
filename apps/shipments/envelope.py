"""
Uniform response envelope: {success, data?, message?, pagination?, errors?, error?}.

`exception_handler` is installed as the DRF EXCEPTION_HANDLER so every error,
including unexpected ones, leaves the API in the same shape.
"""

import logging

from django.conf import settings
from django.db import InterfaceError, OperationalError
from django.http import JsonResponse
from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from .exceptions import StoreUnavailable

logger = logging.getLogger("capitalcargo.api")

_UNSET = object()


def envelope(data=_UNSET, message=None, status=status.HTTP_200_OK, **extra):
    body = {"success": True}
    if data is not _UNSET:
        body["data"] = data
    if message is not None:
        body["message"] = message
    body.update(extra)
    return Response(body, status=status)


def error_envelope(message, status, **extra):
    body = {"success": False, "message": message}
    body.update(extra)
    return Response(body, status=status)


def _first_message(detail):
    """First human-readable message in a (possibly nested) DRF error detail."""
    if isinstance(detail, dict):
        detail = list(detail.values())
    if isinstance(detail, (list, tuple)):
        return _first_message(detail[0]) if detail else None
    return str(detail)


def exception_handler(exc, context):
    view = context.get("view")

    if isinstance(exc, (OperationalError, InterfaceError)):
        logger.error("Store unavailable: %s", exc)
        exc = StoreUnavailable()

    if isinstance(exc, StoreUnavailable) and getattr(view, "degraded_mode_fallback", False):
        return error_envelope(
            str(exc.detail), status.HTTP_503_SERVICE_UNAVAILABLE, fallback=True,
        )

    response = drf_exception_handler(exc, context)
    if response is None:
        logger.exception("Unhandled error in %s", type(view).__name__ if view else "request", exc_info=exc)
        extra = {"error": str(exc)} if settings.DEBUG else {}
        return error_envelope("Something went wrong!", status.HTTP_500_INTERNAL_SERVER_ERROR, **extra)

    if isinstance(exc, ValidationError):
        message = _first_message(exc.detail) or "Validation error"
        body = {"success": False, "message": message}
        if isinstance(exc.detail, dict):
            body["errors"] = exc.detail
        response.data = body
        return response

    response.data = {"success": False, "message": str(getattr(exc, "detail", exc))}
    return response


def route_not_found(request, exception=None):
    return JsonResponse({"success": False, "message": "Route not found"}, status=404)


def server_error(request):
    return JsonResponse({"success": False, "message": "Something went wrong!"}, status=500)
