"""
Service-layer exceptions and the DRF exception handler.

Services raise the exceptions defined here; views never build error
responses themselves. ``api_exception_handler`` turns every failure into a
``{"message": ...}`` body with the right status code, and logs anything it
did not expect so operators see the traceback while clients never do.
"""
import logging

from django.db import DatabaseError
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class ServiceError(Exception):
    """Base exception for errors raised by the service layer."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "The request could not be completed."

    def __init__(self, message=None, details=None):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)


class ValidationError(ServiceError):
    """Raised when input is missing or malformed (e.g. an order without items)."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid input."


class NotFoundError(ServiceError):
    """Raised when a referenced order, table or product does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found."


class InvalidTransitionError(ServiceError):
    """Raised when an order status change is not permitted from its current state."""

    status_code = status.HTTP_409_CONFLICT
    default_message = "Status transition not permitted."


class PersistenceError(ServiceError):
    """Raised when the database is unreachable or a write fails."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "The database could not complete the request."


class ConfigurationError(ServiceError):
    """Raised on first use when a required connection setting or credential is missing."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "The service is not configured correctly."


def _flatten_detail(data):
    """Pick a human readable message out of a DRF error payload."""
    if isinstance(data, dict):
        if "detail" in data:
            return str(data["detail"])
        for field, value in data.items():
            inner = _flatten_detail(value)
            if field == "non_field_errors":
                return inner
            return f"{field}: {inner}"
        return "Invalid input."
    if isinstance(data, list) and data:
        return _flatten_detail(data[0])
    return str(data)


def api_exception_handler(exc, context):
    """
    Render all API failures as ``{"message": ..., "errors": ...}``.

    - ServiceError subclasses map to their declared status code.
    - DatabaseError becomes a PersistenceError.
    - DRF/Django errors keep DRF's status code; field errors go under "errors".
    - Anything else is logged with traceback and returned as a generic 500.
    """
    request = context.get("request")
    path = request.path if request is not None else None
    method = request.method if request is not None else None

    if isinstance(exc, DatabaseError):
        logger.error(f"Database error on {method} {path}: {exc}", exc_info=True)
        exc = PersistenceError()

    if isinstance(exc, ServiceError):
        if exc.status_code >= 500:
            logger.error(f"{exc.__class__.__name__} on {method} {path}: {exc.message}")
        else:
            logger.warning(f"{exc.__class__.__name__} on {method} {path}: {exc.message}")
        body = {"message": exc.message}
        if exc.details:
            body["errors"] = exc.details
        return Response(body, status=exc.status_code)

    response = exception_handler(exc, context)
    if response is not None:
        data = response.data
        body = {"message": _flatten_detail(data)}
        if isinstance(data, (dict, list)) and not (isinstance(data, dict) and set(data) == {"detail"}):
            body["errors"] = data
        response.data = body
        return response

    logger.error(f"Unhandled error on {method} {path}", exc_info=exc)
    return Response(
        {"message": "Internal server error."},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


__all__ = [
    "ServiceError",
    "ValidationError",
    "NotFoundError",
    "InvalidTransitionError",
    "PersistenceError",
    "ConfigurationError",
    "api_exception_handler",
]
