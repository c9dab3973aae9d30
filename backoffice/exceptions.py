"""Error types for the back office and the REST API exception handler."""

from django.core.exceptions import ValidationError as DjangoValidationError
from django.http import Http404
from rest_framework.exceptions import ValidationError as DRFValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler


class XpresaError(Exception):
    """Base class for errors shown to the user as a plain message."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class QueryFailure(XpresaError):
    """A read or write against the data store failed."""

    status_code = 502


class ValidationFailure(XpresaError):
    """Input was rejected before reaching the data store."""

    status_code = 400


class SessionAbsent(XpresaError):
    """An operation needs a session user and none is available."""

    status_code = 403


def custom_exception_handler(exc, context):
    """Map back-office errors and Django ValidationError onto API responses.

    For other exceptions, follow DRF's default behavior.
    """
    if isinstance(exc, XpresaError):
        return Response(
            {"detail": exc.message, "status_code": exc.status_code},
            status=exc.status_code,
        )

    if isinstance(exc, DjangoValidationError):
        exc = DRFValidationError(detail=exc.messages)

    if isinstance(exc, Http404):
        return Response({"detail": "Not found."}, status=404)

    response = exception_handler(exc, context)

    # If DRF handled the exception, return its response. Otherwise, return None
    # for a 500 server error.
    if response is not None and isinstance(response.data, dict):
        response.data["status_code"] = response.status_code

    return response
