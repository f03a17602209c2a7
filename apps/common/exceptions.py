"""
Cross-cutting error kinds and the API exception handler.

Every app defines its own service exceptions in ``services/exceptions.py``
and derives them from one of the kinds below, so the HTTP layer can tell
"bad input", "not found", "not allowed" and "infrastructure failure" apart
without knowing about individual apps.

Exception Hierarchy:
    PintPerfectError (base)
    ├── ValidationError       -> 400
    ├── AuthenticationError   -> 401
    ├── AuthorizationError    -> 403
    ├── NotFoundError         -> 404
    └── BackingStoreError     -> 503
"""

import logging

from django.core.exceptions import PermissionDenied as DjangoPermissionDenied
from django.db import DatabaseError
from django.http import Http404
from rest_framework import exceptions as drf_exceptions
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class PintPerfectError(Exception):
    """Base exception for all service errors."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    code = 'error'


class ValidationError(PintPerfectError):
    """Malformed or out-of-range input. Never silently coerced."""

    status_code = status.HTTP_400_BAD_REQUEST
    code = 'validation_error'


class AuthenticationError(PintPerfectError):
    """Caller could not be identified."""

    status_code = status.HTTP_401_UNAUTHORIZED
    code = 'authentication_failed'


class AuthorizationError(PintPerfectError):
    """Caller tried to change something they do not own."""

    status_code = status.HTTP_403_FORBIDDEN
    code = 'forbidden'


class NotFoundError(PintPerfectError):
    """Referenced identifier does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
    code = 'not_found'


class BackingStoreError(PintPerfectError):
    """
    The database failed (connectivity, timeout, constraint violation).

    Not retried here; the caller owns the retry policy.
    """

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    code = 'backing_store_error'


DRF_CODES = {
    status.HTTP_400_BAD_REQUEST: ValidationError.code,
    status.HTTP_401_UNAUTHORIZED: AuthenticationError.code,
    status.HTTP_403_FORBIDDEN: AuthorizationError.code,
    status.HTTP_404_NOT_FOUND: NotFoundError.code,
}


def _first_message(detail):
    """Pull a single human readable message out of a DRF error detail."""
    if isinstance(detail, dict):
        for field, value in detail.items():
            message = _first_message(value)
            if field in ('non_field_errors', 'detail'):
                return message
            return f"{field}: {message}"
        return 'Invalid input'
    if isinstance(detail, (list, tuple)):
        return _first_message(detail[0]) if detail else 'Invalid input'
    return str(detail)


def error_payload(message, code, details=None):
    payload = {'error': message, 'code': code}
    if details is not None:
        payload['details'] = details
    return payload


def envelope_exception_handler(exc, context):
    """
    DRF exception handler producing ``{error, code, details?}`` bodies.

    The envelope renderer adds ``success: false`` around them.
    """
    if isinstance(exc, DatabaseError):
        logger.error("Backing store failure in %s", context.get('view'), exc_info=exc)
        exc = BackingStoreError("The data store is unavailable, please try again later")

    if isinstance(exc, PintPerfectError):
        if isinstance(exc, BackingStoreError):
            logger.error("Backing store error: %s", exc)
        else:
            logger.debug("Request rejected with %s: %s", exc.code, exc)
        return Response(error_payload(str(exc), exc.code), status=exc.status_code)

    if isinstance(exc, Http404):
        exc = drf_exceptions.NotFound()
    elif isinstance(exc, DjangoPermissionDenied):
        exc = drf_exceptions.PermissionDenied()

    response = exception_handler(exc, context)
    if response is None:
        return None

    code = DRF_CODES.get(response.status_code, 'error')
    details = None
    if isinstance(exc, drf_exceptions.ValidationError):
        details = response.data
    response.data = error_payload(_first_message(response.data), code, details)
    return response
