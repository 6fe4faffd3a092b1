"""
core.domain.exception_handler — DRF-compatible global exception handler.

Rewrites every error leaving a DRF view into the project's JSON error
envelope (``{"success": false, "error": ..., "code": ...}``) so that views
don't need per-endpoint try/except boilerplate.

Resolution order:

1. DRF's own exceptions (validation, authentication, permission, 404,
   405, parse errors) — handled by DRF, then re-shaped.
2. ``core.domain.exceptions`` — mapped by class to a status code; the
   exception's own ``code`` is reported.
3. Storage-layer signals — ``IntegrityError`` → 409 ``DUPLICATE_ENTRY``,
   ``ObjectDoesNotExist`` → 404 ``NOT_FOUND``.
4. Anything else → 500 ``INTERNAL_ERROR`` (logged with traceback).

Register in ``settings.py``::

    REST_FRAMEWORK = {
        ...
        'EXCEPTION_HANDLER': 'core.domain.exception_handler.envelope_exception_handler',
    }
"""

from __future__ import annotations

import logging
from typing import Any, Iterator

from django.core.exceptions import ObjectDoesNotExist
from django.core.exceptions import PermissionDenied as DjangoPermissionDenied
from django.db import IntegrityError
from django.http import Http404
from rest_framework import exceptions as drf_exceptions
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_default_handler
from rest_framework.views import set_rollback

from core.domain.exceptions import (
    AuthenticationError,
    Conflict,
    DomainError,
    NotFound,
    PermissionDenied,
)
from core.responses import error_payload

logger = logging.getLogger(__name__)

# Domain exception → HTTP status code
_STATUS_MAP: dict[type, int] = {
    AuthenticationError: 401,
    PermissionDenied:    403,
    NotFound:            404,
    Conflict:            409,
    DomainError:         400,  # catch-all base class last
}

# DRF default error codes → envelope codes
_DRF_CODE_MAP: dict[str, str] = {
    "not_authenticated":      "NO_TOKEN",
    "authentication_failed":  "INVALID_TOKEN",
    "token_not_valid":        "INVALID_TOKEN",
    "bad_authorization_header": "INVALID_TOKEN",
    "user_not_found":         "USER_NOT_FOUND",
    "user_inactive":          "INACTIVE_USER",
    "permission_denied":      "FORBIDDEN",
    "not_found":              "NOT_FOUND",
    "method_not_allowed":     "METHOD_NOT_ALLOWED",
    "parse_error":            "INVALID_JSON",
    "unsupported_media_type": "UNSUPPORTED_MEDIA_TYPE",
    "not_acceptable":         "NOT_ACCEPTABLE",
    "throttled":              "THROTTLED",
}

_MISSING_CODES = frozenset({"required", "blank", "null"})


def _flatten(value: Any) -> Iterator[Any]:
    if isinstance(value, dict):
        for item in value.values():
            yield from _flatten(item)
    elif isinstance(value, (list, tuple)):
        for item in value:
            yield from _flatten(item)
    else:
        yield value


def _validation_envelope(exc: drf_exceptions.ValidationError) -> dict[str, Any]:
    """
    Collapse a serializer ``ValidationError`` into a single code.

    Missing / blank / null fields win (``MISSING_FIELDS``); otherwise the
    first custom upper-case code raised by a ``validate_*`` hook is
    reported, falling back to ``VALIDATION_ERROR``.
    """
    codes = exc.get_codes()
    detail = exc.detail

    if isinstance(codes, dict):
        missing = [
            field for field, field_codes in codes.items()
            if _MISSING_CODES.intersection(_flatten(field_codes))
        ]
        if missing:
            return error_payload(
                f"Missing required fields: {', '.join(missing)}",
                "MISSING_FIELDS",
                details=detail,
            )

    custom = [c for c in _flatten(codes) if isinstance(c, str) and c.isupper()]
    message = next((str(m) for m in _flatten(detail)), "Invalid input.")
    return error_payload(
        message,
        custom[0] if custom else "VALIDATION_ERROR",
        details=detail,
    )


def _api_exception_envelope(exc: drf_exceptions.APIException) -> dict[str, Any]:
    if isinstance(exc, drf_exceptions.ValidationError):
        return _validation_envelope(exc)

    codes = exc.get_codes()
    if isinstance(codes, dict):
        # SimpleJWT packs {"detail": ..., "code": ...} into its errors.
        code = codes.get("code") or codes.get("detail") or exc.default_code
        message = exc.detail.get("detail", exc.default_detail)
    else:
        code = codes
        message = exc.detail

    code = str(code)
    if not code.isupper():
        code = _DRF_CODE_MAP.get(code, code.upper())
    return error_payload(str(message), code)


def envelope_exception_handler(exc: Exception, context: dict) -> Response | None:
    """
    DRF exception handler that renders every failure as the error envelope.

    The default DRF handler is called first so its side effects (auth
    headers, transaction rollback) are preserved.
    """
    response = drf_default_handler(exc, context)
    if response is not None:
        if isinstance(exc, Http404):
            exc = drf_exceptions.NotFound()
        elif isinstance(exc, DjangoPermissionDenied):
            exc = drf_exceptions.PermissionDenied()
        response.data = _api_exception_envelope(exc)
        return response

    view = context.get("view", "unknown")

    # Domain exceptions, most specific first
    for exc_class, status_code in _STATUS_MAP.items():
        if isinstance(exc, exc_class):
            logger.warning(
                "Domain exception [%s/%s] in %s: %s",
                exc_class.__name__,
                exc.code,
                view,
                exc,
            )
            set_rollback()
            return Response(error_payload(exc.message, exc.code), status=status_code)

    if isinstance(exc, IntegrityError):
        logger.warning("Integrity error in %s: %s", view, exc)
        set_rollback()
        return Response(
            error_payload("A record with this value already exists", "DUPLICATE_ENTRY"),
            status=status.HTTP_409_CONFLICT,
        )

    if isinstance(exc, ObjectDoesNotExist):
        set_rollback()
        return Response(
            error_payload("Record not found", "NOT_FOUND"),
            status=status.HTTP_404_NOT_FOUND,
        )

    logger.exception("Unhandled error in %s", view, exc_info=exc)
    set_rollback()
    return Response(
        error_payload("Internal server error", "INTERNAL_ERROR"),
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
