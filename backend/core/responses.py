"""
Uniform JSON envelope shared by every endpoint.

Success::

    {"success": true, "data": ..., "message": "...", ...extras}

Failure::

    {"success": false, "error": "...", "code": "CASE_NOT_FOUND"}
"""

from __future__ import annotations

from typing import Any

from rest_framework import status as http_status
from rest_framework.response import Response


def success_payload(data: Any = None, *, message: str | None = None, **extra: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {"success": True}
    if data is not None:
        payload["data"] = data
    if message:
        payload["message"] = message
    payload.update(extra)
    return payload


def error_payload(error: str, code: str, **extra: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {"success": False, "error": error, "code": code}
    payload.update(extra)
    return payload


def success_response(
    data: Any = None,
    *,
    status: int = http_status.HTTP_200_OK,
    message: str | None = None,
    **extra: Any,
) -> Response:
    """Wrap ``data`` in the success envelope."""
    return Response(success_payload(data, message=message, **extra), status=status)
