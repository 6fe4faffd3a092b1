"""
Integration tests for the cross-cutting endpoints and the error envelope.

Scope in this file:
- GET /health
- unknown routes (``handler404``)
- ``core.domain.exception_handler.envelope_exception_handler``
- 405 on routes that exist but do not support the method
"""

from __future__ import annotations

import pytest
from django.db import IntegrityError
from django.http import Http404
from django.test import TestCase
from rest_framework import exceptions as drf_exceptions
from rest_framework import serializers, status
from rest_framework.test import APIClient

from core.domain.exception_handler import envelope_exception_handler
from core.domain.exceptions import (
    AuthenticationError,
    Conflict,
    DomainError,
    NotFound,
    PermissionDenied,
)


class TestHealthAndFallbacks(TestCase):

    def setUp(self):
        self.client = APIClient()

    def test_health_needs_no_token(self):
        resp = self.client.get("/health")

        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        self.assertTrue(resp.data["success"])
        self.assertEqual(resp.data["message"], "NPF CRM API is running")
        self.assertIn("timestamp", resp.data)

    def test_unknown_route_is_json_404(self):
        resp = self.client.get("/api/does-not-exist")

        self.assertEqual(resp.status_code, status.HTTP_404_NOT_FOUND)
        body = resp.json()
        self.assertFalse(body["success"])
        self.assertEqual(body["code"], "ROUTE_NOT_FOUND")
        self.assertEqual(body["error"], "Route /api/does-not-exist not found")

    def test_trailing_slash_is_optional(self):
        self.assertEqual(self.client.get("/health/").status_code, status.HTTP_200_OK)


@pytest.mark.django_db
def test_unsupported_method_is_method_not_allowed(officer_client):
    resp = officer_client.patch("/api/reports/RPT-1026", {"type": "x"}, format="json")

    assert resp.status_code == status.HTTP_405_METHOD_NOT_ALLOWED
    assert resp.data["code"] == "METHOD_NOT_ALLOWED"


# ════════════════════════════════════════════════════════════════════
#  Exception handler unit tests
# ════════════════════════════════════════════════════════════════════

class _SampleSerializer(serializers.Serializer):
    name = serializers.CharField()
    email = serializers.CharField(required=False)

    def validate_email(self, value):
        raise serializers.ValidationError("Invalid email format", code="INVALID_EMAIL")


def _handle(exc):
    return envelope_exception_handler(exc, {"view": None})


class TestEnvelopeExceptionHandler:

    @pytest.mark.parametrize(
        "exc,status_code,code",
        [
            (DomainError("bad", code="SELF_DELETE"), 400, "SELF_DELETE"),
            (AuthenticationError(), 401, "INVALID_CREDENTIALS"),
            (PermissionDenied(), 403, "FORBIDDEN"),
            (NotFound("Case not found", code="CASE_NOT_FOUND"), 404, "CASE_NOT_FOUND"),
            (Conflict(), 409, "DUPLICATE_ENTRY"),
        ],
    )
    def test_domain_exceptions(self, exc, status_code, code):
        resp = _handle(exc)

        assert resp.status_code == status_code
        assert resp.data == {"success": False, "error": exc.message, "code": code}

    def test_missing_field_wins(self):
        serializer = _SampleSerializer(data={"email": "x"})
        assert not serializer.is_valid()

        resp = _handle(drf_exceptions.ValidationError(serializer.errors))

        assert resp.status_code == 400
        assert resp.data["code"] == "MISSING_FIELDS"
        assert "name" in resp.data["error"]

    def test_custom_code_is_preserved(self):
        serializer = _SampleSerializer(data={"name": "x", "email": "x"})
        with pytest.raises(drf_exceptions.ValidationError) as info:
            serializer.is_valid(raise_exception=True)

        resp = _handle(info.value)

        assert resp.data["code"] == "INVALID_EMAIL"
        assert resp.data["error"] == "Invalid email format"

    def test_other_validation_errors(self):
        resp = _handle(drf_exceptions.ValidationError({"limit": ["A valid integer is required."]}))

        assert resp.data["code"] == "VALIDATION_ERROR"

    def test_django_404(self):
        resp = _handle(Http404())

        assert resp.status_code == 404
        assert resp.data["code"] == "NOT_FOUND"

    def test_integrity_error(self):
        resp = _handle(IntegrityError("UNIQUE constraint failed"))

        assert resp.status_code == 409
        assert resp.data["code"] == "DUPLICATE_ENTRY"

    def test_unexpected_error_is_internal(self):
        resp = _handle(RuntimeError("boom"))

        assert resp.status_code == 500
        assert resp.data == {"success": False, "error": "Internal server error", "code": "INTERNAL_ERROR"}
