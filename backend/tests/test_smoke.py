"""
Smoke tests — verify that Django boots, URL routing resolves, and
the core domain modules are importable.

These tests do NOT require real data — they just prove the plumbing
works.
"""

from __future__ import annotations

import pytest
from django.core.management import call_command
from django.urls import resolve, reverse


# ════════════════════════════════════════════════════════════════════
#  URL Routing Smoke Tests
# ════════════════════════════════════════════════════════════════════

class TestURLRouting:
    """Ensure every app's URL names resolve to the expected paths."""

    EXPECTED_URLS = [
        # (url_name, expected_path)
        ("accounts:login",                   "/api/auth/login"),
        ("accounts:me",                      "/api/auth/me"),
        ("accounts:user-list",               "/api/users"),
        ("case-list",                        "/api/cases"),
        ("case-statistics",                  "/api/cases/statistics"),
        ("officer-list",                     "/api/officers"),
        ("report-list",                      "/api/reports"),
        ("incident-list",                    "/api/incidents"),
        ("core:dashboard-statistics",        "/api/dashboard/statistics"),
        ("core:dashboard-recent-activity",   "/api/dashboard/recent-activity"),
        ("core:dashboard-case-distribution", "/api/dashboard/case-distribution"),
        ("core:dashboard-recent-cases",      "/api/dashboard/recent-cases"),
        ("core:dashboard-personnel-status",  "/api/dashboard/personnel-status"),
        ("health",                           "/health"),
    ]

    @pytest.mark.parametrize("url_name,expected_path", EXPECTED_URLS)
    def test_url_resolves(self, url_name: str, expected_path: str):
        """Named URL reverses to the expected path, slash optional."""
        url = reverse(url_name)
        assert url.rstrip("/") == expected_path, (
            f"{url_name} resolved to {url}, expected {expected_path}"
        )

    @pytest.mark.parametrize("url_name,expected_path", EXPECTED_URLS)
    def test_url_resolve_matches_view(self, url_name: str, expected_path: str):
        """Path resolves to a view function (not a 404)."""
        match = resolve(expected_path)
        assert match.func is not None

    def test_pdf_route(self):
        assert resolve("/api/reports/RPT-1026/pdf").url_name == "report-pdf"

    def test_officer_detail_uses_badge(self):
        assert resolve("/api/officers/101").kwargs == {"badge": "101"}


# ════════════════════════════════════════════════════════════════════
#  Core Domain Module Import Tests
# ════════════════════════════════════════════════════════════════════

class TestCoreDomainImports:
    """Verify that shared domain utility modules are importable."""

    def test_import_exceptions(self):
        from core.domain.exceptions import (
            AuthenticationError,
            Conflict,
            DomainError,
            NotFound,
            PermissionDenied,
        )
        # Ensure they form an inheritance chain
        assert issubclass(AuthenticationError, DomainError)
        assert issubclass(Conflict, DomainError)
        assert issubclass(PermissionDenied, DomainError)
        assert issubclass(NotFound, DomainError)

    def test_import_activity(self):
        from core.domain.activity import ActivityLogService
        assert hasattr(ActivityLogService, "record")

    def test_import_transactions(self):
        from core.domain.transactions import lock_or_create
        assert callable(lock_or_create)

    def test_import_access(self):
        from core.domain.access import get_user_role_name, has_role, require_role
        assert callable(get_user_role_name)
        assert callable(has_role)
        assert callable(require_role)


# ════════════════════════════════════════════════════════════════════
#  Exception Behaviour Tests
# ════════════════════════════════════════════════════════════════════

class TestDomainExceptions:
    """Unit tests for domain exception classes."""

    def test_domain_error_message(self):
        from core.domain.exceptions import DomainError
        err = DomainError("test message")
        assert str(err) == "test message"
        assert err.code == "VALIDATION_ERROR"

    def test_code_override(self):
        from core.domain.exceptions import NotFound
        err = NotFound("Case not found", code="CASE_NOT_FOUND")
        assert err.code == "CASE_NOT_FOUND"
        assert err.message == "Case not found"

    def test_default_message(self):
        from core.domain.exceptions import Conflict
        assert str(Conflict()) == "A record with this value already exists"


# ════════════════════════════════════════════════════════════════════
#  Role Gate Unit Tests
# ════════════════════════════════════════════════════════════════════

class TestAccessHelpers:
    """Unit tests for core.domain.access helpers and permission classes."""

    @staticmethod
    def _user(role: str | None, authenticated: bool = True):
        from unittest.mock import MagicMock

        user = MagicMock()
        user.is_authenticated = authenticated
        user.role = role
        return user

    def test_require_role_raises(self):
        from core.domain.access import require_role
        from core.domain.exceptions import PermissionDenied

        with pytest.raises(PermissionDenied) as info:
            require_role(self._user("officer"), "admin")
        assert info.value.code == "FORBIDDEN"

    def test_require_role_passes(self):
        from core.domain.access import require_role
        require_role(self._user("admin"), "admin")

    def test_anonymous_has_no_role(self):
        from core.domain.access import get_user_role_name
        assert get_user_role_name(self._user("admin", authenticated=False)) is None
        assert get_user_role_name(None) is None

    @pytest.mark.parametrize(
        "role,admin_allowed,officer_allowed",
        [("admin", True, True), ("officer", False, True), ("visitor", False, False)],
    )
    def test_permission_classes(self, role, admin_allowed, officer_allowed):
        from unittest.mock import MagicMock

        from core.permissions import IsAdminRole, IsOfficerOrAdmin

        request = MagicMock()
        request.user = self._user(role)
        assert IsAdminRole().has_permission(request, None) is admin_allowed
        assert IsOfficerOrAdmin().has_permission(request, None) is officer_allowed


# ════════════════════════════════════════════════════════════════════
#  Management Command
# ════════════════════════════════════════════════════════════════════

@pytest.mark.django_db
class TestSeedDemo:

    def test_seed_is_idempotent(self):
        from accounts.models import User
        from cases.models import Case
        from officers.models import Officer
        from reports.models import Report

        call_command("seed_demo", verbosity=0)
        call_command("seed_demo", verbosity=0)

        assert User.objects.count() == 6
        assert Officer.objects.count() == 5
        assert Case.objects.count() == 4
        assert Report.objects.count() == 2
        assert User.objects.get(username="admin").check_password("Admin123!")

    def test_allocator_continues_after_seed(self):
        from core.sequences import allocate_case_id, allocate_report_id

        call_command("seed_demo", verbosity=0)

        assert allocate_case_id() == "CA-1005"
        assert allocate_report_id() == "RPT-9003"
