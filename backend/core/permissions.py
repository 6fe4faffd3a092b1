"""
DRF permission classes for route-level role gating.

Views combine these with ``IsAuthenticated`` via ``get_permissions``::

    def get_permissions(self):
        if self.action == "destroy":
            return [IsAuthenticated(), IsAdminRole()]
        return [IsAuthenticated()]

A failed check surfaces as 403 ``FORBIDDEN`` through the envelope
exception handler.
"""

from __future__ import annotations

from rest_framework.permissions import BasePermission

from core.constants import ROLE_ADMIN, ROLE_OFFICER
from core.domain.access import has_role


class IsAdminRole(BasePermission):
    """Allow only accounts whose role is ``admin``."""

    message = "Admin access required"

    def has_permission(self, request, view) -> bool:
        return has_role(request.user, ROLE_ADMIN)


class IsOfficerOrAdmin(BasePermission):
    """Allow accounts whose role is ``officer`` or ``admin``."""

    message = "Officer or admin access required"

    def has_permission(self, request, view) -> bool:
        return has_role(request.user, ROLE_ADMIN, ROLE_OFFICER)
