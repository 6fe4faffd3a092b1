"""
core.domain.access — Role gate shared by every app.

Authorisation in this project is a plain predicate on the account's
``role`` field (``admin`` | ``officer``).  There is no per-object
permission table and no cached session state: the role is read from the
account the token verifier attached to the request.

Two entry points:

* ``require_role`` — service-level guard that raises
  ``core.domain.exceptions.PermissionDenied``.
* ``core.permissions.IsAdminRole`` / ``IsOfficerOrAdmin`` — DRF
  permission classes built on ``has_role`` for route-level gating.

Usage in an app's service layer::

    from core.domain.access import require_role

    require_role(actor, ROLE_ADMIN, message="Admin access required")
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from core.constants import ROLE_ADMIN

if TYPE_CHECKING:
    from accounts.models import User


def get_user_role_name(user: User) -> str | None:
    """
    Return the role string for an authenticated account, or ``None`` for
    anonymous users.
    """
    if user is None or not getattr(user, "is_authenticated", False):
        return None
    return getattr(user, "role", None)


def has_role(user: User, *allowed_roles: str) -> bool:
    return get_user_role_name(user) in allowed_roles


def is_admin(user: User) -> bool:
    return has_role(user, ROLE_ADMIN)


def require_role(user: User, *allowed_roles: str, message: str = "") -> None:
    """
    Guard that raises ``PermissionDenied`` if the user's role is not
    among ``allowed_roles``.

    Raises:
        core.domain.exceptions.PermissionDenied: code ``FORBIDDEN``.
    """
    from core.domain.exceptions import PermissionDenied as DomainPermissionDenied

    if not has_role(user, *allowed_roles):
        raise DomainPermissionDenied(
            message or f"Required role: {' or '.join(allowed_roles)}."
        )
