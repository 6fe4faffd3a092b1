"""
core.domain.exceptions — Domain-specific exception hierarchy.

These exceptions represent business-rule violations inside service layers.
They are deliberately **not** DRF exceptions so that the domain layer stays
framework-agnostic.  The global DRF exception handler
(``core.domain.exception_handler``) maps them to the JSON error envelope.

Every exception carries a machine-readable ``code`` that the dashboard
switches on (``CASE_NOT_FOUND``, ``DUPLICATE_USERNAME``, ...).

Mapping cheatsheet
------------------
┌─────────────────────┬──────┬──────────────────────┐
│ Domain Exception    │ HTTP │ Default code         │
├─────────────────────┼──────┼──────────────────────┤
│ DomainError         │ 400  │ VALIDATION_ERROR     │
│ AuthenticationError │ 401  │ INVALID_CREDENTIALS  │
│ PermissionDenied    │ 403  │ FORBIDDEN            │
│ NotFound            │ 404  │ NOT_FOUND            │
│ Conflict            │ 409  │ DUPLICATE_ENTRY      │
└─────────────────────┴──────┴──────────────────────┘

Recommended usage inside a service::

    from core.domain.exceptions import NotFound

    raise NotFound("Case not found", code="CASE_NOT_FOUND")
"""

from __future__ import annotations


class DomainError(Exception):
    """
    Base class for all domain / business-rule errors.

    Converted to a 400 Bad Request at the view boundary.
    """

    default_message = "A business rule was violated."
    default_code = "VALIDATION_ERROR"

    def __init__(self, message: str | None = None, *, code: str | None = None) -> None:
        self.message = message or self.default_message
        self.code = code or self.default_code
        super().__init__(self.message)


class AuthenticationError(DomainError):
    """
    Credentials were supplied but could not be accepted (wrong password,
    inactive account).

    Maps to HTTP 401.
    """

    default_message = "Invalid credentials"
    default_code = "INVALID_CREDENTIALS"


class PermissionDenied(DomainError):
    """
    The authenticated account does not have the required role for this
    operation.

    Maps to HTTP 403.
    """

    default_message = "You do not have permission to perform this action."
    default_code = "FORBIDDEN"


class NotFound(DomainError):
    """
    The requested resource does not exist.

    Maps to HTTP 404.
    """

    default_message = "The requested resource was not found."
    default_code = "NOT_FOUND"


class Conflict(DomainError):
    """
    The operation conflicts with the current state of the resource.

    Typical usage: duplicate username / email / badge.
    Maps to HTTP 409.
    """

    default_message = "A record with this value already exists"
    default_code = "DUPLICATE_ENTRY"
