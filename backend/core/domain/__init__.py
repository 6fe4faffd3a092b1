"""
core.domain — Shared domain utilities for cross-app service layers.

Modules
-------
exceptions         Domain-specific exceptions that map cleanly to HTTP responses.
exception_handler  DRF exception handler rendering the JSON error envelope.
activity           Append-only activity-log helper.
transactions       Helpers for ``transaction.atomic`` + ``select_for_update``.
access             Role gate predicates and guards.

Usage from any app::

    from core.domain.exceptions import DomainError, NotFound
    from core.domain.activity import ActivityLogService
    from core.domain.transactions import lock_or_create
    from core.domain.access import require_role
"""
