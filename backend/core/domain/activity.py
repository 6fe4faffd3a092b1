"""
core.domain.activity — Append-only activity log helper.

Centralises activity-log writes so every app uses one consistent
entry-point rather than directly constructing ``ActivityLog`` objects.

* **Synchronous** — the row is written in the calling request, in the
  same transaction as the mutation it describes.
* **Actor is optional** — system actions (seeding, management commands)
  pass ``actor=None`` and render as "System" on the dashboard.

Usage::

    from core.domain.activity import ActivityLogService

    ActivityLogService.record(
        actor=request.user,
        action="create_case",
        message=f"New case {case.case_id} created: {case.type} at {case.location}",
        metadata={"case_id": case.case_id, "type": case.type},
    )
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from accounts.models import User
    from core.models import ActivityLog

logger = logging.getLogger(__name__)


class ActivityLogService:
    """
    Stateless helper for creating ``ActivityLog`` records.

    All methods are classmethods — no instance state is needed.
    """

    @classmethod
    def record(
        cls,
        *,
        actor: User | None,
        action: str,
        message: str,
        metadata: dict[str, Any] | None = None,
    ) -> ActivityLog:
        """
        Append one entry to the activity log.

        Args:
            actor:    The account that performed the action, or ``None``
                      for system actions.
            action:   Short machine key (``create_case``, ``login``, ...).
                      The dashboard derives its badge type from it.
            message:  Human-readable sentence shown in the activity feed.
            metadata: Optional JSON-serialisable context.

        Returns:
            The created ``ActivityLog`` instance.
        """
        from core.models import ActivityLog  # lazy import

        if actor is not None and not getattr(actor, "is_authenticated", False):
            actor = None

        entry = ActivityLog.objects.create(
            user=actor,
            action=action,
            message=message,
            metadata=metadata,
        )
        logger.info("Activity [%s] by %s: %s", action, actor or "system", message)
        return entry

