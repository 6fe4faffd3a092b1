"""
Core app services — **Service Layer**.

Contains the cross-app dashboard aggregations.  Views delegate all
business logic to the service class defined here, keeping views thin
and ensuring testability.

╔══════════════════════════════════════════════════════════════════════╗
║  CROSS-APP IMPORT RULEBOOK                                         ║
║                                                                    ║
║  The core app is the ONLY app allowed to query models from every   ║
║  other app.  To prevent circular imports at module load time:      ║
║                                                                    ║
║  1. NEVER import models from other apps at the **module level**.   ║
║     Resolve them with ``apps.get_model`` inside the method.        ║
║                                                                    ║
║  2. Choice/enum classes (``CaseStatus``, ``CasePriority``) live in ║
║     the respective app's ``models.py``; import them lazily too.    ║
║                                                                    ║
║  3. Prefer ORM ``.aggregate()`` / ``.values().annotate()`` over    ║
║     Python-side loops for counting.                                ║
╚══════════════════════════════════════════════════════════════════════╝
"""

from __future__ import annotations

import math
from datetime import datetime
from typing import Any

from django.apps import apps
from django.db.models import Count, Q
from django.utils import timezone

from core.constants import (
    DEFAULT_ACTIVITY_LIMIT,
    PERSONNEL_STATUS_LIMIT,
    RECENT_CASES_LIMIT,
    SYSTEM_ACTOR_LABEL,
)

# Display names for the case types the dashboard knows about.  Anything
# else is shown with its first letter capitalised.
CASE_TYPE_LABELS: dict[str, str] = {
    "theft": "Theft/Burglary",
    "assault": "Assault",
    "vandalism": "Vandalism",
    "traffic": "Traffic Incidents",
    "drug": "Drug-Related",
    "other": "Other",
}

TREND_UP = "up"
TREND_DOWN = "down"
TREND_STABLE = "stable"


# ════════════════════════════════════════════════════════════════════
#  Formatting helpers
# ════════════════════════════════════════════════════════════════════

def format_case_type(case_type: str) -> str:
    if case_type in CASE_TYPE_LABELS:
        return CASE_TYPE_LABELS[case_type]
    return case_type[:1].upper() + case_type[1:]


def activity_type(action: str | None) -> str:
    """
    Badge category for an activity feed entry, derived from its action
    key by substring:

    ``create`` → ``case``, ``update`` → ``update``, ``delete`` → ``alert``,
    ``resolve`` / ``close`` → ``resolve``, ``login`` → ``case``; anything
    else → ``update``.  Entries without an action are ``case``.
    """
    if not action:
        return "case"
    if "create" in action:
        return "case"
    if "update" in action:
        return "update"
    if "delete" in action:
        return "alert"
    if "resolve" in action or "close" in action:
        return "resolve"
    if "login" in action:
        return "case"
    return "update"


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'s' if count > 1 else ''} ago"


def time_ago(timestamp: datetime, now: datetime | None = None) -> str:
    """
    Relative age: ``Just now``, ``N min(s) ago``, ``N hour(s) ago``,
    ``N day(s) ago`` (under a week), otherwise the calendar date.
    """
    now = now or timezone.now()
    minutes = int((now - timestamp).total_seconds() // 60)

    if minutes < 1:
        return "Just now"
    if minutes < 60:
        return _plural(minutes, "min")

    hours = minutes // 60
    if hours < 24:
        return _plural(hours, "hour")

    days = hours // 24
    if days < 7:
        return _plural(days, "day")

    return f"{timezone.localtime(timestamp):%Y-%m-%d}"


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def month_bounds(now: datetime) -> tuple[datetime, datetime]:
    """Return ``(start of last month, start of this month)`` in local time."""
    local = timezone.localtime(now)
    this_month = local.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
    if this_month.month == 1:
        last_month = this_month.replace(year=this_month.year - 1, month=12)
    else:
        last_month = this_month.replace(month=this_month.month - 1)
    return last_month, this_month


def compute_trend(this_month: int, last_month: int) -> tuple[int, str]:
    """
    Month-over-month change as ``(absolute percent, direction)``.

    With no cases last month, any case this month counts as a 100 % rise.
    """
    if last_month > 0:
        trend = round_half_up((this_month - last_month) / last_month * 100)
        if trend > 0:
            return trend, TREND_UP
        if trend < 0:
            return -trend, TREND_DOWN
        return 0, TREND_STABLE
    if this_month > 0:
        return 100, TREND_UP
    return 0, TREND_STABLE


# ════════════════════════════════════════════════════════════════════
#  Dashboard Aggregation Service
# ════════════════════════════════════════════════════════════════════

class DashboardAggregationService:
    """
    Produces the read-only summaries behind ``/api/dashboard/*``.

    Every authenticated account sees the same department-wide figures.
    """

    def get_statistics(self) -> dict[str, int]:
        """Same figures as ``GET /api/cases/statistics``."""
        from cases.services import CaseQueryService

        return CaseQueryService.get_statistics()

    def get_recent_activity(self, limit: int = DEFAULT_ACTIVITY_LIMIT) -> list[dict[str, Any]]:
        """Newest activity log entries, formatted for the feed."""
        ActivityLog = apps.get_model("core", "ActivityLog")
        now = timezone.now()

        entries = (
            ActivityLog.objects
            .select_related("user")
            .order_by("-timestamp", "-id")[:limit]
        )
        return [
            {
                "id": entry.pk,
                "message": entry.message,
                "action": entry.action,
                "user": entry.user.display_name if entry.user else SYSTEM_ACTOR_LABEL,
                "timestamp": entry.timestamp,
                "time_ago": time_ago(entry.timestamp, now),
                "type": activity_type(entry.action),
            }
            for entry in entries
        ]

    def get_case_distribution(self) -> list[dict[str, Any]]:
        """
        One row per case type: count, this-month vs last-month trend and
        resolution rate, most common type first.
        """
        from cases.models import CaseStatus

        Case = apps.get_model("cases", "Case")
        last_month_start, this_month_start = month_bounds(timezone.now())

        rows = (
            Case.objects
            .values("type")
            .annotate(
                count=Count("id"),
                resolved=Count("id", filter=Q(status=CaseStatus.RESOLVED)),
                this_month=Count("id", filter=Q(created_at__gte=this_month_start)),
                last_month=Count(
                    "id",
                    filter=Q(
                        created_at__gte=last_month_start,
                        created_at__lt=this_month_start,
                    ),
                ),
            )
            .order_by()
        )

        distribution = []
        for row in rows:
            trend, direction = compute_trend(row["this_month"], row["last_month"])
            distribution.append(
                {
                    "type": format_case_type(row["type"]),
                    "count": row["count"],
                    "trend": trend,
                    "trend_direction": direction,
                    "resolution_rate": round_half_up(row["resolved"] / row["count"] * 100),
                }
            )

        distribution.sort(key=lambda item: item["count"], reverse=True)
        return distribution

    def get_recent_cases(self, limit: int = RECENT_CASES_LIMIT) -> list[dict[str, Any]]:
        Case = apps.get_model("cases", "Case")
        cases = Case.objects.select_related("officer").order_by("-created_at", "-id")[:limit]
        return [
            {
                "case_id": case.case_id,
                "type": case.type,
                "status": case.status,
                "priority": case.priority,
                "officer": case.officer_name,
                "location": case.location,
            }
            for case in cases
        ]

    def get_personnel_status(self, limit: int = PERSONNEL_STATUS_LIMIT) -> list[dict[str, Any]]:
        """Officers carrying the most active cases."""
        Officer = apps.get_model("officers", "Officer")
        officers = Officer.objects.order_by("-active_cases", "badge")[:limit]
        return [
            {
                "badge": officer.badge,
                "name": f"{officer.first_name} {officer.last_name}",
                "first_name": officer.first_name,
                "last_name": officer.last_name,
                "status": officer.status,
                "active_cases": officer.active_cases,
            }
            for officer in officers
        ]
