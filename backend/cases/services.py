"""
Cases app service layer.

All business logic for cases lives here.  Views call these methods and
never touch the ORM directly.

Services
--------
- ``OfficerResolver``    — maps a free-text officer reference to an account.
- ``CaseQueryService``   — lookup, filtering, pagination and statistics.
- ``CaseService``        — create / update / delete.
"""

from __future__ import annotations

import logging
import math
from typing import Any

from django.contrib.auth import get_user_model
from django.db import transaction
from django.db.models import Count, Q, QuerySet

from core.domain.activity import ActivityLogService
from core.domain.exceptions import NotFound
from core.sequences import allocate_case_id

from .models import Case, CasePriority, CaseStatus

User = get_user_model()
logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════
#  Officer resolution
# ═══════════════════════════════════════════════════════════════════


class OfficerResolver:
    """
    The dashboard refers to officers by username or display name rather
    than by id.  Both lookups return ``None`` when nobody matches.
    """

    @staticmethod
    def for_assignment(reference: str) -> User | None:
        """Exact username, else display name contains ``reference``."""
        return (
            User.objects
            .filter(Q(username=reference) | Q(name__icontains=reference))
            .order_by("id")
            .first()
        )

    @staticmethod
    def for_filter(reference: str) -> User | None:
        """Username or display name contains ``reference``."""
        return (
            User.objects
            .filter(Q(username__icontains=reference) | Q(name__icontains=reference))
            .order_by("id")
            .first()
        )


# ═══════════════════════════════════════════════════════════════════
#  Query Service
# ═══════════════════════════════════════════════════════════════════


class CaseQueryService:

    @staticmethod
    def base_queryset() -> QuerySet[Case]:
        return Case.objects.select_related("officer")

    @classmethod
    def get_case(cls, identifier: Any) -> Case:
        """
        Look a case up by numeric primary key or by ``case_id``.

        Raises
        ------
        core.domain.exceptions.NotFound
            ``CASE_NOT_FOUND``.
        """
        identifier = str(identifier)
        lookup = Q(case_id=identifier)
        if identifier.isdecimal():
            lookup |= Q(pk=int(identifier))

        case = cls.base_queryset().filter(lookup).order_by("pk").first()
        if case is None:
            raise NotFound("Case not found", code="CASE_NOT_FOUND")
        return case

    @classmethod
    def get_filtered_queryset(cls, filters: dict[str, Any]) -> QuerySet[Case]:
        """
        Apply the list filters from ``CaseFilterSerializer``.

        ``page`` / ``limit`` are ignored here; see ``paginate``.
        """
        qs = cls.base_queryset()

        if filters.get("status"):
            qs = qs.filter(status=filters["status"])
        if filters.get("type"):
            qs = qs.filter(type__icontains=filters["type"])
        if filters.get("priority"):
            qs = qs.filter(priority=filters["priority"])
        if filters.get("officer"):
            officer = OfficerResolver.for_filter(filters["officer"])
            if officer is not None:
                qs = qs.filter(officer=officer)
        if filters.get("search"):
            term = filters["search"]
            qs = qs.filter(
                Q(case_id__icontains=term)
                | Q(type__icontains=term)
                | Q(location__icontains=term)
                | Q(description__icontains=term)
            )

        return qs.order_by("-reported", "-id")

    @staticmethod
    def paginate(qs: QuerySet[Case], *, page: int, limit: int) -> tuple[list[Case], dict[str, int]]:
        """
        Slice ``qs`` for the requested page.

        Returns the page items and the ``total`` / ``page`` /
        ``total_pages`` extras for the response envelope.
        """
        total = qs.count()
        offset = (page - 1) * limit
        items = list(qs[offset:offset + limit])
        return items, {
            "total": total,
            "page": page,
            "total_pages": math.ceil(total / limit),
        }

    @staticmethod
    def get_statistics() -> dict[str, int]:
        """
        Case counts by status plus the number of high-priority cases.

        ``others`` holds cases whose status is none of the three known
        values, so ``open + investigation + resolved + others == total``.
        """
        counts = Case.objects.aggregate(
            total=Count("id"),
            open=Count("id", filter=Q(status=CaseStatus.OPEN)),
            investigation=Count("id", filter=Q(status=CaseStatus.INVESTIGATION)),
            resolved=Count("id", filter=Q(status=CaseStatus.RESOLVED)),
            priority=Count("id", filter=Q(priority=CasePriority.HIGH)),
        )
        counts["others"] = counts["total"] - (
            counts["open"] + counts["investigation"] + counts["resolved"]
        )
        return counts


# ═══════════════════════════════════════════════════════════════════
#  Write Service
# ═══════════════════════════════════════════════════════════════════


class CaseService:

    @staticmethod
    @transaction.atomic
    def create_case(validated_data: dict[str, Any], requesting_user: User) -> Case:
        """
        Create a case with a freshly allocated ``case_id``.

        Defaults: ``status=open``, ``priority=medium``.  An ``officer``
        reference that matches nobody leaves the case unassigned.
        """
        data = dict(validated_data)
        officer_ref = data.pop("officer", None)
        officer = OfficerResolver.for_assignment(officer_ref) if officer_ref else None

        case = Case.objects.create(
            case_id=allocate_case_id(),
            type=data["type"],
            location=data["location"],
            description=data.get("description") or "",
            reporter=data.get("reporter") or "",
            status=data.get("status") or CaseStatus.OPEN,
            priority=data.get("priority") or CasePriority.MEDIUM,
            officer=officer,
            created_by=requesting_user,
        )

        ActivityLogService.record(
            actor=requesting_user,
            action="create_case",
            message=f"New case {case.case_id} created: {case.type} at {case.location}",
            metadata={"case_id": case.case_id, "type": case.type},
        )
        logger.info("Case created: %s", case.case_id)
        return case

    @staticmethod
    @transaction.atomic
    def update_case(case: Case, validated_data: dict[str, Any], requesting_user: User) -> Case:
        """
        Merge the supplied fields into ``case``.

        ``officer``: ``""`` / ``None`` unassigns; a reference that matches
        nobody leaves the current assignment untouched.
        """
        data = dict(validated_data)

        if "officer" in data:
            officer_ref = data.pop("officer")
            if not officer_ref:
                case.officer = None
            else:
                officer = OfficerResolver.for_assignment(officer_ref)
                if officer is not None:
                    case.officer = officer

        for field in ("type", "location", "status", "priority"):
            if data.get(field):
                setattr(case, field, data[field])
        for field in ("description", "reporter"):
            if field in data:
                setattr(case, field, data[field])

        case.save()

        ActivityLogService.record(
            actor=requesting_user,
            action="update_case",
            message=f"Case {case.case_id} updated",
            metadata={"case_id": case.case_id},
        )
        logger.info("Case updated: %s", case.case_id)
        return case

    @staticmethod
    @transaction.atomic
    def delete_case(case: Case, requesting_user: User) -> None:
        case_code = case.case_id
        case.delete()

        ActivityLogService.record(
            actor=requesting_user,
            action="delete_case",
            message=f"Case {case_code} deleted",
            metadata={"case_id": case_code},
        )
        logger.info("Case deleted: %s", case_code)
