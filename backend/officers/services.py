"""
Officers app service layer.

Roster reads are open to every authenticated account; writes are gated
to admins at the route level (``core.permissions.IsAdminRole``).
"""

from __future__ import annotations

import logging
from typing import Any

from django.db import IntegrityError, transaction
from django.db.models import Q, QuerySet

from core.domain.activity import ActivityLogService
from core.domain.exceptions import Conflict, NotFound

from .models import Officer, OfficerStatus

logger = logging.getLogger(__name__)


class OfficerService:

    @staticmethod
    def list_officers(
        *,
        status: str | None = None,
        unit: str | None = None,
        search: str | None = None,
    ) -> QuerySet[Officer]:
        qs = Officer.objects.all()

        if status:
            qs = qs.filter(status=status)
        if unit:
            qs = qs.filter(unit__icontains=unit)
        if search:
            match = (
                Q(first_name__icontains=search)
                | Q(last_name__icontains=search)
                | Q(email__icontains=search)
            )
            if search.isdecimal():
                match |= Q(badge=int(search))
            qs = qs.filter(match)

        return qs.order_by("badge")

    @staticmethod
    def get_officer(badge: Any) -> Officer:
        """
        Raises
        ------
        core.domain.exceptions.NotFound
            ``OFFICER_NOT_FOUND`` for an unknown or non-numeric badge.
        """
        try:
            return Officer.objects.get(badge=int(badge))
        except (Officer.DoesNotExist, TypeError, ValueError):
            raise NotFound("Officer not found", code="OFFICER_NOT_FOUND")

    @staticmethod
    def _check_unique(*, badge: int | None = None, email: str | None = None, exclude_pk: int | None = None) -> None:
        others = Officer.objects.exclude(pk=exclude_pk) if exclude_pk else Officer.objects.all()
        if badge is not None and others.filter(badge=badge).exists():
            raise Conflict("An officer with this badge already exists")
        if email and others.filter(email=email).exists():
            raise Conflict("An officer with this email already exists")

    @classmethod
    def create_officer(cls, validated_data: dict[str, Any], performed_by) -> Officer:
        """
        Raises
        ------
        core.domain.exceptions.Conflict
            ``DUPLICATE_ENTRY`` for a taken badge or email.
        """
        data = dict(validated_data)
        data["status"] = data.get("status") or OfficerStatus.AVAILABLE
        data["department"] = data.get("department") or "General"
        cls._check_unique(badge=data["badge"], email=data["email"])

        try:
            with transaction.atomic():
                officer = Officer.objects.create(**data)
                ActivityLogService.record(
                    actor=performed_by,
                    action="create_officer",
                    message=f"New officer added: {officer.rank} {officer.full_name} (#{officer.badge})",
                    metadata={"badge": officer.badge},
                )
        except IntegrityError:
            raise Conflict("An officer with this badge or email already exists")

        logger.info("Officer created: #%s", officer.badge)
        return officer

    @classmethod
    def update_officer(cls, badge: Any, validated_data: dict[str, Any], performed_by) -> Officer:
        officer = cls.get_officer(badge)
        cls._check_unique(email=validated_data.get("email"), exclude_pk=officer.pk)

        for field, value in validated_data.items():
            setattr(officer, field, value)

        with transaction.atomic():
            officer.save()
            ActivityLogService.record(
                actor=performed_by,
                action="update_officer",
                message=f"Officer #{officer.badge} updated",
                metadata={"badge": officer.badge},
            )
        logger.info("Officer updated: #%s", officer.badge)
        return officer

    @classmethod
    def delete_officer(cls, badge: Any, performed_by) -> None:
        officer = cls.get_officer(badge)
        badge_number = officer.badge
        with transaction.atomic():
            officer.delete()
            ActivityLogService.record(
                actor=performed_by,
                action="delete_officer",
                message=f"Officer #{badge_number} removed",
                metadata={"badge": badge_number},
            )
        logger.info("Officer deleted: #%s", badge_number)

    @staticmethod
    def get_statistics() -> dict[str, int]:
        return {
            "total": Officer.objects.count(),
            "available": Officer.objects.filter(status=OfficerStatus.AVAILABLE).count(),
            "on_call": Officer.objects.filter(status=OfficerStatus.ON_CALL).count(),
            "off_duty": Officer.objects.filter(status=OfficerStatus.OFF_DUTY).count(),
        }
