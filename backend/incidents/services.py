"""
Incidents app service layer.
"""

from __future__ import annotations

import logging
from typing import Any

from django.db import transaction
from django.db.models import Q, QuerySet

from cases.services import CaseQueryService
from core.domain.activity import ActivityLogService
from core.domain.exceptions import NotFound

from .models import Incident, IncidentPriority, IncidentStatus

logger = logging.getLogger(__name__)


class IncidentService:

    @staticmethod
    def base_queryset() -> QuerySet[Incident]:
        return Incident.objects.select_related("case")

    @classmethod
    def list_incidents(
        cls,
        *,
        status: str | None = None,
        priority: str | None = None,
        search: str | None = None,
    ) -> QuerySet[Incident]:
        qs = cls.base_queryset()

        if status:
            qs = qs.filter(status=status)
        if priority:
            qs = qs.filter(priority=priority)
        if search:
            qs = qs.filter(
                Q(type__icontains=search)
                | Q(address__icontains=search)
                | Q(description__icontains=search)
            )
        return qs.order_by("-timestamp", "-id")

    @classmethod
    def get_incident(cls, incident_id: Any) -> Incident:
        """
        Raises
        ------
        core.domain.exceptions.NotFound
            ``INCIDENT_NOT_FOUND`` for an unknown or non-numeric id.
        """
        try:
            return cls.base_queryset().get(pk=int(incident_id))
        except (Incident.DoesNotExist, TypeError, ValueError):
            raise NotFound("Incident not found", code="INCIDENT_NOT_FOUND")

    @staticmethod
    @transaction.atomic
    def create_incident(validated_data: dict[str, Any], requesting_user) -> Incident:
        """Defaults: ``priority=low``, ``status=active``."""
        data = dict(validated_data)
        case_ref = data.pop("case", None)
        data["case"] = CaseQueryService.get_case(case_ref) if case_ref else None
        data["priority"] = data.get("priority") or IncidentPriority.LOW
        data["status"] = data.get("status") or IncidentStatus.ACTIVE

        incident = Incident.objects.create(**data)

        ActivityLogService.record(
            actor=requesting_user,
            action="create_incident",
            message=f"New incident reported: {incident.type} at {incident.address}",
            metadata={"incident_id": incident.pk, "priority": incident.priority},
        )
        logger.info("Incident created: %s", incident.pk)
        return incident

    @classmethod
    @transaction.atomic
    def update_incident(cls, incident_id: Any, validated_data: dict[str, Any], requesting_user) -> Incident:
        incident = cls.get_incident(incident_id)
        data = dict(validated_data)

        if "case" in data:
            case_ref = data.pop("case")
            incident.case = CaseQueryService.get_case(case_ref) if case_ref else None

        for field, value in data.items():
            setattr(incident, field, value)
        incident.save()

        ActivityLogService.record(
            actor=requesting_user,
            action="update_incident",
            message=f"Incident #{incident.pk} updated",
            metadata={"incident_id": incident.pk, "status": incident.status},
        )
        logger.info("Incident updated: %s", incident.pk)
        return incident

    @classmethod
    @transaction.atomic
    def delete_incident(cls, incident_id: Any, requesting_user) -> None:
        incident = cls.get_incident(incident_id)
        pk = incident.pk
        incident.delete()

        ActivityLogService.record(
            actor=requesting_user,
            action="delete_incident",
            message=f"Incident #{pk} deleted",
            metadata={"incident_id": pk},
        )
        logger.info("Incident deleted: %s", pk)

    @staticmethod
    def get_statistics() -> dict[str, int]:
        return {
            "total": Incident.objects.count(),
            "priority": Incident.objects.filter(priority=IncidentPriority.HIGH).count(),
            "active": Incident.objects.filter(status=IncidentStatus.ACTIVE).count(),
            "resolved": Incident.objects.filter(status=IncidentStatus.RESOLVED).count(),
        }
