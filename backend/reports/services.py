"""
Reports app service layer.

Services
--------
- ``ReportQueryService``    — lookup and filtering.
- ``ReportService``         — create / delete.
- ``ReportDocumentService`` — renders the downloadable document.
"""

from __future__ import annotations

import logging
from typing import Any

from django.db import transaction
from django.db.models import Q, QuerySet
from django.utils import timezone

from cases.services import CaseQueryService
from core.constants import UNKNOWN_AUTHOR_LABEL
from core.domain.activity import ActivityLogService
from core.domain.exceptions import NotFound
from core.sequences import allocate_report_id

from .models import Report

logger = logging.getLogger(__name__)

DEFAULT_REPORT_FORMAT = "PDF"


class ReportQueryService:

    @staticmethod
    def base_queryset() -> QuerySet[Report]:
        return Report.objects.select_related("generated_by", "case")

    @classmethod
    def get_report(cls, identifier: Any) -> Report:
        """
        Look a report up by numeric primary key or by ``report_id``.

        Raises
        ------
        core.domain.exceptions.NotFound
            ``REPORT_NOT_FOUND``.
        """
        identifier = str(identifier)
        lookup = Q(report_id=identifier)
        if identifier.isdecimal():
            lookup |= Q(pk=int(identifier))

        report = cls.base_queryset().filter(lookup).order_by("pk").first()
        if report is None:
            raise NotFound("Report not found", code="REPORT_NOT_FOUND")
        return report

    @classmethod
    def list_reports(
        cls,
        *,
        type: str | None = None,
        format: str | None = None,
        search: str | None = None,
    ) -> QuerySet[Report]:
        qs = cls.base_queryset()

        if type:
            qs = qs.filter(type__icontains=type)
        if format:
            qs = qs.filter(format=format)
        if search:
            qs = qs.filter(Q(report_id__icontains=search) | Q(type__icontains=search))

        return qs.order_by("-date", "-id")


class ReportService:

    @staticmethod
    @transaction.atomic
    def create_report(validated_data: dict[str, Any], requesting_user) -> Report:
        """
        Create a report with a freshly allocated ``report_id``.

        Raises
        ------
        core.domain.exceptions.NotFound
            ``CASE_NOT_FOUND`` when ``case`` names an unknown case.
        """
        case_ref = validated_data.get("case")
        case = CaseQueryService.get_case(case_ref) if case_ref else None

        report = Report.objects.create(
            report_id=allocate_report_id(),
            type=validated_data["type"],
            format=validated_data.get("format") or DEFAULT_REPORT_FORMAT,
            notes=validated_data.get("notes") or "",
            case=case,
            generated_by=requesting_user,
        )

        ActivityLogService.record(
            actor=requesting_user,
            action="create_report",
            message=f"Report {report.report_id} generated: {report.type}",
            metadata={"report_id": report.report_id},
        )
        logger.info("Report created: %s", report.report_id)
        return report

    @staticmethod
    @transaction.atomic
    def delete_report(report: Report, requesting_user) -> None:
        report_code = report.report_id
        report.delete()

        ActivityLogService.record(
            actor=requesting_user,
            action="delete_report",
            message=f"Report {report_code} deleted",
            metadata={"report_id": report_code},
        )
        logger.info("Report deleted: %s", report_code)


class ReportDocumentService:
    """
    Builds the downloadable document for a report.

    The body is a plain-text summary served with PDF headers; clients
    save it as ``<report_id>.pdf``.
    """

    @staticmethod
    def render(report: Report) -> str:
        author = report.generated_by.display_name if report.generated_by_id else UNKNOWN_AUTHOR_LABEL
        lines = [
            "NPF CRM - Report Document",
            "========================",
            "",
            f"Report ID: {report.report_id}",
            f"Type: {report.type}",
            f"Generated By: {author}",
            f"Date: {timezone.localtime(report.date):%Y-%m-%d}",
            f"Format: {report.format}",
        ]
        if report.case_id:
            lines.append(f"Case: {report.case.case_id}")
        lines += [
            "",
            "Notes:",
            report.notes or "No notes",
            "",
            "---",
            "This is a simplified PDF representation.",
        ]
        return "\n".join(lines) + "\n"

    @classmethod
    def download(cls, report: Report, requesting_user) -> tuple[str, str]:
        """
        Render ``report`` and record the ``download_report`` activity.

        Returns
        -------
        tuple[str, str]
            ``(filename, content)``.
        """
        content = cls.render(report)
        ActivityLogService.record(
            actor=requesting_user,
            action="download_report",
            message=f"Report {report.report_id} downloaded",
            metadata={"report_id": report.report_id},
        )
        return f"{report.report_id}.pdf", content
