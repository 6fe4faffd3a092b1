"""
Reports app models.

A *report* is a generated document record (``RPT-1026``, ...) that may
refer to a case.  The document body itself is rendered on download.
"""

from django.conf import settings
from django.db import models
from django.utils import timezone

from core.constants import UNKNOWN_AUTHOR_LABEL
from core.models import TimeStampedModel


class Report(TimeStampedModel):
    report_id = models.CharField(
        max_length=20,
        unique=True,
        verbose_name="Report ID",
    )
    type = models.CharField(
        max_length=191,
        db_index=True,
        verbose_name="Report Type",
    )
    format = models.CharField(
        max_length=20,
        default="PDF",
        verbose_name="Format",
    )
    notes = models.TextField(blank=True, default="", verbose_name="Notes")
    case = models.ForeignKey(
        "cases.Case",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="reports",
        verbose_name="Case",
    )
    generated_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="generated_reports",
        verbose_name="Generated By",
    )
    date = models.DateTimeField(
        default=timezone.now,
        db_index=True,
        verbose_name="Date",
    )

    class Meta:
        verbose_name = "Report"
        verbose_name_plural = "Reports"
        ordering = ["-date"]

    def __str__(self):
        return f"{self.report_id} — {self.type}"

    @property
    def author_name(self) -> str:
        if self.generated_by_id is None:
            return UNKNOWN_AUTHOR_LABEL
        return self.generated_by.display_name
