"""
Cases app models.

A *case* is the central investigation record: what happened, where, who
reported it, who is working it, and how far along it is.
"""

from django.conf import settings
from django.db import models
from django.utils import timezone

from core.constants import UNASSIGNED_OFFICER_LABEL
from core.models import TimeStampedModel


# ────────────────────────────────────────────────────────────────────
# Choice enumerations
# ────────────────────────────────────────────────────────────────────

class CaseStatus(models.TextChoices):
    OPEN = "open", "Open"
    INVESTIGATION = "investigation", "Under Investigation"
    RESOLVED = "resolved", "Resolved"


class CasePriority(models.TextChoices):
    LOW = "low", "Low"
    MEDIUM = "medium", "Medium"
    HIGH = "high", "High"


# ────────────────────────────────────────────────────────────────────
# Models
# ────────────────────────────────────────────────────────────────────

class Case(TimeStampedModel):
    """
    Investigation record.

    * ``case_id`` is the human-readable code (``CA-0001``) handed out by
      ``core.sequences.allocate_case_id``; the numeric ``id`` stays the
      primary key.
    * ``type`` is free text (``theft``, ``assault``, ...).  The dashboard
      maps known values to display names.
    * ``officer`` is the assigned account; deleting the account leaves
      the case unassigned.
    """

    case_id = models.CharField(
        max_length=20,
        unique=True,
        verbose_name="Case ID",
    )
    type = models.CharField(
        max_length=191,
        db_index=True,
        verbose_name="Case Type",
    )
    description = models.TextField(
        blank=True,
        default="",
        verbose_name="Description",
    )
    location = models.CharField(
        max_length=255,
        verbose_name="Location",
    )
    reporter = models.CharField(
        max_length=191,
        blank=True,
        default="",
        verbose_name="Reporter",
    )
    status = models.CharField(
        max_length=20,
        choices=CaseStatus.choices,
        default=CaseStatus.OPEN,
        db_index=True,
        verbose_name="Status",
    )
    priority = models.CharField(
        max_length=20,
        choices=CasePriority.choices,
        default=CasePriority.MEDIUM,
        db_index=True,
        verbose_name="Priority",
    )
    officer = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="assigned_cases",
        verbose_name="Assigned Officer",
    )
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="created_cases",
        verbose_name="Created By",
    )
    reported = models.DateTimeField(
        default=timezone.now,
        db_index=True,
        verbose_name="Reported At",
    )

    class Meta:
        verbose_name = "Case"
        verbose_name_plural = "Cases"
        ordering = ["-reported"]

    def __str__(self):
        return f"{self.case_id} — {self.type}"

    @property
    def officer_name(self) -> str:
        if self.officer_id is None:
            return UNASSIGNED_OFFICER_LABEL
        return self.officer.display_name
