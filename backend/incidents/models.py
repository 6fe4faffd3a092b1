"""
Incidents app models.

An *incident* is a field report (call-out, disturbance, accident) that
may later be linked to a case.
"""

from django.db import models
from django.utils import timezone

from core.models import TimeStampedModel


class IncidentPriority(models.TextChoices):
    LOW = "low", "Low"
    MEDIUM = "medium", "Medium"
    HIGH = "high", "High"


class IncidentStatus(models.TextChoices):
    ACTIVE = "active", "Active"
    RESPONDING = "responding", "Responding"
    RESOLVED = "resolved", "Resolved"


class Incident(TimeStampedModel):
    type = models.CharField(max_length=191, verbose_name="Incident Type")
    description = models.TextField(verbose_name="Description")
    address = models.CharField(max_length=255, verbose_name="Address")
    coordinates = models.CharField(
        max_length=191,
        blank=True,
        default="",
        verbose_name="Coordinates",
        help_text="Free-form 'lat,lng' pair.",
    )
    reporter = models.CharField(
        max_length=191,
        blank=True,
        default="",
        verbose_name="Reporter",
    )
    priority = models.CharField(
        max_length=20,
        choices=IncidentPriority.choices,
        default=IncidentPriority.LOW,
        db_index=True,
        verbose_name="Priority",
    )
    status = models.CharField(
        max_length=20,
        choices=IncidentStatus.choices,
        default=IncidentStatus.ACTIVE,
        db_index=True,
        verbose_name="Status",
    )
    case = models.ForeignKey(
        "cases.Case",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="incidents",
        verbose_name="Case",
    )
    timestamp = models.DateTimeField(
        default=timezone.now,
        db_index=True,
        verbose_name="Timestamp",
    )

    class Meta:
        verbose_name = "Incident"
        verbose_name_plural = "Incidents"
        ordering = ["-timestamp"]

    def __str__(self):
        return f"Incident #{self.pk} — {self.type} at {self.address}"
