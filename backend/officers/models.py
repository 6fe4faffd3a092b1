"""
Officers app models.

An *officer profile* is the personnel record shown on the roster and on
the dashboard's personnel panel.  It is identified by badge number and
is independent of the login ``accounts.User``.
"""

from django.db import models

from core.models import TimeStampedModel


class OfficerStatus(models.TextChoices):
    AVAILABLE = "available", "Available"
    ON_CALL = "on_call", "On Call"
    OFF_DUTY = "off_duty", "Off Duty"


class Officer(TimeStampedModel):
    """
    Personnel record keyed by ``badge``.

    ``active_cases`` / ``total_cases`` are maintained by hand through
    the update endpoint; the dashboard ranks officers by
    ``active_cases``.
    """

    badge = models.PositiveIntegerField(
        unique=True,
        verbose_name="Badge Number",
    )
    first_name = models.CharField(max_length=191, verbose_name="First Name")
    last_name = models.CharField(max_length=191, verbose_name="Last Name")
    rank = models.CharField(max_length=191, verbose_name="Rank")
    unit = models.CharField(max_length=191, verbose_name="Unit")
    department = models.CharField(
        max_length=191,
        default="General",
        verbose_name="Department",
    )
    email = models.EmailField(
        max_length=191,
        unique=True,
        null=True,
        blank=True,
        verbose_name="Email Address",
    )
    phone = models.CharField(
        max_length=191,
        blank=True,
        default="",
        verbose_name="Phone",
    )
    status = models.CharField(
        max_length=20,
        choices=OfficerStatus.choices,
        default=OfficerStatus.AVAILABLE,
        db_index=True,
        verbose_name="Status",
    )
    active_cases = models.PositiveIntegerField(default=0, verbose_name="Active Cases")
    total_cases = models.PositiveIntegerField(default=0, verbose_name="Total Cases")
    hired_at = models.DateTimeField(null=True, blank=True, verbose_name="Hired At")

    class Meta:
        verbose_name = "Officer"
        verbose_name_plural = "Officers"
        ordering = ["badge"]

    def __str__(self):
        return f"#{self.badge} {self.rank} {self.full_name}"

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
