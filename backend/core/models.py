"""
Core app models.

Provides the abstract timestamp base model plus the two cross-app
tables: the append-only activity log and the sequence counters used to
allocate human-readable case / report codes.
"""

from django.conf import settings
from django.db import models
from django.utils import timezone


class TimeStampedModel(models.Model):
    """
    Abstract base model that provides self-updating ``created_at`` and
    ``updated_at`` timestamp fields for every concrete child model.
    """

    created_at = models.DateTimeField(
        auto_now_add=True,
        verbose_name="Created At",
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        verbose_name="Updated At",
    )

    class Meta:
        abstract = True


class ActivityLog(models.Model):
    """
    Audit record of an action taken by an account.

    Rows are only ever inserted.  ``user`` is nulled (not cascaded) when
    the acting account is deleted so the trail survives.
    """

    message = models.TextField(blank=True, default="", verbose_name="Message")
    action = models.CharField(
        max_length=255,
        blank=True,
        default="",
        verbose_name="Action",
    )
    metadata = models.JSONField(
        null=True,
        blank=True,
        verbose_name="Metadata",
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="activity_logs",
        verbose_name="Actor",
    )
    timestamp = models.DateTimeField(
        default=timezone.now,
        db_index=True,
        verbose_name="Timestamp",
    )

    class Meta:
        verbose_name = "Activity Log Entry"
        verbose_name_plural = "Activity Log"
        ordering = ["-timestamp", "-id"]

    def __str__(self):
        return f"[{self.action}] {self.message}"


class SequenceCounter(models.Model):
    """
    Last number handed out for a named identifier sequence
    (``"case"``, ``"report"``).

    Rows are locked with ``select_for_update`` while a new number is
    allocated; see ``core.sequences``.
    """

    name = models.CharField(max_length=50, primary_key=True)
    value = models.PositiveIntegerField(default=0)

    class Meta:
        verbose_name = "Sequence Counter"
        verbose_name_plural = "Sequence Counters"

    def __str__(self):
        return f"{self.name}={self.value}"
