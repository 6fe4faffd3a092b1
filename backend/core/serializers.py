"""
Core app serializers.

Response shapes for the dashboard endpoints (used for the OpenAPI
schema) plus the ``limit`` query-parameter validator.
"""

from __future__ import annotations

from rest_framework import serializers

from core.constants import DEFAULT_ACTIVITY_LIMIT


class RecentActivityQuerySerializer(serializers.Serializer):
    limit = serializers.IntegerField(
        required=False,
        min_value=1,
        max_value=100,
        default=DEFAULT_ACTIVITY_LIMIT,
    )


class DashboardStatisticsSerializer(serializers.Serializer):
    total = serializers.IntegerField()
    open = serializers.IntegerField()
    investigation = serializers.IntegerField()
    resolved = serializers.IntegerField()
    others = serializers.IntegerField()
    priority = serializers.IntegerField(help_text="Number of high-priority cases.")


class RecentActivitySerializer(serializers.Serializer):
    """
    A single item of the activity feed.

    Example::

        {
            "id": 42,
            "message": "New case CA-0007 created: theft at Wuse II",
            "action": "create_case",
            "user": "John Doe",
            "timestamp": "2025-06-15T10:30:00Z",
            "time_ago": "5 mins ago",
            "type": "case"
        }
    """

    id = serializers.IntegerField()
    message = serializers.CharField()
    action = serializers.CharField()
    user = serializers.CharField(help_text="Actor's display name, or 'System'.")
    timestamp = serializers.DateTimeField()
    time_ago = serializers.CharField()
    type = serializers.ChoiceField(
        choices=["case", "update", "alert", "resolve"],
        help_text="Badge category derived from the action.",
    )


class CaseDistributionSerializer(serializers.Serializer):
    type = serializers.CharField(help_text="Display name of the case type.")
    count = serializers.IntegerField()
    trend = serializers.IntegerField(help_text="Absolute month-over-month change in percent.")
    trend_direction = serializers.ChoiceField(choices=["up", "down", "stable"])
    resolution_rate = serializers.IntegerField(help_text="Resolved cases in percent.")


class RecentCaseSerializer(serializers.Serializer):
    case_id = serializers.CharField()
    type = serializers.CharField()
    status = serializers.CharField()
    priority = serializers.CharField()
    officer = serializers.CharField()
    location = serializers.CharField()


class PersonnelStatusSerializer(serializers.Serializer):
    badge = serializers.IntegerField()
    name = serializers.CharField()
    first_name = serializers.CharField()
    last_name = serializers.CharField()
    status = serializers.CharField()
    active_cases = serializers.IntegerField()
