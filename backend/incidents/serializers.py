"""
Incidents app serializers.
"""

from __future__ import annotations

from typing import Any

from rest_framework import serializers

from .models import Incident, IncidentPriority, IncidentStatus


class IncidentFilterSerializer(serializers.Serializer):
    status = serializers.CharField(required=False, max_length=20)
    priority = serializers.CharField(required=False, max_length=20)
    search = serializers.CharField(required=False, max_length=255)


class IncidentCreateSerializer(serializers.Serializer):
    type = serializers.CharField(max_length=191)
    description = serializers.CharField()
    address = serializers.CharField(max_length=255)
    coordinates = serializers.CharField(max_length=191, required=False, allow_blank=True, default="")
    reporter = serializers.CharField(max_length=191, required=False, allow_blank=True, default="")
    priority = serializers.ChoiceField(choices=IncidentPriority.choices, required=False)
    status = serializers.ChoiceField(choices=IncidentStatus.choices, required=False)
    case = serializers.CharField(
        required=False,
        allow_blank=True,
        allow_null=True,
        help_text="Numeric id or case_id (CA-####) of the related case.",
    )


class IncidentUpdateSerializer(serializers.Serializer):
    """
    Partial update.  Blank ``type`` / ``description`` / ``address`` leave
    the field unchanged; ``coordinates`` and ``reporter`` may be cleared.
    """

    type = serializers.CharField(max_length=191, required=False, allow_blank=True)
    description = serializers.CharField(required=False, allow_blank=True)
    address = serializers.CharField(max_length=255, required=False, allow_blank=True)
    coordinates = serializers.CharField(max_length=191, required=False, allow_blank=True)
    reporter = serializers.CharField(max_length=191, required=False, allow_blank=True)
    priority = serializers.ChoiceField(choices=IncidentPriority.choices, required=False)
    status = serializers.ChoiceField(choices=IncidentStatus.choices, required=False)
    case = serializers.CharField(required=False, allow_blank=True, allow_null=True)

    def validate(self, attrs: dict[str, Any]) -> dict[str, Any]:
        required_text = ("type", "description", "address")
        return {
            key: value for key, value in attrs.items()
            if not (key in required_text and value == "")
        }


class IncidentSerializer(serializers.ModelSerializer):
    case_id = serializers.SerializerMethodField()

    class Meta:
        model = Incident
        fields = [
            "id",
            "type",
            "priority",
            "description",
            "address",
            "coordinates",
            "reporter",
            "status",
            "case_id",
            "timestamp",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields

    def get_case_id(self, obj: Incident) -> str | None:
        return obj.case.case_id if obj.case_id else None


class IncidentStatisticsSerializer(serializers.Serializer):
    total = serializers.IntegerField()
    priority = serializers.IntegerField(help_text="Number of high-priority incidents.")
    active = serializers.IntegerField()
    resolved = serializers.IntegerField()
