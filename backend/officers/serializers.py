"""
Officers app serializers.
"""

from __future__ import annotations

from typing import Any

from rest_framework import serializers

from core.validators import validate_email_format

from .models import Officer, OfficerStatus


class OfficerFilterSerializer(serializers.Serializer):
    """
    Query-parameter filters for ``GET /api/officers``.

    ``status`` : exact match
    ``unit``   : case-insensitive contains
    ``search`` : contains on first / last name and email; exact badge
                 when the term is numeric
    """

    status = serializers.CharField(required=False, max_length=20)
    unit = serializers.CharField(required=False, max_length=191)
    search = serializers.CharField(required=False, max_length=255)


class OfficerSerializer(serializers.ModelSerializer):
    class Meta:
        model = Officer
        fields = [
            "id",
            "badge",
            "first_name",
            "last_name",
            "rank",
            "unit",
            "department",
            "email",
            "phone",
            "status",
            "active_cases",
            "total_cases",
            "hired_at",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class OfficerCreateSerializer(serializers.Serializer):
    badge = serializers.IntegerField(min_value=1)
    first_name = serializers.CharField(max_length=191)
    last_name = serializers.CharField(max_length=191)
    rank = serializers.CharField(max_length=191)
    unit = serializers.CharField(max_length=191)
    email = serializers.CharField(max_length=191, validators=[validate_email_format])
    status = serializers.ChoiceField(choices=OfficerStatus.choices, required=False)
    department = serializers.CharField(max_length=191, required=False, allow_blank=True)
    phone = serializers.CharField(max_length=191, required=False, allow_blank=True)
    hired_at = serializers.DateTimeField(required=False, allow_null=True)


class OfficerUpdateSerializer(serializers.Serializer):
    """
    Partial update.  Blank strings leave the field unchanged;
    ``active_cases`` / ``total_cases`` accept numeric strings.
    """

    first_name = serializers.CharField(max_length=191, required=False, allow_blank=True)
    last_name = serializers.CharField(max_length=191, required=False, allow_blank=True)
    rank = serializers.CharField(max_length=191, required=False, allow_blank=True)
    unit = serializers.CharField(max_length=191, required=False, allow_blank=True)
    department = serializers.CharField(max_length=191, required=False, allow_blank=True)
    email = serializers.CharField(
        max_length=191,
        required=False,
        allow_blank=True,
        validators=[validate_email_format],
    )
    phone = serializers.CharField(max_length=191, required=False, allow_blank=True)
    status = serializers.ChoiceField(choices=OfficerStatus.choices, required=False)
    active_cases = serializers.IntegerField(min_value=0, required=False)
    total_cases = serializers.IntegerField(min_value=0, required=False)
    hired_at = serializers.DateTimeField(required=False, allow_null=True)

    def validate(self, attrs: dict[str, Any]) -> dict[str, Any]:
        return {
            key: value for key, value in attrs.items()
            if value != "" or key == "phone"
        }


class OfficerStatisticsSerializer(serializers.Serializer):
    total = serializers.IntegerField()
    available = serializers.IntegerField()
    on_call = serializers.IntegerField()
    off_duty = serializers.IntegerField()
