"""
Reports app serializers.
"""

from __future__ import annotations

from rest_framework import serializers

from .models import Report


class ReportFilterSerializer(serializers.Serializer):
    """
    Query-parameter filters for ``GET /api/reports``.

    ``type``   : case-insensitive contains
    ``format`` : exact match
    ``search`` : contains on report_id / type
    """

    type = serializers.CharField(required=False, max_length=191)
    format = serializers.CharField(required=False, max_length=20)
    search = serializers.CharField(required=False, max_length=255)


class ReportCreateSerializer(serializers.Serializer):
    type = serializers.CharField(max_length=191)
    format = serializers.CharField(max_length=20, required=False, allow_blank=True)
    notes = serializers.CharField(required=False, allow_blank=True, default="")
    case = serializers.CharField(
        required=False,
        allow_blank=True,
        allow_null=True,
        help_text="Numeric id or case_id (CA-####) of the related case.",
    )


class ReportSerializer(serializers.ModelSerializer):
    generated_by = serializers.CharField(source="author_name", read_only=True)
    case_id = serializers.SerializerMethodField()

    class Meta:
        model = Report
        fields = [
            "id",
            "report_id",
            "type",
            "generated_by",
            "date",
            "format",
            "notes",
            "case_id",
        ]
        read_only_fields = fields

    def get_case_id(self, obj: Report) -> str | None:
        return obj.case.case_id if obj.case_id else None
