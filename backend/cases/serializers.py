"""
Cases app serializers.

Request serializers validate input shapes only; officer resolution,
identifier allocation and activity logging happen in ``services.py``.
"""

from __future__ import annotations

from rest_framework import serializers

from core.constants import DEFAULT_PAGE_SIZE

from .models import Case, CasePriority, CaseStatus


# ═══════════════════════════════════════════════════════════════════
#  Query-parameter serializers
# ═══════════════════════════════════════════════════════════════════


class CaseFilterSerializer(serializers.Serializer):
    """
    Validates and cleans query-parameter filters for ``GET /api/cases``.

    Query Parameters
    ----------------
    ``status``   : str  — exact match
    ``type``     : str  — case-insensitive contains
    ``priority`` : str  — exact match
    ``officer``  : str  — username or display name of the assigned
                          officer (contains); ignored if nobody matches
    ``search``   : str  — contains on case_id / type / location /
                          description
    ``page``     : int  — 1-based page number (default 1)
    ``limit``    : int  — page size (default 50)
    """

    status = serializers.CharField(required=False, max_length=20)
    type = serializers.CharField(required=False, max_length=191)
    priority = serializers.CharField(required=False, max_length=20)
    officer = serializers.CharField(required=False, max_length=191)
    search = serializers.CharField(required=False, max_length=255)
    page = serializers.IntegerField(required=False, min_value=1, default=1)
    limit = serializers.IntegerField(required=False, min_value=1, default=DEFAULT_PAGE_SIZE)


# ═══════════════════════════════════════════════════════════════════
#  Request serializers
# ═══════════════════════════════════════════════════════════════════


class CaseCreateSerializer(serializers.Serializer):
    type = serializers.CharField(max_length=191)
    location = serializers.CharField(max_length=255)
    description = serializers.CharField(required=False, allow_blank=True, default="")
    reporter = serializers.CharField(required=False, allow_blank=True, max_length=191, default="")
    status = serializers.ChoiceField(choices=CaseStatus.choices, required=False)
    priority = serializers.ChoiceField(choices=CasePriority.choices, required=False)
    officer = serializers.CharField(
        required=False,
        allow_blank=True,
        allow_null=True,
        help_text="Username or display name of the officer to assign.",
    )


class CaseUpdateSerializer(serializers.Serializer):
    """
    Partial update.  Omitted fields are left unchanged; ``officer`` set
    to ``""`` or ``null`` clears the assignment.
    """

    type = serializers.CharField(required=False, max_length=191)
    location = serializers.CharField(required=False, max_length=255)
    description = serializers.CharField(required=False, allow_blank=True)
    reporter = serializers.CharField(required=False, allow_blank=True, max_length=191)
    status = serializers.ChoiceField(choices=CaseStatus.choices, required=False)
    priority = serializers.ChoiceField(choices=CasePriority.choices, required=False)
    officer = serializers.CharField(required=False, allow_blank=True, allow_null=True)


# ═══════════════════════════════════════════════════════════════════
#  Response serializers
# ═══════════════════════════════════════════════════════════════════


class CaseSerializer(serializers.ModelSerializer):
    """Flat representation used by list, detail and write responses."""

    officer = serializers.CharField(source="officer_name", read_only=True)

    class Meta:
        model = Case
        fields = [
            "id",
            "case_id",
            "type",
            "reported",
            "location",
            "status",
            "priority",
            "officer",
            "officer_id",
            "description",
            "reporter",
        ]
        read_only_fields = fields


class CaseStatisticsSerializer(serializers.Serializer):
    total = serializers.IntegerField()
    open = serializers.IntegerField()
    investigation = serializers.IntegerField()
    resolved = serializers.IntegerField()
    others = serializers.IntegerField()
    priority = serializers.IntegerField(help_text="Number of high-priority cases.")
