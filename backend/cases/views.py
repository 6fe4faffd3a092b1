"""
Cases app ViewSets.

Architecture: Views are intentionally thin.
Every view follows the strict three-step pattern:

    1. Parse / validate input via a serializer.
    2. Delegate all business logic to the appropriate service class.
    3. Serialize the result and return the success envelope.

No database queries live here.
"""

from __future__ import annotations

import logging

from drf_spectacular.utils import (
    OpenApiParameter,
    OpenApiResponse,
    extend_schema,
)
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response

from core.permissions import IsAdminRole, IsOfficerOrAdmin
from core.responses import success_response

from .serializers import (
    CaseCreateSerializer,
    CaseFilterSerializer,
    CaseSerializer,
    CaseStatisticsSerializer,
    CaseUpdateSerializer,
)
from .services import CaseQueryService, CaseService

logger = logging.getLogger(__name__)


class CaseViewSet(viewsets.ViewSet):
    """
    /api/cases

    ``{pk}`` accepts either the numeric id or the ``case_id`` code.

    Permission Strategy
    -------------------
    Any authenticated account may list, read, create and update cases.
    ``destroy`` additionally requires the admin role, checked before the
    case is looked up.
    """

    permission_classes = [IsAuthenticated]

    def get_permissions(self):
        if self.action == "destroy":
            return [IsAuthenticated(), IsAdminRole()]
        return [IsAuthenticated(), IsOfficerOrAdmin()]

    # ── Standard CRUD ────────────────────────────────────────────────
    @extend_schema(
        summary="List cases",
        description="Filtered, paginated case list ordered by report time (newest first).",
        parameters=[
            OpenApiParameter(name="status", type=str, location=OpenApiParameter.QUERY, description="Exact status."),
            OpenApiParameter(name="type", type=str, location=OpenApiParameter.QUERY, description="Case-insensitive contains on type."),
            OpenApiParameter(name="priority", type=str, location=OpenApiParameter.QUERY, description="Exact priority."),
            OpenApiParameter(name="officer", type=str, location=OpenApiParameter.QUERY, description="Username or name of the assigned officer."),
            OpenApiParameter(name="search", type=str, location=OpenApiParameter.QUERY, description="Contains on case_id, type, location, description."),
            OpenApiParameter(name="page", type=int, location=OpenApiParameter.QUERY, description="1-based page (default 1)."),
            OpenApiParameter(name="limit", type=int, location=OpenApiParameter.QUERY, description="Page size (default 50)."),
        ],
        responses={
            200: OpenApiResponse(response=CaseSerializer(many=True), description="Page of cases with total, page, total_pages."),
        },
        tags=["Cases"],
    )
    def list(self, request: Request) -> Response:
        filter_serializer = CaseFilterSerializer(data=request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        filters = filter_serializer.validated_data

        qs = CaseQueryService.get_filtered_queryset(filters)
        items, meta = CaseQueryService.paginate(qs, page=filters["page"], limit=filters["limit"])
        return success_response(CaseSerializer(items, many=True).data, **meta)

    @extend_schema(
        summary="Create a new case",
        description="Allocates the next CA-#### identifier. Defaults: status 'open', priority 'medium'.",
        request=CaseCreateSerializer,
        responses={
            201: OpenApiResponse(response=CaseSerializer, description="Case created."),
            400: OpenApiResponse(description="MISSING_FIELDS or VALIDATION_ERROR."),
        },
        tags=["Cases"],
    )
    def create(self, request: Request) -> Response:
        serializer = CaseCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        case = CaseService.create_case(serializer.validated_data, request.user)
        return success_response(
            CaseSerializer(case).data,
            status=status.HTTP_201_CREATED,
            message="Case created successfully",
        )

    @extend_schema(
        summary="Retrieve case",
        responses={
            200: OpenApiResponse(response=CaseSerializer, description="Case."),
            404: OpenApiResponse(description="CASE_NOT_FOUND."),
        },
        tags=["Cases"],
    )
    def retrieve(self, request: Request, pk: str = None) -> Response:
        case = CaseQueryService.get_case(pk)
        return success_response(CaseSerializer(case).data)

    @extend_schema(
        summary="Partially update case",
        description="Omitted fields are unchanged. 'officer' set to '' or null unassigns.",
        request=CaseUpdateSerializer,
        responses={
            200: OpenApiResponse(response=CaseSerializer, description="Case updated."),
            404: OpenApiResponse(description="CASE_NOT_FOUND."),
        },
        tags=["Cases"],
    )
    def partial_update(self, request: Request, pk: str = None) -> Response:
        case = CaseQueryService.get_case(pk)
        serializer = CaseUpdateSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        case = CaseService.update_case(case, serializer.validated_data, request.user)
        return success_response(CaseSerializer(case).data, message="Case updated successfully")

    def update(self, request: Request, pk: str = None) -> Response:
        return self.partial_update(request, pk)

    @extend_schema(
        summary="Delete a case",
        description="Hard-delete a case. Admin only.",
        responses={
            200: OpenApiResponse(description="Case deleted."),
            403: OpenApiResponse(description="FORBIDDEN."),
            404: OpenApiResponse(description="CASE_NOT_FOUND."),
        },
        tags=["Cases"],
    )
    def destroy(self, request: Request, pk: str = None) -> Response:
        case = CaseQueryService.get_case(pk)
        CaseService.delete_case(case, request.user)
        return success_response(message="Case deleted successfully")

    # ── Aggregates ───────────────────────────────────────────────────

    @extend_schema(
        summary="Case statistics",
        description="Counts by status plus the number of high-priority cases.",
        responses={200: OpenApiResponse(response=CaseStatisticsSerializer, description="Statistics.")},
        tags=["Cases"],
    )
    @action(detail=False, methods=["get"], url_path="statistics")
    def statistics(self, request: Request) -> Response:
        return success_response(CaseQueryService.get_statistics())
