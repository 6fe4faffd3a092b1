"""
Core app views — **Thin Views**.

Each view delegates all business logic to ``core.services``.  Views are
responsible only for:

1. Extracting and validating query parameters from the request.
2. Calling the service.
3. Wrapping the result in the success envelope.

Also hosts the unauthenticated health probe and the JSON ``handler404``
/ ``handler500`` used for requests that never reach a DRF view.
"""

from __future__ import annotations

import logging

from django.http import JsonResponse
from django.utils import timezone
from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from core.responses import error_payload, success_response

from .serializers import (
    CaseDistributionSerializer,
    DashboardStatisticsSerializer,
    PersonnelStatusSerializer,
    RecentActivityQuerySerializer,
    RecentActivitySerializer,
    RecentCaseSerializer,
)
from .services import DashboardAggregationService

logger = logging.getLogger(__name__)


# ════════════════════════════════════════════════════════════════════
#  Dashboard
# ════════════════════════════════════════════════════════════════════


class DashboardStatisticsView(APIView):
    """**GET /api/dashboard/statistics** — case counts for the summary tiles."""

    permission_classes = [IsAuthenticated]

    @extend_schema(
        summary="Dashboard statistics",
        description="Case counts by status plus the number of high-priority cases.",
        responses={200: OpenApiResponse(response=DashboardStatisticsSerializer, description="Statistics.")},
        tags=["Dashboard"],
    )
    def get(self, request: Request) -> Response:
        return success_response(DashboardAggregationService().get_statistics())


class RecentActivityView(APIView):
    """**GET /api/dashboard/recent-activity?limit=10**"""

    permission_classes = [IsAuthenticated]

    @extend_schema(
        summary="Recent activity",
        description="Newest activity log entries with relative age and badge type.",
        parameters=[
            OpenApiParameter(name="limit", type=int, location=OpenApiParameter.QUERY, description="Number of entries (default 10)."),
        ],
        responses={200: OpenApiResponse(response=RecentActivitySerializer(many=True), description="Activity feed.")},
        tags=["Dashboard"],
    )
    def get(self, request: Request) -> Response:
        query = RecentActivityQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        data = DashboardAggregationService().get_recent_activity(limit=query.validated_data["limit"])
        return success_response(data)


class CaseDistributionView(APIView):
    """**GET /api/dashboard/case-distribution**"""

    permission_classes = [IsAuthenticated]

    @extend_schema(
        summary="Case distribution",
        description=(
            "Per case type: count, month-over-month trend and resolution rate, "
            "sorted by count descending."
        ),
        responses={200: OpenApiResponse(response=CaseDistributionSerializer(many=True), description="Distribution.")},
        tags=["Dashboard"],
    )
    def get(self, request: Request) -> Response:
        return success_response(DashboardAggregationService().get_case_distribution())


class RecentCasesView(APIView):
    """**GET /api/dashboard/recent-cases** — the five newest cases."""

    permission_classes = [IsAuthenticated]

    @extend_schema(
        summary="Recent cases",
        responses={200: OpenApiResponse(response=RecentCaseSerializer(many=True), description="Newest cases.")},
        tags=["Dashboard"],
    )
    def get(self, request: Request) -> Response:
        return success_response(DashboardAggregationService().get_recent_cases())


class PersonnelStatusView(APIView):
    """**GET /api/dashboard/personnel-status** — busiest four officers."""

    permission_classes = [IsAuthenticated]

    @extend_schema(
        summary="Personnel status",
        responses={200: OpenApiResponse(response=PersonnelStatusSerializer(many=True), description="Officers.")},
        tags=["Dashboard"],
    )
    def get(self, request: Request) -> Response:
        return success_response(DashboardAggregationService().get_personnel_status())


# ════════════════════════════════════════════════════════════════════
#  Health & fallback handlers
# ════════════════════════════════════════════════════════════════════


class HealthView(APIView):
    """**GET /health** — liveness probe, no authentication."""

    permission_classes = [AllowAny]
    authentication_classes: list = []

    @extend_schema(
        summary="Health check",
        responses={200: OpenApiResponse(description="Service is up.")},
        tags=["Health"],
    )
    def get(self, request: Request) -> Response:
        return success_response(
            message="NPF CRM API is running",
            timestamp=timezone.now().isoformat(),
        )


def route_not_found(request, exception=None):
    """``handler404``: unknown routes answer with the JSON error envelope."""
    return JsonResponse(
        error_payload(f"Route {request.path} not found", "ROUTE_NOT_FOUND"),
        status=404,
    )


def server_error(request):
    """``handler500``: last-resort JSON envelope for errors outside DRF."""
    logger.error("Unhandled server error on %s %s", request.method, request.path)
    return JsonResponse(
        error_payload("Internal server error", "INTERNAL_ERROR"),
        status=500,
    )
