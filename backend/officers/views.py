"""
Officers app ViewSets.

Thin views: validate → delegate to ``OfficerService`` → envelope.
The URL keyword is the badge number, not the row id.
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response

from core.permissions import IsAdminRole, IsOfficerOrAdmin
from core.responses import success_response

from .serializers import (
    OfficerCreateSerializer,
    OfficerFilterSerializer,
    OfficerSerializer,
    OfficerStatisticsSerializer,
    OfficerUpdateSerializer,
)
from .services import OfficerService


class OfficerViewSet(viewsets.ViewSet):
    """
    /api/officers

    Reads are open to any authenticated account; create, update and
    delete require the admin role.
    """

    permission_classes = [IsAuthenticated]
    lookup_field = "badge"

    def get_permissions(self):
        if self.action in ("create", "update", "partial_update", "destroy"):
            return [IsAuthenticated(), IsAdminRole()]
        return [IsAuthenticated(), IsOfficerOrAdmin()]

    @extend_schema(
        summary="List officers",
        description="Roster ordered by badge number.",
        parameters=[
            OpenApiParameter(name="status", type=str, location=OpenApiParameter.QUERY, description="'available', 'on_call' or 'off_duty'."),
            OpenApiParameter(name="unit", type=str, location=OpenApiParameter.QUERY, description="Contains match on unit."),
            OpenApiParameter(name="search", type=str, location=OpenApiParameter.QUERY, description="Name, email or badge."),
        ],
        responses={200: OpenApiResponse(response=OfficerSerializer(many=True), description="Officers with total.")},
        tags=["Officers"],
    )
    def list(self, request: Request) -> Response:
        filter_serializer = OfficerFilterSerializer(data=request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        officers = list(OfficerService.list_officers(**filter_serializer.validated_data))
        return success_response(OfficerSerializer(officers, many=True).data, total=len(officers))

    @extend_schema(
        summary="Retrieve officer by badge",
        responses={
            200: OpenApiResponse(response=OfficerSerializer, description="Officer."),
            404: OpenApiResponse(description="OFFICER_NOT_FOUND."),
        },
        tags=["Officers"],
    )
    def retrieve(self, request: Request, badge: str = None) -> Response:
        officer = OfficerService.get_officer(badge)
        return success_response(OfficerSerializer(officer).data)

    @extend_schema(
        summary="Create officer",
        description="Admin only.",
        request=OfficerCreateSerializer,
        responses={
            201: OpenApiResponse(response=OfficerSerializer, description="Officer created."),
            400: OpenApiResponse(description="MISSING_FIELDS or INVALID_EMAIL."),
            409: OpenApiResponse(description="DUPLICATE_ENTRY."),
        },
        tags=["Officers"],
    )
    def create(self, request: Request) -> Response:
        serializer = OfficerCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        officer = OfficerService.create_officer(serializer.validated_data, request.user)
        return success_response(
            OfficerSerializer(officer).data,
            status=status.HTTP_201_CREATED,
            message="Officer created successfully",
        )

    @extend_schema(
        summary="Update officer",
        description="Admin only. Partial update.",
        request=OfficerUpdateSerializer,
        responses={
            200: OpenApiResponse(response=OfficerSerializer, description="Officer updated."),
            404: OpenApiResponse(description="OFFICER_NOT_FOUND."),
        },
        tags=["Officers"],
    )
    def partial_update(self, request: Request, badge: str = None) -> Response:
        serializer = OfficerUpdateSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        officer = OfficerService.update_officer(badge, serializer.validated_data, request.user)
        return success_response(OfficerSerializer(officer).data, message="Officer updated successfully")

    def update(self, request: Request, badge: str = None) -> Response:
        return self.partial_update(request, badge)

    @extend_schema(
        summary="Delete officer",
        description="Admin only.",
        responses={
            200: OpenApiResponse(description="Officer deleted."),
            403: OpenApiResponse(description="FORBIDDEN."),
            404: OpenApiResponse(description="OFFICER_NOT_FOUND."),
        },
        tags=["Officers"],
    )
    def destroy(self, request: Request, badge: str = None) -> Response:
        OfficerService.delete_officer(badge, request.user)
        return success_response(message="Officer deleted successfully")

    @extend_schema(
        summary="Officer statistics",
        responses={200: OpenApiResponse(response=OfficerStatisticsSerializer, description="Counts by status.")},
        tags=["Officers"],
    )
    @action(detail=False, methods=["get"], url_path="statistics")
    def statistics(self, request: Request) -> Response:
        return success_response(OfficerService.get_statistics())
