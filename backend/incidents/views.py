"""
Incidents app ViewSets.
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
    IncidentCreateSerializer,
    IncidentFilterSerializer,
    IncidentSerializer,
    IncidentStatisticsSerializer,
    IncidentUpdateSerializer,
)
from .services import IncidentService


class IncidentViewSet(viewsets.ViewSet):
    """
    /api/incidents

    Any authenticated account may report and update incidents;
    ``destroy`` requires the admin role.
    """

    permission_classes = [IsAuthenticated]

    def get_permissions(self):
        if self.action == "destroy":
            return [IsAuthenticated(), IsAdminRole()]
        return [IsAuthenticated(), IsOfficerOrAdmin()]

    @extend_schema(
        summary="List incidents",
        parameters=[
            OpenApiParameter(name="status", type=str, location=OpenApiParameter.QUERY, description="'active', 'responding' or 'resolved'."),
            OpenApiParameter(name="priority", type=str, location=OpenApiParameter.QUERY, description="'low', 'medium' or 'high'."),
            OpenApiParameter(name="search", type=str, location=OpenApiParameter.QUERY, description="Contains on type, address, description."),
        ],
        responses={200: OpenApiResponse(response=IncidentSerializer(many=True), description="Incidents with total.")},
        tags=["Incidents"],
    )
    def list(self, request: Request) -> Response:
        filter_serializer = IncidentFilterSerializer(data=request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        incidents = list(IncidentService.list_incidents(**filter_serializer.validated_data))
        return success_response(IncidentSerializer(incidents, many=True).data, total=len(incidents))

    @extend_schema(
        summary="Retrieve incident",
        responses={
            200: OpenApiResponse(response=IncidentSerializer, description="Incident."),
            404: OpenApiResponse(description="INCIDENT_NOT_FOUND."),
        },
        tags=["Incidents"],
    )
    def retrieve(self, request: Request, pk: str = None) -> Response:
        incident = IncidentService.get_incident(pk)
        return success_response(IncidentSerializer(incident).data)

    @extend_schema(
        summary="Report incident",
        description="Defaults: priority 'low', status 'active'.",
        request=IncidentCreateSerializer,
        responses={
            201: OpenApiResponse(response=IncidentSerializer, description="Incident created."),
            400: OpenApiResponse(description="MISSING_FIELDS."),
        },
        tags=["Incidents"],
    )
    def create(self, request: Request) -> Response:
        serializer = IncidentCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        incident = IncidentService.create_incident(serializer.validated_data, request.user)
        return success_response(
            IncidentSerializer(incident).data,
            status=status.HTTP_201_CREATED,
            message="Incident created successfully",
        )

    @extend_schema(
        summary="Update incident",
        request=IncidentUpdateSerializer,
        responses={
            200: OpenApiResponse(response=IncidentSerializer, description="Incident updated."),
            404: OpenApiResponse(description="INCIDENT_NOT_FOUND."),
        },
        tags=["Incidents"],
    )
    def partial_update(self, request: Request, pk: str = None) -> Response:
        serializer = IncidentUpdateSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        incident = IncidentService.update_incident(pk, serializer.validated_data, request.user)
        return success_response(IncidentSerializer(incident).data, message="Incident updated successfully")

    def update(self, request: Request, pk: str = None) -> Response:
        return self.partial_update(request, pk)

    @extend_schema(
        summary="Delete incident",
        description="Admin only.",
        responses={
            200: OpenApiResponse(description="Incident deleted."),
            403: OpenApiResponse(description="FORBIDDEN."),
            404: OpenApiResponse(description="INCIDENT_NOT_FOUND."),
        },
        tags=["Incidents"],
    )
    def destroy(self, request: Request, pk: str = None) -> Response:
        IncidentService.delete_incident(pk, request.user)
        return success_response(message="Incident deleted successfully")

    @extend_schema(
        summary="Incident statistics",
        responses={200: OpenApiResponse(response=IncidentStatisticsSerializer, description="Counts.")},
        tags=["Incidents"],
    )
    @action(detail=False, methods=["get"], url_path="statistics")
    def statistics(self, request: Request) -> Response:
        return success_response(IncidentService.get_statistics())
