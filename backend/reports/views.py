"""
Reports app ViewSets.

``{pk}`` accepts either the numeric id or the ``report_id`` code.
"""

from __future__ import annotations

from django.http import HttpResponse
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response

from core.permissions import IsAdminRole, IsOfficerOrAdmin
from core.responses import success_response

from .serializers import ReportCreateSerializer, ReportFilterSerializer, ReportSerializer
from .services import ReportDocumentService, ReportQueryService, ReportService


class ReportViewSet(viewsets.ViewSet):
    """
    /api/reports

    Any authenticated account may list, read, generate and download
    reports; ``destroy`` requires the admin role.
    """

    permission_classes = [IsAuthenticated]

    def get_permissions(self):
        if self.action == "destroy":
            return [IsAuthenticated(), IsAdminRole()]
        return [IsAuthenticated(), IsOfficerOrAdmin()]

    @extend_schema(
        summary="List reports",
        parameters=[
            OpenApiParameter(name="type", type=str, location=OpenApiParameter.QUERY, description="Contains match on type."),
            OpenApiParameter(name="format", type=str, location=OpenApiParameter.QUERY, description="Exact format, e.g. 'PDF'."),
            OpenApiParameter(name="search", type=str, location=OpenApiParameter.QUERY, description="Contains on report_id or type."),
        ],
        responses={200: OpenApiResponse(response=ReportSerializer(many=True), description="Reports with total.")},
        tags=["Reports"],
    )
    def list(self, request: Request) -> Response:
        filter_serializer = ReportFilterSerializer(data=request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        reports = list(ReportQueryService.list_reports(**filter_serializer.validated_data))
        return success_response(ReportSerializer(reports, many=True).data, total=len(reports))

    @extend_schema(
        summary="Retrieve report",
        responses={
            200: OpenApiResponse(response=ReportSerializer, description="Report."),
            404: OpenApiResponse(description="REPORT_NOT_FOUND."),
        },
        tags=["Reports"],
    )
    def retrieve(self, request: Request, pk: str = None) -> Response:
        report = ReportQueryService.get_report(pk)
        return success_response(ReportSerializer(report).data)

    @extend_schema(
        summary="Generate report",
        description="Allocates the next RPT-#### identifier. Format defaults to 'PDF'.",
        request=ReportCreateSerializer,
        responses={
            201: OpenApiResponse(response=ReportSerializer, description="Report generated."),
            400: OpenApiResponse(description="MISSING_FIELDS."),
            404: OpenApiResponse(description="CASE_NOT_FOUND."),
        },
        tags=["Reports"],
    )
    def create(self, request: Request) -> Response:
        serializer = ReportCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        report = ReportService.create_report(serializer.validated_data, request.user)
        return success_response(
            ReportSerializer(report).data,
            status=status.HTTP_201_CREATED,
            message="Report generated successfully",
        )

    @extend_schema(
        summary="Delete report",
        description="Admin only.",
        responses={
            200: OpenApiResponse(description="Report deleted."),
            403: OpenApiResponse(description="FORBIDDEN."),
            404: OpenApiResponse(description="REPORT_NOT_FOUND."),
        },
        tags=["Reports"],
    )
    def destroy(self, request: Request, pk: str = None) -> Response:
        report = ReportQueryService.get_report(pk)
        ReportService.delete_report(report, request.user)
        return success_response(message="Report deleted successfully")

    @extend_schema(
        summary="Download report document",
        description="Served as an attachment named '<report_id>.pdf'.",
        responses={
            (200, "application/pdf"): OpenApiResponse(response=OpenApiTypes.BINARY, description="Document."),
            404: OpenApiResponse(description="REPORT_NOT_FOUND."),
        },
        tags=["Reports"],
    )
    @action(detail=True, methods=["get"], url_path="pdf")
    def pdf(self, request: Request, pk: str = None) -> HttpResponse:
        report = ReportQueryService.get_report(pk)
        filename, content = ReportDocumentService.download(report, request.user)
        response = HttpResponse(content, content_type="application/pdf")
        response["Content-Disposition"] = f'attachment; filename="{filename}"'
        return response
