# wst_core/reports/api/views.py
from __future__ import annotations

import logging

from django.http import HttpResponse
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import extend_schema
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from wst_core.reports.api.serializers import EmployeeHoursSerializer, ExportQuerySerializer, ReportQuerySerializer
from wst_core.reports.exports import export_filename, render_pdf, render_xlsx
from wst_core.reports.selectors import employee_hours_report, group_positions_by_client, report_totals

logger = logging.getLogger(__name__)

XLSX_CONTENT_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


class ReportViewSet(viewsets.ViewSet):
    policy_resource = "reports"
    serializer_class = EmployeeHoursSerializer

    def _report(self, request, query_serializer_class):
        ser = query_serializer_class(data=request.query_params)
        ser.is_valid(raise_exception=True)
        q = ser.validated_data
        report = employee_hours_report(
            main_company_id=request.auth.company_filter,
            month=q.get("month"),
            year=q.get("year"),
            employee_id=q.get("employeeId"),
            client_id=q.get("clientId"),
        )
        return q, report

    def _export(self, request, *, extension: str, content_type: str, renderer):
        q, report = self._report(request, ExportQuerySerializer)
        total_hours, total_shifts = report_totals(report)
        content = renderer(
            report=report,
            groups=group_positions_by_client(report),
            month=q["month"],
            year=q["year"],
            total_hours=total_hours,
            total_shifts=total_shifts,
        )
        filename = export_filename(month=q["month"], year=q["year"], extension=extension)
        logger.info("report export %s rows=%s company=%s", filename, len(report), request.auth.company_filter)

        response = HttpResponse(content, content_type=content_type)
        response["Content-Disposition"] = f"attachment; filename={filename}"
        return response

    @extend_schema(tags=["Reports"], parameters=[ReportQuerySerializer], responses={200: EmployeeHoursSerializer(many=True)})
    @action(detail=False, methods=["get"], url_path="employee-hours")
    def employee_hours(self, request):
        _, report = self._report(request, ReportQuerySerializer)
        return Response(EmployeeHoursSerializer(report, many=True).data, status=status.HTTP_200_OK)

    @extend_schema(tags=["Reports"], parameters=[ExportQuerySerializer], responses={(200, XLSX_CONTENT_TYPE): OpenApiTypes.BINARY})
    @action(detail=False, methods=["get"], url_path="employee-hours/xlsx")
    def employee_hours_xlsx(self, request):
        return self._export(request, extension="xlsx", content_type=XLSX_CONTENT_TYPE, renderer=render_xlsx)

    @extend_schema(tags=["Reports"], parameters=[ExportQuerySerializer], responses={(200, "application/pdf"): OpenApiTypes.BINARY})
    @action(detail=False, methods=["get"], url_path="employee-hours/pdf")
    def employee_hours_pdf(self, request):
        return self._export(request, extension="pdf", content_type="application/pdf", renderer=render_pdf)
