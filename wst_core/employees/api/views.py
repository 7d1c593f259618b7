# wst_core/employees/api/views.py
from __future__ import annotations

from drf_spectacular.utils import OpenApiParameter, extend_schema, extend_schema_view
from rest_framework import status, viewsets
from rest_framework.response import Response

from wst_core.common.errors import NotFoundError
from wst_core.employees.api.serializers import EmployeeSerializer, EmployeeWriteSerializer
from wst_core.employees.models import Employee
from wst_core.employees.selectors import get_employee_or_none, list_employees
from wst_core.employees.services import EmployeeService


@extend_schema_view(
    list=extend_schema(
        tags=["Employees"],
        parameters=[
            OpenApiParameter("search", str, description="Case-insensitive match on name"),
            OpenApiParameter("status", str, enum=["active", "inactive", "all"], description="Defaults to active"),
        ],
        responses={200: EmployeeSerializer(many=True)},
    ),
    retrieve=extend_schema(tags=["Employees"], responses={200: EmployeeSerializer}),
    create=extend_schema(tags=["Employees"], request=EmployeeWriteSerializer, responses={201: EmployeeSerializer}),
    update=extend_schema(tags=["Employees"], request=EmployeeWriteSerializer, responses={200: EmployeeSerializer}),
    destroy=extend_schema(tags=["Employees"], responses={204: None}),
)
class EmployeeViewSet(viewsets.ViewSet):
    policy_resource = "employees"
    lookup_value_regex = r"\d+"

    # ✅ critical for drf-spectacular
    serializer_class = EmployeeSerializer
    queryset = Employee.objects.none()

    def list(self, request):
        qs = list_employees(main_company_id=request.auth.company_filter, params=request.query_params)
        return Response(EmployeeSerializer(qs, many=True).data, status=status.HTTP_200_OK)

    def retrieve(self, request, pk=None):
        employee = get_employee_or_none(employee_id=int(pk), main_company_id=request.auth.company_filter)
        if employee is None:
            raise NotFoundError("Employee not found.")
        return Response(EmployeeSerializer(employee).data, status=status.HTTP_200_OK)

    def create(self, request):
        ser = EmployeeWriteSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        employee = EmployeeService.create(main_company_id=request.auth.main_company_id, **ser.validated_data)
        return Response(EmployeeSerializer(employee).data, status=status.HTTP_201_CREATED)

    def update(self, request, pk=None):
        ser = EmployeeWriteSerializer(data=request.data, partial=True)
        ser.is_valid(raise_exception=True)

        employee = EmployeeService.update(
            main_company_id=request.auth.main_company_id,
            employee_id=int(pk),
            data=ser.validated_data,
        )
        return Response(EmployeeSerializer(employee).data, status=status.HTTP_200_OK)

    def destroy(self, request, pk=None):
        EmployeeService.deactivate(main_company_id=request.auth.main_company_id, employee_id=int(pk))
        return Response(status=status.HTTP_204_NO_CONTENT)
