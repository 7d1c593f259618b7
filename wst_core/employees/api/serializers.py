# wst_core/employees/api/serializers.py
from __future__ import annotations

from rest_framework import serializers

from wst_core.employees.models import Employee, EmployeeStatus


class EmployeeSerializer(serializers.ModelSerializer):
    mainCompanyId = serializers.IntegerField(source="main_company_id", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = Employee
        fields = ["id", "name", "email", "phone", "status", "mainCompanyId", "createdAt"]
        read_only_fields = fields


class EmployeeWriteSerializer(serializers.Serializer):
    name = serializers.CharField(min_length=1, max_length=255)
    email = serializers.CharField(max_length=255, required=False, allow_blank=True, allow_null=True)
    phone = serializers.CharField(max_length=50, required=False, allow_blank=True, allow_null=True)
    status = serializers.ChoiceField(choices=EmployeeStatus.choices, required=False)
