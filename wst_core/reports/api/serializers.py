# wst_core/reports/api/serializers.py
from __future__ import annotations

from rest_framework import serializers


class ReportQuerySerializer(serializers.Serializer):
    month = serializers.IntegerField(min_value=1, max_value=12, required=False)
    year = serializers.IntegerField(min_value=2000, max_value=2100, required=False)
    employeeId = serializers.IntegerField(min_value=1, required=False)
    clientId = serializers.IntegerField(min_value=1, required=False)


class ExportQuerySerializer(ReportQuerySerializer):
    month = serializers.IntegerField(min_value=1, max_value=12)
    year = serializers.IntegerField(min_value=2000, max_value=2100)


class PositionHoursSerializer(serializers.Serializer):
    positionId = serializers.IntegerField(source="position_id")
    name = serializers.CharField()
    siglas = serializers.CharField()
    color = serializers.CharField()
    totalHoras = serializers.FloatField(source="total_horas")


class EmployeeHoursSerializer(serializers.Serializer):
    employeeId = serializers.IntegerField(source="employee_id")
    employeeName = serializers.CharField(source="employee_name")
    totalHours = serializers.FloatField(source="total_hours")
    totalShifts = serializers.IntegerField(source="total_shifts")
    shiftBreakdown = PositionHoursSerializer(source="shift_breakdown", many=True)
