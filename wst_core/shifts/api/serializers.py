# wst_core/shifts/api/serializers.py
from __future__ import annotations

from rest_framework import serializers

from wst_core.employees.api.serializers import EmployeeSerializer
from wst_core.positions.api.serializers import PositionSerializer
from wst_core.shifts.models import Shift


class ShiftSerializer(serializers.ModelSerializer):
    """
    Shift with its employee and position (calendar cells need both).
    """

    employeeId = serializers.IntegerField(source="employee_id", read_only=True)
    positionId = serializers.IntegerField(source="position_id", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    employee = EmployeeSerializer(read_only=True)
    position = PositionSerializer(read_only=True)

    class Meta:
        model = Shift
        fields = ["id", "employeeId", "positionId", "date", "notes", "createdAt", "employee", "position"]
        read_only_fields = fields


class ShiftWriteSerializer(serializers.Serializer):
    employeeId = serializers.IntegerField(source="employee_id", min_value=1)
    positionId = serializers.IntegerField(source="position_id", min_value=1)
    date = serializers.DateField()
    notes = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class GenerateFromPreviousMonthSerializer(serializers.Serializer):
    month = serializers.IntegerField(min_value=1, max_value=12)
    year = serializers.IntegerField(min_value=2000, max_value=2100)


class GenerateResultSerializer(serializers.Serializer):
    count = serializers.IntegerField()
