# wst_core/positions/api/serializers.py
from __future__ import annotations

from decimal import Decimal

from rest_framework import serializers

from wst_core.positions.models import Position


class PositionSerializer(serializers.ModelSerializer):
    totalHoras = serializers.DecimalField(source="total_horas", max_digits=4, decimal_places=1, read_only=True)
    clienteId = serializers.IntegerField(source="cliente_id", read_only=True)
    clienteEmpresa = serializers.CharField(source="cliente.empresa", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = Position
        fields = [
            "id",
            "name",
            "siglas",
            "department",
            "description",
            "color",
            "totalHoras",
            "clienteId",
            "clienteEmpresa",
            "createdAt",
        ]
        read_only_fields = fields


class PositionWriteSerializer(serializers.Serializer):
    name = serializers.CharField(min_length=1, max_length=255)
    siglas = serializers.CharField(min_length=1, max_length=10)
    department = serializers.CharField(max_length=255, required=False, allow_blank=True, allow_null=True)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    color = serializers.RegexField(r"^#[0-9A-Fa-f]{6}$", max_length=7)
    totalHoras = serializers.DecimalField(
        source="total_horas", max_digits=4, decimal_places=1, min_value=Decimal("0")
    )
    clienteId = serializers.IntegerField(source="cliente_id", min_value=1)
