# wst_core/clients/api/serializers.py
from __future__ import annotations

from rest_framework import serializers

from wst_core.clients.models import Cliente


class ClienteSerializer(serializers.ModelSerializer):
    nombreContacto = serializers.CharField(source="nombre_contacto", read_only=True)
    mainCompanyId = serializers.IntegerField(source="main_company_id", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = Cliente
        fields = [
            "id",
            "empresa",
            "direccion",
            "localidad",
            "nombreContacto",
            "telefono",
            "email",
            "mainCompanyId",
            "createdAt",
        ]
        read_only_fields = fields


class ClienteWriteSerializer(serializers.Serializer):
    empresa = serializers.CharField(min_length=1, max_length=100)
    direccion = serializers.CharField(max_length=150, required=False, allow_blank=True, allow_null=True)
    localidad = serializers.CharField(max_length=100, required=False, allow_blank=True, allow_null=True)
    nombreContacto = serializers.CharField(
        source="nombre_contacto", max_length=100, required=False, allow_blank=True, allow_null=True
    )
    telefono = serializers.CharField(max_length=30, required=False, allow_blank=True, allow_null=True)
    email = serializers.EmailField(max_length=100, required=False, allow_blank=True, allow_null=True)
