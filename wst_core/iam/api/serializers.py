# wst_core/iam/api/serializers.py
from __future__ import annotations

from rest_framework import serializers

from wst_core.iam.models import Role, User


class LoginRequestSerializer(serializers.Serializer):
    username = serializers.CharField(min_length=1, max_length=150)
    password = serializers.CharField(min_length=6, write_only=True)
    rememberMe = serializers.BooleanField(required=False, default=False)


class SessionUserSerializer(serializers.ModelSerializer):
    mainCompanyId = serializers.IntegerField(source="main_company_id", read_only=True, allow_null=True)
    mustChangePassword = serializers.BooleanField(source="must_change_password", read_only=True)

    class Meta:
        model = User
        fields = ["id", "username", "role", "mainCompanyId", "mustChangePassword"]
        read_only_fields = fields


class SetPasswordSerializer(serializers.Serializer):
    oldPassword = serializers.CharField(min_length=1, write_only=True)
    newPassword = serializers.CharField(min_length=8, write_only=True)
    confirmPassword = serializers.CharField(min_length=1, write_only=True)

    def validate(self, attrs):
        if attrs["newPassword"] != attrs["confirmPassword"]:
            raise serializers.ValidationError({"confirmPassword": "Passwords do not match."})
        return attrs


class UserSerializer(serializers.ModelSerializer):
    mainCompanyId = serializers.IntegerField(source="main_company_id", read_only=True, allow_null=True)
    mustChangePassword = serializers.BooleanField(source="must_change_password", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = User
        fields = ["id", "username", "role", "mainCompanyId", "mustChangePassword", "createdAt"]
        read_only_fields = fields


class UserCreateSerializer(serializers.Serializer):
    username = serializers.CharField(min_length=3, max_length=150)
    role = serializers.ChoiceField(choices=Role.choices)


class UserRoleUpdateSerializer(serializers.Serializer):
    role = serializers.ChoiceField(choices=Role.choices)
