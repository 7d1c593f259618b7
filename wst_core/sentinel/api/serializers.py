# wst_core/sentinel/api/serializers.py
from __future__ import annotations

from datetime import date

from django.utils.dateparse import parse_date, parse_datetime
from rest_framework import serializers

from wst_core.common.policy import ROLE_ADMIN
from wst_core.iam.api.serializers import UserSerializer
from wst_core.sentinel.selectors import DEFAULT_LOGIN_PERIOD, LOGIN_PERIODS
from wst_core.tenants.billing import company_status_for
from wst_core.tenants.models import MainCompany, PaymentControl

_TEXT_FIELDS = ("country", "province", "city", "address", "tax_id", "contact_name", "phone", "email")


class MainCompanySerializer(serializers.ModelSerializer):
    paymentControl = serializers.CharField(source="payment_control", read_only=True)
    lastPaymentDate = serializers.DateField(source="last_payment_date", read_only=True, allow_null=True)
    isActive = serializers.BooleanField(source="is_active", read_only=True)
    needsSetup = serializers.BooleanField(source="needs_setup", read_only=True)
    taxId = serializers.CharField(source="tax_id", read_only=True)
    contactName = serializers.CharField(source="contact_name", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = MainCompany
        fields = [
            "id",
            "name",
            "paymentControl",
            "lastPaymentDate",
            "isActive",
            "needsSetup",
            "country",
            "province",
            "city",
            "address",
            "taxId",
            "contactName",
            "phone",
            "email",
            "createdAt",
            "updatedAt",
        ]
        read_only_fields = fields


class MainCompanyWithAdminsSerializer(MainCompanySerializer):
    users = serializers.SerializerMethodField()
    companyStatus = serializers.SerializerMethodField()

    class Meta(MainCompanySerializer.Meta):
        fields = [*MainCompanySerializer.Meta.fields, "users", "companyStatus"]
        read_only_fields = fields

    def get_users(self, obj) -> list:
        admins = getattr(obj, "admin_users", None)
        if admins is None:
            admins = obj.users.filter(role=ROLE_ADMIN).order_by("username")
        return UserSerializer(admins, many=True).data

    def get_companyStatus(self, obj) -> dict:
        return company_status_for(obj).as_payload()


class MainCompanyWriteSerializer(serializers.Serializer):
    """
    Create needs name + adminUsername; update is partial.
    """

    name = serializers.CharField(min_length=1, max_length=255)
    adminUsername = serializers.CharField(source="admin_username", min_length=3, max_length=150)
    paymentControl = serializers.ChoiceField(source="payment_control", choices=PaymentControl.choices, required=False)
    lastPaymentDate = serializers.DateField(source="last_payment_date", required=False, allow_null=True)
    isActive = serializers.BooleanField(source="is_active", required=False)
    needsSetup = serializers.BooleanField(source="needs_setup", required=False)
    country = serializers.CharField(max_length=100, required=False, allow_blank=True, allow_null=True)
    province = serializers.CharField(max_length=100, required=False, allow_blank=True, allow_null=True)
    city = serializers.CharField(max_length=100, required=False, allow_blank=True, allow_null=True)
    address = serializers.CharField(max_length=255, required=False, allow_blank=True, allow_null=True)
    taxId = serializers.CharField(source="tax_id", max_length=50, required=False, allow_blank=True, allow_null=True)
    contactName = serializers.CharField(
        source="contact_name", max_length=150, required=False, allow_blank=True, allow_null=True
    )
    phone = serializers.CharField(max_length=50, required=False, allow_blank=True, allow_null=True)
    email = serializers.EmailField(max_length=150, required=False, allow_blank=True, allow_null=True)

    def validate(self, attrs):
        for key in _TEXT_FIELDS:
            if key in attrs and attrs[key] is None:
                attrs[key] = ""
        return attrs


class MainCompanyUpdateSerializer(MainCompanyWriteSerializer):
    adminUsername = None


class ProvisionResultSerializer(serializers.Serializer):
    message = serializers.CharField()
    company = MainCompanySerializer()
    adminUser = UserSerializer()


class StatsSerializer(serializers.Serializer):
    totalEmployees = serializers.IntegerField()
    totalClients = serializers.IntegerField()
    totalShiftsLast30Days = serializers.IntegerField()


class ActiveSessionSerializer(serializers.Serializer):
    sessionId = serializers.CharField(source="session_id")
    username = serializers.CharField()
    role = serializers.CharField()
    companyName = serializers.CharField(source="company_name", allow_null=True)
    expire = serializers.DateTimeField()


class _LooseDateField(serializers.CharField):
    """
    Accepts YYYY-MM-DD or a full ISO datetime; keeps the calendar day.
    """

    def to_internal_value(self, data) -> date:
        value = super().to_internal_value(data)
        try:
            parsed = parse_datetime(value)
            if parsed is not None:
                return parsed.date()
            parsed_day = parse_date(value)
        except ValueError:
            parsed_day = None
        if parsed_day is None:
            raise serializers.ValidationError("Invalid date. Use YYYY-MM-DD.")
        return parsed_day


class LoginHistoryQuerySerializer(serializers.Serializer):
    period = serializers.ChoiceField(choices=LOGIN_PERIODS, required=False, default=DEFAULT_LOGIN_PERIOD)
    startDate = _LooseDateField(required=False)
    endDate = _LooseDateField(required=False)


class LoginHistoryPointSerializer(serializers.Serializer):
    date = serializers.DateField()
    logins = serializers.IntegerField()
