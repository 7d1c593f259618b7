# wst_core/sentinel/api/views.py
from __future__ import annotations

import logging

from drf_spectacular.utils import OpenApiParameter, extend_schema, extend_schema_view
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework.views import APIView

from wst_core.iam.api.auth import MessageSerializer
from wst_core.iam.api.serializers import UserSerializer
from wst_core.sentinel.api.serializers import (
    ActiveSessionSerializer,
    LoginHistoryPointSerializer,
    LoginHistoryQuerySerializer,
    MainCompanySerializer,
    MainCompanyUpdateSerializer,
    MainCompanyWithAdminsSerializer,
    MainCompanyWriteSerializer,
    ProvisionResultSerializer,
    StatsSerializer,
)
from wst_core.sentinel.selectors import active_sessions, login_history, login_window, platform_stats
from wst_core.tenants.models import MainCompany
from wst_core.tenants.selectors import companies_with_admins_qs
from wst_core.tenants.services import CompanyService

logger = logging.getLogger(__name__)


@extend_schema_view(
    list=extend_schema(tags=["Sentinel"], responses={200: MainCompanyWithAdminsSerializer(many=True)}),
    create=extend_schema(
        tags=["Sentinel"], request=MainCompanyWriteSerializer, responses={201: ProvisionResultSerializer}
    ),
    update=extend_schema(
        tags=["Sentinel"], request=MainCompanyUpdateSerializer, responses={200: MainCompanyWithAdminsSerializer}
    ),
    destroy=extend_schema(tags=["Sentinel"], responses={204: None}),
    reset_admin_password=extend_schema(tags=["Sentinel"], request=None, responses={200: MessageSerializer}),
)
class MainCompanyViewSet(viewsets.ViewSet):
    """
    Tenant provisioning and lifecycle (super_admin).
    """

    policy_resource = "sentinel.companies"
    lookup_value_regex = r"\d+"

    # ✅ critical for drf-spectacular
    serializer_class = MainCompanyWithAdminsSerializer
    queryset = MainCompany.objects.none()

    def list(self, request):
        qs = companies_with_admins_qs()
        return Response(MainCompanyWithAdminsSerializer(qs, many=True).data, status=status.HTTP_200_OK)

    def create(self, request):
        ser = MainCompanyWriteSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        company, admin = CompanyService.provision(**ser.validated_data)
        return Response(
            {
                "message": "Main company and admin user created successfully",
                "company": MainCompanySerializer(company).data,
                "adminUser": UserSerializer(admin).data,
            },
            status=status.HTTP_201_CREATED,
        )

    def update(self, request, pk=None):
        ser = MainCompanyUpdateSerializer(data=request.data, partial=True)
        ser.is_valid(raise_exception=True)

        company = CompanyService.update(company_id=int(pk), **ser.validated_data)
        return Response(MainCompanyWithAdminsSerializer(company).data, status=status.HTTP_200_OK)

    def destroy(self, request, pk=None):
        CompanyService.soft_delete(company_id=int(pk))
        logger.info("company soft-deleted id=%s by=%s", pk, request.auth.user.username)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=True, methods=["put"], url_path="reset-admin-password")
    def reset_admin_password(self, request, pk=None):
        CompanyService.reset_admin_password(company_id=int(pk))
        return Response({"message": "Admin password reset successfully."}, status=status.HTTP_200_OK)


class StatsView(APIView):
    policy_resource = "sentinel.stats"

    @extend_schema(responses={200: StatsSerializer}, tags=["Sentinel"])
    def get(self, request):
        return Response(platform_stats(), status=status.HTTP_200_OK)


class ActiveSessionsView(APIView):
    policy_resource = "sentinel.active_sessions"

    @extend_schema(responses={200: ActiveSessionSerializer(many=True)}, tags=["Sentinel"])
    def get(self, request):
        return Response(ActiveSessionSerializer(active_sessions(), many=True).data, status=status.HTTP_200_OK)


class LoginHistoryView(APIView):
    policy_resource = "sentinel.login_history"

    @extend_schema(
        parameters=[
            OpenApiParameter("period", str, enum=["day", "week", "month", "year", "custom"], description="Defaults to week"),
            OpenApiParameter("startDate", str, description="YYYY-MM-DD; anchor day, or range start for custom"),
            OpenApiParameter("endDate", str, description="YYYY-MM-DD; range end for custom"),
        ],
        responses={200: LoginHistoryPointSerializer(many=True)},
        tags=["Sentinel"],
    )
    def get(self, request):
        q = LoginHistoryQuerySerializer(data=request.query_params)
        q.is_valid(raise_exception=True)

        start, end = login_window(
            period=q.validated_data["period"],
            start=q.validated_data.get("startDate"),
            end=q.validated_data.get("endDate"),
        )
        return Response(login_history(start=start, end=end), status=status.HTTP_200_OK)
