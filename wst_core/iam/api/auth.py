# wst_core/iam/api/auth.py

from __future__ import annotations

import logging

from django.conf import settings
from drf_spectacular.utils import extend_schema, inline_serializer
from rest_framework import serializers, status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from wst_core.iam.api.serializers import LoginRequestSerializer, SessionUserSerializer, SetPasswordSerializer
from wst_core.iam.auth import SESSION_PENDING_PASSWORD_CHANGE, end_session, start_session
from wst_core.iam.services import AuthService
from wst_core.tenants.billing import company_status_for
from wst_core.tenants.services import CompanyService

logger = logging.getLogger(__name__)

MessageSerializer = inline_serializer(name="Message", fields={"message": serializers.CharField()})


def client_ip(request) -> str:
    forwarded = request.META.get("HTTP_X_FORWARDED_FOR")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.META.get("REMOTE_ADDR", "") or ""


class LoginView(APIView):
    permission_classes = [AllowAny]

    @extend_schema(request=LoginRequestSerializer, responses={200: SessionUserSerializer}, tags=["Auth"])
    def post(self, request):
        ser = LoginRequestSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        user = AuthService.login(
            username=ser.validated_data["username"],
            password=ser.validated_data["password"],
            ip_address=client_ip(request),
        )

        max_age = (
            settings.WST_REMEMBER_ME_AGE_SECONDS
            if ser.validated_data.get("rememberMe")
            else settings.WST_SESSION_AGE_SECONDS
        )
        start_session(request, user, max_age=max_age)

        return Response(
            {"message": "Login successful", "user": SessionUserSerializer(user).data},
            status=status.HTTP_200_OK,
        )


class LogoutView(APIView):
    permission_classes = [AllowAny]

    @extend_schema(request=None, responses={200: MessageSerializer}, tags=["Auth"])
    def post(self, request):
        user = getattr(request, "user", None)
        if getattr(user, "is_authenticated", False):
            logger.info("logout username=%s", user.username)
        end_session(request)
        return Response({"message": "Logged out successfully"}, status=status.HTTP_200_OK)


class MeView(APIView):
    policy_resource = "auth.me"
    payment_exempt = True

    @extend_schema(request=None, responses={200: SessionUserSerializer}, tags=["Auth"])
    def get(self, request):
        """
        Current user plus the tenant's subscription status.
        Reachable even when the subscription is blocked, so the client can show why.
        """
        ctx = request.auth
        payload = dict(SessionUserSerializer(ctx.user).data)
        payload["companyStatus"] = ctx.company_status.as_payload() if ctx.company_status else None
        return Response(payload, status=status.HTTP_200_OK)


class SetPasswordView(APIView):
    policy_resource = "auth.set_password"
    payment_exempt = True

    @extend_schema(request=SetPasswordSerializer, responses={200: MessageSerializer}, tags=["Auth"])
    def post(self, request):
        ser = SetPasswordSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        AuthService.change_password(
            user=request.auth.user,
            old_password=ser.validated_data["oldPassword"],
            new_password=ser.validated_data["newPassword"],
        )
        request.session[SESSION_PENDING_PASSWORD_CHANGE] = False
        return Response({"message": "Password updated successfully"}, status=status.HTTP_200_OK)


class CompleteSetupView(APIView):
    policy_resource = "auth.complete_setup"
    payment_exempt = True

    @extend_schema(request=None, responses={200: MessageSerializer}, tags=["Auth"])
    def put(self, request):
        company = CompanyService.complete_setup(company_id=request.auth.main_company_id)
        return Response(
            {"message": "Setup completed", "companyStatus": company_status_for(company).as_payload()},
            status=status.HTTP_200_OK,
        )
