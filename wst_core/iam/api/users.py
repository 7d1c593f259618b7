# wst_core/iam/api/users.py
from __future__ import annotations

from drf_spectacular.utils import extend_schema, extend_schema_view
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from wst_core.iam.api.serializers import UserCreateSerializer, UserRoleUpdateSerializer, UserSerializer
from wst_core.iam.models import User
from wst_core.iam.selectors import users_qs
from wst_core.iam.services import UserAdminService


@extend_schema_view(
    list=extend_schema(tags=["Users"], responses={200: UserSerializer(many=True)}),
    create=extend_schema(tags=["Users"], request=UserCreateSerializer, responses={201: UserSerializer}),
    update=extend_schema(tags=["Users"], request=UserRoleUpdateSerializer, responses={200: UserSerializer}),
    destroy=extend_schema(tags=["Users"], responses={204: None}),
    reset_password=extend_schema(tags=["Users"], request=None, responses={200: UserSerializer}),
)
class UserViewSet(viewsets.ViewSet):
    """
    Tenant admins managing accounts of their own company.
    """

    policy_resource = "users"
    lookup_value_regex = r"\d+"

    # ✅ critical for drf-spectacular
    serializer_class = UserSerializer
    queryset = User.objects.none()

    def list(self, request):
        qs = users_qs(main_company_id=request.auth.main_company_id)
        return Response(UserSerializer(qs, many=True).data, status=status.HTTP_200_OK)

    def create(self, request):
        ser = UserCreateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        user = UserAdminService.create(
            main_company_id=request.auth.main_company_id,
            username=ser.validated_data["username"],
            role=ser.validated_data["role"],
        )
        return Response(UserSerializer(user).data, status=status.HTTP_201_CREATED)

    def update(self, request, pk=None):
        ser = UserRoleUpdateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        user = UserAdminService.update_role(
            main_company_id=request.auth.main_company_id,
            user_id=int(pk),
            role=ser.validated_data["role"],
        )
        return Response(UserSerializer(user).data, status=status.HTTP_200_OK)

    def destroy(self, request, pk=None):
        UserAdminService.delete(
            main_company_id=request.auth.main_company_id,
            actor_id=request.auth.user.id,
            user_id=int(pk),
        )
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=True, methods=["put"], url_path="reset-password")
    def reset_password(self, request, pk=None):
        user = UserAdminService.reset_password(
            main_company_id=request.auth.main_company_id,
            user_id=int(pk),
        )
        return Response(UserSerializer(user).data, status=status.HTTP_200_OK)
