# wst_core/shifts/api/views.py
from __future__ import annotations

from datetime import date

from drf_spectacular.utils import OpenApiParameter, extend_schema, extend_schema_view
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response

from wst_core.common.errors import NotFoundError
from wst_core.shifts.api.serializers import (
    GenerateFromPreviousMonthSerializer,
    GenerateResultSerializer,
    ShiftSerializer,
    ShiftWriteSerializer,
)
from wst_core.shifts.generation import generate_from_previous_month
from wst_core.shifts.models import Shift
from wst_core.shifts.selectors import get_shift_or_none, list_shifts, shifts_on
from wst_core.shifts.services import ShiftService


@extend_schema_view(
    list=extend_schema(
        tags=["Shifts"],
        parameters=[
            OpenApiParameter("month", int),
            OpenApiParameter("year", int),
            OpenApiParameter("startDate", str, description="YYYY-MM-DD"),
            OpenApiParameter("endDate", str, description="YYYY-MM-DD"),
            OpenApiParameter("employeeId", int),
            OpenApiParameter("positionId", int),
        ],
        responses={200: ShiftSerializer(many=True)},
    ),
    retrieve=extend_schema(tags=["Shifts"], responses={200: ShiftSerializer}),
    create=extend_schema(tags=["Shifts"], request=ShiftWriteSerializer, responses={201: ShiftSerializer}),
    update=extend_schema(tags=["Shifts"], request=ShiftWriteSerializer, responses={200: ShiftSerializer}),
    destroy=extend_schema(tags=["Shifts"], responses={204: None}),
    by_date=extend_schema(tags=["Shifts"], responses={200: ShiftSerializer(many=True)}),
    generate_from_previous_month=extend_schema(
        tags=["Shifts"],
        request=GenerateFromPreviousMonthSerializer,
        responses={200: GenerateResultSerializer},
    ),
)
class ShiftViewSet(viewsets.ViewSet):
    policy_resource = "shifts"
    lookup_value_regex = r"\d+"

    # ✅ critical for drf-spectacular
    serializer_class = ShiftSerializer
    queryset = Shift.objects.none()

    def list(self, request):
        qs = list_shifts(main_company_id=request.auth.company_filter, params=request.query_params)
        return Response(ShiftSerializer(qs, many=True).data, status=status.HTTP_200_OK)

    def retrieve(self, request, pk=None):
        shift = get_shift_or_none(shift_id=int(pk), main_company_id=request.auth.company_filter)
        if shift is None:
            raise NotFoundError("Shift not found.")
        return Response(ShiftSerializer(shift).data, status=status.HTTP_200_OK)

    def create(self, request):
        ser = ShiftWriteSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        shift = ShiftService.create(main_company_id=request.auth.main_company_id, **ser.validated_data)
        return Response(ShiftSerializer(shift).data, status=status.HTTP_201_CREATED)

    def update(self, request, pk=None):
        ser = ShiftWriteSerializer(data=request.data, partial=True)
        ser.is_valid(raise_exception=True)

        shift = ShiftService.update(
            main_company_id=request.auth.main_company_id,
            shift_id=int(pk),
            data=ser.validated_data,
        )
        return Response(ShiftSerializer(shift).data, status=status.HTTP_200_OK)

    def destroy(self, request, pk=None):
        ShiftService.delete(main_company_id=request.auth.main_company_id, shift_id=int(pk))
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=False, methods=["get"], url_path=r"date/(?P<day>\d{4}-\d{2}-\d{2})")
    def by_date(self, request, day=None):
        try:
            parsed = date.fromisoformat(day)
        except ValueError:
            raise ValidationError({"date": "Invalid date. Use YYYY-MM-DD."})

        qs = shifts_on(day=parsed, main_company_id=request.auth.company_filter)
        return Response(ShiftSerializer(qs, many=True).data, status=status.HTTP_200_OK)

    @action(detail=False, methods=["post"], url_path="generate-from-previous-month")
    def generate_from_previous_month(self, request):
        ser = GenerateFromPreviousMonthSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        result = generate_from_previous_month(
            main_company_id=request.auth.main_company_id,
            month=ser.validated_data["month"],
            year=ser.validated_data["year"],
        )
        return Response({"count": result.count}, status=status.HTTP_200_OK)
