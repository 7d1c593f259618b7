# wst_core/positions/api/views.py
from __future__ import annotations

from drf_spectacular.utils import OpenApiParameter, extend_schema, extend_schema_view
from rest_framework import status, viewsets
from rest_framework.response import Response

from wst_core.common.errors import NotFoundError
from wst_core.positions.api.serializers import PositionSerializer, PositionWriteSerializer
from wst_core.positions.models import Position
from wst_core.positions.selectors import get_position_or_none, list_positions
from wst_core.positions.services import PositionService


@extend_schema_view(
    list=extend_schema(
        tags=["Positions"],
        parameters=[
            OpenApiParameter("search", str, description="Case-insensitive match on name"),
            OpenApiParameter("clienteId", int),
        ],
        responses={200: PositionSerializer(many=True)},
    ),
    retrieve=extend_schema(tags=["Positions"], responses={200: PositionSerializer}),
    create=extend_schema(tags=["Positions"], request=PositionWriteSerializer, responses={201: PositionSerializer}),
    update=extend_schema(tags=["Positions"], request=PositionWriteSerializer, responses={200: PositionSerializer}),
    destroy=extend_schema(tags=["Positions"], responses={204: None}),
)
class PositionViewSet(viewsets.ViewSet):
    policy_resource = "positions"
    lookup_value_regex = r"\d+"

    serializer_class = PositionSerializer
    queryset = Position.objects.none()

    def list(self, request):
        qs = list_positions(main_company_id=request.auth.company_filter, params=request.query_params)
        return Response(PositionSerializer(qs, many=True).data, status=status.HTTP_200_OK)

    def retrieve(self, request, pk=None):
        position = get_position_or_none(position_id=int(pk), main_company_id=request.auth.company_filter)
        if position is None:
            raise NotFoundError("Position not found.")
        return Response(PositionSerializer(position).data, status=status.HTTP_200_OK)

    def create(self, request):
        ser = PositionWriteSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        data = dict(ser.validated_data)
        cliente_id = data.pop("cliente_id")
        position = PositionService.create(
            main_company_id=request.auth.main_company_id,
            cliente_id=cliente_id,
            data=data,
        )
        return Response(PositionSerializer(position).data, status=status.HTTP_201_CREATED)

    def update(self, request, pk=None):
        ser = PositionWriteSerializer(data=request.data, partial=True)
        ser.is_valid(raise_exception=True)

        position = PositionService.update(
            main_company_id=request.auth.main_company_id,
            position_id=int(pk),
            data=ser.validated_data,
        )
        return Response(PositionSerializer(position).data, status=status.HTTP_200_OK)

    def destroy(self, request, pk=None):
        PositionService.delete(main_company_id=request.auth.main_company_id, position_id=int(pk))
        return Response(status=status.HTTP_204_NO_CONTENT)
