# wst_core/clients/api/views.py
from __future__ import annotations

from drf_spectacular.utils import OpenApiParameter, extend_schema, extend_schema_view
from rest_framework import status, viewsets
from rest_framework.response import Response

from wst_core.clients.api.serializers import ClienteSerializer, ClienteWriteSerializer
from wst_core.clients.models import Cliente
from wst_core.clients.selectors import get_cliente_or_none, list_clientes
from wst_core.clients.services import ClienteService
from wst_core.common.errors import NotFoundError


@extend_schema_view(
    list=extend_schema(
        tags=["Clientes"],
        parameters=[OpenApiParameter("search", str, description="Case-insensitive match on empresa")],
        responses={200: ClienteSerializer(many=True)},
    ),
    retrieve=extend_schema(tags=["Clientes"], responses={200: ClienteSerializer}),
    create=extend_schema(tags=["Clientes"], request=ClienteWriteSerializer, responses={201: ClienteSerializer}),
    update=extend_schema(tags=["Clientes"], request=ClienteWriteSerializer, responses={200: ClienteSerializer}),
    destroy=extend_schema(tags=["Clientes"], responses={204: None}),
)
class ClienteViewSet(viewsets.ViewSet):
    policy_resource = "clientes"
    lookup_value_regex = r"\d+"

    serializer_class = ClienteSerializer
    queryset = Cliente.objects.none()

    def list(self, request):
        qs = list_clientes(main_company_id=request.auth.company_filter, params=request.query_params)
        return Response(ClienteSerializer(qs, many=True).data, status=status.HTTP_200_OK)

    def retrieve(self, request, pk=None):
        cliente = get_cliente_or_none(cliente_id=int(pk), main_company_id=request.auth.company_filter)
        if cliente is None:
            raise NotFoundError("Cliente not found.")
        return Response(ClienteSerializer(cliente).data, status=status.HTTP_200_OK)

    def create(self, request):
        ser = ClienteWriteSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        cliente = ClienteService.create(main_company_id=request.auth.main_company_id, data=ser.validated_data)
        return Response(ClienteSerializer(cliente).data, status=status.HTTP_201_CREATED)

    def update(self, request, pk=None):
        ser = ClienteWriteSerializer(data=request.data, partial=True)
        ser.is_valid(raise_exception=True)

        cliente = ClienteService.update(
            main_company_id=request.auth.main_company_id,
            cliente_id=int(pk),
            data=ser.validated_data,
        )
        return Response(ClienteSerializer(cliente).data, status=status.HTTP_200_OK)

    def destroy(self, request, pk=None):
        ClienteService.delete(main_company_id=request.auth.main_company_id, cliente_id=int(pk))
        return Response(status=status.HTTP_204_NO_CONTENT)
