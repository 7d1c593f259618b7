# wst_core/clients/selectors.py
from __future__ import annotations

from typing import Optional

from django.db.models import QuerySet
from rest_framework.exceptions import ValidationError

from wst_core.clients.filters import ClienteFilter
from wst_core.clients.models import Cliente


def clientes_qs(*, main_company_id: Optional[int]) -> QuerySet[Cliente]:
    qs = Cliente.objects.alive()
    if main_company_id is not None:
        qs = qs.filter(main_company_id=main_company_id)
    return qs


def get_cliente_or_none(*, cliente_id: int, main_company_id: Optional[int]) -> Optional[Cliente]:
    return clientes_qs(main_company_id=main_company_id).filter(id=cliente_id).first()


def list_clientes(*, main_company_id: Optional[int], params) -> QuerySet[Cliente]:
    f = ClienteFilter(params, queryset=clientes_qs(main_company_id=main_company_id))
    if not f.is_valid():
        raise ValidationError(f.errors)
    return f.qs.order_by("empresa", "id")
