# wst_core/positions/selectors.py
from __future__ import annotations

from typing import Optional

from django.db.models import QuerySet
from rest_framework.exceptions import ValidationError

from wst_core.positions.filters import PositionFilter
from wst_core.positions.models import Position


def positions_qs(*, main_company_id: Optional[int]) -> QuerySet[Position]:
    qs = Position.objects.alive().select_related("cliente")
    if main_company_id is not None:
        qs = qs.filter(cliente__main_company_id=main_company_id)
    return qs


def get_position_or_none(*, position_id: int, main_company_id: Optional[int]) -> Optional[Position]:
    return positions_qs(main_company_id=main_company_id).filter(id=position_id).first()


def list_positions(*, main_company_id: Optional[int], params) -> QuerySet[Position]:
    f = PositionFilter(params, queryset=positions_qs(main_company_id=main_company_id))
    if not f.is_valid():
        raise ValidationError(f.errors)
    return f.qs.order_by("name", "id")
