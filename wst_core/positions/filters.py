# wst_core/positions/filters.py
from __future__ import annotations

import django_filters

from wst_core.positions.models import Position


class PositionFilter(django_filters.FilterSet):
    search = django_filters.CharFilter(field_name="name", lookup_expr="icontains")
    clienteId = django_filters.NumberFilter(field_name="cliente_id")

    class Meta:
        model = Position
        fields = ["search", "clienteId"]
