# wst_core/clients/filters.py
from __future__ import annotations

import django_filters

from wst_core.clients.models import Cliente


class ClienteFilter(django_filters.FilterSet):
    search = django_filters.CharFilter(field_name="empresa", lookup_expr="icontains")

    class Meta:
        model = Cliente
        fields = ["search"]
