# wst_core/employees/filters.py
from __future__ import annotations

import django_filters

from wst_core.employees.models import Employee, EmployeeStatus

STATUS_ALL = "all"


class EmployeeFilter(django_filters.FilterSet):
    search = django_filters.CharFilter(field_name="name", lookup_expr="icontains")
    status = django_filters.ChoiceFilter(
        choices=[*EmployeeStatus.choices, (STATUS_ALL, "All")],
        method="filter_status",
    )

    class Meta:
        model = Employee
        fields = ["search", "status"]

    def filter_status(self, queryset, name, value):
        if value == STATUS_ALL:
            return queryset
        return queryset.filter(status=value)
