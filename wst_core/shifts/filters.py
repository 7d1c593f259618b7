# wst_core/shifts/filters.py
from __future__ import annotations

import django_filters
from django import forms

from wst_core.common.dates import month_bounds
from wst_core.shifts.models import Shift


class ShiftFilterForm(forms.Form):
    def clean(self):
        cleaned = super().clean()
        month = cleaned.get("month")
        if month is not None and not 1 <= int(month) <= 12:
            raise forms.ValidationError({"month": "month must be between 1 and 12."})
        return cleaned


class ShiftFilter(django_filters.FilterSet):
    """
    Either a calendar month (?month=&year=) or an explicit range (?startDate=&endDate=).
    month/year only apply when both are present.
    """

    startDate = django_filters.DateFilter(field_name="date", lookup_expr="gte")
    endDate = django_filters.DateFilter(field_name="date", lookup_expr="lte")
    month = django_filters.NumberFilter(method="filter_month")
    year = django_filters.NumberFilter(method="filter_noop")
    employeeId = django_filters.NumberFilter(field_name="employee_id")
    positionId = django_filters.NumberFilter(field_name="position_id")

    class Meta:
        model = Shift
        form = ShiftFilterForm
        fields = ["startDate", "endDate", "month", "year", "employeeId", "positionId"]

    def filter_month(self, queryset, name, value):
        year = self.form.cleaned_data.get("year")
        if not year:
            return queryset
        first, last = month_bounds(month=int(value), year=int(year))
        return queryset.filter(date__gte=first, date__lte=last)

    def filter_noop(self, queryset, name, value):
        # year is consumed by filter_month
        return queryset
