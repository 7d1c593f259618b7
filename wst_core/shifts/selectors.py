# wst_core/shifts/selectors.py
from __future__ import annotations

from datetime import date
from typing import Optional

from django.db.models import QuerySet
from rest_framework.exceptions import ValidationError

from wst_core.employees.models import EmployeeStatus
from wst_core.shifts.filters import ShiftFilter
from wst_core.shifts.models import Shift


def shifts_qs(*, main_company_id: Optional[int]) -> QuerySet[Shift]:
    """
    Visible shifts: active employees on non-deleted positions, tenant-scoped unless super_admin.
    """
    qs = Shift.objects.select_related("employee", "position", "position__cliente").filter(
        employee__status=EmployeeStatus.ACTIVE,
        position__deleted_at__isnull=True,
    )
    if main_company_id is not None:
        qs = qs.filter(employee__main_company_id=main_company_id)
    return qs


def owned_shifts_qs(*, main_company_id: Optional[int]) -> QuerySet[Shift]:
    """
    Every shift the tenant owns regardless of employee status (write paths).
    """
    qs = Shift.objects.select_related("employee", "position", "position__cliente")
    if main_company_id is not None:
        qs = qs.filter(employee__main_company_id=main_company_id)
    return qs


def get_shift_or_none(*, shift_id: int, main_company_id: Optional[int]) -> Optional[Shift]:
    return owned_shifts_qs(main_company_id=main_company_id).filter(id=shift_id).first()


def list_shifts(*, main_company_id: Optional[int], params) -> QuerySet[Shift]:
    f = ShiftFilter(params, queryset=shifts_qs(main_company_id=main_company_id))
    if not f.is_valid():
        raise ValidationError(f.errors)
    return f.qs.order_by("date", "employee__name", "id")


def shifts_on(*, day: date, main_company_id: Optional[int]) -> QuerySet[Shift]:
    return shifts_qs(main_company_id=main_company_id).filter(date=day).order_by("employee__name", "id")
