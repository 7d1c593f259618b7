# wst_core/employees/selectors.py
from __future__ import annotations

from typing import Optional

from django.db.models import QuerySet
from rest_framework.exceptions import ValidationError

from wst_core.employees.filters import EmployeeFilter
from wst_core.employees.models import Employee, EmployeeStatus


def employees_qs(*, main_company_id: Optional[int]) -> QuerySet[Employee]:
    qs = Employee.objects.all()
    if main_company_id is not None:
        qs = qs.filter(main_company_id=main_company_id)
    return qs


def get_employee_or_none(*, employee_id: int, main_company_id: Optional[int]) -> Optional[Employee]:
    return employees_qs(main_company_id=main_company_id).filter(id=employee_id).first()


def list_employees(*, main_company_id: Optional[int], params) -> QuerySet[Employee]:
    """
    Defaults to active employees; `status=all` lifts the filter.
    """
    data = params.copy()
    if not data.get("status"):
        data["status"] = EmployeeStatus.ACTIVE

    f = EmployeeFilter(data, queryset=employees_qs(main_company_id=main_company_id))
    if not f.is_valid():
        raise ValidationError(f.errors)
    return f.qs.order_by("name", "id")
