# wst_core/employees/services.py
from __future__ import annotations

from django.db import transaction

from wst_core.common.errors import NotFoundError
from wst_core.common.lifecycle import retire
from wst_core.employees.models import Employee, EmployeeStatus
from wst_core.employees.selectors import employees_qs

EDITABLE_FIELDS = {"name", "email", "phone", "status"}


class EmployeeService:
    @staticmethod
    def _get(*, main_company_id: int, employee_id: int, lock: bool = False) -> Employee:
        qs = employees_qs(main_company_id=main_company_id)
        if lock:
            qs = qs.select_for_update()
        employee = qs.filter(id=employee_id).first()
        if employee is None:
            raise NotFoundError("Employee not found.")
        return employee

    @staticmethod
    @transaction.atomic
    def create(
        *,
        main_company_id: int,
        name: str,
        email: str = "",
        phone: str = "",
        status: str = EmployeeStatus.ACTIVE,
    ) -> Employee:
        return Employee.objects.create(
            main_company_id=main_company_id,
            name=name.strip(),
            email=email or "",
            phone=phone or "",
            status=status or EmployeeStatus.ACTIVE,
        )

    @staticmethod
    @transaction.atomic
    def update(*, main_company_id: int, employee_id: int, data: dict) -> Employee:
        employee = EmployeeService._get(main_company_id=main_company_id, employee_id=employee_id, lock=True)

        updates = {k: v for k, v in (data or {}).items() if k in EDITABLE_FIELDS}
        for k, v in updates.items():
            setattr(employee, k, v if v is not None else "")

        if updates:
            employee.save(update_fields=list(updates))
        return employee

    @staticmethod
    @transaction.atomic
    def deactivate(*, main_company_id: int, employee_id: int) -> Employee:
        employee = EmployeeService._get(main_company_id=main_company_id, employee_id=employee_id, lock=True)
        retire(employee)
        return employee
