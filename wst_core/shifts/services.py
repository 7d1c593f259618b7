# wst_core/shifts/services.py
from __future__ import annotations

from datetime import date
from typing import Optional

from django.db import IntegrityError, transaction

from wst_core.common.db import is_unique_violation
from wst_core.common.errors import NotFoundError
from wst_core.common.lifecycle import retire
from wst_core.employees.models import EmployeeStatus
from wst_core.employees.selectors import employees_qs
from wst_core.positions.selectors import positions_qs
from wst_core.shifts.conflicts import DUPLICATE_SHIFT_MSG, assert_no_conflict, conflict_error
from wst_core.shifts.models import Shift
from wst_core.shifts.selectors import get_shift_or_none


class ShiftService:
    """
    Shift writes. Tenant ownership of the shift, its employee and its position is checked
    here; double-booking is checked up front and again by the database constraint.
    """

    @staticmethod
    def _assert_employee(*, main_company_id: int, employee_id: int) -> None:
        ok = employees_qs(main_company_id=main_company_id).filter(
            id=employee_id, status=EmployeeStatus.ACTIVE
        ).exists()
        if not ok:
            raise NotFoundError("Employee not found.")

    @staticmethod
    def _assert_position(*, main_company_id: int, position_id: int) -> None:
        if not positions_qs(main_company_id=main_company_id).filter(id=position_id).exists():
            raise NotFoundError("Position not found.")

    @staticmethod
    def _save(shift: Shift) -> None:
        try:
            with transaction.atomic():
                shift.save()
        except IntegrityError as exc:
            if not is_unique_violation(exc):
                raise
            # Lost a race past the pre-check; report whoever holds the slot.
            holders = Shift.objects.select_related("employee", "position", "position__cliente").filter(
                employee_id=shift.employee_id, date=shift.date
            )
            if shift.pk:
                holders = holders.exclude(id=shift.pk)
            raise conflict_error(holders, message=DUPLICATE_SHIFT_MSG) from exc

    @staticmethod
    @transaction.atomic
    def create(
        *,
        main_company_id: int,
        employee_id: int,
        position_id: int,
        date: date,
        notes: Optional[str] = "",
    ) -> Shift:
        ShiftService._assert_employee(main_company_id=main_company_id, employee_id=employee_id)
        ShiftService._assert_position(main_company_id=main_company_id, position_id=position_id)
        assert_no_conflict(employee_id=employee_id, day=date, main_company_id=main_company_id)

        shift = Shift(employee_id=employee_id, position_id=position_id, date=date, notes=notes or "")
        ShiftService._save(shift)
        return Shift.objects.select_related("employee", "position", "position__cliente").get(id=shift.id)

    @staticmethod
    @transaction.atomic
    def update(*, main_company_id: int, shift_id: int, data: dict) -> Shift:
        shift = get_shift_or_none(shift_id=shift_id, main_company_id=main_company_id)
        if shift is None:
            raise NotFoundError("Shift not found.")

        employee_id = data.get("employee_id", shift.employee_id)
        position_id = data.get("position_id", shift.position_id)
        day = data.get("date", shift.date)

        if employee_id != shift.employee_id:
            ShiftService._assert_employee(main_company_id=main_company_id, employee_id=employee_id)
        if position_id != shift.position_id:
            ShiftService._assert_position(main_company_id=main_company_id, position_id=position_id)

        assert_no_conflict(
            employee_id=employee_id,
            day=day,
            exclude_shift_id=shift.id,
            main_company_id=main_company_id,
        )

        shift.employee_id = employee_id
        shift.position_id = position_id
        shift.date = day
        if "notes" in data:
            shift.notes = data["notes"] or ""

        ShiftService._save(shift)
        return Shift.objects.select_related("employee", "position", "position__cliente").get(id=shift.id)

    @staticmethod
    @transaction.atomic
    def delete(*, main_company_id: int, shift_id: int) -> None:
        shift = get_shift_or_none(shift_id=shift_id, main_company_id=main_company_id)
        if shift is None:
            raise NotFoundError("Shift not found.")
        retire(shift)
