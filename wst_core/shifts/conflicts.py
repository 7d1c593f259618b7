# wst_core/shifts/conflicts.py
"""
Double-booking detection for shifts.

find_conflicts() is the pre-check: other shifts for the same employee on the same day
(active employee, non-deleted position), optionally excluding the shift being edited and
optionally tenant-scoped. The database constraint uq_shift_employee_date is the backstop;
conflict_error() builds the single ConflictError both paths raise.
"""
from __future__ import annotations

from datetime import date
from typing import Optional

from django.db.models import QuerySet

from wst_core.common.errors import ConflictError
from wst_core.employees.models import EmployeeStatus
from wst_core.shifts.models import Shift

CONFLICT_MSG = "Shift conflict detected"
DUPLICATE_SHIFT_MSG = "A shift already exists for this employee on this date."


def find_conflicts(
    *,
    employee_id: int,
    day: date,
    exclude_shift_id: Optional[int] = None,
    main_company_id: Optional[int] = None,
) -> QuerySet[Shift]:
    qs = Shift.objects.select_related("employee", "position", "position__cliente").filter(
        employee_id=employee_id,
        date=day,
        employee__status=EmployeeStatus.ACTIVE,
        position__deleted_at__isnull=True,
    )
    if exclude_shift_id is not None:
        qs = qs.exclude(id=exclude_shift_id)
    if main_company_id is not None:
        qs = qs.filter(employee__main_company_id=main_company_id)
    return qs.order_by("id")


def conflict_error(conflicts, *, message: str = CONFLICT_MSG) -> ConflictError:
    from wst_core.shifts.api.serializers import ShiftSerializer

    return ConflictError(message, conflicts=ShiftSerializer(list(conflicts), many=True).data)


def assert_no_conflict(
    *,
    employee_id: int,
    day: date,
    exclude_shift_id: Optional[int] = None,
    main_company_id: Optional[int] = None,
) -> None:
    conflicts = find_conflicts(
        employee_id=employee_id,
        day=day,
        exclude_shift_id=exclude_shift_id,
        main_company_id=main_company_id,
    )
    if conflicts.exists():
        raise conflict_error(conflicts)
