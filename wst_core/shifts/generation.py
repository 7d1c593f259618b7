# wst_core/shifts/generation.py
"""
"Autofill" of a month from the month before it.

For each previous-month shift (active employee, live position), move the date forward one
calendar month and keep it when:
  - it lands inside the target month,
  - the (employee, day) slot is free (existing target shifts and shifts planned in this run),
  - the employee's running hours + the position's hours stay within their budget.

Budget = the employee's previous-month hours, fixed for the whole run.
Running hours start at what the employee already has in the target month.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from django.db import IntegrityError, transaction

from wst_core.common.dates import add_months, previous_month
from wst_core.common.db import is_unique_violation
from wst_core.reports.selectors import hours_by_employee
from wst_core.shifts.models import Shift
from wst_core.shifts.selectors import owned_shifts_qs, shifts_qs

logger = logging.getLogger(__name__)

# Used when the previous-month report gives an employee no (or zero) hours.
# Kept from the legacy behaviour; it is not derived from contracts or positions.
DEFAULT_MONTHLY_HOURS_BUDGET = Decimal("160")


@dataclass(frozen=True)
class GenerationResult:
    count: int
    planned: int
    skipped_occupied: int
    skipped_budget: int
    skipped_out_of_month: int


def _plan(*, main_company_id: Optional[int], month: int, year: int) -> tuple[list[Shift], dict[str, int]]:
    prev_month, prev_year = previous_month(month=month, year=year)

    budgets = hours_by_employee(main_company_id=main_company_id, month=prev_month, year=prev_year)
    running = dict(hours_by_employee(main_company_id=main_company_id, month=month, year=year))

    existing = owned_shifts_qs(main_company_id=main_company_id).filter(date__year=year, date__month=month)
    occupied = set(existing.values_list("employee_id", "date"))

    templates = (
        shifts_qs(main_company_id=main_company_id)
        .filter(date__year=prev_year, date__month=prev_month)
        .order_by("date", "id")
    )

    skipped = {"occupied": 0, "budget": 0, "out_of_month": 0}
    planned: list[Shift] = []

    for template in templates:
        target_day = add_months(template.date, 1)
        if target_day.month != month or target_day.year != year:
            skipped["out_of_month"] += 1
            continue

        slot = (template.employee_id, target_day)
        if slot in occupied:
            skipped["occupied"] += 1
            continue

        budget = budgets.get(template.employee_id) or DEFAULT_MONTHLY_HOURS_BUDGET
        used = running.get(template.employee_id, Decimal("0"))
        hours = template.position.total_horas

        if used + hours > budget:
            logger.debug(
                "generation skip employee=%s day=%s used=%s + %s > budget=%s",
                template.employee_id,
                target_day,
                used,
                hours,
                budget,
            )
            skipped["budget"] += 1
            continue

        running[template.employee_id] = used + hours
        occupied.add(slot)
        planned.append(
            Shift(
                employee_id=template.employee_id,
                position_id=template.position_id,
                date=target_day,
                notes=template.notes,
            )
        )

    return planned, skipped


def _insert_one_by_one(planned: list[Shift]) -> int:
    inserted = 0
    for shift in planned:
        try:
            with transaction.atomic():
                shift.save(force_insert=True)
            inserted += 1
        except IntegrityError as exc:
            if not is_unique_violation(exc):
                raise
            logger.warning("generation slot taken concurrently employee=%s day=%s", shift.employee_id, shift.date)
    return inserted


def generate_from_previous_month(*, main_company_id: Optional[int], month: int, year: int) -> GenerationResult:
    planned, skipped = _plan(main_company_id=main_company_id, month=month, year=year)

    inserted = 0
    if planned:
        try:
            with transaction.atomic():
                Shift.objects.bulk_create(planned)
            inserted = len(planned)
        except IntegrityError as exc:
            if not is_unique_violation(exc):
                raise
            # A concurrent writer took some slots; keep whatever still fits.
            logger.warning("generation batch hit a unique violation; retrying row by row")
            for shift in planned:
                shift.pk = None
            inserted = _insert_one_by_one(planned)

    logger.info(
        "generated shifts company=%s target=%s-%02d inserted=%s planned=%s skipped=%s",
        main_company_id,
        year,
        month,
        inserted,
        len(planned),
        skipped,
    )
    return GenerationResult(
        count=inserted,
        planned=len(planned),
        skipped_occupied=skipped["occupied"],
        skipped_budget=skipped["budget"],
        skipped_out_of_month=skipped["out_of_month"],
    )
