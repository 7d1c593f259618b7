# wst_core/reports/selectors.py
"""
Employee hours aggregation: shifts -> employees -> positions -> clientes,
folded into one row per employee with a per-position breakdown.

Historical: employee status and position soft-deletes are not filtered here,
hours already worked still count.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional

from wst_core.common.dates import month_bounds
from wst_core.shifts.models import Shift


@dataclass
class PositionHours:
    position_id: int
    name: str
    siglas: str
    color: str
    cliente_id: int
    cliente_empresa: str
    total_horas: Decimal = Decimal("0")


@dataclass
class EmployeeHours:
    employee_id: int
    employee_name: str
    total_hours: Decimal = Decimal("0")
    total_shifts: int = 0
    breakdown: dict[int, PositionHours] = field(default_factory=dict)

    @property
    def shift_breakdown(self) -> list[PositionHours]:
        return list(self.breakdown.values())


@dataclass
class ClientColumns:
    cliente_id: int
    empresa: str
    positions: list[PositionHours]


def employee_hours_report(
    *,
    main_company_id: Optional[int],
    month: Optional[int] = None,
    year: Optional[int] = None,
    employee_id: Optional[int] = None,
    client_id: Optional[int] = None,
) -> list[EmployeeHours]:
    qs = Shift.objects.select_related("employee", "position", "position__cliente")

    if employee_id:
        qs = qs.filter(employee_id=employee_id)
    if month and year:
        first, last = month_bounds(month=month, year=year)
        qs = qs.filter(date__gte=first, date__lte=last)
    if client_id:
        qs = qs.filter(position__cliente_id=client_id)
    if main_company_id is not None:
        qs = qs.filter(employee__main_company_id=main_company_id)

    rows: dict[int, EmployeeHours] = {}
    for shift in qs.order_by("date", "id"):
        employee, position = shift.employee, shift.position
        horas = position.total_horas

        entry = rows.get(employee.id)
        if entry is None:
            entry = rows[employee.id] = EmployeeHours(employee_id=employee.id, employee_name=employee.name)

        entry.total_shifts += 1
        entry.total_hours += horas

        item = entry.breakdown.get(position.id)
        if item is None:
            item = entry.breakdown[position.id] = PositionHours(
                position_id=position.id,
                name=position.name,
                siglas=position.siglas,
                color=position.color,
                cliente_id=position.cliente_id,
                cliente_empresa=position.cliente.empresa,
            )
        item.total_horas += horas

    return sorted(rows.values(), key=lambda r: (r.employee_name.casefold(), r.employee_id))


def hours_by_employee(
    *,
    main_company_id: Optional[int],
    month: int,
    year: int,
) -> dict[int, Decimal]:
    report = employee_hours_report(main_company_id=main_company_id, month=month, year=year)
    return {row.employee_id: row.total_hours for row in report}


def group_positions_by_client(report: list[EmployeeHours]) -> list[ClientColumns]:
    """
    Positions that appear in the report, grouped per client (client by empresa, positions by name).
    """
    clients: dict[int, ClientColumns] = {}
    seen: set[int] = set()
    for row in report:
        for item in row.shift_breakdown:
            if item.position_id in seen:
                continue
            seen.add(item.position_id)
            group = clients.get(item.cliente_id)
            if group is None:
                group = clients[item.cliente_id] = ClientColumns(
                    cliente_id=item.cliente_id, empresa=item.cliente_empresa, positions=[]
                )
            group.positions.append(item)

    ordered = sorted(clients.values(), key=lambda c: c.empresa.casefold())
    for group in ordered:
        group.positions.sort(key=lambda p: p.name.casefold())
    return ordered


def report_totals(report: list[EmployeeHours]) -> tuple[Decimal, int]:
    total_hours = sum((r.total_hours for r in report), Decimal("0"))
    total_shifts = sum(r.total_shifts for r in report)
    return total_hours, total_shifts
