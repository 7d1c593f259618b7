from datetime import date
from decimal import Decimal

import pytest
from django.utils import timezone

from wst_core.clients.models import Cliente
from wst_core.employees.models import Employee, EmployeeStatus
from wst_core.positions.models import Position
from wst_core.shifts import generation
from wst_core.shifts.generation import generate_from_previous_month
from wst_core.shifts.models import Shift

pytestmark = pytest.mark.django_db


def _book(employee, position, *days):
    for d in days:
        Shift.objects.create(employee=employee, position=position, date=d)


def test_budget_caps_copy_at_previous_month_hours(company, employee, position):
    # 20 x 8h in March = 160h budget
    _book(employee, position, *[date(2025, 3, d) for d in range(1, 21)])
    # already 16h in April on days the template does not use
    _book(employee, position, date(2025, 4, 25), date(2025, 4, 26))

    result = generate_from_previous_month(main_company_id=company.id, month=4, year=2025)

    assert result.count == 18
    assert result.skipped_budget == 2
    april = Shift.objects.filter(employee=employee, date__month=4, date__year=2025)
    assert april.count() == 20
    assert sum(s.position.total_horas for s in april) == Decimal("160.0")
    # templates are walked in date order, so the last two are the ones dropped
    assert not april.filter(date__in=[date(2025, 4, 19), date(2025, 4, 20)]).exists()


def test_second_run_creates_nothing(company, employee, position):
    _book(employee, position, date(2025, 3, 3), date(2025, 3, 4))

    assert generate_from_previous_month(main_company_id=company.id, month=4, year=2025).count == 2
    again = generate_from_previous_month(main_company_id=company.id, month=4, year=2025)
    assert again.count == 0
    assert Shift.objects.filter(date__month=4).count() == 2


def test_month_end_clamping_never_double_books(company, employee, position):
    _book(employee, position, date(2025, 1, 10), date(2025, 1, 30), date(2025, 1, 31))

    result = generate_from_previous_month(main_company_id=company.id, month=2, year=2025)

    assert result.count == 2
    assert result.skipped_occupied == 1
    days = sorted(Shift.objects.filter(date__month=2).values_list("date", flat=True))
    assert days == [date(2025, 2, 10), date(2025, 2, 28)]


def test_december_rolls_into_january(company, employee, position):
    _book(employee, position, date(2024, 12, 31))
    assert generate_from_previous_month(main_company_id=company.id, month=1, year=2025).count == 1
    assert Shift.objects.filter(date=date(2025, 1, 31)).exists()


def test_inactive_employees_and_deleted_positions_are_not_copied(company, employee, position, cliente):
    retired = Employee.objects.create(name="Retired", main_company=company, status=EmployeeStatus.INACTIVE)
    old_position = Position.objects.create(
        name="Old post", siglas="OLD", color="#000000", total_horas=Decimal("4.0"), cliente=cliente
    )
    _book(retired, position, date(2025, 3, 5))
    _book(employee, old_position, date(2025, 3, 6))
    old_position.deleted_at = timezone.now()
    old_position.save(update_fields=["deleted_at"])

    assert generate_from_previous_month(main_company_id=company.id, month=4, year=2025).count == 0


def test_other_tenants_shifts_stay_put(company, other_company, employee, position, other_employee):
    foreign_cliente = Cliente.objects.create(empresa="Foreign", main_company=other_company)
    foreign_position = Position.objects.create(
        name="Foreign post", siglas="FP", color="#FFFFFF", total_horas=Decimal("8.0"), cliente=foreign_cliente
    )
    _book(other_employee, foreign_position, date(2025, 3, 3))
    _book(employee, position, date(2025, 3, 4))

    assert generate_from_previous_month(main_company_id=company.id, month=4, year=2025).count == 1
    assert not Shift.objects.filter(employee=other_employee, date__month=4).exists()


def test_generate_endpoint_is_admin_only(admin_client, supervisor_client, employee, position):
    _book(employee, position, date(2025, 3, 3))

    assert supervisor_client.post(
        "/api/shifts/generate-from-previous-month", {"month": 4, "year": 2025}, format="json"
    ).status_code == 403

    res = admin_client.post("/api/shifts/generate-from-previous-month", {"month": 4, "year": 2025}, format="json")
    assert res.status_code == 200
    assert res.json() == {"count": 1}


@pytest.mark.parametrize("payload", [{"month": 13, "year": 2025}, {"month": 4, "year": 1999}, {"month": 4}])
def test_generate_endpoint_validates_body(admin_client, payload):
    res = admin_client.post("/api/shifts/generate-from-previous-month", payload, format="json")
    assert res.status_code == 400


def test_slot_taken_after_planning_falls_back_row_by_row(monkeypatch, company, employee, position):
    _book(employee, position, date(2025, 3, 3), date(2025, 3, 4), date(2025, 3, 5))
    plan = generation._plan

    def plan_then_race(**kwargs):
        planned = plan(**kwargs)
        Shift.objects.create(employee=employee, position=position, date=date(2025, 4, 4))
        return planned

    monkeypatch.setattr(generation, "_plan", plan_then_race)

    result = generate_from_previous_month(main_company_id=company.id, month=4, year=2025)

    assert result.planned == 3
    assert result.count == 2
    days = sorted(Shift.objects.filter(date__month=4).values_list("date", flat=True))
    assert days == [date(2025, 4, 3), date(2025, 4, 4), date(2025, 4, 5)]
