import pytest

from wst_core.employees.models import Employee, EmployeeStatus
from wst_core.shifts.conflicts import CONFLICT_MSG, DUPLICATE_SHIFT_MSG
from wst_core.shifts.models import Shift

pytestmark = pytest.mark.django_db


def _post(client, employee, position, day, **extra):
    payload = {"employeeId": employee.id, "positionId": position.id, "date": day, **extra}
    return client.post("/api/shifts", payload, format="json")


def test_supervisor_can_book_a_shift(supervisor_client, employee, position):
    res = _post(supervisor_client, employee, position, "2025-06-02", notes="morning")
    assert res.status_code == 201
    body = res.json()
    assert body["employeeId"] == employee.id
    assert body["positionId"] == position.id
    assert body["date"] == "2025-06-02"
    assert body["employee"]["name"] == "Juan Pérez"
    assert body["position"]["siglas"] == "REC"


def test_double_booking_returns_conflicts(admin_client, employee, position):
    first = _post(admin_client, employee, position, "2025-06-02").json()

    res = _post(admin_client, employee, position, "2025-06-02")
    assert res.status_code == 409
    body = res.json()
    assert body["code"] == "CONFLICT"
    assert body["message"] == CONFLICT_MSG
    assert [c["id"] for c in body["conflicts"]] == [first["id"]]
    assert Shift.objects.count() == 1


def test_update_into_taken_day_conflicts_but_self_update_does_not(admin_client, employee, position):
    a = _post(admin_client, employee, position, "2025-06-02").json()
    b = _post(admin_client, employee, position, "2025-06-03").json()

    res = admin_client.put(f"/api/shifts/{b['id']}", {"date": "2025-06-02"}, format="json")
    assert res.status_code == 409
    assert [c["id"] for c in res.json()["conflicts"]] == [a["id"]]

    res = admin_client.put(f"/api/shifts/{a['id']}", {"notes": "swap"}, format="json")
    assert res.status_code == 200
    assert res.json()["notes"] == "swap"


def test_inactive_employee_cannot_be_booked(admin_client, employee, position):
    employee.status = EmployeeStatus.INACTIVE
    employee.save(update_fields=["status"])
    assert _post(admin_client, employee, position, "2025-06-02").status_code == 404


def test_foreign_employee_or_position_is_404(other_client, employee, position, other_employee):
    assert _post(other_client, employee, position, "2025-06-02").status_code == 404
    assert _post(other_client, other_employee, position, "2025-06-02").status_code == 404


def test_super_admin_cannot_write_shifts(super_client, employee, position):
    assert _post(super_client, employee, position, "2025-06-02").status_code == 403


def test_list_by_month_and_range(admin_client, employee, position, company):
    other = Employee.objects.create(name="Ana Ruiz", main_company=company)
    for day in ("2025-05-31", "2025-06-01", "2025-06-30"):
        Shift.objects.create(employee=employee, position=position, date=day)
    Shift.objects.create(employee=other, position=position, date="2025-06-01")

    res = admin_client.get("/api/shifts?month=6&year=2025")
    assert res.status_code == 200
    rows = [(s["date"], s["employee"]["name"]) for s in res.json()]
    assert rows == [("2025-06-01", "Ana Ruiz"), ("2025-06-01", "Juan Pérez"), ("2025-06-30", "Juan Pérez")]

    res = admin_client.get("/api/shifts?startDate=2025-05-31&endDate=2025-06-01")
    assert len(res.json()) == 3


def test_invalid_month_is_400(admin_client):
    assert admin_client.get("/api/shifts?month=13&year=2025").status_code == 400


def test_inactive_employee_shifts_are_hidden(admin_client, employee, position):
    Shift.objects.create(employee=employee, position=position, date="2025-06-01")
    employee.status = EmployeeStatus.INACTIVE
    employee.save(update_fields=["status"])
    assert admin_client.get("/api/shifts?month=6&year=2025").json() == []


def test_shifts_on_a_day(admin_client, employee, position):
    Shift.objects.create(employee=employee, position=position, date="2025-06-01")
    Shift.objects.create(employee=employee, position=position, date="2025-06-02")

    res = admin_client.get("/api/shifts/date/2025-06-02")
    assert res.status_code == 200
    assert [s["date"] for s in res.json()] == ["2025-06-02"]

    assert admin_client.get("/api/shifts/date/2025-02-30").status_code == 400


def test_retrieve_and_delete(admin_client, employee, position):
    shift = Shift.objects.create(employee=employee, position=position, date="2025-06-01")

    assert admin_client.get(f"/api/shifts/{shift.id}").json()["id"] == shift.id
    assert admin_client.delete(f"/api/shifts/{shift.id}").status_code == 204
    assert admin_client.delete(f"/api/shifts/{shift.id}").status_code == 404


def test_other_tenant_cannot_see_or_delete(other_client, employee, position):
    shift = Shift.objects.create(employee=employee, position=position, date="2025-06-01")
    assert other_client.get("/api/shifts?month=6&year=2025").json() == []
    assert other_client.delete(f"/api/shifts/{shift.id}").status_code == 404
    assert Shift.objects.filter(id=shift.id).exists()


def test_unique_constraint_backstop_reports_conflict(monkeypatch, admin_client, employee, position):
    first = _post(admin_client, employee, position, "2025-06-02").json()
    # a second writer that slipped past the pre-check
    monkeypatch.setattr("wst_core.shifts.services.assert_no_conflict", lambda **kwargs: None)

    res = _post(admin_client, employee, position, "2025-06-02")
    assert res.status_code == 409
    body = res.json()
    assert body["code"] == "CONFLICT"
    assert body["message"] == DUPLICATE_SHIFT_MSG
    assert [c["id"] for c in body["conflicts"]] == [first["id"]]
    assert Shift.objects.count() == 1
