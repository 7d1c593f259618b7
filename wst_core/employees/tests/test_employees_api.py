import pytest

from wst_core.employees.models import Employee, EmployeeStatus

pytestmark = pytest.mark.django_db


def test_create_and_retrieve(admin_client, company):
    res = admin_client.post("/api/employees", {"name": "Laura Gómez", "email": "laura@example.com"}, format="json")
    assert res.status_code == 201
    body = res.json()
    assert body["status"] == "active"
    assert body["mainCompanyId"] == company.id

    res = admin_client.get(f"/api/employees/{body['id']}")
    assert res.status_code == 200
    assert res.json()["name"] == "Laura Gómez"


def test_list_defaults_to_active_and_supports_all(admin_client, company):
    Employee.objects.create(name="Active Ann", main_company=company)
    Employee.objects.create(name="Gone Gus", main_company=company, status=EmployeeStatus.INACTIVE)

    names = [e["name"] for e in admin_client.get("/api/employees").json()]
    assert names == ["Active Ann"]

    names = [e["name"] for e in admin_client.get("/api/employees?status=all").json()]
    assert names == ["Active Ann", "Gone Gus"]

    names = [e["name"] for e in admin_client.get("/api/employees?status=inactive").json()]
    assert names == ["Gone Gus"]


def test_search_is_case_insensitive(admin_client, company):
    Employee.objects.create(name="María López", main_company=company)
    Employee.objects.create(name="Pedro Ruiz", main_company=company)

    res = admin_client.get("/api/employees?search=lóp")
    assert [e["name"] for e in res.json()] == ["María López"]


def test_bad_status_filter_is_400(admin_client):
    assert admin_client.get("/api/employees?status=sleeping").status_code == 400


def test_update_is_partial(admin_client, employee):
    res = admin_client.put(f"/api/employees/{employee.id}", {"phone": "600111222"}, format="json")
    assert res.status_code == 200
    assert res.json()["phone"] == "600111222"
    assert res.json()["name"] == employee.name


def test_delete_deactivates(admin_client, employee):
    assert admin_client.delete(f"/api/employees/{employee.id}").status_code == 204
    employee.refresh_from_db()
    assert employee.status == EmployeeStatus.INACTIVE


def test_supervisor_reads_but_cannot_delete(supervisor_client, employee):
    assert supervisor_client.get("/api/employees").status_code == 200

    res = supervisor_client.delete(f"/api/employees/{employee.id}")
    assert res.status_code == 403
    employee.refresh_from_db()
    assert employee.status == EmployeeStatus.ACTIVE


def test_other_tenant_rows_are_invisible(admin_client, other_employee):
    assert other_employee.name not in [e["name"] for e in admin_client.get("/api/employees").json()]
    assert admin_client.get(f"/api/employees/{other_employee.id}").status_code == 404
    assert admin_client.put(f"/api/employees/{other_employee.id}", {"name": "x"}, format="json").status_code == 404
    assert admin_client.delete(f"/api/employees/{other_employee.id}").status_code == 404


def test_super_admin_reads_across_tenants(super_client, employee, other_employee):
    names = {e["name"] for e in super_client.get("/api/employees").json()}
    assert {employee.name, other_employee.name} <= names
