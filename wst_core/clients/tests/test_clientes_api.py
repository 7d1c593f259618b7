import pytest

from wst_core.clients.models import Cliente
from wst_core.shifts.models import Shift

pytestmark = pytest.mark.django_db


def test_create_with_contact_fields(admin_client, company):
    res = admin_client.post(
        "/api/clientes",
        {"empresa": "Residencia Mar", "nombreContacto": "Lucía", "telefono": "911000000", "email": None},
        format="json",
    )
    assert res.status_code == 201
    body = res.json()
    assert body["nombreContacto"] == "Lucía"
    assert body["email"] == ""
    assert body["mainCompanyId"] == company.id


def test_list_is_ordered_and_searchable(admin_client, company):
    Cliente.objects.create(empresa="Zeta Logistics", main_company=company)
    Cliente.objects.create(empresa="Alfa Hotel", main_company=company)

    assert [c["empresa"] for c in admin_client.get("/api/clientes").json()] == ["Alfa Hotel", "Zeta Logistics"]
    assert [c["empresa"] for c in admin_client.get("/api/clientes?search=hotel").json()] == ["Alfa Hotel"]


def test_delete_unreferenced_removes_row(admin_client, cliente):
    assert admin_client.delete(f"/api/clientes/{cliente.id}").status_code == 204
    assert not Cliente.objects.filter(id=cliente.id).exists()


def test_delete_referenced_soft_deletes(admin_client, cliente, position, employee):
    Shift.objects.create(employee=employee, position=position, date="2025-05-01")

    assert admin_client.delete(f"/api/clientes/{cliente.id}").status_code == 204
    assert Cliente.objects.get(id=cliente.id).deleted_at is not None
    assert admin_client.get("/api/clientes").json() == []
    assert admin_client.get(f"/api/clientes/{cliente.id}").status_code == 404


def test_cross_tenant_update_is_404(other_client, cliente):
    res = other_client.put(f"/api/clientes/{cliente.id}", {"empresa": "Hijacked"}, format="json")
    assert res.status_code == 404
    cliente.refresh_from_db()
    assert cliente.empresa == "Hotel Sol"
