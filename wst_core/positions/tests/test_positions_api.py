from decimal import Decimal

import pytest

from wst_core.clients.models import Cliente
from wst_core.positions.models import Position
from wst_core.shifts.models import Shift

pytestmark = pytest.mark.django_db


def _payload(cliente, **overrides):
    data = {
        "name": "Vigilante noche",
        "siglas": "VGN",
        "color": "#112233",
        "totalHoras": "10.5",
        "clienteId": cliente.id,
    }
    data.update(overrides)
    return data


def test_create_position(admin_client, cliente):
    res = admin_client.post("/api/positions", _payload(cliente), format="json")
    assert res.status_code == 201
    body = res.json()
    assert body["totalHoras"] == "10.5"
    assert body["clienteId"] == cliente.id
    assert body["clienteEmpresa"] == "Hotel Sol"


def test_invalid_color_is_rejected(admin_client, cliente):
    res = admin_client.post("/api/positions", _payload(cliente, color="red"), format="json")
    assert res.status_code == 400
    assert res.json()["errors"][0]["field"] == "color"


def test_duplicate_name_conflicts(admin_client, cliente, position):
    res = admin_client.post("/api/positions", _payload(cliente, name=position.name), format="json")
    assert res.status_code == 409
    assert res.json()["message"] == "A position with this name already exists."


def test_cliente_of_other_tenant_is_404(admin_client, other_company):
    foreign = Cliente.objects.create(empresa="Foreign", main_company=other_company)
    res = admin_client.post("/api/positions", _payload(foreign), format="json")
    assert res.status_code == 404
    assert not Position.objects.filter(name="Vigilante noche").exists()


def test_list_filters_by_cliente(admin_client, company, cliente, position):
    other = Cliente.objects.create(empresa="Otro", main_company=company)
    Position.objects.create(name="Limpieza", siglas="LIM", color="#00AA00", total_horas=Decimal("6.0"), cliente=other)

    names = [p["name"] for p in admin_client.get(f"/api/positions?clienteId={cliente.id}").json()]
    assert names == [position.name]


def test_update_keeps_other_fields(admin_client, position):
    res = admin_client.put(f"/api/positions/{position.id}", {"totalHoras": "7.5"}, format="json")
    assert res.status_code == 200
    assert res.json()["totalHoras"] == "7.5"
    assert res.json()["siglas"] == position.siglas


def test_delete_referenced_position_is_soft(admin_client, position, employee):
    Shift.objects.create(employee=employee, position=position, date="2025-05-02")

    assert admin_client.delete(f"/api/positions/{position.id}").status_code == 204
    assert Position.objects.get(id=position.id).deleted_at is not None
    assert admin_client.get("/api/positions").json() == []


def test_delete_unreferenced_position_is_hard(admin_client, position):
    assert admin_client.delete(f"/api/positions/{position.id}").status_code == 204
    assert not Position.objects.filter(id=position.id).exists()
