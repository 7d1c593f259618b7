import pytest

from wst_core.clients.models import Cliente
from wst_core.common.lifecycle import RetireOutcome, retire
from wst_core.employees.models import Employee, EmployeeStatus
from wst_core.iam.models import Role, User
from wst_core.positions.models import Position
from wst_core.shifts.models import Shift
from wst_core.tenants.models import MainCompany

pytestmark = pytest.mark.django_db


def test_employee_is_deactivated_not_deleted(employee):
    assert retire(employee) is RetireOutcome.DEACTIVATED
    employee.refresh_from_db()
    assert employee.status == EmployeeStatus.INACTIVE


def test_company_is_timestamped(company):
    assert retire(company) is RetireOutcome.SOFT_DELETED
    company.refresh_from_db()
    assert company.deleted_at is not None
    assert not MainCompany.objects.alive().filter(id=company.id).exists()


def test_unreferenced_cliente_is_removed(company):
    c = Cliente.objects.create(empresa="Lonely", main_company=company)
    assert retire(c) is RetireOutcome.DELETED
    assert not Cliente.objects.filter(empresa="Lonely").exists()


def test_referenced_cliente_and_position_are_timestamped(cliente, position, employee):
    Shift.objects.create(employee=employee, position=position, date="2025-03-03")

    assert retire(position) is RetireOutcome.SOFT_DELETED
    assert retire(cliente) is RetireOutcome.SOFT_DELETED
    assert Position.objects.get(id=position.id).deleted_at is not None
    assert Cliente.objects.get(id=cliente.id).deleted_at is not None


def test_shift_and_user_are_hard_deleted(company, position, employee):
    shift = Shift.objects.create(employee=employee, position=position, date="2025-03-03")
    user = User.objects.create_user("temp", "whatever1", role=Role.SUPERVISOR, main_company=company)

    assert retire(shift) is RetireOutcome.DELETED
    assert retire(user) is RetireOutcome.DELETED
    assert not Shift.objects.exists()
    assert not User.objects.filter(username="temp").exists()


def test_model_without_lifecycle_is_rejected(company):
    class Plain:
        pk = 1

    with pytest.raises(TypeError):
        retire(Plain())
