# wst_core/conftest.py
from decimal import Decimal

import pytest
from django.utils import timezone
from rest_framework.test import APIClient

from wst_core.clients.models import Cliente
from wst_core.employees.models import Employee
from wst_core.iam.models import Role, User
from wst_core.positions.models import Position
from wst_core.tenants.models import MainCompany, PaymentControl

PASSWORD = "testpass1"


def login(client: APIClient, username: str, password: str = PASSWORD):
    """
    Real login through the API so the session auth class runs (no force_authenticate).
    """
    res = client.post("/api/auth/login", {"username": username, "password": password}, format="json")
    assert res.status_code == 200, res.content
    return res


def make_company(name: str, **fields) -> MainCompany:
    fields.setdefault("payment_control", PaymentControl.PERMANENT)
    fields.setdefault("last_payment_date", timezone.localdate())
    fields.setdefault("needs_setup", False)
    return MainCompany.objects.create(name=name, **fields)


def make_user(username: str, role: str, company=None, **fields) -> User:
    return User.objects.create_user(username, PASSWORD, role=role, main_company=company, **fields)


@pytest.fixture
def company(db):
    return make_company("Acme Services")


@pytest.fixture
def other_company(db):
    return make_company("Globex")


@pytest.fixture
def admin_user(company):
    return make_user("ana.admin", Role.ADMIN, company)


@pytest.fixture
def supervisor_user(company):
    return make_user("sam.supervisor", Role.SUPERVISOR, company)


@pytest.fixture
def super_admin(db):
    return make_user("root", Role.SUPER_ADMIN)


@pytest.fixture
def other_admin(other_company):
    return make_user("olga.admin", Role.ADMIN, other_company)


@pytest.fixture
def admin_client(admin_user):
    c = APIClient()
    login(c, admin_user.username)
    return c


@pytest.fixture
def supervisor_client(supervisor_user):
    c = APIClient()
    login(c, supervisor_user.username)
    return c


@pytest.fixture
def super_client(super_admin):
    c = APIClient()
    login(c, super_admin.username)
    return c


@pytest.fixture
def other_client(other_admin):
    c = APIClient()
    login(c, other_admin.username)
    return c


@pytest.fixture
def cliente(company):
    return Cliente.objects.create(empresa="Hotel Sol", main_company=company)


@pytest.fixture
def position(cliente):
    return Position.objects.create(
        name="Recepcion",
        siglas="REC",
        color="#FF8800",
        total_horas=Decimal("8.0"),
        cliente=cliente,
    )


@pytest.fixture
def employee(company):
    return Employee.objects.create(name="Juan Pérez", main_company=company)


@pytest.fixture
def other_employee(other_company):
    return Employee.objects.create(name="Otto", main_company=other_company)
