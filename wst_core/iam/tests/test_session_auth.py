import pytest
from django.conf import settings
from rest_framework.test import APIClient

from wst_core.common.permissions import INVALID_SESSION_MSG, NOT_LOGGED_IN_MSG
from wst_core.conftest import PASSWORD, login
from wst_core.iam.models import LoginHistory, User

pytestmark = pytest.mark.django_db


def test_login_sets_session_cookie_and_returns_user(admin_user):
    c = APIClient()
    res = login(c, admin_user.username)

    assert settings.SESSION_COOKIE_NAME in res.cookies
    body = res.json()
    assert body["user"] == {
        "id": admin_user.id,
        "username": "ana.admin",
        "role": "admin",
        "mainCompanyId": admin_user.main_company_id,
        "mustChangePassword": False,
    }
    assert LoginHistory.objects.filter(user=admin_user).count() == 1


def test_login_records_forwarded_ip(admin_user):
    c = APIClient()
    c.post(
        "/api/auth/login",
        {"username": admin_user.username, "password": PASSWORD},
        format="json",
        HTTP_X_FORWARDED_FOR="10.1.2.3, 172.16.0.1",
    )
    assert LoginHistory.objects.get(user=admin_user).ip_address == "10.1.2.3"


def test_bad_credentials_are_401(admin_user):
    res = APIClient().post("/api/auth/login", {"username": "ana.admin", "password": "wrong-pass"}, format="json")
    assert res.status_code == 401
    assert res.json()["message"] == "Invalid username or password"
    assert not LoginHistory.objects.exists()


def test_short_password_is_validation_error(admin_user):
    res = APIClient().post("/api/auth/login", {"username": "ana.admin", "password": "123"}, format="json")
    assert res.status_code == 400
    assert res.json()["errors"][0]["field"] == "password"


def test_inactive_company_cannot_log_in(company, admin_user):
    company.is_active = False
    company.save(update_fields=["is_active"])

    res = APIClient().post("/api/auth/login", {"username": "ana.admin", "password": PASSWORD}, format="json")
    assert res.status_code == 403


def test_me_requires_session():
    res = APIClient().get("/api/auth/me")
    assert res.status_code == 401
    assert res.json()["message"] == NOT_LOGGED_IN_MSG


def test_me_for_super_admin_has_no_company_status(super_client):
    res = super_client.get("/api/auth/me")
    assert res.status_code == 200
    assert res.json()["role"] == "super_admin"
    assert res.json()["companyStatus"] is None


def test_session_for_deleted_user_is_invalidated(supervisor_user):
    c = APIClient()
    login(c, supervisor_user.username)
    User.objects.filter(id=supervisor_user.id).delete()

    res = c.get("/api/auth/me")
    assert res.status_code == 401
    assert res.json()["message"] == INVALID_SESSION_MSG

    # the session row is gone, so the next call is a plain anonymous request
    res = c.get("/api/auth/me")
    assert res.status_code == 401
    assert res.json()["message"] == NOT_LOGGED_IN_MSG


def test_role_change_applies_to_live_session(supervisor_user, supervisor_client):
    assert supervisor_client.post("/api/users", {"username": "newbie", "role": "supervisor"}, format="json").status_code == 403

    supervisor_user.role = "admin"
    supervisor_user.save(update_fields=["role"])

    res = supervisor_client.post("/api/users", {"username": "newbie", "role": "supervisor"}, format="json")
    assert res.status_code == 201


def test_logout_ends_session(admin_client):
    res = admin_client.post("/api/auth/logout")
    assert res.status_code == 200
    assert admin_client.get("/api/auth/me").status_code == 401


def test_logout_without_session_is_ok():
    assert APIClient().post("/api/auth/logout").status_code == 200


def test_set_password_flow(admin_user, admin_client):
    admin_user.must_change_password = True
    admin_user.save(update_fields=["must_change_password"])

    wrong = admin_client.post(
        "/api/auth/set-password",
        {"oldPassword": "nope-nope", "newPassword": "brand-new-pass", "confirmPassword": "brand-new-pass"},
        format="json",
    )
    assert wrong.status_code == 401

    mismatch = admin_client.post(
        "/api/auth/set-password",
        {"oldPassword": PASSWORD, "newPassword": "brand-new-pass", "confirmPassword": "other-pass"},
        format="json",
    )
    assert mismatch.status_code == 400

    ok = admin_client.post(
        "/api/auth/set-password",
        {"oldPassword": PASSWORD, "newPassword": "brand-new-pass", "confirmPassword": "brand-new-pass"},
        format="json",
    )
    assert ok.status_code == 200

    admin_user.refresh_from_db()
    assert admin_user.check_password("brand-new-pass")
    assert admin_user.must_change_password is False
    assert admin_client.get("/api/auth/me").json()["mustChangePassword"] is False
