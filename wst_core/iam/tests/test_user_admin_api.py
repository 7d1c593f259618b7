import pytest

from wst_core.iam.models import User

pytestmark = pytest.mark.django_db


def test_admin_lists_only_own_tenant_users(admin_client, admin_user, supervisor_user, other_admin):
    res = admin_client.get("/api/users")
    assert res.status_code == 200
    names = [u["username"] for u in res.json()]
    assert names == sorted([admin_user.username, supervisor_user.username])
    assert other_admin.username not in names


def test_create_user_with_default_password(admin_client, company):
    res = admin_client.post("/api/users", {"username": "new.sup", "role": "supervisor"}, format="json")
    assert res.status_code == 201
    assert res.json()["mustChangePassword"] is True

    user = User.objects.get(username="new.sup")
    assert user.main_company_id == company.id
    assert user.check_password("password123")


def test_super_admin_role_cannot_be_assigned(admin_client, supervisor_user):
    res = admin_client.post("/api/users", {"username": "evil", "role": "super_admin"}, format="json")
    assert res.status_code == 403

    res = admin_client.put(f"/api/users/{supervisor_user.id}", {"role": "super_admin"}, format="json")
    assert res.status_code == 403


def test_duplicate_username_conflicts(admin_client, supervisor_user):
    res = admin_client.post("/api/users", {"username": supervisor_user.username, "role": "admin"}, format="json")
    assert res.status_code == 409
    assert res.json()["code"] == "CONFLICT"


def test_update_role(admin_client, supervisor_user):
    res = admin_client.put(f"/api/users/{supervisor_user.id}", {"role": "admin"}, format="json")
    assert res.status_code == 200
    assert res.json()["role"] == "admin"


def test_cannot_delete_self(admin_client, admin_user):
    res = admin_client.delete(f"/api/users/{admin_user.id}")
    assert res.status_code == 403
    assert res.json()["message"] == "You cannot delete your own account."


def test_delete_and_cross_tenant_is_404(admin_client, supervisor_user, other_admin):
    assert admin_client.delete(f"/api/users/{other_admin.id}").status_code == 404
    assert admin_client.delete(f"/api/users/{supervisor_user.id}").status_code == 204
    assert not User.objects.filter(id=supervisor_user.id).exists()


def test_reset_password(admin_client, supervisor_user):
    res = admin_client.put(f"/api/users/{supervisor_user.id}/reset-password")
    assert res.status_code == 200

    supervisor_user.refresh_from_db()
    assert supervisor_user.check_password("password123")
    assert supervisor_user.must_change_password is True


def test_supervisor_cannot_manage_users(supervisor_client):
    assert supervisor_client.get("/api/users").status_code == 403
