# wst_core/common/policy.py
"""
Declarative authorization surface.

Every routed view declares a `policy_resource`; the action is the ViewSet action
(or the lower-cased HTTP method for plain APIViews). RolePolicyPermission looks the
pair up here. A missing entry denies.
"""
from __future__ import annotations

from typing import FrozenSet, Optional

ROLE_SUPER_ADMIN = "super_admin"
ROLE_ADMIN = "admin"
ROLE_SUPERVISOR = "supervisor"

ALL_ROLES: FrozenSet[str] = frozenset({ROLE_SUPER_ADMIN, ROLE_ADMIN, ROLE_SUPERVISOR})
TENANT_ROLES: FrozenSet[str] = frozenset({ROLE_ADMIN, ROLE_SUPERVISOR})

ADMIN_ONLY: FrozenSet[str] = frozenset({ROLE_ADMIN})
SHIFT_WRITERS: FrozenSet[str] = frozenset({ROLE_ADMIN, ROLE_SUPERVISOR})
SUPER_ADMIN_ONLY: FrozenSet[str] = frozenset({ROLE_SUPER_ADMIN})


def _crud(read: FrozenSet[str], write: FrozenSet[str]) -> dict[str, FrozenSet[str]]:
    return {
        "list": read,
        "retrieve": read,
        "create": write,
        "update": write,
        "destroy": write,
    }


ROUTE_POLICY: dict[tuple[str, str], FrozenSet[str]] = {
    # auth
    ("auth.me", "get"): ALL_ROLES,
    ("auth.set_password", "post"): ALL_ROLES,
    ("auth.complete_setup", "put"): TENANT_ROLES,

    # tenant reference data
    **{("employees", a): roles for a, roles in _crud(ALL_ROLES, ADMIN_ONLY).items()},
    **{("clientes", a): roles for a, roles in _crud(ALL_ROLES, ADMIN_ONLY).items()},
    **{("positions", a): roles for a, roles in _crud(ALL_ROLES, ADMIN_ONLY).items()},

    # shifts
    **{("shifts", a): roles for a, roles in _crud(ALL_ROLES, SHIFT_WRITERS).items()},
    ("shifts", "by_date"): ALL_ROLES,
    ("shifts", "generate_from_previous_month"): ADMIN_ONLY,

    # reports
    ("reports", "employee_hours"): ALL_ROLES,
    ("reports", "employee_hours_xlsx"): ALL_ROLES,
    ("reports", "employee_hours_pdf"): ALL_ROLES,

    # tenant user administration
    **{("users", a): ADMIN_ONLY for a in ("list", "create", "update", "destroy")},
    ("users", "reset_password"): ADMIN_ONLY,

    # sentinel zone
    ("sentinel.companies", "list"): SUPER_ADMIN_ONLY,
    ("sentinel.companies", "create"): SUPER_ADMIN_ONLY,
    ("sentinel.companies", "update"): SUPER_ADMIN_ONLY,
    ("sentinel.companies", "destroy"): SUPER_ADMIN_ONLY,
    ("sentinel.companies", "reset_admin_password"): SUPER_ADMIN_ONLY,
    ("sentinel.stats", "get"): SUPER_ADMIN_ONLY,
    ("sentinel.active_sessions", "get"): SUPER_ADMIN_ONLY,
    ("sentinel.login_history", "get"): SUPER_ADMIN_ONLY,
}


def allowed_roles(resource: Optional[str], action: Optional[str]) -> Optional[FrozenSet[str]]:
    if not resource or not action:
        return None
    return ROUTE_POLICY.get((resource, action))
