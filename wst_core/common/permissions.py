# wst_core/common/permissions.py
"""
Request gate chain, evaluated in order for every routed API view:

    SessionRequired -> CompanyScopeRequired -> CompanyPaymentActive -> RolePolicyPermission

Each gate reads/enriches the RequestContext the auth gate put on `request.auth`.
Gates raise typed errors so each denial keeps its own message.
"""
from __future__ import annotations

from rest_framework.permissions import BasePermission

from wst_core.common.context import RequestContext
from wst_core.common.errors import ForbiddenError, UnauthorizedError
from wst_core.common.policy import ROLE_SUPER_ADMIN, allowed_roles

NOT_LOGGED_IN_MSG = "You must be logged in to access this resource."
INVALID_SESSION_MSG = "Invalid session. Please log in again."
NO_COMPANY_MSG = "No main company associated with your session."
COMPANY_NOT_FOUND_MSG = "Associated company not found."
SUBSCRIPTION_INACTIVE_MSG = "Your company subscription is inactive. Please contact support."
ROLE_DENIED_MSG = "You do not have permission to perform this action."


def request_context(request) -> RequestContext:
    ctx = getattr(request, "auth", None)
    if not isinstance(ctx, RequestContext):
        raise UnauthorizedError(NOT_LOGGED_IN_MSG)
    return ctx


def _policy_action(request, view) -> str | None:
    action = getattr(view, "action", None)
    if action:
        return action
    return request.method.lower()


class SessionRequired(BasePermission):
    def has_permission(self, request, view) -> bool:
        if isinstance(getattr(request, "auth", None), RequestContext):
            return True
        if getattr(request._request, "session_invalidated", False):
            raise UnauthorizedError(INVALID_SESSION_MSG)
        raise UnauthorizedError(NOT_LOGGED_IN_MSG)


class CompanyScopeRequired(BasePermission):
    """
    super_admin is platform-wide. Everyone else must carry a main company id.
    """

    def has_permission(self, request, view) -> bool:
        ctx = request_context(request)
        if ctx.is_super_admin:
            return True
        if ctx.main_company_id is None:
            raise ForbiddenError(NO_COMPANY_MSG)
        return True


class CompanyPaymentActive(BasePermission):
    """
    Computes the tenant's subscription status once per request (ctx.company_status).
    Views with `payment_exempt = True` (/auth/me, set-password, complete-setup) get the status but are never blocked.
    """

    def has_permission(self, request, view) -> bool:
        from wst_core.tenants.billing import company_status_for
        from wst_core.tenants.selectors import get_company_or_none

        ctx = request_context(request)
        if ctx.is_super_admin:
            return True

        company = get_company_or_none(company_id=ctx.main_company_id)
        if company is None:
            raise ForbiddenError(COMPANY_NOT_FOUND_MSG)

        ctx.company_status = company_status_for(company)

        if getattr(view, "payment_exempt", False):
            return True
        if not ctx.company_status.is_active:
            raise ForbiddenError(SUBSCRIPTION_INACTIVE_MSG)
        return True


class RolePolicyPermission(BasePermission):
    """
    Looks up (view.policy_resource, action) in ROUTE_POLICY. Unknown pairs deny.
    """

    def has_permission(self, request, view) -> bool:
        ctx = request_context(request)
        roles = allowed_roles(getattr(view, "policy_resource", None), _policy_action(request, view))
        if not roles or ctx.role not in roles:
            raise ForbiddenError(ROLE_DENIED_MSG)
        return True


class IsSuperAdmin(BasePermission):
    """
    Used where a view sits outside the routed policy table (schema/docs).
    """

    def has_permission(self, request, view) -> bool:
        ctx = getattr(request, "auth", None)
        return isinstance(ctx, RequestContext) and ctx.role == ROLE_SUPER_ADMIN
