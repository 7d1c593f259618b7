# wst_core/tenants/selectors.py
from __future__ import annotations

from typing import Optional

from django.db.models import Prefetch, QuerySet

from wst_core.tenants.models import MainCompany


def company_qs() -> QuerySet[MainCompany]:
    return MainCompany.objects.alive()


def get_company_or_none(*, company_id: Optional[int]) -> Optional[MainCompany]:
    if company_id is None:
        return None
    return company_qs().filter(id=company_id).first()


def companies_with_admins_qs() -> QuerySet[MainCompany]:
    from wst_core.iam.models import Role, User

    admins = User.objects.filter(role=Role.ADMIN).order_by("username")
    return company_qs().order_by("name").prefetch_related(
        Prefetch("users", queryset=admins, to_attr="admin_users")
    )
