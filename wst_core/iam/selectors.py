# wst_core/iam/selectors.py
from __future__ import annotations

from typing import Optional

from django.db.models import QuerySet

from wst_core.iam.models import User


def users_qs(*, main_company_id: Optional[int]) -> QuerySet[User]:
    qs = User.objects.all()
    if main_company_id is not None:
        qs = qs.filter(main_company_id=main_company_id)
    return qs.order_by("username")


def get_user_or_none(*, user_id: int, main_company_id: Optional[int]) -> Optional[User]:
    return users_qs(main_company_id=main_company_id).filter(id=user_id).first()


def username_taken(username: str) -> bool:
    return User.objects.filter(username=username).exists()
