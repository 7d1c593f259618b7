# wst_core/tenants/services.py
from __future__ import annotations

import logging
from typing import Any, Optional

from django.conf import settings
from django.db import IntegrityError, transaction

from wst_core.common.db import is_unique_violation
from wst_core.common.errors import ConflictError, NotFoundError
from wst_core.common.lifecycle import retire
from wst_core.tenants.models import MainCompany

logger = logging.getLogger(__name__)

COMPANY_NAME_TAKEN_MSG = "A company with this name already exists."
USERNAME_TAKEN_MSG = "Username already exists."

# Editable through the sentinel zone (besides name).
COMPANY_FIELDS = (
    "payment_control",
    "last_payment_date",
    "is_active",
    "needs_setup",
    "country",
    "province",
    "city",
    "address",
    "tax_id",
    "contact_name",
    "phone",
    "email",
)


class CompanyService:
    """
    All MainCompany mutations live here (write-model boundary).
    """

    @staticmethod
    def _get_alive(company_id: int, *, lock: bool = False) -> MainCompany:
        qs = MainCompany.objects.alive()
        if lock:
            qs = qs.select_for_update()
        company = qs.filter(id=company_id).first()
        if company is None:
            raise NotFoundError("Main company not found.")
        return company

    @staticmethod
    def _assert_name_free(name: str, *, exclude_id: Optional[int] = None) -> None:
        qs = MainCompany.objects.filter(name=name)
        if exclude_id is not None:
            qs = qs.exclude(id=exclude_id)
        if qs.exists():
            raise ConflictError(COMPANY_NAME_TAKEN_MSG)

    @staticmethod
    @transaction.atomic
    def provision(*, name: str, admin_username: str, **fields: Any):
        """
        Creates the tenant and its first admin in one transaction.
        Returns (company, admin_user).
        """
        from wst_core.iam.models import Role, User

        name = (name or "").strip()
        CompanyService._assert_name_free(name)
        if User.objects.filter(username=admin_username).exists():
            raise ConflictError(USERNAME_TAKEN_MSG)

        values = {k: v for k, v in fields.items() if k in COMPANY_FIELDS}
        values.setdefault("is_active", True)

        try:
            with transaction.atomic():
                company = MainCompany.objects.create(name=name, **values)
                admin = User.objects.create_user(
                    admin_username,
                    settings.WST_NEW_COMPANY_ADMIN_PASSWORD,
                    role=Role.ADMIN,
                    main_company=company,
                    must_change_password=True,
                )
        except IntegrityError as exc:
            if is_unique_violation(exc):
                raise ConflictError("A company or user with this name already exists.") from exc
            raise

        logger.info("provisioned company id=%s name=%s admin=%s", company.id, company.name, admin.username)
        return company, admin

    @staticmethod
    @transaction.atomic
    def update(*, company_id: int, **fields: Any) -> MainCompany:
        company = CompanyService._get_alive(company_id, lock=True)

        update_fields = []
        if "name" in fields and fields["name"] is not None:
            name = fields["name"].strip()
            if name != company.name:
                CompanyService._assert_name_free(name, exclude_id=company.id)
                company.name = name
                update_fields.append("name")

        for key in COMPANY_FIELDS:
            if key in fields:
                setattr(company, key, fields[key])
                update_fields.append(key)

        if not update_fields:
            return company

        try:
            with transaction.atomic():
                company.save(update_fields=[*update_fields, "updated_at"])
        except IntegrityError as exc:
            if is_unique_violation(exc):
                raise ConflictError(COMPANY_NAME_TAKEN_MSG) from exc
            raise
        return company

    @staticmethod
    @transaction.atomic
    def soft_delete(*, company_id: int) -> None:
        company = CompanyService._get_alive(company_id, lock=True)
        retire(company)

    @staticmethod
    @transaction.atomic
    def reset_admin_password(*, company_id: int):
        from wst_core.iam.models import Role

        company = CompanyService._get_alive(company_id)
        admin = company.users.filter(role=Role.ADMIN).order_by("id").first()
        if admin is None:
            raise NotFoundError("Admin user for this company not found.")

        admin.set_password(settings.WST_RESET_ADMIN_PASSWORD)
        admin.must_change_password = True
        admin.save(update_fields=["password", "must_change_password", "updated_at"])
        logger.info("admin password reset company=%s admin=%s", company.id, admin.username)
        return admin

    @staticmethod
    @transaction.atomic
    def complete_setup(*, company_id: int) -> MainCompany:
        company = CompanyService._get_alive(company_id, lock=True)
        if company.needs_setup:
            company.needs_setup = False
            company.save(update_fields=["needs_setup", "updated_at"])
        return company
