# wst_core/iam/services.py
from __future__ import annotations

import logging
from typing import Optional

from django.conf import settings
from django.db import IntegrityError, transaction

from wst_core.common.db import is_unique_violation
from wst_core.common.errors import ConflictError, ForbiddenError, NotFoundError, UnauthorizedError
from wst_core.common.lifecycle import retire
from wst_core.iam.models import LoginHistory, Role, User
from wst_core.iam.selectors import get_user_or_none, username_taken
from wst_core.tenants.billing import payment_is_current
from wst_core.tenants.selectors import get_company_or_none

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MSG = "Invalid username or password"
COMPANY_NOT_FOUND_MSG = "Associated company not found."
COMPANY_INACTIVE_MSG = "Your company is inactive. Please contact the administrator."
COMPANY_BLOCKED_MSG = "Your company is blocked due to a pending payment. Please contact the administrator."
USERNAME_TAKEN_MSG = "Username already exists."


class AuthService:
    """
    Credential checks and self-service password changes.
    Session handling stays in the view (wst_core.iam.auth).
    """

    @staticmethod
    @transaction.atomic
    def login(*, username: str, password: str, ip_address: Optional[str] = None) -> User:
        user = User.objects.filter(username=username).first()
        if user is None or not user.check_password(password):
            logger.info("login failed username=%s ip=%s", username, ip_address)
            raise UnauthorizedError(INVALID_CREDENTIALS_MSG)

        # Tenant users cannot even obtain a session while their company is blocked.
        if not user.is_super_admin:
            company = get_company_or_none(company_id=user.main_company_id)
            if company is None:
                raise ForbiddenError(COMPANY_NOT_FOUND_MSG)
            if not company.is_active:
                logger.info("login blocked (inactive company) username=%s company=%s", username, company.id)
                raise ForbiddenError(COMPANY_INACTIVE_MSG)
            if not payment_is_current(company):
                logger.info("login blocked (payment lapsed) username=%s company=%s", username, company.id)
                raise ForbiddenError(COMPANY_BLOCKED_MSG)

        LoginHistory.objects.create(
            user=user,
            main_company_id=user.main_company_id,
            ip_address=ip_address or "",
        )
        logger.info("login ok username=%s role=%s", user.username, user.role)
        return user

    @staticmethod
    @transaction.atomic
    def change_password(*, user: User, old_password: str, new_password: str) -> User:
        if not user.check_password(old_password):
            raise UnauthorizedError("Current password is incorrect.")

        user.set_password(new_password)
        user.must_change_password = False
        user.save(update_fields=["password", "must_change_password", "updated_at"])
        return user


class UserAdminService:
    """
    Tenant admins managing the accounts of their own company.
    """

    @staticmethod
    def _assert_assignable(role: str) -> None:
        if role == Role.SUPER_ADMIN:
            raise ForbiddenError("The super_admin role cannot be assigned.")

    @staticmethod
    def _get(*, main_company_id: int, user_id: int) -> User:
        user = get_user_or_none(user_id=user_id, main_company_id=main_company_id)
        if user is None:
            raise NotFoundError("User not found.")
        return user

    @staticmethod
    @transaction.atomic
    def create(*, main_company_id: int, username: str, role: str) -> User:
        UserAdminService._assert_assignable(role)
        if username_taken(username):
            raise ConflictError(USERNAME_TAKEN_MSG)

        try:
            with transaction.atomic():
                return User.objects.create_user(
                    username,
                    settings.WST_DEFAULT_USER_PASSWORD,
                    role=role,
                    main_company_id=main_company_id,
                    must_change_password=True,
                )
        except IntegrityError as exc:
            if is_unique_violation(exc):
                raise ConflictError(USERNAME_TAKEN_MSG) from exc
            raise

    @staticmethod
    @transaction.atomic
    def update_role(*, main_company_id: int, user_id: int, role: str) -> User:
        UserAdminService._assert_assignable(role)
        user = UserAdminService._get(main_company_id=main_company_id, user_id=user_id)
        user.role = role
        user.save(update_fields=["role", "updated_at"])
        return user

    @staticmethod
    @transaction.atomic
    def delete(*, main_company_id: int, actor_id: int, user_id: int) -> None:
        if actor_id == user_id:
            raise ForbiddenError("You cannot delete your own account.")
        user = UserAdminService._get(main_company_id=main_company_id, user_id=user_id)
        retire(user)

    @staticmethod
    @transaction.atomic
    def reset_password(*, main_company_id: int, user_id: int) -> User:
        user = UserAdminService._get(main_company_id=main_company_id, user_id=user_id)
        user.set_password(settings.WST_DEFAULT_USER_PASSWORD)
        user.must_change_password = True
        user.save(update_fields=["password", "must_change_password", "updated_at"])
        logger.info("password reset for user=%s by tenant admin company=%s", user.id, main_company_id)
        return user
