# wst_core/iam/models.py
from django.contrib.auth.base_user import AbstractBaseUser, BaseUserManager
from django.db import models

from wst_core.common.lifecycle import Lifecycle
from wst_core.common.models import TimeStampedModel
from wst_core.common.policy import ROLE_ADMIN, ROLE_SUPER_ADMIN, ROLE_SUPERVISOR
from wst_core.tenants.models import MainCompany


class Role(models.TextChoices):
    SUPER_ADMIN = ROLE_SUPER_ADMIN, "Super admin"
    ADMIN = ROLE_ADMIN, "Admin"
    SUPERVISOR = ROLE_SUPERVISOR, "Supervisor"


class UserManager(BaseUserManager):
    use_in_migrations = True

    def create_user(self, username, password=None, **extra_fields):
        if not username:
            raise ValueError("username is required")
        user = self.model(username=username, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, username, password=None, **extra_fields):
        extra_fields["role"] = Role.SUPER_ADMIN
        extra_fields["main_company"] = None
        extra_fields.setdefault("must_change_password", False)
        return self.create_user(username, password, **extra_fields)


class User(AbstractBaseUser, TimeStampedModel):
    """
    Application account.
    super_admin: main_company is NULL (platform level).
    admin/supervisor: belongs to exactly one MainCompany.
    """

    lifecycle = Lifecycle.HARD

    username = models.CharField(max_length=150, unique=True)
    role = models.CharField(max_length=16, choices=Role.choices, default=Role.SUPERVISOR, db_index=True)
    main_company = models.ForeignKey(
        MainCompany,
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name="users",
    )
    must_change_password = models.BooleanField(default=False)

    objects = UserManager()

    USERNAME_FIELD = "username"
    REQUIRED_FIELDS: list[str] = []

    class Meta:
        db_table = "users"
        ordering = ["username"]

    def __str__(self) -> str:
        return self.username

    @property
    def is_super_admin(self) -> bool:
        return self.role == Role.SUPER_ADMIN


class LoginHistory(models.Model):
    """
    Append-only: one row per successful login.
    """

    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name="logins")
    main_company = models.ForeignKey(
        MainCompany,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="logins",
    )
    ip_address = models.CharField(max_length=64, blank=True, default="")
    login_timestamp = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        db_table = "login_history"
        ordering = ["-login_timestamp"]
