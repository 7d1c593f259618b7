# wst_core/employees/models.py
from django.db import models

from wst_core.common.lifecycle import Lifecycle
from wst_core.tenants.models import MainCompany


class EmployeeStatus(models.TextChoices):
    ACTIVE = "active", "Active"
    INACTIVE = "inactive", "Inactive"


class Employee(models.Model):
    """
    Never deleted: retiring flips status to inactive so past shifts keep their owner.
    """

    lifecycle = Lifecycle.STATUS_FLAG
    retired_status = EmployeeStatus.INACTIVE

    name = models.CharField(max_length=255)
    email = models.CharField(max_length=255, blank=True, default="")
    phone = models.CharField(max_length=50, blank=True, default="")
    status = models.CharField(
        max_length=16,
        choices=EmployeeStatus.choices,
        default=EmployeeStatus.ACTIVE,
        db_index=True,
    )
    main_company = models.ForeignKey(MainCompany, on_delete=models.PROTECT, related_name="employees")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "employees"
        ordering = ["name"]
        indexes = [
            models.Index(fields=["main_company", "status"], name="employee_company_status_idx"),
        ]

    def __str__(self) -> str:
        return self.name
