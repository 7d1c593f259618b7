# wst_core/tenants/models.py
from django.db import models

from wst_core.common.lifecycle import Lifecycle
from wst_core.common.models import SoftDeleteModel, TimeStampedModel


class PaymentControl(models.TextChoices):
    MONTHLY = "monthly", "Monthly"
    ANNUAL = "annual", "Annual"
    PERMANENT = "permanent", "Permanent"


class MainCompany(TimeStampedModel, SoftDeleteModel):
    """
    Tenant root. Every employee, cliente and tenant user hangs off one of these.
    """

    lifecycle = Lifecycle.TIMESTAMP

    name = models.CharField(max_length=255, unique=True)

    payment_control = models.CharField(
        max_length=16,
        choices=PaymentControl.choices,
        default=PaymentControl.MONTHLY,
    )
    last_payment_date = models.DateField(null=True, blank=True)
    is_active = models.BooleanField(default=True, db_index=True)
    needs_setup = models.BooleanField(default=True)

    # contact / fiscal data (free text, optional)
    country = models.CharField(max_length=100, blank=True, default="")
    province = models.CharField(max_length=100, blank=True, default="")
    city = models.CharField(max_length=100, blank=True, default="")
    address = models.CharField(max_length=255, blank=True, default="")
    tax_id = models.CharField(max_length=50, blank=True, default="")
    contact_name = models.CharField(max_length=150, blank=True, default="")
    phone = models.CharField(max_length=50, blank=True, default="")
    email = models.EmailField(max_length=150, blank=True, default="")

    class Meta:
        db_table = "main_companies"
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name
