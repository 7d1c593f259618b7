# wst_core/positions/models.py
from decimal import Decimal

from django.core.validators import MinValueValidator, RegexValidator
from django.db import models

from wst_core.clients.models import Cliente
from wst_core.common.lifecycle import Lifecycle
from wst_core.common.models import SoftDeleteModel

HEX_COLOR_VALIDATOR = RegexValidator(r"^#[0-9A-Fa-f]{6}$", "Color must be a #RRGGBB hex value.")


class Position(SoftDeleteModel):
    """
    A bookable job at a client site. total_horas is what one shift on it is worth.
    Tenant ownership is inherited through cliente.main_company.
    """

    lifecycle = Lifecycle.TIMESTAMP_IF_REFERENCED

    name = models.CharField(max_length=255, unique=True)
    siglas = models.CharField(max_length=10)
    department = models.CharField(max_length=255, blank=True, default="")
    description = models.TextField(blank=True, default="")
    color = models.CharField(max_length=7, validators=[HEX_COLOR_VALIDATOR])
    total_horas = models.DecimalField(
        max_digits=4,
        decimal_places=1,
        validators=[MinValueValidator(Decimal("0"))],
    )
    cliente = models.ForeignKey(Cliente, on_delete=models.PROTECT, related_name="positions")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "positions"
        ordering = ["name"]

    def __str__(self) -> str:
        return f"{self.name} ({self.siglas})"

    def has_dependents(self) -> bool:
        return self.shifts.exists()
