# wst_core/clients/models.py
from django.db import models

from wst_core.common.lifecycle import Lifecycle
from wst_core.common.models import SoftDeleteModel
from wst_core.tenants.models import MainCompany


class Cliente(SoftDeleteModel):
    """
    Client site of a tenant; owns the positions shifts are booked against.
    """

    lifecycle = Lifecycle.TIMESTAMP_IF_REFERENCED

    empresa = models.CharField(max_length=100)
    direccion = models.CharField(max_length=150, blank=True, default="")
    localidad = models.CharField(max_length=100, blank=True, default="")
    nombre_contacto = models.CharField(max_length=100, blank=True, default="")
    telefono = models.CharField(max_length=30, blank=True, default="")
    email = models.CharField(max_length=100, blank=True, default="")
    main_company = models.ForeignKey(MainCompany, on_delete=models.PROTECT, related_name="clientes")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "clientes"
        ordering = ["empresa"]

    def __str__(self) -> str:
        return self.empresa

    def has_dependents(self) -> bool:
        return self.positions.exists()
