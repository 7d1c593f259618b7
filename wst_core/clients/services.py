# wst_core/clients/services.py
from __future__ import annotations

from django.db import transaction

from wst_core.clients.models import Cliente
from wst_core.clients.selectors import clientes_qs
from wst_core.common.errors import NotFoundError
from wst_core.common.lifecycle import RetireOutcome, retire

EDITABLE_FIELDS = {"empresa", "direccion", "localidad", "nombre_contacto", "telefono", "email"}


class ClienteService:
    @staticmethod
    def _get(*, main_company_id: int, cliente_id: int) -> Cliente:
        cliente = clientes_qs(main_company_id=main_company_id).select_for_update().filter(id=cliente_id).first()
        if cliente is None:
            raise NotFoundError("Cliente not found.")
        return cliente

    @staticmethod
    @transaction.atomic
    def create(*, main_company_id: int, data: dict) -> Cliente:
        values = {k: (v or "") for k, v in (data or {}).items() if k in EDITABLE_FIELDS}
        return Cliente.objects.create(main_company_id=main_company_id, **values)

    @staticmethod
    @transaction.atomic
    def update(*, main_company_id: int, cliente_id: int, data: dict) -> Cliente:
        cliente = ClienteService._get(main_company_id=main_company_id, cliente_id=cliente_id)

        updates = {k: (v or "") for k, v in (data or {}).items() if k in EDITABLE_FIELDS}
        for k, v in updates.items():
            setattr(cliente, k, v)
        if updates:
            cliente.save(update_fields=list(updates))
        return cliente

    @staticmethod
    @transaction.atomic
    def delete(*, main_company_id: int, cliente_id: int) -> RetireOutcome:
        """
        Soft delete while positions still point at the client, hard delete otherwise.
        """
        cliente = ClienteService._get(main_company_id=main_company_id, cliente_id=cliente_id)
        return retire(cliente)
