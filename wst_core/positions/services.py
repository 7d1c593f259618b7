# wst_core/positions/services.py
from __future__ import annotations

from typing import Optional

from django.db import IntegrityError, transaction

from wst_core.clients.selectors import get_cliente_or_none
from wst_core.common.db import is_unique_violation
from wst_core.common.errors import ConflictError, NotFoundError
from wst_core.common.lifecycle import RetireOutcome, retire
from wst_core.positions.models import Position
from wst_core.positions.selectors import positions_qs

DUPLICATE_NAME_MSG = "A position with this name already exists."
EDITABLE_FIELDS = {"name", "siglas", "department", "description", "color", "total_horas"}


class PositionService:
    @staticmethod
    def _get(*, main_company_id: int, position_id: int) -> Position:
        position = positions_qs(main_company_id=main_company_id).select_for_update().filter(id=position_id).first()
        if position is None:
            raise NotFoundError("Position not found.")
        return position

    @staticmethod
    def _assert_cliente_owned(*, main_company_id: int, cliente_id: int) -> None:
        if get_cliente_or_none(cliente_id=cliente_id, main_company_id=main_company_id) is None:
            raise NotFoundError("Cliente not found.")

    @staticmethod
    def _assert_name_free(name: str, *, exclude_id: Optional[int] = None) -> None:
        qs = Position.objects.filter(name=name)
        if exclude_id is not None:
            qs = qs.exclude(id=exclude_id)
        if qs.exists():
            raise ConflictError(DUPLICATE_NAME_MSG)

    @staticmethod
    def _save(position: Position, **kwargs) -> None:
        try:
            with transaction.atomic():
                position.save(**kwargs)
        except IntegrityError as exc:
            if is_unique_violation(exc):
                raise ConflictError(DUPLICATE_NAME_MSG) from exc
            raise

    @staticmethod
    @transaction.atomic
    def create(*, main_company_id: int, cliente_id: int, data: dict) -> Position:
        PositionService._assert_cliente_owned(main_company_id=main_company_id, cliente_id=cliente_id)

        values = {k: v for k, v in (data or {}).items() if k in EDITABLE_FIELDS}
        for optional in ("department", "description"):
            if values.get(optional) is None:
                values[optional] = ""
        PositionService._assert_name_free(values["name"])

        position = Position(cliente_id=cliente_id, **values)
        PositionService._save(position)
        return position

    @staticmethod
    @transaction.atomic
    def update(*, main_company_id: int, position_id: int, data: dict) -> Position:
        position = PositionService._get(main_company_id=main_company_id, position_id=position_id)
        data = dict(data or {})

        cliente_id = data.pop("cliente_id", None)
        if cliente_id is not None and cliente_id != position.cliente_id:
            PositionService._assert_cliente_owned(main_company_id=main_company_id, cliente_id=cliente_id)
            position.cliente_id = cliente_id

        updates = {k: v for k, v in data.items() if k in EDITABLE_FIELDS}
        if "name" in updates and updates["name"] != position.name:
            PositionService._assert_name_free(updates["name"], exclude_id=position.id)
        for k, v in updates.items():
            setattr(position, k, "" if v is None and k in ("department", "description") else v)

        PositionService._save(position)
        return position

    @staticmethod
    @transaction.atomic
    def delete(*, main_company_id: int, position_id: int) -> RetireOutcome:
        """
        Soft delete while shifts still reference the position, hard delete otherwise.
        """
        position = PositionService._get(main_company_id=main_company_id, position_id=position_id)
        return retire(position)
