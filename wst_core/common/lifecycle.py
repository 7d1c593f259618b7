# wst_core/common/lifecycle.py
from __future__ import annotations

import enum
import logging

from django.db import transaction
from django.utils import timezone

logger = logging.getLogger(__name__)


class Lifecycle(enum.Enum):
    """
    How an entity type is retired. Each model class declares one as `lifecycle`.
    """

    STATUS_FLAG = "status_flag"                          # status -> retired_status, row kept
    TIMESTAMP = "timestamp"                              # deleted_at stamped, row kept
    TIMESTAMP_IF_REFERENCED = "timestamp_if_referenced"  # stamped when dependents exist, else removed
    HARD = "hard"                                        # row removed


class RetireOutcome(enum.Enum):
    DEACTIVATED = "deactivated"
    SOFT_DELETED = "soft_deleted"
    DELETED = "deleted"


def _soft_delete(obj) -> RetireOutcome:
    obj.deleted_at = timezone.now()
    update_fields = ["deleted_at"]
    if any(f.name == "updated_at" for f in obj._meta.fields):
        update_fields.append("updated_at")
    obj.save(update_fields=update_fields)
    return RetireOutcome.SOFT_DELETED


@transaction.atomic
def retire(obj) -> RetireOutcome:
    """
    Single dispatcher for every delete endpoint.
    """
    strategy = getattr(type(obj), "lifecycle", None)
    if not isinstance(strategy, Lifecycle):
        raise TypeError(f"{type(obj).__name__} does not declare a lifecycle")

    pk = obj.pk

    if strategy is Lifecycle.STATUS_FLAG:
        obj.status = obj.retired_status
        obj.save(update_fields=["status"])
        outcome = RetireOutcome.DEACTIVATED
    elif strategy is Lifecycle.TIMESTAMP:
        outcome = _soft_delete(obj)
    elif strategy is Lifecycle.TIMESTAMP_IF_REFERENCED:
        if obj.has_dependents():
            outcome = _soft_delete(obj)
        else:
            obj.delete()
            outcome = RetireOutcome.DELETED
    else:
        obj.delete()
        outcome = RetireOutcome.DELETED

    logger.info("retired %s id=%s outcome=%s", type(obj).__name__, pk, outcome.value)
    return outcome
