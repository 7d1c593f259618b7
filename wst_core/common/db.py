# wst_core/common/db.py
from __future__ import annotations

from django.db import IntegrityError

UNIQUE_VIOLATION = "23505"


def is_unique_violation(exc: BaseException) -> bool:
    """
    True when an IntegrityError comes from a unique constraint.
    PostgreSQL reports SQLSTATE 23505 on the driver error; SQLite only has the message.
    """
    if not isinstance(exc, IntegrityError):
        return False

    cause = exc.__cause__
    sqlstate = getattr(cause, "sqlstate", None) or getattr(cause, "pgcode", None)
    if sqlstate:
        return sqlstate == UNIQUE_VIOLATION

    return "unique" in str(exc).lower()
