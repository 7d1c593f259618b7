# wst_core/common/errors.py
from __future__ import annotations

import enum
from typing import Any

from rest_framework.exceptions import APIException


class ErrorKind(enum.Enum):
    """
    Closed set of failure kinds. Each kind owns its HTTP status and machine code;
    the API exception handler is the only place that turns a kind into a response.
    """

    UNAUTHORIZED = (401, "UNAUTHORIZED")
    FORBIDDEN = (403, "FORBIDDEN")
    NOT_FOUND = (404, "NOT_FOUND")
    CONFLICT = (409, "CONFLICT")
    VALIDATION_ERROR = (400, "VALIDATION_ERROR")
    INTERNAL_ERROR = (500, "INTERNAL_ERROR")

    @property
    def status_code(self) -> int:
        return self.value[0]

    @property
    def code(self) -> str:
        return self.value[1]


class AppError(APIException):
    """
    Typed domain error raised by services/selectors.
    Flows through DRF's exception handling, so views never need try/except for it.
    """

    kind: ErrorKind = ErrorKind.INTERNAL_ERROR
    default_message = "Internal server error"

    def __init__(self, message: str | None = None, *, details: Any = None):
        self.message = message or self.default_message
        self.details = details
        self.status_code = self.kind.status_code
        super().__init__(detail=self.message, code=self.kind.code)


class UnauthorizedError(AppError):
    kind = ErrorKind.UNAUTHORIZED
    default_message = "You must be logged in to access this resource."


class ForbiddenError(AppError):
    kind = ErrorKind.FORBIDDEN
    default_message = "You do not have permission to perform this action."


class NotFoundError(AppError):
    kind = ErrorKind.NOT_FOUND
    default_message = "Resource not found."


class ConflictError(AppError):
    """
    409 for uniqueness/business-rule collisions.
    `conflicts` (shift double-booking) is rendered as a top-level array.
    """

    kind = ErrorKind.CONFLICT
    default_message = "Conflict."

    def __init__(self, message: str | None = None, *, details: Any = None, conflicts: list | None = None):
        self.conflicts = conflicts
        super().__init__(message, details=details)
