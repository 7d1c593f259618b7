# wst_core/common/api/exceptions.py

from __future__ import annotations

import logging
import uuid
from typing import Any

from django.core.exceptions import PermissionDenied as DjangoPermissionDenied
from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import (
    APIException,
    AuthenticationFailed,
    MethodNotAllowed,
    NotAuthenticated,
    NotFound,
    ParseError,
    PermissionDenied,
    ValidationError,
)
from rest_framework.response import Response

from wst_core.common.errors import AppError, ConflictError, ErrorKind

logger = logging.getLogger(__name__)

GENERIC_500_MESSAGE = "Internal server error"
VALIDATION_MESSAGE = "Invalid data"


def ensure_request_id(request) -> str:
    """
    Ensures request has a stable request_id attribute and returns it.
    Safe to call from middleware and DRF exception handler.
    """
    rid = getattr(request, "request_id", None) if request is not None else None
    if not rid:
        rid = uuid.uuid4().hex
        if request is not None:
            setattr(request, "request_id", rid)
    return rid


def build_error_envelope(*, request=None, kind: ErrorKind, message: str, details: Any = None) -> dict[str, Any]:
    """
    Canonical error body: {message, code, details, request_id}.
    Reusable from Django middleware (JsonResponse) and DRF (Response).
    """
    return {
        "message": message,
        "code": kind.code,
        "details": details,
        "request_id": ensure_request_id(request),
    }


def _flatten_validation_errors(data: Any, prefix: str = "") -> list[dict[str, str]]:
    """
    DRF validation detail (nested dict/list of ErrorDetail) -> [{field, message}].
    """
    out: list[dict[str, str]] = []
    if isinstance(data, dict):
        for key, value in data.items():
            field = f"{prefix}.{key}" if prefix else str(key)
            out.extend(_flatten_validation_errors(value, field))
    elif isinstance(data, list):
        for i, item in enumerate(data):
            if isinstance(item, (dict, list)):
                out.extend(_flatten_validation_errors(item, f"{prefix}[{i}]" if prefix else str(i)))
            else:
                out.append({"field": prefix or "non_field_errors", "message": str(item)})
    else:
        out.append({"field": prefix or "non_field_errors", "message": str(data)})
    return out


def _kind_for(exc: Exception) -> ErrorKind:
    if isinstance(exc, AppError):
        return exc.kind
    if isinstance(exc, (ValidationError, ParseError)):
        return ErrorKind.VALIDATION_ERROR
    if isinstance(exc, (NotAuthenticated, AuthenticationFailed)):
        return ErrorKind.UNAUTHORIZED
    if isinstance(exc, (PermissionDenied, DjangoPermissionDenied)):
        return ErrorKind.FORBIDDEN
    if isinstance(exc, (NotFound, Http404)):
        return ErrorKind.NOT_FOUND
    return ErrorKind.INTERNAL_ERROR


def api_exception_handler(exc: Exception, context: dict[str, Any]):
    request = context.get("request")
    kind = _kind_for(exc)

    # ✅ Field-level validation errors
    if kind is ErrorKind.VALIDATION_ERROR:
        detail = exc.detail if isinstance(exc, APIException) else str(exc)
        return Response(
            {
                "message": VALIDATION_MESSAGE,
                "code": kind.code,
                "errors": _flatten_validation_errors(detail),
                "request_id": ensure_request_id(request),
            },
            status=status.HTTP_400_BAD_REQUEST,
        )

    if isinstance(exc, AppError):
        body = build_error_envelope(request=request, kind=kind, message=exc.message, details=exc.details)
        if isinstance(exc, ConflictError) and exc.conflicts is not None:
            body["conflicts"] = exc.conflicts
        return Response(body, status=kind.status_code)

    if kind is not ErrorKind.INTERNAL_ERROR:
        message = str(exc.detail) if isinstance(exc, APIException) else (str(exc) or "Request failed.")
        if isinstance(exc, Http404):
            message = "Resource not found."
        return Response(
            build_error_envelope(request=request, kind=kind, message=message),
            status=kind.status_code,
            headers=_auth_headers(exc),
        )

    # Other DRF exceptions (405, 406, 415, 429...) keep their own status.
    if isinstance(exc, APIException):
        http_status = exc.status_code
        if http_status < 500:
            code = "METHOD_NOT_ALLOWED" if isinstance(exc, MethodNotAllowed) else str(exc.default_code).upper()
            return Response(
                {
                    "message": str(exc.detail),
                    "code": code,
                    "details": None,
                    "request_id": ensure_request_id(request),
                },
                status=http_status,
            )

    # Truly unhandled error
    logger.exception("Unhandled error rid=%s", ensure_request_id(request))
    return Response(
        build_error_envelope(request=request, kind=ErrorKind.INTERNAL_ERROR, message=GENERIC_500_MESSAGE),
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def _auth_headers(exc: Exception) -> dict[str, str] | None:
    auth_header = getattr(exc, "auth_header", None)
    if auth_header:
        return {"WWW-Authenticate": auth_header}
    return None
