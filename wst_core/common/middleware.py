# wst_core/common/middleware.py
from __future__ import annotations

import logging
import re
import time

from django.utils.deprecation import MiddlewareMixin

from wst_core.common.api.exceptions import ensure_request_id

logger = logging.getLogger("wst_core.request")

_REQUEST_ID_RE = re.compile(r"^[A-Za-z0-9\-_.]{1,64}$")


class RequestLogMiddleware(MiddlewareMixin):
    """
    Attaches request.request_id (incoming X-Request-Id when sane, otherwise generated),
    echoes it back, and writes one access line per /api/ request:

        GET /api/shifts 200 in 12ms rid=...
    """

    LOGGED_PREFIXES = ("/api/",)
    REQUEST_ID_HEADER = "HTTP_X_REQUEST_ID"

    def process_request(self, request):
        incoming = request.META.get(self.REQUEST_ID_HEADER)
        if incoming and _REQUEST_ID_RE.match(incoming):
            request.request_id = incoming
        else:
            ensure_request_id(request)
        request._started_at = time.monotonic()
        return None

    def process_response(self, request, response):
        rid = ensure_request_id(request)
        response["X-Request-Id"] = rid

        path = getattr(request, "path", "") or ""
        if any(path.startswith(p) for p in self.LOGGED_PREFIXES):
            started = getattr(request, "_started_at", None)
            duration_ms = int((time.monotonic() - started) * 1000) if started is not None else -1
            level = logging.WARNING if response.status_code >= 500 else logging.INFO
            logger.log(
                level,
                "%s %s %s in %sms rid=%s",
                request.method,
                path,
                response.status_code,
                duration_ms,
                rid,
            )
        return response
