# wst_core/common/openapi.py
from __future__ import annotations

from drf_spectacular.openapi import AutoSchema
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter

from wst_core.common.policy import allowed_roles


class WSTAutoSchema(AutoSchema):
    """
    Global OpenAPI improvements:

    - Adds the optional X-Request-Id header to every operation
    - Appends the roles allowed by the route policy table to each description
    """

    REQUEST_ID_HEADER = OpenApiParameter(
        name="X-Request-Id",
        type=OpenApiTypes.STR,
        location=OpenApiParameter.HEADER,
        required=False,
        description="Optional correlation id; echoed back on the response.",
    )

    def _policy_pair(self) -> tuple[str | None, str | None]:
        view = getattr(self, "view", None)
        resource = getattr(view, "policy_resource", None)
        action = getattr(view, "action", None) or (self.method or "").lower()
        return resource, action

    def get_override_parameters(self):
        params = list(super().get_override_parameters() or [])
        if not any(p.name.lower() == "x-request-id" for p in params):
            params.append(self.REQUEST_ID_HEADER)
        return params

    def get_description(self):
        description = super().get_description() or ""
        roles = allowed_roles(*self._policy_pair())
        if roles:
            suffix = "Allowed roles: " + ", ".join(sorted(roles)) + "."
            description = f"{description}\n\n{suffix}".strip()
        return description
