# wst_core/common/context.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from wst_core.common.policy import ROLE_SUPER_ADMIN


@dataclass
class RequestContext:
    """
    Request-scoped identity, built once by the auth gate and exposed as `request.auth`.
    Later gates enrich it (company_status) and views pass its fields into selectors/services.
    """

    user: Any
    role: str
    main_company_id: Optional[int]
    company_status: Any = field(default=None)

    @property
    def is_super_admin(self) -> bool:
        return self.role == ROLE_SUPER_ADMIN

    @property
    def company_filter(self) -> Optional[int]:
        """
        Tenant id every storage call must filter by.
        None only for super_admin, meaning platform-wide.
        """
        if self.is_super_admin:
            return None
        return self.main_company_id
