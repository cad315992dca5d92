# ruff: noqa: TC003
from __future__ import annotations

import uuid

from pydantic import BaseModel

from vacation_manager.models.enums import ADMIN_ROLES, RESOLVER_ROLES, UserRole


class AuthContext(BaseModel):
    """Caller identity from request headers, with the role read from the user store."""

    user_id: uuid.UUID
    email: str | None = None
    name: str | None = None
    role: UserRole = UserRole.USER

    @property
    def is_admin(self) -> bool:
        return self.role in ADMIN_ROLES

    @property
    def is_resolver(self) -> bool:
        return self.role in RESOLVER_ROLES
