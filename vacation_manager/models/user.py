# ruff: noqa: TC003
from __future__ import annotations

import uuid

import sqlalchemy as sa
from sqlmodel import Field

from vacation_manager.models.base import TimestampMixin, UpdatedAtMixin, UUIDBase
from vacation_manager.models.enums import UserRole


class User(UUIDBase, TimestampMixin, UpdatedAtMixin, table=True):
    """An employee profile. The id matches the identity provider's user id."""

    __tablename__ = "users"

    email: str = Field(max_length=255, index=True)
    name: str = Field(max_length=255)
    profile_image_url: str | None = Field(default=None, max_length=1024)
    total_vacation_days: int = Field(default=21, sa_column_kwargs={"server_default": "21"})
    role: str = Field(default=UserRole.USER, max_length=50, sa_column_kwargs={"server_default": "user"})
    manager_id: uuid.UUID | None = Field(
        default=None,
        sa_column=sa.Column(sa.Uuid, sa.ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True),
    )
    department_id: uuid.UUID | None = Field(
        default=None,
        sa_column=sa.Column(
            sa.Uuid, sa.ForeignKey("departments.id", ondelete="SET NULL"), nullable=True, index=True
        ),
    )
