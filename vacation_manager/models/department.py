# ruff: noqa: TC003
from __future__ import annotations

import uuid

import sqlalchemy as sa
from sqlmodel import Field

from vacation_manager.models.base import TimestampMixin, UpdatedAtMixin, UUIDBase


class Department(UUIDBase, TimestampMixin, UpdatedAtMixin, table=True):
    """Organizational unit that users are assigned to."""

    __tablename__ = "departments"
    __table_args__ = (sa.UniqueConstraint("name", name="uq_department_name"),)

    name: str = Field(max_length=255)
    description: str | None = None
    manager_id: uuid.UUID | None = Field(
        default=None,
        sa_column=sa.Column(
            sa.Uuid,
            sa.ForeignKey("users.id", ondelete="SET NULL", use_alter=True, name="fk_department_manager"),
            nullable=True,
        ),
    )
