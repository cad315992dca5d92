# ruff: noqa: TC003
from __future__ import annotations

import uuid

import sqlalchemy as sa
from sqlmodel import Field

from vacation_manager.models.base import TimestampMixin, UUIDBase


class Notification(UUIDBase, TimestampMixin, table=True):
    """A message shown to a user, usually about one of their vacation requests."""

    __tablename__ = "notifications"
    __table_args__ = (sa.Index("ix_notification_user_created", "user_id", "created_at"),)

    user_id: uuid.UUID = Field(
        sa_column=sa.Column(sa.Uuid, sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    )
    message: str
    read: bool = Field(default=False, sa_column_kwargs={"server_default": sa.false()})
    vacation_id: uuid.UUID | None = Field(
        default=None,
        sa_column=sa.Column(sa.Uuid, sa.ForeignKey("vacations.id", ondelete="SET NULL"), nullable=True),
    )
