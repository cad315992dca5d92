# ruff: noqa: TC003
from __future__ import annotations

import uuid

import sqlalchemy as sa
from sqlmodel import Field

from vacation_manager.models.base import UpdatedAtMixin
from vacation_manager.models.enums import FirstDayOfWeek, Language, Theme


class UserPreferences(UpdatedAtMixin, table=True):
    """Per-user UI preferences."""

    __tablename__ = "user_preferences"

    user_id: uuid.UUID = Field(
        sa_column=sa.Column(sa.Uuid, sa.ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
    )
    theme: str = Field(default=Theme.LIGHT, max_length=20)
    language: str = Field(default=Language.EN, max_length=10)
    notifications_enabled: bool = True
    calendar_sync_enabled: bool = False
    first_day_of_week: str = Field(default=FirstDayOfWeek.SUNDAY, max_length=20)
    include_weekend_days: bool = False
