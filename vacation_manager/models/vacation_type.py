from __future__ import annotations

from datetime import datetime

import sqlalchemy as sa
from sqlmodel import Field, SQLModel

from vacation_manager.models.base import now_utc


class VacationType(SQLModel, table=True):
    """Category of time off (regular, casual, sick, ...)."""

    __tablename__ = "vacation_types"

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(max_length=100)
    description: str | None = None
    color: str = Field(max_length=20)
    icon: str | None = Field(default=None, max_length=50)
    created_at: datetime = Field(
        default_factory=now_utc,
        sa_type=sa.DateTime(timezone=True),  # ty: ignore[invalid-argument-type]
        sa_column_kwargs={"server_default": sa.func.now()},
    )
