# ruff: noqa: TC003
from __future__ import annotations

import uuid
from datetime import date

import sqlalchemy as sa
from sqlmodel import Field

from vacation_manager.models.base import TimestampMixin, UpdatedAtMixin, UUIDBase
from vacation_manager.models.enums import VacationStatus


class VacationRequest(UUIDBase, TimestampMixin, UpdatedAtMixin, table=True):
    """A user's time-off request with its approval state."""

    __tablename__ = "vacations"
    __table_args__ = (
        sa.Index("ix_vacation_user_status", "user_id", "status"),
        sa.CheckConstraint("start_date <= end_date", name="ck_vacation_date_order"),
    )

    user_id: uuid.UUID = Field(
        sa_column=sa.Column(sa.Uuid, sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True),
    )
    vacation_type_id: int = Field(
        sa_column=sa.Column(sa.Integer, sa.ForeignKey("vacation_types.id"), nullable=False),
    )
    start_date: date
    end_date: date
    # Chargeable days at submission time; balances are always recomputed from the dates.
    requested_days: int = Field(default=0)
    notes: str | None = None
    status: str = Field(
        default=VacationStatus.PENDING, max_length=20, index=True, sa_column_kwargs={"server_default": "pending"}
    )
    admin_note: str | None = None
    resolved_by: uuid.UUID | None = None
