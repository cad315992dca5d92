# ruff: noqa: TC001, TC003
from __future__ import annotations

import uuid
from datetime import date, datetime
from typing import Self

from pydantic import BaseModel, Field, model_validator

from vacation_manager.models.enums import VacationStatus

# ---------------------------------------------------------------------------
# Request payloads
# ---------------------------------------------------------------------------


class SubmitVacationPayload(BaseModel):
    """Request body for submitting a new vacation request."""

    vacation_type_id: int = Field(ge=1)
    start_date: date
    end_date: date
    notes: str | None = Field(default=None, max_length=2000)

    @model_validator(mode="after")
    def _validate_dates(self) -> Self:
        if self.end_date < self.start_date:
            msg = "end_date must not be before start_date"
            raise ValueError(msg)
        return self


class DecisionPayload(BaseModel):
    """Request body for approve/reject actions."""

    note: str | None = Field(default=None, max_length=1000)


class UpdateNotesPayload(BaseModel):
    notes: str | None = Field(default=None, max_length=2000)


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class VacationResponse(BaseModel):
    """Response schema for a single vacation request."""

    id: uuid.UUID
    user_id: uuid.UUID
    vacation_type_id: int
    start_date: date
    end_date: date
    requested_days: int
    notes: str | None
    status: VacationStatus
    admin_note: str | None
    resolved_by: uuid.UUID | None
    created_at: datetime
    updated_at: datetime


class VacationListResponse(BaseModel):
    """Paginated list of vacation requests."""

    items: list[VacationResponse]
    total: int
