# ruff: noqa: TC003
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

_COLOR_PATTERN = r"^#[0-9A-Fa-f]{6}$"


class CreateVacationTypeRequest(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    description: str | None = None
    color: str = Field(default="#4CAF50", pattern=_COLOR_PATTERN)
    icon: str | None = Field(default=None, max_length=50)


class UpdateVacationTypeRequest(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=100)
    description: str | None = None
    color: str | None = Field(default=None, pattern=_COLOR_PATTERN)
    icon: str | None = Field(default=None, max_length=50)


class VacationTypeResponse(BaseModel):
    id: int
    name: str
    description: str | None
    color: str
    icon: str | None
    created_at: datetime


class VacationTypeListResponse(BaseModel):
    items: list[VacationTypeResponse]
    total: int
