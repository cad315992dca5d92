# ruff: noqa: TC001, TC003
from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel, Field

from vacation_manager.schemas.user import UserBrief


class CreateDepartmentRequest(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    description: str | None = None
    manager_id: uuid.UUID | None = None


class UpdateDepartmentRequest(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    manager_id: uuid.UUID | None = None


class DepartmentResponse(BaseModel):
    """Response schema for a department."""

    id: uuid.UUID
    name: str
    description: str | None
    manager_id: uuid.UUID | None
    created_at: datetime
    updated_at: datetime
    members: list[UserBrief] = []


class DepartmentListResponse(BaseModel):
    items: list[DepartmentResponse]
    total: int
