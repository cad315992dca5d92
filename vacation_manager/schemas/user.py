# ruff: noqa: TC001, TC003
from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel, Field

from vacation_manager.models.enums import UserRole


class CreateUserRequest(BaseModel):
    """Request body for creating a user record (admin only)."""

    id: uuid.UUID | None = None
    email: str = Field(min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
    name: str = Field(min_length=1, max_length=255)
    total_vacation_days: int = Field(default=21, ge=0, le=366)
    role: UserRole = UserRole.USER
    manager_id: uuid.UUID | None = None
    department_id: uuid.UUID | None = None


class UpdateUserRequest(BaseModel):
    """Partial update of profile fields and allowance."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    email: str | None = Field(default=None, min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
    total_vacation_days: int | None = Field(default=None, ge=0, le=366)
    profile_image_url: str | None = Field(default=None, max_length=1024)


class UpdateRoleRequest(BaseModel):
    role: UserRole


class AssignDepartmentRequest(BaseModel):
    department_id: uuid.UUID | None = None


class AssignManagerRequest(BaseModel):
    manager_id: uuid.UUID | None = None


class UserResponse(BaseModel):
    """Response schema for a user."""

    id: uuid.UUID
    email: str
    name: str
    profile_image_url: str | None
    total_vacation_days: int
    role: UserRole
    manager_id: uuid.UUID | None
    department_id: uuid.UUID | None
    created_at: datetime
    updated_at: datetime


class UserListResponse(BaseModel):
    items: list[UserResponse]
    total: int


class UserBrief(BaseModel):
    """Minimal user reference used in pickers and department member lists."""

    id: uuid.UUID
    name: str
    email: str


class ProfileResponse(BaseModel):
    """The caller's own profile plus the area their role lands on."""

    user: UserResponse
    home_path: str
