# ruff: noqa: B008, TC001, TC003
from __future__ import annotations

import uuid

from fastapi import APIRouter, Query, Response, status

from vacation_manager.api.deps import AdminDep, AuthDep, SuperAdminDep
from vacation_manager.db import SessionDep
from vacation_manager.exceptions import PermissionDeniedError
from vacation_manager.models.enums import UserRole
from vacation_manager.schemas.summary import VacationSummary
from vacation_manager.schemas.user import (
    AssignDepartmentRequest,
    AssignManagerRequest,
    CreateUserRequest,
    UpdateRoleRequest,
    UpdateUserRequest,
    UserBrief,
    UserListResponse,
    UserResponse,
)
from vacation_manager.services import balance as balance_service
from vacation_manager.services import user as user_service

users_router = APIRouter(prefix="/users", tags=["users"])


@users_router.get("", response_model=UserListResponse)
async def list_users(
    session: SessionDep,
    _auth: AdminDep,
    role: UserRole | None = Query(default=None),
    department_id: uuid.UUID | None = Query(default=None),
    offset: int = Query(default=0, ge=0),
    limit: int = Query(default=50, ge=1, le=100),
) -> UserListResponse:
    """List users (admin only)."""
    return await user_service.list_users(session, role, department_id, offset, limit)


@users_router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(payload: CreateUserRequest, session: SessionDep, _auth: AdminDep) -> UserResponse:
    """Create a user record (admin only)."""
    return await user_service.create_user(session, payload)


@users_router.get("/managers", response_model=list[UserBrief])
async def list_managers(session: SessionDep, _auth: AdminDep) -> list[UserBrief]:
    """Users eligible as team managers or department heads."""
    return await user_service.list_managers(session)


@users_router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: uuid.UUID, session: SessionDep, _auth: AdminDep) -> UserResponse:
    return await user_service.get_user(session, user_id)


@users_router.patch("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: uuid.UUID,
    payload: UpdateUserRequest,
    session: SessionDep,
    _auth: AdminDep,
) -> UserResponse:
    """Update name, email or the annual allowance (admin only)."""
    return await user_service.update_user(session, user_id, payload)


@users_router.put("/{user_id}/role", response_model=UserResponse)
async def update_user_role(
    user_id: uuid.UUID,
    payload: UpdateRoleRequest,
    session: SessionDep,
    _auth: SuperAdminDep,
) -> UserResponse:
    """Change a user's role (super admin only)."""
    return await user_service.update_user_role(session, user_id, payload.role)


@users_router.put("/{user_id}/department", response_model=UserResponse)
async def assign_department(
    user_id: uuid.UUID,
    payload: AssignDepartmentRequest,
    session: SessionDep,
    _auth: AdminDep,
) -> UserResponse:
    return await user_service.assign_department(session, user_id, payload.department_id)


@users_router.put("/{user_id}/manager", response_model=UserResponse)
async def assign_manager(
    user_id: uuid.UUID,
    payload: AssignManagerRequest,
    session: SessionDep,
    _auth: AdminDep,
) -> UserResponse:
    return await user_service.assign_manager(session, user_id, payload.manager_id)


@users_router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user_id: uuid.UUID, session: SessionDep, _auth: SuperAdminDep) -> Response:
    """Delete a user and everything they own (super admin only)."""
    await user_service.delete_user(session, user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@users_router.get("/{user_id}/summary", response_model=VacationSummary)
async def get_user_summary(user_id: uuid.UUID, session: SessionDep, auth: AuthDep) -> VacationSummary:
    """Vacation summary of a user. Visible to the user, their manager and admins."""
    if not await user_service.can_view_user(session, auth, user_id):
        raise PermissionDeniedError("Not authorized to view this user's summary")
    return await balance_service.get_vacation_summary(session, auth, user_id)
