# ruff: noqa: TC003
from __future__ import annotations

import uuid
from typing import TYPE_CHECKING

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlmodel import col

from vacation_manager.exceptions import AppError, ConflictError, NotFoundError
from vacation_manager.models.department import Department
from vacation_manager.models.enums import RESOLVER_ROLES, UserRole
from vacation_manager.models.user import User
from vacation_manager.schemas.department import DepartmentListResponse, DepartmentResponse
from vacation_manager.services.user import build_user_brief, fetch_user

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from vacation_manager.schemas.department import CreateDepartmentRequest, UpdateDepartmentRequest


def _build_department_response(department: Department, members: list[User] | None = None) -> DepartmentResponse:
    return DepartmentResponse(
        id=department.id,
        name=department.name,
        description=department.description,
        manager_id=department.manager_id,
        created_at=department.created_at,
        updated_at=department.updated_at,
        members=[build_user_brief(u) for u in members or []],
    )


async def _get_department_or_404(session: AsyncSession, department_id: uuid.UUID) -> Department:
    result = await session.execute(select(Department).where(col(Department.id) == department_id))
    department = result.scalar_one_or_none()
    if department is None:
        raise NotFoundError("Department not found")
    return department


async def _verify_head(session: AsyncSession, manager_id: uuid.UUID | None) -> None:
    """A department head must be a manager or an admin."""
    if manager_id is None:
        return
    manager = await fetch_user(session, manager_id)
    if manager is None or UserRole(manager.role) not in RESOLVER_ROLES:
        raise AppError("Department manager must be an existing manager or admin", status_code=400)


async def _list_members(session: AsyncSession, department_id: uuid.UUID) -> list[User]:
    result = await session.execute(
        select(User).where(col(User.department_id) == department_id).order_by(col(User.name))
    )
    return list(result.scalars().all())


async def list_departments(session: AsyncSession) -> DepartmentListResponse:
    result = await session.execute(select(Department).order_by(col(Department.name)))
    items = [_build_department_response(d) for d in result.scalars().all()]
    return DepartmentListResponse(items=items, total=len(items))


async def get_department(session: AsyncSession, department_id: uuid.UUID) -> DepartmentResponse:
    """Get a department together with its members."""
    department = await _get_department_or_404(session, department_id)
    members = await _list_members(session, department_id)
    return _build_department_response(department, members)


async def create_department(session: AsyncSession, payload: CreateDepartmentRequest) -> DepartmentResponse:
    await _verify_head(session, payload.manager_id)

    department = Department(name=payload.name, description=payload.description, manager_id=payload.manager_id)
    session.add(department)
    try:
        await session.flush()
    except IntegrityError:
        await session.rollback()
        raise ConflictError("A department with this name already exists") from None

    await session.commit()
    await session.refresh(department)
    return _build_department_response(department)


async def update_department(
    session: AsyncSession,
    department_id: uuid.UUID,
    payload: UpdateDepartmentRequest,
) -> DepartmentResponse:
    department = await _get_department_or_404(session, department_id)
    changes = payload.model_dump(exclude_unset=True)
    if "manager_id" in changes:
        await _verify_head(session, changes["manager_id"])

    for field, value in changes.items():
        if value is None and field == "name":
            continue
        setattr(department, field, value)

    try:
        await session.flush()
    except IntegrityError:
        await session.rollback()
        raise ConflictError("A department with this name already exists") from None

    await session.commit()
    await session.refresh(department)
    return _build_department_response(department)


async def delete_department(session: AsyncSession, department_id: uuid.UUID) -> None:
    """Delete a department. Refused while users are still assigned to it."""
    department = await _get_department_or_404(session, department_id)

    count_result = await session.execute(
        select(func.count()).select_from(User).where(col(User.department_id) == department_id)
    )
    if count_result.scalar_one() > 0:
        raise ConflictError("Cannot delete department with assigned users. Please reassign users first.")

    await session.delete(department)
    await session.commit()
