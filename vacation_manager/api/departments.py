# ruff: noqa: TC001, TC003
from __future__ import annotations

import uuid

from fastapi import APIRouter, Response, status

from vacation_manager.api.deps import AdminDep
from vacation_manager.db import SessionDep
from vacation_manager.schemas.department import (
    CreateDepartmentRequest,
    DepartmentListResponse,
    DepartmentResponse,
    UpdateDepartmentRequest,
)
from vacation_manager.services import department as department_service

departments_router = APIRouter(prefix="/departments", tags=["departments"])


@departments_router.get("", response_model=DepartmentListResponse)
async def list_departments(session: SessionDep, _auth: AdminDep) -> DepartmentListResponse:
    return await department_service.list_departments(session)


@departments_router.post("", response_model=DepartmentResponse, status_code=status.HTTP_201_CREATED)
async def create_department(
    payload: CreateDepartmentRequest,
    session: SessionDep,
    _auth: AdminDep,
) -> DepartmentResponse:
    return await department_service.create_department(session, payload)


@departments_router.get("/{department_id}", response_model=DepartmentResponse)
async def get_department(department_id: uuid.UUID, session: SessionDep, _auth: AdminDep) -> DepartmentResponse:
    """Get a department with its members."""
    return await department_service.get_department(session, department_id)


@departments_router.patch("/{department_id}", response_model=DepartmentResponse)
async def update_department(
    department_id: uuid.UUID,
    payload: UpdateDepartmentRequest,
    session: SessionDep,
    _auth: AdminDep,
) -> DepartmentResponse:
    return await department_service.update_department(session, department_id, payload)


@departments_router.delete("/{department_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_department(department_id: uuid.UUID, session: SessionDep, _auth: AdminDep) -> Response:
    """Delete a department that has no users assigned."""
    await department_service.delete_department(session, department_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
