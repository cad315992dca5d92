# ruff: noqa: TC001
from __future__ import annotations

from fastapi import APIRouter, Response, status

from vacation_manager.api.deps import AdminDep, AuthDep
from vacation_manager.db import SessionDep
from vacation_manager.schemas.vacation_type import (
    CreateVacationTypeRequest,
    UpdateVacationTypeRequest,
    VacationTypeListResponse,
    VacationTypeResponse,
)
from vacation_manager.services import vacation_type as vacation_type_service

vacation_types_router = APIRouter(prefix="/vacation-types", tags=["vacation-types"])


@vacation_types_router.get("", response_model=VacationTypeListResponse)
async def list_vacation_types(session: SessionDep, _auth: AuthDep) -> VacationTypeListResponse:
    return await vacation_type_service.list_vacation_types(session)


@vacation_types_router.post("", response_model=VacationTypeResponse, status_code=status.HTTP_201_CREATED)
async def create_vacation_type(
    payload: CreateVacationTypeRequest,
    session: SessionDep,
    _auth: AdminDep,
) -> VacationTypeResponse:
    return await vacation_type_service.create_vacation_type(session, payload)


@vacation_types_router.patch("/{type_id}", response_model=VacationTypeResponse)
async def update_vacation_type(
    type_id: int,
    payload: UpdateVacationTypeRequest,
    session: SessionDep,
    _auth: AdminDep,
) -> VacationTypeResponse:
    return await vacation_type_service.update_vacation_type(session, type_id, payload)


@vacation_types_router.delete("/{type_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_vacation_type(type_id: int, session: SessionDep, _auth: AdminDep) -> Response:
    """Delete a vacation type that no request uses."""
    await vacation_type_service.delete_vacation_type(session, type_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
