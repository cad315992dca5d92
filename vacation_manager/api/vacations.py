# ruff: noqa: B008, TC001, TC003
from __future__ import annotations

import uuid

from fastapi import APIRouter, Query, status

from vacation_manager.api.deps import AuthDep, ManagerDep, unwrap
from vacation_manager.db import SessionDep
from vacation_manager.models.enums import Resolution, VacationStatus
from vacation_manager.schemas.result import OperationResult
from vacation_manager.schemas.vacation import (
    DecisionPayload,
    SubmitVacationPayload,
    UpdateNotesPayload,
    VacationListResponse,
    VacationResponse,
)
from vacation_manager.services import vacation as vacation_service

vacations_router = APIRouter(prefix="/vacations", tags=["vacations"])

VacationResult = OperationResult[VacationResponse]


@vacations_router.post("", response_model=VacationResult, status_code=status.HTTP_201_CREATED)
async def submit_vacation(
    payload: SubmitVacationPayload,
    session: SessionDep,
    auth: AuthDep,
) -> VacationResult:
    """Submit a new vacation request."""
    return unwrap(await vacation_service.submit_vacation(session, auth, payload))


@vacations_router.get("", response_model=VacationListResponse)
async def list_vacations(
    session: SessionDep,
    auth: AuthDep,
    status_filter: VacationStatus | None = Query(default=None, alias="status"),
    user_id: uuid.UUID | None = Query(default=None),
    offset: int = Query(default=0, ge=0),
    limit: int = Query(default=50, ge=1, le=100),
) -> VacationListResponse:
    """List vacation requests with optional filters."""
    return await vacation_service.list_vacations(session, auth, status_filter, user_id, offset, limit)


@vacations_router.get("/upcoming", response_model=VacationListResponse)
async def list_upcoming_vacations(session: SessionDep, auth: AuthDep) -> VacationListResponse:
    """The caller's requests that have not ended yet."""
    return await vacation_service.list_upcoming_vacations(session, auth)


@vacations_router.get("/pending", response_model=VacationListResponse)
async def list_pending_vacations(session: SessionDep, auth: ManagerDep) -> VacationListResponse:
    """Pending requests awaiting a decision from the caller (manager or admin)."""
    return await vacation_service.list_pending_vacations(session, auth)


@vacations_router.get("/{vacation_id}", response_model=VacationResponse)
async def get_vacation(
    vacation_id: uuid.UUID,
    session: SessionDep,
    auth: AuthDep,
) -> VacationResponse:
    return await vacation_service.get_vacation(session, auth, vacation_id)


@vacations_router.patch("/{vacation_id}", response_model=VacationResult)
async def update_vacation_notes(
    vacation_id: uuid.UUID,
    payload: UpdateNotesPayload,
    session: SessionDep,
    auth: AuthDep,
) -> VacationResult:
    """Edit the notes of a pending request (owner only)."""
    return unwrap(await vacation_service.update_vacation_notes(session, auth, vacation_id, payload.notes))


@vacations_router.delete("/{vacation_id}", response_model=VacationResult)
async def delete_vacation(
    vacation_id: uuid.UUID,
    session: SessionDep,
    auth: AuthDep,
) -> VacationResult:
    """Delete a request of any status (owner or admin)."""
    return unwrap(await vacation_service.delete_vacation(session, auth, vacation_id))


@vacations_router.post("/{vacation_id}/approve", response_model=VacationResult)
async def approve_vacation(
    vacation_id: uuid.UUID,
    session: SessionDep,
    auth: AuthDep,
    payload: DecisionPayload | None = None,
) -> VacationResult:
    """Approve a vacation request (manager of the requester, or admin)."""
    note = payload.note if payload else None
    return unwrap(await vacation_service.resolve_vacation(session, auth, vacation_id, Resolution.APPROVED, note))


@vacations_router.post("/{vacation_id}/reject", response_model=VacationResult)
async def reject_vacation(
    vacation_id: uuid.UUID,
    session: SessionDep,
    auth: AuthDep,
    payload: DecisionPayload | None = None,
) -> VacationResult:
    """Reject a vacation request (manager of the requester, or admin)."""
    note = payload.note if payload else None
    return unwrap(await vacation_service.resolve_vacation(session, auth, vacation_id, Resolution.REJECTED, note))
