# ruff: noqa: B008, TC001, TC003
from __future__ import annotations

import uuid

from fastapi import APIRouter, Query

from vacation_manager.api.deps import AdminDep, ManagerDep
from vacation_manager.db import SessionDep
from vacation_manager.exceptions import PermissionDeniedError
from vacation_manager.schemas.report import AdminStatsResponse, TeamSummaryResponse
from vacation_manager.services import report as report_service

reports_router = APIRouter(prefix="/reports", tags=["reports"])


@reports_router.get("/admin-stats", response_model=AdminStatsResponse)
async def get_admin_stats(session: SessionDep, _auth: AdminDep) -> AdminStatsResponse:
    """Organization-wide user and vacation counters (admin only)."""
    return await report_service.get_admin_stats(session)


@reports_router.get("/team-summary", response_model=TeamSummaryResponse)
async def get_team_summary(
    session: SessionDep,
    auth: ManagerDep,
    manager_id: uuid.UUID | None = Query(default=None),
) -> TeamSummaryResponse:
    """Counters for the caller's team. Admins may ask for another manager's team."""
    if manager_id is not None and manager_id != auth.user_id and not auth.is_admin:
        raise PermissionDeniedError("Not authorized to view this team")
    return await report_service.get_team_summary(session, manager_id or auth.user_id)
