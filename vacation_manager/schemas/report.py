from __future__ import annotations

from pydantic import BaseModel


class AdminStatsResponse(BaseModel):
    """Organization-wide counters for the admin dashboard."""

    total_users: int
    total_vacations: int
    pending_vacations: int
    approved_vacations: int
    rejected_vacations: int


class VacationTypeCount(BaseModel):
    type_id: int
    type_name: str
    color: str
    count: int


class TeamSummaryResponse(BaseModel):
    """Team counters for the manager dashboard."""

    total_members: int
    pending_vacations: int
    upcoming_vacations: int
    on_vacation_today: int
    vacations_by_type: list[VacationTypeCount]
