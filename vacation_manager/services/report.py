"""Dashboard counters for admins and managers."""

# ruff: noqa: TC003
from __future__ import annotations

import uuid
from datetime import date, timedelta
from typing import TYPE_CHECKING

from sqlalchemy import func, select
from sqlmodel import col

from vacation_manager.models.enums import VacationStatus
from vacation_manager.models.user import User
from vacation_manager.models.vacation import VacationRequest
from vacation_manager.models.vacation_type import VacationType
from vacation_manager.schemas.report import AdminStatsResponse, TeamSummaryResponse, VacationTypeCount
from vacation_manager.services.user import get_team_member_ids

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

_UPCOMING_WINDOW = timedelta(days=7)


async def get_admin_stats(session: AsyncSession) -> AdminStatsResponse:
    """Count users and vacations by status."""
    users_result = await session.execute(select(func.count()).select_from(User))
    total_users = users_result.scalar_one()

    status_result = await session.execute(
        select(col(VacationRequest.status), func.count()).group_by(col(VacationRequest.status))
    )
    by_status: dict[str, int] = {row[0]: row[1] for row in status_result.all()}

    return AdminStatsResponse(
        total_users=total_users,
        total_vacations=sum(by_status.values()),
        pending_vacations=by_status.get(VacationStatus.PENDING.value, 0),
        approved_vacations=by_status.get(VacationStatus.APPROVED.value, 0),
        rejected_vacations=by_status.get(VacationStatus.REJECTED.value, 0),
    )


async def _count(session: AsyncSession, *filters: object) -> int:
    result = await session.execute(select(func.count()).select_from(VacationRequest).where(*filters))
    return result.scalar_one()


async def get_team_summary(
    session: AsyncSession,
    manager_id: uuid.UUID,
    today: date | None = None,
) -> TeamSummaryResponse:
    """Summarize the vacations of the users reporting to ``manager_id``.

    Upcoming means approved and starting within the next seven days.
    """
    today = today or date.today()
    team_ids = await get_team_member_ids(session, manager_id)

    types_result = await session.execute(select(VacationType).order_by(col(VacationType.id)))
    vacation_types = list(types_result.scalars().all())

    if not team_ids:
        return TeamSummaryResponse(
            total_members=0,
            pending_vacations=0,
            upcoming_vacations=0,
            on_vacation_today=0,
            vacations_by_type=[],
        )

    in_team = col(VacationRequest.user_id).in_(team_ids)
    approved = col(VacationRequest.status) == VacationStatus.APPROVED.value

    pending = await _count(session, in_team, col(VacationRequest.status) == VacationStatus.PENDING.value)
    upcoming = await _count(
        session,
        in_team,
        approved,
        col(VacationRequest.start_date) >= today,
        col(VacationRequest.start_date) <= today + _UPCOMING_WINDOW,
    )
    on_vacation = await _count(
        session,
        in_team,
        approved,
        col(VacationRequest.start_date) <= today,
        col(VacationRequest.end_date) >= today,
    )

    type_counts_result = await session.execute(
        select(col(VacationRequest.vacation_type_id), func.count())
        .where(in_team, approved)
        .group_by(col(VacationRequest.vacation_type_id))
    )
    type_counts: dict[int, int] = {row[0]: row[1] for row in type_counts_result.all()}

    return TeamSummaryResponse(
        total_members=len(team_ids),
        pending_vacations=pending,
        upcoming_vacations=upcoming,
        on_vacation_today=on_vacation,
        vacations_by_type=[
            VacationTypeCount(
                type_id=t.id,
                type_name=t.name,
                color=t.color,
                count=type_counts.get(t.id, 0),
            )
            for t in vacation_types
            if t.id is not None
        ],
    )
