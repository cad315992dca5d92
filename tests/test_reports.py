from __future__ import annotations

import uuid
from datetime import date, timedelta
from typing import TYPE_CHECKING

from vacation_manager.models import User, VacationRequest
from vacation_manager.models.enums import UserRole, VacationStatus
from vacation_manager.services.report import get_team_summary

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from httpx import AsyncClient
    from sqlalchemy.ext.asyncio import AsyncSession

    MakeUser = Callable[..., Awaitable[User]]

TODAY = date(2024, 6, 3)


def _day(offset: int) -> date:
    return TODAY + timedelta(days=offset)


async def _add_vacation(
    session: AsyncSession,
    user_id: uuid.UUID,
    status: VacationStatus,
    start: date,
    end: date,
    vacation_type_id: int = 1,
) -> None:
    session.add(
        VacationRequest(
            user_id=user_id,
            vacation_type_id=vacation_type_id,
            start_date=start,
            end_date=end,
            status=status.value,
        )
    )
    await session.commit()


async def test_admin_stats(async_client: AsyncClient, db_session: AsyncSession, make_user: MakeUser) -> None:
    admin = await make_user(role=UserRole.ADMIN)
    user = await make_user()
    await _add_vacation(db_session, user.id, VacationStatus.PENDING, TODAY, TODAY)
    await _add_vacation(db_session, user.id, VacationStatus.APPROVED, TODAY, TODAY)
    await _add_vacation(db_session, user.id, VacationStatus.APPROVED, TODAY, TODAY)
    await _add_vacation(db_session, user.id, VacationStatus.REJECTED, TODAY, TODAY)

    resp = await async_client.get("/reports/admin-stats", headers={"X-User-Id": str(admin.id)})

    assert resp.status_code == 200
    assert resp.json() == {
        "total_users": 2,
        "total_vacations": 4,
        "pending_vacations": 1,
        "approved_vacations": 2,
        "rejected_vacations": 1,
    }


async def test_admin_stats_requires_admin(async_client: AsyncClient, make_user: MakeUser) -> None:
    manager = await make_user(role=UserRole.MANAGER)
    resp = await async_client.get("/reports/admin-stats", headers={"X-User-Id": str(manager.id)})
    assert resp.status_code == 403


async def test_team_summary(db_session: AsyncSession, make_user: MakeUser) -> None:
    manager = await make_user(role=UserRole.MANAGER)
    alice = await make_user(manager_id=manager.id)
    bob = await make_user(manager_id=manager.id)
    outsider = await make_user()

    await _add_vacation(db_session, alice.id, VacationStatus.PENDING, _day(10), _day(11))
    # On vacation today.
    await _add_vacation(db_session, alice.id, VacationStatus.APPROVED, _day(-1), _day(1))
    # Starts within the next seven days.
    await _add_vacation(db_session, bob.id, VacationStatus.APPROVED, _day(3), _day(4), vacation_type_id=3)
    # Too far ahead to be upcoming.
    await _add_vacation(db_session, bob.id, VacationStatus.APPROVED, _day(30), _day(31))
    await _add_vacation(db_session, outsider.id, VacationStatus.APPROVED, TODAY, TODAY)

    summary = await get_team_summary(db_session, manager.id, today=TODAY)

    assert summary.total_members == 2
    assert summary.pending_vacations == 1
    assert summary.upcoming_vacations == 1
    assert summary.on_vacation_today == 1
    counts = {c.type_name: c.count for c in summary.vacations_by_type}
    assert counts["Regular"] == 2
    assert counts["Sick"] == 1
    assert counts["Casual"] == 0


async def test_team_summary_without_team(db_session: AsyncSession, make_user: MakeUser) -> None:
    manager = await make_user(role=UserRole.MANAGER)
    summary = await get_team_summary(db_session, manager.id, today=TODAY)
    assert summary.total_members == 0
    assert summary.vacations_by_type == []


async def test_team_summary_endpoint_scoping(async_client: AsyncClient, make_user: MakeUser) -> None:
    manager = await make_user(role=UserRole.MANAGER)
    other_manager = await make_user(role=UserRole.MANAGER)
    admin = await make_user(role=UserRole.ADMIN)
    await make_user(manager_id=other_manager.id)

    resp = await async_client.get("/reports/team-summary", headers={"X-User-Id": str(manager.id)})
    assert resp.status_code == 200
    assert resp.json()["total_members"] == 0

    resp = await async_client.get(
        "/reports/team-summary",
        params={"manager_id": str(other_manager.id)},
        headers={"X-User-Id": str(manager.id)},
    )
    assert resp.status_code == 403

    resp = await async_client.get(
        "/reports/team-summary",
        params={"manager_id": str(other_manager.id)},
        headers={"X-User-Id": str(admin.id)},
    )
    assert resp.json()["total_members"] == 1

    user = await make_user()
    resp = await async_client.get("/reports/team-summary", headers={"X-User-Id": str(user.id)})
    assert resp.status_code == 403
