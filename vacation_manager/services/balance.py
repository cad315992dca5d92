"""Balance aggregator: used, pending and remaining vacation days for a calendar year."""

# ruff: noqa: TC003
from __future__ import annotations

import logging
import uuid
from collections.abc import Iterable
from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import select
from sqlmodel import col

from vacation_manager.config import get_settings
from vacation_manager.models.enums import VacationStatus
from vacation_manager.models.vacation import VacationRequest
from vacation_manager.schemas.summary import VacationSummary
from vacation_manager.services import preferences as preferences_service
from vacation_manager.services.days import DateInput, compute_chargeable_days, parse_date
from vacation_manager.services.user import fetch_user, get_or_create_user

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from vacation_manager.schemas.auth import AuthContext

logger = logging.getLogger(__name__)

DateRange = tuple[DateInput, DateInput]


def default_summary(total_days: int | None = None) -> VacationSummary:
    """Summary for a user with no recorded usage."""
    if total_days is None:
        total_days = get_settings().default_vacation_days
    return VacationSummary(used=0, pending=0, remaining=total_days, total=total_days)


def overlaps_year(start_date: DateInput, end_date: DateInput, year: int) -> bool:
    """True when the range lies fully or partially inside the calendar year."""
    start = parse_date(start_date)
    end = parse_date(end_date)
    if start is None or end is None:
        return False
    return start <= date(year, 12, 31) and end >= date(year, 1, 1)


def _sum_days(ranges: Iterable[DateRange], year: int) -> int:
    return sum(compute_chargeable_days(start, end) for start, end in ranges if overlaps_year(start, end, year))


def compute_summary(
    total_days: int,
    approved_ranges: Iterable[DateRange],
    pending_ranges: Iterable[DateRange],
    today: date | None = None,
) -> VacationSummary:
    """Aggregate approved and pending ranges of the current year into a summary.

    Pending days are informational only: ``remaining`` is ``total - used``
    and can go negative when the allowance was lowered after approvals.
    """
    year = (today or date.today()).year
    used = _sum_days(approved_ranges, year)
    pending = _sum_days(pending_ranges, year)
    return VacationSummary(used=used, pending=pending, remaining=total_days - used, total=total_days)


async def _fetch_ranges(
    session: AsyncSession,
    user_id: uuid.UUID,
    status: VacationStatus,
    year: int,
) -> list[tuple[date, date]]:
    """Date ranges of a user's requests in ``status`` that overlap the year."""
    result = await session.execute(
        select(col(VacationRequest.start_date), col(VacationRequest.end_date)).where(
            col(VacationRequest.user_id) == user_id,
            col(VacationRequest.status) == status.value,
            col(VacationRequest.start_date) <= date(year, 12, 31),
            col(VacationRequest.end_date) >= date(year, 1, 1),
        )
    )
    return [(row[0], row[1]) for row in result.all()]


async def get_vacation_summary(
    session: AsyncSession,
    auth: AuthContext,
    user_id: uuid.UUID | None = None,
    today: date | None = None,
) -> VacationSummary:
    """Compute the summary for ``user_id`` (defaults to the caller).

    The caller's own record is created with the default allowance on first
    sight. Any failure while reading degrades to the default summary so the
    dashboard keeps rendering.
    """
    default_days = get_settings().default_vacation_days
    target_id = user_id or auth.user_id
    today = today or date.today()

    try:
        if target_id == auth.user_id:
            user, created = await get_or_create_user(session, auth, default_days)
            if created:
                await _create_default_preferences(session, target_id)
                return default_summary(default_days)
        else:
            user = await fetch_user(session, target_id)
            if user is None:
                return default_summary(default_days)

        total_days = user.total_vacation_days
        approved = await _fetch_ranges(session, target_id, VacationStatus.APPROVED, today.year)
        pending = await _fetch_ranges(session, target_id, VacationStatus.PENDING, today.year)
        return compute_summary(total_days, approved, pending, today=today)
    except Exception:
        logger.exception("Vacation summary failed for user %s", target_id)
        await session.rollback()
        return default_summary(default_days)


async def _create_default_preferences(session: AsyncSession, user_id: uuid.UUID) -> None:
    try:
        await preferences_service.create_default_preferences(session, user_id)
    except Exception:
        logger.exception("Creating default preferences failed for user %s", user_id)
        await session.rollback()
