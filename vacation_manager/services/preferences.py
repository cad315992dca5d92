# ruff: noqa: TC003
from __future__ import annotations

import logging
import uuid
from typing import TYPE_CHECKING

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlmodel import col

from vacation_manager.models.enums import FirstDayOfWeek, Language, Theme
from vacation_manager.models.preferences import UserPreferences
from vacation_manager.schemas.preferences import PreferencesResponse

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from vacation_manager.schemas.preferences import UpdatePreferencesRequest

logger = logging.getLogger(__name__)


def _build_preferences_response(prefs: UserPreferences) -> PreferencesResponse:
    return PreferencesResponse(
        user_id=prefs.user_id,
        theme=Theme(prefs.theme),
        language=Language(prefs.language),
        notifications_enabled=prefs.notifications_enabled,
        calendar_sync_enabled=prefs.calendar_sync_enabled,
        first_day_of_week=FirstDayOfWeek(prefs.first_day_of_week),
        include_weekend_days=prefs.include_weekend_days,
        updated_at=prefs.updated_at,
    )


async def _fetch_preferences(session: AsyncSession, user_id: uuid.UUID) -> UserPreferences | None:
    result = await session.execute(select(UserPreferences).where(col(UserPreferences.user_id) == user_id))
    return result.scalar_one_or_none()


async def create_default_preferences(session: AsyncSession, user_id: uuid.UUID) -> UserPreferences:
    """Insert the default preference row for a user, or return the one already stored."""
    prefs = UserPreferences(user_id=user_id)
    session.add(prefs)
    try:
        await session.commit()
    except IntegrityError:
        await session.rollback()
        existing = await _fetch_preferences(session, user_id)
        if existing is None:
            raise
        logger.info("Preferences for %s were created concurrently, using existing record", user_id)
        return existing
    logger.info("Created default preferences for %s", user_id)
    return prefs


async def get_preferences(session: AsyncSession, user_id: uuid.UUID) -> PreferencesResponse:
    """Return the user's preferences, creating defaults on first read."""
    prefs = await _fetch_preferences(session, user_id)
    if prefs is None:
        prefs = await create_default_preferences(session, user_id)
    return _build_preferences_response(prefs)


async def update_preferences(
    session: AsyncSession,
    user_id: uuid.UUID,
    payload: UpdatePreferencesRequest,
) -> PreferencesResponse:
    prefs = await _fetch_preferences(session, user_id)
    if prefs is None:
        prefs = await create_default_preferences(session, user_id)

    for field, value in payload.model_dump(mode="json", exclude_unset=True, exclude_none=True).items():
        setattr(prefs, field, value)

    await session.commit()
    await session.refresh(prefs)
    return _build_preferences_response(prefs)
