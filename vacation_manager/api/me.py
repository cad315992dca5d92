# ruff: noqa: TC001
from __future__ import annotations

from fastapi import APIRouter

from vacation_manager.api.deps import AuthDep
from vacation_manager.config import get_settings
from vacation_manager.db import SessionDep
from vacation_manager.schemas.preferences import PreferencesResponse, UpdatePreferencesRequest
from vacation_manager.schemas.summary import VacationSummary
from vacation_manager.schemas.user import ProfileResponse, UserResponse
from vacation_manager.services import balance as balance_service
from vacation_manager.services import preferences as preferences_service
from vacation_manager.services import user as user_service

me_router = APIRouter(prefix="/me", tags=["me"])


async def _ensure_user(session: SessionDep, auth: AuthDep) -> None:
    await user_service.get_or_create_user(session, auth, get_settings().default_vacation_days)


@me_router.get("", response_model=ProfileResponse)
async def get_profile(session: SessionDep, auth: AuthDep) -> ProfileResponse:
    """Return the caller's profile and landing area, creating the record on first login."""
    return await user_service.get_profile(session, auth, get_settings().default_vacation_days)


@me_router.get("/summary", response_model=VacationSummary)
async def get_my_summary(session: SessionDep, auth: AuthDep) -> VacationSummary:
    """Used, pending and remaining days for the current year."""
    return await balance_service.get_vacation_summary(session, auth)


@me_router.get("/team", response_model=list[UserResponse])
async def get_my_team(session: SessionDep, auth: AuthDep) -> list[UserResponse]:
    return await user_service.list_team(session, auth.user_id)


@me_router.get("/preferences", response_model=PreferencesResponse)
async def get_my_preferences(session: SessionDep, auth: AuthDep) -> PreferencesResponse:
    await _ensure_user(session, auth)
    return await preferences_service.get_preferences(session, auth.user_id)


@me_router.put("/preferences", response_model=PreferencesResponse)
async def update_my_preferences(
    payload: UpdatePreferencesRequest,
    session: SessionDep,
    auth: AuthDep,
) -> PreferencesResponse:
    await _ensure_user(session, auth)
    return await preferences_service.update_preferences(session, auth.user_id, payload)
