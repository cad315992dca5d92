# ruff: noqa: TC003
from __future__ import annotations

import uuid

from fastapi import APIRouter

from vacation_manager.api.deps import AuthDep
from vacation_manager.config import get_settings
from vacation_manager.db import SessionDep
from vacation_manager.schemas.notification import NotificationListResponse, NotificationResponse
from vacation_manager.services import notification as notification_service

notifications_router = APIRouter(prefix="/notifications", tags=["notifications"])


@notifications_router.get("", response_model=NotificationListResponse)
async def list_notifications(session: SessionDep, auth: AuthDep) -> NotificationListResponse:
    """Latest notifications of the caller with the unread count."""
    return await notification_service.list_notifications(session, auth.user_id, get_settings().notification_limit)


@notifications_router.post("/{notification_id}/read", response_model=NotificationResponse)
async def mark_notification_read(
    notification_id: uuid.UUID,
    session: SessionDep,
    auth: AuthDep,
) -> NotificationResponse:
    return await notification_service.mark_as_read(session, auth.user_id, notification_id)
