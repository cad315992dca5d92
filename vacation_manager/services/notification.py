# ruff: noqa: TC003
from __future__ import annotations

import uuid
from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import func, select
from sqlmodel import col

from vacation_manager.exceptions import NotFoundError, PermissionDeniedError
from vacation_manager.models.notification import Notification
from vacation_manager.schemas.notification import NotificationListResponse, NotificationResponse

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession


def _build_notification_response(notification: Notification) -> NotificationResponse:
    return NotificationResponse(
        id=notification.id,
        user_id=notification.user_id,
        message=notification.message,
        read=notification.read,
        vacation_id=notification.vacation_id,
        created_at=notification.created_at,
    )


def format_date(value: date) -> str:
    """Human readable date used in notification messages, e.g. ``May 10, 2024``."""
    return f"{value.strftime('%b')} {value.day:02d}, {value.year}"


def submitted_message(start_date: date, end_date: date) -> str:
    return (
        f"Your vacation request from {format_date(start_date)} to {format_date(end_date)} "
        "has been submitted and is pending approval."
    )


def resolved_message(start_date: date, end_date: date, status: str, admin_note: str | None = None) -> str:
    suffix = f": {admin_note}" if admin_note else "."
    return f"Your vacation request from {format_date(start_date)} to {format_date(end_date)} has been {status}{suffix}"


async def create_notification(
    session: AsyncSession,
    user_id: uuid.UUID,
    message: str,
    vacation_id: uuid.UUID | None = None,
) -> Notification:
    """Insert and commit a notification record for a user."""
    notification = Notification(user_id=user_id, message=message, vacation_id=vacation_id)
    session.add(notification)
    await session.commit()
    return notification


async def list_notifications(
    session: AsyncSession,
    user_id: uuid.UUID,
    limit: int = 10,
) -> NotificationListResponse:
    """Latest notifications for a user, newest first, with the unread count."""
    result = await session.execute(
        select(Notification)
        .where(col(Notification.user_id) == user_id)
        .order_by(col(Notification.created_at).desc())
        .limit(limit)
    )
    unread_result = await session.execute(
        select(func.count())
        .select_from(Notification)
        .where(col(Notification.user_id) == user_id, col(Notification.read).is_(False))
    )
    return NotificationListResponse(
        items=[_build_notification_response(n) for n in result.scalars().all()],
        unread=unread_result.scalar_one(),
    )


async def mark_as_read(
    session: AsyncSession,
    user_id: uuid.UUID,
    notification_id: uuid.UUID,
) -> NotificationResponse:
    result = await session.execute(select(Notification).where(col(Notification.id) == notification_id))
    notification = result.scalar_one_or_none()
    if notification is None:
        raise NotFoundError("Notification not found")
    if notification.user_id != user_id:
        raise PermissionDeniedError("Not authorized to update this notification")

    notification.read = True
    await session.commit()
    await session.refresh(notification)
    return _build_notification_response(notification)
