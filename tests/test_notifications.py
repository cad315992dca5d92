from __future__ import annotations

import uuid
from datetime import date
from typing import TYPE_CHECKING

from vacation_manager.models import User
from vacation_manager.services.notification import (
    create_notification,
    format_date,
    list_notifications,
    resolved_message,
    submitted_message,
)

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from httpx import AsyncClient
    from sqlalchemy.ext.asyncio import AsyncSession

    MakeUser = Callable[..., Awaitable[User]]


def test_format_date() -> None:
    assert format_date(date(2024, 5, 10)) == "May 10, 2024"
    assert format_date(date(2024, 12, 1)) == "Dec 01, 2024"


def test_messages() -> None:
    start, end = date(2024, 5, 10), date(2024, 5, 13)
    assert submitted_message(start, end) == (
        "Your vacation request from May 10, 2024 to May 13, 2024 has been submitted and is pending approval."
    )
    assert resolved_message(start, end, "approved") == (
        "Your vacation request from May 10, 2024 to May 13, 2024 has been approved."
    )
    assert resolved_message(start, end, "rejected", "Team offsite") == (
        "Your vacation request from May 10, 2024 to May 13, 2024 has been rejected: Team offsite"
    )


async def test_list_is_limited_and_counts_unread(db_session: AsyncSession, make_user: MakeUser) -> None:
    user = await make_user()
    for i in range(12):
        await create_notification(db_session, user.id, f"Message {i}")

    result = await list_notifications(db_session, user.id, limit=10)

    assert len(result.items) == 10
    assert result.unread == 12
    assert result.items[0].message == "Message 11"


async def test_mark_as_read(async_client: AsyncClient, db_session: AsyncSession, make_user: MakeUser) -> None:
    user = await make_user()
    notification = await create_notification(db_session, user.id, "Hello")
    headers = {"X-User-Id": str(user.id)}

    resp = await async_client.post(f"/notifications/{notification.id}/read", headers=headers)
    assert resp.status_code == 200
    assert resp.json()["read"] is True

    resp = await async_client.get("/notifications", headers=headers)
    assert resp.json()["unread"] == 0


async def test_only_owner_marks_as_read(
    async_client: AsyncClient,
    db_session: AsyncSession,
    make_user: MakeUser,
) -> None:
    owner = await make_user()
    other = await make_user()
    notification = await create_notification(db_session, owner.id, "Private")

    resp = await async_client.post(f"/notifications/{notification.id}/read", headers={"X-User-Id": str(other.id)})
    assert resp.status_code == 403

    resp = await async_client.post(f"/notifications/{uuid.uuid4()}/read", headers={"X-User-Id": str(other.id)})
    assert resp.status_code == 404
