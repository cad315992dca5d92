from __future__ import annotations

import uuid
from typing import TYPE_CHECKING

import pytest

from vacation_manager.exceptions import AppError
from vacation_manager.models import User, VacationType
from vacation_manager.models.enums import UserRole
from vacation_manager.services.vacation_type import _build_vacation_type_response, seed_default_vacation_types

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from httpx import AsyncClient
    from sqlalchemy.ext.asyncio import AsyncSession

    MakeUser = Callable[..., Awaitable[User]]

TYPES_URL = "/vacation-types"


async def test_default_types_listed(async_client: AsyncClient) -> None:
    resp = await async_client.get(TYPES_URL, headers={"X-User-Id": str(uuid.uuid4())})
    assert resp.status_code == 200
    items = resp.json()["items"]
    assert [t["name"] for t in items] == ["Regular", "Casual", "Sick", "Personal", "Public Holiday"]
    assert items[0]["color"] == "#4CAF50"


async def test_seeding_is_idempotent(db_session: AsyncSession) -> None:
    assert await seed_default_vacation_types(db_session) == 0


async def test_admin_manages_types(async_client: AsyncClient, make_user: MakeUser) -> None:
    admin = await make_user(role=UserRole.ADMIN)
    headers = {"X-User-Id": str(admin.id)}

    resp = await async_client.post(TYPES_URL, json={"name": "Study", "color": "#123ABC"}, headers=headers)
    assert resp.status_code == 201
    created = resp.json()
    assert created["id"] > 5

    resp = await async_client.patch(f"{TYPES_URL}/{created['id']}", json={"icon": "book"}, headers=headers)
    assert resp.json()["icon"] == "book"
    assert resp.json()["color"] == "#123ABC"

    resp = await async_client.delete(f"{TYPES_URL}/{created['id']}", headers=headers)
    assert resp.status_code == 204


async def test_invalid_color_rejected(async_client: AsyncClient, make_user: MakeUser) -> None:
    admin = await make_user(role=UserRole.ADMIN)
    resp = await async_client.post(
        TYPES_URL, json={"name": "Odd", "color": "red"}, headers={"X-User-Id": str(admin.id)}
    )
    assert resp.status_code == 422


async def test_type_in_use_cannot_be_deleted(async_client: AsyncClient, make_user: MakeUser) -> None:
    admin = await make_user(role=UserRole.ADMIN)
    await async_client.post(
        "/vacations",
        json={"vacation_type_id": 3, "start_date": "2024-05-06", "end_date": "2024-05-06"},
        headers={"X-User-Id": str(admin.id)},
    )

    resp = await async_client.delete(f"{TYPES_URL}/3", headers={"X-User-Id": str(admin.id)})
    assert resp.status_code == 409


async def test_users_cannot_create_types(async_client: AsyncClient, make_user: MakeUser) -> None:
    user = await make_user()
    resp = await async_client.post(TYPES_URL, json={"name": "Nap"}, headers={"X-User-Id": str(user.id)})
    assert resp.status_code == 403


def test_unsaved_type_cannot_be_returned() -> None:
    with pytest.raises(AppError) as exc_info:
        _build_vacation_type_response(VacationType(name="Draft", color="#000000"))
    assert exc_info.value.status_code == 500
