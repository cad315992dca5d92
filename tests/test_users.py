"""Tests for the profile endpoints and the admin user screens."""

from __future__ import annotations

import uuid
from typing import TYPE_CHECKING

import pytest
from sqlalchemy import func, select
from sqlmodel import col

from vacation_manager.models import Notification, User, VacationRequest
from vacation_manager.models.enums import UserRole
from vacation_manager.services.user import home_path_for_role

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from httpx import AsyncClient
    from sqlalchemy.ext.asyncio import AsyncSession

    MakeUser = Callable[..., Awaitable[User]]

USERS_URL = "/users"


def _headers(user: User) -> dict[str, str]:
    return {"X-User-Id": str(user.id)}


# ---------------------------------------------------------------------------
# /me
# ---------------------------------------------------------------------------


async def test_me_creates_record_on_first_login(async_client: AsyncClient) -> None:
    user_id = uuid.uuid4()
    resp = await async_client.get(
        "/me",
        headers={"X-User-Id": str(user_id), "X-User-Email": "jo@example.com", "X-User-Name": "Jo Doe"},
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["home_path"] == "/"
    assert body["user"]["id"] == str(user_id)
    assert body["user"]["name"] == "Jo Doe"
    assert body["user"]["role"] == "user"
    assert body["user"]["total_vacation_days"] == 21


@pytest.mark.parametrize(
    ("role", "expected"),
    [
        (UserRole.USER, "/"),
        (UserRole.MANAGER, "/manager"),
        (UserRole.ADMIN, "/admin"),
        (UserRole.SUPER_ADMIN, "/admin"),
    ],
)
def test_home_path_for_role(role: UserRole, expected: str) -> None:
    assert home_path_for_role(role) == expected


async def test_me_team_lists_direct_reports(async_client: AsyncClient, make_user: MakeUser) -> None:
    manager = await make_user(role=UserRole.MANAGER)
    await make_user(manager_id=manager.id, name="Zed")
    await make_user(manager_id=manager.id, name="Amy")
    await make_user(name="Outsider")

    resp = await async_client.get("/me/team", headers=_headers(manager))
    assert resp.status_code == 200
    assert [u["name"] for u in resp.json()] == ["Amy", "Zed"]


# ---------------------------------------------------------------------------
# Admin screens
# ---------------------------------------------------------------------------


async def test_non_admin_cannot_list_users(async_client: AsyncClient, make_user: MakeUser) -> None:
    user = await make_user()
    resp = await async_client.get(USERS_URL, headers=_headers(user))
    assert resp.status_code == 403
    assert resp.json()["detail"] == "Admin access required"


async def test_list_users_with_role_filter(async_client: AsyncClient, make_user: MakeUser) -> None:
    admin = await make_user(role=UserRole.ADMIN)
    await make_user(role=UserRole.MANAGER)
    await make_user()

    resp = await async_client.get(USERS_URL, headers=_headers(admin))
    assert resp.json()["total"] == 3

    resp = await async_client.get(USERS_URL, params={"role": "manager"}, headers=_headers(admin))
    assert resp.json()["total"] == 1


async def test_create_get_and_update_user(async_client: AsyncClient, make_user: MakeUser) -> None:
    admin = await make_user(role=UserRole.ADMIN)
    resp = await async_client.post(
        USERS_URL,
        json={"email": "new@example.com", "name": "New Person", "total_vacation_days": 25},
        headers=_headers(admin),
    )
    assert resp.status_code == 201
    created = resp.json()
    assert created["role"] == "user"

    resp = await async_client.get(f"{USERS_URL}/{created['id']}", headers=_headers(admin))
    assert resp.json()["email"] == "new@example.com"

    resp = await async_client.patch(
        f"{USERS_URL}/{created['id']}", json={"total_vacation_days": 30}, headers=_headers(admin)
    )
    assert resp.status_code == 200
    assert resp.json()["total_vacation_days"] == 30
    assert resp.json()["name"] == "New Person"


async def test_create_duplicate_user_conflicts(async_client: AsyncClient, make_user: MakeUser) -> None:
    admin = await make_user(role=UserRole.ADMIN)
    payload = {"id": str(admin.id), "email": "dup@example.com", "name": "Dup"}
    resp = await async_client.post(USERS_URL, json=payload, headers=_headers(admin))
    assert resp.status_code == 409


async def test_get_missing_user(async_client: AsyncClient, make_user: MakeUser) -> None:
    admin = await make_user(role=UserRole.ADMIN)
    resp = await async_client.get(f"{USERS_URL}/{uuid.uuid4()}", headers=_headers(admin))
    assert resp.status_code == 404


async def test_role_change_requires_super_admin(async_client: AsyncClient, make_user: MakeUser) -> None:
    admin = await make_user(role=UserRole.ADMIN)
    super_admin = await make_user(role=UserRole.SUPER_ADMIN)
    target = await make_user()
    url = f"{USERS_URL}/{target.id}/role"

    resp = await async_client.put(url, json={"role": "manager"}, headers=_headers(admin))
    assert resp.status_code == 403

    resp = await async_client.put(url, json={"role": "manager"}, headers=_headers(super_admin))
    assert resp.status_code == 200
    assert resp.json()["role"] == "manager"

    resp = await async_client.get("/me", headers=_headers(target))
    assert resp.json()["home_path"] == "/manager"


async def test_assign_manager_validates_role(async_client: AsyncClient, make_user: MakeUser) -> None:
    admin = await make_user(role=UserRole.ADMIN)
    manager = await make_user(role=UserRole.MANAGER)
    plain = await make_user()
    target = await make_user()
    url = f"{USERS_URL}/{target.id}/manager"

    resp = await async_client.put(url, json={"manager_id": str(plain.id)}, headers=_headers(admin))
    assert resp.status_code == 400

    resp = await async_client.put(url, json={"manager_id": str(target.id)}, headers=_headers(admin))
    assert resp.status_code == 400

    resp = await async_client.put(url, json={"manager_id": str(manager.id)}, headers=_headers(admin))
    assert resp.status_code == 200
    assert resp.json()["manager_id"] == str(manager.id)

    resp = await async_client.put(url, json={"manager_id": None}, headers=_headers(admin))
    assert resp.json()["manager_id"] is None


async def test_list_managers(async_client: AsyncClient, make_user: MakeUser) -> None:
    admin = await make_user(role=UserRole.ADMIN, name="Admin")
    await make_user(role=UserRole.MANAGER, name="Manager")
    await make_user(name="Plain")

    resp = await async_client.get(f"{USERS_URL}/managers", headers=_headers(admin))
    assert resp.status_code == 200
    assert [u["name"] for u in resp.json()] == ["Admin", "Manager"]


async def test_delete_user_cascades(
    async_client: AsyncClient,
    db_session: AsyncSession,
    make_user: MakeUser,
) -> None:
    super_admin = await make_user(role=UserRole.SUPER_ADMIN)
    target = await make_user()
    await async_client.post(
        "/vacations",
        json={"vacation_type_id": 1, "start_date": "2024-05-06", "end_date": "2024-05-07"},
        headers=_headers(target),
    )

    resp = await async_client.delete(f"{USERS_URL}/{target.id}", headers=_headers(super_admin))
    assert resp.status_code == 204

    for model, column in ((User, User.id), (VacationRequest, VacationRequest.user_id)):
        count = await db_session.execute(select(func.count()).select_from(model).where(col(column) == target.id))
        assert count.scalar_one() == 0
    count = await db_session.execute(
        select(func.count()).select_from(Notification).where(col(Notification.user_id) == target.id)
    )
    assert count.scalar_one() == 0


async def test_admin_cannot_delete_user(async_client: AsyncClient, make_user: MakeUser) -> None:
    admin = await make_user(role=UserRole.ADMIN)
    target = await make_user()
    resp = await async_client.delete(f"{USERS_URL}/{target.id}", headers=_headers(admin))
    assert resp.status_code == 403
