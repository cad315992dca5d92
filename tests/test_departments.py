from __future__ import annotations

from typing import TYPE_CHECKING

from vacation_manager.models import User
from vacation_manager.models.enums import UserRole

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from httpx import AsyncClient

    MakeUser = Callable[..., Awaitable[User]]

DEPARTMENTS_URL = "/departments"


async def test_department_crud(async_client: AsyncClient, make_user: MakeUser) -> None:
    admin = await make_user(role=UserRole.ADMIN)
    manager = await make_user(role=UserRole.MANAGER)
    headers = {"X-User-Id": str(admin.id)}

    resp = await async_client.post(
        DEPARTMENTS_URL,
        json={"name": "Engineering", "description": "Builds things", "manager_id": str(manager.id)},
        headers=headers,
    )
    assert resp.status_code == 201
    dept = resp.json()
    assert dept["manager_id"] == str(manager.id)
    assert dept["members"] == []

    resp = await async_client.patch(f"{DEPARTMENTS_URL}/{dept['id']}", json={"name": "R&D"}, headers=headers)
    assert resp.status_code == 200
    assert resp.json()["name"] == "R&D"
    assert resp.json()["description"] == "Builds things"

    resp = await async_client.get(DEPARTMENTS_URL, headers=headers)
    assert resp.json()["total"] == 1

    resp = await async_client.delete(f"{DEPARTMENTS_URL}/{dept['id']}", headers=headers)
    assert resp.status_code == 204

    resp = await async_client.get(f"{DEPARTMENTS_URL}/{dept['id']}", headers=headers)
    assert resp.status_code == 404


async def test_duplicate_name_conflicts(async_client: AsyncClient, make_user: MakeUser) -> None:
    admin = await make_user(role=UserRole.ADMIN)
    headers = {"X-User-Id": str(admin.id)}
    await async_client.post(DEPARTMENTS_URL, json={"name": "Sales"}, headers=headers)

    resp = await async_client.post(DEPARTMENTS_URL, json={"name": "Sales"}, headers=headers)
    assert resp.status_code == 409


async def test_head_must_be_manager(async_client: AsyncClient, make_user: MakeUser) -> None:
    admin = await make_user(role=UserRole.ADMIN)
    plain = await make_user()
    resp = await async_client.post(
        DEPARTMENTS_URL,
        json={"name": "Support", "manager_id": str(plain.id)},
        headers={"X-User-Id": str(admin.id)},
    )
    assert resp.status_code == 400


async def test_members_listed_and_block_delete(async_client: AsyncClient, make_user: MakeUser) -> None:
    admin = await make_user(role=UserRole.ADMIN)
    member = await make_user(name="Member")
    headers = {"X-User-Id": str(admin.id)}
    dept = (await async_client.post(DEPARTMENTS_URL, json={"name": "Ops"}, headers=headers)).json()

    resp = await async_client.put(
        f"/users/{member.id}/department", json={"department_id": dept["id"]}, headers=headers
    )
    assert resp.status_code == 200
    assert resp.json()["department_id"] == dept["id"]

    resp = await async_client.get(f"{DEPARTMENTS_URL}/{dept['id']}", headers=headers)
    assert [m["name"] for m in resp.json()["members"]] == ["Member"]

    resp = await async_client.delete(f"{DEPARTMENTS_URL}/{dept['id']}", headers=headers)
    assert resp.status_code == 409

    await async_client.put(f"/users/{member.id}/department", json={"department_id": None}, headers=headers)
    resp = await async_client.delete(f"{DEPARTMENTS_URL}/{dept['id']}", headers=headers)
    assert resp.status_code == 204


async def test_departments_are_admin_only(async_client: AsyncClient, make_user: MakeUser) -> None:
    manager = await make_user(role=UserRole.MANAGER)
    resp = await async_client.get(DEPARTMENTS_URL, headers={"X-User-Id": str(manager.id)})
    assert resp.status_code == 403
