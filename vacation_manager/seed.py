"""Seed script for development data.

Run with:  python -m vacation_manager.seed

The default vacation types and the super admin are written straight to the
database, since every API write needs an existing admin. Demo users, a
department and a few requests are then created through the running API.
"""

from __future__ import annotations

import asyncio
import logging
import sys
import uuid
from datetime import date, timedelta

import httpx
from sqlalchemy import select
from sqlmodel import col

from vacation_manager.db import dispose_engine, get_session_factory
from vacation_manager.main import LOG_FORMAT
from vacation_manager.models.enums import UserRole
from vacation_manager.models.user import User
from vacation_manager.services.vacation_type import seed_default_vacation_types

BASE_URL = "http://localhost:8000"
ADMIN_USER_ID = "00000000-0000-0000-0000-000000000001"

HEADERS = {
    "Content-Type": "application/json",
    "X-User-Id": ADMIN_USER_ID,
    "X-User-Email": "admin@example.com",
}

# Well-known user UUIDs
MANAGER_ID = "00000000-0000-0000-0000-000000000002"
ALICE_ID = "00000000-0000-0000-0000-000000000003"
BOB_ID = "00000000-0000-0000-0000-000000000004"

USERS = [
    {"id": MANAGER_ID, "email": "maria.manager@example.com", "name": "Maria Manager", "role": "manager"},
    {"id": ALICE_ID, "email": "alice.johnson@example.com", "name": "Alice Johnson", "manager_id": MANAGER_ID},
    {"id": BOB_ID, "email": "bob.smith@example.com", "name": "Bob Smith", "manager_id": MANAGER_ID},
]


async def bootstrap() -> None:
    """Insert the default vacation types and the super admin if they are missing."""
    print("\n--- Bootstrapping database ---")
    factory = get_session_factory()
    async with factory() as session:
        created = await seed_default_vacation_types(session)
        if created:
            print(f"  [OK] {created} vacation types")
        else:
            print("  [SKIP] vacation types (already exist)")

        result = await session.execute(select(User).where(col(User.id) == uuid.UUID(ADMIN_USER_ID)))
        if result.scalar_one_or_none() is not None:
            print("  [SKIP] super admin (already exists)")
        else:
            session.add(
                User(
                    id=uuid.UUID(ADMIN_USER_ID),
                    email=HEADERS["X-User-Email"],
                    name="Super Admin",
                    role=UserRole.SUPER_ADMIN.value,
                )
            )
            await session.commit()
            print("  [OK] super admin")
    await dispose_engine()


async def _safe_post(
    client: httpx.AsyncClient,
    url: str,
    json: dict,
    label: str,
    headers: dict[str, str] | None = None,
) -> dict | None:
    resp = await client.post(url, json=json, headers=headers or HEADERS)
    if resp.status_code in (200, 201):
        print(f"  [OK] {label}")
        return resp.json()
    if resp.status_code == 409:
        print(f"  [SKIP] {label} (already exists)")
        return None
    print(f"  [ERROR] {label}: {resp.status_code} {resp.text[:200]}")
    return None


async def seed_users(client: httpx.AsyncClient) -> None:
    print("\n--- Seeding users ---")
    for user in USERS:
        await _safe_post(client, f"{BASE_URL}/users", user, f"User: {user['name']}")


async def seed_departments(client: httpx.AsyncClient) -> None:
    print("\n--- Seeding departments ---")
    dept = await _safe_post(
        client,
        f"{BASE_URL}/departments",
        {"name": "Engineering", "description": "Product engineering", "manager_id": MANAGER_ID},
        "Department: Engineering",
    )
    if dept is None:
        return
    for user_id in (MANAGER_ID, ALICE_ID, BOB_ID):
        resp = await client.put(
            f"{BASE_URL}/users/{user_id}/department",
            json={"department_id": dept["id"]},
            headers=HEADERS,
        )
        status = "[OK]" if resp.status_code == 200 else f"[ERROR] {resp.status_code}"
        print(f"  {status} assign {user_id[-4:]} to Engineering")


async def seed_vacations(client: httpx.AsyncClient) -> None:
    """Submit one pending request for Alice and one approved request for Bob."""
    print("\n--- Seeding vacations ---")
    start = date.today() + timedelta(days=14)

    await _safe_post(
        client,
        f"{BASE_URL}/vacations",
        {
            "vacation_type_id": 1,
            "start_date": start.isoformat(),
            "end_date": (start + timedelta(days=4)).isoformat(),
            "notes": "Family trip",
        },
        "Vacation: Alice 5 days (pending)",
        headers={**HEADERS, "X-User-Id": ALICE_ID},
    )

    bob = await _safe_post(
        client,
        f"{BASE_URL}/vacations",
        {
            "vacation_type_id": 2,
            "start_date": (start + timedelta(days=7)).isoformat(),
            "end_date": (start + timedelta(days=8)).isoformat(),
        },
        "Vacation: Bob 2 days",
        headers={**HEADERS, "X-User-Id": BOB_ID},
    )
    if bob is not None:
        await _safe_post(
            client,
            f"{BASE_URL}/vacations/{bob['data']['id']}/approve",
            {"note": "Enjoy!"},
            "Vacation: Bob approved by manager",
            headers={**HEADERS, "X-User-Id": MANAGER_ID},
        )


async def main() -> None:
    logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT)
    print("=" * 60)
    print("  Vacation Manager - Development Seed Script")
    print("=" * 60)

    await bootstrap()

    async with httpx.AsyncClient(timeout=30.0) as client:
        # Health check
        try:
            resp = await client.get(f"{BASE_URL}/health")
            if resp.status_code != 200:
                print(f"API health check failed: {resp.status_code}")
                sys.exit(1)
            print("\n[OK] API is healthy")
        except httpx.ConnectError:
            print("ERROR: Cannot connect to API at", BASE_URL)
            print("Make sure the API is running (uvicorn vacation_manager.main:app)")
            sys.exit(1)

        await seed_users(client)
        await seed_departments(client)
        await seed_vacations(client)

    print("\n" + "=" * 60)
    print("  Seeding complete!")
    print("=" * 60)


if __name__ == "__main__":
    asyncio.run(main())
