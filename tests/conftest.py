from __future__ import annotations

import os
import uuid
from typing import TYPE_CHECKING

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

from vacation_manager.db import get_session
from vacation_manager.main import app
from vacation_manager.models import SQLModel, User
from vacation_manager.models.enums import UserRole
from vacation_manager.services.vacation_type import seed_default_vacation_types

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Awaitable, Callable

    from sqlalchemy.ext.asyncio import AsyncEngine

TEST_DATABASE_URL = os.environ.get("TEST_DATABASE_URL", "sqlite+aiosqlite://")


@pytest.fixture
async def engine() -> AsyncIterator[AsyncEngine]:
    """Create a fresh database for each test.

    The default in-memory SQLite database lives on a single shared connection
    so every session in the test sees the same tables.
    """
    if TEST_DATABASE_URL.startswith("sqlite"):
        _engine = create_async_engine(
            TEST_DATABASE_URL,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        _engine = create_async_engine(TEST_DATABASE_URL)
    async with _engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield _engine
    async with _engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await _engine.dispose()


@pytest.fixture
async def db_session(engine: AsyncEngine) -> AsyncIterator[AsyncSession]:
    """Yield a database session with the default vacation types installed."""
    async with AsyncSession(bind=engine, expire_on_commit=False) as session:
        await seed_default_vacation_types(session)
        yield session


@pytest.fixture
async def async_client(engine: AsyncEngine, db_session: AsyncSession) -> AsyncIterator[AsyncClient]:
    """Async HTTP client with the database session dependency overridden.

    Each request gets its own session on the test database, like the real dependency.
    """

    async def _override_get_session() -> AsyncIterator[AsyncSession]:
        async with AsyncSession(bind=engine, expire_on_commit=False) as session:
            yield session

    app.dependency_overrides[get_session] = _override_get_session
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db_session: AsyncSession) -> Callable[..., Awaitable[User]]:
    """Factory fixture that inserts a user record directly."""

    async def _make_user(
        role: UserRole = UserRole.USER,
        manager_id: uuid.UUID | None = None,
        total_vacation_days: int = 21,
        name: str = "Test User",
    ) -> User:
        user = User(
            email=f"{uuid.uuid4().hex[:8]}@example.com",
            name=name,
            role=role.value,
            manager_id=manager_id,
            total_vacation_days=total_vacation_days,
        )
        db_session.add(user)
        await db_session.commit()
        return user

    return _make_user
