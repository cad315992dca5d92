from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from vacation_manager.config import get_settings

_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


def init_engine(database_url: str | None = None) -> AsyncEngine:
    """Create the process-wide engine. Call on app startup."""
    global _engine
    if _engine is None:
        settings = get_settings()
        _engine = create_async_engine(
            database_url or settings.database_url,
            echo=settings.debug,
            pool_pre_ping=True,
        )
    return _engine


def get_engine() -> AsyncEngine:
    """Return the engine, initializing it on first call."""
    return init_engine()


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Return the session factory bound to the current engine."""
    global _session_factory
    if _session_factory is None:
        _session_factory = async_sessionmaker(init_engine(), expire_on_commit=False)
    return _session_factory


async def get_session() -> AsyncIterator[AsyncSession]:
    """FastAPI dependency that yields an async database session."""
    factory = get_session_factory()
    async with factory() as session:
        yield session


SessionDep = Annotated[AsyncSession, Depends(get_session)]


async def dispose_engine() -> None:
    """Dispose the engine and reset singletons. Call on app shutdown."""
    global _engine, _session_factory
    if _engine is not None:
        await _engine.dispose()
        _engine = None
        _session_factory = None
