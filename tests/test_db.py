from __future__ import annotations

from vacation_manager import db


async def test_session_factory_follows_engine_lifecycle() -> None:
    engine = db.init_engine("sqlite+aiosqlite://")
    try:
        factory = db.get_session_factory()
        assert db.get_session_factory() is factory
        assert db.get_engine() is engine
        assert factory.kw["bind"] is engine
    finally:
        await db.dispose_engine()

    assert db._engine is None
    assert db._session_factory is None
