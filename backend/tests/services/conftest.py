"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB sessions
    - db_manager patched so the readiness probe sees the test engine

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
      (PostgreSQL-specific behaviour such as FK enforcement is not exercised)
    - Seed helpers write through test_db and commit before the client runs
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)

import gradation.infrastructure.database as db_module
import gradation.models  # noqa: F401
from gradation.db.base import Base
from gradation.infrastructure.database import DatabaseSessionManager, get_db
from gradation.main import app
from gradation.models.art import Art
from gradation.models.art_like import ArtLike


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def seed_arts(test_db):
    """Insert arts with the given like counts. Returns the art ids in input order."""

    async def _seed(like_counts: list[int]) -> list[int]:
        arts = [
            Art(art_title=f"Art {i}", art_category="painting", user_id=100 + i)
            for i in range(len(like_counts))
        ]
        test_db.add_all(arts)
        await test_db.flush()
        for art, count in zip(arts, like_counts):
            test_db.add_all(
                ArtLike(art_id=art.id, user_id=user_id)
                for user_id in range(1, count + 1)
            )
        await test_db.commit()
        return [art.id for art in arts]

    return _seed
