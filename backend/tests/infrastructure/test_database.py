"""Database boundary — session error mapping and transaction().

Tests:
    - An IntegrityError escaping a managed session becomes DatabaseError
    - transaction() commits on success and rolls back on failure
    - A failure caught inside transaction() never reaches the session mapping
"""

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)

import gradation.models  # noqa: F401
from gradation.core.errors import DatabaseError
from gradation.db.base import Base
from gradation.infrastructure.database import DatabaseSessionManager, transaction
from gradation.models.university_like import UniversityLike


@pytest.fixture
async def manager():
    engine = create_async_engine("sqlite+aiosqlite:///:memory:")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    mgr = DatabaseSessionManager.__new__(DatabaseSessionManager)
    mgr.engine = engine
    mgr._session_factory = async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False,
    )
    yield mgr
    await engine.dispose()


async def _like_count(db) -> int:
    result = await db.execute(select(func.count(UniversityLike.id)))
    return result.scalar_one()


async def test_escaping_integrity_error_becomes_database_error(manager):
    with pytest.raises(DatabaseError) as exc_info:
        async with manager.session():
            raise IntegrityError("INSERT", {}, Exception("duplicate"))
    assert exc_info.value.operation == "commit"


async def test_transaction_commits(manager):
    async with manager.session() as db:
        async with transaction(db):
            db.add(UniversityLike(university_exhibition_id=1, user_id=1))
    async with manager.session() as db:
        assert await _like_count(db) == 1


async def test_transaction_rolls_back_on_failure(manager):
    async with manager.session() as db:
        with pytest.raises(RuntimeError):
            async with transaction(db):
                db.add(UniversityLike(university_exhibition_id=1, user_id=1))
                await db.flush()
                raise RuntimeError("abort")
        assert await _like_count(db) == 0


async def test_duplicate_handled_inside_transaction_stays_local(manager):
    async with manager.session() as db:
        async with transaction(db):
            db.add(UniversityLike(university_exhibition_id=1, user_id=1))

        with pytest.raises(IntegrityError):
            async with transaction(db):
                db.add(UniversityLike(university_exhibition_id=1, user_id=1))
        assert await _like_count(db) == 1
