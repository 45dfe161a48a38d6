"""Unit tests for the database manager and schema utilities."""

import pytest
from sqlalchemy import text
from sqlalchemy.pool import StaticPool

from day_tally.database.connection import DatabaseManager
from day_tally.database.migrations import create_tables, recreate_tables


@pytest.mark.asyncio
async def test_session_initializes_lazily():
    db = DatabaseManager("sqlite+aiosqlite:///:memory:")
    assert db.is_initialized is False

    async with db.session() as session:
        result = await session.execute(text("SELECT 1"))
        assert result.scalar() == 1

    assert db.is_initialized is True
    await db.close()
    assert db.is_initialized is False


@pytest.mark.asyncio
async def test_create_tables_is_idempotent(db, repository):
    await repository.insert_or_update("2024-01-01", 2)

    await create_tables(db)

    assert (await repository.get_by_date("2024-01-01")).value == 2


@pytest.mark.asyncio
async def test_recreate_tables_discards_rows(db, repository, task_repository):
    await repository.insert_or_update("2024-01-01", 2)
    await task_repository.add_new_task("t", "")

    await recreate_tables(db)

    assert await repository.get_all() == []
    assert await task_repository.get_all_tasks() == []


@pytest.mark.asyncio
async def test_session_rolls_back_on_error(db):
    with pytest.raises(RuntimeError):
        async with db.session() as session:
            await session.execute(
                text("INSERT INTO tasks (title, description) VALUES ('x', '')")
            )
            raise RuntimeError("abort")

    async with db.session() as session:
        count = (await session.execute(text("SELECT COUNT(*) FROM tasks"))).scalar()
    assert count == 0


@pytest.mark.asyncio
async def test_memory_database_shares_one_connection(tmp_path):
    memory = DatabaseManager("sqlite+aiosqlite:///:memory:")
    on_disk = DatabaseManager(f"sqlite+aiosqlite:///{tmp_path / 'tally.db'}")
    memory.initialize()
    on_disk.initialize()

    assert isinstance(memory.engine.sync_engine.pool, StaticPool)
    assert not isinstance(on_disk.engine.sync_engine.pool, StaticPool)

    await memory.close()
    await on_disk.close()
