"""Database schema utilities.

The store is recreated as needed: tables are created when missing and there
are no versioned migrations.
"""

import logging

from ..models.base import Base
from ..models.day_counter import DayCounter  # noqa: F401
from ..models.task import Task  # noqa: F401
from .connection import DatabaseManager

logger = logging.getLogger(__name__)


async def create_tables(db: DatabaseManager):
    """Create all database tables."""
    if not db.is_initialized:
        db.initialize()

    async with db.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Tables ready: %s", ", ".join(sorted(Base.metadata.tables)))


async def drop_tables(db: DatabaseManager):
    """Drop all database tables."""
    if not db.is_initialized:
        db.initialize()

    async with db.engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


async def recreate_tables(db: DatabaseManager):
    """Drop and create all tables, discarding stored rows."""
    await drop_tables(db)
    await create_tables(db)
    logger.warning("Store recreated; all counters and tasks were discarded")
