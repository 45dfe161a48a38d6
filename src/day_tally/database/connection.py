"""Async database engine and session management.

A ``DatabaseManager`` is constructed explicitly and handed to whatever needs
storage (repositories, migrations, the HTTP app). There is no module-level
engine.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)


class DatabaseManager:
    """Owns one async engine and the session factory bound to it."""

    def __init__(self, database_url: str, echo: bool = False):
        self.database_url = database_url
        self.echo = echo
        self.engine: Optional[AsyncEngine] = None
        self.session_factory: Optional[async_sessionmaker[AsyncSession]] = None

    @property
    def is_initialized(self) -> bool:
        return self.engine is not None

    def initialize(self) -> None:
        """Create the engine and session factory. Safe to call twice."""
        if self.engine is not None:
            return

        kwargs = {"echo": self.echo}
        if self.database_url.startswith("sqlite"):
            kwargs["connect_args"] = {"check_same_thread": False}
            if ":memory:" in self.database_url or self.database_url.endswith("://"):
                # One shared connection, otherwise every session sees an empty database
                kwargs["poolclass"] = StaticPool

        self.engine = create_async_engine(self.database_url, **kwargs)
        self.session_factory = async_sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        logger.info("Database engine initialized (%s)", self.engine.url.render_as_string(hide_password=True))

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Yield a session, rolling back if the body raises."""
        if self.session_factory is None:
            self.initialize()
        async with self.session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    async def close(self) -> None:
        """Dispose of the engine and its pooled connections."""
        if self.engine is not None:
            await self.engine.dispose()
            logger.info("Database connections closed")
        self.engine = None
        self.session_factory = None
