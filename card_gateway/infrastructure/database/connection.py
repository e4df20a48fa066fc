"""Database connection pool and session management."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from card_gateway.core.config import Settings

logger = structlog.get_logger(__name__)


class DatabaseSessionManager:
    """
    Owns the connection pool and hands out sessions.

    Built once at application startup and passed to request handlers
    through dependencies; ``close()`` drains the pool on shutdown.
    """

    def __init__(self, engine: AsyncEngine):
        self._engine = engine
        self._sessionmaker = async_sessionmaker(
            bind=engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "DatabaseSessionManager":
        """
        Create a bounded connection pool from application settings.

        The pool holds at most ``db_pool_size`` connections with no
        overflow; callers beyond that wait up to ``db_pool_timeout``
        seconds for a connection to be returned.
        """
        engine = create_async_engine(
            settings.database_url,
            echo=settings.debug,
            pool_size=settings.db_pool_size,
            max_overflow=0,
            pool_timeout=settings.db_pool_timeout,
            pool_pre_ping=True,
        )
        logger.info(
            "database_pool_created",
            driver=settings.db_driver,
            host=settings.db_host,
            pool_size=settings.db_pool_size,
        )
        return cls(engine)

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    async def close(self) -> None:
        """Dispose of the engine and every pooled connection."""
        await self._engine.dispose()
        logger.info("database_pool_closed")

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Provide a transactional scope around operations.

        Yields:
            An async database session
        """
        session = self._sessionmaker()
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
