"""PostgreSQL connection and session management."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.exc import InterfaceError, OperationalError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from .config import get_settings
from .errors import StorageUnavailableError

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """SQLAlchemy declarative base."""

    pass


class Database:
    """PostgreSQL connection manager."""

    _engine: AsyncEngine | None = None
    _session_factory: async_sessionmaker[AsyncSession] | None = None

    @classmethod
    async def connect(cls) -> None:
        """Create the engine and session factory."""
        settings = get_settings()
        cls._engine = create_async_engine(
            settings.postgres_url,
            echo=settings.debug,
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=True,
        )
        cls._session_factory = async_sessionmaker(
            cls._engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @classmethod
    async def disconnect(cls) -> None:
        """Dispose of the engine and its pooled connections."""
        if cls._engine:
            await cls._engine.dispose()
            cls._engine = None
            cls._session_factory = None

    @classmethod
    def get_engine(cls) -> AsyncEngine:
        """Get engine instance."""
        if not cls._engine:
            raise RuntimeError("Database not connected. Call connect() first.")
        return cls._engine

    @classmethod
    @asynccontextmanager
    async def get_session(cls) -> AsyncGenerator[AsyncSession, None]:
        """Get a session that commits on success and rolls back on error.

        Connection-level failures surface as ``StorageUnavailableError`` so the
        driver's message never reaches the client.
        """
        if not cls._session_factory:
            raise RuntimeError("Database not connected. Call connect() first.")

        try:
            async with cls._session_factory() as session:
                try:
                    yield session
                    await session.commit()
                except Exception:
                    await session.rollback()
                    raise
        except (OperationalError, InterfaceError, OSError) as exc:
            logger.error(f"Storage unavailable: {exc}")
            raise StorageUnavailableError() from exc


async def init_tables() -> None:
    """Create the skill table if it does not exist."""
    from .models import tables  # noqa: F401  registers the mapped tables

    async with Database.get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
