"""Database engine, session factory and schema management."""

import logging
from pathlib import Path

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

# Import models to register them with IdentityBase.metadata
import wobo_identity.infrastructure.persistence.sqlalchemy.models  # noqa: F401
from wobo_identity.infrastructure.persistence.sqlalchemy import IdentityBase

logger = logging.getLogger(__name__)


def build_engine(database_url: str) -> AsyncEngine:
    """
    Create the async database engine.

    The engine manages the connection pool and is shared by every
    request of one application instance.

    Parameters
    ----------
    database_url
        SQLAlchemy async URL (``postgresql+asyncpg://`` or
        ``sqlite+aiosqlite://``)

    Returns
    -------
    AsyncEngine instance
    """
    url = make_url(database_url)

    # Ensure data directory exists for SQLite
    if url.get_backend_name() == "sqlite" and url.database not in (None, "", ":memory:"):
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)

    return create_async_engine(
        database_url,
        echo=False,
        pool_pre_ping=True,  # Verify connections before use
    )


def build_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def create_tables(engine: AsyncEngine) -> None:
    """
    Create all database tables (idempotent).

    Uses SQLAlchemy's create_all() which only creates missing tables.
    Existing tables and their data are never modified or deleted.
    """
    logger.info("Ensuring all database tables exist...")

    async with engine.begin() as conn:
        await conn.run_sync(IdentityBase.metadata.create_all)

    logger.info("Database schema is up to date (missing tables created if needed)")


async def drop_tables(engine: AsyncEngine) -> None:
    """
    Drop all database tables (USE WITH CAUTION!).

    This is primarily for testing and development reset scenarios.
    """
    logger.warning("Dropping all database tables...")

    async with engine.begin() as conn:
        await conn.run_sync(IdentityBase.metadata.drop_all)

    logger.info("Database tables dropped successfully")
