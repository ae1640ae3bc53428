"""
Pytest configuration for wobo_identity integration tests.

SQLite fixtures run everywhere; PostgreSQL fixtures need Docker and
are only used by tests marked ``integration``.
"""

# Re-export shared database fixtures
from tests.shared.fixtures.database import (
    pg_engine,
    pg_session_maker,
    postgres_container,
    sqlite_engine,
    sqlite_session,
    sqlite_session_maker,
)

__all__ = [
    "pg_engine",
    "pg_session_maker",
    "postgres_container",
    "sqlite_engine",
    "sqlite_session",
    "sqlite_session_maker",
]
