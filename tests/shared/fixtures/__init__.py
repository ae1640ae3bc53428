"""Shared pytest fixtures for all test domains."""

from tests.shared.fixtures.database import (
    pg_engine,
    pg_session_maker,
    postgres_container,
    sqlite_engine,
    sqlite_session,
    sqlite_session_maker,
)
from tests.shared.fixtures.factories import (
    JANE,
    JOHN,
    TEST_JWT_SECRET,
    make_settings,
    make_user,
)

__all__ = [
    "JANE",
    "JOHN",
    "TEST_JWT_SECRET",
    "make_settings",
    "make_user",
    "pg_engine",
    "pg_session_maker",
    "postgres_container",
    "sqlite_engine",
    "sqlite_session",
    "sqlite_session_maker",
]
