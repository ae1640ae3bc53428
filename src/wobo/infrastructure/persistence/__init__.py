"""Database engine and schema helpers."""

from wobo.infrastructure.persistence.database import (
    build_engine,
    build_session_maker,
    create_tables,
    drop_tables,
)

__all__ = [
    "build_engine",
    "build_session_maker",
    "create_tables",
    "drop_tables",
]
