"""Application layer for identity management."""

from wobo_identity.application.results import (
    ErrorKind,
    Failure,
    Result,
    Success,
)

__all__ = [
    "ErrorKind",
    "Failure",
    "Result",
    "Success",
]
