"""Result values returned by identity application services.

Business failures (unknown user, taken email, bad login) come back as
``Failure`` data instead of exceptions. Unexpected errors still raise.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union
from uuid import UUID

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Stable failure kinds. Part of the public API contract."""

    NOT_FOUND = "NOT_FOUND"
    DUPLICATE_EMAIL = "DUPLICATE_EMAIL"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"


INVALID_CREDENTIALS_MESSAGE = "Invalid email or password."


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    """A business failure with a message that is safe to show callers."""

    kind: ErrorKind
    message: str

    @property
    def ok(self) -> bool:
        return False

    @classmethod
    def not_found(cls, user_id: UUID) -> "Failure":
        return cls(ErrorKind.NOT_FOUND, f"User with id {user_id} not found.")

    @classmethod
    def duplicate_email(cls, email: str) -> "Failure":
        return cls(
            ErrorKind.DUPLICATE_EMAIL,
            f"A user with email {email} already exists.",
        )

    @classmethod
    def invalid_credentials(cls) -> "Failure":
        return cls(ErrorKind.INVALID_CREDENTIALS, INVALID_CREDENTIALS_MESSAGE)


Result = Union[Success[T], Failure]
