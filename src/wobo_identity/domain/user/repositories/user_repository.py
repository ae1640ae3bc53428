"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from wobo_identity.domain.user.aggregates.user import User


class UserRepository(ABC):
    """Repository interface for User aggregates.

    Implementations must enforce email uniqueness in the storage layer
    itself (unique index), not by a check-then-insert.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        """Find a user by their ID."""

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email address (exact match)."""

    @abstractmethod
    async def add(self, user: User) -> None:
        """Insert a new user.

        Raises EmailAlreadyExistsError if the email is taken.
        """

    @abstractmethod
    async def update(self, user: User) -> None:
        """Persist changes to an existing user.

        Raises UserNotFoundError if the user no longer exists and
        EmailAlreadyExistsError if the email belongs to another user.
        """

    @abstractmethod
    async def delete(self, user_id: UUID) -> None:
        """Delete a user by ID.

        Raises UserNotFoundError if the user does not exist.
        """

    @abstractmethod
    async def list_all(self) -> list[User]:
        """List all users in creation order."""
