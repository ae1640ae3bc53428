"""User domain exceptions.

Raised by the user repository when a write would break a business
rule. The application layer turns them into result values.
"""

from uuid import UUID


class EmailAlreadyExistsError(Exception):
    """Email already registered."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(f"A user with email {email} already exists.")


class UserNotFoundError(Exception):
    """User not found."""

    def __init__(self, user_id: UUID | str) -> None:
        self.user_id = user_id
        super().__init__(f"User with id {user_id} not found.")
