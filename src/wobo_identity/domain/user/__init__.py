"""User domain manages account identity and credentials.

This domain handles:
- User aggregate (id, name, email, password hash, gender, timestamps)
- Email uniqueness through the repository contract
"""

from wobo_identity.domain.user.aggregates import User
from wobo_identity.domain.user.exceptions import (
    EmailAlreadyExistsError,
    UserNotFoundError,
)
from wobo_identity.domain.user.repositories import UserRepository
from wobo_identity.domain.user.value_objects import Gender, UserProfile

__all__ = [
    "EmailAlreadyExistsError",
    "Gender",
    "User",
    "UserNotFoundError",
    "UserProfile",
    "UserRepository",
]
