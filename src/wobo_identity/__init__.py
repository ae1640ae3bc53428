"""Wobo Identity - User accounts and credential handling.

This module handles all identity-related concerns:
- User management (create, read, replace, delete)
- Email uniqueness, enforced by the storage layer
- Login with password, producing redacted user profiles
- Bearer token issuance through wobo_auth
"""

from wobo_identity.application import (
    ErrorKind,
    Failure,
    Result,
    Success,
)
from wobo_identity.application.services import AuthenticationService
from wobo_identity.domain.user import (
    EmailAlreadyExistsError,
    Gender,
    User,
    UserNotFoundError,
    UserProfile,
    UserRepository,
)

__all__ = [
    # Domain - User
    "EmailAlreadyExistsError",
    "Gender",
    "User",
    "UserNotFoundError",
    "UserProfile",
    "UserRepository",
    # Results
    "ErrorKind",
    "Failure",
    "Result",
    "Success",
    # Application Services
    "AuthenticationService",
]
