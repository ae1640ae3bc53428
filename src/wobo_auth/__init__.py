"""Wobo Auth - Generic authentication infrastructure.

This package provides authentication infrastructure that is independent
of the user domain. It handles:
- Password hashing (bcrypt)
- Bearer token issuance and verification (JWT)

Architecture:
    wobo_auth/
    ├── services/           # Pure logic (password hashing, JWT)
    ├── schemas.py          # Data classes
    └── exceptions.py       # Auth exceptions

Usage:
    from wobo_auth import PasswordHashingService, JWTService
"""

from wobo_auth.exceptions import (
    AuthError,
    ConfigurationError,
    InvalidTokenError,
    WeakPasswordError,
)
from wobo_auth.schemas import IssuedToken, TokenPayload
from wobo_auth.services import JWTService, PasswordHashingService

__all__ = [
    # Services
    "PasswordHashingService",
    "JWTService",
    # Schemas
    "IssuedToken",
    "TokenPayload",
    # Exceptions
    "AuthError",
    "ConfigurationError",
    "InvalidTokenError",
    "WeakPasswordError",
]
