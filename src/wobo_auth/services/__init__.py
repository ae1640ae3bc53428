"""Pure authentication services (password hashing, JWT)."""

from wobo_auth.services.jwt_service import JWTService
from wobo_auth.services.password_service import PasswordHashingService

__all__ = ["JWTService", "PasswordHashingService"]
