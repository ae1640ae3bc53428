"""FastAPI dependency injection for the Wobo API.

Components are built once by ``create_app`` and stored on
``app.state``; the functions here only hand them to routes.

Provides dependencies for:
- Database sessions
- Password hashing and JWT services
- The authentication service
- Authentication (current user from JWT)
"""

import logging
from typing import Annotated, AsyncGenerator

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from wobo_auth import InvalidTokenError, JWTService, PasswordHashingService
from wobo_identity.application import Failure
from wobo_identity.application.services import AuthenticationService
from wobo_identity.domain.user import UserProfile
from wobo_identity.infrastructure.persistence.sqlalchemy import (
    UserRepositorySQLAlchemy,
)

logger = logging.getLogger(__name__)

# Security scheme for JWT Bearer tokens
security = HTTPBearer(auto_error=False)


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Creates an async session for the request using the shared engine/pool.
    A session closed without commit discards its pending writes.

    Yields
    ------
    AsyncSession for database operations
    """
    async with request.app.state.session_maker() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


def get_password_service(request: Request) -> PasswordHashingService:
    """Get the application's password hashing service."""
    return request.app.state.password_service


def get_jwt_service(request: Request) -> JWTService:
    """Get the application's JWT service."""
    return request.app.state.jwt_service


async def get_authentication_service(
    session: DBSession,
    password_service: PasswordHashingService = Depends(get_password_service),
    jwt_service: JWTService = Depends(get_jwt_service),
) -> AuthenticationService:
    """
    Get authentication service bound to the request's session.

    This service orchestrates registration, user maintenance and login.
    """
    return AuthenticationService(
        user_repository=UserRepositorySQLAlchemy(session),
        password_service=password_service,
        jwt_service=jwt_service,
    )


# Type alias for injected auth service
AuthService = Annotated[AuthenticationService, Depends(get_authentication_service)]


# -----------------------------------------------------------------------------
# Current User (JWT Authentication)
# -----------------------------------------------------------------------------


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    auth_service: AuthService,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> UserProfile:
    """
    FastAPI dependency to get the current authenticated user from JWT.

    Extracts and validates the JWT token from the Authorization header,
    then loads the corresponding user profile from the database.

    Parameters
    ----------
    auth_service
        Authentication service for token verification and lookup
    credentials
        Bearer token from Authorization header

    Returns
    -------
    The authenticated user's profile

    Raises
    ------
    HTTPException
        401 if token is missing, invalid, or user not found
    """
    if credentials is None:
        raise _unauthorized("Authentication required")

    try:
        payload = auth_service.verify_token(credentials.credentials)
    except InvalidTokenError as e:
        logger.warning("Invalid token: %s", e)
        raise _unauthorized("Invalid or expired token") from e

    result = await auth_service.get_by_id(payload.user_id)
    if isinstance(result, Failure):
        logger.warning("User not found for token: %s", payload.user_id)
        raise _unauthorized("User not found")

    return result.value


# Type alias for injected current user
CurrentUser = Annotated[UserProfile, Depends(get_current_user)]
