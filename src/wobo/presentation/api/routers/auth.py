"""Authentication router for login and the current-user lookup."""

import logging

from fastapi import APIRouter

from wobo.presentation.api.dependencies import AuthService, CurrentUser
from wobo.presentation.api.exception_handlers import unwrap
from wobo.presentation.api.schemas.auth import LoginRequest, LoginResponse
from wobo.presentation.api.schemas.users import UserResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/login",
    summary="Authenticate user",
    responses={
        200: {"description": "Login successful"},
        401: {"description": "Invalid credentials"},
    },
)
async def login(
    request: LoginRequest,
    auth_service: AuthService,
) -> LoginResponse:
    """
    Authenticate with email and password.

    Returns a bearer token together with the user's profile. An unknown
    email and a wrong password produce the same 401 response.
    """
    profile = unwrap(
        await auth_service.login(email=request.email, password=request.password),
    )
    issued = auth_service.issue_token(profile)

    return LoginResponse(
        token=issued.token,
        expires_at=issued.expires_at,
        user=UserResponse.model_validate(profile),
    )


@router.get(
    "/me",
    summary="Get current user",
    responses={
        200: {"description": "Current user information"},
        401: {"description": "Not authenticated"},
    },
)
async def get_current_user_info(current_user: CurrentUser) -> UserResponse:
    """Get the profile of the user the bearer token belongs to."""
    return UserResponse.model_validate(current_user)
