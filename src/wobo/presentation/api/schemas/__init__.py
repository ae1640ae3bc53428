"""Pydantic request/response schemas for the API."""

from wobo.presentation.api.schemas.auth import LoginRequest, LoginResponse
from wobo.presentation.api.schemas.users import (
    CreateUserRequest,
    UpdateUserRequest,
    UserResponse,
)

__all__ = [
    "CreateUserRequest",
    "LoginRequest",
    "LoginResponse",
    "UpdateUserRequest",
    "UserResponse",
]
