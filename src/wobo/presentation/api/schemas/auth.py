"""Authentication schemas for request/response models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from wobo.presentation.api.schemas.users import Email, UserResponse


class LoginRequest(BaseModel):
    """Request schema for user login."""

    email: Email
    password: str = Field(..., min_length=1)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "john@test.com",
                "password": "password123",
            },
        },
    )


class LoginResponse(BaseModel):
    """Response schema for a successful login."""

    token: str
    token_type: str = Field(default="bearer")
    expires_at: datetime
    user: UserResponse

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                "token_type": "bearer",
                "expires_at": "2025-01-01T13:00:00Z",
                "user": {
                    "id": "550e8400-e29b-41d4-a716-446655440000",
                    "name": "John Doe",
                    "email": "john@test.com",
                    "gender": "male",
                    "created_at": "2025-01-01T12:00:00Z",
                    "updated_at": "2025-01-01T12:00:00Z",
                },
            },
        },
    )
