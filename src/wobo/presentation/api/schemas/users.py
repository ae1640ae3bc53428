"""User schemas for request/response models."""

from datetime import datetime
from typing import Annotated
from uuid import UUID

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, field_validator
from pydantic.networks import validate_email

from wobo_identity.domain.user import Gender

EMAIL_MAX_LENGTH = 255


def _check_email(value: str) -> str:
    """Validate like ``EmailStr`` but keep the address exactly as sent."""
    if "<" in value:
        msg = "value is not a valid email address: display names are not allowed"
        raise ValueError(msg)
    validate_email(value)
    return value


# Stored and compared verbatim, never normalized
Email = Annotated[str, AfterValidator(_check_email)]


class CreateUserRequest(BaseModel):
    """Request schema for user registration."""

    name: str = Field(
        ...,
        min_length=2,
        max_length=100,
        description="Display name (2-100 characters)",
    )
    email: Email = Field(..., description="User's email address")
    password: str = Field(
        ...,
        min_length=8,
        max_length=100,
        description="Password (8-100 characters)",
    )
    gender: Gender

    @field_validator("email")
    @classmethod
    def _validate_email_length(cls, v: str) -> str:
        if len(v) > EMAIL_MAX_LENGTH:
            msg = f"Email cannot exceed {EMAIL_MAX_LENGTH} characters"
            raise ValueError(msg)
        return v

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "John Doe",
                "email": "john@test.com",
                "password": "password123",
                "gender": "male",
            },
        },
    )


class UpdateUserRequest(CreateUserRequest):
    """Request schema for replacing a user.

    All fields are required; the password is re-hashed on every update.
    """


class UserResponse(BaseModel):
    """Response schema for user data. Never carries credential material."""

    id: UUID
    name: str
    email: str
    gender: Gender
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
