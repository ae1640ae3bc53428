"""Caller-facing view of a user."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from wobo_identity.domain.user.value_objects.gender import Gender


@dataclass(frozen=True)
class UserProfile:
    """Redacted user data returned to callers.

    Carries every stored field except the credential hash, which has
    no slot here at all.

    Attributes
    ----------
    id
        The unique identifier of the user
    name
        Display name
    email
        The user's email address, as stored
    gender
        Gender tag
    created_at
        Creation timestamp (UTC)
    updated_at
        Last modification timestamp (UTC)
    """

    id: UUID
    name: str
    email: str
    gender: Gender
    created_at: datetime
    updated_at: datetime
