"""Auth schemas and data structures.

Simple data classes used for transferring token data between
components.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class TokenPayload:
    """Decoded JWT token payload.

    This represents the data extracted from a verified JWT token.

    Attributes
    ----------
    user_id
        The unique identifier of the user (``sub`` claim)
    email
        The user's email address
    name
        The user's display name
    issued_at
        Token issue timestamp
    expires_at
        Token expiration timestamp
    token_id
        Unique token identifier (``jti`` claim)
    """

    user_id: UUID
    email: str
    name: str
    issued_at: datetime
    expires_at: datetime
    token_id: str

    def is_expired(self) -> bool:
        """Check if the token has expired."""
        return datetime.now(tz=self.expires_at.tzinfo) >= self.expires_at


@dataclass(frozen=True)
class IssuedToken:
    """A freshly signed bearer token and its expiry."""

    token: str
    expires_at: datetime
