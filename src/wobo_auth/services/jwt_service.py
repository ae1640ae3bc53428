"""JWT token service.

Provides bearer token issuance and verification for authentication.
"""

from datetime import datetime, timedelta, timezone
from uuid import UUID, uuid4

import jwt

from wobo_auth.exceptions import ConfigurationError, InvalidTokenError
from wobo_auth.schemas import IssuedToken, TokenPayload

REQUIRED_CLAIMS = ["exp", "iat", "sub", "iss", "aud"]


class JWTService:
    """Service for JWT token creation and verification.

    Tokens are signed with a symmetric key held only by the server and
    carry issuer, audience and expiry claims. The service holds no
    mutable state after construction and is safe to share between
    concurrent requests.

    Examples
    --------
    >>> service = JWTService(secret_key="your-secret-key")
    >>> issued = service.issue(user_id, "user@example.com", "Jane")
    >>> payload = service.verify_token(issued.token)
    >>> print(payload.user_id)
    """

    DEFAULT_EXPIRE_MINUTES = 60
    DEFAULT_ISSUER = "woboapi"
    DEFAULT_AUDIENCE = "woboapi-clients"
    ALGORITHM = "HS256"

    def __init__(
        self,
        secret_key: str,
        issuer: str = DEFAULT_ISSUER,
        audience: str = DEFAULT_AUDIENCE,
        expire_minutes: int = DEFAULT_EXPIRE_MINUTES,
    ):
        """Initialize the JWT service.

        Parameters
        ----------
        secret_key
            Secret key for signing tokens. Must be kept secure.
        issuer
            Value of the ``iss`` claim, required on verification
        audience
            Value of the ``aud`` claim, required on verification
        expire_minutes
            Minutes until a token expires (default 60)

        Raises
        ------
        ConfigurationError
            If the key, issuer or audience is blank or the lifetime
            is not positive
        """
        if not secret_key or not secret_key.strip():
            msg = "JWT secret key cannot be empty"
            raise ConfigurationError(msg)
        if not issuer or not audience:
            msg = "JWT issuer and audience must be configured"
            raise ConfigurationError(msg)
        if expire_minutes <= 0:
            msg = f"JWT lifetime must be positive, got {expire_minutes} minutes"
            raise ConfigurationError(msg)

        self._secret_key = secret_key
        self._issuer = issuer
        self._audience = audience
        self._expire = timedelta(minutes=expire_minutes)

    @property
    def lifetime(self) -> timedelta:
        return self._expire

    def issue(
        self,
        user_id: UUID,
        email: str,
        name: str = "",
        expires_delta: timedelta | None = None,
    ) -> IssuedToken:
        """Create a signed bearer token for a user.

        Parameters
        ----------
        user_id
            The user's unique identifier
        email
            The user's email address
        name
            The user's display name
        expires_delta
            Custom expiration time (optional)

        Returns
        -------
        IssuedToken with the encoded token and its expiry
        """
        now = datetime.now(tz=timezone.utc)
        expire = now + (expires_delta if expires_delta is not None else self._expire)

        payload = {
            "sub": str(user_id),
            "email": email,
            "name": name,
            "iss": self._issuer,
            "aud": self._audience,
            "iat": now,
            "exp": expire,
            "jti": str(uuid4()),
        }

        token = jwt.encode(payload, self._secret_key, algorithm=self.ALGORITHM)
        return IssuedToken(token=token, expires_at=expire)

    def verify_token(self, token: str) -> TokenPayload:
        """Verify and decode a JWT token.

        A token is accepted only if its signature verifies, issuer and
        audience match the configured values and it has not expired.

        Parameters
        ----------
        token
            The JWT token string to verify

        Returns
        -------
        TokenPayload containing the decoded data

        Raises
        ------
        InvalidTokenError
            If token is invalid, expired, or malformed
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
                audience=self._audience,
                issuer=self._issuer,
                options={"require": REQUIRED_CLAIMS},
            )

            return TokenPayload(
                user_id=UUID(payload["sub"]),
                email=payload["email"],
                name=payload.get("name", ""),
                issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
                expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
                token_id=payload.get("jti", ""),
            )

        except jwt.ExpiredSignatureError as e:
            raise InvalidTokenError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e
        except (KeyError, ValueError, TypeError) as e:
            raise InvalidTokenError(f"Malformed token payload: {e}") from e
