"""Authentication service for user registration, maintenance and login."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Union
from uuid import UUID

from wobo_auth import (
    IssuedToken,
    JWTService,
    PasswordHashingService,
    TokenPayload,
)
from wobo_identity.application.results import Failure, Result, Success
from wobo_identity.domain.user import (
    EmailAlreadyExistsError,
    Gender,
    User,
    UserNotFoundError,
    UserProfile,
)

if TYPE_CHECKING:
    from wobo_identity.domain.user import UserRepository

logger = logging.getLogger(__name__)


class AuthenticationService:
    """
    Application service for user accounts and authentication.

    bcrypt work runs in a worker thread so the event loop keeps serving
    other requests while a password is hashed or checked.

    Orchestrates wobo_auth infrastructure (password hashing, JWT tokens)
    with the User repository to provide:
    - Registration (hash + store)
    - Profile lookup, listing, replacement and deletion
    - Login with password
    - Token issuance and verification

    Every value handed back is a ``UserProfile``; password hashes never
    leave this service. Business failures are returned as ``Failure``.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
    ):
        self._user_repo = user_repository
        self._password_service = password_service
        self._jwt_service = jwt_service

    async def register(
        self,
        name: str,
        email: str,
        password: str,
        gender: Union[str, Gender],
    ) -> Result[UserProfile]:
        password_hash = await asyncio.to_thread(self._password_service.hash, password)
        user = User.create(
            name=name,
            email=email,
            password_hash=password_hash,
            gender=gender,
        )

        # Uniqueness is decided by the storage constraint, not a pre-check
        try:
            await self._user_repo.add(user)
        except EmailAlreadyExistsError:
            logger.info("Registration rejected, email already registered: %s", email)
            return Failure.duplicate_email(email)

        logger.info("User registered: %s (%s)", user.id, email)
        return Success(user.to_profile())

    async def get_by_id(self, user_id: UUID) -> Result[UserProfile]:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            return Failure.not_found(user_id)
        return Success(user.to_profile())

    async def list_all(self) -> list[UserProfile]:
        users = await self._user_repo.list_all()
        return [user.to_profile() for user in users]

    async def update(
        self,
        user_id: UUID,
        name: str,
        email: str,
        password: str,
        gender: Union[str, Gender],
    ) -> Result[UserProfile]:
        """Replace a user's name, email, password and gender.

        The password is re-hashed on every call, even when unchanged.
        """
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            return Failure.not_found(user_id)

        if email != user.email:
            holder = await self._user_repo.find_by_email(email)
            if holder is not None and holder.id != user_id:
                return Failure.duplicate_email(email)

        password_hash = await asyncio.to_thread(self._password_service.hash, password)
        user.update_profile(
            name=name,
            email=email,
            password_hash=password_hash,
            gender=gender,
        )

        try:
            await self._user_repo.update(user)
        except UserNotFoundError:
            return Failure.not_found(user_id)
        except EmailAlreadyExistsError:
            logger.info("Update rejected, email already registered: %s", email)
            return Failure.duplicate_email(email)

        logger.info("User updated: %s (%s)", user.id, email)
        return Success(user.to_profile())

    async def delete(self, user_id: UUID) -> Result[None]:
        try:
            await self._user_repo.delete(user_id)
        except UserNotFoundError:
            return Failure.not_found(user_id)
        logger.info("User deleted: %s", user_id)
        return Success(None)

    async def login(self, email: str, password: str) -> Result[UserProfile]:
        """Check a password against the account registered under ``email``.

        Unknown email and wrong password give the same failure, and both
        paths pay for exactly one bcrypt verification.
        """
        user = await self._user_repo.find_by_email(email)

        if user is None:
            # The dummy hash is built lazily, so resolve it off the loop too
            def _verify_dummy() -> bool:
                service = self._password_service
                return service.verify(password, service.dummy_hash)

            await asyncio.to_thread(_verify_dummy)
            verified = False
        else:
            verified = await asyncio.to_thread(
                self._password_service.verify, password, user.password_hash
            )

        if user is None or not verified:
            logger.warning("Failed login attempt for: %s", email)
            return Failure.invalid_credentials()

        if self._password_service.needs_rehash(user.password_hash):
            logger.debug("Password hash for user %s uses an outdated work factor", user.id)

        logger.info("User logged in: %s", user.id)
        return Success(user.to_profile())

    def issue_token(self, profile: UserProfile) -> IssuedToken:
        return self._jwt_service.issue(
            user_id=profile.id,
            email=profile.email,
            name=profile.name,
        )

    def verify_token(self, token: str) -> TokenPayload:
        return self._jwt_service.verify_token(token)
