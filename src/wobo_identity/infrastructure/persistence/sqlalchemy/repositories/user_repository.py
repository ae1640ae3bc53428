"""SQLAlchemy implementation of UserRepository."""

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from wobo_identity.domain.shared.time import ensure_tz_aware
from wobo_identity.domain.user import (
    EmailAlreadyExistsError,
    User,
    UserNotFoundError,
    UserRepository,
)
from wobo_identity.infrastructure.persistence.sqlalchemy.models import UserModel

logger = logging.getLogger(__name__)


# SQLite names the column, PostgreSQL names the index or constraint
_EMAIL_CONSTRAINT_MARKERS = ("users.email", "ix_users_email", "users_email_key")


def _is_email_conflict(error: IntegrityError) -> bool:
    message = str(error.orig if error.orig is not None else error).lower()
    return any(marker in message for marker in _EMAIL_CONSTRAINT_MARKERS)


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface.

    Writes are flushed immediately so constraint violations surface
    inside the call that caused them. Committing or rolling back the
    session is left to the owner of the session.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, user_id: UUID) -> User | None:
        model = await self._find_model_by_id(user_id)

        if model is None:
            return None

        return self._map_to_domain(model)

    async def find_by_email(self, email: str) -> User | None:
        stmt = select(UserModel).where(UserModel.email == email)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def add(self, user: User) -> None:
        model = self._map_to_model(user)
        self._session.add(model)

        try:
            await self._session.flush()
        except IntegrityError as e:
            if _is_email_conflict(e):
                raise EmailAlreadyExistsError(user.email) from e
            raise

        logger.debug("Created user: %s (email: %s)", user.id, user.email)

    async def update(self, user: User) -> None:
        model = await self._find_model_by_id(user.id)
        if model is None:
            raise UserNotFoundError(user.id)

        self._update_model(model, user)

        try:
            await self._session.flush()
        except IntegrityError as e:
            if _is_email_conflict(e):
                raise EmailAlreadyExistsError(user.email) from e
            raise

        logger.debug("Updated user: %s", user.id)

    async def delete(self, user_id: UUID) -> None:
        model = await self._find_model_by_id(user_id)
        if model is None:
            raise UserNotFoundError(user_id)

        await self._session.delete(model)
        await self._session.flush()
        logger.debug("Deleted user: %s", user_id)

    async def list_all(self) -> list[User]:
        stmt = select(UserModel).order_by(UserModel.created_at, UserModel.email)
        result = await self._session.execute(stmt)
        models = result.scalars().all()
        return [self._map_to_domain(model) for model in models]

    async def _find_model_by_id(self, user_id: UUID) -> UserModel | None:
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: UserModel) -> User:
        return User.reconstitute(
            id=model.id,
            name=model.name,
            email=model.email,
            password_hash=model.password_hash,
            gender=model.gender,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

    def _map_to_model(self, user: User) -> UserModel:
        return UserModel(
            id=user.id,
            name=user.name,
            email=user.email,
            password_hash=user.password_hash,
            gender=user.gender.value,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    def _update_model(self, model: UserModel, user: User) -> None:
        model.name = user.name
        model.email = user.email
        model.password_hash = user.password_hash
        model.gender = user.gender.value
        model.updated_at = user.updated_at
