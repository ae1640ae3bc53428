"""User aggregate, the stored shape of an account."""

from datetime import datetime, timedelta
from typing import Union
from uuid import UUID, uuid4

from wobo_identity.domain.shared.time import utc_now
from wobo_identity.domain.user.value_objects import Gender, UserProfile


class User:
    """
    User aggregate root.

    Holds the credential hash and is never handed to callers outside
    the identity package; :meth:`to_profile` produces the redacted view.
    ``id`` and ``created_at`` are fixed at creation.
    """

    def __init__(
        self,
        name: str,
        email: str,
        password_hash: str,
        gender: Union[str, Gender] = Gender.NEUTRAL,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        if not password_hash:
            msg = "A user cannot be stored without a password hash"
            raise ValueError(msg)

        now = utc_now()
        self._id = id or uuid4()
        self._name = name
        self._email = email
        self._password_hash = password_hash
        self._gender = gender if isinstance(gender, Gender) else Gender(gender)
        self._created_at = created_at or now
        self._updated_at = updated_at or self._created_at

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> str:
        return self._email

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def gender(self) -> Gender:
        return self._gender

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def update_profile(
        self,
        name: str,
        email: str,
        password_hash: str,
        gender: Union[str, Gender],
    ) -> None:
        """Overwrite the mutable fields and advance ``updated_at``."""
        if not password_hash:
            msg = "A user cannot be stored without a password hash"
            raise ValueError(msg)

        self._name = name
        self._email = email
        self._password_hash = password_hash
        self._gender = gender if isinstance(gender, Gender) else Gender(gender)
        self._touch()

    def to_profile(self) -> UserProfile:
        return UserProfile(
            id=self._id,
            name=self._name,
            email=self._email,
            gender=self._gender,
            created_at=self._created_at,
            updated_at=self._updated_at,
        )

    def _touch(self) -> None:
        # updated_at must strictly increase even within one clock tick
        now = utc_now()
        if now <= self._updated_at:
            now = self._updated_at + timedelta(microseconds=1)
        self._updated_at = now

    @classmethod
    def create(
        cls,
        name: str,
        email: str,
        password_hash: str,
        gender: Union[str, Gender] = Gender.NEUTRAL,
    ) -> "User":
        return cls(
            name=name,
            email=email,
            password_hash=password_hash,
            gender=gender,
        )

    @classmethod
    def reconstitute(
        cls,
        id: UUID,
        name: str,
        email: str,
        password_hash: str,
        gender: Union[str, Gender],
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        return cls(
            id=id,
            name=name,
            email=email,
            password_hash=password_hash,
            gender=gender,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, email={self._email})"
