"""
Pytest configuration for wobo_identity domain tests.

This conftest provides fixtures specific to the wobo_identity domain
(users, authentication).
"""

import pytest

from tests.shared.fixtures.factories import make_user
from wobo_auth import JWTService, PasswordHashingService
from wobo_identity.domain.user import User


@pytest.fixture
def test_user() -> User:
    """Create a standard test user."""
    return make_user()


@pytest.fixture
def password_service() -> PasswordHashingService:
    """A real hasher with low rounds for fast tests."""
    return PasswordHashingService(rounds=4)


@pytest.fixture
def jwt_service() -> JWTService:
    return JWTService(secret_key="identity-tests-secret-0123456789abcdef0123")
