"""Unit tests for PasswordHashingService."""

import pytest

from wobo_auth.exceptions import WeakPasswordError
from wobo_auth.services import PasswordHashingService
from wobo_auth.services.password_service import BCRYPT_MAX_BYTES


class TestPasswordHashingService:
    """Tests for password hashing and verification."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = PasswordHashingService(rounds=4)  # Low rounds for fast tests

    def test_hash_returns_bcrypt_format(self):
        """Test that hash returns a valid bcrypt hash."""
        password = "secure_password123"
        hashed = self.service.hash(password)

        # bcrypt hashes start with $2b$ or $2a$
        assert hashed.startswith("$2")
        assert len(hashed) == 60

    def test_hash_is_not_the_plaintext(self):
        password = "password123"
        assert self.service.hash(password) != password

    def test_verify_correct_password(self):
        """Test that verify returns True for correct password."""
        password = "my_secret_password"
        hashed = self.service.hash(password)

        assert self.service.verify(password, hashed) is True

    def test_verify_incorrect_password(self):
        """Test that verify returns False for incorrect password."""
        hashed = self.service.hash("my_secret_password")

        assert self.service.verify("wrong_password", hashed) is False

    def test_verify_invalid_hash_returns_false(self):
        """Test that verify returns False for invalid hash format."""
        assert self.service.verify("password", "not_a_valid_hash") is False
        assert self.service.verify("password", "$2b$04$tooshort") is False
        assert self.service.verify("password", "") is False
        assert self.service.verify("password", None) is False

    def test_verify_empty_password_returns_false(self):
        hashed = self.service.hash("my_secret_password")

        assert self.service.verify("", hashed) is False
        assert self.service.verify(None, hashed) is False

    def test_hash_produces_different_hashes(self):
        """Test that hashing same password twice produces different hashes."""
        password = "same_password"
        hash1 = self.service.hash(password)
        hash2 = self.service.hash(password)

        # Due to random salt, hashes should differ
        assert hash1 != hash2
        # But both should verify
        assert self.service.verify(password, hash1)
        assert self.service.verify(password, hash2)

    @pytest.mark.parametrize("password", ["", None])
    def test_hash_empty_password_raises(self, password):
        """Test that a missing password is never hashed."""
        with pytest.raises(WeakPasswordError, match="cannot be empty"):
            self.service.hash(password)

    def test_hash_accepts_long_multibyte_password(self):
        """Passwords beyond bcrypt's input limit hash and verify."""
        password = "ü" * BCRYPT_MAX_BYTES  # 144 bytes in UTF-8
        hashed = self.service.hash(password)

        assert self.service.verify(password, hashed) is True


class TestDummyHash:
    """Tests for the throwaway hash used on unknown-email logins."""

    def test_dummy_hash_uses_configured_rounds(self):
        service = PasswordHashingService(rounds=5)

        assert service.dummy_hash.startswith("$2b$05$")

    def test_dummy_hash_is_computed_once(self):
        service = PasswordHashingService(rounds=4)

        assert service.dummy_hash is service.dummy_hash

    def test_nothing_verifies_against_dummy_hash(self):
        service = PasswordHashingService(rounds=4)

        assert service.verify("password123", service.dummy_hash) is False


class TestPasswordRehash:
    """Tests for needs_rehash functionality."""

    def test_needs_rehash_same_rounds(self):
        """Test that hash with same rounds doesn't need rehash."""
        service = PasswordHashingService(rounds=4)
        hashed = service.hash("password123")

        assert service.needs_rehash(hashed) is False

    def test_needs_rehash_different_rounds(self):
        """Test that hash with different rounds needs rehash."""
        hashed = PasswordHashingService(rounds=4).hash("password123")

        assert PasswordHashingService(rounds=5).needs_rehash(hashed) is True

    def test_needs_rehash_invalid_hash(self):
        """Test that invalid hash format returns True (needs rehash)."""
        service = PasswordHashingService(rounds=10)
        assert service.needs_rehash("invalid_hash") is True
        assert service.needs_rehash("") is True
