"""
Unit tests for account_service.core.security
"""
import pytest
from account_service.core.security import (
    BcryptPasswordHasher,
    hash_password,
    verify_password,
)


class TestHashPassword:
    """Tests for hash_password"""

    def test_returns_non_empty_string(self):
        result = hash_password("mypassword", rounds=4)
        assert isinstance(result, str)
        assert len(result) > 0

    def test_different_salts_per_call(self):
        """Each hash should use a new salt, so hashes differ."""
        h1 = hash_password("same", rounds=4)
        h2 = hash_password("same", rounds=4)
        assert h1 != h2

    def test_hash_not_equal_to_plain(self):
        result = hash_password("secret123", rounds=4)
        assert result != "secret123"
        assert "secret123" not in result

    def test_uses_requested_work_factor(self):
        assert hash_password("secret123", rounds=5).startswith("$2b$05$")

    def test_default_work_factor_comes_from_settings(self, mock_settings):
        mock_settings.bcrypt_rounds = 6
        assert hash_password("secret123").startswith("$2b$06$")


class TestVerifyPassword:
    """Tests for verify_password"""

    def test_matching_password_returns_true(self):
        hashed = hash_password("correct", rounds=4)
        assert verify_password("correct", hashed) is True

    def test_wrong_password_returns_false(self):
        hashed = hash_password("correct", rounds=4)
        assert verify_password("wrong", hashed) is False

    def test_malformed_hash_returns_false(self):
        assert verify_password("anything", "not-a-bcrypt-hash") is False

    def test_empty_hash_returns_false(self):
        assert verify_password("anything", "") is False


class TestBcryptPasswordHasher:
    """Tests for the async hasher used by the use cases"""

    @pytest.mark.asyncio
    async def test_round_trip(self, password_hasher):
        hashed = await password_hasher.hash("plaintext")
        assert await password_hasher.verify("plaintext", hashed) is True

    @pytest.mark.asyncio
    async def test_other_plaintext_does_not_verify(self, password_hasher):
        hashed = await password_hasher.hash("different")
        assert await password_hasher.verify("plaintext", hashed) is False

    def test_rounds_default_to_settings(self, mock_settings):
        mock_settings.bcrypt_rounds = 7
        assert BcryptPasswordHasher().rounds == 7


class TestLongPasswords:
    """bcrypt rejects input over 72 bytes"""

    def test_verify_over_72_bytes_is_a_plain_mismatch(self, caplog):
        hashed = hash_password("correct", rounds=4)
        caplog.set_level("WARNING")
        assert verify_password("p" * 100, hashed) is False
        assert "malformed" not in caplog.text

    def test_verify_exactly_72_bytes(self):
        hashed = hash_password("p" * 72, rounds=4)
        assert verify_password("p" * 72, hashed) is True


class TestVerifyDummy:
    @pytest.mark.asyncio
    async def test_always_false_and_hash_reused(self, password_hasher):
        assert await password_hasher.verify_dummy("anything") is False
        first = password_hasher._dummy_hash
        assert first.startswith("$2b$04$")
        assert await password_hasher.verify_dummy("anything else") is False
        assert password_hasher._dummy_hash == first

    @pytest.mark.asyncio
    async def test_long_password_does_not_raise(self, password_hasher):
        assert await password_hasher.verify_dummy("p" * 100) is False
