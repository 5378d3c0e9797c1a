# tests/auth/test_password_manager.py
"""Tests for blogapi/managers/password_manager.py module."""

from unittest.mock import patch

import pytest

from blogapi.errors import PasswordHashingError
from blogapi.managers.password_manager import (
    PasswordHasher,
    get_password_hasher,
    hash_password,
    verify_password,
)


class TestPasswordHasher:
    """Tests for the synchronous hasher."""

    def test_hash_is_argon2(self) -> None:
        hashed = get_password_hasher().hash("password123")
        assert hashed.startswith("$argon2")
        assert "password123" not in hashed

    def test_verify(self) -> None:
        hasher = get_password_hasher()
        hashed = hasher.hash("password123")
        assert hasher.verify("password123", hashed) is True
        assert hasher.verify("wrong", hashed) is False

    def test_empty_password_rejected(self) -> None:
        with pytest.raises(ValueError, match="empty"):
            get_password_hasher().hash("")

    def test_missing_hash_runs_dummy_verify(self) -> None:
        hasher = PasswordHasher()
        with patch.object(hasher.pwd_context, "dummy_verify") as dummy:
            assert hasher.verify("password123", None) is False
        dummy.assert_called_once()

    def test_corrupted_hash(self) -> None:
        assert get_password_hasher().verify("password123", "$argon2id$garbage") is False

    def test_backend_failure_is_wrapped(self) -> None:
        hasher = PasswordHasher()
        with (
            patch.object(hasher.pwd_context, "hash", side_effect=ValueError("boom")),
            pytest.raises(PasswordHashingError),
        ):
            hasher.hash("password123")


class TestAsyncHelpers:
    """Tests for the executor-backed helpers."""

    async def test_hash_and_verify(self) -> None:
        hashed = await hash_password("password123")
        assert await verify_password("password123", hashed) is True
        assert await verify_password("nope", hashed) is False

    async def test_verify_without_hash(self) -> None:
        assert await verify_password("password123", None) is False
