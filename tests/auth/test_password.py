"""Tests for password hashing and validation."""

import pytest

from sbs.auth.password import (
    PasswordValidationError,
    burn_verification,
    hash_password,
    validate_password,
    verify_password,
)


class TestPasswordHashing:
    def test_hash_and_verify(self):
        hashed = hash_password("pw123456")
        assert verify_password("pw123456", hashed) is True

    def test_wrong_password_rejected(self):
        hashed = hash_password("pw123456")
        assert verify_password("wrong", hashed) is False

    def test_hash_is_argon2id(self):
        assert hash_password("pw123456").startswith("$argon2id$")

    def test_hash_is_salted(self):
        assert hash_password("pw123456") != hash_password("pw123456")

    def test_plaintext_not_in_hash(self):
        assert "pw123456" not in hash_password("pw123456")

    def test_garbage_hash_does_not_raise(self):
        assert verify_password("pw123456", "not-a-hash") is False

    def test_burn_verification_never_raises(self):
        burn_verification("anything")


class TestPasswordValidation:
    def test_ordinary_password_accepted(self):
        validate_password("pw123456")

    def test_empty_password_rejected(self):
        with pytest.raises(PasswordValidationError):
            validate_password("")

    def test_whitespace_only_rejected(self):
        with pytest.raises(PasswordValidationError):
            validate_password("   ")

    def test_too_long_password_rejected(self):
        with pytest.raises(PasswordValidationError, match="128"):
            validate_password("a" * 129)
