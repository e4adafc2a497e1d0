"""
Password hashing using argon2id.

Argon2id is the winner of the Password Hashing Competition and is resistant
to both GPU-based and side-channel attacks.
"""

from __future__ import annotations

from functools import lru_cache

import argon2

from sbs.config import get_settings

_hasher = argon2.PasswordHasher(
    time_cost=2,
    memory_cost=65536,  # 64 MB
    parallelism=1,
    hash_len=32,
    salt_len=16,
    type=argon2.Type.ID,  # argon2id
)


class PasswordValidationError(ValueError):
    """Raised when a password cannot be accepted for hashing."""


def hash_password(password: str) -> str:
    """Hash a password using argon2id. Returns the full hash string."""
    return _hasher.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    """
    Verify a password against its argon2id hash.

    Returns True if the password matches. Never raises on mismatch.
    """
    try:
        return _hasher.verify(password_hash, password)
    except argon2.exceptions.VerifyMismatchError:
        return False
    except argon2.exceptions.InvalidHashError:
        return False


@lru_cache(maxsize=1)
def _dummy_hash() -> str:
    return _hasher.hash("sbs-dummy-password")


def burn_verification(password: str) -> None:
    """Spend the same work as a real verification (for unknown usernames)."""
    verify_password(password, _dummy_hash())


def validate_password(password: str) -> None:
    """
    Reject passwords that are empty or too long to hash sensibly.

    Raises PasswordValidationError.
    """
    if not password or not password.strip():
        msg = "Password cannot be empty"
        raise PasswordValidationError(msg)
    max_length = get_settings().password_max_length
    if len(password) > max_length:
        msg = f"Password must not exceed {max_length} characters"
        raise PasswordValidationError(msg)
