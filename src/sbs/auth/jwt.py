"""
HS256 JWT access tokens.

Tokens are stateless: verification depends only on the shared secret and
the token itself. Only the configured HMAC algorithm is accepted on decode,
so a token whose header names any other algorithm is rejected.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any

import jwt

from sbs.config import get_settings


def create_access_token(user_id: int, *, now: datetime | None = None) -> str:
    """
    Create a bearer token for a user.

    Args:
        user_id: The user's database ID.
        now: Issue time override (defaults to the current UTC time).

    Returns:
        Encoded JWT string.
    """
    settings = get_settings()
    issued_at = now or datetime.now(timezone.utc)
    payload: dict[str, Any] = {
        "sub": str(user_id),
        "iat": issued_at,
        "exp": issued_at + timedelta(hours=settings.jwt_expire_hours),
    }
    return jwt.encode(payload, settings.signing_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str) -> dict[str, Any]:
    """
    Verify and decode a JWT token.

    Raises:
        jwt.InvalidTokenError: If the token is malformed, expired, signed with
            another key, or uses an algorithm other than the configured one.
    """
    settings = get_settings()
    try:
        payload: dict[str, Any] = jwt.decode(
            token,
            settings.signing_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp", "sub"]},
        )
    except jwt.ExpiredSignatureError:
        msg = "Token has expired"
        raise jwt.InvalidTokenError(msg) from None

    try:
        int(payload["sub"])
    except (TypeError, ValueError):
        msg = "Invalid subject claim"
        raise jwt.InvalidTokenError(msg) from None
    return payload


def user_id_from_token(token: str) -> int:
    """Verify a token and return the user ID it was issued for."""
    return int(verify_token(token)["sub"])
