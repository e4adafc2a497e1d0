"""
Authentication business logic.

Handles account registration and credential checks.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError

from sbs.auth.password import (
    PasswordValidationError,
    burn_verification,
    hash_password,
    validate_password,
    verify_password,
)
from sbs.db.models import ROLE_PUNTER, User
from sbs.errors import BadRequestError, ConflictError, UnauthorizedError, classify_integrity_error

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

logger = structlog.get_logger()

DUPLICATE_ACCOUNT = "Username or email already exists"
INVALID_CREDENTIALS = "Invalid credentials"


# ---------------------------------------------------------------------------
# User queries
# ---------------------------------------------------------------------------


async def get_user_by_id(db: AsyncSession, user_id: int) -> User | None:
    """Fetch a user by ID."""
    result = await db.execute(select(User).where(User.id == user_id))
    return result.scalar_one_or_none()


async def get_user_by_username(db: AsyncSession, username: str) -> User | None:
    """Fetch a user by exact username."""
    result = await db.execute(select(User).where(User.username == username))
    return result.scalar_one_or_none()


async def account_exists(db: AsyncSession, username: str, email: str) -> bool:
    """True if either the username or the email is already registered."""
    result = await db.execute(
        select(User.id).where(or_(User.username == username, User.email == email)).limit(1)
    )
    return result.scalar_one_or_none() is not None


# ---------------------------------------------------------------------------
# Registration
# ---------------------------------------------------------------------------


async def register_user(db: AsyncSession, username: str, email: str, password: str) -> User:
    """
    Register a new punter account.

    The uniqueness pre-check gives a fast answer in the common case; the
    unique constraints still decide concurrent registrations.

    Raises:
        BadRequestError: If the password is unusable.
        ConflictError: If the username or email is taken. The message does
            not say which.
    """
    try:
        validate_password(password)
    except PasswordValidationError as e:
        raise BadRequestError(str(e)) from e

    if await account_exists(db, username, email):
        raise ConflictError(DUPLICATE_ACCOUNT)

    user = User(
        username=username,
        email=email,
        password_hash=hash_password(password),
        role=ROLE_PUNTER,
        total_wins=0,
        total_losses=0,
        win_rate=0.0,
    )
    db.add(user)
    try:
        await db.commit()
    except IntegrityError as e:
        await db.rollback()
        if classify_integrity_error(e) == "unique":
            raise ConflictError(DUPLICATE_ACCOUNT) from e
        raise

    logger.info("user_registered", user_id=user.id)
    return user


# ---------------------------------------------------------------------------
# Login
# ---------------------------------------------------------------------------


async def authenticate_user(db: AsyncSession, username: str, password: str) -> User:
    """
    Check a username/password pair.

    Unknown usernames and wrong passwords fail identically, and an unknown
    username still pays for one hash verification.

    Raises:
        UnauthorizedError: "Invalid credentials" in both failure cases.
    """
    user = await get_user_by_username(db, username)
    if user is None:
        burn_verification(password)
        logger.info("login_failed", reason="unknown_user")
        raise UnauthorizedError(INVALID_CREDENTIALS)

    if not verify_password(password, user.password_hash):
        logger.info("login_failed", reason="bad_password", user_id=user.id)
        raise UnauthorizedError(INVALID_CREDENTIALS)

    logger.info("login_succeeded", user_id=user.id)
    return user
