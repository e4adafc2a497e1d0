"""User profile business logic."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from sqlalchemy import select

from sbs.db.models import User
from sbs.errors import InternalError

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

logger = structlog.get_logger()


async def get_record(db: AsyncSession, user_id: int) -> tuple[int, int]:
    """
    Return (wins, losses) for an authenticated user.

    Raises:
        InternalError: If the token's user ID has no row. A verified token
            always names a registered user, so this means the store and the
            issued tokens disagree.
    """
    result = await db.execute(select(User.total_wins, User.total_losses).where(User.id == user_id))
    row = result.one_or_none()
    if row is None:
        logger.error("profile_user_missing", user_id=user_id)
        raise InternalError("User not found for authenticated token")
    return row.total_wins, row.total_losses
