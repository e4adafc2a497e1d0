"""
Betslip and comment business logic.

Betslips always start out pending. Submitting one never changes the
owner's win/loss counters.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog
from sqlalchemy.exc import IntegrityError

from sbs.db.models import STATUS_PENDING, Betslip, Comment
from sbs.errors import BadRequestError, InternalError, NotFoundError, classify_integrity_error

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

logger = structlog.get_logger()


async def create_betslip(db: AsyncSession, user_id: int, platform: str, games: Any) -> Betslip:  # noqa: ANN401
    """Insert a pending betslip owned by ``user_id``."""
    betslip = Betslip(
        user_id=user_id,
        platform=platform,
        games=games,
        status=STATUS_PENDING,
    )
    db.add(betslip)
    try:
        await db.commit()
    except IntegrityError as e:
        await db.rollback()
        if classify_integrity_error(e) == "foreign_key":
            logger.error("betslip_owner_missing", user_id=user_id)
            raise InternalError("User not found for authenticated token") from e
        raise
    logger.info("betslip_created", betslip_id=betslip.id, user_id=user_id, platform=platform)
    return betslip


async def add_comment(db: AsyncSession, user_id: int, betslip_id: int, content: str) -> Comment:
    """
    Attach a comment to a betslip.

    Raises:
        BadRequestError: If the content is empty or whitespace.
        NotFoundError: If the betslip does not exist.
        InternalError: If the authenticated user has no row.
    """
    if not content or not content.strip():
        raise BadRequestError("Comment content cannot be empty")

    if await db.get(Betslip, betslip_id) is None:
        raise NotFoundError("Betslip not found")

    comment = Comment(user_id=user_id, betslip_id=betslip_id, content=content)
    db.add(comment)
    try:
        await db.commit()
    except IntegrityError as e:
        await db.rollback()
        if classify_integrity_error(e) == "foreign_key":
            # betslip deleted since the lookup, or the author row is gone
            if await db.get(Betslip, betslip_id) is None:
                raise NotFoundError("Betslip not found") from e
            logger.error("comment_author_missing", user_id=user_id)
            raise InternalError("User not found for authenticated token") from e
        raise

    logger.info("comment_created", comment_id=comment.id, betslip_id=betslip_id, user_id=user_id)
    return comment
