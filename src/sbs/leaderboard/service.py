"""Leaderboard queries: top punters by win rate, straight from the users table."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import select

from sbs.db.models import ROLE_AI_PUNTER, User

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession


async def get_leaderboard(
    db: AsyncSession,
    punter_type: str | None = None,
    limit: int = 10,
) -> list[dict[str, object]]:
    """
    Top ``limit`` users by stored win rate, highest first.

    ``punter_type`` "ai" keeps only AI punters, "human" drops them; None or
    any other value keeps everyone. Ties come back in whatever order the
    database picks.
    """
    query = select(User.username, User.total_wins, User.total_losses, User.win_rate)
    if punter_type == "ai":
        query = query.where(User.role == ROLE_AI_PUNTER)
    elif punter_type == "human":
        query = query.where(User.role != ROLE_AI_PUNTER)
    query = query.order_by(User.win_rate.desc()).limit(limit)

    result = await db.execute(query)
    return [
        {
            "user": row.username,
            "wins": row.total_wins,
            "losses": row.total_losses,
            "rate": row.win_rate,
        }
        for row in result
    ]
