"""Leaderboard router: /leaderboard."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from sbs.config import get_settings
from sbs.database import get_session
from sbs.leaderboard.schemas import LeaderboardEntry
from sbs.leaderboard.service import get_leaderboard

router = APIRouter(tags=["Leaderboard"])


@router.get("/leaderboard", response_model=list[LeaderboardEntry])
async def leaderboard(
    punter_type: str | None = Query(None, alias="type", description="ai or human; anything else lists everyone"),
    db: AsyncSession = Depends(get_session),
) -> list[LeaderboardEntry]:
    """Top punters ranked by win rate."""
    rows = await get_leaderboard(db, punter_type, limit=get_settings().leaderboard_limit)
    return [LeaderboardEntry(**row) for row in rows]
