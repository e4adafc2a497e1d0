"""Response schemas for the leaderboard."""

from __future__ import annotations

from pydantic import BaseModel


class LeaderboardEntry(BaseModel):
    user: str
    wins: int
    losses: int
    rate: float
