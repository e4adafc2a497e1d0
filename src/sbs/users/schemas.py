"""Response schemas for user endpoints."""

from __future__ import annotations

from pydantic import BaseModel


class ProfileResponse(BaseModel):
    wins: int
    losses: int
