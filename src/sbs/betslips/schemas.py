"""Request/response schemas for betslip endpoints."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class BetslipCreate(BaseModel):
    """New betslip. ``games`` is any JSON value and is stored as-is."""

    platform: str = Field(..., max_length=128)
    games: Any = None


class BetslipCreatedResponse(BaseModel):
    message: str
    betslip_id: int


class CommentCreate(BaseModel):
    content: str
