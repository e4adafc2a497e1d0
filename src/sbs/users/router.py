"""User router: /profile."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from sbs.auth.dependencies import get_current_user_id
from sbs.database import get_session
from sbs.users.schemas import ProfileResponse
from sbs.users.service import get_record

router = APIRouter(tags=["Users"])


@router.get("/profile", response_model=ProfileResponse)
async def profile(
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_session),
) -> ProfileResponse:
    """Win/loss record of the authenticated user."""
    wins, losses = await get_record(db, user_id)
    return ProfileResponse(wins=wins, losses=losses)
