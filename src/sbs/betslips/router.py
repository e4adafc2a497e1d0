"""Betslip router: /betslip and /betslips/{betslip_id}/comments."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from sbs.auth.dependencies import get_current_user_id
from sbs.auth.schemas import MessageResponse
from sbs.betslips.schemas import BetslipCreate, BetslipCreatedResponse, CommentCreate
from sbs.betslips.service import add_comment, create_betslip
from sbs.database import get_session

# ids are BIGINT
MAX_ID = 2**63 - 1

router = APIRouter(tags=["Betslips"])


@router.post("/betslip", response_model=BetslipCreatedResponse, status_code=201)
async def post_betslip(
    body: BetslipCreate,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_session),
) -> BetslipCreatedResponse:
    """Submit a betslip. It is recorded as pending."""
    betslip = await create_betslip(db, user_id, platform=body.platform, games=body.games)
    return BetslipCreatedResponse(message="Betslip posted successfully!", betslip_id=betslip.id)


@router.post("/betslips/{betslip_id}/comments", response_model=MessageResponse, status_code=201)
async def post_comment(
    body: CommentCreate,
    betslip_id: int = Path(..., ge=1, le=MAX_ID),
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_session),
) -> MessageResponse:
    """Comment on a betslip."""
    await add_comment(db, user_id, betslip_id, body.content)
    return MessageResponse(message="Comment posted successfully")
