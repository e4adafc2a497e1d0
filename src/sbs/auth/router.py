"""Authentication router: /register and /login."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from sbs.auth.jwt import create_access_token
from sbs.auth.schemas import LoginRequest, MessageResponse, RegisterRequest, TokenResponse
from sbs.auth.service import authenticate_user, register_user
from sbs.database import get_session

router = APIRouter(tags=["Authentication"])


@router.post("/register", response_model=MessageResponse, status_code=201)
async def register(
    body: RegisterRequest,
    db: AsyncSession = Depends(get_session),
) -> MessageResponse:
    """Create a punter account."""
    user = await register_user(db, username=body.username, email=body.email, password=body.password)
    return MessageResponse(message=f"Welcome {user.username}!")


@router.post("/login", response_model=TokenResponse)
async def login(
    body: LoginRequest,
    db: AsyncSession = Depends(get_session),
) -> TokenResponse:
    """Exchange username + password for a bearer token."""
    user = await authenticate_user(db, body.username, body.password)
    return TokenResponse(token=create_access_token(user.id))
