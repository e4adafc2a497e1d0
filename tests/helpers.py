"""Request and seeding helpers shared by the test modules."""

from __future__ import annotations

from httpx import AsyncClient, Response
from sqlalchemy.ext.asyncio import AsyncSession

from sbs.auth.password import hash_password
from sbs.db.models import ROLE_PUNTER, User

TEST_PASSWORD = "pw123456"

_seed_hash: str | None = None


async def register(
    client: AsyncClient,
    username: str = "alice",
    email: str | None = None,
    password: str = TEST_PASSWORD,
) -> Response:
    """POST /register with sensible defaults."""
    return await client.post("/register", json={
        "username": username,
        "email": email or f"{username}@example.com",
        "password": password,
    })


async def login(client: AsyncClient, username: str = "alice", password: str = TEST_PASSWORD) -> Response:
    return await client.post("/login", json={"username": username, "password": password})


async def seed_user(
    db: AsyncSession,
    username: str,
    wins: int = 0,
    losses: int = 0,
    role: str = ROLE_PUNTER,
) -> User:
    """Insert a user row directly, with a consistent win rate."""
    global _seed_hash  # noqa: PLW0603
    if _seed_hash is None:
        _seed_hash = hash_password(TEST_PASSWORD)
    decided = wins + losses
    user = User(
        username=username,
        email=f"{username}@example.com",
        password_hash=_seed_hash,
        role=role,
        total_wins=wins,
        total_losses=losses,
        win_rate=wins / decided if decided else 0.0,
    )
    db.add(user)
    await db.commit()
    return user
