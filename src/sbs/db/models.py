"""ORM models for users, betslips, and comments."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from sqlalchemy import (
    JSON,
    BigInteger,
    CheckConstraint,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
    func,
)
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column, relationship

from sbs.db.base import Base

# SQLite only autoincrements INTEGER PRIMARY KEY columns.
_Id = BigInteger().with_variant(Integer, "sqlite")

ROLE_PUNTER = "punter"
ROLE_AI_PUNTER = "ai_punter"

STATUS_PENDING = "pending"
STATUS_SETTLED_WIN = "settled-win"
STATUS_SETTLED_LOSS = "settled-loss"


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------


class User(Base):
    """Maps to the 'users' table."""

    __tablename__ = "users"
    __table_args__ = (
        CheckConstraint(f"role IN ('{ROLE_PUNTER}', '{ROLE_AI_PUNTER}')", name="ck_users_role"),
    )

    id: Mapped[int] = mapped_column(_Id, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(64), unique=True, nullable=False)
    email: Mapped[str] = mapped_column(String(320), unique=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(String(256), nullable=False)
    role: Mapped[str] = mapped_column(String(16), nullable=False, default=ROLE_PUNTER, server_default=ROLE_PUNTER)
    total_wins: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default="0")
    total_losses: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default="0")
    win_rate: Mapped[float] = mapped_column(Float, nullable=False, default=0.0, server_default="0")
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    betslips: Mapped[list[Betslip]] = relationship("Betslip", back_populates="user")


# ---------------------------------------------------------------------------
# Betslips
# ---------------------------------------------------------------------------


class Betslip(Base):
    """A submitted bet record. ``games`` is stored exactly as received."""

    __tablename__ = "betslips"
    __table_args__ = (
        CheckConstraint(
            f"status IN ('{STATUS_PENDING}', '{STATUS_SETTLED_WIN}', '{STATUS_SETTLED_LOSS}')",
            name="ck_betslips_status",
        ),
    )

    id: Mapped[int] = mapped_column(_Id, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(_Id, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    platform: Mapped[str] = mapped_column(String(128), nullable=False)
    games: Mapped[Any] = mapped_column(JSON().with_variant(JSONB, "postgresql"), nullable=True)
    status: Mapped[str] = mapped_column(
        String(16), nullable=False, default=STATUS_PENDING, server_default=STATUS_PENDING
    )
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    user: Mapped[User] = relationship("User", back_populates="betslips")
    comments: Mapped[list[Comment]] = relationship("Comment", back_populates="betslip")


# ---------------------------------------------------------------------------
# Comments
# ---------------------------------------------------------------------------


class Comment(Base):
    """Maps to the 'comments' table."""

    __tablename__ = "comments"
    __table_args__ = (CheckConstraint("length(content) > 0", name="ck_comments_content"),)

    id: Mapped[int] = mapped_column(_Id, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(_Id, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    betslip_id: Mapped[int] = mapped_column(
        _Id, ForeignKey("betslips.id", ondelete="CASCADE"), nullable=False, index=True
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    betslip: Mapped[Betslip] = relationship("Betslip", back_populates="comments")
