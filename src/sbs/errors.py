"""
Domain error taxonomy.

Services raise these; the global error handler renders them as
``{"detail": ...}`` with the matching status code.
"""

from __future__ import annotations

from typing import Literal

from sqlalchemy.exc import IntegrityError

# SQLSTATE codes (PostgreSQL class 23)
_UNIQUE_VIOLATION = "23505"
_FOREIGN_KEY_VIOLATION = "23503"


class ApiError(Exception):
    """Base class for errors that map directly onto an HTTP response."""

    status_code: int = 500
    default_detail: str = "Internal server error"

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class BadRequestError(ApiError):
    status_code = 400
    default_detail = "Invalid request body"


class UnauthorizedError(ApiError):
    status_code = 401
    default_detail = "Unauthorized"


class NotFoundError(ApiError):
    status_code = 404
    default_detail = "Not found"


class ConflictError(ApiError):
    status_code = 409
    default_detail = "Conflict"


class InternalError(ApiError):
    status_code = 500


def _sqlstate(exc: IntegrityError) -> str | None:
    """Pull the SQLSTATE off the DBAPI error (asyncpg adapter or psycopg)."""
    orig = exc.orig
    for attr in ("sqlstate", "pgcode"):
        code = getattr(orig, attr, None)
        if isinstance(code, str):
            return code
    # asyncpg wraps the server error as __cause__ of the adapted exception
    cause = getattr(orig, "__cause__", None)
    code = getattr(cause, "sqlstate", None)
    return code if isinstance(code, str) else None


def classify_integrity_error(exc: IntegrityError) -> Literal["unique", "foreign_key"] | None:
    """
    Identify which constraint an IntegrityError violated.

    Returns "unique", "foreign_key", or None for anything else
    (NOT NULL, CHECK, ...).
    """
    code = _sqlstate(exc)
    if code == _UNIQUE_VIOLATION:
        return "unique"
    if code == _FOREIGN_KEY_VIOLATION:
        return "foreign_key"

    message = str(exc.orig).upper()
    if "UNIQUE CONSTRAINT FAILED" in message:
        return "unique"
    if "FOREIGN KEY CONSTRAINT FAILED" in message:
        return "foreign_key"
    return None
