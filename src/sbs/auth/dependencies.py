"""FastAPI authentication dependencies."""

from __future__ import annotations

import jwt
import structlog
from fastapi import Request, Security
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from sbs.auth.jwt import user_id_from_token
from sbs.errors import UnauthorizedError

logger = structlog.get_logger()

_bearer = HTTPBearer(auto_error=False)


async def get_current_user_id(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Security(_bearer),
) -> int:
    """
    Extract and verify the bearer token, return the authenticated user ID.

    Does not hit the database; verification is a pure function of the
    secret and the token. Raises 401 on failure.
    """
    if credentials is None:
        if request.headers.get("Authorization"):
            raise UnauthorizedError("Bearer token required")
        raise UnauthorizedError("Authorization header required")

    try:
        user_id = user_id_from_token(credentials.credentials)
    except jwt.InvalidTokenError as e:
        logger.info("token_rejected", reason=str(e))
        raise UnauthorizedError("Invalid token") from e

    structlog.contextvars.bind_contextvars(user_id=user_id)
    return user_id
