"""Cross-origin policy applied uniformly to every response."""

from typing import Any

from fastapi import FastAPI
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from sbs.config import Settings
from sbs.middleware.error_handler import unhandled_exception_response

ALLOW_METHODS = "GET, POST, OPTIONS"
ALLOW_HEADERS = "Content-Type, Authorization"


class CorsPolicyMiddleware(BaseHTTPMiddleware):
    """Add CORS headers to all responses and answer any OPTIONS request with 204."""

    def __init__(self, app: Any, allow_origins: list[str]) -> None:  # noqa: ANN401
        super().__init__(app)
        self.allow_all = "*" in allow_origins
        self.allow_origins = frozenset(allow_origins)

    def _allow_origin(self, request: Request) -> str | None:
        if self.allow_all:
            return "*"
        origin = request.headers.get("Origin")
        return origin if origin in self.allow_origins else None

    def _apply(self, request: Request, response: Response) -> Response:
        origin = self._allow_origin(request)
        if origin is not None:
            response.headers["Access-Control-Allow-Origin"] = origin
            if not self.allow_all:
                response.headers["Vary"] = "Origin"
        response.headers["Access-Control-Allow-Methods"] = ALLOW_METHODS
        response.headers["Access-Control-Allow-Headers"] = ALLOW_HEADERS
        return response

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        """Short-circuit preflight, decorate everything else."""
        if request.method == "OPTIONS":
            return self._apply(request, Response(status_code=204))
        try:
            response = await call_next(request)
        except Exception as exc:  # noqa: BLE001
            # the app-level catch-all runs outside this middleware
            response = unhandled_exception_response(request, exc)
        return self._apply(request, response)


def setup_cors(app: FastAPI, settings: Settings) -> None:
    """Configure CORS for the configured origins (default: any)."""
    app.add_middleware(CorsPolicyMiddleware, allow_origins=settings.cors_origins)
