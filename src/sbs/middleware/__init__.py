"""Middleware registration."""

from fastapi import FastAPI

from sbs.config import Settings
from sbs.middleware.cors import setup_cors
from sbs.middleware.error_handler import setup_error_handlers
from sbs.middleware.logging import setup_logging
from sbs.middleware.request_id import RequestIdMiddleware


def setup_middleware(app: FastAPI, settings: Settings) -> None:
    """Register all middleware in the correct order.

    FastAPI/Starlette executes middleware in reverse-add order (last added = outermost).
    CORS must be outermost so preflight requests never reach the routes.
    """
    setup_logging(settings)
    setup_error_handlers(app)
    app.add_middleware(RequestIdMiddleware)
    setup_cors(app, settings)  # added last → outermost
