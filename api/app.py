"""
Assembly of the users FastAPI application.

``create_app`` builds a fresh app with its own in-memory repository, so each
call (one per test, one per server process) starts with an empty store.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.core.config import Settings, get_settings
from api.core.logging_config import setup_logging
from api.core.middleware import FAULT_MESSAGE, RequestIdMiddleware
from api.routers import users as users_router
from api.schemas.users import Envelope
from api.services.user_service import UserService

logger = logging.getLogger(__name__)

_HTTP_ERROR_MESSAGES = {
    404: "Not found",
    405: "Method not allowed",
}


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(Envelope(error=message).body(), status_code=status_code)


async def _invalid_payload(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.debug("rejected payload on %s %s: %s", request.method, request.url.path, exc.errors())
    return _error("Invalid request payload", 400)


async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = _HTTP_ERROR_MESSAGES.get(exc.status_code) or str(exc.detail)
    response = _error(message, exc.status_code)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def _unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return _error(FAULT_MESSAGE, 500)


def create_app(settings: Optional[Settings] = None, user_service: Optional[UserService] = None) -> FastAPI:
    """Build the app; also usable as ``uvicorn --factory api.app:create_app``."""
    settings = settings or get_settings()
    setup_logging(settings)

    # interactive docs and the schema are dev-only
    docs_enabled = settings.app_env != "prod"
    app = FastAPI(
        title=settings.project_name,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
    )
    app.state.user_service = user_service or UserService()

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=sorted(settings.cors_origins),
            allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
            allow_headers=["*"],
        )
    app.add_middleware(RequestIdMiddleware)

    app.add_exception_handler(RequestValidationError, _invalid_payload)
    app.add_exception_handler(StarletteHTTPException, _http_error)
    app.add_exception_handler(Exception, _unexpected_error)

    app.include_router(users_router.router)
    return app
