"""
URL layout.

    /health, /ready, /live   probes, no prefix
    /api/auth                login
    /api/users               registration and lookup
    /api/content-types       content type definitions
    /api/contents            content items, publishing, search
    /api/media               media metadata

Every /api router documents the shared error body for the statuses its
handlers can produce.
"""

from typing import Any

from fastapi import FastAPI

from cms.api.handlers import (
    auth_handler,
    content_handler,
    content_type_handler,
    health_handler,
    media_handler,
    user_handler,
)
from cms.shared.schemas.common import ErrorResponse


def _errors(*status_codes: int) -> dict[int | str, dict[str, Any]]:
    return {code: {"model": ErrorResponse} for code in status_codes}


def register_routes(app: FastAPI) -> None:
    app.include_router(health_handler.router, tags=["Health"])

    app.include_router(
        auth_handler.router,
        prefix="/api/auth",
        tags=["Authentication"],
        responses=_errors(400, 401),
    )
    app.include_router(
        user_handler.router,
        prefix="/api/users",
        tags=["Users"],
        responses=_errors(400, 404, 409),
    )
    app.include_router(
        content_type_handler.router,
        prefix="/api/content-types",
        tags=["Content Types"],
        responses=_errors(400, 401, 403, 404, 409),
    )
    app.include_router(
        content_handler.router,
        prefix="/api/contents",
        tags=["Content"],
        responses=_errors(400, 401, 404, 409),
    )
    app.include_router(
        media_handler.router,
        prefix="/api/media",
        tags=["Media"],
        responses=_errors(400, 401, 404, 409),
    )
