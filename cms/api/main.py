"""
ASGI entry point.

Request flow:
=============
    client
      │
      ▼
    CORSMiddleware
      │
      ▼
    router (/health, /api/auth, /api/users, /api/content-types,
            /api/contents, /api/media)
      │   Depends: DbSession, CurrentUser / EditorUser, *Service
      ▼
    service ──► repository ──► AsyncSession ──► PostgreSQL
      │
      ▼
    CmsException? ──► exception handler ──► {"error": {...}}

    uvicorn cms.api.main:app --host 0.0.0.0 --port 8000
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cms.api.middleware import setup_exception_handlers
from cms.api.routes import register_routes
from cms.config.settings import settings
from cms.shared.core.logging import logger
from cms.shared.db import close_db, init_db


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Check the database on boot and release the pool on exit."""
    logger.info(
        "Starting CMS API",
        app_name=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.APP_ENV,
    )
    await init_db()
    logger.info("CMS API ready")

    yield

    await close_db()
    logger.info("CMS API stopped")


def create_application() -> FastAPI:
    app = FastAPI(
        title=settings.APP_NAME,
        description="Headless content management backend",
        version=settings.APP_VERSION,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type"],
    )

    setup_exception_handlers(app)
    register_routes(app)

    return app


app = create_application()
