"""
Probe endpoints for load balancers and orchestrators.

/live answers as long as the process serves requests, /ready also needs
the database, /health reports the running service and version.
"""

from fastapi import APIRouter
from sqlalchemy import text

from cms.api.dependencies.database import DbSession
from cms.config.settings import settings
from cms.shared.schemas.common import HealthResponse


router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(service=settings.APP_NAME.lower(), version=settings.APP_VERSION)


@router.get("/ready")
async def ready(db: DbSession):
    # Fails through the 500 handler when the pool cannot reach the database
    await db.execute(text("SELECT 1"))
    return {"status": "ready"}


@router.get("/live")
async def live():
    return {"status": "alive"}
