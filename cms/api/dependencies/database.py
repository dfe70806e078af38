"""
Database Dependency

FastAPI dependency for database sessions.

The session is committed when the handler returns normally and rolled
back when it raises. Tests override this dependency to bind the app to
an in-memory database.

Usage:
======
    from cms.api.dependencies.database import DbSession

    @router.get("/ready")
    async def readiness_check(db: DbSession):
        await db.execute(text("SELECT 1"))
"""

from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from cms.shared.db import get_db as _get_db


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield one database session for the duration of the request."""
    async for session in _get_db():
        yield session


# Type alias for cleaner route signatures
DbSession = Annotated[AsyncSession, Depends(get_db)]
