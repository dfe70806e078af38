"""
Database Module

Database connectivity, session management and scoped transactions.

Request Flow:
=============
    FastAPI Route
        │  Depends(get_db)
        ▼
    AsyncSession (one per request, commit on success, rollback on error)
        │
        ▼
    Service ── unit_of_work(session) ──▶ Repository ──▶ PostgreSQL

Usage in FastAPI:
=================
    from fastapi import Depends
    from cms.shared.db import get_db
    from cms.shared.services import UserService

    @router.get("/users/{user_id}")
    async def get_user(user_id: int, db: AsyncSession = Depends(get_db)):
        return await UserService(db).find_by_id(user_id)
"""

from cms.shared.db.session import (
    get_db,
    init_db,
    close_db,
    unit_of_work,
    build_engine,
    AsyncSessionLocal,
    engine,
)

__all__ = [
    "get_db",  # FastAPI dependency for getting a database session
    "init_db",  # Verify connectivity on app startup
    "close_db",  # Dispose engine on app shutdown
    "unit_of_work",  # Scoped transaction for service mutations
    "build_engine",  # Engine factory (tests, scripts)
    "AsyncSessionLocal",  # Session factory for manual session creation
    "engine",  # Database engine (for migrations, etc.)
]
