"""
Headless CMS Backend

Users, content types, content and media behind a thin REST layer.

Package Structure:
==================
    cms/
    ├── api/        ← FastAPI application
    ├── shared/     ← Shared code (models, repositories, services, etc.)
    └── config/     ← Configuration

Running the Application:
========================
    # API Server
    uvicorn cms.api.main:app --reload

    # Database migrations
    alembic upgrade head
"""
