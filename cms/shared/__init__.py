"""
Shared Module

Everything below the HTTP layer:
- Models: SQLAlchemy ORM models
- Repositories: Data access layer
- Services: Business logic layer
- Schemas: Pydantic request/response models
- Core: Logging, exceptions

Package Structure:
==================
    shared/
    ├── core/           ← Logging, exceptions
    ├── db/             ← Session management, unit_of_work
    ├── models/         ← SQLAlchemy models
    ├── repositories/   ← Data access layer
    ├── services/       ← Business logic
    ├── schemas/        ← Pydantic schemas
    ├── migrations/     ← Alembic environment and revisions
    └── utils/          ← Password hashing, JWT

Usage:
======
    from cms.shared.models import User, Content
    from cms.shared.repositories import UserRepository
    from cms.shared.services import UserService
    from cms.shared.schemas import UserCreate, UserResponse
    from cms.shared.core import logger, CmsException
"""
