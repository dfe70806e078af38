"""
Repository Pattern Implementations

Repositories encapsulate database queries behind one class per entity.
Every finder is a literal SQLAlchemy query; nothing is derived from
method names at runtime.

Repository Hierarchy:
=====================
    BaseRepository[ModelType]           ← Generic CRUD + save()
         │
         ├── UserRepository             ← username / email lookups
         ├── ContentTypeRepository      ← name / api_identifier lookups
         ├── ContentRepository          ← slug-per-type, status, date, search
         └── MediaRepository            ← file path, uploader, mime prefix

Usage Example:
==============
    from cms.shared.repositories import MediaRepository

    repo = MediaRepository(db)
    if await repo.get_by_file_path(path):
        raise DuplicateFilePathError(path)
"""

from cms.shared.repositories.base import BaseRepository
from cms.shared.repositories.user_repository import UserRepository
from cms.shared.repositories.content_type_repository import ContentTypeRepository
from cms.shared.repositories.content_repository import ContentRepository
from cms.shared.repositories.media_repository import MediaRepository

__all__ = [
    # Base class
    "BaseRepository",
    # Entity-specific repositories
    "UserRepository",
    "ContentTypeRepository",
    "ContentRepository",
    "MediaRepository",
]
