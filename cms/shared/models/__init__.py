"""
CMS SQLAlchemy Models

Model Hierarchy:
================
    User
       ▲  ▲  ▲
       │  │  └── Media.uploader
       │  └───── Content.author
       └──────── ContentType.created_by / updated_by

    ContentType
       ▲
       └──────── Content.content_type

All associations are many-to-one and owned by the referencing row.

Usage:
======
    from cms.shared.models import User, ContentType, Content, Media, ContentStatus
"""

from cms.shared.models.base import Base, TimestampMixin
from cms.shared.models.enums import UserRole, ContentStatus
from cms.shared.models.user import User
from cms.shared.models.content_type import ContentType
from cms.shared.models.content import Content
from cms.shared.models.media import Media

__all__ = [
    # Base classes and mixins
    "Base",
    "TimestampMixin",
    # Enums
    "UserRole",
    "ContentStatus",
    # Models
    "User",
    "ContentType",
    "Content",
    "Media",
]
