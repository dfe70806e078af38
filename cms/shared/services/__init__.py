"""
Business Logic Services

Services encapsulate business logic and coordinate between repositories
and domain rules.

Service Pattern:
================
    Handler → Service → Repository → Database

Services should:
- Validate, then transform, then write once
- Run mutations inside unit_of_work(session)
- Raise CmsException subclasses for rule violations
- NOT handle HTTP concerns (that's for handlers)

Available Services:
===================
- UserService: Registration, lookup and authentication
- ContentTypeService: Content type definitions and deactivation
- ContentService: Content creation, publishing and search
- MediaService: Media metadata registration and queries

Usage:
======
    from cms.shared.services import UserService

    service = UserService(db)
    user = await service.find_by_username("alice")
"""

from cms.shared.services.user_service import UserService
from cms.shared.services.content_type_service import ContentTypeService
from cms.shared.services.content_service import ContentService
from cms.shared.services.media_service import MediaService

__all__ = [
    "UserService",
    "ContentTypeService",
    "ContentService",
    "MediaService",
]
