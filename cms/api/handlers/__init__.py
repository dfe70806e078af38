"""
One APIRouter per resource. Handlers translate between HTTP and the
service layer and hold no business rules of their own.
"""

from cms.api.handlers import (
    auth_handler,
    content_handler,
    content_type_handler,
    health_handler,
    media_handler,
    user_handler,
)

__all__ = [
    "auth_handler",
    "content_handler",
    "content_type_handler",
    "health_handler",
    "media_handler",
    "user_handler",
]
