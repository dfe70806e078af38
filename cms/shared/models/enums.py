"""
Enums used across the application.
"""

from enum import Enum


class UserRole(str, Enum):
    """Permission level of a CMS account."""

    ADMIN = "ADMIN"
    EDITOR = "EDITOR"
    AUTHOR = "AUTHOR"
    VIEWER = "VIEWER"


class ContentStatus(str, Enum):
    """
    Editorial state of a content item.

    Transitions are not restricted: any status may be set from any other,
    and publishing an already published or archived item is allowed.
    """

    DRAFT = "DRAFT"
    PUBLISHED = "PUBLISHED"
    ARCHIVED = "ARCHIVED"
    SCHEDULED = "SCHEDULED"
