"""
Core Module

Provides core functionality shared across the application:
- Structured logging
- Custom exceptions

Usage:
======
    from cms.shared.core.logging import logger, get_logger
    from cms.shared.core.exceptions import CmsException, NotFoundError

    logger.info("Content published", content_id=content_id)
"""

from cms.shared.core.logging import (
    logger,
    get_logger,
    log_context,
    clear_log_context,
)
from cms.shared.core.exceptions import (
    CmsException,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    UserNotFoundError,
    ContentTypeNotFoundError,
    ContentNotFoundError,
    MediaNotFoundError,
    ValidationError,
    EmptyContentError,
    ConflictError,
    DuplicateResourceError,
    DuplicateUsernameError,
    DuplicateEmailError,
    DuplicateNameError,
    DuplicateApiIdentifierError,
    DuplicateSlugError,
    DuplicateFilePathError,
    PersistenceConflictError,
)

__all__ = [
    # Logging
    "logger",
    "get_logger",
    "log_context",
    "clear_log_context",
    # Exceptions
    "CmsException",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "UserNotFoundError",
    "ContentTypeNotFoundError",
    "ContentNotFoundError",
    "MediaNotFoundError",
    "ValidationError",
    "EmptyContentError",
    "ConflictError",
    "DuplicateResourceError",
    "DuplicateUsernameError",
    "DuplicateEmailError",
    "DuplicateNameError",
    "DuplicateApiIdentifierError",
    "DuplicateSlugError",
    "DuplicateFilePathError",
    "PersistenceConflictError",
]
