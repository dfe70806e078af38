"""
Custom Exceptions

Application-specific exceptions with HTTP status codes and error codes.

Exception Hierarchy:
====================
    CmsException (base)
       │
       ├── AuthenticationError (401)       ← Invalid credentials
       ├── AuthorizationError (403)        ← Insufficient role
       ├── NotFoundError (404)             ← Mutation addressed a missing row
       │      ├── UserNotFoundError
       │      ├── ContentTypeNotFoundError
       │      ├── ContentNotFoundError
       │      └── MediaNotFoundError
       ├── ValidationError (400)           ← Invalid input data
       │      └── EmptyContentError        ← Publish with blank content data
       └── ConflictError (409)
              ├── DuplicateResourceError   ← Uniqueness pre-check failed
              │      ├── DuplicateUsernameError
              │      ├── DuplicateEmailError
              │      ├── DuplicateNameError
              │      ├── DuplicateApiIdentifierError
              │      ├── DuplicateSlugError
              │      └── DuplicateFilePathError
              └── PersistenceConflictError ← Constraint violated at write time

Reads never raise for missing rows; they return None. NotFoundError is
reserved for operations that need the row to exist (publish, deactivate).

Usage:
======
    from cms.shared.core.exceptions import DuplicateUsernameError, ContentNotFoundError

    raise DuplicateUsernameError("alice")
    # {"error": {"code": "DUPLICATE_USERNAME",
    #            "message": "Username 'alice' is already taken",
    #            "details": {"field": "username", "value": "alice"}}}

    raise ContentNotFoundError(content_id)
"""

from typing import Any, Optional


class CmsException(Exception):
    """
    Base exception for all CMS application errors.

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code (default 500)
        error_code: Machine-readable error code
        details: Additional error context
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.error_code = error_code or "INTERNAL_ERROR"
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert exception to dictionary for API response.

        Returns:
            Dictionary with error details for JSON response
        """
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
            }
        }


# ═══════════════════════════════════════════════════════════════════════════════
# AUTHENTICATION & AUTHORIZATION ERRORS (401, 403)
# ═══════════════════════════════════════════════════════════════════════════════


class AuthenticationError(CmsException):
    """Authentication failed error (401 Unauthorized)."""

    def __init__(
        self,
        message: str = "Authentication failed",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=401,
            error_code="AUTHENTICATION_ERROR",
            details=details,
        )


class AuthorizationError(CmsException):
    """Authorization failed error (403 Forbidden)."""

    def __init__(
        self,
        message: str = "Access denied",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=403,
            error_code="AUTHORIZATION_ERROR",
            details=details,
        )


# ═══════════════════════════════════════════════════════════════════════════════
# NOT FOUND ERRORS (404)
# ═══════════════════════════════════════════════════════════════════════════════


class NotFoundError(CmsException):
    """
    Resource not found error (404 Not Found).

    Example:
        raise NotFoundError("ContentType", 7)
        # Message: "ContentType with id '7' not found"
    """

    def __init__(
        self,
        resource: str,
        resource_id: Optional[Any] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        message = f"{resource} not found"
        if resource_id is not None:
            message = f"{resource} with id '{resource_id}' not found"
        super().__init__(
            message=message,
            status_code=404,
            error_code="NOT_FOUND",
            details=details,
        )


class UserNotFoundError(NotFoundError):
    """User not found error."""

    def __init__(self, user_id: Any) -> None:
        super().__init__(resource="User", resource_id=user_id)


class ContentTypeNotFoundError(NotFoundError):
    """Content type not found error."""

    def __init__(self, content_type_id: Any) -> None:
        super().__init__(resource="ContentType", resource_id=content_type_id)


class ContentNotFoundError(NotFoundError):
    """Content not found error."""

    def __init__(self, content_id: Any) -> None:
        super().__init__(resource="Content", resource_id=content_id)


class MediaNotFoundError(NotFoundError):
    """Media not found error."""

    def __init__(self, media_id: Any) -> None:
        super().__init__(resource="Media", resource_id=media_id)


# ═══════════════════════════════════════════════════════════════════════════════
# VALIDATION ERRORS (400)
# ═══════════════════════════════════════════════════════════════════════════════


class ValidationError(CmsException):
    """
    Validation error (400 Bad Request).

    Raised when input data fails validation.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        details: Optional[dict[str, Any]] = None,
        error_code: str = "VALIDATION_ERROR",
    ) -> None:
        super().__init__(
            message=message,
            status_code=400,
            error_code=error_code,
            details=details,
        )


class EmptyContentError(ValidationError):
    """Publishing was requested for content whose data is blank."""

    def __init__(self, content_id: Any) -> None:
        super().__init__(
            message="Content data must not be blank to publish",
            details={"content_id": content_id},
            error_code="EMPTY_CONTENT",
        )


# ═══════════════════════════════════════════════════════════════════════════════
# CONFLICT ERRORS (409)
# ═══════════════════════════════════════════════════════════════════════════════


class ConflictError(CmsException):
    """
    Resource conflict error (409 Conflict).

    Raised when operation conflicts with existing resource.
    """

    def __init__(
        self,
        message: str = "Resource conflict",
        details: Optional[dict[str, Any]] = None,
        error_code: str = "CONFLICT",
    ) -> None:
        super().__init__(
            message=message,
            status_code=409,
            error_code=error_code,
            details=details,
        )


class DuplicateResourceError(ConflictError):
    """
    A uniqueness pre-check found an existing row.

    The message names the offending field value; details carry the
    field name and value for programmatic handling.
    """

    def __init__(
        self,
        field: str,
        value: Any,
        message: str,
        error_code: str = "DUPLICATE_RESOURCE",
    ) -> None:
        self.field = field
        self.value = value
        super().__init__(
            message=message,
            details={"field": field, "value": value},
            error_code=error_code,
        )


class DuplicateUsernameError(DuplicateResourceError):
    def __init__(self, username: str) -> None:
        super().__init__(
            field="username",
            value=username,
            message=f"Username '{username}' is already taken",
            error_code="DUPLICATE_USERNAME",
        )


class DuplicateEmailError(DuplicateResourceError):
    def __init__(self, email: str) -> None:
        super().__init__(
            field="email",
            value=email,
            message=f"Email '{email}' is already registered",
            error_code="DUPLICATE_EMAIL",
        )


class DuplicateNameError(DuplicateResourceError):
    def __init__(self, name: str) -> None:
        super().__init__(
            field="name",
            value=name,
            message=f"Name '{name}' is already used",
            error_code="DUPLICATE_NAME",
        )


class DuplicateApiIdentifierError(DuplicateResourceError):
    def __init__(self, api_identifier: str) -> None:
        super().__init__(
            field="api_identifier",
            value=api_identifier,
            message=f"ApiIdentifier '{api_identifier}' is already used",
            error_code="DUPLICATE_API_IDENTIFIER",
        )


class DuplicateSlugError(DuplicateResourceError):
    def __init__(self, slug: str) -> None:
        super().__init__(
            field="slug",
            value=slug,
            message=f"Slug '{slug}' is already used",
            error_code="DUPLICATE_SLUG",
        )


class DuplicateFilePathError(DuplicateResourceError):
    def __init__(self, file_path: str) -> None:
        super().__init__(
            field="file_path",
            value=file_path,
            message=f"FilePath '{file_path}' is already used",
            error_code="DUPLICATE_FILE_PATH",
        )


class PersistenceConflictError(ConflictError):
    """
    The database rejected a write because of a constraint violation.

    Reaching this means a uniqueness pre-check passed but a concurrent
    writer got there first (or a foreign key points at a missing row).
    """

    def __init__(self, table: str, reason: Optional[str] = None) -> None:
        super().__init__(
            message=f"Write to '{table}' violates a database constraint",
            details={"table": table, "reason": reason} if reason else {"table": table},
            error_code="PERSISTENCE_CONFLICT",
        )
