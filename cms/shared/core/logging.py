"""
Logging Configuration

Structured logging for the CMS using structlog.

Log Output:
===========
Development:
    2024-01-15 10:30:00 [info     ] User created                   user_id=42 username=alice

Production (JSON):
    {"timestamp": "2024-01-15T10:30:00", "level": "info", "event": "User created", "user_id": 42}

Sensitive Fields:
=================
Credentials never reach the log sink. Any event key listed in
SENSITIVE_KEYS (password, access_token, ...) is replaced with "***"
before rendering, so a careless `logger.info("...", password=pw)`
does not leak a plaintext password or a digest.

Usage:
======
    from cms.shared.core.logging import logger, get_logger, log_context

    logger.info("Content published", content_id=content.id)

    repo_logger = get_logger("cms.repositories")
    repo_logger.debug("Constraint violated", table="users")

    # Bind request-scoped values to every subsequent log line
    log_context(request_id=request_id)
"""

import logging
import sys
from typing import Any

import structlog
from structlog.typing import EventDict, Processor, WrappedLogger

from cms.config.settings import settings


SENSITIVE_KEYS = frozenset({"password", "password_hash", "access_token", "token", "secret_key"})


def redact_sensitive(_logger: WrappedLogger, _method: str, event_dict: EventDict) -> EventDict:
    """Mask credential-bearing keys in the event dict."""
    for key in SENSITIVE_KEYS.intersection(event_dict):
        event_dict[key] = "***"
    return event_dict


def setup_logging() -> None:
    """
    Configure structlog for the application.

    Development gets colored console output, every other environment
    gets one JSON object per line. Called once on module import.
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.LOG_LEVEL.upper()),
    )

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        redact_sensitive,
    ]

    if settings.is_development:
        processors: list[Processor] = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=True),
        ]
    else:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name, e.g. "cms.services.user"

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)


def log_context(**kwargs: Any) -> None:
    """
    Bind values to every subsequent log call in the current context.

    Example:
        log_context(request_id="abc-123", path="/api/users")
        logger.info("Creating user")  # includes request_id and path
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_log_context() -> None:
    """Drop all context variables bound with log_context()."""
    structlog.contextvars.clear_contextvars()


setup_logging()

logger = get_logger("cms")
