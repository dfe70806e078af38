"""
Cross-cutting request handling.

setup_exception_handlers(app) installs the handlers that render
CmsException subclasses, validation failures and unexpected errors as
the shared {"error": {...}} body.
"""

from cms.api.middleware.error_handler import setup_exception_handlers

__all__ = ["setup_exception_handlers"]
