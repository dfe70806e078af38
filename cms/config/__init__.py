"""
Runtime configuration.

    from cms.config import settings

    settings.DATABASE_URL
    settings.ACCESS_TOKEN_EXPIRE_MINUTES
"""

from cms.config.settings import Settings, get_settings, settings

__all__ = ["Settings", "get_settings", "settings"]
