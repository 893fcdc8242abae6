"""Configuration module for scribe.

Usage:
    from scribe.core.config import settings

    timeout = settings.CONNECT_TIMEOUT
"""

from scribe.core.config.enums import LogLevel
from scribe.core.config.settings import Settings

__all__ = [
    "LogLevel",
    "Settings",
    "settings",
]

# Singleton settings instance
settings = Settings()
