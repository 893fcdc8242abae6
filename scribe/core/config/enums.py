"""Configuration enums for type-safe settings.

These enums inherit from str to maintain serialization compatibility with
environment variables.
"""

from enum import Enum


class LogLevel(str, Enum):
    """Log levels accepted by ``SCRIBE_LOG_LEVEL``."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
