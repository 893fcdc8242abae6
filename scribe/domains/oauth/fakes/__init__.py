"""Fakes for the OAuth domain."""

from .timestamp import FixedTimestampService

__all__ = ["FixedTimestampService"]
