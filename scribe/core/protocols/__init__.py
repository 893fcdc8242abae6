"""Structural typing contracts consumed by the engine."""

from scribe.core.protocols.http import HttpResult, HttpTransport
from scribe.core.protocols.signature import SignatureService, TimestampService

__all__ = [
    "HttpResult",
    "HttpTransport",
    "SignatureService",
    "TimestampService",
]
