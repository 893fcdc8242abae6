"""HTTP transport adapters."""

from scribe.adapters.http.fake import FakeHttpTransport
from scribe.adapters.http.httpx_transport import HttpxTransport

__all__ = [
    "FakeHttpTransport",
    "HttpxTransport",
]
