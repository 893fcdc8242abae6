"""HTTP transport protocol.

The engine never talks to a network library directly: a Request hands its
verb, URL, headers, body, and timeouts to an :class:`HttpTransport` and gets
back a fully-buffered :class:`HttpResult`.

Usage::

    from scribe.core.protocols.http import HttpTransport


    def fetch(transport: HttpTransport) -> ...:
        result = transport.execute("GET", url, {}, None, connect_timeout=5, read_timeout=10)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional, Protocol, runtime_checkable


@dataclass(frozen=True)
class HttpResult:
    """Status line, headers, and decoded body of one executed HTTP call."""

    status_code: int
    reason: str
    headers: Mapping[str, str] = field(default_factory=dict)
    body: str = ""


@runtime_checkable
class HttpTransport(Protocol):
    """Execute a single HTTP call and release the connection before returning.

    Implementations raise :class:`~scribe.core.exceptions.OAuthConnectionError`
    for transport faults and :class:`~scribe.core.exceptions.MalformedUrlError`
    for URLs they cannot parse.
    """

    def execute(
        self,
        verb: str,
        url: str,
        headers: Mapping[str, str],
        body: Optional[bytes],
        *,
        connect_timeout: Optional[float] = None,
        read_timeout: Optional[float] = None,
    ) -> HttpResult:
        """Send the call and return the buffered result."""
        ...

    def close(self) -> None:
        """Release pooled connections held by the transport."""
        ...
