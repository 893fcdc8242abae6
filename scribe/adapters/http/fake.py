"""Fake HTTP transport for testing.

Returns seeded results without touching the network and records every
call for assertions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from scribe.core.protocols.http import HttpResult


@dataclass(frozen=True)
class RecordedCall:
    """One call made through :class:`FakeHttpTransport`."""

    verb: str
    url: str
    headers: Mapping[str, str]
    body: Optional[bytes]
    connect_timeout: Optional[float]
    read_timeout: Optional[float]

    @property
    def text(self) -> str:
        return (self.body or b"").decode("utf-8")


class FakeHttpTransport:
    """Test implementation of HttpTransport.

    Usage::

        fake = FakeHttpTransport()
        fake.seed(200, "oauth_token=t&oauth_token_secret=s")
        request = OAuthRequest(Verb.POST, "https://p.example/token", fake)
        request.send()
        assert fake.calls[0].verb == "POST"
    """

    def __init__(self) -> None:
        self._results: list[HttpResult] = []
        self._default: HttpResult = HttpResult(status_code=200, reason="OK")
        self._should_raise: Optional[Exception] = None
        self._calls: list[RecordedCall] = []
        self.closed = False

    # -- seeding helpers --

    def seed(
        self,
        status_code: int,
        body: str = "",
        headers: Optional[Mapping[str, str]] = None,
        reason: str = "",
    ) -> None:
        """Queue a result; queued results are returned in order, then the default."""
        self._results.append(
            HttpResult(status_code=status_code, reason=reason, headers=headers or {}, body=body)
        )

    def seed_default(self, status_code: int, body: str = "") -> None:
        self._default = HttpResult(status_code=status_code, reason="", body=body)

    def set_error(self, error: Exception) -> None:
        self._should_raise = error

    def clear_error(self) -> None:
        self._should_raise = None

    @property
    def calls(self) -> list[RecordedCall]:
        return list(self._calls)

    @property
    def last_call(self) -> RecordedCall:
        return self._calls[-1]

    # -- HttpTransport --

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
        self._calls.append(
            RecordedCall(verb, url, dict(headers), body, connect_timeout, read_timeout)
        )
        if self._should_raise:
            raise self._should_raise
        if self._results:
            return self._results.pop(0)
        return self._default

    def close(self) -> None:
        self.closed = True
