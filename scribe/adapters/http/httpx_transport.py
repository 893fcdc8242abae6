"""httpx-backed HTTP transport adapter."""

from __future__ import annotations

from types import TracebackType
from typing import Mapping, Optional, Type

import httpx

from scribe.core.config import settings
from scribe.core.exceptions import MalformedUrlError, OAuthConnectionError
from scribe.core.protocols.http import HttpResult


class HttpxTransport:
    """Execute requests through an ``httpx.Client``.

    The client (and its connection pool) belongs to whoever created the
    transport: pass one in to share it, or let the transport create one and
    release it with :meth:`close` or a ``with`` block.
    """

    def __init__(
        self,
        client: Optional[httpx.Client] = None,
        *,
        connect_timeout: Optional[float] = None,
        read_timeout: Optional[float] = None,
        follow_redirects: Optional[bool] = None,
    ) -> None:
        self._connect_timeout = (
            connect_timeout if connect_timeout is not None else settings.CONNECT_TIMEOUT
        )
        self._read_timeout = read_timeout if read_timeout is not None else settings.READ_TIMEOUT
        self._owns_client = client is None
        self._client = client or httpx.Client(
            follow_redirects=(
                settings.FOLLOW_REDIRECTS if follow_redirects is None else follow_redirects
            ),
            headers={"User-Agent": settings.USER_AGENT},
        )

    def _timeout(
        self, connect_timeout: Optional[float], read_timeout: Optional[float]
    ) -> httpx.Timeout:
        connect = connect_timeout if connect_timeout is not None else self._connect_timeout
        read = read_timeout if read_timeout is not None else self._read_timeout
        return httpx.Timeout(None, connect=connect, read=read)

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
        """Send one request and buffer the whole response.

        The streamed response is read inside its context manager, so the
        connection goes back to the pool (or is closed) on every exit path.

        Raises:
            MalformedUrlError: If httpx cannot parse or route the URL
            OAuthConnectionError: On DNS failure, timeout, refused connection, an
                undecodable body or a redirect loop
        """
        try:
            with self._client.stream(
                verb,
                url,
                headers=dict(headers),
                content=body,
                timeout=self._timeout(connect_timeout, read_timeout),
            ) as response:
                response.read()
                return HttpResult(
                    status_code=response.status_code,
                    reason=response.reason_phrase,
                    headers=dict(response.headers.items()),
                    body=response.text,
                )
        except (httpx.InvalidURL, httpx.UnsupportedProtocol) as e:
            raise MalformedUrlError(url) from e
        except httpx.RequestError as e:
            raise OAuthConnectionError(f"{verb} {url} failed: {e}") from e

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "HttpxTransport":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()
