"""Unit tests for HttpxTransport.

Covers:
- execute (buffers status, reason, headers, body; passes verb, headers, body, timeouts)
- error mapping (any httpx request failure -> OAuthConnectionError,
  bad URL -> MalformedUrlError)
- client ownership (close only a self-created client)
"""

from unittest.mock import MagicMock

import httpx
import pytest

from scribe.adapters.http.httpx_transport import HttpxTransport
from scribe.core.exceptions import MalformedUrlError, OAuthConnectionError
from scribe.core.protocols.http import HttpTransport


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _mock_client(status_code=200, text="", headers=None, reason="OK") -> MagicMock:
    """MagicMock httpx.Client whose stream() yields a canned response."""
    response = MagicMock()
    response.status_code = status_code
    response.reason_phrase = reason
    response.headers = httpx.Headers(headers or {})
    response.text = text

    client = MagicMock(spec=httpx.Client)
    client.stream.return_value.__enter__.return_value = response
    client.stream.return_value.__exit__.return_value = False
    return client


# ===========================================================================
# execute
# ===========================================================================


def test_transport_satisfies_protocol():
    assert isinstance(HttpxTransport(client=_mock_client()), HttpTransport)


def test_execute_buffers_response():
    client = _mock_client(200, "access_token=abc", {"Content-Type": "text/plain"})
    result = HttpxTransport(client=client).execute("GET", "https://p.example/t", {}, None)

    assert result.status_code == 200
    assert result.reason == "OK"
    assert result.body == "access_token=abc"
    assert result.headers["content-type"] == "text/plain"
    client.stream.return_value.__enter__.return_value.read.assert_called_once()


def test_execute_passes_request_and_timeouts():
    client = _mock_client()
    transport = HttpxTransport(client=client, connect_timeout=3, read_timeout=9)

    transport.execute(
        "POST", "https://p.example/t", {"X-A": "1"}, b"a=1", connect_timeout=1.5
    )

    args, kwargs = client.stream.call_args
    assert args == ("POST", "https://p.example/t")
    assert kwargs["headers"] == {"X-A": "1"}
    assert kwargs["content"] == b"a=1"
    assert kwargs["timeout"] == httpx.Timeout(None, connect=1.5, read=9)


def test_execute_through_mock_transport():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["body"] = request.content
        return httpx.Response(401, text="error=invalid_token")

    with httpx.Client(transport=httpx.MockTransport(handler)) as client:
        result = HttpxTransport(client=client).execute(
            "PUT", "https://p.example/r", {}, b"x=1"
        )

    assert seen == {"method": "PUT", "body": b"x=1"}
    assert result.status_code == 401
    assert result.reason == "Unauthorized"
    assert result.body == "error=invalid_token"


# ===========================================================================
# Error mapping (table-driven)
# ===========================================================================


@pytest.mark.parametrize(
    "error,expected",
    [
        (httpx.ConnectError("refused"), OAuthConnectionError),
        (httpx.ConnectTimeout("slow"), OAuthConnectionError),
        (httpx.ReadTimeout("slow"), OAuthConnectionError),
        (httpx.UnsupportedProtocol("ftp"), MalformedUrlError),
        (httpx.InvalidURL("bad"), MalformedUrlError),
        (httpx.DecodingError("bad gzip"), OAuthConnectionError),
        (httpx.TooManyRedirects("loop"), OAuthConnectionError),
    ],
    ids=[
        "connect",
        "connect timeout",
        "read timeout",
        "unsupported protocol",
        "invalid url",
        "undecodable body",
        "redirect loop",
    ],
)
def test_execute_maps_errors(error: Exception, expected: type):
    client = _mock_client()
    client.stream.side_effect = error

    with pytest.raises(expected) as exc_info:
        HttpxTransport(client=client).execute("GET", "https://p.example/t", {}, None)
    assert exc_info.value.__cause__ is error


def test_connection_error_is_builtin_connection_error():
    client = _mock_client()
    client.stream.side_effect = httpx.ConnectError("refused")

    with pytest.raises(ConnectionError):
        HttpxTransport(client=client).execute("GET", "https://p.example/t", {}, None)


def test_undecodable_body_maps_to_connection_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, headers={"Content-Encoding": "gzip"}, content=b"not-gzip")

    with httpx.Client(transport=httpx.MockTransport(handler)) as client:
        with pytest.raises(OAuthConnectionError) as exc_info:
            HttpxTransport(client=client).execute("GET", "https://p.example/t", {}, None)
    assert isinstance(exc_info.value.__cause__, httpx.DecodingError)


# ===========================================================================
# Client ownership
# ===========================================================================


def test_close_leaves_injected_client_open():
    client = _mock_client()
    HttpxTransport(client=client).close()
    client.close.assert_not_called()


def test_context_manager_closes_own_client():
    with HttpxTransport() as transport:
        client = transport._client
    assert client.is_closed
