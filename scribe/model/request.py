"""Outbound HTTP request model.

A :class:`Request` is built by the caller (or by a service), optionally
signed, and sent exactly once. Sending goes through an
:class:`~scribe.core.protocols.http.HttpTransport`: either the one the
request was bound to, or a throwaway :class:`HttpxTransport` scoped to the
single call.
"""

from typing import Callable, Optional, Union
from urllib.parse import urlsplit

from scribe.adapters.http.httpx_transport import HttpxTransport
from scribe.core.exceptions import MalformedUrlError, RequestAlreadySentError
from scribe.core.protocols.http import HttpResult, HttpTransport
from scribe.core.shared_models import Verb
from scribe.model.parameters import ParameterList
from scribe.model.response import Response

DEFAULT_CONTENT_TYPE = "application/x-www-form-urlencoded"
DEFAULT_CHARSET = "utf-8"

_DEFAULT_PORTS = {"http": 80, "https": 443}

RequestTuner = Callable[["Request"], None]


class Request:
    """One pending HTTP call. Verb and URL are fixed at construction."""

    def __init__(
        self,
        verb: Union[Verb, str],
        url: str,
        transport: Optional[HttpTransport] = None,
    ) -> None:
        self._verb = verb if isinstance(verb, Verb) else Verb(str(verb).upper())
        self._url = url
        self._transport = transport
        self.querystring_params = ParameterList()
        self.body_params = ParameterList()
        self.headers: dict[str, str] = {}
        self.connect_timeout: Optional[float] = None
        self.read_timeout: Optional[float] = None
        self._payload: Optional[Union[str, bytes]] = None
        self._charset: Optional[str] = None
        self._sent = False

    @property
    def verb(self) -> Verb:
        return self._verb

    @property
    def url(self) -> str:
        return self._url

    @property
    def is_sent(self) -> bool:
        return self._sent

    @property
    def charset(self) -> str:
        return self._charset or DEFAULT_CHARSET

    @property
    def complete_url(self) -> str:
        """URL with the added querystring parameters appended."""
        return self.querystring_params.append_to(self._url)

    def bind_transport(self, transport: HttpTransport) -> None:
        self._transport = transport

    def add_header(self, key: str, value: str) -> None:
        self.headers[key] = value

    def remove_header(self, key: str) -> Optional[str]:
        return self.headers.pop(key, None)

    def add_querystring_parameter(self, key: str, value: str) -> None:
        self.querystring_params.add(key, value)

    def add_body_parameter(self, key: str, value: str) -> None:
        self.body_params.add(key, value)

    def set_payload(self, payload: Union[str, bytes]) -> None:
        """Set an explicit body. Body parameters are then neither sent nor signed."""
        self._payload = payload

    def set_charset(self, charset: str) -> None:
        self._charset = charset

    def set_connect_timeout(self, seconds: Optional[float]) -> None:
        self.connect_timeout = seconds

    def set_read_timeout(self, seconds: Optional[float]) -> None:
        self.read_timeout = seconds

    @property
    def has_payload(self) -> bool:
        return self._payload is not None

    def get_query_string_params(self) -> ParameterList:
        """Parameters of the URL's own query followed by the added ones.

        Raises:
            MalformedUrlError: If the URL cannot be parsed.
        """
        try:
            parts = urlsplit(self._url)
        except ValueError as e:
            raise MalformedUrlError(self._url) from e
        if not parts.scheme or not parts.netloc:
            raise MalformedUrlError(self._url)

        result = ParameterList()
        result.add_querystring(parts.query)
        result.add_all(self.querystring_params)
        return result

    def get_body_params(self) -> ParameterList:
        return ParameterList(self.body_params)

    def get_sanitized_url(self) -> str:
        """URL without query or fragment, lower-cased scheme/host, default port removed.

        Raises:
            MalformedUrlError: If the URL cannot be parsed.
        """
        try:
            parts = urlsplit(self._url)
            port = parts.port
        except ValueError as e:
            raise MalformedUrlError(self._url) from e
        if not parts.scheme or not parts.hostname:
            raise MalformedUrlError(self._url)

        scheme = parts.scheme.lower()
        host = parts.hostname
        if ":" in host:
            host = f"[{host}]"
        if port is not None and port != _DEFAULT_PORTS.get(scheme):
            host = f"{host}:{port}"
        return f"{scheme}://{host}{parts.path or '/'}"

    def get_body_contents(self) -> str:
        if self._payload is None:
            return self.body_params.as_form_url_encoded_string()
        if isinstance(self._payload, bytes):
            return self._payload.decode(self.charset)
        return self._payload

    def get_body_bytes(self) -> bytes:
        if isinstance(self._payload, bytes):
            return self._payload
        return self.get_body_contents().encode(self.charset)

    def _has_header(self, name: str) -> bool:
        lowered = name.lower()
        return any(key.lower() == lowered for key in self.headers)

    def send(self, tuner: Optional[RequestTuner] = None) -> Response:
        """Execute the request and return the buffered Response.

        Args:
            tuner: Optional callback invoked with the request right before execution

        Returns:
            Response with status, headers, and the full body

        Raises:
            RequestAlreadySentError: If this instance was already sent
            MalformedUrlError: If the URL cannot be parsed
            OAuthConnectionError: If the transport fails
        """
        if self._sent:
            raise RequestAlreadySentError()
        self._sent = True

        if tuner is not None:
            tuner(self)

        complete_url = self.complete_url
        headers = dict(self.headers)
        body: Optional[bytes] = None
        if self._verb.carries_body:
            body = self.get_body_bytes()
            if self._payload is None and not self._has_header("Content-Type"):
                headers["Content-Type"] = DEFAULT_CONTENT_TYPE

        if self._transport is not None:
            result = self._execute(self._transport, complete_url, headers, body)
        else:
            with HttpxTransport() as transport:
                result = self._execute(transport, complete_url, headers, body)
        return Response.from_result(result)

    def _execute(
        self,
        transport: HttpTransport,
        complete_url: str,
        headers: dict[str, str],
        body: Optional[bytes],
    ) -> HttpResult:
        return transport.execute(
            self._verb.value,
            complete_url,
            headers,
            body,
            connect_timeout=self.connect_timeout,
            read_timeout=self.read_timeout,
        )

    def __repr__(self) -> str:
        return f"<Request({self._verb.value} {self._url})>"


class OAuthRequest(Request):
    """A Request that also carries OAuth protocol parameters."""

    OAUTH_PREFIX = "oauth_"
    SCOPE = "scope"

    def __init__(
        self,
        verb: Union[Verb, str],
        url: str,
        transport: Optional[HttpTransport] = None,
    ) -> None:
        super().__init__(verb, url, transport)
        self.oauth_parameters: dict[str, str] = {}
        self._applied_header: Optional[str] = None
        self._applied_query_keys: list[str] = []

    def add_oauth_parameter(self, key: str, value: str) -> None:
        """Set an OAuth protocol parameter; a repeated key replaces the old value.

        Raises:
            ValueError: If ``key`` is neither ``scope`` nor starts with ``oauth_``.
        """
        if not (key.startswith(self.OAUTH_PREFIX) or key == self.SCOPE):
            raise ValueError(
                f"OAuth parameters must either be '{self.SCOPE}' or start with "
                f"'{self.OAUTH_PREFIX}', got '{key}'"
            )
        self.oauth_parameters[key] = value

    def get_oauth_parameters(self) -> dict[str, str]:
        return dict(self.oauth_parameters)

    def apply_header(self, name: str, value: str) -> None:
        """Set a header that a later :meth:`clear_signature` may remove."""
        self.add_header(name, value)
        self._applied_header = name

    def apply_querystring(self, params: dict[str, str]) -> None:
        """Add querystring parameters that a later :meth:`clear_signature` may remove."""
        for key, value in params.items():
            self.add_querystring_parameter(key, value)
            self._applied_query_keys.append(key)

    def clear_signature(self) -> None:
        """Remove the material a previous signing pass placed on the request."""
        self.oauth_parameters.pop("oauth_signature", None)
        if self._applied_header is not None:
            self.remove_header(self._applied_header)
            self._applied_header = None
        for key in self._applied_query_keys:
            self.querystring_params.remove(key)
        self._applied_query_keys = []

    def __repr__(self) -> str:
        return f"<OAuthRequest({self.verb.value} {self.url})>"
