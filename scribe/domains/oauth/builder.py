"""Service builder.

All service construction lives here. The builder collects credentials,
resolves the provider strategy, validates the configuration, and wires a
transport and a scoped logger into the service the strategy creates::

    service = (
        ServiceBuilder()
        .provider("twitter")
        .api_key("consumer-key")
        .api_secret("consumer-secret")
        .callback("https://app.example.com/callback")
        .build()
    )

When no transport is given, the builder creates an :class:`HttpxTransport`
that the service owns and closes on ``close()``.
"""

from typing import Optional, Union

from pydantic import ValidationError

from scribe.adapters.http.httpx_transport import HttpxTransport
from scribe.core.config import settings
from scribe.core.exceptions import InvalidConfigurationError
from scribe.core.logging import logger
from scribe.core.protocols.http import HttpTransport
from scribe.core.shared_models import SignatureType
from scribe.domains.oauth.protocols import OAuthServiceProtocol
from scribe.model.config import OAuthConfig
from scribe.platform.apis import Api
from scribe.platform.registry import get_api

ApiLike = Union[Api, type[Api], str]


class ServiceBuilder:
    """Fluent builder for OAuth services."""

    def __init__(self) -> None:
        self._api: Optional[Api] = None
        self._api_key: Optional[str] = None
        self._api_secret: Optional[str] = None
        self._callback: str = settings.DEFAULT_CALLBACK
        self._scope: Optional[str] = None
        self._signature_type: Optional[SignatureType] = None
        self._transport: Optional[HttpTransport] = None

    def provider(self, api: ApiLike) -> "ServiceBuilder":
        """Set the provider strategy: an instance, an Api class, or a registered short name.

        Raises:
            InvalidConfigurationError: If the value is none of those
        """
        if isinstance(api, str):
            try:
                self._api = get_api(api)
            except KeyError as e:
                raise InvalidConfigurationError(f"No Api registered as '{api}'") from e
        elif isinstance(api, type) and issubclass(api, Api):
            self._api = api()
        elif isinstance(api, Api):
            self._api = api
        else:
            raise InvalidConfigurationError(f"Not an Api strategy: {api!r}")
        return self

    def api_key(self, api_key: str) -> "ServiceBuilder":
        self._api_key = api_key
        return self

    def api_secret(self, api_secret: str) -> "ServiceBuilder":
        self._api_secret = api_secret
        return self

    def callback(self, callback: str) -> "ServiceBuilder":
        self._callback = callback
        return self

    def scope(self, scope: Optional[str]) -> "ServiceBuilder":
        self._scope = scope
        return self

    def signature_type(self, signature_type: SignatureType) -> "ServiceBuilder":
        """Override the provider's default signature placement."""
        self._signature_type = signature_type
        return self

    def transport(self, transport: HttpTransport) -> "ServiceBuilder":
        """Use ``transport`` instead of a builder-owned httpx transport."""
        self._transport = transport
        return self

    def build(self) -> OAuthServiceProtocol:
        """Validate the collected settings and create the service.

        Raises:
            InvalidConfigurationError: If the provider is unset or a credential is blank
        """
        if self._api is None:
            raise InvalidConfigurationError("You must specify a valid api through the provider()")
        for name, value in (
            ("api_key", self._api_key),
            ("api_secret", self._api_secret),
            ("callback", self._callback),
        ):
            if value is None or not value.strip():
                raise InvalidConfigurationError(f"You must provide a valid {name}")

        try:
            config = OAuthConfig(
                api_key=self._api_key,
                api_secret=self._api_secret,
                callback=self._callback,
                signature_type=self._signature_type,
                scope=self._scope,
            )
        except ValidationError as e:
            raise InvalidConfigurationError(f"Invalid OAuth configuration: {e}") from e

        owns_transport = self._transport is None
        transport = self._transport if self._transport is not None else HttpxTransport()

        version = getattr(self._api, "oauth_version", None)
        prefix = f"OAuth{version.value}: " if version is not None else "OAuth: "
        service_logger = logger.with_prefix(prefix).with_context(
            provider=self._api.short_name or type(self._api).__name__
        )
        service_logger.debug(f"Building service for {self._api!r}")

        return self._api.create_service(config, transport, service_logger, owns_transport)


def build_service(
    api: ApiLike,
    api_key: str,
    api_secret: str,
    callback: Optional[str] = None,
    scope: Optional[str] = None,
    *,
    signature_type: Optional[SignatureType] = None,
    transport: Optional[HttpTransport] = None,
) -> OAuthServiceProtocol:
    """Build a service in one call. See :class:`ServiceBuilder`."""
    builder = ServiceBuilder().provider(api).api_key(api_key).api_secret(api_secret)
    if callback is not None:
        builder.callback(callback)
    if scope is not None:
        builder.scope(scope)
    if signature_type is not None:
        builder.signature_type(signature_type)
    if transport is not None:
        builder.transport(transport)
    return builder.build()
