"""Shared wiring of the OAuth 1.0a and 2.0 services."""

from types import TracebackType
from typing import Any, Optional, Type

from scribe.core.logging import ContextualLogger, mask
from scribe.core.protocols.http import HttpTransport
from scribe.model.config import OAuthConfig


class BaseOAuthService:
    """Holds the strategy, config, transport, and logger of one service.

    A service closes its transport only if it owns it, i.e. the builder
    created the transport on the caller's behalf.
    """

    def __init__(
        self,
        api: Any,
        config: OAuthConfig,
        transport: HttpTransport,
        logger: ContextualLogger,
        owns_transport: bool = False,
    ):
        """Initialize with the provider strategy, credentials, and injected transport."""
        self.api = api
        self.config = config
        self.transport = transport
        self.logger = logger
        self._owns_transport = owns_transport

    def close(self) -> None:
        if self._owns_transport:
            self.transport.close()

    def __enter__(self) -> "BaseOAuthService":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} api={self.api!r} api_key={mask(self.config.api_key)}>"
