"""Protocols for the OAuth domain.

The services depend on these structural contracts rather than on the
concrete Api base classes in ``scribe.platform.apis``, which in turn
construct the services.
"""

from typing import Optional, Protocol

from scribe.core.protocols.signature import SignatureService, TimestampService
from scribe.core.shared_models import SignatureType, TokenFormat, Verb
from scribe.domains.oauth.extractors import TokenExtractor
from scribe.model.config import OAuthConfig
from scribe.model.request import Request
from scribe.model.token import Token, Verifier


class OAuthApiProtocol(Protocol):
    """Capability set shared by every provider strategy."""

    def get_access_token_endpoint(self) -> str:
        """URL of the access token endpoint."""
        ...

    def get_access_token_verb(self) -> Verb:
        """Verb used for the access token exchange."""
        ...

    def get_access_token_extractor(self) -> TokenExtractor:
        """Extractor for the access token response."""
        ...

    def get_authorization_url(
        self, config: OAuthConfig, request_token: Optional[Token] = None
    ) -> str:
        """URL the end user is redirected to for authorization."""
        ...

    def get_signature_type(self) -> SignatureType:
        """Default placement of signature material."""
        ...


class OAuth10aApiProtocol(OAuthApiProtocol, Protocol):
    """OAuth 1.0a strategy: adds the request-token step and the signing policy."""

    def get_request_token_endpoint(self) -> str:
        """URL of the request token (temporary credentials) endpoint."""
        ...

    def get_request_token_verb(self) -> Verb:
        """Verb used to obtain the request token."""
        ...

    def get_request_token_extractor(self) -> TokenExtractor:
        """Extractor for the request token response."""
        ...

    def get_signature_service(self) -> SignatureService:
        """Signature method used for every signed request."""
        ...

    def get_timestamp_service(self) -> TimestampService:
        """Source of nonces and timestamps."""
        ...


class OAuth20ApiProtocol(OAuthApiProtocol, Protocol):
    """OAuth 2.0 strategy: adds grant type, token format, and query parameter name."""

    token_format: TokenFormat

    def get_grant_type(self) -> Optional[str]:
        """``grant_type`` sent with the code exchange, or None to omit it."""
        ...

    def get_access_token_parameter_name(self) -> str:
        """Query parameter name used when signing with QUERY_STRING placement."""
        ...


class OAuthServiceProtocol(Protocol):
    """Public operations of an OAuth service, for either protocol version."""

    def get_request_token(self) -> Token:
        """Obtain temporary credentials (OAuth 1.0a only)."""
        ...

    def get_authorization_url(self, request_token: Optional[Token] = None) -> str:
        """Build the URL the end user authorizes the application at."""
        ...

    def get_access_token(self, request_token: Optional[Token], verifier: Verifier) -> Token:
        """Exchange the verifier (and request token) for an access token."""
        ...

    def sign_request(self, access_token: Token, request: Request) -> None:
        """Add signature material to ``request`` in place."""
        ...

    def get_version(self) -> str:
        """Protocol version string, ``1.0`` or ``2.0``."""
        ...
