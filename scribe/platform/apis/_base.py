"""Base classes for provider Api strategies.

An Api is a stateless policy object: endpoint URLs, token-exchange verb,
token response format, and signature placement. The engine's services run
the same algorithm for every provider; a provider only supplies data::

    @api(name="Example", short_name="example")
    class ExampleApi(DefaultApi20):
        AUTHORIZE_URL = "https://example.com/authorize?client_id=%s&redirect_uri=%s"
        ACCESS_TOKEN_ENDPOINT = "https://example.com/token"
        token_format = TokenFormat.JSON

Override the getters instead of the class attributes when a value must be
computed.
"""

from abc import ABC, abstractmethod
from typing import ClassVar, Optional

from scribe.core.exceptions import InvalidConfigurationError, TokenExchangeError
from scribe.core.logging import ContextualLogger
from scribe.core.protocols.http import HttpTransport
from scribe.core.protocols.signature import SignatureService, TimestampService
from scribe.core.shared_models import SignatureType, TokenFormat, Verb
from scribe.domains.oauth.extractors import OAuth1TokenExtractor, TokenExtractor, extractor_for
from scribe.domains.oauth.oauth10a_service import OAuth10aService
from scribe.domains.oauth.oauth20_service import OAuth20Service
from scribe.domains.oauth.protocols import OAuthServiceProtocol
from scribe.domains.oauth.signature import HMACSha1SignatureService
from scribe.domains.oauth.timestamp import TimestampServiceImpl
from scribe.model.config import OAuthConfig
from scribe.model.encoding import percent_encode
from scribe.model.token import Token


class Api(ABC):
    """Provider + protocol-version strategy."""

    # Set by the @api decorator
    api_name: ClassVar[str] = ""
    short_name: ClassVar[str] = ""

    ACCESS_TOKEN_ENDPOINT: ClassVar[Optional[str]] = None
    AUTHORIZE_URL: ClassVar[Optional[str]] = None

    access_token_verb: ClassVar[Verb] = Verb.GET
    signature_type: ClassVar[SignatureType] = SignatureType.HEADER

    def get_access_token_endpoint(self) -> str:
        if not self.ACCESS_TOKEN_ENDPOINT:
            raise InvalidConfigurationError(
                f"{type(self).__name__} defines no access token endpoint"
            )
        return self.ACCESS_TOKEN_ENDPOINT

    def get_access_token_verb(self) -> Verb:
        return self.access_token_verb

    def get_signature_type(self) -> SignatureType:
        return self.signature_type

    def _authorize_template(self) -> str:
        if not self.AUTHORIZE_URL:
            raise InvalidConfigurationError(f"{type(self).__name__} defines no authorization URL")
        return self.AUTHORIZE_URL

    @abstractmethod
    def get_access_token_extractor(self) -> TokenExtractor:
        """Extractor for the access token endpoint response."""

    @abstractmethod
    def get_authorization_url(
        self, config: OAuthConfig, request_token: Optional[Token] = None
    ) -> str:
        """URL the end user is sent to for authorization."""

    @abstractmethod
    def create_service(
        self,
        config: OAuthConfig,
        transport: HttpTransport,
        logger: ContextualLogger,
        owns_transport: bool = False,
    ) -> OAuthServiceProtocol:
        """Build the service that runs this strategy's flow."""

    def __repr__(self) -> str:
        return f"<{type(self).__name__} short_name={self.short_name!r}>"


class DefaultApi10a(Api):
    """OAuth 1.0a strategy.

    Defaults: POST for both token steps, HMAC-SHA1, form-encoded token
    responses, ``Authorization: OAuth ...`` header placement.
    ``AUTHORIZE_URL`` takes the percent-encoded request token.
    """

    REQUEST_TOKEN_ENDPOINT: ClassVar[Optional[str]] = None

    access_token_verb: ClassVar[Verb] = Verb.POST
    request_token_verb: ClassVar[Verb] = Verb.POST

    def __init__(
        self,
        signature_service: Optional[SignatureService] = None,
        timestamp_service: Optional[TimestampService] = None,
    ) -> None:
        self._signature_service = signature_service or HMACSha1SignatureService()
        self._timestamp_service = timestamp_service or TimestampServiceImpl()
        self._token_extractor = OAuth1TokenExtractor()

    def get_request_token_endpoint(self) -> str:
        if not self.REQUEST_TOKEN_ENDPOINT:
            raise InvalidConfigurationError(
                f"{type(self).__name__} defines no request token endpoint"
            )
        return self.REQUEST_TOKEN_ENDPOINT

    def get_request_token_verb(self) -> Verb:
        return self.request_token_verb

    def get_request_token_extractor(self) -> TokenExtractor:
        return self._token_extractor

    def get_access_token_extractor(self) -> TokenExtractor:
        return self._token_extractor

    def get_signature_service(self) -> SignatureService:
        return self._signature_service

    def get_timestamp_service(self) -> TimestampService:
        return self._timestamp_service

    def get_authorization_url(
        self, config: OAuthConfig, request_token: Optional[Token] = None
    ) -> str:
        if request_token is None or not request_token.token:
            raise TokenExchangeError("An OAuth 1.0a authorization URL needs a request token")
        return self._authorize_template() % percent_encode(request_token.token)

    def create_service(
        self,
        config: OAuthConfig,
        transport: HttpTransport,
        logger: ContextualLogger,
        owns_transport: bool = False,
    ) -> OAuth10aService:
        return OAuth10aService(self, config, transport, logger, owns_transport)


class DefaultApi20(Api):
    """OAuth 2.0 strategy.

    ``AUTHORIZE_URL`` takes the api key and the percent-encoded callback, in
    that order; ``SCOPE_SUFFIX`` is appended with the percent-encoded scope
    when one is configured. ``token_format`` selects the access token
    extractor.
    """

    SCOPE_SUFFIX: ClassVar[str] = "&scope=%s"

    token_format: ClassVar[TokenFormat] = TokenFormat.FORM
    grant_type: ClassVar[Optional[str]] = "authorization_code"
    access_token_parameter_name: ClassVar[str] = "access_token"

    def get_access_token_extractor(self) -> TokenExtractor:
        return extractor_for(self.token_format)

    def get_grant_type(self) -> Optional[str]:
        return self.grant_type

    def get_access_token_parameter_name(self) -> str:
        return self.access_token_parameter_name

    def get_authorization_url(
        self, config: OAuthConfig, request_token: Optional[Token] = None
    ) -> str:
        url = self._authorize_template() % (config.api_key, percent_encode(config.callback))
        if config.has_scope:
            url += self.SCOPE_SUFFIX % percent_encode(config.scope)
        return url

    def create_service(
        self,
        config: OAuthConfig,
        transport: HttpTransport,
        logger: ContextualLogger,
        owns_transport: bool = False,
    ) -> OAuth20Service:
        return OAuth20Service(self, config, transport, logger, owns_transport)
