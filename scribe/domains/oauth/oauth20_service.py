"""OAuth 2.0 service for authorization-code exchange and bearer-token signing."""

from typing import Optional

from scribe.core.exceptions import (
    RequestAlreadySentError,
    SigningError,
    TokenExchangeError,
    UnsupportedOperationError,
)
from scribe.core.logging import ContextualLogger, mask
from scribe.core.protocols.http import HttpTransport
from scribe.core.shared_models import OAuthVersion, SignatureType, TokenFormat
from scribe.domains.oauth._base import BaseOAuthService
from scribe.domains.oauth.protocols import OAuth20ApiProtocol, OAuthServiceProtocol
from scribe.model.config import OAuthConfig
from scribe.model.request import Request, RequestTuner
from scribe.model.token import Token, Verifier

CLIENT_ID = "client_id"
CLIENT_SECRET = "client_secret"
CODE = "code"
GRANT_TYPE = "grant_type"
REDIRECT_URI = "redirect_uri"
SCOPE = "scope"


class OAuth20Service(BaseOAuthService, OAuthServiceProtocol):
    """Service for handling OAuth2 authorization and token exchange."""

    api: OAuth20ApiProtocol

    def __init__(
        self,
        api: OAuth20ApiProtocol,
        config: OAuthConfig,
        transport: HttpTransport,
        logger: ContextualLogger,
        owns_transport: bool = False,
    ):
        """Initialize with the provider strategy, credentials, and injected transport."""
        super().__init__(api, config, transport, logger, owns_transport)

    def get_version(self) -> str:
        return OAuthVersion.V2_0.value

    def get_request_token(self, tuner: Optional[RequestTuner] = None) -> Token:
        raise UnsupportedOperationError(
            "Unsupported operation, please use 'get_authorization_url' "
            "and redirect your users there"
        )

    def get_authorization_url(self, request_token: Optional[Token] = None) -> str:
        """Generate the OAuth2 authorization URL. ``request_token`` is ignored."""
        return self.api.get_authorization_url(self.config)

    def get_access_token(
        self,
        request_token: Optional[Token],
        verifier: Verifier,
        tuner: Optional[RequestTuner] = None,
    ) -> Token:
        """Exchange an authorization code for an OAuth2 access token.

        Parameters go in the query string for GET exchanges and in a
        form-encoded body for POST/PUT/PATCH.

        Args:
            request_token: Ignored; OAuth2 has no request token step
            verifier: The authorization code returned to the callback
            tuner: Optional callback applied to the outbound request before it is sent

        Returns:
            Token with the access token and any extra response fields

        Raises:
            TokenExchangeError: If the code is missing or the exchange fails
            OAuthConnectionError: If the transport fails
        """
        if verifier is None or not verifier.value:
            raise TokenExchangeError("An authorization code is required to obtain an access token")

        verb = self.api.get_access_token_verb()
        endpoint = self.api.get_access_token_endpoint()
        request = Request(verb, endpoint, self.transport)
        add = request.add_body_parameter if verb.carries_body else request.add_querystring_parameter

        grant_type = self.api.get_grant_type()
        if grant_type:
            add(GRANT_TYPE, grant_type)
        add(CLIENT_ID, self.config.api_key)
        add(CLIENT_SECRET, self.config.get_api_secret())
        add(CODE, verifier.value)
        add(REDIRECT_URI, self.config.callback)
        if self.config.has_scope:
            add(SCOPE, self.config.scope)
        if self.api.token_format == TokenFormat.JSON:
            request.add_header("Accept", "application/json")

        self.logger.info(
            f"OAuth2 code exchange request - "
            f"URL: {endpoint}, "
            f"Verb: {verb.value}, "
            f"Redirect URI: {self.config.callback}, "
            f"Client ID: {mask(self.config.api_key)}, "
            f"Code length: {len(verifier.value)}, "
            f"Grant type: {grant_type}"
        )

        response = request.send(tuner)

        if not response.is_successful:
            self.logger.error(
                f"OAuth2 token exchange failed - Status: {response.code}, "
                f"Response text: {response.body}"
            )
            raise TokenExchangeError(
                f"Failed to exchange authorization code: HTTP {response.code}",
                status_code=response.code,
                body=response.body,
            )

        try:
            token = self.api.get_access_token_extractor().extract(response.body)
        except TokenExchangeError as e:
            self.logger.error(f"Invalid OAuth2 token response: {response.body}")
            raise TokenExchangeError(
                e.message, status_code=response.code, body=response.body
            ) from e

        self.logger.info("Successfully obtained OAuth2 access token")
        return token

    def sign_request(self, access_token: Token, request: Request) -> None:
        """Attach the access token to ``request`` in place.

        HEADER placement sets ``Authorization: Bearer <token>``; QUERY_STRING
        placement sets the strategy's token parameter, replacing an earlier one.

        Raises:
            SigningError: If the access token is missing
            RequestAlreadySentError: If the request was already sent
        """
        if access_token is None or not access_token.token:
            raise SigningError("An access token is required to sign an OAuth 2.0 request")
        if request.is_sent:
            raise RequestAlreadySentError("Cannot sign a request that was already sent")

        signature_type = self.config.signature_type or self.api.get_signature_type()
        if signature_type == SignatureType.HEADER:
            request.add_header("Authorization", f"Bearer {access_token.token}")
        else:
            name = self.api.get_access_token_parameter_name()
            request.querystring_params.remove(name)
            request.add_querystring_parameter(name, access_token.token)
