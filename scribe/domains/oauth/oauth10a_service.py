"""OAuth 1.0a service.

This service handles the 3-legged OAuth1 flow:
1. Obtain temporary credentials (request token)
2. Redirect user for authorization
3. Exchange for access token

and signs requests to protected resources with the resulting token.

Reference: RFC 5849 - The OAuth 1.0 Protocol
"""

from typing import Optional

from scribe.core.exceptions import RequestAlreadySentError, SigningError, TokenExchangeError
from scribe.core.logging import ContextualLogger, mask
from scribe.core.protocols.http import HttpTransport
from scribe.core.shared_models import OAuthVersion, SignatureType
from scribe.domains.oauth._base import BaseOAuthService
from scribe.domains.oauth.extractors import TokenExtractor
from scribe.domains.oauth.protocols import OAuth10aApiProtocol, OAuthServiceProtocol
from scribe.domains.oauth.signature import (
    SIGNATURE,
    build_authorization_header,
    build_signature_base_string,
)
from scribe.model.config import OAuthConfig
from scribe.model.request import OAuthRequest, Request, RequestTuner
from scribe.model.response import Response
from scribe.model.token import Token, Verifier

CALLBACK = "oauth_callback"
CONSUMER_KEY = "oauth_consumer_key"
NONCE = "oauth_nonce"
SCOPE = "scope"
SIGN_METHOD = "oauth_signature_method"
TIMESTAMP = "oauth_timestamp"
TOKEN = "oauth_token"
VERIFIER = "oauth_verifier"
VERSION = "oauth_version"


class OAuth10aService(BaseOAuthService, OAuthServiceProtocol):
    """Service for handling OAuth1 authentication flows."""

    api: OAuth10aApiProtocol

    def __init__(
        self,
        api: OAuth10aApiProtocol,
        config: OAuthConfig,
        transport: HttpTransport,
        logger: ContextualLogger,
        owns_transport: bool = False,
    ):
        """Initialize with the provider strategy, credentials, and injected transport."""
        super().__init__(api, config, transport, logger, owns_transport)

    def get_version(self) -> str:
        return OAuthVersion.V1_0A.value

    def get_request_token(self, tuner: Optional[RequestTuner] = None) -> Token:
        """Obtain temporary credentials (request token) from the provider.

        Args:
            tuner: Optional callback applied to the outbound request before it is sent

        Returns:
            Token with the temporary oauth_token and oauth_token_secret

        Raises:
            TokenExchangeError: If the provider rejects the request or answers unparseably
            OAuthConnectionError: If the transport fails
        """
        endpoint = self.api.get_request_token_endpoint()
        request = OAuthRequest(self.api.get_request_token_verb(), endpoint, self.transport)
        request.add_oauth_parameter(CALLBACK, self.config.callback)
        if self.config.has_scope:
            request.add_oauth_parameter(SCOPE, self.config.scope)
        self._sign(request, Token.empty())

        self.logger.info(
            f"Requesting OAuth1 temporary credentials from {endpoint} "
            f"(consumer key {mask(self.config.api_key)})"
        )
        response = request.send(tuner)
        return self._extract(response, self.api.get_request_token_extractor(), "request token")

    def get_authorization_url(self, request_token: Optional[Token] = None) -> str:
        """Build the authorization URL for user consent (step 2 of OAuth1 flow).

        Raises:
            TokenExchangeError: If no request token is given
        """
        if request_token is None or not request_token.token:
            raise TokenExchangeError(
                "OAuth 1.0a needs a request token; call get_request_token() first"
            )
        return self.api.get_authorization_url(self.config, request_token)

    def get_access_token(
        self,
        request_token: Optional[Token],
        verifier: Verifier,
        tuner: Optional[RequestTuner] = None,
    ) -> Token:
        """Exchange temporary credentials and the verifier for access token credentials.

        Args:
            request_token: Temporary token from step 1
            verifier: Verification code from user authorization
            tuner: Optional callback applied to the outbound request before it is sent

        Returns:
            Token with the access oauth_token and oauth_token_secret

        Raises:
            SigningError: If the request token is missing
            TokenExchangeError: If the exchange fails
            OAuthConnectionError: If the transport fails
        """
        if request_token is None or not request_token.token:
            raise SigningError("A request token is required to obtain an OAuth 1.0a access token")

        endpoint = self.api.get_access_token_endpoint()
        request = OAuthRequest(self.api.get_access_token_verb(), endpoint, self.transport)
        request.add_oauth_parameter(TOKEN, request_token.token)
        request.add_oauth_parameter(VERIFIER, verifier.value)
        self._sign(request, request_token)

        self.logger.info(f"Exchanging OAuth1 temporary credentials for access token at {endpoint}")
        response = request.send(tuner)
        return self._extract(response, self.api.get_access_token_extractor(), "access token")

    def sign_request(self, access_token: Token, request: Request) -> None:
        """Sign ``request`` in place with the consumer credentials and ``access_token``.

        Signing again regenerates nonce, timestamp, and signature, replacing the
        previous ones. Pass ``Token.empty()`` for two-legged (consumer-only) signing.

        Raises:
            SigningError: If the request is not an OAuthRequest or no token is given
            RequestAlreadySentError: If the request was already sent
        """
        if not isinstance(request, OAuthRequest):
            raise SigningError("OAuth 1.0a signing requires an OAuthRequest")
        if request.is_sent:
            raise RequestAlreadySentError("Cannot sign a request that was already sent")
        if access_token is None:
            raise SigningError("An access token is required; use Token.empty() for two-legged")

        if access_token.is_empty:
            request.oauth_parameters.pop(TOKEN, None)
        else:
            request.add_oauth_parameter(TOKEN, access_token.token)
        self._sign(request, access_token)
        self.logger.debug(f"Signed {request!r}")

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _sign(self, request: OAuthRequest, token: Token) -> None:
        """Add protocol parameters and the signature, then place them on the request."""
        if not self.config.api_key or not self.config.get_api_secret():
            raise SigningError("Consumer key and secret are required to sign a request")

        signature_service = self.api.get_signature_service()
        timestamp_service = self.api.get_timestamp_service()

        request.clear_signature()
        request.add_oauth_parameter(TIMESTAMP, timestamp_service.get_timestamp_in_seconds())
        request.add_oauth_parameter(NONCE, timestamp_service.get_nonce())
        request.add_oauth_parameter(CONSUMER_KEY, self.config.api_key)
        request.add_oauth_parameter(SIGN_METHOD, signature_service.get_signature_method())
        request.add_oauth_parameter(VERSION, self.get_version())

        base_string = build_signature_base_string(request)
        self.logger.debug(f"Signature base string: {base_string}")
        signature = signature_service.get_signature(
            base_string, self.config.get_api_secret(), token.secret or ""
        )
        request.add_oauth_parameter(SIGNATURE, signature)

        self._append_signature(request)

    def _append_signature(self, request: OAuthRequest) -> None:
        signature_type = self.config.signature_type or self.api.get_signature_type()
        if signature_type == SignatureType.HEADER:
            header = build_authorization_header(request.get_oauth_parameters())
            request.apply_header("Authorization", header)
        else:
            request.apply_querystring(request.get_oauth_parameters())

    def _extract(self, response: Response, extractor: TokenExtractor, what: str) -> Token:
        if not response.is_successful:
            self.logger.error(f"HTTP error obtaining {what}: {response.code} - {response.body}")
            raise TokenExchangeError(
                f"Failed to obtain {what}: HTTP {response.code}",
                status_code=response.code,
                body=response.body,
            )
        try:
            token = extractor.extract(response.body)
        except TokenExchangeError as e:
            self.logger.error(f"Invalid {what} response from OAuth1 provider: {response.body}")
            raise TokenExchangeError(
                e.message, status_code=response.code, body=response.body
            ) from e

        self.logger.info(f"Successfully obtained OAuth1 {what}")
        return token
