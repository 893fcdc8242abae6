"""scribe: an OAuth 1.0a / 2.0 client engine.

Build a service for a provider, send the user to its authorization URL, then
exchange the verifier for an access token and sign requests with it::

    from scribe import ServiceBuilder, Verifier

    service = ServiceBuilder().provider("qq").api_key(key).api_secret(secret).build()
    url = service.get_authorization_url()
    token = service.get_access_token(None, Verifier(code))
"""

from scribe.core.exceptions import (
    InvalidConfigurationError,
    InvalidUrlError,
    MalformedUrlError,
    OAuthConnectionError,
    RequestAlreadySentError,
    ScribeException,
    SigningError,
    TokenExchangeError,
    UnsupportedOperationError,
)
from scribe.core.shared_models import SignatureType, TokenFormat, Verb
from scribe.domains.oauth.builder import ServiceBuilder, build_service
from scribe.domains.oauth.oauth10a_service import OAuth10aService
from scribe.domains.oauth.oauth20_service import OAuth20Service
from scribe.model.config import OAuthConfig
from scribe.model.request import OAuthRequest, Request
from scribe.model.response import Response
from scribe.model.token import Token, Verifier
from scribe.platform.apis import Api, DefaultApi10a, DefaultApi20
from scribe.platform.decorators import api
from scribe.platform.registry import get_api

__all__ = [
    "Api",
    "DefaultApi10a",
    "DefaultApi20",
    "InvalidConfigurationError",
    "InvalidUrlError",
    "MalformedUrlError",
    "OAuth10aService",
    "OAuth20Service",
    "OAuthConfig",
    "OAuthConnectionError",
    "OAuthRequest",
    "Request",
    "RequestAlreadySentError",
    "Response",
    "ScribeException",
    "ServiceBuilder",
    "SignatureType",
    "SigningError",
    "Token",
    "TokenExchangeError",
    "TokenFormat",
    "UnsupportedOperationError",
    "Verb",
    "Verifier",
    "api",
    "build_service",
    "get_api",
]
