"""OAuth 1.0a signature engine.

Builds the signature base string and the ``Authorization`` header of a
request, and computes signatures over the base string.

Reference: RFC 5849 - The OAuth 1.0 Protocol, section 3.4
"""

import base64
import hashlib
import hmac
from typing import Mapping

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey

from scribe.core.exceptions import SigningError
from scribe.model.encoding import percent_encode
from scribe.model.parameters import ParameterList
from scribe.model.request import OAuthRequest

SIGNATURE = "oauth_signature"


def build_signature_base_string(request: OAuthRequest) -> str:
    """Build the signature base string per RFC 5849.

    Format: HTTP_METHOD&URL&NORMALIZED_PARAMS, where the parameters are the
    URL query, the added querystring parameters, the form body parameters,
    and the OAuth protocol parameters (``oauth_signature`` excluded).

    Raises:
        SigningError: If the request carries no OAuth parameters.
    """
    oauth_params = request.get_oauth_parameters()
    oauth_params.pop(SIGNATURE, None)
    if not oauth_params:
        raise SigningError("Could not find any OAuth parameters in the request")

    params = request.get_query_string_params()
    if not request.has_payload:
        params.add_all(request.get_body_params())
    params.add_all(ParameterList(oauth_params.items()))

    parts = [
        request.verb.value,
        percent_encode(request.get_sanitized_url()),
        percent_encode(params.as_oauth_base_string()),
    ]
    return "&".join(parts)


def build_authorization_header(params: Mapping[str, str]) -> str:
    """Build OAuth1 Authorization header.

    Format: OAuth oauth_consumer_key="...", oauth_nonce="...", ...
    """
    if not params:
        raise SigningError("Could not find any OAuth parameters for the Authorization header")
    param_strings = [
        f'{percent_encode(k)}="{percent_encode(v)}"' for k, v in sorted(params.items())
    ]
    return "OAuth " + ", ".join(param_strings)


def _signing_key(api_secret: str, token_secret: str) -> str:
    """Signing key: percent_encode(consumer_secret)&percent_encode(token_secret)."""
    return f"{percent_encode(api_secret)}&{percent_encode(token_secret or '')}"


class HMACSha1SignatureService:
    """HMAC-SHA1 over the base string, Base64-encoded."""

    METHOD = "HMAC-SHA1"

    def get_signature(self, base_string: str, api_secret: str, token_secret: str) -> str:
        if not base_string:
            raise SigningError("Base string cannot be empty")
        if not api_secret:
            raise SigningError("Api secret cannot be empty")
        key_bytes = _signing_key(api_secret, token_secret).encode("utf-8")
        signature_bytes = hmac.new(key_bytes, base_string.encode("utf-8"), hashlib.sha1).digest()
        return base64.b64encode(signature_bytes).decode("utf-8")

    def get_signature_method(self) -> str:
        return self.METHOD


class PlaintextSignatureService:
    """PLAINTEXT: the signature is the signing key itself. Only safe over TLS."""

    METHOD = "PLAINTEXT"

    def get_signature(self, base_string: str, api_secret: str, token_secret: str) -> str:
        if not api_secret:
            raise SigningError("Api secret cannot be empty")
        return _signing_key(api_secret, token_secret)

    def get_signature_method(self) -> str:
        return self.METHOD


class RSASha1SignatureService:
    """RSA-SHA1 (PKCS#1 v1.5) over the base string with the consumer's private key.

    The api and token secrets are not part of an RSA signature.
    """

    METHOD = "RSA-SHA1"

    def __init__(self, private_key: RSAPrivateKey) -> None:
        self._private_key = private_key

    def get_signature(self, base_string: str, api_secret: str, token_secret: str) -> str:
        if not base_string:
            raise SigningError("Base string cannot be empty")
        signature_bytes = self._private_key.sign(
            base_string.encode("utf-8"), padding.PKCS1v15(), hashes.SHA1()
        )
        return base64.b64encode(signature_bytes).decode("utf-8")

    def get_signature_method(self) -> str:
        return self.METHOD
