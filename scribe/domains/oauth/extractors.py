"""Token extractors: parse a token endpoint response body into a Token.

OAuth 1.0a providers answer form-encoded. OAuth 2.0 providers answer either
form-encoded (``access_token=...&expires_in=...``) or JSON; an Api strategy
declares which through its :class:`~scribe.core.shared_models.TokenFormat`
and :func:`extractor_for` picks the matching extractor.
"""

import json
from typing import Any, Protocol
from urllib.parse import parse_qsl

from scribe.core.exceptions import TokenExchangeError
from scribe.core.shared_models import TokenFormat
from scribe.model.token import Token

OAUTH_TOKEN = "oauth_token"
OAUTH_TOKEN_SECRET = "oauth_token_secret"
ACCESS_TOKEN = "access_token"


class TokenExtractor(Protocol):
    """Parse a raw token endpoint body into a Token."""

    def extract(self, response_body: str) -> Token:
        """Return the Token, or raise TokenExchangeError."""
        ...


def _check_body(response_body: str) -> None:
    if not response_body or not response_body.strip():
        raise TokenExchangeError(
            "Response body is incorrect. Can't extract a token from an empty string",
            body=response_body,
        )


class OAuth1TokenExtractor:
    """Form-encoded ``oauth_token`` / ``oauth_token_secret`` pairs."""

    def extract(self, response_body: str) -> Token:
        _check_body(response_body)
        params = dict(parse_qsl(response_body.strip(), keep_blank_values=True))

        if not params.get(OAUTH_TOKEN) or OAUTH_TOKEN_SECRET not in params:
            raise TokenExchangeError(
                "Response body is incorrect. Can't extract oauth_token and oauth_token_secret",
                body=response_body,
            )

        return Token(
            token=params[OAUTH_TOKEN],
            secret=params[OAUTH_TOKEN_SECRET],
            raw_response=response_body,
            parameters={
                k: v for k, v in params.items() if k not in (OAUTH_TOKEN, OAUTH_TOKEN_SECRET)
            },
        )


class FormTokenExtractor:
    """Form-encoded OAuth 2.0 response: ``access_token=...&expires_in=...``."""

    def extract(self, response_body: str) -> Token:
        _check_body(response_body)
        params = dict(parse_qsl(response_body.strip(), keep_blank_values=True))

        if not params.get(ACCESS_TOKEN):
            raise TokenExchangeError(
                "Response body is incorrect. Can't extract an access_token", body=response_body
            )

        return Token(
            token=params[ACCESS_TOKEN],
            raw_response=response_body,
            parameters={k: v for k, v in params.items() if k != ACCESS_TOKEN},
        )


class JsonTokenExtractor:
    """JSON OAuth 2.0 response: ``{"access_token": "...", ...}``."""

    def extract(self, response_body: str) -> Token:
        _check_body(response_body)
        try:
            data = json.loads(response_body)
        except ValueError as e:
            raise TokenExchangeError(
                "Response body is not valid JSON", body=response_body
            ) from e
        if not isinstance(data, dict):
            raise TokenExchangeError("Response body is not a JSON object", body=response_body)

        data = self._normalize(data)
        access_token = data.get(ACCESS_TOKEN)
        if not access_token or not isinstance(access_token, str):
            detail = data.get("error_description") or data.get("error")
            message = "Response body is incorrect. Can't extract an access_token"
            if detail:
                message = f"{message} ({detail})"
            raise TokenExchangeError(message, body=response_body)

        return Token(
            token=access_token,
            raw_response=response_body,
            parameters={
                k: self._stringify(v)
                for k, v in data.items()
                if k != ACCESS_TOKEN and v is not None
            },
        )

    def _normalize(self, data: dict) -> dict:
        """Lift tokens some providers nest under ``authed_user`` to the top level."""
        authed_user = data.get("authed_user")
        if (
            isinstance(authed_user, dict)
            and ACCESS_TOKEN in authed_user
            and ACCESS_TOKEN not in data
        ):
            return {
                **{k: v for k, v in data.items() if k != "authed_user"},
                **authed_user,
            }
        return data

    def _stringify(self, value: Any) -> str:
        if isinstance(value, str):
            return value
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (int, float)):
            return str(value)
        return json.dumps(value)


ACCESS_TOKEN_EXTRACTORS: dict[TokenFormat, TokenExtractor] = {
    TokenFormat.FORM: FormTokenExtractor(),
    TokenFormat.JSON: JsonTokenExtractor(),
}


def extractor_for(token_format: TokenFormat) -> TokenExtractor:
    """OAuth 2.0 access-token extractor for a declared response format."""
    return ACCESS_TOKEN_EXTRACTORS[token_format]
