"""Unit tests for token extractors.

Covers:
- OAuth1TokenExtractor (token + secret, extra fields, missing fields)
- FormTokenExtractor (access_token + extras)
- JsonTokenExtractor (extras stringified, nested authed_user, error objects)
- extractor_for (dispatch by TokenFormat)
"""

from dataclasses import dataclass

import pytest

from scribe.core.exceptions import TokenExchangeError
from scribe.core.shared_models import TokenFormat
from scribe.domains.oauth.extractors import (
    FormTokenExtractor,
    JsonTokenExtractor,
    OAuth1TokenExtractor,
    extractor_for,
)


# ===========================================================================
# OAuth1TokenExtractor
# ===========================================================================


def test_oauth1_extracts_token_secret_and_extras():
    token = OAuth1TokenExtractor().extract(
        "oauth_token=abc%20def&oauth_token_secret=s&oauth_callback_confirmed=true\n"
    )

    assert token.token == "abc def"
    assert token.secret == "s"
    assert token.parameters == {"oauth_callback_confirmed": "true"}


def test_oauth1_accepts_empty_secret():
    token = OAuth1TokenExtractor().extract("oauth_token=t&oauth_token_secret=")
    assert token.secret == ""


# ===========================================================================
# Failures (table-driven)
# ===========================================================================


@dataclass
class FailureCase:
    desc: str
    extractor: object
    body: str


FAILURE_CASES = [
    FailureCase("oauth1 empty body", OAuth1TokenExtractor(), ""),
    FailureCase("oauth1 whitespace body", OAuth1TokenExtractor(), "   "),
    FailureCase("oauth1 missing secret", OAuth1TokenExtractor(), "oauth_token=t"),
    FailureCase("oauth1 empty token", OAuth1TokenExtractor(), "oauth_token=&oauth_token_secret=s"),
    FailureCase("form missing token", FormTokenExtractor(), "expires_in=10"),
    FailureCase("form error body", FormTokenExtractor(), "error=invalid_grant"),
    FailureCase("json invalid", JsonTokenExtractor(), "{not json"),
    FailureCase("json array", JsonTokenExtractor(), '["access_token"]'),
    FailureCase("json missing token", JsonTokenExtractor(), '{"token_type": "bearer"}'),
    FailureCase("json non-string token", JsonTokenExtractor(), '{"access_token": 123}'),
]


@pytest.mark.parametrize("case", FAILURE_CASES, ids=lambda c: c.desc)
def test_extract_failures(case: FailureCase):
    with pytest.raises(TokenExchangeError) as exc_info:
        case.extractor.extract(case.body)
    assert exc_info.value.body == case.body


def test_json_error_message_includes_provider_detail():
    body = '{"error": "invalid_grant", "error_description": "Code expired"}'
    with pytest.raises(TokenExchangeError, match="Code expired"):
        JsonTokenExtractor().extract(body)


# ===========================================================================
# OAuth 2.0 extractors
# ===========================================================================


def test_form_extracts_access_token_and_extras():
    token = FormTokenExtractor().extract("access_token=at&expires_in=3600&refresh_token=rt")

    assert token.token == "at"
    assert token.secret is None
    assert token.expires_in == 3600
    assert token.refresh_token == "rt"


def test_json_stringifies_extra_values():
    body = (
        '{"access_token": "at", "expires_in": 3600, "scope": ["a", "b"],'
        ' "admin": true, "id_token": null}'
    )
    token = JsonTokenExtractor().extract(body)

    assert token.token == "at"
    assert token.raw_response == body
    assert dict(token.parameters) == {
        "expires_in": "3600",
        "scope": '["a", "b"]',
        "admin": "true",
    }


def test_json_lifts_nested_authed_user_token():
    body = '{"ok": true, "authed_user": {"id": "U1", "access_token": "xoxp"}}'
    token = JsonTokenExtractor().extract(body)

    assert token.token == "xoxp"
    assert token.parameters["id"] == "U1"
    assert token.parameters["ok"] == "true"


@pytest.mark.parametrize(
    "token_format,expected",
    [(TokenFormat.FORM, FormTokenExtractor), (TokenFormat.JSON, JsonTokenExtractor)],
    ids=["form", "json"],
)
def test_extractor_for(token_format: TokenFormat, expected: type):
    assert isinstance(extractor_for(token_format), expected)
