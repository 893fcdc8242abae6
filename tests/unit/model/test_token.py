"""Unit tests for Token and Verifier."""

import pytest

from scribe.model.token import Token, Verifier


def test_empty_token():
    token = Token.empty()
    assert token.is_empty
    assert token.token == ""
    assert token.secret == ""


def test_token_with_value_is_not_empty():
    assert not Token("t").is_empty


def test_refresh_token_and_expires_in_come_from_parameters():
    token = Token("t", parameters={"refresh_token": "r", "expires_in": "3600"})

    assert token.refresh_token == "r"
    assert token.expires_in == 3600


@pytest.mark.parametrize("raw", [None, "soon", ""])
def test_expires_in_is_none_when_missing_or_not_numeric(raw):
    parameters = {} if raw is None else {"expires_in": raw}
    assert Token("t", parameters=parameters).expires_in is None


def test_repr_hides_secret():
    text = repr(Token("public-token", secret="very-secret", raw_response="x"))

    assert "very-secret" not in text
    assert "public-token" in text


def test_token_is_immutable():
    token = Token("t")
    with pytest.raises(AttributeError):
        token.token = "other"


def test_verifier_rejects_none():
    with pytest.raises(ValueError):
        Verifier(None)


def test_verifier_holds_value():
    assert Verifier("code-123").value == "code-123"
