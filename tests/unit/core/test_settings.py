"""Tests for engine settings loaded from SCRIBE_* environment variables."""

import pytest
from pydantic import ValidationError

from scribe.core.config.enums import LogLevel
from scribe.core.config.settings import Settings

ENV_VARS = [
    "SCRIBE_LOG_LEVEL",
    "SCRIBE_CONNECT_TIMEOUT",
    "SCRIBE_READ_TIMEOUT",
    "SCRIBE_FOLLOW_REDIRECTS",
    "SCRIBE_USER_AGENT",
    "SCRIBE_DEFAULT_CALLBACK",
]


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    settings = Settings()

    assert settings.LOG_LEVEL == LogLevel.INFO
    assert settings.CONNECT_TIMEOUT == 10.0
    assert settings.READ_TIMEOUT == 30.0
    assert settings.FOLLOW_REDIRECTS is False
    assert settings.DEFAULT_CALLBACK == "oob"


def test_env_overrides(clean_env):
    clean_env.setenv("SCRIBE_LOG_LEVEL", "DEBUG")
    clean_env.setenv("SCRIBE_CONNECT_TIMEOUT", "2.5")
    clean_env.setenv("SCRIBE_FOLLOW_REDIRECTS", "true")
    clean_env.setenv("SCRIBE_USER_AGENT", "my-app/2.0")

    settings = Settings()

    assert settings.LOG_LEVEL == LogLevel.DEBUG
    assert settings.CONNECT_TIMEOUT == 2.5
    assert settings.FOLLOW_REDIRECTS is True
    assert settings.USER_AGENT == "my-app/2.0"


def test_negative_timeout_is_rejected(clean_env):
    clean_env.setenv("SCRIBE_READ_TIMEOUT", "-1")
    with pytest.raises(ValidationError):
        Settings()
