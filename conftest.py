"""Root conftest for pytest configuration and shared fixtures.

This conftest is loaded before both testpaths (tests/ and scribe/), making
its fixtures available to centralized tests AND colocated domain tests.
"""

import os

import pytest

# ---------------------------------------------------------------------------
# Environment variables: must be set before any scribe module import.
# Uses setdefault so real env vars (CI) are never overridden.
# ---------------------------------------------------------------------------
os.environ.setdefault("SCRIBE_LOG_LEVEL", "DEBUG")
os.environ.setdefault("SCRIBE_CONNECT_TIMEOUT", "10")
os.environ.setdefault("SCRIBE_READ_TIMEOUT", "30")


# ---------------------------------------------------------------------------
# Shared fake fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def fake_transport():
    """Fake HttpTransport that returns seeded results and records calls."""
    from scribe.adapters.http.fake import FakeHttpTransport

    return FakeHttpTransport()


@pytest.fixture
def fixed_timestamps():
    """TimestampService returning a fixed timestamp and nonce."""
    from scribe.domains.oauth.fakes import FixedTimestampService

    return FixedTimestampService(timestamp="1300000000", nonce="abc123")


@pytest.fixture
def test_logger():
    """Scoped ContextualLogger for services built directly in tests."""
    from scribe.core.logging import logger

    return logger.with_prefix("test: ").with_context(request_id="test")


@pytest.fixture
def oauth_config():
    """Consumer credentials shared by the OAuth 1.0a tests."""
    from scribe.model.config import OAuthConfig

    return OAuthConfig(api_key="CK", api_secret="CS", callback="http://example.com/callback")
