"""Unit tests for ApiRegistry and the @api decorator.

Table-driven tests with patched ALL_APIS and stub strategies.
"""

from dataclasses import dataclass
from unittest.mock import patch

import pytest

from scribe.core.shared_models import OAuthVersion
from scribe.platform.apis import ALL_APIS, DefaultApi10a, DefaultApi20
from scribe.platform.decorators import api
from scribe.platform.registry import ApiRegistry, api_registry, get_api

_PATCH_ALL_APIS = "scribe.platform.registry.ALL_APIS"


# ---------------------------------------------------------------------------
# Stub helpers
# ---------------------------------------------------------------------------


def _make_api_cls(short_name: str, base: type = DefaultApi20, decorate: bool = True) -> type:
    """Build a minimal Api strategy class, optionally @api-decorated."""

    class Stub(base):
        AUTHORIZE_URL = "https://stub.example/authorize?client_id=%s&redirect_uri=%s"
        ACCESS_TOKEN_ENDPOINT = "https://stub.example/token"

    Stub.__name__ = f"{short_name.title()}Api"
    if decorate:
        return api(name=short_name.title(), short_name=short_name)(Stub)
    return Stub


# ===========================================================================
# @api decorator
# ===========================================================================


@dataclass
class DecoratorCase:
    desc: str
    base: type
    expected_version: OAuthVersion


DECORATOR_CASES = [
    DecoratorCase("oauth 2.0 strategy", DefaultApi20, OAuthVersion.V2_0),
    DecoratorCase("oauth 1.0a strategy", DefaultApi10a, OAuthVersion.V1_0A),
]


@pytest.mark.parametrize("case", DECORATOR_CASES, ids=lambda c: c.desc)
def test_decorator_sets_metadata(case: DecoratorCase):
    cls = _make_api_cls("stub", base=case.base)

    assert cls.is_api is True
    assert cls.api_name == "Stub"
    assert cls.short_name == "stub"
    assert cls.labels == []
    assert cls.oauth_version == case.expected_version


def test_decorator_rejects_non_strategy_class():
    with pytest.raises(TypeError):

        @api(name="Bad", short_name="bad")
        class Bad:
            pass


# ===========================================================================
# ApiRegistry.build
# ===========================================================================


def test_build_registers_decorated_classes():
    registry = ApiRegistry()
    registry.build([_make_api_cls("alpha"), _make_api_cls("beta", base=DefaultApi10a)])

    assert "alpha" in registry
    assert "beta" in registry
    assert isinstance(registry.get("beta"), DefaultApi10a)
    assert len(registry.list_all()) == 2


def test_build_skips_undecorated_classes():
    registry = ApiRegistry()
    registry.build([_make_api_cls("plain", decorate=False), _make_api_cls("alpha")])

    assert [a.short_name for a in registry.list_all()] == ["alpha"]


def test_build_rejects_duplicate_short_names():
    registry = ApiRegistry()
    with pytest.raises(ValueError, match="dup"):
        registry.build([_make_api_cls("dup"), _make_api_cls("dup")])


def test_build_defaults_to_all_apis():
    stub = _make_api_cls("only")
    with patch(_PATCH_ALL_APIS, [stub]):
        registry = ApiRegistry()
        registry.build()

    assert [a.short_name for a in registry.list_all()] == ["only"]


def test_get_unknown_raises_key_error():
    with pytest.raises(KeyError):
        ApiRegistry().get("missing")


# ===========================================================================
# Module registry
# ===========================================================================


def test_module_registry_holds_every_shipped_api():
    assert {a.short_name for a in api_registry.list_all()} == {c.short_name for c in ALL_APIS}


@pytest.mark.parametrize(
    "short_name", ["baidu", "github", "qq", "twitter", "twitter_authenticate", "weibo"]
)
def test_get_api_returns_shared_instance(short_name: str):
    assert get_api(short_name) is get_api(short_name)
    assert get_api(short_name).short_name == short_name
