"""Tests for FakeHttpTransport seeding and call recording."""

import pytest

from scribe.adapters.http.fake import FakeHttpTransport
from scribe.core.exceptions import OAuthConnectionError
from scribe.core.protocols.http import HttpTransport


def test_fake_satisfies_protocol():
    assert isinstance(FakeHttpTransport(), HttpTransport)


def test_seeded_results_are_returned_in_order_then_default():
    fake = FakeHttpTransport()
    fake.seed(201, "first")
    fake.seed(500, "second")
    fake.seed_default(204)

    bodies = [fake.execute("GET", "http://x", {}, None) for _ in range(3)]

    assert [(r.status_code, r.body) for r in bodies] == [(201, "first"), (500, "second"), (204, "")]


def test_calls_are_recorded():
    fake = FakeHttpTransport()
    fake.execute("POST", "http://x", {"A": "1"}, b"k=v", connect_timeout=1, read_timeout=2)

    call = fake.last_call
    assert (call.verb, call.url, call.text) == ("POST", "http://x", "k=v")
    assert (call.connect_timeout, call.read_timeout) == (1, 2)


def test_set_error_raises_until_cleared():
    fake = FakeHttpTransport()
    fake.set_error(OAuthConnectionError())

    with pytest.raises(OAuthConnectionError):
        fake.execute("GET", "http://x", {}, None)

    fake.clear_error()
    assert fake.execute("GET", "http://x", {}, None).status_code == 200
