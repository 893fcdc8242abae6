"""Signature and timestamp protocols for OAuth 1.0a signing."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class SignatureService(Protocol):
    """Compute an OAuth 1.0a signature over a signature base string."""

    def get_signature(self, base_string: str, api_secret: str, token_secret: str) -> str:
        """Return the signature for ``base_string``."""
        ...

    def get_signature_method(self) -> str:
        """Return the ``oauth_signature_method`` value (e.g. ``HMAC-SHA1``)."""
        ...


@runtime_checkable
class TimestampService(Protocol):
    """Source of the per-request ``oauth_timestamp`` and ``oauth_nonce``."""

    def get_timestamp_in_seconds(self) -> str:
        """Seconds since the epoch, as a string."""
        ...

    def get_nonce(self) -> str:
        """A random value unique to one signed request."""
        ...
