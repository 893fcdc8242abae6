"""Value types for tokens and verifiers.

Tokens are created by a token extractor from a provider response and are
owned by the caller afterwards; the engine never stores them.
"""

from dataclasses import dataclass, field
from typing import Mapping, Optional


@dataclass(frozen=True)
class Token:
    """An OAuth credential.

    ``secret`` is only present for OAuth 1.0a tokens. ``parameters`` holds any
    extra fields of the provider response (``expires_in``, ``openid``, ...).
    """

    token: str
    secret: Optional[str] = None
    raw_response: Optional[str] = field(default=None, repr=False)
    parameters: Mapping[str, str] = field(default_factory=dict, repr=False)

    @classmethod
    def empty(cls) -> "Token":
        """A blank token, used for two-legged OAuth 1.0a signing."""
        return cls(token="", secret="")

    @property
    def is_empty(self) -> bool:
        return not self.token and not self.secret

    @property
    def refresh_token(self) -> Optional[str]:
        return self.parameters.get("refresh_token")

    @property
    def expires_in(self) -> Optional[int]:
        value = self.parameters.get("expires_in")
        if value is None:
            return None
        try:
            return int(value)
        except (TypeError, ValueError):
            return None

    def __repr__(self) -> str:
        secret = None if self.secret is None else "***"
        return f"Token(token={self.token!r}, secret={secret!r})"


@dataclass(frozen=True)
class Verifier:
    """The OAuth 1.0a ``oauth_verifier`` or the OAuth 2.0 authorization ``code``."""

    value: str

    def __post_init__(self) -> None:
        if self.value is None:
            raise ValueError("Must provide a valid string for verifier")
