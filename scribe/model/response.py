"""Buffered result of sending a Request."""

from dataclasses import dataclass, field
from typing import Mapping, Optional

from scribe.core.protocols.http import HttpResult


@dataclass(frozen=True)
class Response:
    """Status, headers, and body of an executed request. Read-only."""

    code: int
    message: Optional[str] = None
    headers: Mapping[str, str] = field(default_factory=dict)
    body: str = ""

    @classmethod
    def from_result(cls, result: HttpResult) -> "Response":
        return cls(
            code=result.status_code,
            message=result.reason or None,
            headers=dict(result.headers),
            body=result.body,
        )

    @property
    def is_successful(self) -> bool:
        """True for any 2xx or 3xx status."""
        return 200 <= self.code < 400

    def get_header(self, name: str) -> Optional[str]:
        """Single header value (case-insensitive lookup), or None if undefined."""
        if name in self.headers:
            return self.headers[name]
        lowered = name.lower()
        for key, value in self.headers.items():
            if key.lower() == lowered:
                return value
        return None
