"""Fake TimestampService for testing."""

from typing import Optional


class FixedTimestampService:
    """In-memory fake for TimestampService.

    Returns the seeded timestamp and nonce until reseeded. With
    ``rotate_nonce=True`` each call appends a counter so nonces stay unique.
    """

    def __init__(
        self,
        timestamp: str = "123456789",
        nonce: str = "fixed-nonce",
        rotate_nonce: bool = False,
    ) -> None:
        self._timestamp = timestamp
        self._nonce = nonce
        self._rotate_nonce = rotate_nonce
        self._nonce_calls = 0
        self.last_nonce: Optional[str] = None

    def seed(self, timestamp: Optional[str] = None, nonce: Optional[str] = None) -> None:
        if timestamp is not None:
            self._timestamp = timestamp
        if nonce is not None:
            self._nonce = nonce

    def get_timestamp_in_seconds(self) -> str:
        return self._timestamp

    def get_nonce(self) -> str:
        self._nonce_calls += 1
        nonce = f"{self._nonce}-{self._nonce_calls}" if self._rotate_nonce else self._nonce
        self.last_nonce = nonce
        return nonce
