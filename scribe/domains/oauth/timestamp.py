"""Timestamp and nonce source for OAuth 1.0a requests."""

import secrets
import time


class TimestampServiceImpl:
    """Wall-clock timestamps and cryptographically random nonces."""

    def get_timestamp_in_seconds(self) -> str:
        """Get current Unix timestamp as string."""
        return str(int(time.time()))

    def get_nonce(self) -> str:
        """Generate a cryptographically secure random nonce."""
        return secrets.token_urlsafe(32)
