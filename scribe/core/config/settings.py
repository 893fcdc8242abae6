"""Engine-wide settings.

All defaults are defined here in the schema. Uses Pydantic Settings for
automatic env var loading:

    SCRIBE_CONNECT_TIMEOUT=5 SCRIBE_LOG_LEVEL=DEBUG
"""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from scribe.core.config.enums import LogLevel


class Settings(BaseSettings):
    """Defaults consumed by the transport adapter, logging, and the builder."""

    model_config = SettingsConfigDict(
        env_prefix="SCRIBE_",
        case_sensitive=False,
        extra="ignore",
    )

    LOG_LEVEL: LogLevel = Field(LogLevel.INFO, description="Level of the 'scribe' logger")
    CONNECT_TIMEOUT: Optional[float] = Field(
        10.0, description="Seconds to wait for a connection when a request sets none"
    )
    READ_TIMEOUT: Optional[float] = Field(
        30.0, description="Seconds to wait for response data when a request sets none"
    )
    FOLLOW_REDIRECTS: bool = Field(False, description="Whether the httpx adapter follows 3xx")
    USER_AGENT: str = Field("scribe-python/1.0", description="User-Agent sent by the adapter")
    DEFAULT_CALLBACK: str = Field("oob", description="Callback used when the caller sets none")

    @field_validator("CONNECT_TIMEOUT", "READ_TIMEOUT")
    @classmethod
    def validate_timeout(cls, v: Optional[float]) -> Optional[float]:
        """Reject negative timeouts; ``None`` means wait forever."""
        if v is not None and v < 0:
            raise ValueError("timeouts must be non-negative")
        return v
