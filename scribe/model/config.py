"""Caller-supplied credentials and options for one OAuth service."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator

from scribe.core.shared_models import SignatureType


class OAuthConfig(BaseModel):
    """Api key/secret, callback, and options of a service.

    The secret is held as a ``SecretStr`` so it never shows up in reprs or logs.
    """

    model_config = ConfigDict(frozen=True)

    api_key: str = Field(..., description="Consumer key / client id")
    api_secret: SecretStr = Field(..., description="Consumer secret / client secret")
    callback: str = Field("oob", description="Callback URL, or 'oob' for out-of-band")
    signature_type: Optional[SignatureType] = Field(
        None, description="Overrides the Api strategy's signature placement"
    )
    scope: Optional[str] = Field(None, description="Requested scope, passed through verbatim")

    @field_validator("api_key", "callback")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        if v is None or not str(v).strip():
            raise ValueError("must not be blank")
        return v

    @field_validator("api_secret")
    @classmethod
    def validate_secret_not_blank(cls, v: SecretStr) -> SecretStr:
        if not v.get_secret_value().strip():
            raise ValueError("must not be blank")
        return v

    @field_validator("scope")
    @classmethod
    def normalize_scope(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            return None
        return v

    @property
    def has_scope(self) -> bool:
        return self.scope is not None

    @property
    def is_out_of_band(self) -> bool:
        return self.callback == "oob"

    def get_api_secret(self) -> str:
        return self.api_secret.get_secret_value()
