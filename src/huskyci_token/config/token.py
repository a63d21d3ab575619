"""Access token issuance configuration."""

from __future__ import annotations

from datetime import timedelta

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class TokenSettings(BaseSettings):
    """Token size, expiry and the repositories registered at startup."""

    model_config = SettingsConfigDict(
        env_prefix="",
        extra="ignore",
        case_sensitive=False,
        frozen=True,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    token_bytes: int = Field(
        default=32,
        ge=16,
        le=256,
        alias="HUSKYCI_TOKEN_BYTES",
        description="Random bytes drawn per access token before encoding.",
    )
    token_max_age_seconds: int | None = Field(
        default=None,
        gt=0,
        alias="HUSKYCI_TOKEN_MAX_AGE_SECONDS",
        description="Age after which stored tokens read back as invalid; unset disables expiry.",
    )
    registered_repositories: tuple[str, ...] = Field(
        default=(),
        alias="HUSKYCI_REGISTERED_REPOSITORIES",
    )

    @property
    def token_max_age(self) -> timedelta | None:
        if self.token_max_age_seconds is None:
            return None
        return timedelta(seconds=self.token_max_age_seconds)


__all__ = ["TokenSettings"]
