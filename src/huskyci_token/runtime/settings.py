"""Configuration helpers for runtime wiring."""

from __future__ import annotations

import logging

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from huskyci_token.config.token import TokenSettings


class Settings(BaseSettings):
    """Runtime configuration resolved from the environment."""

    model_config = SettingsConfigDict(
        env_prefix="",
        extra="ignore",
        case_sensitive=False,
        frozen=True,
    )

    token: TokenSettings = Field(default_factory=TokenSettings)

    @classmethod
    def load(cls) -> Settings:
        instance = cls()
        logger = logging.getLogger("huskyci_token.settings")
        logger.info("token settings loaded: %r", instance)
        return instance


__all__ = ["Settings", "TokenSettings"]
