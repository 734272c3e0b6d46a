"""Configuration for client runtime wiring."""

from __future__ import annotations

import logging

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from cinema_client.config.booking_api import BookingApiSettings
from cinema_client.config.observability import ObservabilitySettings
from cinema_client.config.session import SessionSettings


class Settings(BaseSettings):
    """Client configuration resolved from the environment."""

    model_config = SettingsConfigDict(
        env_prefix="",
        extra="ignore",
        case_sensitive=False,
        frozen=True,
    )

    api: BookingApiSettings = Field(default_factory=BookingApiSettings)
    session: SessionSettings = Field(default_factory=SessionSettings)
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)

    # --- Loader ---
    @classmethod
    def load(cls) -> Settings:
        instance = cls()
        logger = logging.getLogger("cinema_client.settings")
        logger.info("client settings loaded: %r", instance)
        return instance


__all__ = ["Settings"]
