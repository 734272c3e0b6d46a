"""Logging configuration flags."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ObservabilitySettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="",
        extra="ignore",
        case_sensitive=False,
        frozen=True,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    log_level: str = Field(default="INFO", alias="CINEMA_LOG_LEVEL")
    service_name: str = Field(default="cinema-client", alias="CINEMA_SERVICE_NAME", min_length=1)


__all__ = ["ObservabilitySettings"]
