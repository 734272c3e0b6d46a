"""Booking service connectivity settings."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from cinema_client.clients import BOOKING_API


class BookingApiSettings(BaseSettings):
    """Base address and per-request timeout for the booking service."""

    model_config = SettingsConfigDict(
        env_prefix="",
        extra="ignore",
        case_sensitive=False,
        frozen=True,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    base_url: str = Field(default=BOOKING_API.base_url, alias="CINEMA_API_BASE_URL", min_length=1)
    timeout_seconds: float = Field(
        default=BOOKING_API.timeout_seconds,
        alias="CINEMA_API_TIMEOUT_SECONDS",
        gt=0.0,
    )


__all__ = ["BookingApiSettings"]
