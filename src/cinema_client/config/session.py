"""Session persistence and lifetime settings."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from cinema_client.clients import SESSION, TOAST


class SessionSettings(BaseSettings):
    """Where the session is stored and how long a login stays valid."""

    model_config = SettingsConfigDict(
        env_prefix="",
        extra="ignore",
        case_sensitive=False,
        frozen=True,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    storage_path: Path | None = Field(default=None, alias="CINEMA_STORAGE_PATH")
    ttl_seconds: int = Field(default=SESSION.ttl_seconds, alias="CINEMA_SESSION_TTL_SECONDS", ge=1)
    toast_duration_ms: int = Field(default=TOAST.duration_ms, alias="CINEMA_TOAST_DURATION_MS", ge=0)


__all__ = ["SessionSettings"]
