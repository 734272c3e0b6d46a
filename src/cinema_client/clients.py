"""Client defaults (base URL, timeouts) for the booking service."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class BookingApiDefaults:
    base_url: str = "http://localhost:8080/api"
    timeout_seconds: float = 10.0


@dataclass(frozen=True, slots=True)
class SessionDefaults:
    ttl_seconds: int = 60 * 60


@dataclass(frozen=True, slots=True)
class ToastDefaults:
    duration_ms: int = 4000


# Instances
BOOKING_API = BookingApiDefaults()
SESSION = SessionDefaults()
TOAST = ToastDefaults()

__all__ = [
    "BOOKING_API",
    "SESSION",
    "TOAST",
    "BookingApiDefaults",
    "SessionDefaults",
    "ToastDefaults",
]
