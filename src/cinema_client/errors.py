"""Exceptions raised by the cinema booking client."""

from __future__ import annotations

import httpx


class CinemaClientError(Exception):
    """Base class for client-side failures."""


class RequestFailedError(CinemaClientError):
    """Raised when the booking service answers with a non-success status."""

    def __init__(self, status_code: int, detail: str, response: httpx.Response) -> None:
        super().__init__(f"request failed with {status_code}: {detail}")
        self.status_code = status_code
        self.detail = detail
        self.response = response


class AuthorizationError(RequestFailedError):
    """Raised when the booking service rejects the presented credential (HTTP 401)."""


class RequestTimeoutError(CinemaClientError):
    """Raised when a request exceeds the configured timeout."""


class TransportError(CinemaClientError):
    """Raised when the request never produced a response (DNS, refused connection, ...)."""


class RequestCancelledError(CinemaClientError):
    """Recorded on an exchange whose caller was cancelled; never raised to callers."""


class StoredSessionError(CinemaClientError):
    """Raised when the persisted session payload cannot be decoded."""


class StorageCorruptedError(StoredSessionError, ValueError):
    """Raised when the durable storage file itself cannot be parsed."""


class LoginCallbackError(CinemaClientError):
    """Raised when a login redirect does not carry a usable session."""


__all__ = [
    "AuthorizationError",
    "CinemaClientError",
    "LoginCallbackError",
    "RequestCancelledError",
    "RequestFailedError",
    "RequestTimeoutError",
    "StorageCorruptedError",
    "StoredSessionError",
    "TransportError",
]
