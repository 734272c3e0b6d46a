"""Middlewares plugged into the request pipeline."""

from __future__ import annotations

import logging
import time
import weakref

import httpx

from cinema_client.application.session_store import SessionStore
from cinema_client.application.toast import ToastNotifier
from cinema_client.domain.toast import ToastSeverity
from cinema_client.errors import AuthorizationError, RequestFailedError
from cinema_client.infrastructure.http.pipeline import Exchange, MiddlewareDecision

SESSION_EXPIRED_MESSAGE = "Session expired, please log in again"

logger = logging.getLogger("cinema_client.http")


class BearerTokenMiddleware:
    """Attaches the current credential as a bearer authorization header."""

    def __init__(self, sessions: SessionStore) -> None:
        self._sessions = sessions

    def before_request(self, request: httpx.Request) -> MiddlewareDecision:
        token = self._sessions.token
        if token:
            request.headers["Authorization"] = f"Bearer {token}"
        return MiddlewareDecision.CONTINUE

    def after_response(self, exchange: Exchange) -> MiddlewareDecision:
        return MiddlewareDecision.CONTINUE


class SessionRecoveryMiddleware:
    """Logs the user out and prompts for a new login when the credential is rejected.

    Recovery only runs while a credential is still recorded. The first 401 clears
    it, so later 401s from requests that were already in flight leave the
    session and the toast channel alone.
    """

    def __init__(self, sessions: SessionStore, notifier: ToastNotifier) -> None:
        self._sessions = sessions
        self._notifier = notifier

    def before_request(self, request: httpx.Request) -> MiddlewareDecision:
        return MiddlewareDecision.CONTINUE

    def after_response(self, exchange: Exchange) -> MiddlewareDecision:
        if not isinstance(exchange.error, AuthorizationError):
            return MiddlewareDecision.CONTINUE
        if self._sessions.token is None:
            return MiddlewareDecision.CONTINUE
        identity = self._sessions.identity
        logger.warning(
            "credential rejected; ending session",
            extra={
                "data": {
                    "method": exchange.request.method,
                    "path": exchange.request.url.path,
                    "user_id": identity.id if identity else None,
                }
            },
        )
        self._sessions.logout()
        self._notifier.show(SESSION_EXPIRED_MESSAGE, ToastSeverity.ERROR)
        self._sessions.open_login_modal()
        return MiddlewareDecision.CONTINUE


class RequestLoggingMiddleware:
    """Emits request_sent / request_completed / request_failed records."""

    def __init__(self, logger_name: str = "cinema_client.http") -> None:
        self._logger = logging.getLogger(logger_name)
        # Entries vanish with their request even when the after hook never runs.
        self._started: weakref.WeakKeyDictionary[httpx.Request, float] = weakref.WeakKeyDictionary()

    def before_request(self, request: httpx.Request) -> MiddlewareDecision:
        self._started[request] = time.perf_counter()
        self._logger.info("request_sent", extra={"data": _describe(request)})
        return MiddlewareDecision.CONTINUE

    def after_response(self, exchange: Exchange) -> MiddlewareDecision:
        started = self._started.pop(exchange.request, None)
        data = _describe(exchange.request)
        if started is not None:
            data["duration_ms"] = round((time.perf_counter() - started) * 1000, 2)
        if exchange.response is not None:
            data["status_code"] = exchange.response.status_code
        if exchange.error is None:
            self._logger.info("request_completed", extra={"data": data})
            return MiddlewareDecision.CONTINUE
        data["error_type"] = type(exchange.error).__name__
        if isinstance(exchange.error, RequestFailedError):
            data["detail"] = exchange.error.detail
        self._logger.warning("request_failed", extra={"data": data})
        return MiddlewareDecision.CONTINUE


def _describe(request: httpx.Request) -> dict[str, object]:
    query = request.url.query.decode("ascii", errors="replace")
    path = request.url.path
    return {
        "method": request.method,
        "path": path,
        "request_line": f"{request.method} {path}?{query}" if query else f"{request.method} {path}",
    }


__all__ = [
    "SESSION_EXPIRED_MESSAGE",
    "BearerTokenMiddleware",
    "RequestLoggingMiddleware",
    "SessionRecoveryMiddleware",
]
