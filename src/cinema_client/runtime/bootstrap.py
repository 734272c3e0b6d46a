"""Runtime wiring: one instance of each client service per runtime."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx

from cinema_client.application.auth_flow import AuthFlow
from cinema_client.application.navigation_guard import NavigationGuard
from cinema_client.application.ports.local_storage import LocalStoragePort
from cinema_client.application.router import Router
from cinema_client.application.session_store import Clock, SessionStore, epoch_ms
from cinema_client.application.toast import ToastNotifier
from cinema_client.infrastructure.http.middleware import (
    BearerTokenMiddleware,
    RequestLoggingMiddleware,
    SessionRecoveryMiddleware,
)
from cinema_client.infrastructure.http.pipeline import RequestPipeline
from cinema_client.infrastructure.http.reservation_client import ReservationClient
from cinema_client.infrastructure.state.local_storage import FileLocalStorage, InMemoryLocalStorage
from cinema_client.infrastructure.state.session_repository import LocalStorageSessionRepository
from cinema_client.observability.logging import configure_logging
from cinema_client.observability.tracing import configure_tracing
from cinema_client.runtime.settings import Settings

logger = logging.getLogger("cinema_client.runtime")


@dataclass(frozen=True, slots=True)
class ClientRuntime:
    """Aggregated client services sharing one session store and one notifier."""

    settings: Settings
    storage: LocalStoragePort
    session_store: SessionStore
    notifier: ToastNotifier
    pipeline: RequestPipeline
    reservations: ReservationClient
    auth_flow: AuthFlow
    guard: NavigationGuard
    router: Router

    async def aclose(self) -> None:
        """Dispose every service; the persisted session stays on disk."""
        await self.pipeline.aclose()
        self.notifier.dispose()
        self.session_store.dispose()
        logger.info("client runtime closed")

    async def __aenter__(self) -> ClientRuntime:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()


def build_runtime(
    settings: Settings | None = None,
    *,
    storage: LocalStoragePort | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
    clock: Clock = epoch_ms,
) -> ClientRuntime:
    """Construct the services and restore any persisted session."""
    resolved = settings or Settings.load()
    resolved_storage = storage or _build_storage(resolved)

    session_store = SessionStore(
        LocalStorageSessionRepository(resolved_storage),
        ttl_seconds=resolved.session.ttl_seconds,
        clock=clock,
    )
    notifier = ToastNotifier(default_duration_ms=resolved.session.toast_duration_ms)
    pipeline = RequestPipeline(
        resolved.api.base_url,
        timeout_seconds=resolved.api.timeout_seconds,
        middlewares=(
            RequestLoggingMiddleware(),
            BearerTokenMiddleware(session_store),
            SessionRecoveryMiddleware(session_store, notifier),
        ),
        transport=transport,
    )
    guard = NavigationGuard(session_store, notifier)

    restored = session_store.init()
    logger.info(
        "client runtime ready",
        extra={"data": {"base_url": resolved.api.base_url, "session_restored": restored}},
    )
    return ClientRuntime(
        settings=resolved,
        storage=resolved_storage,
        session_store=session_store,
        notifier=notifier,
        pipeline=pipeline,
        reservations=ReservationClient(pipeline),
        auth_flow=AuthFlow(session_store, base_url=resolved.api.base_url),
        guard=guard,
        router=Router(guard),
    )


def configure_observability(settings: Settings) -> None:
    """Apply logging config and opt-in tracing for a host application."""
    configure_logging(root_default=settings.observability.log_level)
    configure_tracing(service_name=settings.observability.service_name)


def _build_storage(settings: Settings) -> LocalStoragePort:
    path = settings.session.storage_path
    if path is None:
        return InMemoryLocalStorage()
    return FileLocalStorage(path)


__all__ = ["ClientRuntime", "build_runtime", "configure_observability"]
