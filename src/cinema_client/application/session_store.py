"""Authoritative owner of the client's authenticated session."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from cinema_client.application.ports.session_repository import SessionRepositoryPort
from cinema_client.clients import SESSION
from cinema_client.domain.session import Session, UserIdentity
from cinema_client.errors import StoredSessionError

logger = logging.getLogger("cinema_client.session")

Clock = Callable[[], int]


def epoch_ms() -> int:
    """Return the current wall-clock time in epoch milliseconds."""
    return time.time_ns() // 1_000_000


class SessionStore:
    """Holds identity, credential and expiry, and mirrors them to durable storage.

    This is the only component that reads or writes the persisted session. Every
    mutation goes through ``login``, ``logout`` or the logout performed by
    ``check_session`` when the expiry has passed.
    """

    def __init__(
        self,
        repository: SessionRepositoryPort,
        *,
        ttl_seconds: int = SESSION.ttl_seconds,
        clock: Clock = epoch_ms,
    ) -> None:
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        self._repository = repository
        self._ttl_ms = ttl_seconds * 1000
        self._clock = clock
        self._session: Session | None = None
        self._modal_open = False

    # ------------------------------------------------------------------
    # state

    @property
    def session(self) -> Session | None:
        return self._session

    @property
    def identity(self) -> UserIdentity | None:
        return self._session.identity if self._session else None

    @property
    def token(self) -> str | None:
        return self._session.token if self._session else None

    @property
    def expires_at_ms(self) -> int | None:
        return self._session.expires_at_ms if self._session else None

    @property
    def is_authenticated(self) -> bool:
        return self._session is not None

    @property
    def modal_open(self) -> bool:
        return self._modal_open

    # ------------------------------------------------------------------
    # lifecycle

    def init(self) -> bool:
        """Restore a persisted session; returns whether one was accepted."""
        try:
            stored = self._repository.load()
        except StoredSessionError:
            logger.warning("discarding unreadable stored session", exc_info=True)
            stored = None
        if stored is None:
            self._repository.clear()
            return False
        self._session = stored
        if not self.check_session():
            logger.info("stored session already expired; purged")
            return False
        logger.info(
            "session restored",
            extra={"data": {"user_id": stored.identity.id, "expires_at_ms": stored.expires_at_ms}},
        )
        return True

    def dispose(self) -> None:
        """Drop in-memory state; the persisted session is left for the next start."""
        self._session = None
        self._modal_open = False

    # ------------------------------------------------------------------
    # operations

    def check_session(self) -> bool:
        """Return ``False`` (and log out) when no unexpired session is held."""
        session = self._session
        if session is not None and not session.is_expired(self._clock()):
            return True
        if session is not None:
            logger.info(
                "session expired",
                extra={"data": {"user_id": session.identity.id, "expires_at_ms": session.expires_at_ms}},
            )
        self.logout()
        return False

    def login(self, identity: UserIdentity, token: str) -> Session:
        """Start a new session, replacing any previous one."""
        session = Session(
            identity=identity,
            token=token,
            expires_at_ms=self._clock() + self._ttl_ms,
        )
        self._session = session
        self._repository.save(session)
        self._modal_open = False
        logger.info(
            "logged in",
            extra={
                "data": {
                    "user_id": identity.id,
                    "role": identity.role,
                    "expires_at_ms": session.expires_at_ms,
                }
            },
        )
        return session

    def logout(self) -> None:
        previous = self._session
        self._session = None
        self._repository.clear()
        if previous is not None:
            logger.info("logged out", extra={"data": {"user_id": previous.identity.id}})

    def open_login_modal(self) -> None:
        self._modal_open = True

    def close_login_modal(self) -> None:
        self._modal_open = False


__all__ = ["Clock", "SessionStore", "epoch_ms"]
