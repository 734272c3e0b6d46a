"""Port describing persistence of the authenticated session."""

from __future__ import annotations

from typing import Protocol

from cinema_client.domain.session import Session


class SessionRepositoryPort(Protocol):
    """Stores the single session of this client."""

    def load(self) -> Session | None:
        """Return the persisted session, or ``None`` when no complete session is stored."""

    def save(self, session: Session) -> None:
        """Persist ``session``, overwriting any previous one."""

    def clear(self) -> None:
        """Remove every persisted session field."""


__all__ = ["SessionRepositoryPort"]
