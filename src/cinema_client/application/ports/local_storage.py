"""Port describing durable client-local key/value storage."""

from __future__ import annotations

from typing import Protocol


class LocalStoragePort(Protocol):
    """String key/value storage that survives client restarts."""

    def get_item(self, key: str) -> str | None:
        """Return the stored value for ``key`` or ``None`` when absent."""

    def set_item(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""

    def remove_item(self, key: str) -> None:
        """Remove ``key`` if present."""


__all__ = ["LocalStoragePort"]
