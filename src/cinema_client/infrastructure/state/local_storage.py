"""Durable key/value storage backends for the client."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from cinema_client.application.ports.local_storage import LocalStoragePort
from cinema_client.errors import StorageCorruptedError

logger = logging.getLogger("cinema_client.storage")


class InMemoryLocalStorage(LocalStoragePort):
    """Keeps values for the lifetime of the process."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._items: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def keys(self) -> list[str]:
        return sorted(self._items)


class FileLocalStorage(LocalStoragePort):
    """Persist values as a single JSON object on disk.

    Reads of an unparseable file raise ``StorageCorruptedError``. Writes replace such
    a file instead of failing, so clearing the session always succeeds.
    """

    def __init__(self, path: Path) -> None:
        self._path = path

    # ------------------------------------------------------------------
    # public API

    def get_item(self, key: str) -> str | None:
        return self._read().get(key)

    def set_item(self, key: str, value: str) -> None:
        items = self._read_for_write()
        items[key] = value
        self._write(items)

    def remove_item(self, key: str) -> None:
        items = self._read_for_write()
        if key not in items:
            return
        del items[key]
        self._write(items)

    def keys(self) -> list[str]:
        return sorted(self._read())

    # ------------------------------------------------------------------
    # helpers

    def _read(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        text = self._path.read_text(encoding="utf-8").strip()
        if not text:
            return {}
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as exc:
            raise StorageCorruptedError(f"storage file {self._path} is not valid JSON") from exc
        if not isinstance(payload, dict):
            raise StorageCorruptedError(f"storage file {self._path} must contain a JSON object")
        return {str(key): str(value) for key, value in payload.items()}

    def _read_for_write(self) -> dict[str, str]:
        try:
            return self._read()
        except StorageCorruptedError:
            self._reset()
            return {}

    def _reset(self) -> None:
        logger.warning("replacing unreadable storage file", extra={"data": {"path": str(self._path)}})
        self._write({})

    def _write(self, items: dict[str, str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = Path(f"{self._path}.tmp")
        tmp_path.write_text(json.dumps(items, sort_keys=True), encoding="utf-8")
        os.replace(tmp_path, self._path)


__all__ = ["FileLocalStorage", "InMemoryLocalStorage"]
