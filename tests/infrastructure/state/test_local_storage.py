from __future__ import annotations

import json
from pathlib import Path

import pytest

from cinema_client.errors import StoredSessionError
from cinema_client.infrastructure.state.local_storage import FileLocalStorage, InMemoryLocalStorage


def test_file_storage_round_trip(tmp_path: Path) -> None:
    path = tmp_path / "state" / "storage.json"
    storage = FileLocalStorage(path)

    assert storage.get_item("token") is None

    storage.set_item("token", "real-jwt-1")
    storage.set_item("auth_expiry", "1760000000000")

    reopened = FileLocalStorage(path)
    assert reopened.get_item("token") == "real-jwt-1"
    assert reopened.keys() == ["auth_expiry", "token"]
    assert json.loads(path.read_text(encoding="utf-8")) == {
        "auth_expiry": "1760000000000",
        "token": "real-jwt-1",
    }
    assert not Path(f"{path}.tmp").exists()


def test_file_storage_remove_item(tmp_path: Path) -> None:
    storage = FileLocalStorage(tmp_path / "storage.json")
    storage.set_item("user", "{}")

    storage.remove_item("user")
    storage.remove_item("user")

    assert storage.get_item("user") is None
    assert storage.keys() == []


def test_file_storage_remove_missing_key_does_not_create_file(tmp_path: Path) -> None:
    path = tmp_path / "storage.json"
    FileLocalStorage(path).remove_item("token")

    assert not path.exists()


def test_file_storage_rejects_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "storage.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ValueError, match="not valid JSON"):
        FileLocalStorage(path).get_item("token")


def test_file_storage_rejects_non_object_payload(tmp_path: Path) -> None:
    path = tmp_path / "storage.json"
    path.write_text("[1, 2]", encoding="utf-8")

    with pytest.raises(ValueError, match="JSON object"):
        FileLocalStorage(path).get_item("token")


def test_in_memory_storage_copies_initial_values() -> None:
    initial = {"token": "t"}
    storage = InMemoryLocalStorage(initial)
    storage.remove_item("token")

    assert initial == {"token": "t"}
    assert storage.get_item("token") is None


def test_file_storage_writes_replace_unparseable_file(tmp_path: Path) -> None:
    path = tmp_path / "storage.json"
    path.write_text("{not json", encoding="utf-8")
    storage = FileLocalStorage(path)

    storage.remove_item("token")
    assert json.loads(path.read_text(encoding="utf-8")) == {}

    path.write_text("[1, 2]", encoding="utf-8")
    storage.set_item("token", "real-jwt-3")
    assert storage.keys() == ["token"]


def test_file_storage_corruption_is_a_stored_session_error(tmp_path: Path) -> None:
    path = tmp_path / "storage.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(StoredSessionError):
        FileLocalStorage(path).keys()
