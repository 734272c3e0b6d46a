from __future__ import annotations

import json

import pytest

from cinema_client.domain.session import Session, UserIdentity
from cinema_client.errors import StoredSessionError
from cinema_client.infrastructure.state.local_storage import InMemoryLocalStorage
from cinema_client.infrastructure.state.session_repository import (
    EXPIRY_KEY,
    TOKEN_KEY,
    USER_KEY,
    LocalStorageSessionRepository,
)


def _session() -> Session:
    identity = UserIdentity(
        id="u1",
        name="Ada",
        email="ada@example.com",
        role="ADMIN",
        picture_url="https://example.com/a.png",
    )
    return Session(identity=identity, token="real-jwt-u1", expires_at_ms=1_760_000_000_000)


def test_save_writes_the_three_session_keys() -> None:
    storage = InMemoryLocalStorage()
    LocalStorageSessionRepository(storage).save(_session())

    assert storage.keys() == [EXPIRY_KEY, TOKEN_KEY, USER_KEY]
    assert storage.get_item(TOKEN_KEY) == "real-jwt-u1"
    assert storage.get_item(EXPIRY_KEY) == "1760000000000"
    assert json.loads(storage.get_item(USER_KEY) or "") == {
        "id": "u1",
        "name": "Ada",
        "email": "ada@example.com",
        "role": "ADMIN",
        "picture_url": "https://example.com/a.png",
    }


def test_load_returns_saved_session() -> None:
    storage = InMemoryLocalStorage()
    repository = LocalStorageSessionRepository(storage)
    repository.save(_session())

    assert repository.load() == _session()


def test_load_ignores_unknown_user_fields() -> None:
    storage = InMemoryLocalStorage(
        {
            USER_KEY: json.dumps({"id": "u1", "name": "Ada", "created_at": "2025-01-01"}),
            TOKEN_KEY: "t",
            EXPIRY_KEY: "10",
        }
    )

    loaded = LocalStorageSessionRepository(storage).load()

    assert loaded is not None
    assert loaded.identity.id == "u1"
    assert loaded.identity.role == "USER"


@pytest.mark.parametrize("missing", [USER_KEY, TOKEN_KEY, EXPIRY_KEY])
def test_load_treats_partial_session_as_absent(missing: str) -> None:
    storage = InMemoryLocalStorage()
    repository = LocalStorageSessionRepository(storage)
    repository.save(_session())
    storage.remove_item(missing)

    assert repository.load() is None


def test_load_raises_on_corrupt_user_entry() -> None:
    storage = InMemoryLocalStorage({USER_KEY: "{broken", TOKEN_KEY: "t", EXPIRY_KEY: "10"})

    with pytest.raises(StoredSessionError):
        LocalStorageSessionRepository(storage).load()


def test_load_raises_on_non_numeric_expiry() -> None:
    storage = InMemoryLocalStorage({USER_KEY: '{"id": "u1"}', TOKEN_KEY: "t", EXPIRY_KEY: "soon"})

    with pytest.raises(StoredSessionError):
        LocalStorageSessionRepository(storage).load()


def test_clear_removes_every_key() -> None:
    storage = InMemoryLocalStorage({"theme": "dark"})
    repository = LocalStorageSessionRepository(storage)
    repository.save(_session())

    repository.clear()

    assert storage.keys() == ["theme"]
