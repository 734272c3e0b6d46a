from __future__ import annotations

from collections.abc import Callable, Generator

import pytest

from cinema_client.application.session_store import SessionStore
from cinema_client.application.toast import ToastNotifier
from cinema_client.domain.session import UserIdentity
from cinema_client.infrastructure.state.local_storage import InMemoryLocalStorage
from cinema_client.infrastructure.state.session_repository import LocalStorageSessionRepository

NOW_MS = 1_760_000_000_000


class FakeClock:
    def __init__(self, now_ms: int = NOW_MS) -> None:
        self.now_ms = now_ms

    def __call__(self) -> int:
        return self.now_ms

    def advance(self, ms: int) -> None:
        self.now_ms += ms


@pytest.fixture
def anyio_backend() -> str:
    # The toast timer uses asyncio's call_later, so only the asyncio backend applies.
    return "asyncio"


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def storage() -> InMemoryLocalStorage:
    return InMemoryLocalStorage()


@pytest.fixture
def make_store(storage: InMemoryLocalStorage, clock: FakeClock) -> Callable[[], SessionStore]:
    def factory() -> SessionStore:
        return SessionStore(LocalStorageSessionRepository(storage), clock=clock)

    return factory


@pytest.fixture
def session_store(make_store: Callable[[], SessionStore]) -> SessionStore:
    return make_store()


@pytest.fixture
def notifier() -> Generator[ToastNotifier, None, None]:
    toast = ToastNotifier()
    yield toast
    toast.dispose()


@pytest.fixture
def user_identity() -> UserIdentity:
    return UserIdentity(
        id="65a1f0c2e4b0a1b2c3d4e5f6",
        name="Ada Lovelace",
        email="ada@example.com",
        role="USER",
        picture_url="https://example.com/ada.png",
    )


@pytest.fixture
def admin_identity() -> UserIdentity:
    return UserIdentity(id="admin-1", name="Root", email="root@example.com", role="ADMIN")
