"""Session persistence on top of client-local key/value storage."""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict, ValidationError

from cinema_client.application.ports.local_storage import LocalStoragePort
from cinema_client.application.ports.session_repository import SessionRepositoryPort
from cinema_client.domain.session import Session, UserIdentity
from cinema_client.errors import StoredSessionError

USER_KEY = "user"
TOKEN_KEY = "token"  # noqa: S105
EXPIRY_KEY = "auth_expiry"

logger = logging.getLogger("cinema_client.session")


class StoredIdentity(BaseModel):
    """Wire shape of the ``user`` storage entry."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str
    name: str = ""
    email: str = ""
    role: str = "USER"
    picture_url: str = ""

    @classmethod
    def from_identity(cls, identity: UserIdentity) -> StoredIdentity:
        return cls(
            id=identity.id,
            name=identity.name,
            email=identity.email,
            role=identity.role,
            picture_url=identity.picture_url,
        )

    def to_identity(self) -> UserIdentity:
        return UserIdentity(
            id=self.id,
            name=self.name,
            email=self.email,
            role=self.role,
            picture_url=self.picture_url,
        )


class LocalStorageSessionRepository(SessionRepositoryPort):
    """Stores the session under the ``user``/``token``/``auth_expiry`` keys."""

    def __init__(self, storage: LocalStoragePort) -> None:
        self._storage = storage

    def load(self) -> Session | None:
        raw_user = self._storage.get_item(USER_KEY)
        token = self._storage.get_item(TOKEN_KEY)
        if not raw_user or not token:
            return None
        raw_expiry = self._storage.get_item(EXPIRY_KEY)
        if raw_expiry is None:
            logger.debug("stored session has no expiry")
            return None
        try:
            identity = StoredIdentity.model_validate_json(raw_user).to_identity()
        except (ValidationError, ValueError) as exc:
            raise StoredSessionError("stored user entry is not a valid identity") from exc
        try:
            expires_at_ms = int(raw_expiry, 10)
        except ValueError as exc:
            raise StoredSessionError(f"stored expiry is not an integer: {raw_expiry!r}") from exc
        return Session(identity=identity, token=token, expires_at_ms=expires_at_ms)

    def save(self, session: Session) -> None:
        stored = StoredIdentity.from_identity(session.identity)
        self._storage.set_item(USER_KEY, stored.model_dump_json())
        self._storage.set_item(TOKEN_KEY, session.token)
        self._storage.set_item(EXPIRY_KEY, str(session.expires_at_ms))

    def clear(self) -> None:
        for key in (USER_KEY, TOKEN_KEY, EXPIRY_KEY):
            self._storage.remove_item(key)


__all__ = [
    "EXPIRY_KEY",
    "TOKEN_KEY",
    "USER_KEY",
    "LocalStorageSessionRepository",
    "StoredIdentity",
]
