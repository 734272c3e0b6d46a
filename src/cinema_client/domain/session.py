"""Authenticated session primitives held by the client."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Role(str, Enum):
    """Roles assigned by the booking service."""

    USER = "USER"
    ADMIN = "ADMIN"


@dataclass(frozen=True, slots=True)
class UserIdentity:
    """Profile of the signed-in user as reported by the booking service."""

    id: str
    name: str
    email: str
    role: str = Role.USER.value
    picture_url: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("identity id must not be empty")

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN.value


@dataclass(frozen=True, slots=True)
class Session:
    """Identity, bearer credential and absolute expiry (epoch milliseconds).

    Identity and token always travel together; an anonymous client holds no
    ``Session`` at all.
    """

    identity: UserIdentity
    token: str
    expires_at_ms: int

    def __post_init__(self) -> None:
        if not self.token:
            raise ValueError("token must not be empty")

    def is_expired(self, now_ms: int) -> bool:
        """Return ``True`` once ``now_ms`` has reached the expiry."""
        return now_ms >= self.expires_at_ms


__all__ = [
    "Role",
    "Session",
    "UserIdentity",
]
