"""Completes the OAuth redirect handed back by the booking service."""

from __future__ import annotations

import logging
from urllib.parse import parse_qs, urlsplit

from cinema_client.application.session_store import SessionStore
from cinema_client.domain.session import Role, Session, UserIdentity
from cinema_client.errors import LoginCallbackError

logger = logging.getLogger("cinema_client.session")

LOGIN_PATH = "/auth/google/login"
SUCCESS_FLAG = "success"


def parse_login_callback(url: str) -> tuple[UserIdentity, str]:
    """Extract the identity and credential from a login redirect URL.

    The service redirects to ``/?google_auth=success&token=...&user_id=...&role=...
    &name=...&picture=...&email=...``.
    """
    query = {key: values[0] for key, values in parse_qs(urlsplit(url).query).items()}
    if query.get("google_auth") != SUCCESS_FLAG:
        raise LoginCallbackError("login redirect does not report success")
    token = query.get("token")
    user_id = query.get("user_id")
    if not token or not user_id:
        raise LoginCallbackError("login redirect is missing token or user_id")
    identity = UserIdentity(
        id=user_id,
        name=query.get("name", ""),
        email=query.get("email", ""),
        role=query.get("role") or Role.USER.value,
        picture_url=query.get("picture", ""),
    )
    return identity, token


class AuthFlow:
    """Entry and exit points of the browser login round trip."""

    def __init__(self, sessions: SessionStore, *, base_url: str) -> None:
        if not base_url:
            raise ValueError("base_url must be provided")
        self._sessions = sessions
        self._base_url = base_url.rstrip("/")

    @property
    def login_url(self) -> str:
        return f"{self._base_url}{LOGIN_PATH}"

    def complete(self, callback_url: str) -> Session:
        identity, token = parse_login_callback(callback_url)
        logger.debug("login callback accepted", extra={"data": {"user_id": identity.id}})
        return self._sessions.login(identity, token)


__all__ = ["AuthFlow", "LOGIN_PATH", "parse_login_callback"]
