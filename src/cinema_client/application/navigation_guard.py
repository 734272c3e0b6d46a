"""Per-navigation session sweep and admin-route gate."""

from __future__ import annotations

import logging

from cinema_client.application.session_store import SessionStore
from cinema_client.application.toast import ToastNotifier
from cinema_client.domain.navigation import (
    HOME_ROUTE,
    NavigationDecision,
    NavigationOutcome,
    Route,
)
from cinema_client.domain.toast import ToastSeverity

logger = logging.getLogger("cinema_client.navigation")

ACCESS_DENIED_MESSAGE = "Access denied: admins only"


class NavigationGuard:
    """Decides whether a view transition may proceed.

    Runs synchronously and never touches the network: the only session work is the
    local expiry sweep done by ``SessionStore.check_session``.
    """

    def __init__(
        self,
        sessions: SessionStore,
        notifier: ToastNotifier,
        *,
        home: Route = HOME_ROUTE,
    ) -> None:
        self._sessions = sessions
        self._notifier = notifier
        self._home = home

    def before_each(self, target: Route) -> NavigationDecision:
        self._sessions.check_session()
        if not target.admin_only:
            return NavigationDecision(NavigationOutcome.ALLOW, target)

        identity = self._sessions.identity
        if identity is None or self._sessions.token is None:
            logger.info("anonymous navigation to admin route", extra={"data": {"route": target.name}})
            return self._redirect("unauthenticated")

        if not identity.is_admin:
            logger.warning(
                "admin route denied",
                extra={"data": {"route": target.name, "user_id": identity.id, "role": identity.role}},
            )
            self._notifier.show(ACCESS_DENIED_MESSAGE, ToastSeverity.ERROR)
            return self._redirect("forbidden")

        return NavigationDecision(NavigationOutcome.ALLOW, target)

    def _redirect(self, reason: str) -> NavigationDecision:
        return NavigationDecision(NavigationOutcome.REDIRECT, self._home, reason=reason)


__all__ = ["ACCESS_DENIED_MESSAGE", "NavigationGuard"]
