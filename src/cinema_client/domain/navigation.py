"""Route descriptors and guard decisions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True, slots=True)
class Route:
    """A navigable view; ``admin_only`` routes require the ADMIN role."""

    name: str
    path: str
    admin_only: bool = False


class NavigationOutcome(str, Enum):
    ALLOW = "allow"
    REDIRECT = "redirect"


@dataclass(frozen=True, slots=True)
class NavigationDecision:
    """Result of guarding a single navigation attempt."""

    outcome: NavigationOutcome
    route: Route
    reason: str | None = None

    @property
    def allowed(self) -> bool:
        return self.outcome is NavigationOutcome.ALLOW


HOME_ROUTE = Route(name="home", path="/")
BOOKING_ROUTE = Route(name="booking", path="/booking/{movie_id}")
ADMIN_ROUTE = Route(name="admin", path="/admin", admin_only=True)

DEFAULT_ROUTES: tuple[Route, ...] = (HOME_ROUTE, BOOKING_ROUTE, ADMIN_ROUTE)

__all__ = [
    "ADMIN_ROUTE",
    "BOOKING_ROUTE",
    "DEFAULT_ROUTES",
    "HOME_ROUTE",
    "NavigationDecision",
    "NavigationOutcome",
    "Route",
]
