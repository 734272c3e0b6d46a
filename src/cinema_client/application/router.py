"""Named route table driven through the navigation guard."""

from __future__ import annotations

from collections.abc import Iterable

from cinema_client.application.navigation_guard import NavigationGuard
from cinema_client.domain.navigation import DEFAULT_ROUTES, HOME_ROUTE, NavigationDecision, Route


class Router:
    """Tracks the current route; every transition is vetted by the guard."""

    def __init__(self, guard: NavigationGuard, routes: Iterable[Route] = DEFAULT_ROUTES) -> None:
        self._guard = guard
        self._routes: dict[str, Route] = {}
        for route in routes:
            if route.name in self._routes:
                raise ValueError(f"duplicate route name: {route.name}")
            self._routes[route.name] = route
        self._current: Route = self._routes.get(HOME_ROUTE.name, HOME_ROUTE)

    @property
    def current(self) -> Route:
        return self._current

    def resolve(self, name: str) -> Route:
        try:
            return self._routes[name]
        except KeyError:
            raise LookupError(f"unknown route: {name}") from None

    def navigate(self, name: str) -> NavigationDecision:
        decision = self._guard.before_each(self.resolve(name))
        self._current = decision.route
        return decision


__all__ = ["Router"]
