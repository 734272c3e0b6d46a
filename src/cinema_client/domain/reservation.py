"""Query filters for reservation lookups."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class BookingFilters:
    """Optional filters for the admin bookings listing."""

    movie: str | None = None
    date: str | None = None
    user: str | None = None

    def to_query(self) -> dict[str, str]:
        """Return query parameters, omitting filters that were not provided."""
        params: dict[str, str] = {}
        if self.movie:
            params["movie_id"] = self.movie
        if self.date:
            params["date"] = self.date
        if self.user:
            params["user"] = self.user
        return params


__all__ = ["BookingFilters"]
