"""Typed operations of the booking service, carried by the request pipeline."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import cast

import httpx
from pydantic import BaseModel

from cinema_client.domain.reservation import BookingFilters
from cinema_client.infrastructure.http.models import (
    BookSeatsRequestDTO,
    CancelPaymentRequestDTO,
    LockSeatRequestDTO,
    ScreeningDetailsRequestDTO,
    SeatBatchRequestDTO,
)
from cinema_client.infrastructure.http.pipeline import RequestPipeline
from cinema_client.json_types import JsonValue

logger = logging.getLogger("cinema_client.reservations")


class ReservationClient:
    """One request per operation; no retries and no cached lock state.

    Hold, extension, booking and payment rules are enforced by the booking service.
    Arguments are forwarded as given, so an empty ``seat_ids`` list is sent as an
    empty list and rejected (or not) remotely.
    """

    def __init__(self, pipeline: RequestPipeline) -> None:
        self._pipeline = pipeline

    async def list_movies(self) -> JsonValue:
        response = await self._pipeline.get("/movies")
        return _json(response)

    async def get_screening_details(self, movie_id: str, start_time: str) -> JsonValue:
        body = ScreeningDetailsRequestDTO(movie_id=movie_id, start_time=start_time)
        return await self._post("/screenings/details", body)

    async def lock_seat(self, user_id: str, movie_id: str, start_time: str, seat_id: str) -> JsonValue:
        body = LockSeatRequestDTO(
            user_id=user_id,
            movie_id=movie_id,
            start_time=start_time,
            seat_id=seat_id,
        )
        return await self._post("/seats/lock", body)

    async def extend_seats(
        self,
        user_id: str,
        movie_id: str,
        start_time: str,
        seat_ids: Sequence[str],
    ) -> JsonValue:
        body = SeatBatchRequestDTO(
            user_id=user_id,
            movie_id=movie_id,
            start_time=start_time,
            seat_ids=list(seat_ids),
        )
        return await self._post("/seats/extend", body)

    async def book_seats(
        self,
        user_id: str,
        movie_id: str,
        start_time: str,
        seat_ids: Sequence[str],
        payment_id: str | None = None,
    ) -> JsonValue:
        body = BookSeatsRequestDTO(
            user_id=user_id,
            movie_id=movie_id,
            start_time=start_time,
            seat_ids=list(seat_ids),
            payment_id=payment_id,
        )
        return await self._post("/seats/book", body)

    async def start_payment(
        self,
        user_id: str,
        movie_id: str,
        start_time: str,
        seat_ids: Sequence[str],
    ) -> JsonValue:
        body = SeatBatchRequestDTO(
            user_id=user_id,
            movie_id=movie_id,
            start_time=start_time,
            seat_ids=list(seat_ids),
        )
        return await self._post("/payment/start", body)

    async def cancel_payment(self, reason: str | None = None) -> JsonValue:
        return await self._post("/payment/cancel", CancelPaymentRequestDTO(reason=reason))

    async def list_bookings_admin(self, filters: BookingFilters | None = None) -> JsonValue:
        params = (filters or BookingFilters()).to_query()
        response = await self._pipeline.get("/admin/bookings", params=params or None)
        return _json(response)

    async def _post(self, path: str, body: BaseModel) -> JsonValue:
        payload = body.model_dump(mode="json", exclude_none=True)
        logger.debug("posting reservation request", extra={"data": {"path": path, "fields": sorted(payload)}})
        response = await self._pipeline.post(path, json=payload)
        return _json(response)


def _json(response: httpx.Response) -> JsonValue:
    if not response.content:
        return None
    return cast(JsonValue, response.json())


__all__ = ["ReservationClient"]
