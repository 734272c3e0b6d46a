"""Pydantic request bodies for the booking service endpoints."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ScreeningDetailsRequestDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    movie_id: str
    start_time: str


class LockSeatRequestDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    user_id: str
    movie_id: str
    start_time: str
    seat_id: str


class SeatBatchRequestDTO(BaseModel):
    """Body shared by the extend and payment-start endpoints."""

    model_config = ConfigDict(frozen=True)

    user_id: str
    movie_id: str
    start_time: str
    seat_ids: list[str]


class BookSeatsRequestDTO(SeatBatchRequestDTO):
    payment_id: str | None = None


class CancelPaymentRequestDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    reason: str | None = None


__all__ = [
    "BookSeatsRequestDTO",
    "CancelPaymentRequestDTO",
    "LockSeatRequestDTO",
    "ScreeningDetailsRequestDTO",
    "SeatBatchRequestDTO",
]
