"""Request pipeline wrapping every call to the booking service."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol, cast

import httpx
from opentelemetry import trace

from cinema_client.clients import BOOKING_API
from cinema_client.errors import (
    AuthorizationError,
    CinemaClientError,
    RequestCancelledError,
    RequestFailedError,
    RequestTimeoutError,
    TransportError,
)

logger = logging.getLogger("cinema_client.http")
_tracer = trace.get_tracer("cinema_client.http")

DEFAULT_HEADERS: Mapping[str, str] = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


class MiddlewareDecision(str, Enum):
    """Whether the remaining hooks of the current phase should run."""

    CONTINUE = "continue"
    SHORT_CIRCUIT = "short_circuit"


@dataclass(slots=True)
class Exchange:
    """One request together with its outcome."""

    request: httpx.Request
    response: httpx.Response | None = None
    error: CinemaClientError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class RequestMiddleware(Protocol):
    """Pre-request and post-response hooks.

    Hooks are synchronous, so each one runs to completion without yielding to
    other requests in flight.
    """

    def before_request(self, request: httpx.Request) -> MiddlewareDecision:
        """Inspect or amend ``request`` before it is sent."""

    def after_response(self, exchange: Exchange) -> MiddlewareDecision:
        """Observe the outcome of ``exchange``; failures are raised after all hooks ran."""


class RequestPipeline:
    """Sends requests through an ordered middleware list.

    ``before_request`` hooks run in registration order and ``after_response`` hooks
    in reverse order. A ``SHORT_CIRCUIT`` decision skips the remaining hooks of that
    phase only. The pipeline never retries.

    ``timeout_seconds`` bounds each send as a whole, on top of httpx's per-phase
    timeouts. An injected ``client`` keeps its own base URL; when ``base_url`` is
    also given the two must agree.
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        timeout_seconds: float = BOOKING_API.timeout_seconds,
        middlewares: Sequence[RequestMiddleware] = (),
        client: httpx.AsyncClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if base_url is not None and not base_url:
            raise ValueError("base_url must be provided")
        if timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be positive")
        if client is not None and base_url is not None:
            if str(client.base_url).rstrip("/") != base_url.rstrip("/"):
                raise ValueError(
                    f"base_url {base_url!r} does not match the injected client's {str(client.base_url)!r}"
                )
        self._timeout = httpx.Timeout(timeout_seconds)
        self._timeout_seconds = timeout_seconds
        self._middlewares: list[RequestMiddleware] = list(middlewares)
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=(base_url or BOOKING_API.base_url).rstrip("/"),
            timeout=self._timeout,
            transport=transport,
        )

    @property
    def middlewares(self) -> tuple[RequestMiddleware, ...]:
        return tuple(self._middlewares)

    def add_middleware(self, middleware: RequestMiddleware) -> None:
        self._middlewares.append(middleware)

    async def request(
        self,
        method: str,
        path: str,
        *,
        json: Any | None = None,
        params: Mapping[str, str] | None = None,
    ) -> httpx.Response:
        """Send one request and return the successful response.

        Raises ``RequestFailedError`` (``AuthorizationError`` for 401),
        ``RequestTimeoutError`` or ``TransportError`` once every post-response
        hook has observed the failure. A cancelled caller is re-raised after the
        hooks saw a ``RequestCancelledError``.
        """
        request = self._client.build_request(
            method,
            path,
            json=json,
            params=params,
            headers=DEFAULT_HEADERS,
            timeout=self._timeout,
        )
        self._run_before(request)
        with _tracer.start_as_current_span(
            f"cinema.http {method} {path}",
            kind=trace.SpanKind.CLIENT,
            attributes={"http.request.method": method, "url.path": path},
        ) as span:
            try:
                exchange = await self._send(request)
            except asyncio.CancelledError:
                span.set_attribute("error.type", RequestCancelledError.__name__)
                self._run_after(
                    Exchange(
                        request=request,
                        error=RequestCancelledError(f"{request.method} {request.url.path} was cancelled"),
                    )
                )
                raise
            if exchange.response is not None:
                span.set_attribute("http.response.status_code", exchange.response.status_code)
            if exchange.error is not None:
                span.set_attribute("error.type", type(exchange.error).__name__)
        self._run_after(exchange)
        if exchange.error is not None:
            raise exchange.error
        return cast(httpx.Response, exchange.response)

    async def get(self, path: str, *, params: Mapping[str, str] | None = None) -> httpx.Response:
        return await self.request("GET", path, params=params)

    async def post(self, path: str, *, json: Any | None = None) -> httpx.Response:
        return await self.request("POST", path, json=json)

    async def aclose(self) -> None:
        """Close the underlying HTTP client when the pipeline created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> RequestPipeline:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    # ------------------------------------------------------------------
    # helpers

    async def _send(self, request: httpx.Request) -> Exchange:
        exchange = Exchange(request=request)
        target = f"{request.method} {request.url.path}"
        try:
            response = await asyncio.wait_for(self._client.send(request), timeout=self._timeout_seconds)
        except (httpx.TimeoutException, TimeoutError) as exc:
            error: CinemaClientError = RequestTimeoutError(
                f"{target} timed out after {self._timeout_seconds}s"
            )
            error.__cause__ = exc
            exchange.error = error
            return exchange
        except httpx.RequestError as exc:
            error = TransportError(f"{target} failed: {exc}")
            error.__cause__ = exc
            exchange.error = error
            return exchange
        exchange.response = response
        if response.is_error:
            exchange.error = _status_error(response)
        return exchange

    def _run_before(self, request: httpx.Request) -> None:
        for middleware in self._middlewares:
            if middleware.before_request(request) is MiddlewareDecision.SHORT_CIRCUIT:
                return

    def _run_after(self, exchange: Exchange) -> None:
        for middleware in reversed(self._middlewares):
            if middleware.after_response(exchange) is MiddlewareDecision.SHORT_CIRCUIT:
                return


def _status_error(response: httpx.Response) -> RequestFailedError:
    detail = summarize_error_response(response)
    if response.status_code == httpx.codes.UNAUTHORIZED:
        return AuthorizationError(response.status_code, detail, response)
    return RequestFailedError(response.status_code, detail, response)


def summarize_error_response(response: httpx.Response) -> str:
    """Return a short string summarizing the server error payload."""
    try:
        data = response.json()
    except ValueError:
        data = response.text
    if isinstance(data, dict) and "error" in data:
        summary = data["error"]
    elif isinstance(data, dict) and "detail" in data:
        summary = data["detail"]
    else:
        summary = data
    text = str(summary)
    return text if len(text) <= 500 else text[:500] + "…"


__all__ = [
    "DEFAULT_HEADERS",
    "Exchange",
    "MiddlewareDecision",
    "RequestMiddleware",
    "RequestPipeline",
    "summarize_error_response",
]
