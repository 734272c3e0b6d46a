"""Single-slot toast channel with an auto-hide timer."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable
from dataclasses import replace

from cinema_client.clients import TOAST
from cinema_client.domain.toast import ToastMessage, ToastSeverity

logger = logging.getLogger("cinema_client.toast")

ToastListener = Callable[[ToastMessage], None]


class ToastNotifier:
    """Shows one message at a time and hides it after its duration elapses.

    ``show`` schedules the hide timer on the running event loop. Called outside a
    loop (a synchronous navigation guard, for instance) it records a deadline
    instead, and the message is hidden the next time ``current`` is read after it.
    A new ``show`` cancels the pending timer of the previous message before
    scheduling its own.
    """

    def __init__(self, *, default_duration_ms: int = TOAST.duration_ms) -> None:
        if default_duration_ms < 0:
            raise ValueError("default_duration_ms must be non-negative")
        self._default_duration_ms = default_duration_ms
        self._current = ToastMessage(auto_hide_after_ms=default_duration_ms)
        self._timer: asyncio.TimerHandle | None = None
        self._deadline: float | None = None
        self._listeners: list[ToastListener] = []

    @property
    def current(self) -> ToastMessage:
        self._expire_if_due()
        return self._current

    @property
    def has_pending_timer(self) -> bool:
        self._expire_if_due()
        return self._timer is not None or self._deadline is not None

    def show(
        self,
        text: str,
        severity: ToastSeverity | str = ToastSeverity.INFO,
        duration_ms: int | None = None,
    ) -> ToastMessage:
        """Display ``text``, pre-empting whatever is currently shown."""
        duration = self._default_duration_ms if duration_ms is None else duration_ms
        self._cancel_timer()
        self._current = ToastMessage(
            text=text,
            severity=ToastSeverity(severity),
            visible=True,
            auto_hide_after_ms=duration,
        )
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            self._deadline = time.monotonic() + duration / 1000
        else:
            self._timer = loop.call_later(duration / 1000, self._expire)
        logger.debug(
            "toast shown",
            extra={"data": {"severity": self._current.severity.value, "duration_ms": duration}},
        )
        self._notify()
        return self._current

    def hide(self) -> None:
        self._cancel_timer()
        self._current = replace(self._current, visible=False)
        self._notify()

    def add_listener(self, listener: ToastListener) -> Callable[[], None]:
        """Register ``listener`` for every change; returns a callable that removes it."""
        self._listeners.append(listener)

        def remove() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return remove

    def dispose(self) -> None:
        self._cancel_timer()
        self._listeners.clear()

    def _expire(self) -> None:
        self._timer = None
        self._deadline = None
        self._current = replace(self._current, visible=False)
        self._notify()

    def _expire_if_due(self) -> None:
        if self._deadline is not None and time.monotonic() >= self._deadline:
            self._expire()

    def _cancel_timer(self) -> None:
        self._deadline = None
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self._current)


__all__ = ["ToastListener", "ToastNotifier"]
