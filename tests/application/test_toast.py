from __future__ import annotations

import asyncio
import time

import pytest

from cinema_client.application.toast import ToastNotifier
from cinema_client.domain.toast import ToastMessage, ToastSeverity

pytestmark = pytest.mark.anyio


async def test_show_sets_message_and_visibility(notifier: ToastNotifier) -> None:
    shown = notifier.show("Seat locked")

    assert shown == ToastMessage(
        text="Seat locked",
        severity=ToastSeverity.INFO,
        visible=True,
        auto_hide_after_ms=4000,
    )
    assert notifier.current == shown
    assert notifier.has_pending_timer


async def test_toast_hides_after_duration(notifier: ToastNotifier) -> None:
    notifier.show("Booked", ToastSeverity.SUCCESS, 20)

    await asyncio.sleep(0.08)

    assert notifier.current.visible is False
    assert notifier.current.text == "Booked"
    assert not notifier.has_pending_timer


async def test_new_show_preempts_pending_timer(notifier: ToastNotifier) -> None:
    notifier.show("first", "success", 100)
    notifier.show("second", "error", 4000)

    await asyncio.sleep(0.15)

    assert notifier.current.visible is True
    assert notifier.current.text == "second"
    assert notifier.current.severity is ToastSeverity.ERROR


async def test_hide_cancels_pending_timer(notifier: ToastNotifier) -> None:
    notifier.show("Payment started", duration_ms=50)

    notifier.hide()

    assert notifier.current.visible is False
    assert not notifier.has_pending_timer


async def test_listeners_see_show_and_auto_hide(notifier: ToastNotifier) -> None:
    seen: list[ToastMessage] = []
    remove = notifier.add_listener(seen.append)

    notifier.show("Seat released", duration_ms=10)
    await asyncio.sleep(0.05)
    remove()
    notifier.show("ignored")

    assert [(message.text, message.visible) for message in seen] == [
        ("Seat released", True),
        ("Seat released", False),
    ]


async def test_dispose_cancels_timer_and_listeners() -> None:
    notifier = ToastNotifier(default_duration_ms=10)
    seen: list[ToastMessage] = []
    notifier.add_listener(seen.append)
    notifier.show("bye")

    notifier.dispose()
    await asyncio.sleep(0.03)

    assert notifier.current.visible is True
    assert len(seen) == 1


async def test_unknown_severity_is_rejected(notifier: ToastNotifier) -> None:
    with pytest.raises(ValueError):
        notifier.show("oops", "warning")


def test_show_outside_event_loop_hides_once_deadline_passes(notifier: ToastNotifier) -> None:
    seen: list[ToastMessage] = []
    notifier.add_listener(seen.append)

    shown = notifier.show("Access denied", ToastSeverity.ERROR, 200)

    assert shown.visible
    assert notifier.has_pending_timer
    time.sleep(0.3)
    assert notifier.current.visible is False
    assert not notifier.has_pending_timer
    assert [(message.text, message.visible) for message in seen] == [
        ("Access denied", True),
        ("Access denied", False),
    ]


def test_negative_default_duration_is_rejected() -> None:
    with pytest.raises(ValueError):
        ToastNotifier(default_duration_ms=-1)
