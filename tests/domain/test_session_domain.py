from __future__ import annotations

import pytest

from cinema_client.domain.navigation import ADMIN_ROUTE, HOME_ROUTE, NavigationDecision, NavigationOutcome
from cinema_client.domain.reservation import BookingFilters
from cinema_client.domain.session import Role, Session, UserIdentity
from cinema_client.domain.toast import ToastMessage


def _identity(role: str = "USER") -> UserIdentity:
    return UserIdentity(id="u1", name="Ada", email="ada@example.com", role=role)


def test_session_expires_when_now_reaches_expiry() -> None:
    session = Session(identity=_identity(), token="real-jwt-u1", expires_at_ms=1_000)

    assert not session.is_expired(999)
    assert session.is_expired(1_000)
    assert session.is_expired(1_001)


def test_session_requires_token() -> None:
    with pytest.raises(ValueError):
        Session(identity=_identity(), token="", expires_at_ms=1_000)


def test_identity_requires_id() -> None:
    with pytest.raises(ValueError):
        UserIdentity(id="", name="Nobody", email="nobody@example.com")


def test_identity_admin_flag_follows_role() -> None:
    assert _identity(Role.ADMIN.value).is_admin
    assert not _identity("USER").is_admin
    assert not _identity("admin").is_admin


def test_booking_filters_only_emit_provided_values() -> None:
    assert BookingFilters().to_query() == {}
    assert BookingFilters(movie="m1", user="ada@example.com").to_query() == {
        "movie_id": "m1",
        "user": "ada@example.com",
    }
    assert BookingFilters(movie="", date="2025-01-01").to_query() == {"date": "2025-01-01"}


def test_toast_message_rejects_negative_duration() -> None:
    with pytest.raises(ValueError):
        ToastMessage(text="x", auto_hide_after_ms=-1)


def test_navigation_decision_allowed_flag() -> None:
    assert NavigationDecision(NavigationOutcome.ALLOW, ADMIN_ROUTE).allowed
    assert not NavigationDecision(NavigationOutcome.REDIRECT, HOME_ROUTE, reason="forbidden").allowed
