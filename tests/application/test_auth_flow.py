from __future__ import annotations

import pytest

from cinema_client.application.auth_flow import AuthFlow, parse_login_callback
from cinema_client.application.session_store import SessionStore
from cinema_client.domain.session import UserIdentity
from cinema_client.errors import LoginCallbackError

CALLBACK = (
    "http://localhost:5173/?google_auth=success&token=real-jwt-65a1&user_id=65a1&role=ADMIN"
    "&name=Ada%20Lovelace&picture=https%3A%2F%2Fexample.com%2Fa.png&email=ada%40example.com"
)


def test_parse_login_callback_extracts_identity_and_token() -> None:
    identity, token = parse_login_callback(CALLBACK)

    assert token == "real-jwt-65a1"
    assert identity == UserIdentity(
        id="65a1",
        name="Ada Lovelace",
        email="ada@example.com",
        role="ADMIN",
        picture_url="https://example.com/a.png",
    )


def test_parse_login_callback_defaults_role_to_user() -> None:
    identity, _ = parse_login_callback("http://app/?google_auth=success&token=t&user_id=u")

    assert identity.role == "USER"


@pytest.mark.parametrize(
    "url",
    [
        "http://app/",
        "http://app/?google_auth=failed&token=t&user_id=u",
        "http://app/?google_auth=success&user_id=u",
        "http://app/?google_auth=success&token=t",
    ],
)
def test_parse_login_callback_rejects_incomplete_redirects(url: str) -> None:
    with pytest.raises(LoginCallbackError):
        parse_login_callback(url)


def test_complete_logs_the_user_in(session_store: SessionStore) -> None:
    flow = AuthFlow(session_store, base_url="http://localhost:8080/api/")
    session_store.open_login_modal()

    session = flow.complete(CALLBACK)

    assert session_store.token == "real-jwt-65a1"
    assert session_store.identity == session.identity
    assert not session_store.modal_open


def test_login_url_points_at_the_service(session_store: SessionStore) -> None:
    flow = AuthFlow(session_store, base_url="http://localhost:8080/api/")

    assert flow.login_url == "http://localhost:8080/api/auth/google/login"


def test_auth_flow_requires_base_url(session_store: SessionStore) -> None:
    with pytest.raises(ValueError):
        AuthFlow(session_store, base_url="")
