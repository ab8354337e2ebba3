"""Tests for the auth flow and its credential writes."""
from __future__ import annotations

import asyncio
import json

import httpx
import pytest

from chat_client import RequestFailedError, ResponseValidationError
from chat_client.api.models import RegisterRequest, User
from tests.conftest import BASE_URL

ENVELOPE = {"user": {"id": "u1"}, "token": "t1"}


def test_login_stores_token_and_returns_user(respx_mock, auth, store) -> None:
    route = respx_mock.post(f"{BASE_URL}/auth/login").mock(
        return_value=httpx.Response(200, json=ENVELOPE)
    )

    user = asyncio.run(auth.login("alice", "pw"))

    assert user == User(id="u1")
    assert store.get_credential() == "t1"
    assert json.loads(route.calls.last.request.content) == {"username": "alice", "password": "pw"}


def test_auth_requests_never_carry_bearer(respx_mock, auth, store) -> None:
    route = respx_mock.post(f"{BASE_URL}/auth/refresh").mock(
        return_value=httpx.Response(200, json=ENVELOPE)
    )
    store.set_credential("old")

    asyncio.run(auth.refresh_token())

    assert "Authorization" not in route.calls.last.request.headers
    assert route.calls.last.request.headers["Content-Type"] == "application/json"


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(401, text="bad login"),
        httpx.Response(200, json={"user": {"id": "u1"}}),
        httpx.Response(200, json={"user": {"id": "u1"}, "token": ""}),
    ],
)
def test_failed_login_leaves_credential_unchanged(respx_mock, auth, store, response) -> None:
    respx_mock.post(f"{BASE_URL}/auth/login").mock(return_value=response)
    store.set_credential("before")

    with pytest.raises((RequestFailedError, ResponseValidationError)):
        asyncio.run(auth.login("alice", "wrong"))

    assert store.get_credential() == "before"


def test_failed_login_propagates_status(respx_mock, auth, store) -> None:
    respx_mock.post(f"{BASE_URL}/auth/login").mock(return_value=httpx.Response(401, text="nope"))

    with pytest.raises(RequestFailedError) as info:
        asyncio.run(auth.login("alice", "wrong"))

    assert info.value.status == 401
    assert store.get_credential() is None


def test_register_sends_only_username_and_password(respx_mock, auth, store) -> None:
    route = respx_mock.post(f"{BASE_URL}/auth/register").mock(
        return_value=httpx.Response(201, json={"user": {"id": "u2", "username": "bob"}, "token": "t2"})
    )
    request = RegisterRequest(username="bob", password="pw", email="bob@example.com", nickname="b")

    user = asyncio.run(auth.register(request))

    assert user.id == "u2"
    assert store.get_credential() == "t2"
    assert json.loads(route.calls.last.request.content) == {"username": "bob", "password": "pw"}


def test_register_failure_leaves_credential_unchanged(respx_mock, auth, store) -> None:
    respx_mock.post(f"{BASE_URL}/auth/register").mock(return_value=httpx.Response(409))

    with pytest.raises(RequestFailedError):
        asyncio.run(auth.register(RegisterRequest(username="bob", password="pw")))

    assert store.get_credential() is None


def test_logout_success_clears_credential(respx_mock, auth, store) -> None:
    respx_mock.post(f"{BASE_URL}/auth/logout").mock(
        return_value=httpx.Response(200, json={"message": "Logged out"})
    )
    store.set_credential("t1")

    assert asyncio.run(auth.logout()) is None
    assert store.get_credential() is None


@pytest.mark.parametrize(
    "mock",
    [
        {"return_value": httpx.Response(500, text="down")},
        {"side_effect": httpx.ConnectError("unreachable")},
    ],
)
def test_logout_failure_still_clears_and_does_not_raise(respx_mock, auth, store, mock) -> None:
    respx_mock.post(f"{BASE_URL}/auth/logout").mock(**mock)
    store.set_credential("t1")

    asyncio.run(auth.logout())

    assert store.get_credential() is None


def test_refresh_replaces_credential(respx_mock, auth, store) -> None:
    respx_mock.post(f"{BASE_URL}/auth/refresh").mock(
        return_value=httpx.Response(200, json={"user": {"id": "u1"}, "token": "t2"})
    )
    store.set_credential("t1")

    user = asyncio.run(auth.refresh_token())

    assert user.id == "u1"
    assert store.get_credential() == "t2"


def test_refresh_failure_keeps_stale_credential(respx_mock, auth, store) -> None:
    respx_mock.post(f"{BASE_URL}/auth/refresh").mock(return_value=httpx.Response(401))
    store.set_credential("t1")

    with pytest.raises(RequestFailedError):
        asyncio.run(auth.refresh_token())

    assert store.get_credential() == "t1"


def test_current_user_success_keeps_credential(respx_mock, auth, store) -> None:
    respx_mock.get(f"{BASE_URL}/auth/me").mock(
        return_value=httpx.Response(200, json={"id": "u1", "username": "alice", "role": "expert"})
    )
    store.set_credential("t1")

    user = asyncio.run(auth.get_current_user())

    assert user == User(id="u1", username="alice", role="expert")
    assert store.get_credential() == "t1"


@pytest.mark.parametrize(
    "mock",
    [
        {"return_value": httpx.Response(401, text="unauthenticated")},
        {"return_value": httpx.Response(200, json={"username": "no id"})},
        {"side_effect": httpx.ConnectError("unreachable")},
    ],
)
def test_current_user_failure_clears_and_returns_none(respx_mock, auth, store, mock) -> None:
    respx_mock.get(f"{BASE_URL}/auth/me").mock(**mock)
    store.set_credential("t1")

    assert asyncio.run(auth.get_current_user()) is None
    assert store.get_credential() is None


def _undecodable() -> httpx.Response:
    return httpx.Response(
        200, headers={"Content-Encoding": "gzip"}, stream=httpx.ByteStream(b"not gzip")
    )


def test_current_user_undecodable_body_clears_and_returns_none(respx_mock, auth, store) -> None:
    respx_mock.get(f"{BASE_URL}/auth/me").mock(return_value=_undecodable())
    store.set_credential("t1")

    assert asyncio.run(auth.get_current_user()) is None
    assert store.get_credential() is None


def test_logout_undecodable_body_still_clears(respx_mock, auth, store) -> None:
    respx_mock.post(f"{BASE_URL}/auth/logout").mock(return_value=_undecodable())
    store.set_credential("t1")

    asyncio.run(auth.logout())

    assert store.get_credential() is None


def test_login_undecodable_body_raises_request_failed(respx_mock, auth, store) -> None:
    respx_mock.post(f"{BASE_URL}/auth/login").mock(return_value=_undecodable())

    with pytest.raises(RequestFailedError) as info:
        asyncio.run(auth.login("alice", "pw"))

    assert info.value.status == 0
    assert store.get_credential() is None
