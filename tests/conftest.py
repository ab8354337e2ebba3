"""Shared fixtures for the client tests."""
from __future__ import annotations

import httpx
import pytest

from chat_client import InMemoryCredentialStore, ServiceConfig, create_services
from chat_client.service.auth_service import AuthService
from chat_client.service.chat_service import ChatService
from tests.fake_backend import FakeBackend

BASE_URL = "http://api.test"


@pytest.fixture
def config() -> ServiceConfig:
    return ServiceConfig(base_url=BASE_URL, timeout=2.0)


@pytest.fixture
def store() -> InMemoryCredentialStore:
    return InMemoryCredentialStore()


@pytest.fixture
def auth(config: ServiceConfig, store: InMemoryCredentialStore) -> AuthService:
    return AuthService(config, store)


@pytest.fixture
def chat(config: ServiceConfig, store: InMemoryCredentialStore) -> ChatService:
    return ChatService(config, store)


@pytest.fixture
def backend() -> FakeBackend:
    fake = FakeBackend()
    fake.add_user("alice", "pw")
    return fake


@pytest.fixture
def services(config: ServiceConfig, backend: FakeBackend):
    return create_services(config, config, transport=httpx.ASGITransport(app=backend.app))
