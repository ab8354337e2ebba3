"""Service factory: wires both services to one credential store and cookie jar."""
from __future__ import annotations

from dataclasses import dataclass
from http.cookiejar import CookieJar

import httpx

from .config import AUTH_ENV_PREFIX, CHAT_ENV_PREFIX, ServiceConfig
from .domain.credentials import CredentialStore, InMemoryCredentialStore
from .service.auth_service import AuthService
from .service.chat_service import ChatService


@dataclass(frozen=True)
class Services:
    """The composed client: both services plus the state they share."""

    auth: AuthService
    chat: ChatService
    credentials: CredentialStore
    cookies: CookieJar


def create_services(
    auth_config: ServiceConfig | None = None,
    chat_config: ServiceConfig | None = None,
    *,
    credentials: CredentialStore | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Services:
    """Build the auth and chat services around a single shared store.

    - Missing configs are read from `AUTH_API_*` / `CHAT_API_*` env vars; the
      chat base URL defaults to the auth one
    - A fresh `InMemoryCredentialStore` is created unless one is supplied
    - One cookie jar is shared so session cookies travel with every call
    """
    auth_config = auth_config or ServiceConfig.from_env(AUTH_ENV_PREFIX)
    chat_config = chat_config or ServiceConfig.from_env(
        CHAT_ENV_PREFIX, default_base_url=auth_config.base_url
    )
    credentials = credentials if credentials is not None else InMemoryCredentialStore()
    cookies = CookieJar()

    return Services(
        auth=AuthService(auth_config, credentials, cookies=cookies, transport=transport),
        chat=ChatService(chat_config, credentials, cookies=cookies, transport=transport),
        credentials=credentials,
        cookies=cookies,
    )
