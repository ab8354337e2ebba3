"""Async client for the expert chat backend.

Exposes the two services (auth and chat) and the factory that wires them to a
shared credential store. Logging is left to the embedding application.
"""
from importlib.metadata import PackageNotFoundError, version

from .config import ServiceConfig
from .domain.credentials import CredentialStore, InMemoryCredentialStore
from .domain.errors import (
    ClientError,
    RequestFailedError,
    ResponseValidationError,
    UnsupportedOperationError,
)
from .main import Services, create_services
from .service.auth_service import AuthService
from .service.chat_service import ChatService

try:  # Resolves when installed; source checkouts fall back to a placeholder.
    __version__ = version("expert-chat-client")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

__all__ = [
    "AuthService",
    "ChatService",
    "ClientError",
    "CredentialStore",
    "InMemoryCredentialStore",
    "RequestFailedError",
    "ResponseValidationError",
    "ServiceConfig",
    "Services",
    "UnsupportedOperationError",
    "create_services",
]
