from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from functools import lru_cache
from http.cookiejar import CookieJar
from types import MappingProxyType
from typing import Any

import httpx
from pydantic import TypeAdapter, ValidationError

from ..config import ServiceConfig
from ..domain.credentials import CredentialStore
from ..domain.errors import RequestFailedError, ResponseValidationError
from ..logging_conf import get_logger, redact_headers

__all__ = [
    "JSON_CONTENT_TYPE",
    "RequestDescriptor",
    "RequestExecutor",
]

JSON_CONTENT_TYPE = "application/json"

logger = get_logger("chat_client.executor")

# Raised before the request reached the server; the only retried failures.
_RETRYABLE_ERRORS = (httpx.ConnectError, httpx.ConnectTimeout)


@dataclass(frozen=True)
class RequestDescriptor:
    """One outgoing call: built per request and discarded afterwards."""

    endpoint: str
    method: str = "GET"
    body: Any = None
    headers: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))


def _describe(error: ValidationError) -> str:
    # Inputs are left out: auth envelopes carry the credential.
    return "; ".join(
        f"{'.'.join(str(p) for p in err['loc']) or '<root>'}: {err['msg']}"
        for err in error.errors(include_input=False)
    )


@lru_cache(maxsize=64)
def _adapter(response_type: Any) -> TypeAdapter:
    return TypeAdapter(response_type)


class RequestExecutor:
    """Request pipeline shared by the auth and chat services.

    - Prefixes `config.base_url` verbatim to the endpoint (no slash handling)
    - Sends JSON with `Content-Type: application/json`; caller headers win
    - Adds `Authorization: Bearer <credential>` only when built with a
      credential store and a credential is present
    - Sends and stores cookies through `cookies`, which may be shared
    - Raises `RequestFailedError` for non-2xx responses and transport errors
    - Validates success bodies against `response_type` when one is given

    `request_logger`, when set, receives a DEBUG line per outgoing request with
    sensitive headers masked. `transport` is reused across calls and is meant
    for in-process backends and tests.
    """

    def __init__(
        self,
        config: ServiceConfig,
        *,
        credentials: CredentialStore | None = None,
        cookies: CookieJar | None = None,
        request_logger: logging.Logger | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config
        self._credentials = credentials
        self._cookies = cookies if cookies is not None else CookieJar()
        self._request_logger = request_logger
        self._transport = transport

    async def execute(
        self,
        endpoint: str,
        method: str = "GET",
        body: Any = None,
        headers: Mapping[str, str] | None = None,
        *,
        response_type: Any = None,
    ) -> Any:
        """Issue one call and return the (validated) JSON body, or None if empty."""
        request = RequestDescriptor(
            endpoint=endpoint,
            method=method.upper(),
            body=body,
            headers=headers or {},
        )
        return await self.send(request, response_type=response_type)

    async def send(self, request: RequestDescriptor, *, response_type: Any = None) -> Any:
        url = f"{self._config.base_url}{request.endpoint}"
        headers = self._compose_headers(request.headers)

        if self._request_logger is not None:
            self._request_logger.debug(
                "request.send",
                extra={
                    "event": "request_send",
                    "method": request.method,
                    "url": url,
                    "headers": redact_headers(headers),
                },
            )

        response = await self._send_with_retries(request, url, headers)
        if not response.is_success:
            raise RequestFailedError(response.status_code, response.text)
        return self._parse(response, response_type)

    # ------------------------
    # Internals
    # ------------------------

    def _compose_headers(self, extra: Mapping[str, str]) -> httpx.Headers:
        headers = httpx.Headers({"Content-Type": JSON_CONTENT_TYPE})
        headers.update(extra)
        if self._credentials is not None:
            credential = self._credentials.get_credential()
            if credential:
                headers["Authorization"] = f"Bearer {credential}"
        return headers

    async def _send_with_retries(
        self, request: RequestDescriptor, url: str, headers: httpx.Headers
    ) -> httpx.Response:
        attempts = self._config.retry_attempts + 1
        attempt = 0
        while True:
            attempt += 1
            try:
                async with httpx.AsyncClient(
                    timeout=self._config.timeout,
                    cookies=self._cookies,
                    transport=self._transport,
                ) as client:
                    return await client.request(
                        request.method, url, headers=headers, json=request.body
                    )
            except httpx.RequestError as e:
                retry = isinstance(e, _RETRYABLE_ERRORS) and attempt < attempts
                logger.warning(
                    "request.transport_error",
                    extra={
                        "event": "request_transport_error",
                        "method": request.method,
                        "url": url,
                        "attempt": attempt,
                        "attempts": attempts,
                        "error": type(e).__name__,
                        "retry": retry,
                    },
                )
                if not retry:
                    raise RequestFailedError(0, "") from e

    @staticmethod
    def _parse(response: httpx.Response, response_type: Any) -> Any:
        data: Any = None
        if response.content:
            try:
                data = response.json()
            except ValueError as e:
                raise ResponseValidationError(
                    f"Response body from {response.request.url.path} is not JSON"
                ) from e
        if response_type is None:
            return data
        try:
            return _adapter(response_type).validate_python(data)
        except ValidationError as e:
            raise ResponseValidationError(
                f"Response from {response.request.url.path} failed validation: {_describe(e)}"
            ) from e
