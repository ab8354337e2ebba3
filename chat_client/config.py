from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT_S",
    "AUTH_ENV_PREFIX",
    "CHAT_ENV_PREFIX",
    "ServiceConfig",
]

DEFAULT_BASE_URL = "http://localhost:3000"
DEFAULT_TIMEOUT_S = 10.0
AUTH_ENV_PREFIX = "AUTH_API"
CHAT_ENV_PREFIX = "CHAT_API"


def _float_from_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be a number") from e


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw, 10)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer") from e


class ServiceConfig(BaseModel):
    """Connection settings for one service instance.

    - `base_url` is prefixed verbatim to every endpoint path
    - `timeout` bounds each HTTP attempt, in seconds
    - `retry_attempts` is the number of extra attempts after a connect
      failure (`ConnectError`, `ConnectTimeout`), where the request never
      reached the server; read timeouts and HTTP error responses are never
      retried, so a POST is never submitted twice
    """

    model_config = ConfigDict(frozen=True)

    base_url: str = Field(default=DEFAULT_BASE_URL, min_length=1)
    timeout: float = Field(default=DEFAULT_TIMEOUT_S, gt=0)
    retry_attempts: int = Field(default=0, ge=0, le=10)

    @classmethod
    def from_env(cls, prefix: str, *, default_base_url: str = DEFAULT_BASE_URL) -> ServiceConfig:
        """Build a config from `<PREFIX>_BASE_URL`, `_TIMEOUT` and `_RETRY_ATTEMPTS`.

        Raises:
            ValueError: if a numeric variable cannot be parsed.
        """
        return cls(
            base_url=os.getenv(f"{prefix}_BASE_URL", default_base_url),
            timeout=_float_from_env(f"{prefix}_TIMEOUT", DEFAULT_TIMEOUT_S),
            retry_attempts=_int_from_env(f"{prefix}_RETRY_ATTEMPTS", 0),
        )
