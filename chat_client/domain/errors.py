from __future__ import annotations

__all__ = [
    "ClientError",
    "RequestFailedError",
    "ResponseValidationError",
    "UnsupportedOperationError",
]


class ClientError(RuntimeError):
    """Base class for every failure raised by the client.

    The `code` attribute gives callers a stable machine code to branch on.
    """

    code: str = "client_error"


class RequestFailedError(ClientError):
    """Raised for transport errors and non-success HTTP responses.

    `status` is the HTTP status code, or 0 when no response was received.
    `body` is the raw response text (empty for transport errors).
    """

    code = "request_failed"

    def __init__(self, status: int, body: str = "") -> None:
        super().__init__(f"Request failed with status {status}: {body}")
        self.status = status
        self.body = body


class ResponseValidationError(ClientError):
    """Raised when a success body is not JSON or does not match its schema."""

    code = "invalid_response"


class UnsupportedOperationError(ClientError):
    """Raised by operations the server does not expose yet."""

    code = "unsupported_operation"
