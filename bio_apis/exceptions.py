"""
Client exception types.

Every public operation either returns its typed result or raises one of
these. The hierarchy lets callers tell apart:

- InvalidInputError: the caller's input was rejected before any request
- NetworkError: the transport failed (connection, timeout)
- RemoteError: the provider answered with a non-success status
- NotFoundError: the provider reported that the entity does not exist
- DecodeError: the provider answered, but not in a shape we understand
"""

from typing import Any


class ApiError(Exception):
    """Base exception for all client errors."""

    def __init__(
        self,
        message: str,
        source: str | None = None,
        status_code: int | None = None,
        response_body: Any = None,
    ):
        self.message = message
        self.source = source
        self.status_code = status_code
        self.response_body = response_body
        super().__init__(self.message)

    def __str__(self) -> str:
        parts = [self.message]
        if self.source:
            parts.insert(0, f"[{self.source}]")
        if self.status_code:
            parts.append(f"(HTTP {self.status_code})")
        return " ".join(parts)


class InvalidInputError(ApiError):
    """Raised when an identifier or query is rejected before any request."""

    def __init__(
        self,
        message: str,
        source: str | None = None,
        field: str | None = None,
    ):
        super().__init__(message, source)
        self.field = field


class NetworkError(ApiError):
    """Raised on connection or transport-level failure."""


class TimeoutError(NetworkError):
    """Raised when request times out."""

    def __init__(
        self,
        message: str = "Request timed out",
        source: str | None = None,
        timeout: float | None = None,
    ):
        super().__init__(message, source)
        self.timeout = timeout


class RemoteError(ApiError):
    """Raised when the provider returns a non-success HTTP status."""


class NotFoundError(RemoteError):
    """Raised when requested resource is not found (HTTP 404 or provider signal)."""

    def __init__(
        self,
        resource_type: str,
        resource_id: str,
        source: str | None = None,
        status_code: int | None = 404,
        response_body: Any = None,
    ):
        message = f"{resource_type} '{resource_id}' not found"
        super().__init__(message, source, status_code, response_body)
        self.resource_type = resource_type
        self.resource_id = resource_id


class AuthenticationError(RemoteError):
    """Raised when the provider refuses access (HTTP 401/403)."""

    def __init__(
        self,
        message: str = "Authentication failed",
        source: str | None = None,
        status_code: int = 401,
        response_body: Any = None,
    ):
        super().__init__(message, source, status_code, response_body)


class RateLimitError(RemoteError):
    """Raised when rate limit is exceeded (HTTP 429, or a provider busy signal)."""

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        source: str | None = None,
        retry_after: int | None = None,
        response_body: Any = None,
        status_code: int = 429,
    ):
        super().__init__(message, source, status_code=status_code, response_body=response_body)
        self.retry_after = retry_after

    def __str__(self) -> str:
        base = super().__str__()
        if self.retry_after:
            return f"{base} - retry after {self.retry_after}s"
        return base


class ServiceUnavailableError(RemoteError):
    """Raised when the provider fails server-side (HTTP 5xx)."""

    def __init__(
        self,
        message: str = "Service temporarily unavailable",
        source: str | None = None,
        status_code: int = 503,
        response_body: Any = None,
    ):
        super().__init__(message, source, status_code, response_body)


class DecodeError(ApiError):
    """Raised when a response body doesn't match the expected shape."""

    def __init__(
        self,
        message: str,
        source: str | None = None,
        field: str | None = None,
    ):
        super().__init__(message, source)
        self.field = field
