"""
Errors raised by the Pump Master API client.

Every message carries the numeric HTTP status so callers can match on it
(e.g. ``"404" in str(exc)``).
"""

from typing import Any


class ApiError(RuntimeError):
    """Raised when an API call returns a status other than the expected one."""

    def __init__(
        self,
        status_code: int,
        message: str,
        body: Any = None,
        operation: str | None = None,
    ):
        self.status_code = status_code
        self.message = message
        self.body = body
        self.operation = operation
        prefix = f"{operation} failed: " if operation else ""
        super().__init__(f"{prefix}HTTP {status_code}: {message}")


class AuthenticationError(ApiError):
    """Login, logout or token refresh was rejected."""
    pass


class NotFoundError(ApiError):
    """The requested pump does not exist."""
    pass


class UnexpectedStatusError(ApiError):
    pass
