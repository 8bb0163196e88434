"""
Status expectations applied by the client operations.

The transport never judges a status code; each operation states which one
it expects and these helpers turn a mismatch into an ApiError.
"""

from typing import Any

from .errors import ApiError, UnexpectedStatusError
from .models import HttpResult

BODY_EXCERPT_LENGTH = 200


def describe_body(body: Any) -> str:
    if body is None:
        return "<empty>"
    if isinstance(body, dict):
        for key in ("message", "error", "detail"):
            if key in body:
                return str(body[key])
    text = str(body)
    if len(text) > BODY_EXCERPT_LENGTH:
        text = text[:BODY_EXCERPT_LENGTH] + "..."
    return text


def expect_status(
    result: HttpResult,
    expected: int,
    *,
    operation: str,
    error: type[ApiError] = UnexpectedStatusError,
    not_found: type[ApiError] | None = None,
) -> HttpResult:
    """Return the result unchanged if its status matches, raise otherwise.

    A 404 raises not_found when given, so resource reads can tell a missing
    pump from any other rejection. Every other mismatch raises error.
    """
    if result.status_code == expected:
        return result
    error_cls = not_found if not_found and result.status_code == 404 else error
    raise error_cls(
        result.status_code,
        describe_body(result.body),
        body=result.body,
        operation=operation,
    )


def expect_success(
    result: HttpResult,
    *,
    operation: str,
    error: type[ApiError] = UnexpectedStatusError,
    not_found: type[ApiError] | None = None,
) -> HttpResult:
    """Like expect_status, but any 2xx status passes."""
    if 200 <= result.status_code < 300:
        return result
    return expect_status(result, 200, operation=operation, error=error, not_found=not_found)
