"""
Custom assertion helpers for API testing.

These helpers provide cleaner, more expressive assertions for the common
patterns in the Pump Master API tests.
"""
import re
from typing import Any

from ..api.client import PumpMasterApi
from ..api.errors import ApiError
from ..api.models import FailureResult, HttpResult, PaginatedResult, PumpRecord

JWT_PATTERN = re.compile(r"^[A-Za-z0-9_-]+\.[A-Za-z0-9_-]+\.[A-Za-z0-9_-]+$")


def assert_status_code(result: HttpResult | FailureResult | int, expected: int) -> None:
    """Assert a result has the expected status code with a helpful message."""
    if isinstance(result, HttpResult):
        actual, body = result.status_code, result.body
    elif isinstance(result, FailureResult):
        actual, body = result.status, result.error
    else:
        actual, body = result, None
    assert actual == expected, (
        f"Expected status {expected}, got {actual}. Response body: {body}"
    )


def _field(record: PumpRecord | dict[str, Any], key: str) -> Any:
    if isinstance(record, PumpRecord):
        dumped = record.model_dump(by_alias=True)
        if key in dumped:
            return dumped[key]
        return getattr(record, key)
    return record[key]


def assert_pump_data(
    actual: PumpRecord | dict[str, Any],
    expected: PumpRecord | dict[str, Any],
) -> None:
    """Assert every field present in expected matches actual.

    Fields that expected does not mention are ignored, so server-assigned
    values such as id or timestamps never fail the comparison.
    """
    if isinstance(expected, PumpRecord):
        expected = expected.to_payload()
    for key, value in expected.items():
        actual_value = _field(actual, key)
        assert actual_value == value, (
            f"Expected {key}={value!r}, got {key}={actual_value!r}"
        )


def assert_paginated_response(
    result: PaginatedResult,
    expected_total: int | None = None,
    expected_page: int | None = None,
) -> None:
    """Assert a paginated listing is well-formed, optionally checking total and page."""
    assert isinstance(result.data, list), f"Expected list data, got {type(result.data)}"
    assert result.total >= 0, f"Negative total: {result.total}"
    assert result.limit > 0, f"Non-positive limit: {result.limit}"
    assert result.total_pages >= 0, f"Negative totalPages: {result.total_pages}"
    if expected_total is not None:
        assert result.total == expected_total, (
            f"Expected total {expected_total}, got {result.total}"
        )
    if expected_page is not None:
        assert result.page == expected_page, (
            f"Expected page {expected_page}, got {result.page}"
        )


def assert_page_window(result: PaginatedResult, page: int, limit: int) -> None:
    """Assert the requested window is echoed and respected."""
    assert result.page == page, f"Expected page {page}, got {result.page}"
    assert result.limit == limit, f"Expected limit {limit}, got {result.limit}"
    assert len(result.data) <= limit, (
        f"Page holds {len(result.data)} items, more than limit {limit}"
    )


def assert_all_match(result: PaginatedResult, field: str, value: Any) -> None:
    """Assert every record in a listing has field == value."""
    for record in result.data:
        actual = _field(record, field)
        assert actual == value, (
            f"Record {_field(record, 'id')!r} has {field}={actual!r}, expected {value!r}"
        )


def assert_pump_exists(api: PumpMasterApi, pump_id: int | str) -> PumpRecord:
    """Assert the pump can be read back. Returns the fetched record."""
    pump = api.get_pump(pump_id)
    assert pump.id == pump_id, f"Expected pump id {pump_id!r}, got {pump.id!r}"
    return pump


def assert_pump_does_not_exist(api: PumpMasterApi, pump_id: int | str) -> None:
    """Assert reading the pump fails with a 404."""
    try:
        api.get_pump(pump_id)
    except ApiError as e:
        assert "404" in str(e), f"Expected a 404 for pump {pump_id!r}, got: {e}"
        return
    raise AssertionError(f"Pump {pump_id!r} still exists")


def assert_validation_failure(failure: FailureResult, status: int = 400) -> None:
    """Assert a rejected request came back with the validation status and an error body."""
    assert_status_code(failure, status)
    assert failure.error, f"Expected an error body for status {status}"


def assert_jwt_format(token: str) -> None:
    assert token, "Expected a token, got nothing"
    assert JWT_PATTERN.match(token), f"Token is not a three-part JWT: {token!r}"
