# Custom assertion helpers

from .api import (
    assert_all_match,
    assert_jwt_format,
    assert_page_window,
    assert_paginated_response,
    assert_pump_data,
    assert_pump_does_not_exist,
    assert_pump_exists,
    assert_status_code,
    assert_validation_failure,
)

__all__ = [
    "assert_status_code",
    "assert_pump_data",
    "assert_paginated_response",
    "assert_page_window",
    "assert_all_match",
    "assert_pump_exists",
    "assert_pump_does_not_exist",
    "assert_validation_failure",
    "assert_jwt_format",
]
