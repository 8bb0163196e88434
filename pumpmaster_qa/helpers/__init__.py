# Generic test helpers: browser, timing, random data, environment

from .data import (
    generate_test_id,
    is_valid_date,
    is_valid_email,
    is_valid_url,
    login_test_data,
    pump_test_data,
    random_date,
    random_email,
    random_number,
    random_string,
)
from .environment import (
    cleanup_test_data,
    get_environment,
    get_test_metadata,
    is_ci,
    is_headless,
    log,
)
from .timing import measure_action_time, retry, wait

__all__ = [
    # Data
    "generate_test_id",
    "random_email",
    "random_string",
    "random_number",
    "random_date",
    "is_valid_email",
    "is_valid_url",
    "is_valid_date",
    "login_test_data",
    "pump_test_data",
    # Environment
    "is_ci",
    "is_headless",
    "get_environment",
    "get_test_metadata",
    "log",
    "cleanup_test_data",
    # Timing
    "retry",
    "wait",
    "measure_action_time",
]
