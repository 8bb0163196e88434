"""
Random values, format validators and ready-made test data bundles.
"""
import random
import re
import string
import time
from datetime import date
from typing import Any
from urllib.parse import urlparse

from faker import Faker

from ..factories.data_factory import TestDataFactory

fake = Faker()

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def generate_test_id() -> str:
    """Test id of the form 'test-<epoch ms>-<9 random chars>'."""
    suffix = "".join(random.choices(string.ascii_lowercase + string.digits, k=9))
    return f"test-{int(time.time() * 1000)}-{suffix}"


def random_email() -> str:
    return f"test{int(time.time() * 1000)}{fake.random_int(0, 999)}@example.com"


def random_string(length: int = 10) -> str:
    return "".join(random.choices(string.ascii_lowercase + string.digits, k=length))


def random_number(min_value: int = 1, max_value: int = 1000) -> int:
    return random.randint(min_value, max_value)


def random_date(years_back: int = 5) -> str:
    """ISO date (YYYY-MM-DD) between years_back years ago and today."""
    return fake.date_between(start_date=f"-{years_back}y", end_date="today").isoformat()


def is_valid_email(value: str) -> bool:
    return bool(EMAIL_PATTERN.match(value))


def is_valid_url(value: str) -> bool:
    parsed = urlparse(value)
    return bool(parsed.scheme and (parsed.netloc or parsed.path))


def is_valid_date(value: str) -> bool:
    if not DATE_PATTERN.match(value):
        return False
    try:
        date.fromisoformat(value)
    except ValueError:
        return False
    return True


def login_test_data(factory: TestDataFactory | None = None) -> dict[str, dict[str, str]]:
    factory = factory or TestDataFactory()
    return {
        "validCredentials": factory.create_user(),
        "invalidCredentials": {"username": "invalid@test.com", "password": "wrongpassword"},
        "emptyCredentials": {"username": "", "password": ""},
        "specialCharacters": {
            "username": "test+user@example.com",
            "password": "Test@123!#$%^&*()",
        },
    }


def pump_test_data(factory: TestDataFactory | None = None) -> dict[str, Any]:
    factory = factory or TestDataFactory()
    return {
        "validPump": factory.create_pump(),
        "invalidPump": factory.create_invalid_pump(),
        "incompletePump": factory.create_incomplete_pump(),
        "boundaryPumps": factory.create_boundary_test_pumps(),
        "searchPumps": factory.create_search_test_pumps(),
        "filterPumps": factory.create_filter_test_pumps(),
    }
