"""
Tests for random data helpers and format validators.
"""
import re
from datetime import date, timedelta

import pytest

from pumpmaster_qa.factories import RunSequence, TestDataFactory
from pumpmaster_qa.helpers.data import (
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


class TestRandomValues:
    def test_test_id_format(self):
        assert re.fullmatch(r"test-\d{13}-[a-z0-9]{9}", generate_test_id())

    def test_random_email_is_valid(self):
        assert is_valid_email(random_email())

    def test_random_string_length(self):
        assert len(random_string()) == 10
        assert len(random_string(32)) == 32

    def test_random_number_bounds(self):
        for _ in range(50):
            assert 3 <= random_number(3, 5) <= 5

    def test_random_date_within_range(self):
        value = random_date(2)
        assert is_valid_date(value)
        parsed = date.fromisoformat(value)
        assert date.today() - timedelta(days=2 * 366) <= parsed <= date.today()


class TestValidators:
    @pytest.mark.parametrize("value,valid", [
        ("user@example.com", True),
        ("test+user@example.com", True),
        ("no-at-sign.com", False),
        ("spaces in@example.com", False),
        ("user@nodot", False),
    ])
    def test_email(self, value, valid):
        assert is_valid_email(value) is valid

    @pytest.mark.parametrize("value,valid", [
        ("http://localhost:3000", True),
        ("https://example.com/pumps?page=2", True),
        ("file:///tmp/pumps.csv", True),
        ("/relative/path", False),
        ("not a url", False),
    ])
    def test_url(self, value, valid):
        assert is_valid_url(value) is valid

    @pytest.mark.parametrize("value,valid", [
        ("2024-02-29", True),
        ("2023-02-29", False),
        ("2024-13-01", False),
        ("24-01-01", False),
        ("2024-01-01T00:00:00", False),
    ])
    def test_date(self, value, valid):
        assert is_valid_date(value) is valid


class TestBundles:
    def test_login_bundle(self):
        data = login_test_data(TestDataFactory(RunSequence("t")))
        assert set(data) == {"validCredentials", "invalidCredentials", "emptyCredentials", "specialCharacters"}
        assert data["emptyCredentials"] == {"username": "", "password": ""}

    def test_pump_bundle(self):
        data = pump_test_data(TestDataFactory(RunSequence("t")))
        assert "t-" in data["validPump"]["name"]
        assert len(data["boundaryPumps"]) == 3
        assert len(data["searchPumps"]) == 5
        assert len(data["filterPumps"]) == 12
