"""
API request payload factories.

Fixed payloads for the API tests, where exact values matter more than
variety: the canonical "Test Pump" body, the all-invalid body and the
login credentials.
"""
from typing import Any

from ..api.models import Credentials
from ..config import Settings, get_settings


# -----------------------------------------------------------------------------
# Pump API Factories
# -----------------------------------------------------------------------------

PUMP_FIELDS = {
    "name",
    "type",
    "area",
    "latitude",
    "longitude",
    "flowRate",
    "offset",
    "currentPressure",
    "minPressure",
    "maxPressure",
    "status",
}


def pump_create_payload(**overrides) -> dict[str, Any]:
    """Create a payload for POST /pumps."""
    payload = {
        "name": "Test Pump",
        "type": "Centrifugal",
        "area": "Building A - Room 101",
        "latitude": 40.7128,
        "longitude": -74.006,
        "flowRate": "1000 GPM",
        "offset": 0,
        "currentPressure": 150,
        "minPressure": 100,
        "maxPressure": 200,
    }
    payload.update(overrides)
    return payload


def pump_update_payload(**kwargs) -> dict[str, Any]:
    """Create a payload for PUT /pumps/{id}.

    Only includes pump fields that are explicitly provided.
    """
    return {k: v for k, v in kwargs.items() if k in PUMP_FIELDS}


def invalid_pump_payload() -> dict[str, Any]:
    """Create a POST /pumps payload that fails every field validation."""
    return {
        "name": "",
        "type": "InvalidType",
        "area": "",
        "latitude": "invalid",
        "longitude": "invalid",
        "flowRate": "invalid capacity",
        "offset": "invalid",
        "currentPressure": "invalid",
        "minPressure": "invalid",
        "maxPressure": "invalid",
    }


# -----------------------------------------------------------------------------
# Auth API Factories
# -----------------------------------------------------------------------------

def login_credentials(settings: Settings | None = None) -> Credentials:
    """Web test user (TEST_USERNAME / TEST_PASSWORD)."""
    settings = settings or get_settings()
    return Credentials(username=settings.test_username, password=settings.test_password)


def api_credentials(settings: Settings | None = None) -> Credentials:
    """API scenario user (API_USERNAME / API_PASSWORD)."""
    settings = settings or get_settings()
    return Credentials(username=settings.api_username, password=settings.api_password)


def invalid_login_credentials() -> Credentials:
    return Credentials(username="invalid@example.com", password="wrongpassword")
