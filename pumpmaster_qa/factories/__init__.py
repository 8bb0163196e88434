# Test data factories for pumps, users and API payloads

from .api import (
    api_credentials,
    invalid_login_credentials,
    invalid_pump_payload,
    login_credentials,
    pump_create_payload,
    pump_update_payload,
)
from .base import RunSequence, generate_run_tag
from .data_factory import TestDataFactory
from .models import PumpFactory, UserFactory

__all__ = [
    # Base utilities
    "RunSequence",
    "generate_run_tag",
    # Record factories
    "PumpFactory",
    "UserFactory",
    "TestDataFactory",
    # API factories
    "pump_create_payload",
    "pump_update_payload",
    "invalid_pump_payload",
    "login_credentials",
    "api_credentials",
    "invalid_login_credentials",
]
