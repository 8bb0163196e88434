"""
Root conftest.py - Shared fixtures for all test types.

This file is automatically loaded by pytest and provides:
- Settings read from the environment (and .env)
- A run-scoped sequence and test data factory
- Location-based markers
"""
import pytest

from pumpmaster_qa.config import Settings, get_settings
from pumpmaster_qa.factories import RunSequence, TestDataFactory


# -----------------------------------------------------------------------------
# Configuration Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture(scope="session")
def settings() -> Settings:
    """Settings for the deployment under test."""
    return get_settings()


# -----------------------------------------------------------------------------
# Test Data Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture(scope="session")
def run_sequence() -> RunSequence:
    """One sequence per worker process.

    Its run tag embeds the xdist worker id, so names never collide between
    workers or between consecutive runs against the same backend.
    """
    return RunSequence()


@pytest.fixture
def data_factory(run_sequence: RunSequence) -> TestDataFactory:
    return TestDataFactory(run_sequence)


# -----------------------------------------------------------------------------
# Marker-based fixtures
# -----------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _mark_test(request):
    """Automatically apply markers based on test location."""
    parts = request.node.path.parts
    if "unit" in parts:
        request.applymarker(pytest.mark.unit)
    elif "api" in parts:
        request.applymarker(pytest.mark.api)
    elif "web" in parts:
        request.applymarker(pytest.mark.web)
