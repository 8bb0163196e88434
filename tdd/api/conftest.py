"""
Fixtures for the live REST API suite.

Every test gets its own client; records it creates are deleted on
teardown, first by id and then by a sweep over pumps carrying this run's tag.
"""
import logging

import pytest

from pumpmaster_qa.api import CLEANUP_RUN, ApiError, PumpMasterApi, PumpRecord
from pumpmaster_qa.factories.api import login_credentials
from shared.live import require_backend

logger = logging.getLogger(__name__)


@pytest.fixture(scope="session")
def api_base_url(settings) -> str:
    require_backend(settings.api_base_url)
    return settings.api_base_url


@pytest.fixture
def api(api_base_url, run_sequence):
    """Unauthenticated client; this run's pumps are swept on teardown."""
    client = PumpMasterApi(api_base_url, run_tag=run_sequence.run_tag)
    yield client
    client.cleanup(scope=CLEANUP_RUN)


@pytest.fixture
def authed_api(api, settings) -> PumpMasterApi:
    """Client logged in as the web test user."""
    api.login(login_credentials(settings))
    return api


@pytest.fixture
def created_pumps(authed_api):
    """Track pumps a test creates; each is deleted on teardown.

    Usage:
        pump = created_pumps.add(authed_api.create_pump(payload))
    """
    tracker = PumpTracker()
    yield tracker
    for pump_id in tracker.ids:
        try:
            authed_api.delete_pump(pump_id)
        except ApiError as e:
            logger.warning("Failed to clean up pump %s: %s", pump_id, e)


class PumpTracker:
    def __init__(self):
        self.ids: list[int | str] = []

    def add(self, pump: PumpRecord) -> PumpRecord:
        if pump.id is not None:
            self.ids.append(pump.id)
        return pump
