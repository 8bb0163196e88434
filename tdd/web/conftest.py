"""
Browser fixtures for the live web suite.

Built on pytest-playwright: its ``page`` fixture gives each test a fresh
context, and the overrides below point it at BASE_URL with a desktop
viewport. Device-specific tests resize the page themselves.

Pumps a test needs are seeded through the API with run-unique names and
removed afterwards, so tests never depend on fixed backend data.
"""
import logging

import pytest

from pumpmaster_qa.api import CLEANUP_RUN, ApiError, PumpMasterApi
from pumpmaster_qa.factories.api import login_credentials, pump_create_payload
from pumpmaster_qa.helpers.browser import DESKTOP_VIEWPORT
from pumpmaster_qa.pages import InteractionKit, LoginPage, PumpEditModal, PumpsOverviewPage
from shared.live import require_backend

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# pytest-playwright overrides
# -----------------------------------------------------------------------------

@pytest.fixture(scope="session")
def base_url(settings) -> str:
    require_backend(settings.base_url)
    return settings.base_url


@pytest.fixture(scope="session")
def browser_context_args(browser_context_args, base_url):
    return {**browser_context_args, "base_url": base_url, "viewport": DESKTOP_VIEWPORT}


# -----------------------------------------------------------------------------
# Screen models
# -----------------------------------------------------------------------------

@pytest.fixture
def kit(page, settings) -> InteractionKit:
    settings.screenshot_dir.mkdir(parents=True, exist_ok=True)
    return InteractionKit(page, screenshot_dir=settings.screenshot_dir)


@pytest.fixture
def login_page(kit) -> LoginPage:
    return LoginPage(kit)


@pytest.fixture
def overview(kit) -> PumpsOverviewPage:
    return PumpsOverviewPage(kit)


@pytest.fixture
def modal(kit) -> PumpEditModal:
    return PumpEditModal(kit)


@pytest.fixture
def logged_in(kit, login_page, overview, settings):
    """Log in as the web test user and open the pumps overview."""
    creds = login_credentials(settings)
    login_page.navigate_to_login()
    login_page.login(creds.username, creds.password)
    kit.wait_for_url("**/pumps")
    overview.navigate_to_pumps_overview()


# -----------------------------------------------------------------------------
# API-seeded data
# -----------------------------------------------------------------------------

@pytest.fixture
def seed_api(settings, run_sequence):
    """Logged-in API client for seeding; sweeps this run's pumps on teardown."""
    require_backend(settings.api_base_url)
    client = PumpMasterApi(settings.api_base_url, run_tag=run_sequence.run_tag)
    client.login(login_credentials(settings))
    yield client
    client.cleanup(scope=CLEANUP_RUN)


@pytest.fixture
def seed_pump(seed_api, run_sequence):
    """Factory creating pumps through the API; each is deleted on teardown.

    Usage:
        pump = seed_pump("Test Pump for Edit")
    """
    created = []

    def _seed(prefix: str, **overrides):
        payload = pump_create_payload(name=run_sequence.unique(prefix), **overrides)
        pump = seed_api.create_pump(payload)
        created.append(pump)
        return pump

    yield _seed

    for pump in created:
        try:
            seed_api.delete_pump(pump.id)
        except ApiError as e:
            logger.debug("Seeded pump %s already gone: %s", pump.id, e)
