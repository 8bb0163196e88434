"""
Conftest for unit tests.

Screen models and steps run against a fake Playwright page; ``expect`` is
patched so verifications become recorded calls.
"""
from unittest.mock import MagicMock, patch

import pytest

from pumpmaster_qa.config import Settings
from pumpmaster_qa.pages.interaction_kit import InteractionKit
from shared.mocks import DESKTOP_VIEWPORT, make_page


@pytest.fixture
def unit_settings(tmp_path) -> Settings:
    return Settings(screenshot_dir=tmp_path / "shots", download_dir=tmp_path / "downloads")


@pytest.fixture
def fake_page():
    return make_page(DESKTOP_VIEWPORT)


@pytest.fixture
def expect_mock():
    """Patched playwright expect().

    ``expect_mock.on(target)`` is the assertion object expect() returned
    for that target, e.g. ``expect_mock.on(button).to_be_visible``.
    """
    assertions: dict[int, MagicMock] = {}

    def fake_expect(target):
        if id(target) not in assertions:
            assertions[id(target)] = MagicMock(name="expect()")
        return assertions[id(target)]

    with patch("pumpmaster_qa.pages.interaction_kit.expect", side_effect=fake_expect) as mock:
        mock.on = fake_expect
        yield mock


@pytest.fixture
def kit(fake_page, expect_mock, unit_settings) -> InteractionKit:
    return InteractionKit(fake_page, screenshot_dir=unit_settings.screenshot_dir)
