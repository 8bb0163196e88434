"""
Tests for the Playwright browser helpers, against a fake page.
"""
import json
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from pumpmaster_qa.helpers import browser
from shared.mocks import MOBILE_VIEWPORT, TABLET_VIEWPORT, box, make_page


@pytest.fixture
def page():
    return make_page()


class TestViewports:
    def test_presets(self, page):
        browser.set_mobile_viewport(page)
        page.set_viewport_size.assert_called_with(MOBILE_VIEWPORT)
        browser.set_tablet_viewport(page)
        page.set_viewport_size.assert_called_with(TABLET_VIEWPORT)
        browser.set_desktop_viewport(page)
        page.set_viewport_size.assert_called_with({"width": 1920, "height": 1080})

    def test_unknown_device(self, page):
        with pytest.raises(ValueError, match="watch"):
            browser.set_viewport(page, "watch")


class TestNetwork:
    def test_offline_toggle(self, page):
        browser.simulate_offline(page)
        page.context.set_offline.assert_called_with(True)
        browser.restore_online(page)
        page.context.set_offline.assert_called_with(False)

    def test_mock_api_response_fulfils_json(self, page):
        browser.mock_api_response(page, "/pumps", {"data": []})

        pattern, handler = page.route.call_args.args
        assert pattern == "**/*/pumps*"
        route = MagicMock()
        handler(route)
        route.fulfill.assert_called_once_with(
            status=200, content_type="application/json", body=json.dumps({"data": []})
        )

    def test_mock_api_error_defaults(self, page):
        browser.mock_api_error(page, "/auth/login")

        _, handler = page.route.call_args.args
        route = MagicMock()
        handler(route)
        assert route.fulfill.call_args.kwargs["status"] == 500
        assert route.fulfill.call_args.kwargs["body"] == "{}"

    def test_slow_network_delays_then_continues(self, page):
        browser.simulate_slow_network(page, delay=1.5)

        _, handler = page.route.call_args.args
        route = MagicMock()
        with patch("pumpmaster_qa.helpers.browser.time.sleep") as sleep:
            handler(route)
        sleep.assert_called_once_with(1.5)
        route.continue_.assert_called_once()


class TestWaits:
    def test_stable_element(self, page):
        page.locator.return_value.bounding_box.side_effect = [box(10, x=0), box(10, x=5), box(10, x=5)]
        browser.wait_for_element_stable(page, "#card")
        assert page.wait_for_timeout.call_count == 2

    def test_unstable_element_times_out(self, page):
        page.locator.return_value.bounding_box.return_value = None
        with patch("pumpmaster_qa.helpers.browser.time.monotonic", side_effect=[0, 0, 1, 2]):
            with pytest.raises(TimeoutError, match="#card"):
                browser.wait_for_element_stable(page, "#card", timeout=1500)

    def test_type_with_delay(self, page):
        browser.type_with_delay(page, "#search", "abc", delay=50)
        page.locator.return_value.press_sequentially.assert_called_once_with("abc", delay=50)

    def test_hover_skips_unrendered(self, page):
        page.locator.return_value.bounding_box.return_value = None
        browser.hover_with_movement(page, "#card")
        page.mouse.move.assert_not_called()


class TestFiles:
    def test_timestamped_screenshot(self, page, tmp_path):
        path = browser.take_timestamped_screenshot(page, "login", tmp_path)

        assert path.parent == tmp_path
        assert path.name.startswith("login-") and path.suffix == ".png"
        page.screenshot.assert_called_once_with(path=str(path), full_page=True)

    def test_download_file(self, page, tmp_path):
        download = page.expect_download.return_value.__enter__.return_value.value
        download.suggested_filename = "pumps.csv"

        assert browser.download_file(page, "#export", tmp_path) == "pumps.csv"
        page.click.assert_called_once_with("#export")
        download.save_as.assert_called_once_with(str(Path(tmp_path) / "pumps.csv"))

    def test_upload_file(self, page, tmp_path):
        browser.upload_file(page, "#import", tmp_path / "pumps.json")
        page.locator.return_value.set_input_files.assert_called_once_with(str(tmp_path / "pumps.json"))


class TestContexts:
    def test_clean_context(self):
        fake_browser = MagicMock()
        browser.create_clean_context(fake_browser, viewport=MOBILE_VIEWPORT)
        fake_browser.new_context.assert_called_once_with(
            permissions=[], storage_state=None, viewport=MOBILE_VIEWPORT
        )

    def test_clear_browser_data(self):
        context = MagicMock()
        context.pages = [MagicMock(), MagicMock()]
        browser.clear_browser_data(context)
        context.clear_cookies.assert_called_once()
        for p in context.pages:
            p.evaluate.assert_called_once()
