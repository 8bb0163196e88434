"""
Shared interaction primitives for the screen models.

Screens do not inherit from a base page; each one receives an
InteractionKit wrapping the Playwright page and calls it for waits,
clicks, fills, verifications, gestures and device-class checks.
"""
import enum
import logging
from pathlib import Path
from typing import Pattern

from playwright.sync_api import Locator, Page, expect
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from ..config import get_settings

logger = logging.getLogger(__name__)

DEFAULT_WAIT_TIMEOUT = 10000  # ms
VISIBILITY_PROBE_TIMEOUT = 5000  # ms

TABLET_MIN_WIDTH = 768
DESKTOP_MIN_WIDTH = 1024


class DeviceClass(str, enum.Enum):
    MOBILE = "mobile"
    TABLET = "tablet"
    DESKTOP = "desktop"


def classify_viewport(width: int) -> DeviceClass:
    """Mobile below 768px, tablet from 768 to 1023px, desktop from 1024px."""
    if width < TABLET_MIN_WIDTH:
        return DeviceClass.MOBILE
    if width < DESKTOP_MIN_WIDTH:
        return DeviceClass.TABLET
    return DeviceClass.DESKTOP


class LayoutError(AssertionError):
    """A responsive layout check failed."""
    pass


class InteractionKit:
    """Wait/click/fill/verify primitives over one Playwright page."""

    def __init__(self, page: Page, screenshot_dir: Path | None = None):
        self.page = page
        self.screenshot_dir = screenshot_dir or get_settings().screenshot_dir

    def by_test_id(self, test_id: str) -> Locator:
        return self.page.get_by_test_id(test_id)

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def navigate(self, url: str) -> None:
        self.page.goto(url)
        self.wait_for_page_load()

    def wait_for_page_load(self) -> None:
        self.page.wait_for_load_state("networkidle")

    def get_title(self) -> str:
        return self.page.title()

    def get_current_url(self) -> str:
        return self.page.url

    def wait_for_url(self, url: str, timeout: float = DEFAULT_WAIT_TIMEOUT) -> None:
        self.page.wait_for_url(url, timeout=timeout)

    def take_screenshot(self, name: str) -> Path:
        path = Path(self.screenshot_dir) / f"{name}.png"
        self.page.screenshot(path=str(path), full_page=True)
        logger.debug("Saved screenshot %s", path)
        return path

    # -------------------------------------------------------------------------
    # Element interaction
    # -------------------------------------------------------------------------

    def wait_for_element(self, locator: Locator, timeout: float = DEFAULT_WAIT_TIMEOUT) -> None:
        locator.wait_for(state="visible", timeout=timeout)

    def click_element(self, locator: Locator) -> None:
        self.wait_for_element(locator)
        locator.click()

    def fill_input(self, locator: Locator, text: str) -> None:
        self.wait_for_element(locator)
        locator.clear()
        locator.fill(text)

    def select_dropdown_option(self, locator: Locator, option: str) -> None:
        self.wait_for_element(locator)
        locator.select_option(option)

    def get_text(self, locator: Locator) -> str:
        self.wait_for_element(locator)
        return locator.text_content() or ""

    def is_element_visible(self, locator: Locator, timeout: float = VISIBILITY_PROBE_TIMEOUT) -> bool:
        """Probe for visibility; a timeout means False, never an error."""
        try:
            locator.wait_for(state="visible", timeout=timeout)
        except PlaywrightTimeoutError:
            return False
        return True

    def is_element_enabled(self, locator: Locator) -> bool:
        self.wait_for_element(locator)
        return locator.is_enabled()

    def scroll_to_element(self, locator: Locator) -> None:
        locator.scroll_into_view_if_needed()

    def press_key(self, key: str) -> None:
        self.page.keyboard.press(key)

    # -------------------------------------------------------------------------
    # Verification
    # -------------------------------------------------------------------------

    def verify_element_text(self, locator: Locator, expected_text: str) -> None:
        expect(locator).to_have_text(expected_text)

    def verify_element_contains_text(self, locator: Locator, expected_text: str) -> None:
        expect(locator).to_contain_text(expected_text)

    def verify_element_visible(self, locator: Locator) -> None:
        expect(locator).to_be_visible()

    def verify_element_hidden(self, locator: Locator) -> None:
        expect(locator).to_be_hidden()

    def verify_element_enabled(self, locator: Locator) -> None:
        expect(locator).to_be_enabled()

    def verify_element_disabled(self, locator: Locator) -> None:
        expect(locator).to_be_disabled()

    def verify_element_value(self, locator: Locator, value: str) -> None:
        expect(locator).to_have_value(value)

    def verify_element_count(self, locator: Locator, count: int) -> None:
        expect(locator).to_have_count(count)

    def verify_url(self, url: str | Pattern[str]) -> None:
        expect(self.page).to_have_url(url)

    # -------------------------------------------------------------------------
    # Gestures
    # -------------------------------------------------------------------------

    def _drag_horizontally(self, start_ratio: float, end_ratio: float) -> None:
        viewport = self.viewport_size()
        if not viewport:
            return
        y = viewport["height"] * 0.5
        self.page.mouse.move(viewport["width"] * start_ratio, y)
        self.page.mouse.down()
        self.page.mouse.move(viewport["width"] * end_ratio, y)
        self.page.mouse.up()

    def swipe_left(self) -> None:
        self._drag_horizontally(0.8, 0.2)

    def swipe_right(self) -> None:
        self._drag_horizontally(0.2, 0.8)

    def pinch_zoom(self, scale: float = 2) -> None:
        """Dispatch a ctrl+wheel event: zoom in for scale > 1, out otherwise."""
        self.page.evaluate(
            """scale => document.dispatchEvent(new WheelEvent('wheel', {
                deltaY: scale > 1 ? -100 : 100,
                ctrlKey: true,
            }))""",
            scale,
        )

    # -------------------------------------------------------------------------
    # Device classes
    # -------------------------------------------------------------------------

    def viewport_size(self) -> dict[str, int] | None:
        return self.page.viewport_size

    def device_class(self) -> DeviceClass | None:
        viewport = self.viewport_size()
        if not viewport:
            return None
        return classify_viewport(viewport["width"])

    def is_mobile(self) -> bool:
        return self.device_class() == DeviceClass.MOBILE

    def is_tablet(self) -> bool:
        return self.device_class() == DeviceClass.TABLET

    def is_desktop(self) -> bool:
        return self.device_class() == DeviceClass.DESKTOP

    def element_box(self, locator: Locator) -> dict[str, float] | None:
        """Bounding box of the element, None when it is not rendered."""
        return locator.bounding_box()
