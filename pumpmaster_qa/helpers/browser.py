"""
Browser-level helpers built on the Playwright sync API.

Viewport presets, network simulation, API mocking, waits and simple
performance probes. Nothing here knows about Pump Master screens.
"""
import json
import logging
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from playwright.sync_api import Browser, BrowserContext, Page, Route

from ..config import get_settings

logger = logging.getLogger(__name__)

MOBILE_VIEWPORT = {"width": 375, "height": 667}
TABLET_VIEWPORT = {"width": 768, "height": 1024}
DESKTOP_VIEWPORT = {"width": 1920, "height": 1080}

VIEWPORTS = {
    "mobile": MOBILE_VIEWPORT,
    "tablet": TABLET_VIEWPORT,
    "desktop": DESKTOP_VIEWPORT,
}

SLOW_NETWORK_DELAY = 2.0  # seconds
STABLE_POLL_INTERVAL_MS = 100


# -----------------------------------------------------------------------------
# Viewports
# -----------------------------------------------------------------------------

def set_viewport(page: Page, device: str) -> None:
    """Resize the page to the mobile, tablet or desktop preset."""
    if device not in VIEWPORTS:
        raise ValueError(f"Unknown device {device!r}; expected one of {sorted(VIEWPORTS)}")
    page.set_viewport_size(VIEWPORTS[device])


def set_mobile_viewport(page: Page) -> None:
    set_viewport(page, "mobile")


def set_tablet_viewport(page: Page) -> None:
    set_viewport(page, "tablet")


def set_desktop_viewport(page: Page) -> None:
    set_viewport(page, "desktop")


# -----------------------------------------------------------------------------
# Network simulation and mocking
# -----------------------------------------------------------------------------

def simulate_slow_network(page: Page, delay: float = SLOW_NETWORK_DELAY) -> None:
    """Hold every request for delay seconds before letting it through."""
    def handler(route: Route) -> None:
        time.sleep(delay)
        route.continue_()

    page.route("**/*", handler)


def simulate_offline(page: Page) -> None:
    page.context.set_offline(True)


def restore_online(page: Page) -> None:
    page.context.set_offline(False)


def mock_api_response(page: Page, endpoint: str, response: Any) -> None:
    """Answer every request whose URL contains endpoint with 200 and a JSON body."""
    mock_api_error(page, endpoint, status=200, error=response)


def mock_api_error(page: Page, endpoint: str, status: int = 500, error: Any = None) -> None:
    body = json.dumps(error if error is not None else {})

    def handler(route: Route) -> None:
        route.fulfill(status=status, content_type="application/json", body=body)

    page.route(f"**/*{endpoint}*", handler)


# -----------------------------------------------------------------------------
# Waits and interactions
# -----------------------------------------------------------------------------

def wait_for_network_idle(page: Page, timeout: float = 30000) -> None:
    page.wait_for_load_state("networkidle", timeout=timeout)


def wait_for_images(page: Page) -> None:
    page.wait_for_function(
        "() => Array.from(document.querySelectorAll('img')).every(img => img.complete)"
    )


def scroll_to_element(page: Page, selector: str) -> None:
    locator = page.locator(selector)
    locator.scroll_into_view_if_needed()
    locator.wait_for(state="visible")


def type_with_delay(page: Page, selector: str, text: str, delay: float = 100) -> None:
    """Type one character at a time, pausing delay milliseconds between keys."""
    locator = page.locator(selector)
    locator.click()
    locator.clear()
    locator.press_sequentially(text, delay=delay)


def hover_with_movement(page: Page, selector: str) -> None:
    locator = page.locator(selector)
    box = locator.bounding_box()
    if box:
        page.mouse.move(box["x"] + box["width"] / 2, box["y"] + box["height"] / 2, steps=5)
        locator.hover()


def wait_for_element_stable(page: Page, selector: str, timeout: float = 10000) -> None:
    """Wait until two consecutive bounding-box reads agree.

    Raises:
        TimeoutError: If the element keeps moving (or never appears) for timeout ms
    """
    previous = None
    deadline = time.monotonic() + timeout / 1000
    locator = page.locator(selector)
    while time.monotonic() < deadline:
        box = locator.bounding_box()
        if box:
            current = (box["x"], box["y"])
            if current == previous:
                return
            previous = current
        page.wait_for_timeout(STABLE_POLL_INTERVAL_MS)
    raise TimeoutError(f"Element {selector} did not stabilize within {timeout}ms")


# -----------------------------------------------------------------------------
# Browser state
# -----------------------------------------------------------------------------

def clear_browser_data(context: BrowserContext) -> None:
    context.clear_cookies()
    context.clear_permissions()
    for page in context.pages:
        page.evaluate("() => { localStorage.clear(); sessionStorage.clear(); }")


def create_clean_context(browser: Browser, **kwargs) -> BrowserContext:
    """New context with no granted permissions and no stored state."""
    return browser.new_context(permissions=[], storage_state=None, **kwargs)


# -----------------------------------------------------------------------------
# Screenshots and files
# -----------------------------------------------------------------------------

def take_timestamped_screenshot(page: Page, name: str, directory: Path | None = None) -> Path:
    directory = directory or get_settings().screenshot_dir
    stamp = datetime.now(timezone.utc).isoformat().replace(":", "-").replace(".", "-")
    path = Path(directory) / f"{name}-{stamp}.png"
    page.screenshot(path=str(path), full_page=True)
    return path


def download_file(page: Page, download_selector: str, directory: Path | None = None) -> str:
    """Click the selector, save the resulting download and return its filename."""
    directory = directory or get_settings().download_dir
    with page.expect_download() as download_info:
        page.click(download_selector)
    download = download_info.value
    filename = download.suggested_filename
    download.save_as(str(Path(directory) / filename))
    logger.debug("Downloaded %s", filename)
    return filename


def upload_file(page: Page, input_selector: str, file_path: str | Path) -> None:
    page.locator(input_selector).set_input_files(str(file_path))


# -----------------------------------------------------------------------------
# Performance probes
# -----------------------------------------------------------------------------

def measure_page_load_time(page: Page, url: str) -> float:
    """Seconds from navigation start until the network goes idle."""
    start = time.perf_counter()
    page.goto(url)
    page.wait_for_load_state("networkidle")
    return time.perf_counter() - start


def get_memory_usage(page: Page) -> dict[str, int]:
    """JS heap figures; zeros on browsers without performance.memory."""
    return page.evaluate(
        """() => ({
            usedJSHeapSize: performance.memory?.usedJSHeapSize || 0,
            totalJSHeapSize: performance.memory?.totalJSHeapSize || 0,
            jsHeapSizeLimit: performance.memory?.jsHeapSizeLimit || 0,
        })"""
    )
