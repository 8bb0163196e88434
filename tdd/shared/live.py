"""
Probes for the live Pump Master deployment.

The api and web suites need a running backend and frontend. When the
target is unreachable they skip instead of failing every test.
"""
import time

import httpx
import pytest

PROBE_TIMEOUT = 2  # seconds
PROBE_WINDOW = 5  # seconds


def backend_reachable(url: str, window: float = PROBE_WINDOW) -> bool:
    """True once url answers any HTTP response within window seconds."""
    start = time.time()
    while time.time() - start < window:
        try:
            httpx.get(url, timeout=PROBE_TIMEOUT)
            return True
        except httpx.HTTPError:
            time.sleep(0.5)
    return False


def require_backend(url: str) -> None:
    """Skip the calling test (or session fixture) if url is down."""
    if not backend_reachable(url):
        pytest.skip(f"Pump Master not reachable at {url}")
