# Cross-cutting test utilities shared across all test types

from .mocks import (
    DESKTOP_VIEWPORT,
    MOBILE_VIEWPORT,
    TABLET_VIEWPORT,
    auth_json,
    box,
    make_page,
    make_response,
    make_session,
    page_json,
    pump_json,
    sent_request,
)
from .live import backend_reachable, require_backend

__all__ = [
    # Viewports
    "DESKTOP_VIEWPORT",
    "TABLET_VIEWPORT",
    "MOBILE_VIEWPORT",
    # HTTP fakes
    "make_response",
    "make_session",
    "sent_request",
    # Canned bodies
    "pump_json",
    "page_json",
    "auth_json",
    # Playwright fakes
    "make_page",
    "box",
    # Live deployment probes
    "backend_reachable",
    "require_backend",
]
