"""
Mock infrastructure for offline unit tests.

Provides fake requests responses, canned API bodies and a Playwright page
double whose test-id locators are stable per id, so a test can reach the
exact locator a screen model used.
"""

import json
from typing import Any
from unittest.mock import MagicMock

import requests

DESKTOP_VIEWPORT = {"width": 1920, "height": 1080}
TABLET_VIEWPORT = {"width": 768, "height": 1024}
MOBILE_VIEWPORT = {"width": 375, "height": 667}


# =============================================================================
# HTTP
# =============================================================================


def make_response(
    status_code: int = 200,
    json_body: Any = None,
    text: str | None = None,
    content: bytes | None = None,
    headers: dict[str, str] | None = None,
) -> MagicMock:
    """Fake requests.Response.

    json_body wins over text, text over content. With none of them the
    response has an empty body.
    """
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    response.headers = headers or {}
    if json_body is not None:
        response.content = json.dumps(json_body).encode()
        response.json.return_value = json_body
        response.text = response.content.decode()
    elif text is not None:
        response.content = text.encode()
        response.json.side_effect = ValueError("not json")
        response.text = text
    else:
        response.content = content or b""
        response.json.side_effect = ValueError("empty body")
        response.text = response.content.decode(errors="replace")
    return response


def make_session(*responses: MagicMock) -> MagicMock:
    """Fake requests.Session answering request() with responses in order."""
    session = MagicMock(spec=requests.Session)
    if len(responses) == 1:
        session.request.return_value = responses[0]
    elif responses:
        session.request.side_effect = list(responses)
    return session


def sent_request(session: MagicMock, index: int = -1) -> tuple[str, str, dict[str, Any]]:
    """(method, url, kwargs) of one recorded session.request() call."""
    call = session.request.call_args_list[index]
    method, url = call.args
    return method, url, call.kwargs


# =============================================================================
# Canned API bodies
# =============================================================================


def pump_json(**overrides) -> dict[str, Any]:
    """A pump as the backend returns it, with id and timestamps."""
    body = {
        "id": 1,
        "name": "Test Pump",
        "type": "Centrifugal",
        "area": "Building A - Room 101",
        "latitude": 40.7128,
        "longitude": -74.006,
        "flowRate": "1000 GPM",
        "offset": 0,
        "currentPressure": 150,
        "minPressure": 100,
        "maxPressure": 200,
        "status": "Active",
        "createdAt": "2024-01-01T00:00:00Z",
        "updatedAt": "2024-01-01T00:00:00Z",
    }
    body.update(overrides)
    return body


def page_json(
    items: list[dict[str, Any]],
    total: int | None = None,
    page: int = 1,
    limit: int = 10,
) -> dict[str, Any]:
    total = len(items) if total is None else total
    return {
        "data": items,
        "total": total,
        "page": page,
        "limit": limit,
        "totalPages": -(-total // limit),
    }


def auth_json(token: str = "header.payload.signature", username: str = "test@pumpmaster.com") -> dict[str, Any]:
    return {
        "token": token,
        "user": {"id": 7, "username": username, "email": username, "tenantId": "tenant-1"},
        "expiresIn": 3600,
    }


# =============================================================================
# Playwright
# =============================================================================


def make_page(viewport: dict[str, int] | None = DESKTOP_VIEWPORT) -> MagicMock:
    """Fake Playwright Page.

    get_by_test_id() returns the same MagicMock for the same id; the
    locators created so far are kept in ``page.test_ids``.
    """
    page = MagicMock(name="page")
    test_ids: dict[str, MagicMock] = {}

    def by_test_id(test_id: str) -> MagicMock:
        if test_id not in test_ids:
            test_ids[test_id] = MagicMock(name=test_id)
        return test_ids[test_id]

    page.get_by_test_id.side_effect = by_test_id
    page.test_ids = test_ids
    page.viewport_size = viewport
    return page


def box(width: float, height: float = 100, x: float = 0, y: float = 0) -> dict[str, float]:
    """Bounding box as returned by Locator.bounding_box()."""
    return {"x": x, "y": y, "width": width, "height": height}
