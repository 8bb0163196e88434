"""
HTTP transport for the Pump Master API.

Owns one requests session and the bearer token slot. Every exchange comes
back as an HttpResult; status codes are never interpreted here.
"""

import logging
from typing import Any

import requests

from .models import HttpResult

logger = logging.getLogger(__name__)


class HttpTransport:
    """Thin wrapper over requests.Session returning HttpResult."""

    def __init__(self, base_url: str, session: requests.Session | None = None):
        """
        Args:
            base_url: API root, e.g. "http://localhost:3000/api"
            session: Optional session (a new one is created if not provided)
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.token: str | None = None

    def url_for(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def headers(self, authenticated: bool = True, json_body: bool = True) -> dict[str, str]:
        headers = {}
        if json_body:
            headers["Content-Type"] = "application/json"
        if authenticated and self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: dict[str, Any] | None = None,
        files: dict[str, Any] | None = None,
        data: dict[str, Any] | str | None = None,
        authenticated: bool = True,
        headers: dict[str, str] | None = None,
    ) -> HttpResult:
        """
        Perform one request and capture its outcome.

        Args:
            method: HTTP method
            path: Path relative to the API root
            json: JSON body
            params: Query parameters (URL-encoded by requests)
            files: Multipart files; suppresses the JSON content type
            data: Multipart form fields, or a raw body string
            authenticated: Send the stored bearer token when one is held
            headers: Extra headers, applied last

        Raises:
            requests.RequestException: On connection-level failures
        """
        request_headers = self.headers(
            authenticated=authenticated,
            json_body=files is None,
        )
        if headers:
            request_headers.update(headers)

        response = self.session.request(
            method,
            self.url_for(path),
            json=json,
            params=params,
            files=files,
            data=data,
            headers=request_headers,
        )
        logger.debug("%s %s -> %s", method, path, response.status_code)
        return HttpResult(
            status_code=response.status_code,
            body=_decode_body(response),
            headers=dict(response.headers),
            content=response.content,
        )


def _decode_body(response: requests.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text
