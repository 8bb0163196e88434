"""
Pump Master API client.

Wraps authentication, pump CRUD, search/filter/pagination, bulk
operations, import/export and statistics. Each operation sends one request
through HttpTransport and applies the status it expects; a mismatch raises
an ApiError subclass whose message carries the HTTP status.

One instance holds at most one bearer token. Instances are not shared
between threads; concurrent scenarios build one client per worker.
"""

import logging
from typing import Any, Iterable

import requests
from pydantic import ValidationError

from ..config import get_settings
from .errors import ApiError, AuthenticationError, NotFoundError
from .expectations import expect_status
from .models import (
    AuthSession,
    Credentials,
    FailureResult,
    ImportSummary,
    PaginatedResult,
    PumpRecord,
    mime_type_for,
)
from .transport import HttpTransport

logger = logging.getLogger(__name__)

PumpInput = PumpRecord | dict[str, Any]

CLEANUP_RUN = "run"
CLEANUP_ALL = "all"
CLEANUP_SCOPES = (CLEANUP_RUN, CLEANUP_ALL)


def _as_payload(pump: PumpInput) -> dict[str, Any]:
    if isinstance(pump, PumpRecord):
        return pump.to_payload()
    return dict(pump)


def _as_credentials(credentials: Credentials | dict[str, str]) -> Credentials:
    if isinstance(credentials, Credentials):
        return credentials
    return Credentials.model_validate(credentials)


class PumpMasterApi:
    """Client for the Pump Master REST API."""

    CLEANUP_PAGE_LIMIT = 1000
    CLEANUP_NAME_MARKERS = ("Test",)
    CLEANUP_AREA_MARKERS = ("test", "automation")

    def __init__(
        self,
        base_url: str | None = None,
        session: requests.Session | None = None,
        run_tag: str | None = None,
    ):
        """
        Args:
            base_url: API root; defaults to API_BASE_URL from settings
            session: Optional requests session
            run_tag: Marker embedded in names of records created by this
                run; cleanup() also removes pumps carrying it
        """
        self.transport = HttpTransport(base_url or get_settings().api_base_url, session)
        self.run_tag = run_tag

    @property
    def base_url(self) -> str:
        return self.transport.base_url

    # -------------------------------------------------------------------------
    # Token slot
    # -------------------------------------------------------------------------

    @property
    def auth_token(self) -> str | None:
        return self.transport.token

    def set_auth_token(self, token: str | None) -> None:
        self.transport.token = token

    def clear_auth_token(self) -> None:
        self.transport.token = None

    # -------------------------------------------------------------------------
    # Authentication
    # -------------------------------------------------------------------------

    def login(self, credentials: Credentials | dict[str, str]) -> AuthSession:
        """POST /auth/login; stores the returned token."""
        creds = _as_credentials(credentials)
        result = self.transport.request(
            "POST",
            "/auth/login",
            json={"username": creds.username, "password": creds.password},
        )
        expect_status(result, 200, operation="login", error=AuthenticationError)
        session = AuthSession.model_validate(result.body)
        self.transport.token = session.token
        logger.info("Logged in as %s", creds.username)
        return session

    def logout(self) -> None:
        result = self.transport.request("POST", "/auth/logout")
        expect_status(result, 200, operation="logout", error=AuthenticationError)
        self.transport.token = None

    def refresh_token(self) -> AuthSession:
        result = self.transport.request("POST", "/auth/refresh")
        expect_status(result, 200, operation="refresh token", error=AuthenticationError)
        session = AuthSession.model_validate(result.body)
        self.transport.token = session.token
        return session

    def validate_token(self) -> bool:
        """True only if GET /auth/validate answers 200; never raises."""
        try:
            result = self.transport.request("GET", "/auth/validate")
        except requests.RequestException as e:
            logger.debug("Token validation request failed: %s", e)
            return False
        return result.status_code == 200

    # -------------------------------------------------------------------------
    # Pump CRUD
    # -------------------------------------------------------------------------

    def create_pump(self, pump: PumpInput) -> PumpRecord:
        result = self.transport.request("POST", "/pumps", json=_as_payload(pump))
        expect_status(result, 201, operation="create pump")
        return PumpRecord.model_validate(result.body)

    def get_pump(self, pump_id: int | str) -> PumpRecord:
        result = self.transport.request("GET", f"/pumps/{pump_id}")
        expect_status(result, 200, operation=f"get pump {pump_id}", not_found=NotFoundError)
        return PumpRecord.model_validate(result.body)

    def update_pump(self, pump_id: int | str, changes: dict[str, Any]) -> PumpRecord:
        result = self.transport.request("PUT", f"/pumps/{pump_id}", json=changes)
        expect_status(result, 200, operation=f"update pump {pump_id}", not_found=NotFoundError)
        return PumpRecord.model_validate(result.body)

    def delete_pump(self, pump_id: int | str) -> None:
        result = self.transport.request("DELETE", f"/pumps/{pump_id}")
        expect_status(result, 204, operation=f"delete pump {pump_id}", not_found=NotFoundError)

    # -------------------------------------------------------------------------
    # Listing, search and filtering
    # -------------------------------------------------------------------------

    def _get_page(
        self,
        path: str,
        params: dict[str, Any],
        operation: str,
    ) -> PaginatedResult[PumpRecord]:
        result = self.transport.request("GET", path, params=params)
        expect_status(result, 200, operation=operation)
        return PaginatedResult[PumpRecord].model_validate(result.body)

    def get_all_pumps(self, page: int = 1, limit: int = 10) -> PaginatedResult[PumpRecord]:
        return self._get_page(
            "/pumps", {"page": page, "limit": limit}, "list pumps"
        )

    def search_pumps(
        self, term: str, page: int = 1, limit: int = 10
    ) -> PaginatedResult[PumpRecord]:
        return self._get_page(
            "/pumps/search",
            {"q": term, "page": page, "limit": limit},
            f"search pumps for {term!r}",
        )

    def filter_pumps_by_type(
        self, pump_type: str, page: int = 1, limit: int = 10
    ) -> PaginatedResult[PumpRecord]:
        return self._get_page(
            "/pumps/filter",
            {"type": pump_type, "page": page, "limit": limit},
            f"filter pumps by type {pump_type!r}",
        )

    def filter_pumps_by_status(
        self, status: str, page: int = 1, limit: int = 10
    ) -> PaginatedResult[PumpRecord]:
        return self._get_page(
            "/pumps/filter",
            {"status": status, "page": page, "limit": limit},
            f"filter pumps by status {status!r}",
        )

    # -------------------------------------------------------------------------
    # Negative paths (never raise on status)
    # -------------------------------------------------------------------------

    def create_pump_with_invalid_data(self, data: dict[str, Any]) -> FailureResult:
        result = self.transport.request("POST", "/pumps", json=data)
        return FailureResult(status=result.status_code, error=result.body)

    def update_pump_with_invalid_data(
        self, pump_id: int | str, data: dict[str, Any]
    ) -> FailureResult:
        result = self.transport.request("PUT", f"/pumps/{pump_id}", json=data)
        return FailureResult(status=result.status_code, error=result.body)

    def access_protected_endpoint_without_auth(self) -> int:
        return self.transport.request("GET", "/pumps", authenticated=False).status_code

    def access_protected_endpoint_with_invalid_auth(self) -> int:
        result = self.transport.request(
            "GET",
            "/pumps",
            authenticated=False,
            headers={"Authorization": "Bearer invalid-token"},
        )
        return result.status_code

    # -------------------------------------------------------------------------
    # Bulk operations
    # -------------------------------------------------------------------------

    def bulk_create_pumps(self, pumps: Iterable[PumpInput]) -> list[PumpRecord]:
        body = {"pumps": [_as_payload(p) for p in pumps]}
        result = self.transport.request("POST", "/pumps/bulk", json=body)
        expect_status(result, 201, operation="bulk create pumps")
        return [PumpRecord.model_validate(item) for item in result.body]

    def bulk_update_pumps(
        self, updates: Iterable[tuple[int | str, dict[str, Any]]]
    ) -> list[PumpRecord]:
        """PUT /pumps/bulk with (id, changes) pairs."""
        body = {"updates": [{"id": pump_id, "data": data} for pump_id, data in updates]}
        result = self.transport.request("PUT", "/pumps/bulk", json=body)
        expect_status(result, 200, operation="bulk update pumps")
        return [PumpRecord.model_validate(item) for item in result.body]

    def bulk_delete_pumps(self, ids: Iterable[int | str]) -> None:
        result = self.transport.request("DELETE", "/pumps/bulk", json={"ids": list(ids)})
        expect_status(result, 204, operation="bulk delete pumps")

    # -------------------------------------------------------------------------
    # Import / export
    # -------------------------------------------------------------------------

    def export_pumps(self, fmt: str = "json") -> Any:
        """Parsed JSON for the json format, raw bytes for the others."""
        result = self.transport.request("GET", "/pumps/export", params={"format": fmt})
        expect_status(result, 200, operation=f"export pumps as {fmt}")
        if fmt == "json":
            return result.body
        return result.content

    def import_pumps(self, content: bytes, fmt: str) -> ImportSummary:
        files = {"file": (f"pumps.{fmt}", content, mime_type_for(fmt))}
        result = self.transport.request(
            "POST",
            "/pumps/import",
            files=files,
            data={"format": fmt},
        )
        expect_status(result, 200, operation=f"import pumps from {fmt}")
        return ImportSummary.model_validate(result.body)

    # -------------------------------------------------------------------------
    # Statistics
    # -------------------------------------------------------------------------

    def get_pump_statistics(self) -> dict[str, Any]:
        result = self.transport.request("GET", "/pumps/statistics")
        expect_status(result, 200, operation="pump statistics")
        return result.body

    def get_pumps_by_status_count(self) -> dict[str, int]:
        result = self.transport.request("GET", "/pumps/statistics/status")
        expect_status(result, 200, operation="pump counts by status")
        return result.body

    def get_pumps_by_type_count(self) -> dict[str, int]:
        result = self.transport.request("GET", "/pumps/statistics/type")
        expect_status(result, 200, operation="pump counts by type")
        return result.body

    # -------------------------------------------------------------------------
    # Cleanup
    # -------------------------------------------------------------------------

    def is_run_record(self, pump: PumpRecord) -> bool:
        """True if the pump's name carries this client's run tag."""
        return bool(self.run_tag) and self.run_tag in pump.name

    def is_test_record(self, pump: PumpRecord) -> bool:
        """True for any test-created pump, whichever run created it."""
        if any(marker in pump.name for marker in self.CLEANUP_NAME_MARKERS):
            return True
        if any(marker in pump.area for marker in self.CLEANUP_AREA_MARKERS):
            return True
        return self.is_run_record(pump)

    def cleanup(self, scope: str = CLEANUP_ALL) -> int:
        """Delete test-created pumps. Best effort: failures are logged, not raised.

        Args:
            scope: CLEANUP_RUN deletes only pumps carrying this client's run
                tag, leaving records of parallel workers alone; CLEANUP_ALL
                deletes every pump matching the test markers as well.

        Returns:
            Number of pumps deleted
        """
        if scope not in CLEANUP_SCOPES:
            raise ValueError(f"Unknown cleanup scope {scope!r}, expected one of {CLEANUP_SCOPES}")
        matches = self.is_run_record if scope == CLEANUP_RUN else self.is_test_record

        try:
            listing = self.get_all_pumps(1, self.CLEANUP_PAGE_LIMIT)
        except (ApiError, ValidationError, requests.RequestException) as e:
            logger.warning("Cleanup could not list pumps: %s", e)
            return 0

        deleted = 0
        for pump in listing.data:
            if pump.id is None or not matches(pump):
                continue
            try:
                self.delete_pump(pump.id)
            except (ApiError, requests.RequestException) as e:
                logger.warning("Cleanup failed to delete pump %s: %s", pump.id, e)
                continue
            deleted += 1
        return deleted
