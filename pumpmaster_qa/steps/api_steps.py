"""
Given/When/Then steps for the REST API.

"When" steps never raise on API errors: the ApiError is stored as
``last_error`` and the "then" steps assert on it. Connection-level
failures still propagate.
"""
import logging
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, TypeVar

from ..api.client import PumpMasterApi
from ..api.errors import ApiError
from ..api.models import AuthSession, Credentials, PaginatedResult, PumpRecord
from ..config import Settings, get_settings
from ..factories.api import api_credentials, invalid_login_credentials, invalid_pump_payload, pump_create_payload

logger = logging.getLogger(__name__)

T = TypeVar("T")

API_PUMP_NAME = "Test Pump API"
UPDATED_PUMP_NAME = "Updated Test Pump API"
SIMULTANEOUS_REQUESTS = 3
ACCEPTABLE_RESPONSE_TIME = 2.0  # seconds


class ApiSteps:
    def __init__(self, api: PumpMasterApi, settings: Settings | None = None):
        self.api = api
        self.settings = settings or get_settings()
        self.credentials: Credentials = api_credentials(self.settings)

        self.auth_session: AuthSession | None = None
        self.pump: PumpRecord | None = None
        self.pumps: PaginatedResult[PumpRecord] | None = None
        self.last_error: ApiError | None = None
        self.elapsed: float | None = None

    def _attempt(self, call: Callable[[], T]) -> T | None:
        """Run call, timing it; store an ApiError instead of raising it."""
        start = time.perf_counter()
        try:
            result = call()
        except ApiError as e:
            logger.debug("API step failed: %s", e)
            self.last_error = e
            return None
        finally:
            self.elapsed = time.perf_counter() - start
        self.last_error = None
        return result

    def _login(self, credentials: Credentials) -> None:
        session = self._attempt(lambda: self.api.login(credentials))
        if session is not None:
            self.auth_session = session

    # -------------------------------------------------------------------------
    # Authentication
    # -------------------------------------------------------------------------

    def given_i_have_valid_api_credentials(self) -> None:
        self.credentials = api_credentials(self.settings)

    def given_i_have_invalid_api_credentials(self) -> None:
        self.credentials = invalid_login_credentials()

    def given_i_am_not_authenticated(self) -> None:
        self.auth_session = None
        self.api.clear_auth_token()

    def given_i_am_already_authenticated(self) -> None:
        self.when_i_send_a_login_request()
        self.then_i_should_receive_a_valid_auth_token()

    def when_i_send_a_login_request(self) -> None:
        self._login(self.credentials)

    def when_i_send_a_login_request_with_invalid_credentials(self) -> None:
        self._login(invalid_login_credentials())

    def when_i_send_a_login_request_with_missing_credentials(self) -> None:
        self._login(Credentials(username="", password=""))

    def when_i_send_a_logout_request(self) -> None:
        self._attempt(self.api.logout)

    def when_i_send_a_refresh_token_request(self) -> None:
        session = self._attempt(self.api.refresh_token)
        if session is not None:
            self.auth_session = session

    def then_i_should_receive_a_valid_auth_token(self) -> None:
        assert self.last_error is None, f"Unexpected error: {self.last_error}"
        assert self.auth_session is not None, "No auth response received"
        assert self.auth_session.token, "Auth response has no token"
        assert self.auth_session.user is not None, "Auth response has no user"
        expires_in = self.auth_session.expires_in
        assert not isinstance(expires_in, int) or expires_in > 0, (
            f"Token already expired: expiresIn={expires_in}"
        )

    def then_i_should_receive_an_authentication_error(self) -> None:
        assert self.last_error is not None, "Expected an authentication error"
        assert self.auth_session is None, "Unexpectedly authenticated"

    def then_i_should_receive_a_validation_error(self) -> None:
        assert self.last_error is not None, "Expected a validation error"
        assert self.auth_session is None, "Unexpectedly authenticated"

    def then_the_token_should_be_invalidated(self) -> None:
        assert self.last_error is None, f"Logout failed: {self.last_error}"
        assert self.api.auth_token is None, "Token still held after logout"

    def then_i_should_receive_a_new_valid_token(self) -> None:
        assert self.last_error is None, f"Unexpected error: {self.last_error}"
        assert self.auth_session is not None and self.auth_session.token, "No new token"

    def then_i_should_receive_a_token_expired_error(self) -> None:
        assert self.last_error is not None, "Expected a token expired error"

    # -------------------------------------------------------------------------
    # Pumps
    # -------------------------------------------------------------------------

    def given_there_are_existing_pumps_in_the_system(self) -> None:
        """No-op: relies on the backend's seed data."""

    def given_there_are_no_pumps_in_the_system(self) -> None:
        """No-op: relies on an empty backend."""

    def given_there_is_an_existing_pump_with_id(self, pump_id: int | str) -> None:
        self.pump = self._attempt(lambda: self.api.get_pump(pump_id))
        assert self.pump is not None, f"Pump {pump_id} does not exist: {self.last_error}"

    def when_i_send_a_get_all_pumps_request(self) -> None:
        self.pumps = self._attempt(self.api.get_all_pumps)

    def when_i_send_a_get_pump_request(self, pump_id: int | str) -> None:
        self.pump = self._attempt(lambda: self.api.get_pump(pump_id))

    def when_i_send_a_create_pump_request(self) -> None:
        self.pump = self._attempt(
            lambda: self.api.create_pump(pump_create_payload(name=API_PUMP_NAME))
        )

    def when_i_send_a_create_pump_request_with_invalid_data(self) -> None:
        self.pump = self._attempt(lambda: self.api.create_pump(invalid_pump_payload()))

    def when_i_send_an_update_pump_request(self, pump_id: int | str) -> None:
        changes = {
            "name": UPDATED_PUMP_NAME,
            "description": "Updated pump description",
            "status": "Maintenance",
        }
        self.pump = self._attempt(lambda: self.api.update_pump(pump_id, changes))

    def when_i_send_a_delete_pump_request(self, pump_id: int | str) -> None:
        self._attempt(lambda: self.api.delete_pump(pump_id))

    def when_i_send_a_search_pumps_request(self, search_term: str) -> None:
        self.pumps = self._attempt(lambda: self.api.search_pumps(search_term))

    def when_i_send_a_filter_pumps_request(self, filter_type: str, filter_value: str) -> None:
        """filter_type is 'type' or 'status'."""
        filters: dict[str, Callable[[str], Any]] = {
            "type": self.api.filter_pumps_by_type,
            "status": self.api.filter_pumps_by_status,
        }
        if filter_type not in filters:
            raise ValueError(f"Unsupported filter type: {filter_type}")
        self.pumps = self._attempt(lambda: filters[filter_type](filter_value))

    def when_i_send_a_get_pump_request_with_invalid_id(self) -> None:
        self.pump = self._attempt(lambda: self.api.get_pump("invalid-id"))

    def when_i_send_multiple_simultaneous_requests(self, count: int = SIMULTANEOUS_REQUESTS) -> None:
        """List pumps from count independent clients sharing this client's token."""
        def list_pumps(_: int) -> PaginatedResult[PumpRecord]:
            client = PumpMasterApi(self.api.base_url)
            client.set_auth_token(self.api.auth_token)
            return client.get_all_pumps()

        def run_all() -> list[PaginatedResult[PumpRecord]]:
            with ThreadPoolExecutor(max_workers=count) as pool:
                return list(pool.map(list_pumps, range(count)))

        results = self._attempt(run_all)
        self.pumps = results[0] if results else None

    def then_i_should_receive_a_list_of_pumps(self) -> None:
        assert self.last_error is None, f"Unexpected error: {self.last_error}"
        assert self.pumps is not None, "No pump list received"
        assert self.pumps.total > 0, "Expected at least one pump"
        for pump in self.pumps.data:
            assert pump.id is not None, f"Pump without id: {pump}"
            assert pump.status is not None, f"Pump without status: {pump}"

    def then_i_should_receive_pump_details(self) -> None:
        assert self.last_error is None, f"Unexpected error: {self.last_error}"
        assert self.pump is not None, "No pump received"
        assert self.pump.id is not None, "Pump has no id"

    def then_the_pump_should_be_created_successfully(self) -> None:
        assert self.last_error is None, f"Unexpected error: {self.last_error}"
        assert self.pump is not None, "No pump received"
        assert self.pump.id is not None, "Created pump has no id"
        assert self.pump.name == API_PUMP_NAME
        assert self.pump.type == "Centrifugal"

    def then_the_pump_should_be_updated_successfully(self) -> None:
        assert self.last_error is None, f"Unexpected error: {self.last_error}"
        assert self.pump is not None, "No pump received"
        assert self.pump.name == UPDATED_PUMP_NAME
        assert self.pump.status == "Maintenance"

    def then_the_pump_should_be_deleted_successfully(self) -> None:
        assert self.last_error is None, f"Unexpected error: {self.last_error}"

    def then_i_should_receive_filtered_results(self, field: str | None = None, value: Any = None) -> None:
        assert self.last_error is None, f"Unexpected error: {self.last_error}"
        assert self.pumps is not None, "No pump list received"
        if field is not None:
            for pump in self.pumps.data:
                assert getattr(pump, field) == value, (
                    f"Pump {pump.id} has {field}={getattr(pump, field)!r}, expected {value!r}"
                )

    def then_i_should_receive_search_results(self) -> None:
        assert self.last_error is None, f"Unexpected error: {self.last_error}"
        assert self.pumps is not None, "No pump list received"

    def then_i_should_receive_an_empty_list(self) -> None:
        assert self.last_error is None, f"Unexpected error: {self.last_error}"
        assert self.pumps is not None, "No pump list received"
        assert self.pumps.data == [], f"Expected no pumps, got {len(self.pumps.data)}"

    def _assert_error(self, description: str, status: int | None) -> None:
        assert self.last_error is not None, f"Expected {description}"
        if status is not None:
            assert self.last_error.status_code == status, (
                f"Expected {description} (HTTP {status}), got {self.last_error}"
            )

    def then_i_should_receive_a_not_found_error(self, status: int | None = None) -> None:
        self._assert_error("a not found error", status)
        assert self.pump is None, "Unexpectedly received a pump"

    def then_i_should_receive_an_unauthorized_error(self, status: int | None = 401) -> None:
        self._assert_error("an unauthorized error", status)

    def then_i_should_receive_a_bad_request_error(self, status: int | None = None) -> None:
        self._assert_error("a bad request error", status)

    def then_all_requests_should_complete_successfully(self) -> None:
        assert self.last_error is None, f"Unexpected error: {self.last_error}"
        assert self.pumps is not None, "No pump list received"

    def then_the_response_time_should_be_acceptable(self, limit: float = ACCEPTABLE_RESPONSE_TIME) -> None:
        assert self.last_error is None, f"Unexpected error: {self.last_error}"
        assert self.elapsed is not None and self.elapsed < limit, (
            f"Response took {self.elapsed}s, limit is {limit}s"
        )

    def then_i_should_receive_an_error_about_invalid_data(self) -> None:
        assert self.last_error is not None, "Expected an invalid data error"
        assert self.pump is None, "Unexpectedly received a pump"
