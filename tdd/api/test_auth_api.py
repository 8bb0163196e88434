"""
Authentication and security tests against the live API.
"""
from concurrent.futures import ThreadPoolExecutor

import pytest

from pumpmaster_qa.api import AuthenticationError, Credentials, PumpMasterApi
from pumpmaster_qa.assertions import assert_jwt_format, assert_status_code
from pumpmaster_qa.factories.api import invalid_login_credentials, login_credentials

pytestmark = [pytest.mark.api, pytest.mark.auth]

CONCURRENT_LOGINS = 5
RAPID_LOGIN_ATTEMPTS = 20

MALFORMED_LOGIN_BODIES = [
    {},
    {"username": "test"},
    {"password": "test"},
    {"username": None, "password": None},
    {"username": "", "password": ""},
]


class TestLogin:
    def test_valid_credentials_return_jwt(self, api, settings):
        credentials = login_credentials(settings)

        session = api.login(credentials)

        assert_jwt_format(session.token)
        assert session.user.username == credentials.username
        assert session.user.email
        assert session.user.tenant_id is not None
        assert int(session.expires_in) > 0

    def test_invalid_credentials_rejected(self, api):
        with pytest.raises(AuthenticationError) as exc_info:
            api.login(invalid_login_credentials())
        assert "401" in str(exc_info.value)
        assert api.auth_token is None

    def test_special_characters_handled_cleanly(self, api):
        credentials = Credentials(username="test+user@example.com", password="Test@123!#$%^&*()")
        try:
            api.login(credentials)
        except AuthenticationError as e:
            assert "401" in str(e)

    def test_auth_response_is_json(self, api, settings):
        credentials = login_credentials(settings)
        result = api.transport.request(
            "POST",
            "/auth/login",
            json={"username": credentials.username, "password": credentials.password},
            authenticated=False,
        )
        assert_status_code(result, 200)
        headers = {k.lower(): v for k, v in result.headers.items()}
        assert "application/json" in headers.get("content-type", "")

    @pytest.mark.parametrize("body", MALFORMED_LOGIN_BODIES)
    def test_malformed_body_rejected(self, api, body):
        result = api.transport.request("POST", "/auth/login", json=body, authenticated=False)
        assert_status_code(result, 400)

    def test_invalid_json_rejected(self, api):
        result = api.transport.request("POST", "/auth/login", data="invalid json", authenticated=False)
        assert_status_code(result, 400)


class TestProtectedEndpoints:
    @pytest.mark.security
    def test_no_auth_is_unauthorized(self, api):
        assert api.access_protected_endpoint_without_auth() == 401

    @pytest.mark.security
    def test_invalid_token_is_unauthorized(self, api):
        assert api.access_protected_endpoint_with_invalid_auth() == 401

    def test_expired_token_is_unauthorized(self, api):
        api.set_auth_token("expired.token.here")
        assert api.access_protected_endpoint_with_invalid_auth() == 401


class TestTokenLifecycle:
    def test_refresh_issues_new_token(self, api, settings):
        initial = api.login(login_credentials(settings))

        refreshed = api.refresh_token()

        assert refreshed.token
        assert refreshed.token != initial.token
        assert int(refreshed.expires_in) > 0
        assert api.auth_token == refreshed.token

    def test_logout_invalidates_token(self, api, settings):
        api.login(login_credentials(settings))

        api.logout()

        assert api.auth_token is None
        assert api.access_protected_endpoint_without_auth() == 401

    def test_validate_token(self, api, settings):
        api.login(login_credentials(settings))
        assert api.validate_token() is True

    def test_validate_without_token(self, api):
        assert api.validate_token() is False


class TestConcurrency:
    @pytest.mark.performance
    def test_concurrent_logins(self, api_base_url, settings):
        credentials = login_credentials(settings)

        def login(_):
            return PumpMasterApi(api_base_url).login(credentials)

        with ThreadPoolExecutor(max_workers=CONCURRENT_LOGINS) as pool:
            sessions = list(pool.map(login, range(CONCURRENT_LOGINS)))

        assert len(sessions) == CONCURRENT_LOGINS
        for session in sessions:
            assert session.token
            assert session.user.username == credentials.username

    @pytest.mark.security
    @pytest.mark.slow
    def test_rapid_failed_logins_are_rate_limited(self, api_base_url):
        """The backend must answer a burst of bad logins with at least one 429."""
        credentials = invalid_login_credentials()
        body = {"username": credentials.username, "password": credentials.password}

        def attempt(_):
            client = PumpMasterApi(api_base_url)
            return client.transport.request("POST", "/auth/login", json=body, authenticated=False).status_code

        with ThreadPoolExecutor(max_workers=RAPID_LOGIN_ATTEMPTS) as pool:
            statuses = list(pool.map(attempt, range(RAPID_LOGIN_ATTEMPTS)))

        assert statuses.count(429) > 0, f"No request was rate limited: {statuses}"
