"""
Tests for HttpTransport.

Contract:
- Every exchange returns an HttpResult, whatever the status
- JSON bodies are decoded; other bodies come back as text
- The bearer token is sent only when held and requested
"""
from unittest.mock import MagicMock, patch

import pytest
import requests

from pumpmaster_qa.api.models import HttpResult
from pumpmaster_qa.api.transport import HttpTransport
from shared.mocks import make_response, make_session, sent_request

BASE_URL = "http://localhost:3000/api"


@pytest.fixture
def session():
    return make_session(make_response(200, {"ok": True}))


@pytest.fixture
def transport(session):
    return HttpTransport(BASE_URL, session)


class TestUrls:
    def test_joins_path_to_base(self, transport):
        assert transport.url_for("/pumps/3") == f"{BASE_URL}/pumps/3"
        assert transport.url_for("pumps") == f"{BASE_URL}/pumps"

    def test_trailing_slash_on_base_is_dropped(self, session):
        transport = HttpTransport(BASE_URL + "/", session)
        assert transport.url_for("/auth/login") == f"{BASE_URL}/auth/login"

    def test_creates_session_when_none_given(self):
        with patch("pumpmaster_qa.api.transport.requests.Session") as session_cls:
            session_cls.return_value = MagicMock()
            transport = HttpTransport(BASE_URL)
        assert transport.session is session_cls.return_value


class TestHeaders:
    def test_json_content_type_without_token(self, transport):
        assert transport.headers() == {"Content-Type": "application/json"}

    def test_bearer_token_when_held(self, transport):
        transport.token = "abc"
        assert transport.headers()["Authorization"] == "Bearer abc"

    def test_unauthenticated_omits_token(self, transport):
        transport.token = "abc"
        assert "Authorization" not in transport.headers(authenticated=False)

    def test_no_content_type_for_non_json(self, transport):
        assert "Content-Type" not in transport.headers(json_body=False)


class TestRequest:
    def test_returns_result_for_success(self, transport, session):
        result = transport.request("GET", "/pumps", params={"page": 1})

        assert isinstance(result, HttpResult)
        assert result.status_code == 200
        assert result.body == {"ok": True}
        assert result.ok

        method, url, kwargs = sent_request(session)
        assert (method, url) == ("GET", f"{BASE_URL}/pumps")
        assert kwargs["params"] == {"page": 1}

    def test_error_status_is_not_raised(self, session, transport):
        session.request.return_value = make_response(500, {"message": "boom"})

        result = transport.request("GET", "/pumps")

        assert result.status_code == 500
        assert result.body == {"message": "boom"}
        assert not result.ok

    def test_non_json_body_comes_back_as_text(self, session, transport):
        session.request.return_value = make_response(502, text="Bad Gateway")
        assert transport.request("GET", "/pumps").body == "Bad Gateway"

    def test_empty_body_is_none(self, session, transport):
        session.request.return_value = make_response(204)

        result = transport.request("DELETE", "/pumps/1")

        assert result.body is None
        assert result.content == b""

    def test_raw_content_is_kept(self, session, transport):
        session.request.return_value = make_response(200, text="id,name\n1,Pump\n")
        assert transport.request("GET", "/pumps/export").content == b"id,name\n1,Pump\n"

    def test_sends_json_body_with_token(self, session, transport):
        transport.token = "tok"

        transport.request("POST", "/pumps", json={"name": "P"})

        _, _, kwargs = sent_request(session)
        assert kwargs["json"] == {"name": "P"}
        assert kwargs["headers"]["Authorization"] == "Bearer tok"
        assert kwargs["headers"]["Content-Type"] == "application/json"

    def test_multipart_drops_json_content_type(self, session, transport):
        files = {"file": ("pumps.csv", b"a,b", "text/csv")}

        transport.request("POST", "/pumps/import", files=files, data={"format": "csv"})

        _, _, kwargs = sent_request(session)
        assert kwargs["files"] == files
        assert kwargs["data"] == {"format": "csv"}
        assert "Content-Type" not in kwargs["headers"]

    def test_extra_headers_applied_last(self, session, transport):
        transport.token = "real"

        transport.request(
            "GET",
            "/pumps",
            authenticated=False,
            headers={"Authorization": "Bearer invalid-token"},
        )

        _, _, kwargs = sent_request(session)
        assert kwargs["headers"]["Authorization"] == "Bearer invalid-token"

    def test_connection_errors_propagate(self, session, transport):
        session.request.side_effect = requests.ConnectionError("refused")
        with pytest.raises(requests.ConnectionError):
            transport.request("GET", "/pumps")
