from __future__ import annotations

import pytest
import requests

from attendance_dashboard.core.exceptions import PayloadError, UpstreamError
from attendance_dashboard.sheets.client import SheetsClient, SheetsConfig


class FakeResponse:
    def __init__(self, status_code: int, text: str):
        self.status_code = status_code
        self.text = text

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400


class FakeSession:
    def __init__(self, response=None, error=None):
        self._response = response
        self._error = error
        self.calls = []

    def get(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self._error:
            raise self._error
        return self._response


def _client(session) -> SheetsClient:
    return SheetsClient(SheetsConfig(url="https://example.test/exec", timeout_seconds=3), session=session)


def test_fetch_payload_sends_get_data_action():
    session = FakeSession(FakeResponse(200, '{"logs": [], "employees": [], "shifts": []}'))

    data = _client(session).fetch_payload()

    assert data == {"logs": [], "employees": [], "shifts": []}
    url, kwargs = session.calls[0]
    assert url == "https://example.test/exec"
    assert kwargs["params"]["action"] == "getData"
    assert kwargs["params"]["t"].isdigit()
    assert kwargs["headers"]["Accept"] == "application/json"
    assert kwargs["allow_redirects"] is True
    assert kwargs["timeout"] == 3


def test_http_error_keeps_status_and_body_excerpt():
    session = FakeSession(FakeResponse(403, "x" * 1000))

    with pytest.raises(UpstreamError) as exc:
        _client(session).fetch_payload()

    assert exc.value.status == 403
    assert exc.value.code == "GAS_FETCH_ERROR"
    assert len(exc.value.body) == 500


def test_network_error_is_connection_error():
    session = FakeSession(error=requests.ConnectionError("boom"))

    with pytest.raises(UpstreamError) as exc:
        _client(session).fetch_payload()

    assert exc.value.status is None
    assert exc.value.code == "CONNECTION_ERROR"


def test_non_json_body():
    session = FakeSession(FakeResponse(200, "<html>login</html>"))

    with pytest.raises(PayloadError):
        _client(session).fetch_payload()


def test_missing_url_is_reported_without_request():
    session = FakeSession(FakeResponse(200, "{}"))
    client = SheetsClient(SheetsConfig(url=""), session=session)

    with pytest.raises(UpstreamError, match="SHEETS_URL"):
        client.fetch_payload()
    assert session.calls == []
