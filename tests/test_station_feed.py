import os
import sys

import pytest
import requests

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from api import station_feed
from api.station_feed import FeedError, fetch_station_feed

FEED_URL = "https://feed.example.org/stations.json"


class _FakeResponse:
    def __init__(self, status_code=200, payload=None, bad_json=False):
        self.status_code = status_code
        self._payload = payload
        self._bad_json = bad_json

    def json(self):
        if self._bad_json:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._payload


def _patch_get(monkeypatch, response=None, exc=None):
    calls = []

    def fake_get(url, **kwargs):
        calls.append((url, kwargs))
        if exc is not None:
            raise exc
        return response

    monkeypatch.setattr(station_feed.requests, "get", fake_get)
    return calls


def test_fetch_returns_decoded_payload(monkeypatch) -> None:
    payload = {"Stations": [{"Name": "Alpha"}]}
    calls = _patch_get(monkeypatch, _FakeResponse(200, payload))

    data = fetch_station_feed(FEED_URL, api_key="secret", timeout=3, verify=False)

    assert data == payload
    url, kwargs = calls[0]
    assert url == FEED_URL
    assert kwargs["headers"]["x-api-key"] == "secret"
    assert kwargs["headers"]["Accept"] == "application/json"
    assert kwargs["timeout"] == 3.0
    assert kwargs["verify"] is False


def test_fetch_without_api_key_sends_no_key_header(monkeypatch) -> None:
    calls = _patch_get(monkeypatch, _FakeResponse(200, []))

    fetch_station_feed(FEED_URL, api_key="")

    assert "x-api-key" not in calls[0][1]["headers"]


def test_fetch_without_url_is_config_error(monkeypatch) -> None:
    monkeypatch.setattr(station_feed, "STATION_FEED_URL", "")

    with pytest.raises(FeedError) as excinfo:
        fetch_station_feed()

    assert excinfo.value.kind == "config"


@pytest.mark.parametrize(
    "status, kind",
    [(401, "unauthorized"), (403, "unauthorized"), (404, "notfound"), (429, "ratelimit"), (502, "http")],
)
def test_fetch_maps_http_status_to_error_kind(monkeypatch, status, kind) -> None:
    _patch_get(monkeypatch, _FakeResponse(status, {}))

    with pytest.raises(FeedError) as excinfo:
        fetch_station_feed(FEED_URL)

    assert excinfo.value.kind == kind
    assert excinfo.value.status_code == status


def test_fetch_timeout(monkeypatch) -> None:
    _patch_get(monkeypatch, exc=requests.Timeout("read timed out"))

    with pytest.raises(FeedError) as excinfo:
        fetch_station_feed(FEED_URL)

    assert excinfo.value.kind == "timeout"


def test_fetch_connection_error(monkeypatch) -> None:
    _patch_get(monkeypatch, exc=requests.ConnectionError("refused"))

    with pytest.raises(FeedError) as excinfo:
        fetch_station_feed(FEED_URL)

    assert excinfo.value.kind == "network"
    assert excinfo.value.status_code is None


def test_fetch_bad_json(monkeypatch) -> None:
    _patch_get(monkeypatch, _FakeResponse(200, bad_json=True))

    with pytest.raises(FeedError) as excinfo:
        fetch_station_feed(FEED_URL)

    assert excinfo.value.kind == "badjson"


def test_request_json_passes_settings_to_requests(monkeypatch) -> None:
    calls = _patch_get(monkeypatch, _FakeResponse(200, {"Stations": []}))

    data = station_feed._request_json(FEED_URL, "k", 7.5, True)

    assert data == {"Stations": []}
    url, kwargs = calls[0]
    assert url == FEED_URL
    assert kwargs["timeout"] == 7.5
    assert kwargs["verify"] is True
    assert kwargs["headers"]["x-api-key"] == "k"
