import pytest
import requests

from conftest import FakeResponse
from timezone_api.models import TimeZoneData
from timezone_api.restcountries import RestCountriesClient
from timezone_api.worldtime import WorldTimeClient, _parse_utc_offset
from utils.static_data import FALLBACK_TIMEZONES


def test_all_countries_requests_fields(monkeypatch):
    seen = {}

    def fake_get(url, timeout):
        seen["url"] = url
        seen["timeout"] = timeout
        return FakeResponse([{"name": {"common": "Japan"}, "cca2": "JP"}])

    monkeypatch.setattr(requests, "get", fake_get)
    data = RestCountriesClient(timeout=3).all_countries()
    assert data[0]["cca2"] == "JP"
    assert seen["url"].endswith("/all?fields=name,cca2,timezones,capital")
    assert seen["timeout"] == 3


def test_all_countries_rejects_non_list(monkeypatch):
    monkeypatch.setattr(requests, "get", lambda url, timeout: FakeResponse({"status": 404}))
    with pytest.raises(RuntimeError):
        RestCountriesClient().all_countries()


def test_http_error_propagates(monkeypatch):
    monkeypatch.setattr(requests, "get", lambda url, timeout: FakeResponse([], status_code=503))
    with pytest.raises(requests.HTTPError):
        RestCountriesClient().search_countries("japan")


def test_offline_client_refuses_requests():
    with pytest.raises(RuntimeError):
        RestCountriesClient(offline=True).all_countries()


def test_current_time(monkeypatch):
    payload = {"timezone": "America/Argentina/Buenos_Aires", "utc_offset": "-03:00", "datetime": "2024-06-01T06:00:00-03:00"}
    monkeypatch.setattr(requests, "get", lambda url, timeout: FakeResponse(payload))
    data = WorldTimeClient().current_time("America/Argentina/Buenos_Aires")
    assert data == TimeZoneData(
        timezone="America/Argentina/Buenos_Aires",
        country="America",
        city="Buenos Aires",
        offset=-3,
        current_time="2024-06-01T06:00:00-03:00",
    )


def test_current_time_failure_returns_none(monkeypatch):
    def boom(url, timeout):
        raise requests.ConnectionError("down")

    monkeypatch.setattr(requests, "get", boom)
    assert WorldTimeClient().current_time("Asia/Tokyo") is None


def test_available_timezones_fallback(monkeypatch):
    monkeypatch.setattr(requests, "get", lambda url, timeout: FakeResponse("garbage"))
    assert WorldTimeClient().available_timezones() == FALLBACK_TIMEZONES
    assert WorldTimeClient(offline=True).available_timezones() == FALLBACK_TIMEZONES


@pytest.mark.parametrize("raw,expected", [("+09:00", 9), ("-03:00", -3), ("+05:30", 5), ("", 0), (None, 0), ("Z", 0)])
def test_parse_utc_offset(raw, expected):
    assert _parse_utc_offset(raw) == expected
