from datetime import timedelta
from typing import Any, Dict, List

import pytest

from utils.directory import CountryDirectory


class FakeResponse:
    def __init__(self, payload: Any, status_code: int = 200):
        self._payload = payload
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            import requests

            raise requests.HTTPError(f"{self.status_code} error")

    def json(self) -> Any:
        return self._payload


class StubCountriesClient:
    """Stands in for RestCountriesClient; raises ``error`` if set."""

    def __init__(self, payload: List[Dict[str, Any]] = None, error: Exception = None):
        self.payload = payload or []
        self.error = error
        self.calls = 0

    def all_countries(self) -> List[Dict[str, Any]]:
        self.calls += 1
        if self.error:
            raise self.error
        return self.payload

    def search_countries(self, query: str) -> List[Dict[str, Any]]:
        if self.error:
            raise self.error
        return [c for c in self.payload if query.lower() in c["name"]["common"].lower()]


def raw_country(name: str, code: str, timezones=None, capital=None) -> Dict[str, Any]:
    return {"name": {"common": name}, "cca2": code, "timezones": timezones, "capital": capital}


@pytest.fixture
def offline_directory() -> CountryDirectory:
    return CountryDirectory(offline=True)


@pytest.fixture
def utc() -> timedelta:
    return timedelta(0)
