from __future__ import annotations

from typing import Any, Dict, List
from urllib.parse import quote

from utils.logging_setup import get_logger

logger = get_logger(__name__)

BASE_URL = "https://restcountries.com/v3.1"
FIELDS = "name,cca2,timezones,capital"

try:
    import requests
except Exception:  # pragma: no cover
    requests = None  # type: ignore


class RestCountriesClient:
    """Thin client for the REST Countries API. Single attempt, no retry."""

    def __init__(self, timeout: float = 15.0, offline: bool = False):
        self.timeout = timeout
        self.offline = offline

    def _request_json(self, url: str) -> Any:
        if self.offline:
            raise RuntimeError("_request_json called in offline mode")
        if requests is None:
            raise RuntimeError("'requests' package not installed. Run: pip install requests")
        logger.debug("GET %s", url)
        resp = requests.get(url, timeout=self.timeout)
        resp.raise_for_status()
        return resp.json()

    def all_countries(self) -> List[Dict[str, Any]]:
        data = self._request_json(f"{BASE_URL}/all?fields={FIELDS}")
        if not isinstance(data, list):
            raise RuntimeError(f"Unexpected response shape for /all: {type(data).__name__}")
        return data

    def search_countries(self, query: str) -> List[Dict[str, Any]]:
        # 404 when nothing matches; raise_for_status turns that into HTTPError
        data = self._request_json(f"{BASE_URL}/name/{quote(query)}?fields={FIELDS}")
        if not isinstance(data, list):
            raise RuntimeError(f"Unexpected response shape for /name/{query}: {type(data).__name__}")
        return data
