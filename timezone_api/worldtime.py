from __future__ import annotations

from typing import Any, List, Optional

from timezone_api.models import TimeZoneData
from utils.logging_setup import get_logger
from utils.static_data import FALLBACK_TIMEZONES

logger = get_logger(__name__)

BASE_URL = "http://worldtimeapi.org/api"

try:
    import requests
except Exception:  # pragma: no cover
    requests = None  # type: ignore


def _parse_utc_offset(value: Any) -> int:
    # worldtimeapi reports "+09:00" / "-03:30"; partial hours are truncated toward zero
    if not isinstance(value, str) or len(value) < 3 or value[0] not in "+-":
        return 0
    try:
        hours = int(value[1:3])
    except ValueError:
        return 0
    return -hours if value[0] == "-" else hours


class WorldTimeClient:
    def __init__(self, timeout: float = 15.0, offline: bool = False):
        self.timeout = timeout
        self.offline = offline

    def _request_json(self, url: str) -> Any:
        if self.offline:
            raise RuntimeError("_request_json called in offline mode")
        if requests is None:
            raise RuntimeError("'requests' package not installed. Run: pip install requests")
        resp = requests.get(url, timeout=self.timeout)
        resp.raise_for_status()
        return resp.json()

    def available_timezones(self) -> List[str]:
        if self.offline:
            return list(FALLBACK_TIMEZONES)
        try:
            data = self._request_json(f"{BASE_URL}/timezone")
            if not isinstance(data, list):
                raise RuntimeError(f"Unexpected response shape: {type(data).__name__}")
            return [d for d in data if isinstance(d, str)]
        except Exception as e:  # noqa: BLE001
            logger.warning("Failed fetching timezone list, fallback used: %s", e)
            return list(FALLBACK_TIMEZONES)

    def current_time(self, timezone: str) -> Optional[TimeZoneData]:
        """Current offset and datetime for a label, or None when unavailable."""
        if self.offline:
            return None
        try:
            data = self._request_json(f"{BASE_URL}/timezone/{timezone}")
            return TimeZoneData.from_label(
                data.get("timezone") or timezone,
                offset=_parse_utc_offset(data.get("utc_offset")),
                current_time=data.get("datetime"),
            )
        except Exception as e:  # noqa: BLE001
            logger.warning("World time lookup failed for %s: %s", timezone, e)
            return None
