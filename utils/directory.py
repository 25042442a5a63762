from __future__ import annotations

import difflib
import os
import unicodedata
from typing import List, Optional

from timezone_api.models import Country
from timezone_api.restcountries import RestCountriesClient
from utils.logging_setup import get_logger
from utils.static_data import FALLBACK_COUNTRIES

logger = get_logger(__name__)


def _sort_key(name: str) -> str:
    # Accent-insensitive, case-folded: "Åland Islands" sorts with the A's
    decomposed = unicodedata.normalize("NFKD", name)
    return "".join(c for c in decomposed if not unicodedata.combining(c)).casefold()


def fallback_countries() -> List[Country]:
    return [Country(**c) for c in FALLBACK_COUNTRIES]


class CountryDirectory:
    """Country records for participant selection and world clocks.

    Fetched from REST Countries and sorted by name; the embedded twelve-entry
    table (fixed order) replaces it on any failure. The snapshot is kept until
    refresh() is called and is treated as read-only by consumers.
    """

    def __init__(self, client: Optional[RestCountriesClient] = None, offline: bool = False):
        self.offline = offline or os.environ.get("OFFLINE") == "1"
        self.client = client or RestCountriesClient(offline=self.offline)
        self._countries_cache: Optional[List[Country]] = None

    def _fetch(self) -> List[Country]:
        if self.offline:
            logger.info("Offline mode: using fallback country list (%d entries)", len(FALLBACK_COUNTRIES))
            return fallback_countries()
        try:
            raw = self.client.all_countries()
            countries = [Country.from_raw(entry) for entry in raw]
            if not countries:
                raise RuntimeError("empty country list")
            countries.sort(key=lambda c: _sort_key(c.name))
            logger.info("Loaded %d countries from REST Countries", len(countries))
            return countries
        except Exception as e:  # noqa: BLE001
            logger.warning("Failed fetching countries online, fallback used: %s", e)
            return fallback_countries()

    def list_countries(self) -> List[Country]:
        if self._countries_cache is None:
            self._countries_cache = self._fetch()
        return list(self._countries_cache)

    def refresh(self) -> None:
        self._countries_cache = None

    def find_by_code(self, code: Optional[str]) -> Optional[Country]:
        if not code:
            return None
        wanted = code.strip().upper()
        for c in self.list_countries():
            if c.code.upper() == wanted:
                return c
        return None

    def search(self, query: str, limit: int = 10) -> List[Country]:
        """Countries whose name or capital contains ``query`` (case-insensitive)."""
        countries = self.list_countries()
        q = (query or "").strip().lower()
        if not q:
            return countries[:20]
        hits = [c for c in countries if q in c.name.lower() or q in c.capital.lower()]
        return hits[:limit]

    def search_remote(self, query: str) -> List[Country]:
        """Query REST Countries by name; first ten results, empty on failure."""
        if self.offline or not query:
            return []
        try:
            return [Country.from_raw(entry) for entry in self.client.search_countries(query)[:10]]
        except Exception as e:  # noqa: BLE001
            logger.warning("Country search failed for %r: %s", query, e)
            return []

    def match_name(self, name: str, cutoff: float = 0.75) -> Optional[Country]:
        countries = self.list_countries()
        # Exact (case-insensitive) match
        for c in countries:
            if c.name.lower() == name.lower():
                return c
        matches = difflib.get_close_matches(name, [c.name for c in countries], n=1, cutoff=cutoff)
        if matches:
            return next(c for c in countries if c.name == matches[0])
        return None
