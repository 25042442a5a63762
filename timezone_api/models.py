from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

from utils.offsets import resolve_offset


@dataclass(frozen=True)
class Country:
    name: str
    code: str
    timezone: str
    offset: int
    capital: str

    @classmethod
    def from_raw(cls, raw: Dict[str, Any]) -> "Country":
        """Build from a REST Countries v3.1 entry.

        First listed timezone (or "UTC"), offset through the static resolver,
        first capital (or the country name). Raises KeyError/TypeError on a
        malformed entry.
        """
        name = raw["name"]["common"]
        timezones = raw.get("timezones") or []
        capitals = raw.get("capital") or []
        timezone = timezones[0] if timezones else "UTC"
        return cls(
            name=name,
            code=raw["cca2"],
            timezone=timezone,
            offset=resolve_offset(timezone),
            capital=capitals[0] if capitals else name,
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class TimeZoneData:
    timezone: str
    country: str
    city: str
    offset: int
    current_time: Optional[str]

    @classmethod
    def from_label(cls, timezone: str, offset: int = 0, current_time: Optional[str] = None) -> "TimeZoneData":
        # "America/Argentina/Buenos_Aires" -> region "America", city "Buenos Aires"
        parts = timezone.split("/")
        return cls(
            timezone=timezone,
            country=parts[0].replace("_", " "),
            city=parts[-1].replace("_", " "),
            offset=offset,
            current_time=current_time,
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
