from __future__ import annotations

import threading
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

from utils.directory import CountryDirectory
from utils.local_time import CLOCK_FORMAT, time_at_offset
from utils.logging_setup import get_logger
from utils.offsets import format_offset

logger = get_logger(__name__)


@dataclass(frozen=True)
class WorldClockEntry:
    country: str
    city: str
    timezone: str
    offset: int
    time: datetime

    @property
    def offset_label(self) -> str:
        return format_offset(self.offset)

    @property
    def clock(self) -> str:
        return self.time.strftime(CLOCK_FORMAT)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "country": self.country,
            "city": self.city,
            "timezone": self.timezone,
            "offset": self.offset_label,
            "time": self.clock,
            "date": self.time.strftime("%d/%m/%Y"),
        }


class WorldClockFeed:
    """Live clocks for the first ``size`` directory entries."""

    def __init__(self, directory: CountryDirectory, size: int = 12):
        self.directory = directory
        self.size = size

    def entries(self, now: Optional[datetime] = None) -> List[WorldClockEntry]:
        return [
            WorldClockEntry(c.name, c.capital, c.timezone, c.offset, time_at_offset(c.offset, now))
            for c in self.directory.list_countries()[: self.size]
        ]

    def filter(self, query: str, now: Optional[datetime] = None) -> List[WorldClockEntry]:
        q = (query or "").lower()
        return [e for e in self.entries(now) if q in e.city.lower() or q in e.country.lower()]

    def run(
        self,
        on_tick: Callable[[List[WorldClockEntry]], None],
        interval: float = 1.0,
        stop_event: Optional[threading.Event] = None,
        max_ticks: Optional[int] = None,
    ) -> int:
        """Call ``on_tick`` every ``interval`` seconds in this thread.

        Stops when ``stop_event`` is set or after ``max_ticks``; returns the
        number of ticks delivered.
        """
        stop = stop_event or threading.Event()
        ticks = 0
        while not stop.is_set():
            on_tick(self.entries())
            ticks += 1
            if max_ticks is not None and ticks >= max_ticks:
                break
            stop.wait(interval)
        logger.debug("World clock stopped after %d ticks", ticks)
        return ticks
