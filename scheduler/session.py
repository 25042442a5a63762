from __future__ import annotations

import concurrent.futures
from datetime import datetime, timedelta
from typing import List, Optional, Tuple

from scheduler.appointment import AppointmentForm
from scheduler.world_clock import WorldClockFeed
from timezone_api.models import Country
from utils.directory import CountryDirectory
from utils.local_time import CLOCK_FORMAT, DATE_FORMAT, host_utc_offset
from utils.logging_setup import get_logger

logger = get_logger(__name__)


class DashboardSession:
    """State behind one open dashboard: home clock, world clocks and the appointment form.

    The directory fetch runs on an executor; a result arriving after close()
    is dropped instead of being applied to the torn-down session.
    """

    def __init__(
        self,
        directory: CountryDirectory,
        executor: Optional[concurrent.futures.Executor] = None,
        reference_offset: Optional[timedelta] = None,
    ):
        self.directory = directory
        self.executor = executor or concurrent.futures.ThreadPoolExecutor(max_workers=1)
        self._owns_executor = executor is None
        self.reference_offset = reference_offset if reference_offset is not None else host_utc_offset()
        self.form = AppointmentForm(directory, self.reference_offset)
        self.world_clock = WorldClockFeed(directory)
        self.countries: List[Country] = []
        self.closed = False
        self._pending: Optional[concurrent.futures.Future] = None

    def load_countries(self) -> concurrent.futures.Future:
        future = self.executor.submit(self.directory.list_countries)
        future.add_done_callback(self._apply_countries)
        self._pending = future
        return future

    def _apply_countries(self, future: concurrent.futures.Future) -> None:
        if self.closed or future.cancelled():
            logger.debug("Session closed; discarding country list")
            return
        try:
            self.countries = future.result()
        except Exception as e:  # noqa: BLE001
            # list_countries falls back on its own; anything here is unexpected
            logger.error("Country load failed: %s", e)

    def home_clock(self, now: Optional[datetime] = None) -> Tuple[str, str]:
        current = now or datetime.now()
        return current.strftime(CLOCK_FORMAT), current.strftime(DATE_FORMAT)

    def close(self) -> None:
        self.closed = True
        if self._pending is not None:
            self._pending.cancel()
        if self._owns_executor:
            self.executor.shutdown(wait=False)
