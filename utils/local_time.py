from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone
from typing import Optional

DISPLAY_FORMAT = "%d/%m/%Y %H:%M"
CLOCK_FORMAT = "%H:%M:%S"
DATE_FORMAT = "%A %d %B %Y"


def combine_instant(day: str, at: str) -> Optional[datetime]:
    """Naive appointment instant from form values (YYYY-MM-DD, HH:MM).

    Returns None while either field is blank or unparseable.
    """
    if not day or not at:
        return None
    try:
        return datetime.combine(date.fromisoformat(day.strip()), time.fromisoformat(at.strip()))
    except ValueError:
        return None


def host_utc_offset(instant: Optional[datetime] = None) -> timedelta:
    """UTC offset of the machine's local clock at ``instant`` (default: now)."""
    local = (instant or datetime.now()).astimezone()
    return local.utcoffset() or timedelta(0)


def local_time_for(
    instant: Optional[datetime],
    utc_offset_hours: int,
    reference_offset: timedelta,
) -> Optional[str]:
    """Wall-clock display of ``instant`` at a fixed UTC offset.

    ``instant`` is naive and read on the creator's clock, whose UTC offset is
    ``reference_offset``. The target offset is constant year-round.
    """
    if instant is None:
        return None
    utc = instant.replace(tzinfo=None) - reference_offset
    return (utc + timedelta(hours=utc_offset_hours)).strftime(DISPLAY_FORMAT)


def time_at_offset(utc_offset_hours: int, now: Optional[datetime] = None) -> datetime:
    """Current wall clock (naive) at a fixed offset. ``now`` must be aware if given."""
    current = now or datetime.now(timezone.utc)
    return current.astimezone(timezone.utc).replace(tzinfo=None) + timedelta(hours=utc_offset_hours)
