from __future__ import annotations

from typing import Any

from utils.static_data import TIMEZONE_OFFSETS


def resolve_offset(timezone: Any) -> int:
    """Fixed UTC offset (hours) for a timezone label.

    Exact match against the static table; unknown, empty or non-string labels
    resolve to 0. No DST handling.
    """
    if not isinstance(timezone, str):
        return 0
    return TIMEZONE_OFFSETS.get(timezone, 0)


def format_offset(hours: int) -> str:
    sign = "+" if hours >= 0 else "-"
    return f"GMT{sign}{abs(hours)}"
