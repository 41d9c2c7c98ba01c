"""
Utility helpers for formatting clock times, durations, and numbers.
"""

from __future__ import annotations

import datetime as dt
from typing import Optional, Tuple

PLACEHOLDER = "–"


def _twelve_hour(value: dt.datetime) -> Tuple[int, str]:
    # en-US style regardless of LC_TIME
    hour = value.hour % 12 or 12
    suffix = "AM" if value.hour < 12 else "PM"
    return hour, suffix


def format_clock(value: Optional[dt.datetime], hour12: bool = True) -> str:
    """Render a wall-clock time as ``07:05 PM`` (or ``19:05`` in 24-hour mode)."""
    if value is None:
        return PLACEHOLDER
    if hour12:
        hour, suffix = _twelve_hour(value)
        return f"{hour:02d}:{value.minute:02d} {suffix}"
    return f"{value.hour:02d}:{value.minute:02d}"


def format_timestamp(value: Optional[dt.datetime]) -> str:
    if value is None:
        return PLACEHOLDER
    hour, suffix = _twelve_hour(value)
    return f"{hour:02d}:{value.minute:02d}:{value.second:02d} {suffix}"


def format_duration(delta: Optional[dt.timedelta]) -> str:
    if delta is None:
        return PLACEHOLDER
    total_minutes = int(delta.total_seconds() // 60)
    if total_minutes < 0:
        return PLACEHOLDER
    hours, minutes = divmod(total_minutes, 60)
    if hours:
        return f"{hours}h {minutes:02d}m"
    return f"{minutes}m"


def format_number(value: Optional[float], decimals: int = 0) -> str:
    if value is None:
        return PLACEHOLDER
    try:
        return f"{value:,.{decimals}f}"
    except (TypeError, ValueError):
        return PLACEHOLDER
