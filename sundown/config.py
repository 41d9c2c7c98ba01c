"""
Application-wide configuration constants and helper utilities.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List, Optional

APP_TITLE = "Sundown Times for Major Cities"
SEARCH_PLACEHOLDER = "Search cities..."

MIN_CARD_COLUMNS = 1
MAX_CARD_COLUMNS = 6


@dataclass(frozen=True)
class TabConfig:
    key: str
    label: str


# Ordered tab definitions for the dashboard
TABS: List[TabConfig] = [
    TabConfig("cities", "Cities"),
    TabConfig("table", "Table"),
    TabConfig("daylight", "Daylight"),
]


@dataclass(frozen=True)
class DashboardSettings:
    refresh_interval_seconds: int = 1
    hour12: bool = True
    card_columns: int = 3
    log_level: str = "INFO"


DEFAULT_SETTINGS = DashboardSettings()

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_bool(raw: Optional[str], default: bool) -> bool:
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    return default


def _parse_int(raw: Optional[str], default: int) -> int:
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def load_settings() -> DashboardSettings:
    """Read dashboard settings from the environment.

    Unparseable values fall back to the defaults; the refresh interval is at
    least one second and the card grid holds between one and six columns.
    """
    refresh = _parse_int(
        os.getenv("SUNDOWN_REFRESH_SECONDS"), DEFAULT_SETTINGS.refresh_interval_seconds
    )
    columns = _parse_int(os.getenv("SUNDOWN_CARD_COLUMNS"), DEFAULT_SETTINGS.card_columns)
    log_level = (os.getenv("LOG_LEVEL") or DEFAULT_SETTINGS.log_level).strip() or DEFAULT_SETTINGS.log_level

    return DashboardSettings(
        refresh_interval_seconds=max(refresh, 1),
        hour12=_parse_bool(os.getenv("SUNDOWN_HOUR12"), DEFAULT_SETTINGS.hour12),
        card_columns=max(MIN_CARD_COLUMNS, min(columns, MAX_CARD_COLUMNS)),
        log_level=log_level,
    )
