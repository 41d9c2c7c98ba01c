"""
Per-city clock and sun event helpers.

Sunrise and sunset come from ``astral`` using its default 0.833 degree
depression, i.e. the moment the sun's upper edge crosses the horizon with
atmospheric refraction. Sun events are computed for the city's own calendar
date, not the host's, and expressed in the city's timezone.
"""

from __future__ import annotations

import datetime as dt
import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

import numpy as np
import pandas as pd
from astral import Observer
from astral.sun import sunrise, sunset

from sundown.data.cities import City, city_from_row
from sundown.ui.components.formatting import format_clock

logger = logging.getLogger(__name__)

STATUS_BEFORE_SUNSET = "Before sunset"
STATUS_AFTER_SUNSET = "After sunset"
STATUS_NO_SUNSET = "No sunset today"


def utc_now() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc)


def _as_aware(now: Optional[dt.datetime]) -> dt.datetime:
    if now is None:
        return utc_now()
    if now.tzinfo is None:
        # Naive instants are taken as UTC
        return now.replace(tzinfo=dt.timezone.utc)
    return now


def _observer(city: City) -> Observer:
    return Observer(latitude=city.latitude, longitude=city.longitude)


def local_now(city: City, now: Optional[dt.datetime] = None) -> dt.datetime:
    """Wall-clock time of ``now`` in the city's timezone."""
    return _as_aware(now).astimezone(city.tzinfo)


def sunset_for(city: City, local_date: dt.date) -> Optional[dt.datetime]:
    """Sunset on ``local_date`` in the city's timezone, or None during polar day/night."""
    try:
        return sunset(_observer(city), date=local_date, tzinfo=city.tzinfo)
    except ValueError:
        # astral raises when the sun never crosses the horizon on that date
        return None


def sunrise_for(city: City, local_date: dt.date) -> Optional[dt.datetime]:
    try:
        return sunrise(_observer(city), date=local_date, tzinfo=city.tzinfo)
    except ValueError:
        return None


@dataclass(frozen=True)
class CitySnapshot:
    city: City
    local_time: dt.datetime
    sunrise: Optional[dt.datetime]
    sunset: Optional[dt.datetime]

    @property
    def is_after_sunset(self) -> bool:
        return self.sunset is not None and self.local_time >= self.sunset

    @property
    def time_until_sunset(self) -> Optional[dt.timedelta]:
        if self.sunset is None or self.is_after_sunset:
            return None
        return self.sunset - self.local_time

    @property
    def daylight(self) -> Optional[dt.timedelta]:
        if self.sunrise is None or self.sunset is None:
            return None
        return self.sunset - self.sunrise

    @property
    def status(self) -> str:
        if self.sunset is None:
            return STATUS_NO_SUNSET
        return STATUS_AFTER_SUNSET if self.is_after_sunset else STATUS_BEFORE_SUNSET


def snapshot_city(city: City, now: Optional[dt.datetime] = None) -> CitySnapshot:
    current = local_now(city, now)
    local_date = current.date()
    return CitySnapshot(
        city=city,
        local_time=current,
        sunrise=sunrise_for(city, local_date),
        sunset=sunset_for(city, local_date),
    )


def snapshot_cities(cities: Iterable[City], now: Optional[dt.datetime] = None) -> List[CitySnapshot]:
    instant = _as_aware(now)
    return [snapshot_city(city, instant) for city in cities]


def _minutes(delta: Optional[dt.timedelta]) -> float:
    if delta is None:
        return np.nan
    return delta.total_seconds() / 60.0


def enrich_cities(
    df: pd.DataFrame,
    now: Optional[dt.datetime] = None,
    hour12: bool = True,
) -> pd.DataFrame:
    """Add the derived per-tick clock and sun columns to the cities frame.

    Columns added: local_time, sunrise, sunset, current_time_display,
    sunrise_display, sunset_display, minutes_until_sunset (0 after sunset,
    NaN without a sunset), daylight_hours and status.
    """
    enriched = df.copy()
    if enriched.empty:
        for column in (
            "local_time",
            "sunrise",
            "sunset",
            "current_time_display",
            "sunrise_display",
            "sunset_display",
            "minutes_until_sunset",
            "daylight_hours",
            "status",
        ):
            enriched[column] = pd.Series(dtype=object)
        return enriched

    instant = _as_aware(now)
    snapshots = [snapshot_city(city_from_row(row), instant) for _, row in enriched.iterrows()]

    enriched["local_time"] = [snap.local_time for snap in snapshots]
    enriched["sunrise"] = [snap.sunrise for snap in snapshots]
    enriched["sunset"] = [snap.sunset for snap in snapshots]
    enriched["current_time_display"] = [format_clock(snap.local_time, hour12=hour12) for snap in snapshots]
    enriched["sunrise_display"] = [format_clock(snap.sunrise, hour12=hour12) for snap in snapshots]
    enriched["sunset_display"] = [format_clock(snap.sunset, hour12=hour12) for snap in snapshots]
    enriched["minutes_until_sunset"] = [
        0.0 if snap.is_after_sunset else _minutes(snap.time_until_sunset) for snap in snapshots
    ]
    enriched["daylight_hours"] = [_minutes(snap.daylight) / 60.0 for snap in snapshots]
    enriched["status"] = [snap.status for snap in snapshots]

    logger.debug("Recomputed sun times for %d cities at %s", len(snapshots), instant.isoformat())
    return enriched
