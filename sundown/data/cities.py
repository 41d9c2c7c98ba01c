"""
Static city dataset driving the per-city clock and sunset calculations.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Iterable, List, Tuple
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import pandas as pd


CITY_COLUMNS = ["name", "latitude", "longitude", "timezone"]


class InvalidCityError(ValueError):
    """Raised when a city record has out-of-range coordinates or an unknown zone."""


@dataclass(frozen=True)
class City:
    name: str
    latitude: float
    longitude: float
    timezone: str

    @property
    def tzinfo(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)


MAJOR_CITIES: Tuple[City, ...] = (
    City("New York", 40.7128, -74.0060, "America/New_York"),
    City("London", 51.5074, -0.1278, "Europe/London"),
    City("Tokyo", 35.6762, 139.6503, "Asia/Tokyo"),
    City("Paris", 48.8566, 2.3522, "Europe/Paris"),
    City("Sydney", -33.8688, 151.2093, "Australia/Sydney"),
    City("Dubai", 25.2048, 55.2708, "Asia/Dubai"),
    City("Singapore", 1.3521, 103.8198, "Asia/Singapore"),
    City("Los Angeles", 34.0522, -118.2437, "America/Los_Angeles"),
    City("Berlin", 52.5200, 13.4050, "Europe/Berlin"),
    City("Cairo", 30.0444, 31.2357, "Africa/Cairo"),
    City("Mumbai", 19.0760, 72.8777, "Asia/Kolkata"),
    City("Rio de Janeiro", -22.9068, -43.1729, "America/Sao_Paulo"),
    City("Moscow", 55.7558, 37.6173, "Europe/Moscow"),
    City("Mexico City", 19.4326, -99.1332, "America/Mexico_City"),
    City("Toronto", 43.6532, -79.3832, "America/Toronto"),
)


def validate_city(city: City) -> City:
    if not -90.0 <= city.latitude <= 90.0:
        raise InvalidCityError(f"{city.name}: latitude {city.latitude} outside [-90, 90]")
    if not -180.0 <= city.longitude <= 180.0:
        raise InvalidCityError(f"{city.name}: longitude {city.longitude} outside [-180, 180]")
    try:
        ZoneInfo(city.timezone)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise InvalidCityError(f"{city.name}: unknown timezone {city.timezone!r}") from exc
    return city


def load_cities(cities: Iterable[City] = MAJOR_CITIES) -> pd.DataFrame:
    """Return the city records as a DataFrame, preserving list order."""
    rows: List[dict] = [asdict(validate_city(city)) for city in cities]
    return pd.DataFrame(rows, columns=CITY_COLUMNS)


def city_from_row(row) -> City:
    return City(
        name=str(row["name"]),
        latitude=float(row["latitude"]),
        longitude=float(row["longitude"]),
        timezone=str(row["timezone"]),
    )
