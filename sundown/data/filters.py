"""
Search filter applied to the cities dataset.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Sequence

import pandas as pd

from sundown.data.cities import City


@dataclass
class SearchFilter:
    term: str = ""

    @property
    def normalized(self) -> str:
        return self.term.lower()

    @property
    def is_active(self) -> bool:
        return bool(self.term)


def matches(name: str, term: str) -> bool:
    """Case-insensitive substring match; an empty term matches every name."""
    return term.lower() in name.lower()


def filter_cities(cities: Sequence[City], term: str) -> List[City]:
    return [city for city in cities if matches(city.name, term)]


def apply_search_filter(df: pd.DataFrame, filters: SearchFilter) -> pd.DataFrame:
    """
    Narrow the cities frame to rows whose name contains the search term.

    Row order is preserved and the index is reset so renderers can rely on
    positional order.
    """
    if df.empty or not filters.is_active or "name" not in df:
        return df.reset_index(drop=True)
    mask = df["name"].astype(str).str.lower().str.contains(filters.normalized, regex=False, na=False)
    filtered = df[mask].reset_index(drop=True)
    filtered.attrs["applied_filters"] = serialize_filters(filters)
    return filtered


def empty_result_message(filters: SearchFilter) -> str:
    return f'No cities found matching "{filters.term}"'


def serialize_filters(filters: SearchFilter) -> Dict[str, Any]:
    """
    Convert the SearchFilter dataclass to a JSON-serialisable dictionary to be
    stored in session_state or used for logging.
    """
    return {"term": filters.term, "active": filters.is_active}
