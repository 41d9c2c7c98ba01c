from __future__ import annotations

from sundown.data.cities import MAJOR_CITIES, load_cities
from sundown.data.filters import (
    SearchFilter,
    apply_search_filter,
    empty_result_message,
    filter_cities,
    matches,
    serialize_filters,
)


def test_matches_is_case_insensitive_substring() -> None:
    assert matches("New York", "york")
    assert matches("New York", "NEW Y")
    assert not matches("New York", "yorkshire")


def test_empty_term_matches_everything() -> None:
    assert filter_cities(MAJOR_CITIES, "") == list(MAJOR_CITIES)


def test_filter_keeps_list_order() -> None:
    names = [city.name for city in filter_cities(MAJOR_CITIES, "ON")]
    assert names == ["London", "Toronto"]


def test_whitespace_is_part_of_the_term() -> None:
    names = [city.name for city in filter_cities(MAJOR_CITIES, " ")]
    assert names == ["New York", "Los Angeles", "Rio de Janeiro", "Mexico City"]


def test_apply_search_filter_count_matches_filtered_list() -> None:
    df = load_cities()
    filters = SearchFilter(term="i")
    filtered = apply_search_filter(df, filters)
    expected = filter_cities(MAJOR_CITIES, "i")
    assert len(filtered) == len(expected)
    assert filtered["name"].tolist() == [city.name for city in expected]
    assert list(filtered.index) == list(range(len(filtered)))
    assert filtered.attrs["applied_filters"] == {"term": "i", "active": True}


def test_apply_search_filter_without_term_returns_all_rows() -> None:
    df = load_cities()
    assert len(apply_search_filter(df, SearchFilter())) == len(MAJOR_CITIES)


def test_no_match_yields_empty_frame_and_placeholder() -> None:
    filters = SearchFilter(term="Atlantis")
    filtered = apply_search_filter(load_cities(), filters)
    assert filtered.empty
    assert empty_result_message(filters) == 'No cities found matching "Atlantis"'


def test_serialize_filters_inactive_by_default() -> None:
    assert serialize_filters(SearchFilter()) == {"term": "", "active": False}
