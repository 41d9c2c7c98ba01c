from __future__ import annotations

import datetime as dt

from sundown.data.cities import City, load_cities
from sundown.data.filters import SearchFilter, apply_search_filter
from sundown.data.sun_times import enrich_cities
from sundown.ui.components.city_cards import cards_from_frame

NOON_UTC = dt.datetime(2024, 6, 21, 12, 0, tzinfo=dt.timezone.utc)


def test_cards_follow_filtered_rows() -> None:
    enriched = enrich_cities(load_cities(), now=NOON_UTC)
    filtered = apply_search_filter(enriched, SearchFilter(term="o"))
    cards = cards_from_frame(filtered)
    assert [card.name for card in cards] == filtered["name"].tolist()


def test_card_captions_by_status() -> None:
    enriched = enrich_cities(load_cities(), now=NOON_UTC).set_index("name", drop=False)
    cards = {card.name: card for card in cards_from_frame(enriched)}
    assert cards["London"].caption.startswith("Sundown in 8h")
    assert cards["London"].current_time == "01:00 PM"
    assert cards["Tokyo"].caption == "After sunset"


def test_polar_card_shows_placeholder() -> None:
    polar = load_cities([City("Longyearbyen", 78.2232, 15.6267, "Arctic/Longyearbyen")])
    card = cards_from_frame(enrich_cities(polar, now=NOON_UTC))[0]
    assert card.sundown_time == "–"
    assert card.caption == "No sunset today"
