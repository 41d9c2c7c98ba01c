from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import List, Optional, Sequence

import pandas as pd
import streamlit as st

from sundown.ui.components.formatting import PLACEHOLDER, format_duration


@dataclass
class CityCard:
    name: str
    current_time: str
    sundown_time: str
    caption: Optional[str] = None


def _caption(row) -> Optional[str]:
    status = row.get("status")
    minutes = row.get("minutes_until_sunset")
    if status is None:
        return None
    if minutes is not None and not pd.isna(minutes) and minutes > 0:
        return f"Sundown in {format_duration(dt.timedelta(minutes=float(minutes)))}"
    return str(status)


def cards_from_frame(df: pd.DataFrame) -> List[CityCard]:
    cards = []
    for _, row in df.iterrows():
        cards.append(
            CityCard(
                name=str(row["name"]),
                current_time=str(row.get("current_time_display", PLACEHOLDER)),
                sundown_time=str(row.get("sunset_display", PLACEHOLDER)),
                caption=_caption(row),
            )
        )
    return cards


def render_city_cards(cards: Sequence[CityCard], columns: int = 3, empty_message: Optional[str] = None) -> None:
    """
    Render city cards in a grid using Streamlit columns, in list order.
    """
    cards = list(cards)
    if not cards:
        st.info(empty_message or "No cities to display.")
        return

    columns = max(columns, 1)
    for idx in range(0, len(cards), columns):
        row_cards = cards[idx: idx + columns]
        cols = st.columns(columns)
        for col, card in zip(cols, row_cards):
            with col:
                with st.container(border=True):
                    st.markdown(f"#### {card.name}")
                    left, right = st.columns(2)
                    left.metric(label="Current Time", value=card.current_time)
                    right.metric(label="Sundown Time", value=card.sundown_time)
                    if card.caption:
                        st.caption(card.caption)
