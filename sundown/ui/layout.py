"""
Layout helpers for the Streamlit application (page setup, search box, footer).
"""

from __future__ import annotations

import datetime as dt
import logging
from typing import List

import streamlit as st

from sundown.config import APP_TITLE, SEARCH_PLACEHOLDER
from sundown.data.filters import SearchFilter, serialize_filters
from sundown.ui.components.formatting import format_number, format_timestamp

logger = logging.getLogger(__name__)

SEARCH_STATE_KEY = "sd_search_term"
PREV_SEARCH_STATE_KEY = "sd_prev_search_term"


def setup_page() -> None:
    """Set Streamlit page configuration."""
    st.set_page_config(
        page_title=APP_TITLE,
        layout="wide",
        page_icon=":sunrise:",
    )


def _clear_state_prefixes(prefixes: List[str]) -> None:
    for prefix in prefixes:
        for key in list(st.session_state.keys()):
            if key.startswith(prefix):
                del st.session_state[key]


def _reset_search() -> None:
    _clear_state_prefixes([SEARCH_STATE_KEY])


def search_filter_ui() -> SearchFilter:
    """
    Render the search box and return the selected filter.
    """
    col_input, col_reset = st.columns([6, 1], vertical_alignment="bottom")
    with col_input:
        term = st.text_input(
            "Search",
            placeholder=SEARCH_PLACEHOLDER,
            key=SEARCH_STATE_KEY,
            label_visibility="collapsed",
        )
    with col_reset:
        st.button("Clear", key="sd_reset_search", on_click=_reset_search, width="stretch")

    filters = SearchFilter(term=term or "")
    previous = st.session_state.get(PREV_SEARCH_STATE_KEY)
    if previous is not None and previous != filters.term:
        logger.info("Search filter changed: %s", serialize_filters(filters))
    st.session_state[PREV_SEARCH_STATE_KEY] = filters.term
    return filters


def render_footer(last_updated: dt.datetime, shown: int, total: int) -> None:
    st.caption(
        f"Showing {format_number(shown)} of {format_number(total)} cities · "
        f"Last updated: {format_timestamp(last_updated)}"
    )
