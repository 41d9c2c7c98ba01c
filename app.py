import sundown.bootstrap_env  # must be first to set env/secrets

import streamlit as st

from sundown.config import APP_TITLE, TABS, DashboardSettings, load_settings
from sundown.data.cities import load_cities
from sundown.data.filters import SearchFilter, apply_search_filter
from sundown.data.sun_times import enrich_cities, utc_now
from sundown.logging_config import configure_logging
from sundown.ui.layout import render_footer, search_filter_ui, setup_page
from sundown.ui.pages import cities, daylight, table
from sundown.ui.pages.context import PageContext

PAGE_RENDERERS = {
    "cities": cities.render,
    "table": table.render,
    "daylight": daylight.render,
}


def render_live_view(filters: SearchFilter, settings: DashboardSettings) -> None:
    now = utc_now()
    cities_df = load_cities()
    enriched_df = enrich_cities(cities_df, now=now, hour12=settings.hour12)
    filtered_df = apply_search_filter(enriched_df, filters)

    context = PageContext(
        filters=filters,
        settings=settings,
        now=now,
    )

    tab_labels = [tab.label for tab in TABS]
    streamlit_tabs = st.tabs(tab_labels)

    for streamlit_tab, tab_config in zip(streamlit_tabs, TABS):
        renderer = PAGE_RENDERERS.get(tab_config.key)
        if renderer is None:
            continue
        with streamlit_tab:
            renderer(filtered_df, context)

    # Host-local clock
    render_footer(context.now.astimezone(), shown=len(filtered_df), total=len(enriched_df))


def main() -> None:
    configure_logging()
    settings = load_settings()

    setup_page()
    st.title(APP_TITLE)

    filters = search_filter_ui()

    # Only the fragment re-runs on the timer; the search box keeps its state
    live_view = st.fragment(run_every=settings.refresh_interval_seconds)(render_live_view)
    live_view(filters, settings)


if __name__ == "__main__":
    main()
