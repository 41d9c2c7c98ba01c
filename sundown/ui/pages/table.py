from __future__ import annotations

import pandas as pd
import streamlit as st

from sundown.data.filters import empty_result_message
from sundown.ui.components.tables import render_table
from sundown.ui.pages.context import PageContext


DISPLAY_COLUMNS = {
    "name": "City",
    "timezone": "Timezone",
    "latitude": "Latitude",
    "longitude": "Longitude",
    "current_time_display": "Current Time",
    "sunrise_display": "Sunrise",
    "sunset_display": "Sundown Time",
    "daylight_hours": "Daylight (h)",
    "status": "Status",
}


def render(df: pd.DataFrame, context: PageContext) -> None:
    st.subheader("All Cities")
    columns = [col for col in DISPLAY_COLUMNS if col in df.columns]
    render_table(
        df[columns] if columns else df,
        column_config={
            "latitude": {"type": "number", "decimals": 4},
            "longitude": {"type": "number", "decimals": 4},
            "daylight_hours": {"type": "number", "decimals": 2},
        },
        column_labels=DISPLAY_COLUMNS,
        height=min(600, 38 * (len(df) + 1) + 2),
        export_file_name="sundown_times.csv",
        empty_message=empty_result_message(context.filters),
    )
