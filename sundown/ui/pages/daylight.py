from __future__ import annotations

import pandas as pd
import streamlit as st

from sundown.data.filters import empty_result_message
from sundown.data.sun_times import STATUS_NO_SUNSET
from sundown.ui.components.charts import STATUS_COLORS, horizontal_bar_chart, render_plotly
from sundown.ui.pages.context import PageContext


def _prepare_chart_frame(df: pd.DataFrame) -> pd.DataFrame:
    # Cities without a sundown today have no finite remaining daylight
    charted = df[df["status"] != STATUS_NO_SUNSET]
    chart_df = charted[["name", "status", "current_time_display", "sunset_display"]].copy()
    chart_df["hours_until_sunset"] = pd.to_numeric(charted["minutes_until_sunset"], errors="coerce") / 60.0
    return chart_df.reset_index(drop=True)


def _no_sunset_names(df: pd.DataFrame) -> list:
    return df.loc[df["status"] == STATUS_NO_SUNSET, "name"].tolist()


def render(df: pd.DataFrame, context: PageContext) -> None:
    st.subheader("Daylight Remaining")
    if df.empty:
        st.info(empty_result_message(context.filters))
        return

    chart_df = _prepare_chart_frame(df)
    if chart_df.empty:
        st.info("None of these cities has a sundown today.")
    else:
        fig = horizontal_bar_chart(
            chart_df,
            x="hours_until_sunset",
            y="name",
            color="status",
            xaxis_title="Hours until sundown",
            color_map=STATUS_COLORS,
            hover_data=["current_time_display", "sunset_display"],
        )
        render_plotly(fig)
        st.caption("Cities past sundown show zero hours remaining.")

    no_sunset = _no_sunset_names(df)
    if no_sunset:
        st.caption("No sundown today: " + ", ".join(no_sunset))
