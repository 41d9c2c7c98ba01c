"""
Reusable helpers for rendering data tables with consistent configuration.
"""

from __future__ import annotations

from typing import Dict, Optional

import pandas as pd
import streamlit as st

from sundown.ui.components.formatting import format_number


def render_table(
    df: pd.DataFrame,
    column_config: Optional[Dict[str, Dict[str, str]]] = None,
    column_labels: Optional[Dict[str, str]] = None,
    height: int = 400,
    show_index: bool = False,
    export_file_name: str = "export.csv",
    empty_message: str = "No data to display.",
) -> None:
    if df.empty:
        st.info(empty_message)
        return

    formatted_df = df.copy()
    if column_config:
        for column, config in column_config.items():
            if column not in formatted_df.columns:
                continue
            if config.get("type") == "number":
                decimals = int(config.get("decimals", 0))
                formatted_df[column] = formatted_df[column].apply(
                    lambda v: format_number(None if pd.isna(v) else v, decimals=decimals)
                )

    if column_labels:
        formatted_df = formatted_df.rename(columns=column_labels)

    st.dataframe(
        formatted_df,
        width="stretch",
        height=height,
        hide_index=not show_index,
    )

    export_df = df.rename(columns=column_labels) if column_labels else df
    csv_bytes = export_df.to_csv(index=show_index).encode("utf-8")
    st.download_button(
        "Download CSV",
        data=csv_bytes,
        file_name=export_file_name,
        mime="text/csv",
    )
