"""
Plotly chart factory functions with consistent styling for the dashboard.
"""

from __future__ import annotations

from typing import Dict, List, Optional

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go
import streamlit as st


DEFAULT_TEMPLATE = "plotly_white"
STATUS_COLORS = {
    "Before sunset": "#ff7f0e",  # orange while the sun is up
    "After sunset": "#1f3a93",  # dusk blue
    "No sunset today": "#7f7f7f",
}


def _configure_layout(
    fig: go.Figure,
    title: Optional[str] = None,
    xaxis_title: Optional[str] = None,
    legend_title: Optional[str] = None,
) -> go.Figure:
    fig.update_layout(
        template=DEFAULT_TEMPLATE,
        title=title,
        legend_title=legend_title,
        margin=dict(l=40, r=20, t=60, b=40),
    )
    if xaxis_title:
        fig.update_xaxes(title=xaxis_title)
    fig.update_xaxes(showgrid=True, zeroline=True)
    fig.update_yaxes(showgrid=False)
    return fig


def render_plotly(fig: go.Figure) -> None:
    st.plotly_chart(fig, width="stretch", config={"displayModeBar": False})


def horizontal_bar_chart(
    df: pd.DataFrame,
    x: str,
    y: str,
    color: Optional[str] = None,
    title: Optional[str] = None,
    xaxis_title: Optional[str] = None,
    color_map: Optional[Dict[str, str]] = None,
    hover_data: Optional[List[str]] = None,
) -> go.Figure:
    fig = px.bar(
        df,
        x=x,
        y=y,
        color=color,
        orientation="h",
        color_discrete_map=color_map,
        hover_data=hover_data,
    )
    # Keep the first city of the list at the top
    fig.update_yaxes(categoryorder="array", categoryarray=list(df[y])[::-1])
    return _configure_layout(fig, title=title, xaxis_title=xaxis_title, legend_title=color)
