from __future__ import annotations

import pandas as pd

from sundown.data.filters import empty_result_message
from sundown.ui.components.city_cards import cards_from_frame, render_city_cards
from sundown.ui.pages.context import PageContext


def render(df: pd.DataFrame, context: PageContext) -> None:
    render_city_cards(
        cards_from_frame(df),
        columns=context.settings.card_columns,
        empty_message=empty_result_message(context.filters),
    )
