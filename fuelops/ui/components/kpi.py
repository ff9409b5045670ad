"""
Headline metric cards for the station dashboard.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

import streamlit as st

from fuelops.ui.components.formatting import format_currency, format_number, format_percent


@dataclass
class KpiCard:
    label: str
    value: Optional[float] = None
    value_display: Optional[str] = None
    currency: Optional[str] = None
    decimals: int = 0
    delta: Optional[float] = None  # percent change, e.g. day over day
    delta_display: Optional[str] = None
    delta_color: str = "normal"  # st.metric: normal | inverse | off
    help_text: Optional[str] = None

    def display_value(self) -> str:
        if self.value_display is not None:
            return self.value_display
        if self.currency:
            return format_currency(self.value, currency=self.currency, decimals=self.decimals)
        return format_number(self.value, decimals=self.decimals)

    def display_delta(self) -> Optional[str]:
        if self.delta_display is not None:
            return self.delta_display
        if self.delta is None:
            return None
        sign = "+" if self.delta > 0 else ""
        return f"{sign}{format_percent(self.delta)}"


def render_kpi_cards(cards: Sequence[KpiCard], columns: int = 4) -> None:
    """Lay the cards out `columns` per row; a trailing row is narrower."""
    cards = list(cards)
    if not cards:
        return
    per_row = max(columns, 1)
    for start in range(0, len(cards), per_row):
        row = cards[start:start + per_row]
        for slot, card in zip(st.columns(len(row)), row):
            with slot:
                st.metric(
                    label=card.label,
                    value=card.display_value(),
                    delta=card.display_delta(),
                    delta_color=card.delta_color,
                    help=card.help_text,
                )
