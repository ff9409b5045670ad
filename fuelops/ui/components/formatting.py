"""
Utility helpers for formatting numeric values, currency strings, volumes,
and percentages.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from fuelops.config import CURRENCY_SYMBOL

SCALE_FACTORS = [
    (1_000_000_000, "B"),
    (1_000_000, "M"),
    (1_000, "K"),
]


def format_number(value: Optional[float], decimals: int = 0) -> str:
    if value is None:
        return "–"
    try:
        return f"{value:,.{decimals}f}"
    except (TypeError, ValueError):
        return "–"


def _scale_value(value: float):
    for factor, suffix in SCALE_FACTORS:
        if abs(value) >= factor:
            return value / factor, suffix
    return value, ""


def format_currency(
    value: Optional[float],
    currency: str = CURRENCY_SYMBOL,
    decimals: int = 2,
    compact: bool = False,
) -> str:
    if value is None:
        return "–"
    try:
        numeric = float(value)
    except (TypeError, ValueError):
        return "–"

    suffix = ""
    display_value = numeric
    if compact:
        display_value, suffix = _scale_value(numeric)
    formatted = f"{abs(display_value):,.{decimals}f}"
    sign = "-" if display_value < 0 else ""
    return f"{sign}{currency}{formatted}{suffix}"


def format_liters(value: Optional[float], decimals: int = 0) -> str:
    number = format_number(value, decimals=decimals)
    if number == "–":
        return number
    return f"{number} L"


def format_percent(value: Optional[float], decimals: int = 1) -> str:
    if value is None:
        return "–"
    try:
        return f"{value:.{decimals}f}%"
    except (TypeError, ValueError):
        return "–"


def format_clock(value: Optional[datetime], seconds: bool = False) -> str:
    if value is None:
        return "–"
    return value.strftime("%H:%M:%S" if seconds else "%H:%M")
