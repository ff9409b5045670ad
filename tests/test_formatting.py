from __future__ import annotations

from datetime import datetime

import pandas as pd

from fuelops.assistant.chat import GREETING, greeting_message, split_reply
from fuelops.ui.components.formatting import (
    format_clock,
    format_currency,
    format_liters,
    format_number,
    format_percent,
)
from fuelops.ui.components.kpi import KpiCard
from fuelops.ui.components.tables import format_columns


def test_currency_formatting() -> None:
    assert format_currency(1234.5) == "$1,234.50"
    assert format_currency(-12.0) == "-$12.00"
    assert format_currency(2_500_000, decimals=1, compact=True) == "$2.5M"
    assert format_currency(None) == "–"
    assert format_currency("n/a") == "–"


def test_volume_number_and_percent_formatting() -> None:
    assert format_liters(32_000) == "32,000 L"
    assert format_liters(12.346, decimals=2) == "12.35 L"
    assert format_liters(None) == "–"
    assert format_number(1_234_567) == "1,234,567"
    assert format_percent(28.04) == "28.0%"
    assert format_clock(datetime(2026, 1, 1, 7, 5, 9)) == "07:05"
    assert format_clock(datetime(2026, 1, 1, 7, 5, 9), seconds=True) == "07:05:09"


def test_format_columns_applies_column_types() -> None:
    df = pd.DataFrame(
        {
            "timestamp": [datetime(2026, 1, 1, 7, 5, 9)],
            "pump_id": [4],
            "liters": [40.0],
            "amount": [60.0],
        }
    )

    formatted = format_columns(
        df,
        {
            "timestamp": {"type": "datetime", "format": "%H:%M"},
            "pump_id": {"type": "pump"},
            "liters": {"type": "liters", "decimals": 2},
            "amount": {"type": "currency", "decimals": 2},
            "missing": {"type": "number"},
        },
    )

    assert formatted.iloc[0].to_dict() == {
        "timestamp": "07:05",
        "pump_id": "#4",
        "liters": "40.00 L",
        "amount": "$60.00",
    }
    assert df["amount"].iloc[0] == 60.0


def test_split_reply_flags_bullets() -> None:
    lines = split_reply("Summary:\n- Tank 2 low\n  - check pump 4\nDone")

    assert lines == [
        ("Summary:", False),
        ("- Tank 2 low", True),
        ("  - check pump 4", True),
        ("Done", False),
    ]


def test_greeting_message() -> None:
    message = greeting_message()

    assert message.role == "assistant"
    assert message.content == GREETING


def test_kpi_card_display_values() -> None:
    revenue = KpiCard(label="Total Revenue", value=1234.5, currency="$", decimals=2, delta=12.34)
    falling = KpiCard(label="Volume Sold", value=900, delta=-4.0)
    alerts = KpiCard(label="System Alerts", value=2, delta_display="Action Req.")

    assert revenue.display_value() == "$1,234.50"
    assert revenue.display_delta() == "+12.3%"
    assert falling.display_value() == "900"
    assert falling.display_delta() == "-4.0%"
    assert alerts.display_delta() == "Action Req."
    assert KpiCard(label="Pumps Active", value=3, value_display="3 / 8").display_value() == "3 / 8"
    assert KpiCard(label="Empty").display_delta() is None
