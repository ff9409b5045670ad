from __future__ import annotations

from typing import List

import streamlit as st

from fuelops.config import CURRENCY_SYMBOL, RECENT_TRANSACTION_ROWS
from fuelops.data.models import AlertSeverity, StationState
from fuelops.data.state import acknowledge_alert
from fuelops.data.views import (
    daily_summaries,
    revenue_trend,
    station_totals,
    tanks_frame,
    transactions_frame,
)
from fuelops.exceptions import StationInputError
from fuelops.ui.components.charts import render_plotly, revenue_area_chart, stock_level_bar_chart
from fuelops.ui.components.formatting import format_clock, format_liters
from fuelops.ui.components.kpi import KpiCard, render_kpi_cards
from fuelops.ui.components.tables import render_table
from fuelops.ui.pages.context import PageContext
from fuelops.ui.pages.helpers import day_over_day
from fuelops.ui.session import set_station_state

SEVERITY_ICONS = {
    AlertSeverity.CRITICAL: "🔴",
    AlertSeverity.WARNING: "🟠",
    AlertSeverity.INFO: "🔵",
}


def _kpi_cards(context: PageContext) -> List[KpiCard]:
    totals = station_totals(context.state, now=context.now)
    summaries = daily_summaries(context.state.transactions)
    return [
        KpiCard(
            label="Total Revenue",
            value=totals.total_revenue,
            currency=CURRENCY_SYMBOL,
            decimals=2,
            delta=day_over_day(summaries, "total_revenue"),
        ),
        KpiCard(
            label="Volume Sold",
            value=totals.total_volume,
            value_display=format_liters(totals.total_volume),
            delta=day_over_day(summaries, "total_liters"),
        ),
        KpiCard(
            label="Pumps Active",
            value=totals.active_pumps,
            value_display=f"{totals.active_pumps} / {totals.total_pumps}",
            help_text="Pumps with a sale in the last few hours.",
        ),
        KpiCard(
            label="System Alerts",
            value=totals.alerts_count,
            delta_display="Action Req." if totals.critical_alerts else None,
            delta_color="inverse",
        ),
    ]


def _render_alerts(state: StationState) -> None:
    st.markdown("#### Alerts")
    if not state.open_alerts:
        st.info("No open alerts.")
        return
    for alert in sorted(state.open_alerts, key=lambda a: a.timestamp, reverse=True):
        col_msg, col_action = st.columns([5, 1])
        with col_msg:
            icon = SEVERITY_ICONS.get(alert.severity, "")
            st.write(f"{icon} **{alert.severity.value.title()}** {alert.message}")
            st.caption(format_clock(alert.timestamp))
        with col_action:
            if st.button("Acknowledge", key=f"fo_ack_{alert.id}"):
                try:
                    set_station_state(acknowledge_alert(state, alert.id))
                except StationInputError as exc:
                    st.error(str(exc))
                else:
                    st.rerun()


def render(context: PageContext) -> None:
    st.subheader("Operational Overview")
    st.caption("Today's metrics and real-time activity")

    render_kpi_cards(_kpi_cards(context), columns=4)

    col_trend, col_stock = st.columns(2)
    with col_trend:
        st.markdown("#### Revenue Trend (Today)")
        trend = revenue_trend(context.state.transactions)
        if trend.empty:
            st.info("No sales recorded yet.")
        else:
            render_plotly(revenue_area_chart(trend))
    with col_stock:
        st.markdown("#### Current Stock Levels")
        tanks = tanks_frame(context.state.tanks)
        if tanks.empty:
            st.info("No tanks configured.")
        else:
            render_plotly(stock_level_bar_chart(tanks))

    st.markdown("#### Recent Transactions")
    recent = transactions_frame(context.state.transactions[:RECENT_TRANSACTION_ROWS])
    render_table(
        recent[["timestamp", "pump_id", "fuel_type", "liters", "amount"]],
        column_config={
            "timestamp": {"type": "datetime", "format": "%H:%M:%S"},
            "pump_id": {"type": "pump"},
            "liters": {"type": "liters", "decimals": 2},
            "amount": {"type": "currency", "decimals": 2},
        },
        labels={
            "timestamp": "Time",
            "pump_id": "Pump",
            "fuel_type": "Fuel Type",
            "liters": "Liters",
            "amount": "Amount",
        },
        empty_message="No transactions yet.",
    )

    _render_alerts(context.state)
