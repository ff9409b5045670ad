from __future__ import annotations

import logging

import streamlit as st

from fuelops.config import PUMP_IDS
from fuelops.data.filters import SalesFilters, apply_sales_filters, serialize_filters
from fuelops.data.models import FuelType
from fuelops.data.state import record_sale
from fuelops.data.views import transactions_frame
from fuelops.exceptions import StationInputError
from fuelops.ui.components.tables import render_table
from fuelops.ui.pages.context import PageContext
from fuelops.ui.session import set_station_state

logger = logging.getLogger(__name__)

TABLE_COLUMN_CONFIG = {
    "timestamp": {"type": "datetime", "format": "%Y-%m-%d %H:%M:%S"},
    "pump_id": {"type": "pump"},
    "liters": {"type": "liters", "decimals": 2},
    "amount": {"type": "currency", "decimals": 2},
}
TABLE_LABELS = {
    "id": "Transaction ID",
    "timestamp": "Date & Time",
    "pump_id": "Pump",
    "fuel_type": "Fuel",
    "liters": "Volume",
    "amount": "Total",
}


def _render_sale_form(context: PageContext) -> None:
    with st.form(key="fo_sale_form", clear_on_submit=True):
        st.markdown("**Record Manual Transaction**")
        col_pump, col_fuel, col_liters, col_amount = st.columns(4)
        with col_pump:
            pump_id = st.selectbox("Pump ID", options=list(PUMP_IDS), format_func=lambda n: f"Pump #{n}")
        with col_fuel:
            fuel_type = st.selectbox("Fuel Type", options=list(FuelType), format_func=lambda f: f.value)
        with col_liters:
            liters = st.number_input("Liters", min_value=0.0, step=0.01, format="%.2f")
        with col_amount:
            amount = st.number_input("Amount ($)", min_value=0.0, step=0.01, format="%.2f")
        submitted = st.form_submit_button("Save")

    if submitted:
        try:
            set_station_state(record_sale(context.state, fuel_type, liters, amount, pump_id))
        except StationInputError as exc:
            st.error(str(exc))
        else:
            st.rerun()


def render(context: PageContext) -> None:
    st.subheader("Sales Log")
    st.caption("Detailed transaction history")

    if st.toggle("New Sale", key="fo_sale_form_open"):
        _render_sale_form(context)

    col_search, col_fuel, col_pump = st.columns([3, 2, 2])
    with col_search:
        query = st.text_input(
            "Search",
            placeholder="Search by ID or Fuel Type...",
            key="fo_sales_search",
        )
    with col_fuel:
        fuel_types = st.multiselect(
            "Fuel",
            options=[fuel.value for fuel in FuelType],
            key="fo_sales_fuel_filter",
        )
    with col_pump:
        pump_ids = st.multiselect(
            "Pump",
            options=list(PUMP_IDS),
            format_func=lambda n: f"Pump #{n}",
            key="fo_sales_pump_filter",
        )
    filters = SalesFilters(query=query, fuel_types=fuel_types or None, pump_ids=pump_ids or None)
    logger.debug("Sales log filters: %s", serialize_filters(filters))

    df = transactions_frame(context.state.transactions)
    filtered = apply_sales_filters(df, filters)
    render_table(
        filtered,
        column_config=TABLE_COLUMN_CONFIG,
        labels=TABLE_LABELS,
        height=500,
        export_file_name="fuel_sales.csv",
        empty_message="No transactions found matching your search.",
    )
