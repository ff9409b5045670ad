from __future__ import annotations

import streamlit as st

from fuelops.data.models import Tank
from fuelops.data.state import record_delivery, record_dip
from fuelops.data.views import inventory_insight
from fuelops.exceptions import StationInputError
from fuelops.ui.components.charts import tank_fill_gauge
from fuelops.ui.components.formatting import format_clock, format_liters
from fuelops.ui.pages.context import PageContext
from fuelops.ui.session import set_station_state

CARDS_PER_ROW = 4


def _render_tank_card(tank: Tank, context: PageContext) -> None:
    with st.container(border=True):
        header = f"**{tank.name}**"
        if tank.is_low:
            header += " &nbsp; :red-background[⚠ Low Stock]"
        st.markdown(header)
        st.caption(tank.fuel_type.value.upper())

        st.plotly_chart(
            tank_fill_gauge(tank.display_percent, tank.is_low),
            use_container_width=True,
            config={"displayModeBar": False},
            key=f"fo_gauge_{tank.id}",
        )
        st.markdown(f"**{format_liters(tank.current_level)}** of {format_liters(tank.capacity)}")
        st.caption(
            f"Last dip {format_clock(tank.last_dip_time)} · "
            f"reorder at {format_liters(tank.threshold)}"
        )

        with st.form(key=f"fo_dip_form_{tank.id}", clear_on_submit=True):
            level = st.number_input(
                f"New dip reading (current: {tank.current_level:,.0f} L)",
                min_value=0.0,
                max_value=float(tank.capacity),
                value=float(tank.current_level),
                step=100.0,
                key=f"fo_dip_level_{tank.id}",
            )
            submitted = st.form_submit_button("Record Dip", use_container_width=True)
        if submitted:
            try:
                set_station_state(record_dip(context.state, tank.id, level))
            except StationInputError as exc:
                st.error(str(exc))
            else:
                st.rerun()


def _render_delivery_form(context: PageContext) -> None:
    tanks = {tank.id: tank for tank in context.state.tanks}
    with st.expander("Log Bulk Delivery", expanded=False):
        with st.form(key="fo_delivery_form", clear_on_submit=True):
            tank_id = st.selectbox(
                "Tank",
                options=list(tanks),
                format_func=lambda tid: f"{tanks[tid].name} ({tanks[tid].fuel_type.value})",
            )
            liters = st.number_input("Delivered volume (L)", min_value=0.0, step=500.0)
            submitted = st.form_submit_button("Save delivery")
        if submitted:
            try:
                set_station_state(record_delivery(context.state, tank_id, liters))
            except StationInputError as exc:
                st.error(str(exc))
            else:
                st.rerun()


def render(context: PageContext) -> None:
    st.subheader("Fuel Inventory")
    st.caption("Tank monitoring and dip readings")

    if not context.state.tanks:
        st.info("No tanks configured.")
        return

    _render_delivery_form(context)

    tanks = list(context.state.tanks)
    for idx in range(0, len(tanks), CARDS_PER_ROW):
        row_tanks = tanks[idx: idx + CARDS_PER_ROW]
        cols = st.columns(CARDS_PER_ROW)
        for col, tank in zip(cols, row_tanks):
            with col:
                _render_tank_card(tank, context)

    st.info(f"**Inventory Insight**: {inventory_insight(tanks)}", icon="💡")
