"""
Layout helpers for the Streamlit application (page config, sidebar).
"""

from __future__ import annotations

import streamlit as st

from fuelops.config import APP_TITLE, AssistantSettings
from fuelops.data.models import StationState
from fuelops.data.views import station_totals
from fuelops.ui.components.formatting import format_currency, format_liters


def setup_page() -> None:
    """Set Streamlit page configuration and top-level styling."""
    st.set_page_config(
        page_title=APP_TITLE,
        layout="wide",
        page_icon="⛽",
    )
    # Inject a small CSS override for PRIMARY buttons in the sidebar to appear as "danger" (red)
    _inject_sidebar_primary_button_red()


def sidebar_status(state: StationState, settings: AssistantSettings) -> bool:
    """Render the station snapshot and assistant status; return True when reset was clicked."""
    st.sidebar.markdown(f"## ⛽ {APP_TITLE}")

    totals = station_totals(state)
    st.sidebar.markdown("#### Station Snapshot")
    st.sidebar.write(f"- **Revenue**: {format_currency(totals.total_revenue)}")
    st.sidebar.write(f"- **Volume sold**: {format_liters(totals.total_volume)}")
    st.sidebar.write(f"- **Open alerts**: {totals.alerts_count} of {len(state.alerts)}")
    low_tanks = [tank.name for tank in state.tanks if tank.is_low]
    if low_tanks:
        st.sidebar.warning("Low stock: " + ", ".join(low_tanks))

    st.sidebar.markdown("#### Assistant")
    if settings.has_api_key:
        st.sidebar.success(f"{settings.model} online")
    else:
        st.sidebar.info("No GEMINI_API_KEY configured; the AI Analyst will reply with an error message.")

    st.sidebar.divider()
    return st.sidebar.button(
        "Reset session data",
        type="primary",
        help="Discard recorded sales and dips and reload the mock station data.",
    )


def _inject_sidebar_primary_button_red() -> None:
    """Style PRIMARY buttons in the sidebar as red (danger-like) so the reset action stands out.

    Scoped to the sidebar container to avoid impacting primary buttons in the main content.
    """
    st.sidebar.markdown(
        """
        <style>
        /* Streamlit uses test IDs for buttons; cover both attribute patterns */
        div[data-testid="stSidebar"] button[kind="primary"],
        div[data-testid="stSidebar"] button[data-testid="baseButton-primary"] {
            background-color: #e53935 !important; /* red 600 */
            border-color: #e53935 !important;
            color: #ffffff !important;
        }
        div[data-testid="stSidebar"] button[kind="primary"]:hover,
        div[data-testid="stSidebar"] button[data-testid="baseButton-primary"]:hover {
            background-color: #c62828 !important; /* red 800 */
            border-color: #c62828 !important;
            color: #ffffff !important;
        }
        </style>
        """,
        unsafe_allow_html=True,
    )
