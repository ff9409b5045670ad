"""
Reusable helpers for rendering data tables with consistent configuration.
"""

from __future__ import annotations

from typing import Dict, Optional

import pandas as pd
import streamlit as st

from fuelops.ui.components.formatting import (
    format_currency,
    format_liters,
    format_number,
    format_percent,
)


def format_columns(df: pd.DataFrame, column_config: Dict[str, Dict[str, str]]) -> pd.DataFrame:
    formatted_df = df.copy()
    for column, config in column_config.items():
        if column not in formatted_df.columns:
            continue
        fmt_type = config.get("type")
        decimals = int(config.get("decimals", 0))
        if fmt_type == "currency":
            formatted_df[column] = formatted_df[column].apply(
                lambda v: format_currency(v, decimals=decimals)
            )
        elif fmt_type == "liters":
            formatted_df[column] = formatted_df[column].apply(
                lambda v: format_liters(v, decimals=decimals)
            )
        elif fmt_type == "percent":
            formatted_df[column] = formatted_df[column].apply(
                lambda v: format_percent(v, decimals=decimals)
            )
        elif fmt_type == "number":
            formatted_df[column] = formatted_df[column].apply(
                lambda v: format_number(v, decimals=decimals)
            )
        elif fmt_type == "pump":
            formatted_df[column] = formatted_df[column].apply(lambda v: f"#{v}")
        elif fmt_type == "datetime":
            fmt = config.get("format", "%Y-%m-%d %H:%M:%S")
            formatted_df[column] = pd.to_datetime(formatted_df[column]).dt.strftime(fmt)
    return formatted_df


def render_table(
    df: pd.DataFrame,
    column_config: Optional[Dict[str, Dict[str, str]]] = None,
    labels: Optional[Dict[str, str]] = None,
    height: Optional[int] = None,
    show_index: bool = False,
    export_file_name: Optional[str] = None,
    empty_message: str = "No data to display.",
) -> None:
    if df.empty:
        st.info(empty_message)
        return

    formatted_df = format_columns(df, column_config) if column_config else df.copy()
    if labels:
        formatted_df = formatted_df.rename(columns=labels)

    kwargs = {"height": height} if height else {}
    st.dataframe(
        formatted_df,
        use_container_width=True,
        hide_index=not show_index,
        **kwargs,
    )

    if export_file_name:
        csv_bytes = df.to_csv(index=show_index).encode("utf-8")
        st.download_button(
            "Download CSV",
            data=csv_bytes,
            file_name=export_file_name,
            mime="text/csv",
        )
