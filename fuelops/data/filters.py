"""
Filter utilities that apply the sales-log search to the transactions view.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

import pandas as pd


@dataclass
class SalesFilters:
    query: str = ""
    fuel_types: Optional[list] = None
    pump_ids: Optional[list] = None


DEFAULT_FILTERS = SalesFilters()


def apply_sales_filters(df: pd.DataFrame, filters: SalesFilters) -> pd.DataFrame:
    """
    Apply the search box and the optional fuel/pump selections.

    The query matches fuel types case-insensitively and transaction ids as a
    plain substring.
    """
    if df.empty:
        return df
    filtered = df

    query = (filters.query or "").strip()
    if query:
        fuel_mask = filtered["fuel_type"].astype(str).str.lower().str.contains(
            query.lower(), regex=False, na=False
        )
        id_mask = filtered["id"].astype(str).str.contains(query, regex=False, na=False)
        filtered = filtered[fuel_mask | id_mask]

    if filters.fuel_types and "fuel_type" in filtered:
        filtered = filtered[filtered["fuel_type"].isin(filters.fuel_types)]

    if filters.pump_ids and "pump_id" in filtered:
        filtered = filtered[filtered["pump_id"].isin(filters.pump_ids)]

    filtered = filtered.copy()
    filtered.attrs["applied_filters"] = serialize_filters(filters)
    return filtered


def serialize_filters(filters: SalesFilters) -> Dict[str, Any]:
    """
    Convert the SalesFilters dataclass to a JSON-serialisable dictionary to be
    stored in session_state or used for logging/debugging.
    """
    return {
        "query": filters.query,
        "fuel_types": filters.fuel_types,
        "pump_ids": filters.pump_ids,
    }
