"""
Tabular views and aggregates computed from the station state for the
dashboard pages.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Iterable, List, Optional

import pandas as pd

from fuelops.config import ACTIVE_PUMP_WINDOW_HOURS, PUMP_IDS, TREND_POINTS
from fuelops.data.models import (
    Alert,
    AlertSeverity,
    DailySummary,
    StationState,
    Tank,
    Transaction,
)

TANK_COLUMNS = [
    "id",
    "name",
    "fuel_type",
    "capacity",
    "current_level",
    "fill_percent",
    "threshold",
    "last_dip_reading",
    "last_dip_time",
    "is_low",
    "below_threshold",
]
TRANSACTION_COLUMNS = ["id", "timestamp", "pump_id", "fuel_type", "liters", "amount"]
ALERT_COLUMNS = ["id", "severity", "message", "timestamp", "acknowledged"]
TREND_COLUMNS = ["time", "amount", "liters"]


@dataclass(frozen=True)
class StationTotals:
    total_revenue: float
    total_volume: float
    transactions_count: int
    alerts_count: int
    critical_alerts: int
    active_pumps: int
    total_pumps: int


def tanks_frame(tanks: Iterable[Tank]) -> pd.DataFrame:
    rows = [
        {
            "id": tank.id,
            "name": tank.name,
            "fuel_type": tank.fuel_type.value,
            "capacity": tank.capacity,
            "current_level": tank.current_level,
            "fill_percent": tank.fill_percent,
            "threshold": tank.threshold,
            "last_dip_reading": tank.last_dip_reading,
            "last_dip_time": tank.last_dip_time,
            "is_low": tank.is_low,
            "below_threshold": tank.below_threshold,
        }
        for tank in tanks
    ]
    return pd.DataFrame(rows, columns=TANK_COLUMNS)


def transactions_frame(transactions: Iterable[Transaction]) -> pd.DataFrame:
    rows = [
        {
            "id": trx.id,
            "timestamp": trx.timestamp,
            "pump_id": trx.pump_id,
            "fuel_type": trx.fuel_type.value,
            "liters": trx.liters,
            "amount": trx.amount,
        }
        for trx in transactions
    ]
    df = pd.DataFrame(rows, columns=TRANSACTION_COLUMNS)
    if not df.empty:
        df["timestamp"] = pd.to_datetime(df["timestamp"])
    return df


def alerts_frame(alerts: Iterable[Alert]) -> pd.DataFrame:
    rows = [
        {
            "id": alert.id,
            "severity": alert.severity.value,
            "message": alert.message,
            "timestamp": alert.timestamp,
            "acknowledged": alert.acknowledged,
        }
        for alert in alerts
    ]
    return pd.DataFrame(rows, columns=ALERT_COLUMNS)


def revenue_trend(transactions: Iterable[Transaction], points: int = TREND_POINTS) -> pd.DataFrame:
    """
    Sum amount and liters per HH:MM bucket, oldest bucket first, keeping the
    most recent `points` buckets.
    """
    df = transactions_frame(transactions)
    if df.empty:
        return pd.DataFrame(columns=TREND_COLUMNS)

    df = df.sort_values("timestamp", kind="stable")
    df["time"] = df["timestamp"].dt.strftime("%H:%M")
    # groupby(sort=False) keeps first-seen order, i.e. chronological
    grouped = (
        df.groupby("time", sort=False)[["amount", "liters"]]
        .sum()
        .reset_index()
    )
    return grouped.tail(points).reset_index(drop=True)[TREND_COLUMNS]


def daily_summaries(transactions: Iterable[Transaction]) -> List[DailySummary]:
    df = transactions_frame(transactions)
    if df.empty:
        return []
    df["date"] = df["timestamp"].dt.date
    grouped = df.groupby("date").agg(
        total_liters=("liters", "sum"),
        total_revenue=("amount", "sum"),
        transactions_count=("id", "count"),
    )
    return [
        DailySummary(
            date=day,
            total_liters=float(row.total_liters),
            total_revenue=float(row.total_revenue),
            transactions_count=int(row.transactions_count),
        )
        for day, row in grouped.sort_index().iterrows()
    ]


def active_pumps(
    transactions: Iterable[Transaction],
    now: Optional[datetime] = None,
    window_hours: int = ACTIVE_PUMP_WINDOW_HOURS,
) -> int:
    """Count distinct pumps with at least one sale inside the trailing window."""
    now = now or datetime.now()
    cutoff = now - timedelta(hours=window_hours)
    return len({trx.pump_id for trx in transactions if cutoff <= trx.timestamp <= now})


def station_totals(state: StationState, now: Optional[datetime] = None) -> StationTotals:
    return StationTotals(
        total_revenue=float(sum(trx.amount for trx in state.transactions)),
        total_volume=float(sum(trx.liters for trx in state.transactions)),
        transactions_count=len(state.transactions),
        alerts_count=len(state.open_alerts),
        critical_alerts=sum(1 for a in state.open_alerts if a.severity == AlertSeverity.CRITICAL),
        active_pumps=active_pumps(state.transactions, now=now),
        total_pumps=len(PUMP_IDS),
    )


def inventory_insight(tanks: Iterable[Tank]) -> str:
    below = [tank for tank in tanks if tank.below_threshold]
    if not below:
        return "All tanks are above their reorder points."
    names = ", ".join(f"{tank.name} ({tank.fuel_type.value})" for tank in below)
    return f"Below reorder point: {names}. Consider scheduling a refill."
