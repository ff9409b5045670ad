"""
Plain records describing the station: tanks, sales and alerts.
"""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import List, Tuple

from fuelops.config import LOW_STOCK_PERCENT


class FuelType(str, enum.Enum):
    PETROL_95 = "Petrol 95"
    PETROL_93 = "Petrol 93"
    DIESEL_50 = "Diesel 50ppm"
    DIESEL_500 = "Diesel 500ppm"

    @property
    def is_diesel(self) -> bool:
        return self.value.startswith("Diesel")


class AlertSeverity(str, enum.Enum):
    CRITICAL = "critical"
    WARNING = "warning"
    INFO = "info"


@dataclass(frozen=True)
class Tank:
    id: str
    name: str
    fuel_type: FuelType
    capacity: float  # liters
    current_level: float  # liters
    last_dip_reading: float  # liters
    last_dip_time: datetime
    threshold: float  # reorder point, liters

    @property
    def fill_percent(self) -> float:
        if self.capacity <= 0:
            return 0.0
        return self.current_level / self.capacity * 100

    @property
    def display_percent(self) -> int:
        """Fill percentage rounded half up, as shown on gauges and badges."""
        return int(math.floor(self.fill_percent + 0.5))

    @property
    def is_low(self) -> bool:
        return self.display_percent < LOW_STOCK_PERCENT

    @property
    def below_threshold(self) -> bool:
        return self.current_level < self.threshold


@dataclass(frozen=True)
class Transaction:
    id: str
    timestamp: datetime
    fuel_type: FuelType
    liters: float
    amount: float
    pump_id: int


@dataclass(frozen=True)
class Alert:
    id: str
    severity: AlertSeverity
    message: str
    timestamp: datetime
    acknowledged: bool = False


@dataclass(frozen=True)
class DailySummary:
    date: date
    total_liters: float
    total_revenue: float
    transactions_count: int


@dataclass(frozen=True)
class StationState:
    """Everything the dashboard shows; transactions are ordered newest first."""

    tanks: Tuple[Tank, ...] = ()
    transactions: Tuple[Transaction, ...] = ()
    alerts: Tuple[Alert, ...] = field(default_factory=tuple)

    @property
    def open_alerts(self) -> List[Alert]:
        return [alert for alert in self.alerts if not alert.acknowledged]
