"""
Mock station data used to seed a fresh browser session.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import List, Optional

import numpy as np

from fuelops.config import PUMP_IDS
from fuelops.data.models import (
    Alert,
    AlertSeverity,
    FuelType,
    StationState,
    Tank,
    Transaction,
)

logger = logging.getLogger(__name__)

SEED_TRANSACTION_COUNT = 15
SEED_TRANSACTION_SPACING = timedelta(minutes=45)
SEED_PRICE_FACTOR = 1.5
FIRST_TRANSACTION_NUMBER = 1000


def seed_tanks(now: datetime) -> List[Tank]:
    return [
        Tank("t1", "Tank 1 (Main)", FuelType.PETROL_95, 45_000, 32_000, 32_100, now, 5_000),
        Tank("t2", "Tank 2 (Aux)", FuelType.PETROL_93, 30_000, 8_400, 8_500, now, 3_000),
        Tank("t3", "Tank 3 (Diesel)", FuelType.DIESEL_50, 45_000, 41_000, 41_200, now, 5_000),
        Tank("t4", "Tank 4 (Truck Stop)", FuelType.DIESEL_500, 60_000, 12_000, 12_000, now, 8_000),
    ]


def seed_transactions(now: datetime, rng: np.random.Generator) -> List[Transaction]:
    # Newest first, spread over the last few hours
    transactions = []
    for i in range(SEED_TRANSACTION_COUNT):
        transactions.append(
            Transaction(
                id=f"TRX-{FIRST_TRANSACTION_NUMBER + i}",
                timestamp=now - i * SEED_TRANSACTION_SPACING,
                fuel_type=FuelType.DIESEL_50 if i % 3 == 0 else FuelType.PETROL_95,
                liters=float(rng.uniform(10, 60)),
                # Rough price calc, drawn independently of the volume
                amount=float(rng.uniform(10, 60) * SEED_PRICE_FACTOR),
                pump_id=int(rng.integers(PUMP_IDS[0], PUMP_IDS[-1] + 1)),
            )
        )
    return transactions


def seed_alerts(now: datetime) -> List[Alert]:
    return [
        Alert(
            "a1",
            AlertSeverity.CRITICAL,
            "Tank 2 (Petrol 93) approaching reorder level.",
            now,
        ),
        Alert(
            "a2",
            AlertSeverity.WARNING,
            "Pump #4 offline: Sensor timeout.",
            now - timedelta(hours=1),
        ),
    ]


def build_seed_state(seed: Optional[int] = None, now: Optional[datetime] = None) -> StationState:
    """Return the initial station state for a new session."""
    now = now or datetime.now()
    rng = np.random.default_rng(seed)
    state = StationState(
        tanks=tuple(seed_tanks(now)),
        transactions=tuple(seed_transactions(now, rng)),
        alerts=tuple(seed_alerts(now)),
    )
    logger.info(
        "Seeded station state: %d tanks, %d transactions, %d alerts (seed=%s)",
        len(state.tanks),
        len(state.transactions),
        len(state.alerts),
        seed,
    )
    return state
