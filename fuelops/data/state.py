"""
Whole-state mutations triggered by dashboard forms.

Every operation validates its input, then returns a new `StationState`;
the state passed in is never modified.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import replace
from datetime import datetime
from typing import Optional, Union

from fuelops.config import PUMP_IDS
from fuelops.data.models import (
    Alert,
    AlertSeverity,
    FuelType,
    StationState,
    Tank,
    Transaction,
)
from fuelops.data.seed import FIRST_TRANSACTION_NUMBER
from fuelops.exceptions import StationInputError

logger = logging.getLogger(__name__)

TRANSACTION_ID_REGEX = re.compile(r"^TRX-(\d+)$")


def _require_number(value, label: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise StationInputError(f"{label} must be a number.") from None
    if math.isnan(number) or math.isinf(number):
        raise StationInputError(f"{label} must be a finite number.")
    return number


def _coerce_fuel_type(fuel_type: Union[FuelType, str]) -> FuelType:
    try:
        return FuelType(fuel_type)
    except ValueError:
        raise StationInputError(f"Unknown fuel type: {fuel_type!r}.") from None


def _find_tank(state: StationState, tank_id: str) -> Tank:
    tank = next((t for t in state.tanks if t.id == tank_id), None)
    if tank is None:
        raise StationInputError(f"Unknown tank: {tank_id!r}.")
    return tank


def _replace_tank(state: StationState, updated: Tank) -> StationState:
    tanks = tuple(updated if t.id == updated.id else t for t in state.tanks)
    return replace(state, tanks=tanks)


def next_transaction_id(state: StationState) -> str:
    numbers = []
    for trx in state.transactions:
        match = TRANSACTION_ID_REGEX.match(trx.id)
        if match:
            numbers.append(int(match.group(1)))
    next_number = max(numbers) + 1 if numbers else FIRST_TRANSACTION_NUMBER
    return f"TRX-{next_number}"


def record_sale(
    state: StationState,
    fuel_type: Union[FuelType, str],
    liters,
    amount,
    pump_id: int,
    now: Optional[datetime] = None,
) -> StationState:
    """Prepend a sale and draw its volume from every tank holding that fuel.

    Tank levels are floored at zero. A tank pushed below its reorder
    threshold by this sale raises a critical alert.
    """
    fuel = _coerce_fuel_type(fuel_type)
    liters = _require_number(liters, "Liters")
    amount = _require_number(amount, "Amount")
    if liters <= 0:
        raise StationInputError("Liters must be greater than zero.")
    if amount < 0:
        raise StationInputError("Amount cannot be negative.")
    if isinstance(pump_id, bool) or pump_id not in PUMP_IDS:
        raise StationInputError(f"Unknown pump: #{pump_id}.")

    now = now or datetime.now()
    transaction = Transaction(
        id=next_transaction_id(state),
        timestamp=now,
        fuel_type=fuel,
        liters=liters,
        amount=amount,
        pump_id=int(pump_id),
    )

    tanks = []
    alerts = list(state.alerts)
    for tank in state.tanks:
        if tank.fuel_type != fuel:
            tanks.append(tank)
            continue
        updated = replace(tank, current_level=max(0.0, tank.current_level - liters))
        if updated.below_threshold and not tank.below_threshold:
            alerts.append(
                Alert(
                    id=f"a{len(alerts) + 1}",
                    severity=AlertSeverity.CRITICAL,
                    message=f"{tank.name} ({tank.fuel_type.value}) dropped below reorder level.",
                    timestamp=now,
                )
            )
            logger.warning("Tank %s crossed its reorder threshold", tank.id)
        tanks.append(updated)

    logger.info(
        "Recorded sale %s: %.2f L %s on pump #%d",
        transaction.id,
        liters,
        fuel.value,
        transaction.pump_id,
    )
    return StationState(
        tanks=tuple(tanks),
        transactions=(transaction,) + tuple(state.transactions),
        alerts=tuple(alerts),
    )


def record_dip(
    state: StationState,
    tank_id: str,
    level,
    now: Optional[datetime] = None,
) -> StationState:
    """Overwrite a tank's level with a manual dip reading."""
    tank = _find_tank(state, tank_id)
    level = _require_number(level, "Dip reading")
    if level < 0:
        raise StationInputError("Dip reading cannot be negative.")
    if level > tank.capacity:
        raise StationInputError(
            f"Dip reading exceeds {tank.name} capacity of {tank.capacity:,.0f} L."
        )
    updated = replace(
        tank,
        current_level=level,
        last_dip_reading=level,
        last_dip_time=now or datetime.now(),
    )
    logger.info("Recorded dip for %s: %.0f L (was %.0f L)", tank.id, level, tank.current_level)
    return _replace_tank(state, updated)


def record_delivery(
    state: StationState,
    tank_id: str,
    liters,
) -> StationState:
    """Add a bulk delivery to a tank, capped at its capacity."""
    tank = _find_tank(state, tank_id)
    liters = _require_number(liters, "Delivery volume")
    if liters <= 0:
        raise StationInputError("Delivery volume must be greater than zero.")
    new_level = min(tank.capacity, tank.current_level + liters)
    if new_level < tank.current_level + liters:
        logger.warning(
            "Delivery to %s capped at capacity; %.0f L not stored",
            tank.id,
            tank.current_level + liters - new_level,
        )
    logger.info("Recorded delivery for %s: %.0f L", tank.id, liters)
    return _replace_tank(state, replace(tank, current_level=new_level))


def acknowledge_alert(state: StationState, alert_id: str) -> StationState:
    if not any(alert.id == alert_id for alert in state.alerts):
        raise StationInputError(f"Unknown alert: {alert_id!r}.")
    alerts = tuple(
        replace(alert, acknowledged=True) if alert.id == alert_id else alert
        for alert in state.alerts
    )
    logger.info("Acknowledged alert %s", alert_id)
    return replace(state, alerts=alerts)
