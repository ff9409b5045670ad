from __future__ import annotations

from dataclasses import replace
from datetime import datetime

import pytest

from fuelops.data.models import AlertSeverity, FuelType, StationState, Tank
from fuelops.data.seed import build_seed_state
from fuelops.data.state import (
    acknowledge_alert,
    next_transaction_id,
    record_delivery,
    record_dip,
    record_sale,
)
from fuelops.exceptions import StationInputError


def _dt() -> datetime:
    return datetime(2026, 1, 1, 12, 0)


def _tank(tank_id: str, fuel_type: FuelType, level: float, threshold: float = 0.0) -> Tank:
    return Tank(
        id=tank_id,
        name=f"Tank {tank_id}",
        fuel_type=fuel_type,
        capacity=10_000,
        current_level=level,
        last_dip_reading=level,
        last_dip_time=_dt(),
        threshold=threshold,
    )


def _levels(state: StationState) -> dict:
    return {tank.id: tank.current_level for tank in state.tanks}


def test_sale_decreases_matching_tank_and_prepends_transaction() -> None:
    state = build_seed_state(seed=1, now=_dt())

    updated = record_sale(state, FuelType.PETROL_95, 40.0, 60.0, 3, now=_dt())

    assert _levels(updated)["t1"] == pytest.approx(32_000 - 40.0)
    for tank_id in ("t2", "t3", "t4"):
        assert _levels(updated)[tank_id] == _levels(state)[tank_id]
    newest = updated.transactions[0]
    assert newest.id == "TRX-1015"
    assert newest.liters == 40.0
    assert newest.amount == 60.0
    assert newest.pump_id == 3
    assert newest.timestamp == _dt()
    assert len(updated.transactions) == len(state.transactions) + 1


def test_sale_leaves_original_state_untouched() -> None:
    state = build_seed_state(seed=1, now=_dt())
    before = _levels(state)

    record_sale(state, FuelType.PETROL_95, 40.0, 60.0, 3, now=_dt())

    assert _levels(state) == before
    assert len(state.transactions) == 15


def test_sale_level_floored_at_zero() -> None:
    state = StationState(tanks=(_tank("x", FuelType.DIESEL_50, 10.0),))

    updated = record_sale(state, FuelType.DIESEL_50, 50.0, 75.0, 1, now=_dt())

    assert _levels(updated)["x"] == 0.0


def test_sale_draws_from_every_tank_with_matching_fuel() -> None:
    state = StationState(
        tanks=(
            _tank("a", FuelType.DIESEL_50, 1_000.0),
            _tank("b", FuelType.DIESEL_50, 500.0),
            _tank("c", FuelType.PETROL_93, 700.0),
        )
    )

    updated = record_sale(state, "Diesel 50ppm", 100.0, 150.0, 2, now=_dt())

    assert _levels(updated) == {"a": 900.0, "b": 400.0, "c": 700.0}


def test_sale_crossing_threshold_raises_single_critical_alert() -> None:
    state = build_seed_state(seed=1, now=_dt())
    open_before = len(state.alerts)

    # Tank 2: 8 400 L with a 3 000 L reorder point
    first = record_sale(state, FuelType.PETROL_93, 5_500.0, 9_000.0, 4, now=_dt())
    second = record_sale(first, FuelType.PETROL_93, 100.0, 160.0, 4, now=_dt())

    assert len(first.alerts) == open_before + 1
    alert = first.alerts[-1]
    assert alert.severity == AlertSeverity.CRITICAL
    assert "Tank 2 (Aux)" in alert.message
    assert not alert.acknowledged
    assert len(second.alerts) == len(first.alerts)


@pytest.mark.parametrize(
    ("fuel_type", "liters", "amount", "pump_id"),
    [
        (FuelType.PETROL_95, 0, 10.0, 1),
        (FuelType.PETROL_95, -5, 10.0, 1),
        (FuelType.PETROL_95, "abc", 10.0, 1),
        (FuelType.PETROL_95, 10.0, -1.0, 1),
        (FuelType.PETROL_95, 10.0, 15.0, 9),
        (FuelType.PETROL_95, 10.0, 15.0, "3"),
        (FuelType.PETROL_95, 10.0, 15.0, True),
        (FuelType.PETROL_95, 10.0, 15.0, 2.5),
        ("Kerosene", 10.0, 15.0, 1),
    ],
)
def test_sale_rejects_invalid_input(fuel_type, liters, amount, pump_id) -> None:
    state = build_seed_state(seed=1, now=_dt())

    with pytest.raises(StationInputError):
        record_sale(state, fuel_type, liters, amount, pump_id, now=_dt())


def test_next_transaction_id_starts_at_1000_and_skips_foreign_ids() -> None:
    assert next_transaction_id(StationState()) == "TRX-1000"

    state = build_seed_state(seed=1, now=_dt())
    assert next_transaction_id(state) == "TRX-1015"


def test_dip_sets_level_reading_and_time() -> None:
    state = build_seed_state(seed=1, now=datetime(2026, 1, 1, 8, 0))

    updated = record_dip(state, "t2", 8_000, now=_dt())

    tank = next(t for t in updated.tanks if t.id == "t2")
    assert tank.current_level == 8_000
    assert tank.last_dip_reading == 8_000
    assert tank.last_dip_time == _dt()


@pytest.mark.parametrize(("tank_id", "level"), [("t2", -1), ("t2", 30_001), ("t9", 100), ("t2", "")])
def test_dip_rejects_invalid_input(tank_id: str, level) -> None:
    state = build_seed_state(seed=1, now=_dt())

    with pytest.raises(StationInputError):
        record_dip(state, tank_id, level, now=_dt())


def test_delivery_adds_volume_capped_at_capacity() -> None:
    state = StationState(tanks=(_tank("a", FuelType.PETROL_95, 9_000.0),))

    partial = record_delivery(state, "a", 500)
    full = record_delivery(partial, "a", 5_000)

    assert _levels(partial)["a"] == 9_500.0
    assert _levels(full)["a"] == 10_000.0


@pytest.mark.parametrize(
    ("tank_id", "liters"),
    [("a", 0), ("a", -250), ("a", "lots"), ("a", None), ("a", float("nan")), ("zz", 500)],
)
def test_delivery_rejects_invalid_input(tank_id: str, liters) -> None:
    state = StationState(tanks=(_tank("a", FuelType.PETROL_95, 9_000.0),))

    with pytest.raises(StationInputError):
        record_delivery(state, tank_id, liters)

    assert _levels(state)["a"] == 9_000.0


def test_acknowledge_alert_sets_flag_on_one_alert() -> None:
    state = build_seed_state(seed=1, now=_dt())

    updated = acknowledge_alert(state, "a2")

    flags = {alert.id: alert.acknowledged for alert in updated.alerts}
    assert flags == {"a1": False, "a2": True}
    assert [alert.id for alert in updated.open_alerts] == ["a1"]


def test_acknowledge_unknown_alert_raises() -> None:
    state = replace(build_seed_state(seed=1, now=_dt()), alerts=())

    with pytest.raises(StationInputError, match="Unknown alert"):
        acknowledge_alert(state, "a1")
