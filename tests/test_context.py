from __future__ import annotations

import json
from dataclasses import replace
from datetime import datetime, timedelta

import pytest

from fuelops.assistant.context import build_system_instruction, prepare_context
from fuelops.data.models import FuelType, Transaction
from fuelops.data.seed import build_seed_state
from fuelops.data.state import acknowledge_alert


def _dt() -> datetime:
    return datetime(2026, 1, 1, 18, 0)


def _many_transactions(count: int):
    return tuple(
        Transaction(f"TRX-{2000 + i}", _dt() - timedelta(minutes=i), FuelType.PETROL_93, 10.0 + i, 2.0 * i, 1)
        for i in range(count)
    )


def test_context_tank_summary() -> None:
    payload = json.loads(prepare_context(build_seed_state(seed=2, now=_dt())))

    assert payload["tanks"][0] == {
        "name": "Tank 1 (Main)",
        "fuel": "Petrol 95",
        "level": 32_000,
        "capacity": 45_000,
        "percent": "71%",
    }
    assert [tank["percent"] for tank in payload["tanks"]] == ["71%", "28%", "91%", "20%"]


def test_context_rounds_percent_half_up() -> None:
    state = build_seed_state(seed=2, now=_dt())
    tank = replace(state.tanks[0], capacity=200, current_level=25)  # 12.5 %
    payload = json.loads(prepare_context(replace(state, tanks=(tank,))))

    assert payload["tanks"][0]["percent"] == "13%"


def test_context_limits_transactions_but_totals_cover_all() -> None:
    state = replace(build_seed_state(seed=2, now=_dt()), transactions=_many_transactions(25))

    payload = json.loads(prepare_context(state))

    assert len(payload["recentTransactions"]) == 20
    assert payload["recentTransactions"][0]["id"] == "TRX-2000"
    assert payload["recentTransactions"][0]["fuelType"] == "Petrol 93"
    assert payload["totalVolume"] == pytest.approx(sum(10.0 + i for i in range(25)))
    assert payload["totalRevenue"] == pytest.approx(sum(2.0 * i for i in range(25)))


def test_context_only_carries_open_alerts() -> None:
    state = acknowledge_alert(build_seed_state(seed=2, now=_dt()), "a1")

    payload = json.loads(prepare_context(state))

    assert [alert["id"] for alert in payload["alerts"]] == ["a2"]
    assert payload["alerts"][0]["type"] == "warning"


def test_context_is_indented_json() -> None:
    text = prepare_context(build_seed_state(seed=2, now=_dt()))

    assert text.startswith('{\n  "tanks": [')


def test_system_instruction_embeds_context_and_rules() -> None:
    state = build_seed_state(seed=2, now=_dt())

    instruction = build_system_instruction(state)

    assert "Fuel Station Operations Analyst" in instruction
    assert prepare_context(state) in instruction
    assert "If inventory is below 20%, strictly warn the user." in instruction
