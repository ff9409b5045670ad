"""Quick validation script for the assistant context.

Run with `python scripts/preview_context.py` to print the JSON snapshot and
system instruction the assistant would send for the seed station data.
"""

from __future__ import annotations

import json

from fuelops.assistant.context import build_system_instruction, prepare_context
from fuelops.data.seed import build_seed_state
from fuelops.data.state import record_sale


def main() -> None:
    state = build_seed_state(seed=7)
    state = record_sale(state, "Petrol 93", 40.0, 62.5, 3)

    payload = json.loads(prepare_context(state))
    required_keys = ["tanks", "recentTransactions", "alerts", "totalRevenue", "totalVolume"]

    missing = [key for key in required_keys if key not in payload]
    if missing:
        raise SystemExit(f"Missing required keys: {missing}")

    assert len(payload["recentTransactions"]) <= 20, "Context should carry at most 20 transactions"
    assert all(not alert["acknowledged"] for alert in payload["alerts"]), "Only open alerts belong in context"

    print(build_system_instruction(state))
    print("Context validation passed. Transactions:", len(state.transactions))


if __name__ == "__main__":
    main()
