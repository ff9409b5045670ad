"""
Station snapshot and system instruction sent along with every assistant
question.
"""

from __future__ import annotations

import json
from typing import Any, Dict

from fuelops.config import CONTEXT_TRANSACTION_LIMIT
from fuelops.data.models import Alert, StationState, Transaction


def _transaction_payload(trx: Transaction) -> Dict[str, Any]:
    return {
        "id": trx.id,
        "timestamp": trx.timestamp.isoformat(),
        "fuelType": trx.fuel_type.value,
        "liters": trx.liters,
        "amount": trx.amount,
        "pumpId": trx.pump_id,
    }


def _alert_payload(alert: Alert) -> Dict[str, Any]:
    return {
        "id": alert.id,
        "type": alert.severity.value,
        "message": alert.message,
        "timestamp": alert.timestamp.isoformat(),
        "acknowledged": alert.acknowledged,
    }


def build_context_payload(state: StationState) -> Dict[str, Any]:
    """Trimmed view of the state: the newest sales and open alerts only."""
    return {
        "tanks": [
            {
                "name": tank.name,
                "fuel": tank.fuel_type.value,
                "level": tank.current_level,
                "capacity": tank.capacity,
                "percent": f"{tank.display_percent}%",
            }
            for tank in state.tanks
        ],
        "recentTransactions": [
            _transaction_payload(trx)
            for trx in state.transactions[:CONTEXT_TRANSACTION_LIMIT]
        ],
        "alerts": [_alert_payload(alert) for alert in state.open_alerts],
        "totalRevenue": sum(trx.amount for trx in state.transactions),
        "totalVolume": sum(trx.liters for trx in state.transactions),
    }


def prepare_context(state: StationState) -> str:
    return json.dumps(build_context_payload(state), indent=2)


SYSTEM_INSTRUCTION_TEMPLATE = """You are an expert Fuel Station Operations Analyst assistant.
You have access to the current station data in JSON format provided below.

Your role is to:
1. Analyze sales trends and inventory levels.
2. Detect anomalies (e.g., if a tank level is critically low despite low sales, suggest a leak check).
3. Help the station manager make decisions on restocking.
4. Summarize financial performance.

Current Data Context:
{context}

Rules:
- Be concise and professional.
- Use bullet points for lists.
- If inventory is below 20%, strictly warn the user.
- If asked about "anomalies", check for discrepancies between sales volume and tank level drops (if data permits inference).
"""


def build_system_instruction(state: StationState) -> str:
    return SYSTEM_INSTRUCTION_TEMPLATE.format(context=prepare_context(state))
