"""
Application-wide configuration constants and helper utilities.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import List, Optional, Tuple

import streamlit as st


@dataclass(frozen=True)
class TabConfig:
    key: str
    label: str


# Ordered tab definitions for the dashboard
TABS: List[TabConfig] = [
    TabConfig("dashboard", "Dashboard"),
    TabConfig("inventory", "Inventory & Tanks"),
    TabConfig("sales", "Sales & Logs"),
    TabConfig("assistant", "AI Analyst"),
]

APP_TITLE = "FuelOps Analytics"
CURRENCY_SYMBOL = "$"

PUMP_IDS: Tuple[int, ...] = tuple(range(1, 9))
LOW_STOCK_PERCENT = 20.0
ACTIVE_PUMP_WINDOW_HOURS = 3
CONTEXT_TRANSACTION_LIMIT = 20
RECENT_TRANSACTION_ROWS = 5
TREND_POINTS = 10

DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_TEMPERATURE = 0.2
API_KEY_NAMES: Tuple[str, ...] = ("GEMINI_API_KEY", "GOOGLE_API_KEY", "API_KEY")


@dataclass(frozen=True)
class AssistantSettings:
    api_key: Optional[str]
    model: str = DEFAULT_MODEL
    temperature: float = DEFAULT_TEMPERATURE

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key)


def get_secret(name: str, default: Optional[str] = None) -> Optional[str]:
    """Try env first, then st.secrets (if available)."""
    val = os.getenv(name)
    if val:
        return val
    try:
        sec = getattr(st, "secrets", None)
        if sec:
            v = sec.get(name)  # type: ignore[index]
            return str(v) if v is not None else default
    except Exception:
        # st.secrets raises when no secrets.toml exists
        pass
    return default


def _as_float(raw: Optional[str], default: float) -> float:
    if raw is None:
        return default
    try:
        return float(raw)
    except (TypeError, ValueError):
        return default


def load_assistant_settings() -> AssistantSettings:
    api_key = next((key for key in (get_secret(name) for name in API_KEY_NAMES) if key), None)
    return AssistantSettings(
        api_key=api_key,
        model=get_secret("GEMINI_MODEL", DEFAULT_MODEL) or DEFAULT_MODEL,
        temperature=_as_float(get_secret("GEMINI_TEMPERATURE"), DEFAULT_TEMPERATURE),
    )


def seed_from_env() -> Optional[int]:
    raw = get_secret("FUELOPS_SEED")
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def configure_logging() -> None:
    level_name = (get_secret("LOG_LEVEL", "INFO") or "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
