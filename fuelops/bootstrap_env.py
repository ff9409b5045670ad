"""
Make FuelOps settings visible through os.environ before anything reads them.

`app.py` imports this module first. Values from `.streamlit/secrets.toml`
are copied into the environment (a `[gemini]` table with `api_key` becomes
GEMINI_API_KEY), then a local `.env` fills whatever is still unset. Values
already in the environment always win.
"""

from __future__ import annotations

import logging
import os
import re
from typing import Any, Dict, Mapping

import streamlit as st
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

_NON_WORD = re.compile(r"[^A-Za-z0-9_]")


def env_name(*parts: str) -> str:
    return _NON_WORD.sub("_", "_".join(parts).upper())


def secrets_as_env(secrets: Mapping[str, Any], prefix: str = "") -> Dict[str, str]:
    """Flatten nested secret tables into upper-case variable names."""
    flat: Dict[str, str] = {}
    for key, value in secrets.items():
        name = env_name(prefix, key) if prefix else env_name(key)
        if isinstance(value, Mapping):
            flat.update(secrets_as_env(value, prefix=name))
        else:
            flat[name] = str(value)
    return flat


def _read_streamlit_secrets() -> Dict[str, Any]:
    try:
        return st.secrets.to_dict()
    except Exception:
        # raised when no secrets.toml exists
        return {}


def ensure_env() -> None:
    """Copy secrets into the environment and load `.env`; safe to repeat."""
    copied = 0
    for name, value in secrets_as_env(_read_streamlit_secrets()).items():
        if name not in os.environ:
            os.environ[name] = value
            copied += 1
    if copied:
        logger.debug("Copied %d Streamlit secrets into the environment", copied)
    load_dotenv(override=False)


ensure_env()
