"""
Session-state accessors. The station state and chat history live in
`st.session_state` for the lifetime of one browser session.
"""

from __future__ import annotations

import logging
from typing import List

import streamlit as st

from fuelops.assistant.chat import ChatMessage, greeting_message
from fuelops.config import seed_from_env
from fuelops.data.models import StationState
from fuelops.data.seed import build_seed_state

logger = logging.getLogger(__name__)

STATE_KEY = "fo_station_state"
CHAT_KEY = "fo_chat_messages"


def get_station_state() -> StationState:
    if STATE_KEY not in st.session_state:
        st.session_state[STATE_KEY] = build_seed_state(seed=seed_from_env())
    return st.session_state[STATE_KEY]


def set_station_state(state: StationState) -> None:
    st.session_state[STATE_KEY] = state


def reset_station_state() -> None:
    logger.info("Resetting session station state")
    st.session_state[STATE_KEY] = build_seed_state(seed=seed_from_env())
    st.session_state[CHAT_KEY] = [greeting_message()]


def get_chat_messages() -> List[ChatMessage]:
    if CHAT_KEY not in st.session_state:
        st.session_state[CHAT_KEY] = [greeting_message()]
    return st.session_state[CHAT_KEY]


def append_chat_message(message: ChatMessage) -> None:
    get_chat_messages().append(message)


def clear_chat() -> None:
    st.session_state[CHAT_KEY] = []
