from __future__ import annotations

import streamlit as st

from fuelops.assistant.chat import ChatMessage, split_reply
from fuelops.assistant.client import generate_response
from fuelops.ui.components.formatting import format_clock
from fuelops.ui.pages.context import PageContext
from fuelops.ui.session import append_chat_message, clear_chat, get_chat_messages

AVATARS = {"user": "👤", "assistant": "✨"}


def _render_message(message: ChatMessage) -> None:
    with st.chat_message(message.role, avatar=AVATARS.get(message.role)):
        for line, is_bullet in split_reply(message.content):
            if not line.strip():
                continue
            # Bullet lines keep their dash and are indented
            st.markdown(f"&emsp;{line.strip()}" if is_bullet else line)
        st.caption(format_clock(message.timestamp))


def render(context: PageContext) -> None:
    col_title, col_clear = st.columns([5, 1])
    with col_title:
        st.subheader("Operational Assistant")
        st.caption(f"🟢 {context.settings.model}")
    with col_clear:
        if st.button("Clear Chat", key="fo_clear_chat"):
            clear_chat()
            st.rerun()

    for message in get_chat_messages():
        _render_message(message)

    prompt = st.chat_input("Ask about sales, inventory, or anomalies...")
    if prompt and prompt.strip():
        user_message = ChatMessage(role="user", content=prompt)
        append_chat_message(user_message)
        _render_message(user_message)

        with st.spinner("Analyzing station data..."):
            reply = generate_response(prompt, context.state, settings=context.settings)
        assistant_message = ChatMessage(role="assistant", content=reply)
        append_chat_message(assistant_message)
        _render_message(assistant_message)

    st.caption("AI can make mistakes. Please verify critical operational data.")
