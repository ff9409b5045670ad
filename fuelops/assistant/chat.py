from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Tuple

GREETING = (
    "Hello! I am your FuelOps Operations Analyst. I can help you analyze sales trends, "
    "check inventory levels, or detect anomalies. What would you like to know today?"
)


@dataclass
class ChatMessage:
    role: str  # user | assistant
    content: str
    timestamp: datetime = field(default_factory=datetime.now)


def greeting_message() -> ChatMessage:
    return ChatMessage(role="assistant", content=GREETING)


def split_reply(text: str) -> List[Tuple[str, bool]]:
    """Split a reply into display lines, flagging bullet lines for indentation."""
    return [(line, line.strip().startswith("-")) for line in text.split("\n")]
