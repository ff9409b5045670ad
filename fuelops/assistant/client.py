"""
Gemini client wrapper for the assistant tab.

One `generate_content` call per question, no retries. Any failure (missing
key, network or API error) is logged and replaced by a fixed apology.
"""

from __future__ import annotations

import logging
from typing import Optional

from google import genai
from google.genai import types

from fuelops.assistant.context import build_system_instruction
from fuelops.config import AssistantSettings, load_assistant_settings
from fuelops.data.models import StationState
from fuelops.exceptions import AssistantConfigError

logger = logging.getLogger(__name__)

FAILURE_MESSAGE = (
    "Sorry, I am currently unable to process your request. "
    "Please check your API key configuration."
)
EMPTY_REPLY_MESSAGE = "I couldn't generate a response based on the current data."


def build_client(settings: AssistantSettings) -> genai.Client:
    if not settings.has_api_key:
        raise AssistantConfigError("API Key is missing")
    return genai.Client(api_key=settings.api_key)


def generate_response(
    prompt: str,
    state: StationState,
    settings: Optional[AssistantSettings] = None,
    client: Optional[genai.Client] = None,
) -> str:
    settings = settings or load_assistant_settings()
    try:
        if client is None:
            client = build_client(settings)
        response = client.models.generate_content(
            model=settings.model,
            contents=prompt,
            config=types.GenerateContentConfig(
                system_instruction=build_system_instruction(state),
                temperature=settings.temperature,
            ),
        )
    except Exception:
        logger.exception("Gemini API error")
        return FAILURE_MESSAGE

    text = getattr(response, "text", None)
    if not text:
        logger.info("Gemini returned an empty reply for model %s", settings.model)
        return EMPTY_REPLY_MESSAGE
    logger.info("Gemini replied with %d characters", len(text))
    return text
