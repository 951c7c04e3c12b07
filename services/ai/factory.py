"""Pick the live or mock scrap assistant once, at startup."""

from __future__ import annotations

import logging
import os
from typing import Optional

from openai import AsyncOpenAI

from services.ai.base import ScrapAssistant
from services.ai.live_assistant import DEFAULT_MODEL, LiveScrapAssistant
from services.ai.mock_assistant import MockScrapAssistant

LOGGER = logging.getLogger(__name__)


def build_assistant(
    api_key: Optional[str] = None,
    *,
    model: Optional[str] = None,
    mock_delay_scale: Optional[float] = None,
) -> ScrapAssistant:
    """Return a live assistant when a credential is available, a mock one otherwise.

    Args:
        api_key: OpenAI key; read from ``OPENAI_API_KEY`` when omitted.
        model: Model name for live calls; ``OPENAI_MODEL`` or the default when omitted.
        mock_delay_scale: Delay multiplier for mock mode; ``MOCK_DELAY_SCALE`` when omitted.

    Raises:
        RuntimeError: If a key is configured but the OpenAI client cannot be created.
    """
    key = api_key if api_key is not None else os.getenv("OPENAI_API_KEY", "")
    key = key.strip()

    if not key:
        LOGGER.warning("OPENAI_API_KEY environment variable not set. Some features will use mock data.")
        scale = mock_delay_scale
        if scale is None:
            scale = float(os.getenv("MOCK_DELAY_SCALE", "1.0"))
        return MockScrapAssistant(delay_scale=scale)

    try:
        client = AsyncOpenAI(api_key=key)
    except Exception as exc:
        raise RuntimeError("Failed to initialize OpenAI Async client") from exc

    return LiveScrapAssistant(client, model=model or os.getenv("OPENAI_MODEL", DEFAULT_MODEL))
