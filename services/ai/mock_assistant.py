"""Offline scrap assistant used when no provider credential is configured.

Every operation returns the same shape as the live assistant after a short
artificial delay, so the page behaves the same with or without a key.
"""

from __future__ import annotations

import asyncio
import json
import logging
import random
from typing import Optional

from services.ai.base import ChatSession, ScrapAssistant

LOGGER = logging.getLogger(__name__)

CHAT_DELAY = 0.8
IDENTIFY_DELAY = 1.5
CALCULATE_DELAY = 1.0


class MockChatSession(ChatSession):
    """Conversation stand-in that echoes the visitor's message."""

    def __init__(self) -> None:
        self.turns = 0

    async def send(self, message: str) -> str:
        self.turns += 1
        return f'This is a mock AI response about "{message}". The API key is not configured.'


class MockScrapAssistant(ScrapAssistant):
    """Canned and randomised answers with delays that mimic a live call.

    Args:
        delay_scale: Multiplier applied to every artificial delay; ``0`` disables them.
        rng: Random source for the calculator figures. Seed it for repeatable output.
    """

    mock_mode = True

    def __init__(self, delay_scale: float = 1.0, rng: Optional[random.Random] = None) -> None:
        if delay_scale < 0:
            raise ValueError("delay_scale must be non-negative.")
        self.delay_scale = delay_scale
        self.rng = rng or random.Random()

    async def _pause(self, seconds: float) -> None:
        if self.delay_scale:
            await asyncio.sleep(seconds * self.delay_scale)

    def start_chat(self) -> ChatSession:
        LOGGER.info("Mock chat session started as API key is not set.")
        return MockChatSession()

    async def send_message(self, session: ChatSession, message: str) -> str:
        await self._pause(CHAT_DELAY)
        reply = await session.send(message)
        return reply.strip()

    async def generate_contact_response(self, name: str) -> str:
        return (
            f"Thank you for your request, {name}! We've received it and are now connecting you "
            "with a verified kabaadiwala in your area. They will call you shortly to confirm the "
            "pickup time. Thanks for using Kabaadi and Co!"
        )

    async def identify_scrap(self, image_b64: str, mime_type: str) -> str:
        await self._pause(IDENTIFY_DELAY)
        return json.dumps(
            {
                "itemName": "Old Newspapers",
                "category": "Paper",
                "recyclable": True,
                "estimatedPrice": "₹12-15 per kg",
            },
            ensure_ascii=False,
        )

    async def calculate_scrap_value(self, scrap_type: str, weight: str, unit: str) -> str:
        await self._pause(CALCULATE_DELAY)
        low = round(self.rng.random() * 100 + 50)
        high = round(self.rng.random() * 150 + 100)
        litres = round(self.rng.random() * 1000)
        return json.dumps(
            {
                "estimatedValue": f"₹{low} - ₹{high}",
                "environmentalImpact": {
                    "metric": "Water Saved",
                    "value": f"Approx. {litres} litres",
                },
                "disclaimer": "This is a mock estimate. Prices vary based on market rates and quality.",
            },
            ensure_ascii=False,
        )
