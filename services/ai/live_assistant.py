"""Scrap assistant backed by OpenAI's Responses API."""

from __future__ import annotations

import inspect
import logging
import time
from typing import Any, Dict, List, Optional, Union

from openai import AsyncOpenAI

from services.ai.base import ChatSession, ScrapAssistant
from services.ai.errors import ScrapIdentificationError, ScrapValuationError
from services.ai.media_inputs import build_image_inputs
from services.ai.prompts import (
    CHAT_SYSTEM_INSTRUCTION,
    build_calculate_prompt,
    build_contact_prompt,
    build_identify_prompt,
)
from services.ai.response_parser import extract_text, extract_usage
from services.ai.schemas import IDENTIFICATION_TEXT_FORMAT, VALUATION_TEXT_FORMAT

LOGGER = logging.getLogger(__name__)
DEFAULT_MODEL = "gpt-5-mini"

CHAT_ERROR_REPLY = "I'm sorry, but I encountered an error. Please try again in a moment."


class LiveChatSession(ChatSession):
    """Conversation threaded through the provider's previous response id."""

    def __init__(self, client: AsyncOpenAI, model: str, instructions: str) -> None:
        self.client = client
        self.model = model
        self.instructions = instructions
        self.previous_response_id: Optional[str] = None

    async def send(self, message: str) -> str:
        response = await self.client.responses.create(
            model=self.model,
            instructions=self.instructions,
            input=message,
            previous_response_id=self.previous_response_id,
        )
        self.previous_response_id = getattr(response, "id", None)
        LOGGER.debug("Chat usage: %s", extract_usage(response))
        return extract_text(response)


class LiveScrapAssistant(ScrapAssistant):
    """Route every widget operation to the configured OpenAI model."""

    mock_mode = False

    def __init__(self, client: AsyncOpenAI, model: str = DEFAULT_MODEL) -> None:
        if client is None:
            raise ValueError("OpenAI client must be provided.")
        self.client = client
        self.model = model

    def start_chat(self) -> ChatSession:
        return LiveChatSession(self.client, self.model, CHAT_SYSTEM_INSTRUCTION)

    async def send_message(self, session: ChatSession, message: str) -> str:
        try:
            reply = await session.send(message)
        except Exception as exc:
            LOGGER.error("Error sending chat message to OpenAI: %s", exc)
            return CHAT_ERROR_REPLY
        return reply.strip()

    async def generate_contact_response(self, name: str) -> str:
        try:
            response = await self._create_response(build_contact_prompt(name))
        except Exception as exc:
            LOGGER.error("Error generating contact response from OpenAI: %s", exc)
            return (
                f"Thank you, {name}! Your pickup request has been received. "
                "A local kabaadiwala will contact you shortly."
            )
        return extract_text(response).strip()

    async def identify_scrap(self, image_b64: str, mime_type: str) -> str:
        inputs = build_image_inputs(build_identify_prompt(), image_b64, mime_type)
        try:
            response = await self._create_response(inputs, text=IDENTIFICATION_TEXT_FORMAT)
        except Exception as exc:
            LOGGER.error("Error identifying scrap with OpenAI: %s", exc)
            raise ScrapIdentificationError() from exc
        return extract_text(response)

    async def calculate_scrap_value(self, scrap_type: str, weight: str, unit: str) -> str:
        prompt = build_calculate_prompt(scrap_type, weight, unit)
        try:
            response = await self._create_response(prompt, text=VALUATION_TEXT_FORMAT)
        except Exception as exc:
            LOGGER.error("Error calculating scrap value with OpenAI: %s", exc)
            raise ScrapValuationError() from exc
        return extract_text(response)

    async def _create_response(
        self,
        inputs: Union[str, List[Dict[str, Any]]],
        text: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Send one Responses API request and log its latency and usage."""
        kwargs: Dict[str, Any] = {"model": self.model, "input": inputs}
        if text is not None:
            kwargs["text"] = text
        start_time = time.time()
        response = await self.client.responses.create(**kwargs)
        LOGGER.debug(
            "OpenAI response in %.3fs, usage %s", time.time() - start_time, extract_usage(response)
        )
        return response

    async def aclose(self) -> None:
        """Close the OpenAI client if it exposes a close/aclose method."""
        close = getattr(self.client, "aclose", None) or getattr(self.client, "close", None)
        if close is None:
            return
        if inspect.iscoroutinefunction(close):
            await close()
        else:
            result = close()
            if inspect.isawaitable(result):
                await result
