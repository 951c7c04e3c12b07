"""Common interface shared by the live and mock scrap assistants."""

from __future__ import annotations

from abc import ABC, abstractmethod


class ChatSession(ABC):
    """Opaque handle to one conversation with the assistant."""

    @abstractmethod
    async def send(self, message: str) -> str:
        """Send one user message and return the raw reply text."""


class ScrapAssistant(ABC):
    """AI operations used by the site widgets.

    Implementations are chosen once at startup: ``LiveScrapAssistant`` when a
    provider credential is configured, ``MockScrapAssistant`` otherwise. Both
    return the same shapes so the widgets never branch on the mode.
    """

    mock_mode: bool = False

    @abstractmethod
    def start_chat(self) -> ChatSession:
        """Create a new conversation handle."""

    @abstractmethod
    async def send_message(self, session: ChatSession, message: str) -> str:
        """Return the trimmed assistant reply, or a fixed apology on failure."""

    @abstractmethod
    async def generate_contact_response(self, name: str) -> str:
        """Return a short, personalised pickup confirmation for ``name``."""

    @abstractmethod
    async def identify_scrap(self, image_b64: str, mime_type: str) -> str:
        """Return JSON text with itemName, category, recyclable and estimatedPrice.

        Raises:
            ScrapIdentificationError: If the provider call fails.
        """

    @abstractmethod
    async def calculate_scrap_value(self, scrap_type: str, weight: str, unit: str) -> str:
        """Return JSON text with estimatedValue, environmentalImpact and disclaimer.

        Raises:
            ScrapValuationError: If the provider call fails.
        """

    async def aclose(self) -> None:
        """Release provider resources. Nothing to do by default."""
