"""Per-page widget state held in memory for the lifetime of one page load."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from models.scrap_models import UploadedImage
from services.ai.base import ChatSession


class IdentifierPhase(str, Enum):
	IDLE = "idle"
	IMAGE_SELECTED = "image-selected"
	IDENTIFYING = "identifying"
	RESULT_SHOWN = "result-shown"


class IdentifierOutcome(str, Enum):
	RECYCLABLE = "recyclable"
	NOT_RECYCLABLE = "not-recyclable"
	ERROR = "error"


@dataclass
class IdentifierState:
	"""Selected image, its preview and where the identify flow currently stands."""

	phase: IdentifierPhase = IdentifierPhase.IDLE
	image: Optional[UploadedImage] = None
	preview_uri: Optional[str] = None
	outcome: Optional[IdentifierOutcome] = None

	@property
	def identify_enabled(self) -> bool:
		return self.image is not None and self.phase != IdentifierPhase.IDENTIFYING


@dataclass
class CalculatorState:
	pending: bool = False


@dataclass
class ContactFormState:
	"""Submit control state and the last error shown above the form."""

	submitting: bool = False
	submitted: bool = False
	confirmation: Optional[str] = None
	error: Optional[str] = None
	values: Dict[str, str] = field(default_factory=dict)

	@property
	def submit_disabled(self) -> bool:
		return self.submitting


@dataclass
class ChatBubble:
	"""One rendered chat message. Role is ``user``, ``bot`` or ``error``."""

	role: str
	text: str


@dataclass
class ChatState:
	is_open: bool = False
	session: Optional[ChatSession] = None
	messages: List[ChatBubble] = field(default_factory=list)
	pending: bool = False


@dataclass
class PageSession:
	"""All widget state for a single page load."""

	page_id: str
	identifier: IdentifierState = field(default_factory=IdentifierState)
	calculator: CalculatorState = field(default_factory=CalculatorState)
	contact: ContactFormState = field(default_factory=ContactFormState)
	chat: ChatState = field(default_factory=ChatState)
