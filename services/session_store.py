"""Simple in-memory store for page sessions."""

from __future__ import annotations

from collections import OrderedDict
from uuid import uuid4

from models.session_models import PageSession

DEFAULT_MAX_SESSIONS = 500


class PageSessionStore:
	"""Keep widget state per page load, evicting the oldest pages past ``max_sessions``."""

	def __init__(self, max_sessions: int = DEFAULT_MAX_SESSIONS) -> None:
		if max_sessions < 1:
			raise ValueError("max_sessions must be at least 1.")
		self.max_sessions = max_sessions
		self._sessions: "OrderedDict[str, PageSession]" = OrderedDict()

	def create(self) -> PageSession:
		"""Open a fresh page session with every widget in its initial state."""
		page_id = uuid4().hex
		state = PageSession(page_id=page_id)
		self._sessions[page_id] = state
		while len(self._sessions) > self.max_sessions:
			self._sessions.popitem(last=False)
		return state

	def get(self, page_id: str) -> PageSession:
		"""Return a session or raise KeyError if missing."""
		state = self._sessions.get(page_id)
		if state is None:
			raise KeyError(f"Page session {page_id} not found")
		self._sessions.move_to_end(page_id)
		return state

	def discard(self, page_id: str) -> None:
		self._sessions.pop(page_id, None)

	def __len__(self) -> int:
		return len(self._sessions)
