"""Shared request helpers for the widget routes."""

from fastapi import HTTPException, Request

from models.session_models import PageSession
from services.ai.base import ScrapAssistant

PAGE_COOKIE = "kabaadi_page"
SESSION_EXPIRED = "Page session expired. Please reload the page."


def get_assistant(request: Request) -> ScrapAssistant:
	return request.app.state.assistant


def get_page_session(request: Request) -> PageSession:
	"""Look up the page session named by the page cookie or raise 409."""
	page_id = request.cookies.get(PAGE_COOKIE)
	if not page_id:
		raise HTTPException(status_code=409, detail=SESSION_EXPIRED)
	try:
		return request.app.state.page_sessions.get(page_id)
	except KeyError:
		raise HTTPException(status_code=409, detail=SESSION_EXPIRED)
