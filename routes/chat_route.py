"""FastAPI routes for the chat widget."""

from fastapi import APIRouter, Form, HTTPException, Request
from fastapi.responses import HTMLResponse

from controllers.chat_controller import close_chat, open_chat, send_message
from routes.dependencies import get_assistant, get_page_session

router = APIRouter(prefix="/api/chat")


@router.post("/open", response_class=HTMLResponse)
async def open_chat_route(request: Request):
	page = get_page_session(request)
	try:
		return HTMLResponse(open_chat(page.chat, get_assistant(request)))
	except HTTPException:
		raise
	except Exception as exc:
		raise HTTPException(status_code=500, detail=str(exc))


@router.post("/close", response_class=HTMLResponse)
async def close_chat_route(request: Request):
	page = get_page_session(request)
	return HTMLResponse(close_chat(page.chat))


@router.post("/messages", response_class=HTMLResponse)
async def post_message_route(request: Request, message: str = Form("")):
	"""Send one message and return the whole transcript."""
	page = get_page_session(request)
	try:
		return HTMLResponse(await send_message(page.chat, get_assistant(request), message))
	except HTTPException:
		raise
	except Exception as exc:
		raise HTTPException(status_code=500, detail=str(exc))
