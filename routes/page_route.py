from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import HTMLResponse

from controllers.page_controller import render_landing_page
from routes.dependencies import PAGE_COOKIE, get_assistant

router = APIRouter()


@router.get("/", include_in_schema=False, response_class=HTMLResponse)
async def landing_page(request: Request):
	"""Render the landing page and bind a fresh page session to the browser."""
	try:
		page_id, html = render_landing_page(request.app.state.page_sessions, get_assistant(request))
	except HTTPException:
		raise
	except Exception as exc:
		raise HTTPException(status_code=500, detail=str(exc))

	response = HTMLResponse(html)
	response.set_cookie(PAGE_COOKIE, page_id, httponly=True, samesite="lax")
	return response


@router.get("/health")
async def health(request: Request):
	"""Report whether the assistant is mocked and how many pages are open."""
	return {
		"ok": True,
		"mock_mode": get_assistant(request).mock_mode,
		"page_sessions": len(request.app.state.page_sessions),
	}
