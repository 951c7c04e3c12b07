from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import HTMLResponse

from controllers.contact_controller import submit
from routes.dependencies import get_assistant, get_page_session

router = APIRouter(prefix="/api")


@router.post("/contact", response_class=HTMLResponse)
async def contact_route(request: Request):
	"""Submit a pickup request; every posted field is validated, not just the known ones."""
	page = get_page_session(request)
	form = await request.form()
	fields = {key: value for key, value in form.items() if isinstance(value, str)}
	try:
		return HTMLResponse(await submit(page.contact, get_assistant(request), fields))
	except HTTPException:
		raise
	except Exception as exc:
		raise HTTPException(status_code=500, detail=str(exc))
