from fastapi import APIRouter, Form, HTTPException, Request
from fastapi.responses import HTMLResponse

from controllers.calculator_controller import submit
from routes.dependencies import get_assistant, get_page_session

router = APIRouter(prefix="/api")


@router.post("/calculator", response_class=HTMLResponse)
async def calculate_route(
	request: Request,
	scrap_type: str = Form(""),
	weight: str = Form(""),
	unit: str = Form("kg"),
):
	"""Estimate the value of a scrap batch and return the results fragment."""
	page = get_page_session(request)
	try:
		return HTMLResponse(await submit(page.calculator, get_assistant(request), scrap_type, weight, unit))
	except HTTPException:
		raise
	except Exception as exc:
		raise HTTPException(status_code=500, detail=str(exc))
