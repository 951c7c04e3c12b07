from fastapi import APIRouter, File, HTTPException, Request, UploadFile
from fastapi.responses import HTMLResponse

from controllers.identifier_controller import identify, select_image
from routes.dependencies import get_assistant, get_page_session
from utils.media_validation import read_image_upload
from views.renderer import render_identifier

router = APIRouter(prefix="/api/identifier")


@router.post("/image", response_class=HTMLResponse)
async def upload_image_route(request: Request, image: UploadFile = File(...)):
	"""Accept a scrap photo and return the refreshed identifier panel."""
	page = get_page_session(request)
	try:
		uploaded = await read_image_upload(image)
	except ValueError as exc:
		return HTMLResponse(render_identifier(page.identifier, error=str(exc)), status_code=415)

	try:
		return HTMLResponse(await select_image(page.identifier, uploaded))
	except ValueError as exc:
		return HTMLResponse(render_identifier(page.identifier, error=str(exc)), status_code=400)
	except HTTPException:
		raise
	except Exception as exc:
		raise HTTPException(status_code=500, detail=str(exc))


@router.post("/identify", response_class=HTMLResponse)
async def identify_route(request: Request):
	page = get_page_session(request)
	try:
		return HTMLResponse(await identify(page.identifier, get_assistant(request)))
	except HTTPException:
		raise
	except Exception as exc:
		raise HTTPException(status_code=500, detail=str(exc))
