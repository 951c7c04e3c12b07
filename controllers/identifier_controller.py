import asyncio
import json
import logging

from pydantic import ValidationError

from models.scrap_models import IdentificationResult, UploadedImage
from models.session_models import IdentifierOutcome, IdentifierPhase, IdentifierState
from services.ai.base import ScrapAssistant
from services.ai.errors import ScrapIdentificationError
from services.preview_generator import PreviewGenerator
from views.renderer import render_error, render_identification, render_identifier, render_notice

LOGGER = logging.getLogger(__name__)

UNEXPECTED_ERROR = "An unexpected error occurred."
BUSY_NOTICE = "Still analyzing your photo, please wait..."


async def select_image(state: IdentifierState, image: UploadedImage) -> str:
    """Replace the selected image and preview, then re-render the identifier.

    The preview is generated before anything is stored, so an upload that does
    not decode leaves the previous selection untouched.

    Raises:
        ValueError: If the payload cannot be decoded as an image.
    """
    preview_uri = await asyncio.to_thread(PreviewGenerator().create_preview_from_base64, image.data_b64)

    state.image = image
    state.preview_uri = preview_uri
    state.outcome = None
    if state.phase != IdentifierPhase.IDENTIFYING:
        state.phase = IdentifierPhase.IMAGE_SELECTED
    LOGGER.info("Identifier image selected (%s, %s)", image.filename or "unnamed", image.mime_type)
    return render_identifier(state)


async def identify(state: IdentifierState, assistant: ScrapAssistant) -> str:
    """Classify the selected image and return the result area markup."""
    if state.image is None:
        return render_identifier(state)
    if state.phase == IdentifierPhase.IDENTIFYING:
        return render_notice(BUSY_NOTICE)

    image = state.image
    state.phase = IdentifierPhase.IDENTIFYING
    try:
        raw = await assistant.identify_scrap(image.data_b64, image.mime_type)
        result = IdentificationResult.model_validate(json.loads(raw))
    except ScrapIdentificationError as exc:
        state.outcome = IdentifierOutcome.ERROR
        return render_error(str(exc))
    except (ValidationError, ValueError) as exc:
        LOGGER.error("Malformed identification payload: %s", exc)
        state.outcome = IdentifierOutcome.ERROR
        return render_error(UNEXPECTED_ERROR)
    finally:
        state.phase = IdentifierPhase.RESULT_SHOWN

    state.outcome = IdentifierOutcome.RECYCLABLE if result.recyclable else IdentifierOutcome.NOT_RECYCLABLE
    return render_identification(result)
