import json
import logging

from pydantic import ValidationError

from models.scrap_models import CalculationResult
from models.session_models import CalculatorState
from services.ai.base import ScrapAssistant
from services.ai.errors import ScrapValuationError
from views.renderer import render_calculation, render_error, render_notice

LOGGER = logging.getLogger(__name__)

UNEXPECTED_ERROR = "An unexpected error occurred."
BUSY_NOTICE = "Still calculating, please wait..."


async def submit(state: CalculatorState, assistant: ScrapAssistant, scrap_type: str, weight: str, unit: str) -> str:
    """Request a value estimate and return the markup for the results area.

    Inputs are passed through as typed; the model is trusted to cope with
    free text. Only one estimate runs at a time per page.
    """
    if state.pending:
        return render_notice(BUSY_NOTICE)

    state.pending = True
    try:
        raw = await assistant.calculate_scrap_value(scrap_type, weight, unit)
        result = CalculationResult.model_validate(json.loads(raw))
    except ScrapValuationError as exc:
        return render_error(str(exc))
    except (ValidationError, ValueError) as exc:
        LOGGER.error("Malformed valuation payload: %s", exc)
        return render_error(UNEXPECTED_ERROR)
    finally:
        state.pending = False

    return render_calculation(result)
