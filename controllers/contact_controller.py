import asyncio
import logging
import os
from typing import Mapping, Optional

from models.scrap_models import ContactSubmission
from models.session_models import ContactFormState
from services.ai.base import ScrapAssistant
from views.renderer import SUBMIT_ERROR, render_contact_confirmation, render_contact_form

LOGGER = logging.getLogger(__name__)

DEFAULT_PROCESSING_DELAY = 1.0

VALIDATION_ERROR = "Please fill out all fields."


def processing_delay() -> float:
    """Seconds to wait before confirming, from ``CONTACT_PROCESSING_DELAY``."""
    return float(os.getenv("CONTACT_PROCESSING_DELAY", str(DEFAULT_PROCESSING_DELAY)))


async def submit(
    state: ContactFormState,
    assistant: ScrapAssistant,
    form: Mapping[str, str],
    delay: Optional[float] = None,
) -> str:
    """Validate a pickup request and return either the confirmation or the form.

    Once a request has been confirmed the page keeps showing that confirmation;
    later posts from the same page are not sent again.

    Args:
        state: Contact widget state for the current page.
        assistant: Scrap assistant used to write the confirmation.
        form: Submitted field values.
        delay: Simulated processing time in seconds; ``CONTACT_PROCESSING_DELAY`` when omitted.
    """
    if state.submitted:
        return render_contact_confirmation(state.confirmation or "")

    submission = ContactSubmission.from_form(form)

    if state.submitting:
        return render_contact_form(state, submission.fields)

    state.values = dict(submission.fields)
    if not submission.is_complete():
        state.error = VALIDATION_ERROR
        return render_contact_form(state)

    state.error = None
    state.submitting = True
    wait = processing_delay() if delay is None else delay
    try:
        if wait > 0:
            await asyncio.sleep(wait)
        message = await assistant.generate_contact_response(submission.name)
    except Exception as exc:
        LOGGER.error("FAILED to submit form: %s", exc)
        state.error = SUBMIT_ERROR
        return render_contact_form(state)
    finally:
        state.submitting = False

    state.submitted = True
    state.confirmation = message
    state.values = {}
    LOGGER.info("Pickup request received from %s", submission.name)
    return render_contact_confirmation(message)
