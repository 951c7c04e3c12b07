"""Render widget state and AI results to HTML with Jinja2.

Each function takes a typed value and returns markup for one page subtree,
so widgets can be exercised without a browser.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Mapping, Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from models.scrap_models import REQUIRED_CONTACT_FIELDS, CalculationResult, IdentificationResult
from models.session_models import ChatState, ContactFormState, IdentifierState
from services.site_content import CALCULATOR_UNITS, ContentBlock

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

SUBMIT_LABEL = "Find My Kabaadiwala"
SUBMITTING_LABEL = "Submitting..."
SUBMIT_ERROR = "Something went wrong. Please try again."
SEND_ERROR = "Error: Could not send message."

_env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)


def _render(template_name: str, **context) -> str:
    return _env.get_template(template_name).render(**context)


def render_page(
    services: Iterable[ContentBlock],
    steps: Iterable[ContentBlock],
    identifier: IdentifierState,
    contact: ContactFormState,
    chat: ChatState,
    mock_mode: bool = False,
) -> str:
    """Render the full landing page for a new page session."""
    return _render(
        "index.html",
        services=list(services),
        steps=list(steps),
        identifier=identifier,
        contact=contact,
        chat=chat,
        units=CALCULATOR_UNITS,
        required_fields=REQUIRED_CONTACT_FIELDS,
        submit_label=SUBMIT_LABEL,
        submitting_label=SUBMITTING_LABEL,
        submit_error=SUBMIT_ERROR,
        send_error=SEND_ERROR,
        mock_mode=mock_mode,
    )


def render_identifier(state: IdentifierState, error: Optional[str] = None) -> str:
    """Render the upload area, preview and the identify control for ``state``."""
    return _render("partials/identifier.html", identifier=state, error=error)


def render_identification(result: IdentificationResult) -> str:
    return _render("partials/identification_result.html", result=result)


def render_calculation(result: CalculationResult) -> str:
    return _render("partials/calculation_result.html", result=result)


def render_error(message: str) -> str:
    return _render("partials/error_message.html", message=message)


def render_notice(message: str) -> str:
    return _render("partials/notice.html", message=message)


def render_contact_form(state: ContactFormState, values: Optional[Mapping[str, str]] = None) -> str:
    """Render the pickup form, keeping any values already typed in."""
    return _render(
        "partials/contact_form.html",
        contact=state,
        values=dict(values if values is not None else state.values),
        required_fields=REQUIRED_CONTACT_FIELDS,
        submit_label=SUBMIT_LABEL,
        submitting_label=SUBMITTING_LABEL,
        submit_error=SUBMIT_ERROR,
    )


def render_contact_confirmation(message: str) -> str:
    return _render("partials/contact_confirmation.html", message=message)


def render_chat_messages(state: ChatState) -> str:
    """Render every chat bubble, plus the loading bubble while a reply is pending."""
    return _render("partials/chat_messages.html", chat=state)
