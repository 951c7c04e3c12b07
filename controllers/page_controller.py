from typing import Tuple

from services.ai.base import ScrapAssistant
from services.session_store import PageSessionStore
from services.site_content import PROCESS_STEPS, SERVICES
from views.renderer import render_page


def render_landing_page(store: PageSessionStore, assistant: ScrapAssistant) -> Tuple[str, str]:
    """Open a new page session and render the landing page for it.

    Args:
        store: In-memory page session store held on app.state.
        assistant: The scrap assistant chosen at startup (only its mode is shown).

    Returns:
        A ``(page_id, html)`` tuple; the caller sets the page id cookie.
    """
    page = store.create()
    html = render_page(
        SERVICES,
        PROCESS_STEPS,
        identifier=page.identifier,
        contact=page.contact,
        chat=page.chat,
        mock_mode=assistant.mock_mode,
    )
    return page.page_id, html
