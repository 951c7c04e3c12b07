import logging

from models.session_models import ChatBubble, ChatState
from services.ai.base import ScrapAssistant
from views.renderer import SEND_ERROR, render_chat_messages

LOGGER = logging.getLogger(__name__)

WELCOME_MESSAGE = "Hello! I'm your Kabaadi Assistant. Ask me anything about scrap prices, what we buy, or our process."


def _ensure_session(state: ChatState, assistant: ScrapAssistant) -> None:
    if state.session is None:
        state.session = assistant.start_chat()


def open_chat(state: ChatState, assistant: ScrapAssistant) -> str:
    """Show the chat window, creating the conversation on first open."""
    state.is_open = True
    _ensure_session(state, assistant)
    if not state.messages:
        state.messages.append(ChatBubble(role="bot", text=WELCOME_MESSAGE))
    return render_chat_messages(state)


def close_chat(state: ChatState) -> str:
    state.is_open = False
    return render_chat_messages(state)


async def send_message(state: ChatState, assistant: ScrapAssistant, message: str) -> str:
    """Append the user's message and the assistant's reply to the transcript.

    Blank input is ignored, as is a message sent while a reply is pending.
    """
    text = (message or "").strip()
    if not text or state.pending:
        return render_chat_messages(state)

    state.messages.append(ChatBubble(role="user", text=text))
    state.pending = True
    try:
        _ensure_session(state, assistant)
        reply = await assistant.send_message(state.session, text)
        state.messages.append(ChatBubble(role="bot", text=reply))
    except Exception as exc:
        LOGGER.error("Chat message failed: %s", exc)
        state.messages.append(ChatBubble(role="error", text=SEND_ERROR))
    finally:
        state.pending = False
    return render_chat_messages(state)
