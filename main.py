import logging
import os
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from routes.calculator_route import router as calculator_router
from routes.chat_route import router as chat_router
from routes.contact_route import router as contact_router
from routes.identifier_route import router as identifier_router
from routes.page_route import router as page_router
from services.ai.factory import build_assistant
from services.session_store import DEFAULT_MAX_SESSIONS, PageSessionStore

BASE_DIR = Path(__file__).resolve().parent
PUBLIC_DIR = BASE_DIR / "public"

from dotenv import load_dotenv

load_dotenv()  # Load environment variables from .env file if present

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
LOGGER = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan manager to initialize:
      - the scrap assistant (live OpenAI client, or mock data without a key)
      - the in-memory page session store
    and attach them to `app.state`.
    """
    app.state.assistant = build_assistant()
    app.state.page_sessions = PageSessionStore(
        int(os.getenv("MAX_PAGE_SESSIONS", str(DEFAULT_MAX_SESSIONS)))
    )
    LOGGER.info("Kabaadi site ready (mock_mode=%s)", app.state.assistant.mock_mode)

    try:
        yield
    finally:
        try:
            await app.state.assistant.aclose()
        except Exception as exc:
            LOGGER.warning("Failed to close scrap assistant cleanly: %s", exc)


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application instance.
    """
    app = FastAPI(title="Kabaadi and Co", lifespan=lifespan)

    # Serve static assets from the public directory, if it exists.
    if PUBLIC_DIR.exists():
        app.mount("/public", StaticFiles(directory=PUBLIC_DIR), name="public")

    # Register application routers
    app.include_router(page_router)
    app.include_router(identifier_router)
    app.include_router(calculator_router)
    app.include_router(contact_router)
    app.include_router(chat_router)

    return app


app = create_app()
