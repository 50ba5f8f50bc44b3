import inspect
import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request, HTTPException
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles
from openai import AsyncOpenAI

from routes.room_route import router as room_router
from services.analysis_session import AnalysisSession
from services.orchestrator import RoomOrchestrator
from utils.app_config import AppConfig

BASE_DIR = Path(__file__).resolve().parent
PUBLIC_DIR = BASE_DIR / "public"

from dotenv import load_dotenv

load_dotenv()  # Load environment variables from .env file if present


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan manager to initialize:
      - the runtime configuration (OPENAI_API_KEY is required)
      - the OpenAI async client
      - the room orchestrator, which owns the single analysis session
    and attach them to `app.state`.
    """
    config = AppConfig.from_env()
    logging.basicConfig(level=config.log_level)
    app.state.config = config

    try:
        openai_client = AsyncOpenAI(api_key=config.openai_api_key, timeout=config.request_timeout)
    except Exception as exc:
        raise RuntimeError("Failed to initialize OpenAI Async client") from exc

    app.state.openai_client = openai_client
    session = AnalysisSession(
        openai_client, model=config.model, max_output_tokens=config.max_output_tokens
    )
    app.state.orchestrator = RoomOrchestrator(session)

    try:
        yield
    finally:
        await _close_client(getattr(app.state, "openai_client", None))


async def _close_client(client) -> None:
    """Close the OpenAI client; errors during shutdown are logged, not raised."""
    close = getattr(client, "close", None)
    if close is None:
        return
    try:
        result = close()
        if inspect.isawaitable(result):
            await result
    except Exception as exc:
        logging.warning("Failed to close OpenAI client: %s", exc)


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application instance.
    """
    app = FastAPI(title="ZenSpace", lifespan=lifespan)

    # Serve static assets from the public directory, if it exists.
    if PUBLIC_DIR.exists():
        app.mount("/public", StaticFiles(directory=PUBLIC_DIR), name="public")

    @app.get("/", include_in_schema=False)
    async def serve_index():
        """
        Serve the frontend index page from the public directory.
        """
        index_path = PUBLIC_DIR / "index.html"
        if not index_path.exists():
            raise HTTPException(status_code=404, detail="Frontend not found")
        return FileResponse(index_path)

    @app.get("/health")
    async def health(request: Request):
        """
        Simple health check that verifies the OpenAI client and orchestrator are present.
        """
        has_openai = getattr(request.app.state, "openai_client", None) is not None
        has_orchestrator = getattr(request.app.state, "orchestrator", None) is not None
        return {"ok": True, "openai_available": has_openai, "orchestrator_ready": has_orchestrator}

    app.include_router(room_router)

    return app


app = create_app()
