from fastapi import Request, UploadFile, HTTPException
from typing import Dict, Any

from services.errors import NoActiveSessionError
from services.orchestrator import RoomOrchestrator
from services.presentation import build_view


def _orchestrator(request: Request) -> RoomOrchestrator:
    orchestrator = getattr(request.app.state, "orchestrator", None)
    if orchestrator is None:
        raise HTTPException(status_code=503, detail="Room assistant is not ready")
    return orchestrator


async def upload_room_photo(request: Request, file: UploadFile) -> Dict[str, Any]:
    """Handle a photo upload and run the first-turn analysis.

    A non-image upload is not an HTTP error: the returned view carries the
    validation message and the phase is left unchanged.

    Args:
        request: FastAPI Request (used to access the orchestrator on app.state).
        file: The uploaded photo; only its declared content type is checked.

    Returns:
        The presentation view after the analysis settled.
    """
    orchestrator = _orchestrator(request)
    await orchestrator.on_upload(file)
    return build_view(orchestrator.state)


async def send_message(request: Request, text: str) -> Dict[str, Any]:
    """Send a follow-up chat message about the analyzed room.

    Returns:
        The presentation view including the new user and assistant turns.

    Raises:
        HTTPException(409) if no analysis session is active.
    """
    orchestrator = _orchestrator(request)
    try:
        await orchestrator.on_send_message(text)
    except NoActiveSessionError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    return build_view(orchestrator.state)


async def reset_room(request: Request) -> Dict[str, Any]:
    """Clear the image, transcript and error, and drop the session."""
    orchestrator = _orchestrator(request)
    orchestrator.on_reset()
    return build_view(orchestrator.state)


async def get_room_view(request: Request) -> Dict[str, Any]:
    """Return the current presentation view."""
    return build_view(_orchestrator(request).state)
