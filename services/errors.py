"""Error taxonomy for upload, analysis, and chat failures."""

from __future__ import annotations

from typing import Optional

INVALID_IMAGE_MESSAGE = "Please upload a valid image file."
INGESTION_FAILED_MESSAGE = "Failed to process image. Please try again."
ANALYSIS_FAILED_MESSAGE = "AI Analysis failed. Please check your connection or try a different image."
CHAT_FALLBACK_MESSAGE = "Sorry, I'm having trouble connecting right now. Please try again."
NO_ACTIVE_SESSION_MESSAGE = "No active analysis session. Please upload an image first."


class ZenSpaceError(Exception):
    """Base class for errors raised by the room assistant."""


class InvalidInputKind(ZenSpaceError, ValueError):
    """The uploaded file does not declare an image content type."""

    def __init__(self, content_type: Optional[str] = None) -> None:
        self.content_type = content_type
        super().__init__(INVALID_IMAGE_MESSAGE)


class RemoteCallFailure(ZenSpaceError):
    """A provider call failed; `version` is the session version it ran under."""

    def __init__(self, message: str, version: int) -> None:
        self.version = version
        super().__init__(message)


class AnalysisFailure(RemoteCallFailure):
    """The first-turn room analysis could not be produced."""


class ChatFailure(RemoteCallFailure):
    """A follow-up chat turn could not be answered."""


class NoActiveSessionError(ZenSpaceError, RuntimeError):
    """Chat was attempted before any analysis started."""

    def __init__(self) -> None:
        super().__init__(NO_ACTIVE_SESSION_MESSAGE)
