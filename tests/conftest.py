"""
Shared pytest fixtures for the room assistant tests
"""
import base64
from types import SimpleNamespace
from unittest.mock import AsyncMock, Mock

import pytest

from services.analysis_session import AnalysisSession
from services.orchestrator import RoomOrchestrator


class FakeUpload:
    """Minimal stand-in for FastAPI's UploadFile."""

    def __init__(self, data: bytes, content_type: str, filename: str = "room.jpg"):
        self.data = data
        self.content_type = content_type
        self.filename = filename
        self.read_calls = 0

    async def read(self) -> bytes:
        self.read_calls += 1
        return self.data


def _make_response(text: str, response_id: str = "resp_1", input_tokens: int = 120, output_tokens: int = 40):
    return SimpleNamespace(
        id=response_id,
        output_text=text,
        output=[],
        usage=SimpleNamespace(input_tokens=input_tokens, output_tokens=output_tokens),
    )


@pytest.fixture
def make_response():
    """Factory for Responses API result objects"""
    return _make_response


@pytest.fixture
def mock_openai_client():
    """Mock AsyncOpenAI client for testing without API calls"""
    mock = Mock()
    mock.responses = Mock()
    mock.responses.create = AsyncMock()
    return mock


@pytest.fixture
def jpeg_bytes():
    return b"\xff\xd8\xff\xe0fake-jpeg-body"


@pytest.fixture
def room_upload(jpeg_bytes):
    return FakeUpload(jpeg_bytes, "image/jpeg", "room.jpg")


@pytest.fixture
def text_upload():
    return FakeUpload(b"just some notes", "text/plain", "notes.txt")


@pytest.fixture
def uploaded_image(jpeg_bytes):
    from models.session_models import UploadedImage

    encoded = base64.b64encode(jpeg_bytes).decode("ascii")
    return UploadedImage(
        encoded_bytes=encoded,
        content_type="image/jpeg",
        display_url=f"data:image/jpeg;base64,{encoded}",
        filename="room.jpg",
    )


@pytest.fixture
def session(mock_openai_client):
    return AnalysisSession(mock_openai_client, model="gpt-5", max_output_tokens=500)


@pytest.fixture
def orchestrator(session):
    return RoomOrchestrator(session)
