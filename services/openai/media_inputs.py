"""Utilities to build multimodal input payloads for the Responses API."""

from typing import Any, Dict, List

from models.session_models import UploadedImage
from utils.media_validation import to_data_url


def to_image_data_url(encoded: str, content_type: str) -> str:
    """Convert base64 image text into a data URL suitable for vision input."""
    if not encoded:
        raise ValueError("Image payload is empty.")
    return to_data_url(encoded, content_type or "image/jpeg")


def build_analysis_inputs(user_prompt: str, image: UploadedImage) -> List[Dict[str, Any]]:
    """Compose the first turn: the photo plus the fixed analysis instruction."""
    image_url = to_image_data_url(image.encoded_bytes, image.content_type)
    return [
        {
            "type": "message",
            "role": "user",
            "content": [
                {"type": "input_image", "image_url": image_url},
                {"type": "input_text", "text": user_prompt},
            ],
        }
    ]


def build_chat_inputs(text: str) -> List[Dict[str, Any]]:
    """Compose a follow-up turn; earlier turns live on the provider side."""
    return [
        {"type": "message", "role": "user", "content": [{"type": "input_text", "text": text}]},
    ]
