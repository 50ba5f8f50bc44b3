"""Validation and ingestion helpers for uploaded room photos."""

import base64
import inspect
from typing import Any, Optional

from models.session_models import UploadedImage
from services.errors import InvalidInputKind


def normalize_content_type(content_type: Optional[str]) -> str:
    """Return the bare, lower-cased media type without parameters."""
    if not content_type:
        return ""
    return content_type.lower().split(";", 1)[0].strip()


def is_image_content_type(content_type: Optional[str]) -> bool:
    """Only the declared type is inspected; the bytes are never sniffed."""
    return normalize_content_type(content_type).startswith("image/")


def validate_image_file(upload: Any) -> str:
    """Return the upload's image content type or raise InvalidInputKind.

    Accepts any file-like object exposing a `content_type` attribute, such as
    FastAPI's `UploadFile`. No size, dimension or content checks are made.
    """
    content_type = getattr(upload, "content_type", None)
    if not is_image_content_type(content_type):
        raise InvalidInputKind(content_type)
    return normalize_content_type(content_type)


def to_data_url(encoded: str, content_type: str) -> str:
    """Build a `data:` URL the browser can use as an <img> source."""
    return f"data:{content_type};base64,{encoded}"


async def read_uploaded_image(upload: Any) -> UploadedImage:
    """Read an uploaded image into its transport and preview forms.

    Raises:
        InvalidInputKind: the upload does not declare an image content type.
            Nothing is read in that case.
    """
    content_type = validate_image_file(upload)

    raw = upload.read()
    if inspect.isawaitable(raw):
        raw = await raw
    if isinstance(raw, str):
        raw = raw.encode("utf-8")

    encoded = base64.b64encode(raw or b"").decode("ascii")
    return UploadedImage(
        encoded_bytes=encoded,
        content_type=content_type,
        display_url=to_data_url(encoded, content_type),
        filename=getattr(upload, "filename", None),
    )
