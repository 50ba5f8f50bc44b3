"""Session domain models for room analysis and follow-up chat."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class Speaker(str, Enum):
	"""Who authored a transcript turn."""

	USER = "user"
	ASSISTANT = "assistant"


@dataclass(frozen=True)
class UploadedImage:
	"""Transport-ready image plus a preview the browser can display."""

	encoded_bytes: str
	content_type: str
	display_url: str
	filename: Optional[str] = None


@dataclass(frozen=True)
class ChatTurn:
	"""One message in the visible transcript."""

	id: str
	speaker: Speaker
	text: str
	created_at: float = field(default_factory=lambda: time.time())


@dataclass
class SessionHandle:
	"""Reference to provider-side conversation context for one analysis."""

	version: int
	previous_response_id: Optional[str] = None
	history: List[ChatTurn] = field(default_factory=list)


@dataclass(frozen=True)
class SessionReply:
	"""Assistant text tagged with the session version it was produced under."""

	text: str
	version: int
	response_id: Optional[str] = None
	input_tokens: Optional[int] = None
	output_tokens: Optional[int] = None


@dataclass
class RoomState:
	"""Everything the browser needs to render the current phase."""

	image: Optional[UploadedImage] = None
	turns: List[ChatTurn] = field(default_factory=list)
	busy: bool = False
	error: Optional[str] = None
	notice: Optional[str] = None
