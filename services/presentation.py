"""Map orchestrator state to what the browser renders."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict

from models.session_models import ChatTurn, RoomState, Speaker


class ViewPhase(str, Enum):
	NO_IMAGE = "no_image"
	ANALYZING = "analyzing"
	ERROR = "error"
	CHAT = "chat"


def resolve_phase(state: RoomState) -> ViewPhase:
	"""Return the panel the browser should show for `state`."""
	if state.image is None:
		return ViewPhase.NO_IMAGE
	if state.error:
		return ViewPhase.ERROR
	if not state.turns and state.busy:
		return ViewPhase.ANALYZING
	return ViewPhase.CHAT


def _turn_view(turn: ChatTurn) -> Dict[str, Any]:
	return {
		"id": turn.id,
		"speaker": turn.speaker.value,
		"text": turn.text,
		"format": "markdown" if turn.speaker is Speaker.ASSISTANT else "text",
		"created_at": turn.created_at,
	}


def build_view(state: RoomState) -> Dict[str, Any]:
	"""Return a JSON-ready view model; Markdown is rendered client side."""
	phase = resolve_phase(state)
	image = state.image
	return {
		"phase": phase.value,
		"error": state.error,
		"notice": state.notice,
		"image": (
			{"content_type": image.content_type, "display_url": image.display_url, "filename": image.filename}
			if image is not None
			else None
		),
		"turns": [_turn_view(turn) for turn in state.turns],
		"busy": state.busy,
		"typing": phase is ViewPhase.CHAT and state.busy,
		"analyzing": image is not None and state.busy and not state.turns,
	}
