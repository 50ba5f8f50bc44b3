"""Sequence upload, analysis, and chat for the single room session."""

from __future__ import annotations

import itertools
import logging
from typing import Any, Optional

from models.session_models import ChatTurn, RoomState, Speaker, UploadedImage
from services.analysis_session import AnalysisSession
from services.errors import (
	ANALYSIS_FAILED_MESSAGE,
	CHAT_FALLBACK_MESSAGE,
	INGESTION_FAILED_MESSAGE,
	AnalysisFailure,
	ChatFailure,
	InvalidInputKind,
	NoActiveSessionError,
)
from utils.media_validation import read_uploaded_image, validate_image_file

LOGGER = logging.getLogger(__name__)


class RoomOrchestrator:
	"""Single source of truth for what the browser shows.

	Holds the uploaded image, the transcript, one busy flag and the last error.
	Results from remote calls are applied only while the session version they
	were issued under is still current.
	"""

	def __init__(self, session: AnalysisSession) -> None:
		self.session = session
		self.state = RoomState()
		self._turn_ids = itertools.count(1)

	async def on_upload(self, upload: Any) -> None:
		"""Validate, ingest and immediately analyze a newly selected photo."""
		try:
			validate_image_file(upload)
		except InvalidInputKind as exc:
			LOGGER.info("Rejected upload with content type %r", exc.content_type)
			# The current room keeps its phase; the message rides along as a notice.
			if self.state.image is None:
				self.state.error = str(exc)
			else:
				self.state.notice = str(exc)
			return

		self.state.error = None
		self.state.notice = None
		self.state.turns = []
		self.state.busy = False
		self.session.reset()
		version = self.session.version

		try:
			image = await read_uploaded_image(upload)
		except Exception as exc:
			if self.session.version != version:
				return
			logging.error("Failed to read uploaded image: %s", exc)
			self.state.error = INGESTION_FAILED_MESSAGE
			return

		if self.session.version != version:
			LOGGER.info("Discarding upload superseded while it was being read.")
			return

		self.state.image = image
		await self.on_analyze(image)

	async def on_analyze(self, image: UploadedImage) -> bool:
		"""Run the first-turn analysis; returns False when rejected as busy."""
		if self.state.busy:
			LOGGER.warning("Analysis requested while another request is in flight; ignoring.")
			return False

		self.state.busy = True
		try:
			reply = await self.session.start_analysis(image)
		except AnalysisFailure as exc:
			if self.session.is_current(exc.version):
				logging.error("Room analysis failed: %s", exc.__cause__ or exc)
				self.state.error = ANALYSIS_FAILED_MESSAGE
				self.state.busy = False
			return True

		if not self.session.is_current(reply.version):
			LOGGER.info("Discarding stale analysis for session version %s.", reply.version)
			return True

		self.state.turns = [self._new_turn(Speaker.ASSISTANT, reply.text)]
		self.state.error = None
		self.state.notice = None
		self.state.busy = False
		return True

	async def on_send_message(self, text: str) -> Optional[ChatTurn]:
		"""Append the user's message and the assistant reply to the transcript.

		Blank text, a pending request, or a failed analysis still awaiting reset
		makes this a no-op returning None.
		Provider failures become an apologetic assistant turn instead of an error.
		"""
		if not text or not text.strip() or self.state.busy:
			return None
		if not self.session.active:
			raise NoActiveSessionError()
		if self.state.error:
			LOGGER.info("Ignoring chat message while the room is in an error state.")
			return None

		version = self.session.version
		self.state.notice = None
		self.state.turns.append(self._new_turn(Speaker.USER, text))
		self.state.busy = True
		try:
			reply = await self.session.send_message(text)
			reply_text = reply.text
		except ChatFailure as exc:
			logging.error("Chat request failed: %s", exc.__cause__ or exc)
			reply_text = CHAT_FALLBACK_MESSAGE

		if not self.session.is_current(version):
			LOGGER.info("Discarding stale chat reply for session version %s.", version)
			return None

		turn = self._new_turn(Speaker.ASSISTANT, reply_text)
		self.state.turns.append(turn)
		self.state.busy = False
		return turn

	def on_reset(self) -> None:
		"""Forget the image, transcript and error, and drop the session."""
		self.state = RoomState()
		self.session.reset()

	def _new_turn(self, speaker: Speaker, text: str) -> ChatTurn:
		return ChatTurn(id=f"turn-{next(self._turn_ids)}", speaker=speaker, text=text)
