"""Description: Owns the single conversational session with the Responses API."""

import logging
from typing import Any, Dict, List, Optional, Tuple
from uuid import uuid4

from openai import AsyncOpenAI

from models.session_models import ChatTurn, SessionHandle, SessionReply, Speaker, UploadedImage
from services.errors import AnalysisFailure, ChatFailure, NoActiveSessionError
from services.openai.media_inputs import build_analysis_inputs, build_chat_inputs
from services.openai.prompts import analysis_user_prompt, organizer_system_prompt
from services.openai.response_parser import extract_response_id, extract_text, extract_usage
from utils.app_config import DEFAULT_MAX_OUTPUT_TOKENS, DEFAULT_MODEL

LOGGER = logging.getLogger(__name__)

EMPTY_ANALYSIS_TEXT = "I couldn't generate an analysis. Please try again."
EMPTY_CHAT_TEXT = "I didn't catch that. Could you rephrase?"


class AnalysisSession:
    """Analyze a room photo once, then continue the conversation about it.

    At most one `SessionHandle` is live. Context between turns is kept by the
    provider: each call chains onto the previous response id, and earlier turns
    are never resent. `version` increases on every `start_analysis` and `reset`
    so callers can tell whether a reply still belongs to the active session.
    """

    def __init__(
        self,
        client: AsyncOpenAI,
        *,
        model: str = DEFAULT_MODEL,
        max_output_tokens: int = DEFAULT_MAX_OUTPUT_TOKENS,
    ) -> None:
        """Initialize the session with an OpenAI async client."""
        if client is None:
            raise ValueError("OpenAI client must be provided.")
        self.client = client
        self.model = model
        self.max_output_tokens = max_output_tokens
        self.system_prompt = organizer_system_prompt()
        self._handle: Optional[SessionHandle] = None
        self._version = 0

    @property
    def version(self) -> int:
        return self._version

    @property
    def active(self) -> bool:
        return self._handle is not None

    @property
    def history(self) -> Tuple[ChatTurn, ...]:
        """Turns exchanged under the live handle, oldest first."""
        if self._handle is None:
            return ()
        return tuple(self._handle.history)

    def is_current(self, version: int) -> bool:
        """True when `version` is the live handle's version."""
        return self._handle is not None and self._handle.version == version

    def reset(self) -> None:
        """Discard the live handle. Safe to call repeatedly."""
        self._version += 1
        self._handle = None

    async def start_analysis(self, image: UploadedImage) -> SessionReply:
        """Open a fresh session and return the first-turn room analysis.

        Any previous handle is torn down before the remote call is made. On a
        provider error the new handle stays live with no turns recorded.
        """
        self._version += 1
        handle = SessionHandle(version=self._version)
        self._handle = handle

        try:
            inputs = build_analysis_inputs(analysis_user_prompt(), image)
            response = await self._create_response(inputs, previous_response_id=None)
        except Exception as exc:
            raise AnalysisFailure("Room analysis request failed.", handle.version) from exc

        text = extract_text(response) or EMPTY_ANALYSIS_TEXT
        reply = self._build_reply(response, text, handle.version)
        if self._handle is handle:
            handle.previous_response_id = reply.response_id
            handle.history.append(_turn(Speaker.ASSISTANT, text))
        else:
            LOGGER.info("Analysis for session version %s finished after it was replaced.", handle.version)
        return reply

    async def send_message(self, text: str) -> SessionReply:
        """Send a follow-up message within the live session.

        Raises:
            NoActiveSessionError: no analysis has been started since the last reset.
                No remote call is made.
            ChatFailure: the provider call failed. The session stays live.
        """
        handle = self._handle
        if handle is None:
            raise NoActiveSessionError()

        try:
            response = await self._create_response(
                build_chat_inputs(text), previous_response_id=handle.previous_response_id
            )
        except Exception as exc:
            raise ChatFailure("Chat request failed.", handle.version) from exc

        reply_text = extract_text(response) or EMPTY_CHAT_TEXT
        reply = self._build_reply(response, reply_text, handle.version)
        if self._handle is handle:
            handle.previous_response_id = reply.response_id or handle.previous_response_id
            handle.history.append(_turn(Speaker.USER, text))
            handle.history.append(_turn(Speaker.ASSISTANT, reply_text))
        else:
            LOGGER.info("Chat reply for session version %s arrived after it was replaced.", handle.version)
        return reply

    async def _create_response(self, inputs: List[Dict[str, Any]], *, previous_response_id: Optional[str]) -> Any:
        """Send one turn to the OpenAI Responses API."""
        kwargs: Dict[str, Any] = {
            "model": self.model,
            "instructions": self.system_prompt,
            "input": inputs,
            "store": True,
            "max_output_tokens": self.max_output_tokens,
        }
        if previous_response_id:
            kwargs["previous_response_id"] = previous_response_id
        try:
            return await self.client.responses.create(**kwargs)
        except Exception as exc:
            logging.error("Error during OpenAI Responses API call: %s", exc)
            raise

    def _build_reply(self, response: Any, text: str, version: int) -> SessionReply:
        usage = extract_usage(response)
        return SessionReply(
            text=text,
            version=version,
            response_id=extract_response_id(response),
            input_tokens=usage["input_tokens"],
            output_tokens=usage["output_tokens"],
        )


def _turn(speaker: Speaker, text: str) -> ChatTurn:
    return ChatTurn(id=uuid4().hex, speaker=speaker, text=text)
