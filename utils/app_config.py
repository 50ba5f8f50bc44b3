"""Runtime configuration read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_MODEL = "gpt-5"
DEFAULT_MAX_OUTPUT_TOKENS = 2000
DEFAULT_REQUEST_TIMEOUT = 120.0


def _read_number(name: str, default, cast):
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = cast(raw.strip())
    except ValueError as exc:
        raise RuntimeError(f"{name}={raw!r} is not a valid number.") from exc
    if value <= 0:
        raise RuntimeError(f"{name} must be greater than zero, got {raw!r}.")
    return value


@dataclass(frozen=True)
class AppConfig:
    """
    Settings for the room assistant service.

    - OPENAI_API_KEY is required; a missing or blank value raises RuntimeError.
    - ZENSPACE_MODEL selects the Responses API model (default: gpt-5).
    - ZENSPACE_MAX_OUTPUT_TOKENS caps each remote call (default: 2000).
    - ZENSPACE_REQUEST_TIMEOUT is handed to the OpenAI client, in seconds, so
      a hung call surfaces as a provider error (default: 120).
    - LOG_LEVEL sets the root logging level (default: INFO).
    """

    openai_api_key: str
    model: str = DEFAULT_MODEL
    max_output_tokens: int = DEFAULT_MAX_OUTPUT_TOKENS
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "AppConfig":
        api_key = os.getenv("OPENAI_API_KEY")
        if api_key is None or not api_key.strip():
            raise RuntimeError("OPENAI_API_KEY environment variable is not set")

        model = (os.getenv("ZENSPACE_MODEL") or "").strip() or DEFAULT_MODEL
        log_level = (os.getenv("LOG_LEVEL") or "").strip().upper() or "INFO"

        return cls(
            openai_api_key=api_key.strip(),
            model=model,
            max_output_tokens=_read_number("ZENSPACE_MAX_OUTPUT_TOKENS", DEFAULT_MAX_OUTPUT_TOKENS, int),
            request_timeout=_read_number("ZENSPACE_REQUEST_TIMEOUT", DEFAULT_REQUEST_TIMEOUT, float),
            log_level=log_level,
        )
