"""AI-assisted fixing via Google Gemini.

This path is only taken on request (``wtf --ai`` or AI mode). It sends the raw
command to the model and returns a single corrected command, bypassing the
match engine entirely.
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING, Any

import httpx

if TYPE_CHECKING:
    from collections.abc import Mapping

    from wtf.config import UserConfig

logger = logging.getLogger(__name__)

API_KEY_ENV_VAR = "GOOGLE_API_KEY"
DEFAULT_MODEL = "gemini-2.0-flash"
API_BASE = "https://generativelanguage.googleapis.com/v1beta/models"

PROMPT = (
    "You are a shell command expert. Fix this command and output ONLY the "
    "corrected command, nothing else: {command}"
)


class AIFixError(RuntimeError):
    """The AI path could not produce a command."""


def resolve_api_key(
    config: UserConfig | None = None,
    env: Mapping[str, str] | None = None,
) -> str:
    """Find the Gemini API key.

    The environment variable wins over the configured key.

    Raises:
        AIFixError: If no key is available
    """
    env = os.environ if env is None else env

    key = env.get(API_KEY_ENV_VAR, "")
    if key:
        return key

    if config is not None and config.google_api_key:
        return config.google_api_key

    raise AIFixError("Google API key not found")


def clean_ai_response(response: str) -> str:
    """Strip markdown fences and quotes, keep the first command line.

    Raises:
        AIFixError: If nothing is left
    """
    for line in response.splitlines():
        line = line.strip()
        if not line or line.startswith("```"):
            continue
        cleaned = line.strip("`").strip('"').strip("'").strip()
        if cleaned:
            return cleaned

    raise AIFixError("AI returned empty response")


class GeminiClient:
    """Minimal client for the Gemini generateContent endpoint."""

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        timeout: float = 30.0,
        client: httpx.Client | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            api_key: Google AI API key
            model: Gemini model name
            timeout: Request timeout in seconds
            client: Preconfigured httpx client (tests pass a mock transport)
        """
        self.api_key = api_key
        self.model = model
        self.timeout = timeout
        self._client = client

    @property
    def url(self) -> str:
        return f"{API_BASE}/{self.model}:generateContent"

    def _payload(self, command: str) -> dict[str, Any]:
        return {
            "contents": [{"parts": [{"text": PROMPT.format(command=command)}]}],
            "generationConfig": {
                "temperature": 0.1,
                "maxOutputTokens": 100,
            },
        }

    def fix_command(self, command: str) -> str:
        """Ask the model for a corrected command.

        Args:
            command: The failed command

        Returns:
            The corrected command line

        Raises:
            AIFixError: On transport errors, error statuses or bad payloads
        """
        headers = {
            "Content-Type": "application/json",
            "X-goog-api-key": self.api_key,
        }

        logger.debug(f"Requesting AI fix from {self.model}")
        try:
            if self._client is not None:
                response = self._client.post(self.url, json=self._payload(command), headers=headers)
            else:
                with httpx.Client(timeout=self.timeout) as client:
                    response = client.post(self.url, json=self._payload(command), headers=headers)
        except httpx.HTTPError as e:
            raise AIFixError(f"API request failed: {e}") from e

        if response.is_error:
            raise AIFixError(f"API returned error: {response.status_code}")

        try:
            data = response.json()
            text = data["candidates"][0]["content"]["parts"][0]["text"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise AIFixError("No response from AI") from e

        if not isinstance(text, str):
            raise AIFixError("No response from AI")

        return clean_ai_response(text)
