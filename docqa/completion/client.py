"""Gemini completion client over HTTP.

Sends a single prompt to the ``generateContent`` endpoint and returns the
generated text. Every failure is raised as a CompletionServiceError with a
kind the caller can act on; nothing is retried here.
"""

import logging
from typing import Any, Protocol

import httpx

from docqa.completion.config import CompletionConfig, get_completion_config
from docqa.completion.errors import CompletionErrorKind, CompletionServiceError

logger = logging.getLogger(__name__)


class CompletionService(Protocol):
    """Black-box text completion collaborator."""

    async def complete(self, prompt: str) -> str: ...


class GeminiClient:
    """Async client for the Gemini generateContent API."""

    def __init__(
        self,
        config: CompletionConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Optional completion configuration.
                    Loads from environment if not provided.
            transport: Optional httpx transport, used by tests to stub the API.
        """
        self._config = config or get_completion_config()
        self._transport = transport

    @property
    def config(self) -> CompletionConfig:
        return self._config

    def build_payload(self, prompt: str) -> dict[str, Any]:
        """Request body for a single-turn prompt."""
        return {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": self._config.generation_config(),
            "safetySettings": self._config.safety_settings(),
        }

    async def complete(self, prompt: str) -> str:
        """Generate text for a prompt.

        Args:
            prompt: Complete prompt including context and question.

        Returns:
            Generated text with surrounding whitespace removed.

        Raises:
            CompletionServiceError: If the request fails or nothing was generated.
        """
        headers = {
            "Content-Type": "application/json",
            "x-goog-api-key": self._config.api_key,
        }
        logger.debug(f"Sending prompt of {len(prompt)} characters to {self._config.model_name}")

        async with httpx.AsyncClient(timeout=self._config.timeout, transport=self._transport) as client:
            try:
                response = await client.post(
                    self._config.endpoint,
                    json=self.build_payload(prompt),
                    headers=headers,
                )
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                status_code = e.response.status_code
                logger.warning(f"Completion service returned HTTP {status_code}")
                raise CompletionServiceError.from_status(status_code, e.response.reason_phrase) from e
            except httpx.TimeoutException as e:
                logger.warning(f"Completion request timed out: {e}")
                raise CompletionServiceError(
                    CompletionErrorKind.NO_RESPONSE,
                    "No response from the completion service. Please check your internet connection and try again.",
                ) from e
            except httpx.RequestError as e:
                logger.warning(f"Completion request failed: {e}")
                raise CompletionServiceError(
                    CompletionErrorKind.NETWORK_FAILURE,
                    f"Failed to connect to the completion service: {e}",
                ) from e

        try:
            body = response.json()
        except ValueError as e:
            raise CompletionServiceError(
                CompletionErrorKind.EMPTY_GENERATION,
                "Invalid response structure from the completion service",
                status_code=response.status_code,
            ) from e

        return _extract_text(body)


def _extract_text(body: Any) -> str:
    """Pull the first candidate's text out of a generateContent response.

    Raises:
        CompletionServiceError: EMPTY_GENERATION when the body holds no text.
    """
    candidates = body.get("candidates") if isinstance(body, dict) else None
    if not candidates or not isinstance(candidates, list):
        raise CompletionServiceError(
            CompletionErrorKind.EMPTY_GENERATION,
            "No response candidates from the completion service",
        )

    first = candidates[0]
    content = first.get("content") if isinstance(first, dict) else None
    parts = content.get("parts") if isinstance(content, dict) else None
    if not parts or not isinstance(parts, list) or not isinstance(parts[0], dict):
        raise CompletionServiceError(
            CompletionErrorKind.EMPTY_GENERATION,
            "Invalid response structure from the completion service",
        )

    text = parts[0].get("text")
    if not isinstance(text, str) or not text.strip():
        raise CompletionServiceError(
            CompletionErrorKind.EMPTY_GENERATION,
            "Generated response is empty",
        )
    return text.strip()
