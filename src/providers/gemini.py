"""
Gemini Provider - Google Generative AI Binding

This module implements the Gemini binding of the provider interface.
Unlike the OpenAI binding it always calls the generateContent endpoint over
HTTP, whatever the payload shape:

- TextPrompt -> a single user content with one text part
- StructuredMessages -> system message becomes systemInstruction,
  assistant -> "model" role, image data URIs -> inlineData parts

Reference:
- Google Generative AI API Docs: https://ai.google.dev/api
"""

import logging
from typing import Any

import httpx

from src.core.exceptions import UpstreamError
from src.models.domain import (
    ImagePart,
    ProviderRequestPayload,
    StructuredMessage,
    StructuredMessages,
    TextPart,
    TextPrompt,
)
from src.providers.base import LLMProvider

logger = logging.getLogger(__name__)

GEMINI_API_BASE = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_MODEL = "gemini-1.5-flash"


class GeminiProvider(LLMProvider):
    """
    Google Gemini provider binding.

    Single attempt per request, no retries. The httpx client is created
    with its library defaults (no explicit timeout override).

    Args:
        api_key: Google AI API key.
        model: Gemini model identifier.
        max_tokens: Optional maxOutputTokens for the generation config.
        api_base: API base URL (default: Google's API).
        client: Optional preconfigured httpx.AsyncClient.

    Example:
        >>> provider = GeminiProvider(api_key="AIza...")
        >>> text = await provider.generate(TextPrompt(text="Hello"))
    """

    name = "gemini"
    display_name = "Gemini"

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        max_tokens: int | None = None,
        api_base: str | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._api_key = api_key
        self._model = model
        self._max_tokens = max_tokens
        self._api_base = api_base or GEMINI_API_BASE
        self._client = client or httpx.AsyncClient()

    @property
    def model(self) -> str:
        return self._model

    # =========================================================================
    # generate()
    # =========================================================================

    async def generate(self, payload: ProviderRequestPayload) -> str:
        """
        Call generateContent and return the reply text.

        Args:
            payload: TextPrompt or StructuredMessages.

        Returns:
            Concatenated text of the first candidate (fallback reply if empty).

        Raises:
            UpstreamError: On network failure or non-success status.
        """
        url = f"{self._api_base}/models/{self._model}:generateContent"
        body = self.build_request_body(payload)

        try:
            response = await self._client.post(
                url,
                params={"key": self._api_key},
                json=body,
                headers={"Content-Type": "application/json"},
            )
        except httpx.HTTPError as e:
            logger.warning(f"Gemini request failed: {type(e).__name__}")
            raise UpstreamError(str(e) or type(e).__name__, provider=self.name) from e

        if not response.is_success:
            logger.warning(f"Gemini returned status {response.status_code}")
            raise UpstreamError(
                response.text or f"Gemini API error ({response.status_code})",
                provider=self.name,
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise UpstreamError(
                f"Invalid JSON from Gemini: {e}", provider=self.name, status_code=response.status_code
            ) from e

        reply = self.extract_text(data)
        if not reply:
            logger.info("Gemini reply was empty, using fallback text")
            return self.fallback_reply()
        return reply

    # =========================================================================
    # Request Building
    # =========================================================================

    def build_request_body(self, payload: ProviderRequestPayload) -> dict[str, Any]:
        """
        Translate a payload into a generateContent request body.

        Args:
            payload: TextPrompt or StructuredMessages.

        Returns:
            Dict body for the API call.
        """
        body: dict[str, Any]
        if isinstance(payload, TextPrompt):
            body = {"contents": [{"role": "user", "parts": [{"text": payload.text}]}]}
        elif isinstance(payload, StructuredMessages):
            body = self._build_structured_body(payload)
        else:
            raise TypeError(f"Unsupported payload type: {type(payload).__name__}")

        if self._max_tokens:
            body["generationConfig"] = {"maxOutputTokens": self._max_tokens}
        return body

    def _build_structured_body(self, payload: StructuredMessages) -> dict[str, Any]:
        system_texts: list[str] = []
        contents: list[dict[str, Any]] = []

        for message in payload.messages:
            if message.role == "system":
                system_texts.append(message.text_content())
                continue
            parts = self._build_parts(message)
            if parts:
                gemini_role = "model" if message.role == "assistant" else "user"
                contents.append({"role": gemini_role, "parts": parts})

        body: dict[str, Any] = {"contents": contents}
        if system_texts:
            body["systemInstruction"] = {"parts": [{"text": "\n\n".join(system_texts)}]}
        return body

    def _build_parts(self, message: StructuredMessage) -> list[dict[str, Any]]:
        if isinstance(message.content, str):
            return [{"text": message.content}] if message.content else []

        parts: list[dict[str, Any]] = []
        for part in message.content:
            if isinstance(part, TextPart):
                parts.append({"text": part.text})
            elif isinstance(part, ImagePart):
                parts.append({"inlineData": self.parse_data_url(part.image_url.url)})
        return parts

    @staticmethod
    def parse_data_url(data_url: str) -> dict[str, str]:
        """
        Parse a data URL into Gemini inlineData format.

        Args:
            data_url: Data URL like "data:image/png;base64,..."

        Returns:
            Dict with mimeType and data fields.
        """
        # Format: data:mime/type;base64,data
        if data_url.startswith("data:") and ";base64," in data_url:
            meta, data = data_url.split(";base64,", 1)
            return {"mimeType": meta[len("data:"):], "data": data}
        return {"mimeType": "application/octet-stream", "data": ""}

    # =========================================================================
    # Response Parsing
    # =========================================================================

    @staticmethod
    def extract_text(data: dict[str, Any]) -> str:
        """Concatenate text parts of the first candidate."""
        candidates = data.get("candidates") or []
        if not candidates:
            return ""
        content = candidates[0].get("content") or {}
        parts = content.get("parts") or []
        return "".join(part.get("text", "") for part in parts if isinstance(part, dict))

    async def aclose(self) -> None:
        await self._client.aclose()
