"""
OpenAI Provider - OpenAI GPT Binding

This module implements the OpenAI binding of the provider interface.

Dispatch rule:
- StructuredMessages -> chat.completions.create() with the vision model
- TextPrompt -> responses.create() with the text model

Design Patterns:
- Ports and Adapters: OpenAIProvider implements LLMProvider interface
- Adapter Pattern: Maps SDK errors and replies onto gateway types
"""

import logging
from typing import Any

import openai
from openai import AsyncOpenAI

from src.core.exceptions import UpstreamError
from src.models.domain import ProviderRequestPayload, StructuredMessages, TextPrompt
from src.providers.base import LLMProvider

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_MAX_TOKENS = 1024


class OpenAIProvider(LLMProvider):
    """
    OpenAI GPT provider binding.

    The SDK's own retry behaviour is disabled (max_retries=0); each request
    is a single attempt. No explicit timeout is set beyond the SDK default.

    Args:
        api_key: OpenAI API key.
        text_model: Model for text-only prompts.
        vision_model: Vision-capable model for multimodal messages.
        max_tokens: Completion limit for multimodal calls.
        base_url: Optional custom endpoint URL (Azure OpenAI or proxies).
        client: Optional preconfigured AsyncOpenAI client.

    Example:
        >>> provider = OpenAIProvider(api_key="sk-...")
        >>> text = await provider.generate(TextPrompt(text="Hello"))
    """

    name = "openai"
    display_name = "GPT"

    def __init__(
        self,
        api_key: str,
        text_model: str = DEFAULT_MODEL,
        vision_model: str = DEFAULT_MODEL,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        base_url: str | None = None,
        client: AsyncOpenAI | None = None,
    ) -> None:
        self._text_model = text_model
        self._vision_model = vision_model
        self._max_tokens = max_tokens

        if client is None:
            client_kwargs: dict[str, Any] = {"api_key": api_key, "max_retries": 0}
            if base_url:
                client_kwargs["base_url"] = base_url
            client = AsyncOpenAI(**client_kwargs)
        self._client = client

    @property
    def text_model(self) -> str:
        return self._text_model

    @property
    def vision_model(self) -> str:
        return self._vision_model

    # =========================================================================
    # generate()
    # =========================================================================

    async def generate(self, payload: ProviderRequestPayload) -> str:
        """
        Dispatch the payload to the matching OpenAI API.

        Args:
            payload: TextPrompt or StructuredMessages.

        Returns:
            Raw reply text (fallback reply if empty).

        Raises:
            UpstreamError: On any SDK or network error.
        """
        try:
            if isinstance(payload, StructuredMessages):
                reply = await self._complete_chat(payload)
            elif isinstance(payload, TextPrompt):
                reply = await self._create_response(payload)
            else:
                raise TypeError(f"Unsupported payload type: {type(payload).__name__}")
        except openai.APIStatusError as e:
            logger.warning(f"OpenAI returned status {e.status_code}")
            raise UpstreamError(str(e), provider=self.name, status_code=e.status_code) from e
        except openai.OpenAIError as e:
            logger.warning(f"OpenAI request failed: {type(e).__name__}")
            raise UpstreamError(str(e), provider=self.name) from e

        if not reply:
            logger.info("OpenAI reply was empty, using fallback text")
            return self.fallback_reply()
        return reply

    async def _complete_chat(self, payload: StructuredMessages) -> str | None:
        """Multimodal chat-completion call."""
        messages = [message.model_dump(exclude_none=True) for message in payload.messages]
        completion = await self._client.chat.completions.create(
            model=self._vision_model,
            messages=messages,
            max_tokens=self._max_tokens,
        )
        if not completion.choices:
            return None
        message = completion.choices[0].message
        return message.content if message is not None else None

    async def _create_response(self, payload: TextPrompt) -> str | None:
        """Single-prompt Responses API call."""
        response = await self._client.responses.create(
            model=self._text_model,
            input=payload.text,
        )
        return response.output_text

    async def aclose(self) -> None:
        await self._client.close()
