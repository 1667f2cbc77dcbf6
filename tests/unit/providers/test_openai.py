"""
Tests for the OpenAI provider binding.

Test Categories:
- Dispatch: StructuredMessages -> chat.completions, TextPrompt -> responses
- Fallback reply when the upstream reply is empty
- SDK errors mapped to UpstreamError (no retries)
"""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import httpx
import openai
import pytest

from src.core.exceptions import UpstreamError
from src.models.domain import (
    ImagePart,
    StructuredMessage,
    StructuredMessages,
    TextPart,
    TextPrompt,
)
from src.providers.openai import OpenAIProvider


def completion(content):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


@pytest.fixture
def mock_client() -> MagicMock:
    client = MagicMock()
    client.chat.completions.create = AsyncMock(return_value=completion("vision reply"))
    client.responses.create = AsyncMock(return_value=SimpleNamespace(output_text="text reply"))
    client.close = AsyncMock()
    return client


@pytest.fixture
def provider(mock_client: MagicMock) -> OpenAIProvider:
    return OpenAIProvider(
        api_key="test-key",
        text_model="gpt-text",
        vision_model="gpt-vision",
        max_tokens=512,
        client=mock_client,
    )


@pytest.fixture
def structured_payload() -> StructuredMessages:
    return StructuredMessages(
        messages=[
            StructuredMessage(role="system", content="You are Riko."),
            StructuredMessage(
                role="user",
                content=[
                    TextPart(text="Rate this"),
                    ImagePart.from_base64("image/png", "AAAA"),
                ],
            ),
        ]
    )


# =============================================================================
# Class structure
# =============================================================================


class TestOpenAIProviderClass:
    def test_inherits_from_llm_provider(self) -> None:
        from src.providers.base import LLMProvider

        assert issubclass(OpenAIProvider, LLMProvider)

    def test_fallback_reply_names_gpt(self, provider: OpenAIProvider) -> None:
        assert provider.fallback_reply() == "No response from GPT"

    def test_sdk_retries_disabled(self) -> None:
        real = OpenAIProvider(api_key="test-key")

        assert real._client.max_retries == 0

    def test_models_exposed(self, provider: OpenAIProvider) -> None:
        assert provider.text_model == "gpt-text"
        assert provider.vision_model == "gpt-vision"


# =============================================================================
# Dispatch
# =============================================================================


class TestDispatch:
    @pytest.mark.asyncio
    async def test_text_prompt_uses_responses_api(
        self, provider: OpenAIProvider, mock_client: MagicMock
    ) -> None:
        result = await provider.generate(TextPrompt(text="persona\n\nuser: Hi"))

        assert result == "text reply"
        mock_client.responses.create.assert_awaited_once_with(
            model="gpt-text", input="persona\n\nuser: Hi"
        )
        mock_client.chat.completions.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_structured_messages_use_chat_completions(
        self,
        provider: OpenAIProvider,
        mock_client: MagicMock,
        structured_payload: StructuredMessages,
    ) -> None:
        result = await provider.generate(structured_payload)

        assert result == "vision reply"
        kwargs = mock_client.chat.completions.create.await_args.kwargs
        assert kwargs["model"] == "gpt-vision"
        assert kwargs["max_tokens"] == 512
        assert kwargs["messages"][0] == {"role": "system", "content": "You are Riko."}
        assert kwargs["messages"][1]["content"] == [
            {"type": "text", "text": "Rate this"},
            {
                "type": "image_url",
                "image_url": {"url": "data:image/png;base64,AAAA", "detail": "auto"},
            },
        ]
        mock_client.responses.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_unsupported_payload_raises_type_error(self, provider: OpenAIProvider) -> None:
        with pytest.raises(TypeError):
            await provider.generate("raw string")


# =============================================================================
# Fallback
# =============================================================================


class TestFallbackReply:
    @pytest.mark.asyncio
    async def test_empty_output_text_returns_fallback(
        self, provider: OpenAIProvider, mock_client: MagicMock
    ) -> None:
        mock_client.responses.create.return_value = SimpleNamespace(output_text="")

        assert await provider.generate(TextPrompt(text="x")) == "No response from GPT"

    @pytest.mark.asyncio
    async def test_null_message_content_returns_fallback(
        self,
        provider: OpenAIProvider,
        mock_client: MagicMock,
        structured_payload: StructuredMessages,
    ) -> None:
        mock_client.chat.completions.create.return_value = completion(None)

        assert await provider.generate(structured_payload) == "No response from GPT"

    @pytest.mark.asyncio
    async def test_no_choices_returns_fallback(
        self,
        provider: OpenAIProvider,
        mock_client: MagicMock,
        structured_payload: StructuredMessages,
    ) -> None:
        mock_client.chat.completions.create.return_value = SimpleNamespace(choices=[])

        assert await provider.generate(structured_payload) == "No response from GPT"


# =============================================================================
# Errors
# =============================================================================


class TestUpstreamErrors:
    @pytest.mark.asyncio
    async def test_status_error_becomes_upstream_error(
        self, provider: OpenAIProvider, mock_client: MagicMock
    ) -> None:
        request = httpx.Request("POST", "https://api.openai.com/v1/responses")
        response = httpx.Response(429, request=request)
        mock_client.responses.create.side_effect = openai.RateLimitError(
            "Rate limit reached", response=response, body=None
        )

        with pytest.raises(UpstreamError) as exc_info:
            await provider.generate(TextPrompt(text="x"))

        assert exc_info.value.status_code == 429
        assert exc_info.value.provider == "openai"
        assert "Rate limit reached" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_connection_error_becomes_upstream_error(
        self, provider: OpenAIProvider, mock_client: MagicMock
    ) -> None:
        request = httpx.Request("POST", "https://api.openai.com/v1/responses")
        mock_client.responses.create.side_effect = openai.APIConnectionError(request=request)

        with pytest.raises(UpstreamError) as exc_info:
            await provider.generate(TextPrompt(text="x"))

        assert exc_info.value.status_code is None

    @pytest.mark.asyncio
    async def test_single_attempt_on_failure(
        self, provider: OpenAIProvider, mock_client: MagicMock
    ) -> None:
        request = httpx.Request("POST", "https://api.openai.com/v1/responses")
        mock_client.responses.create.side_effect = openai.APIConnectionError(request=request)

        with pytest.raises(UpstreamError):
            await provider.generate(TextPrompt(text="x"))

        assert mock_client.responses.create.await_count == 1


class TestClose:
    @pytest.mark.asyncio
    async def test_aclose_closes_client(
        self, provider: OpenAIProvider, mock_client: MagicMock
    ) -> None:
        await provider.aclose()

        mock_client.close.assert_awaited_once()
