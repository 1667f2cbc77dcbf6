"""
Chat Service - Chat Pipeline Orchestration

This module wires the pipeline stages together for one request:

    conversation -> MessageNormalizer -> LLMProvider.generate -> ResponseFormatter

Pattern: Service Layer (orchestrates domain operations)
Pattern: Dependency Injection (normalizer, provider, formatter)
"""

import time
from typing import Sequence

from src.core.exceptions import ClientInputError
from src.models.domain import StructuredMessages
from src.models.requests import ChatMessage
from src.models.responses import ChatReply
from src.observability.logging import get_logger
from src.pipeline.formatter import ResponseFormatter
from src.pipeline.normalizer import MessageNormalizer
from src.providers.base import LLMProvider

logger = get_logger(__name__)

MESSAGES_REQUIRED = "Messages are required"


class ChatService:
    """
    Service layer for chat requests.

    Holds no per-request state; one instance serves concurrent requests.

    Attributes:
        _normalizer: Builds provider payloads from the conversation.
        _provider: Upstream LLM binding.
        _formatter: Cleans raw reply text.

    Example:
        >>> service = ChatService(
        ...     normalizer=MessageNormalizer(RIKO_PERSONA),
        ...     provider=FakeProvider(response_text="Hi **there**"),
        ...     formatter=ResponseFormatter(),
        ... )
        >>> reply = await service.reply([ChatMessage(content="Hello")])
        >>> reply.response
        'Hi there'
    """

    def __init__(
        self,
        normalizer: MessageNormalizer,
        provider: LLMProvider,
        formatter: ResponseFormatter,
    ) -> None:
        self._normalizer = normalizer
        self._provider = provider
        self._formatter = formatter

    @property
    def provider(self) -> LLMProvider:
        return self._provider

    async def reply(self, conversation: Sequence[ChatMessage]) -> ChatReply:
        """
        Produce the formatted reply for a conversation.

        Args:
            conversation: Messages in chronological order.

        Returns:
            ChatReply with the formatted text and a timestamp.

        Raises:
            ClientInputError: If the conversation is empty.
            UpstreamError: If the provider call fails.
        """
        if not conversation:
            raise ClientInputError(MESSAGES_REQUIRED, field="messages")

        payload = self._normalizer.normalize(conversation)
        multimodal = isinstance(payload, StructuredMessages)

        log = logger.bind(
            provider=self._provider.name,
            message_count=len(conversation),
            multimodal=multimodal,
        )
        log.info("chat_request_dispatched")

        start = time.perf_counter()
        try:
            raw_reply = await self._provider.generate(payload)
        except Exception as e:
            log.error(
                "chat_request_failed",
                error_type=type(e).__name__,
                duration_ms=round((time.perf_counter() - start) * 1000, 2),
            )
            raise

        formatted = self._formatter.format(raw_reply)
        log.info(
            "chat_request_completed",
            duration_ms=round((time.perf_counter() - start) * 1000, 2),
            reply_chars=len(formatted),
        )
        return ChatReply(response=formatted)
