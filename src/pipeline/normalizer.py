"""
Message Normalizer

Turns a conversation plus the persona prompt into a ProviderRequestPayload.

Whether *any* message carries attachments decides the payload shape for
the whole request:

- no attachments: TextPrompt, the persona followed by "role: content" lines
- attachments: StructuredMessages, a system message with the persona and
  one entry per input message, attachments expanded into content parts

Normalization is a pure function of its inputs.
"""

from typing import Sequence

from src.core.persona import PersonaPrompt
from src.models.domain import (
    ContentPart,
    ProviderRequestPayload,
    StructuredMessage,
    StructuredMessages,
    TextPart,
    TextPrompt,
)
from src.models.requests import ChatMessage
from src.pipeline.attachments import encode_attachments

DEFAULT_PROMPT = "Please analyze this."


def has_attachments(conversation: Sequence[ChatMessage]) -> bool:
    """Return True if any message carries a non-empty attachment list."""
    return any(message.has_attachments() for message in conversation)


class MessageNormalizer:
    """
    Builds provider payloads from a conversation.

    Args:
        persona: Persona prompt prepended to every request.

    Example:
        >>> normalizer = MessageNormalizer(RIKO_PERSONA)
        >>> payload = normalizer.normalize([ChatMessage(content="Hi")])
        >>> isinstance(payload, TextPrompt)
        True
    """

    def __init__(self, persona: PersonaPrompt) -> None:
        self._persona = persona

    @property
    def persona(self) -> PersonaPrompt:
        return self._persona

    def normalize(self, conversation: Sequence[ChatMessage]) -> ProviderRequestPayload:
        """
        Build the payload for a conversation.

        Args:
            conversation: Non-empty list of messages in chronological order.

        Returns:
            TextPrompt or StructuredMessages.
        """
        if has_attachments(conversation):
            return self.build_structured_messages(conversation)
        return self.build_text_prompt(conversation)

    # =========================================================================
    # Text-only path
    # =========================================================================

    def build_text_prompt(self, conversation: Sequence[ChatMessage]) -> TextPrompt:
        lines = [
            f"{message.role or 'user'}: {message.content or DEFAULT_PROMPT}"
            for message in conversation
        ]
        transcript = "\n".join(lines)
        return TextPrompt(text=f"{self._persona.text}\n\n{transcript}")

    # =========================================================================
    # Multimodal path
    # =========================================================================

    def build_structured_messages(
        self, conversation: Sequence[ChatMessage]
    ) -> StructuredMessages:
        messages = [StructuredMessage(role="system", content=self._persona.text)]
        messages.extend(self._convert_message(message) for message in conversation)
        return StructuredMessages(messages=messages)

    def _convert_message(self, message: ChatMessage) -> StructuredMessage:
        if not message.has_attachments():
            return StructuredMessage(
                role=message.role, content=message.content or DEFAULT_PROMPT
            )

        parts: list[ContentPart] = []
        if message.content:
            parts.append(TextPart(text=message.content))
        parts.extend(encode_attachments(message.attachments))

        # Vision APIs require at least one text part per message
        if not any(isinstance(part, TextPart) and part.text for part in parts):
            parts.insert(0, TextPart(text=DEFAULT_PROMPT))

        return StructuredMessage(role=message.role, content=parts)
