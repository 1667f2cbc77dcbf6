"""Models Package - request, response and provider payload models."""

from src.models.domain import (
    ContentPart,
    ImagePart,
    ImageURL,
    ProviderRequestPayload,
    StructuredMessage,
    StructuredMessages,
    TextPart,
    TextPrompt,
)
from src.models.requests import Attachment, ChatMessage, ChatRequest
from src.models.responses import ChatReply, ErrorReply, HealthResponse, utc_timestamp

__all__ = [
    # Requests
    "Attachment",
    "ChatMessage",
    "ChatRequest",
    # Responses
    "ChatReply",
    "ErrorReply",
    "HealthResponse",
    "utc_timestamp",
    # Domain
    "ContentPart",
    "ImagePart",
    "ImageURL",
    "ProviderRequestPayload",
    "StructuredMessage",
    "StructuredMessages",
    "TextPart",
    "TextPrompt",
]
