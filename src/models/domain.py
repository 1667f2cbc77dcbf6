"""
Domain Models - Provider Request Payloads

This module contains the internal models passed between the message
normalizer and the provider bindings.

ProviderRequestPayload is a closed tagged variant:
- TextPrompt: one flat prompt string (persona + "role: content" lines)
- StructuredMessages: system message plus per-message content parts,
  used for vision-capable chat completions

Content parts use the OpenAI chat-completions wire shape, so the OpenAI
binding can send them as-is and other bindings translate from it.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


# =============================================================================
# Content Parts
# =============================================================================


class TextPart(BaseModel):
    """Text fragment of a multimodal message."""

    type: Literal["text"] = "text"
    text: str

    model_config = {"frozen": True}


class ImageURL(BaseModel):
    """Inline image reference."""

    url: str = Field(..., description="data: URI with base64 payload")
    detail: Literal["auto", "low", "high"] = "auto"

    model_config = {"frozen": True}


class ImagePart(BaseModel):
    """Image fragment of a multimodal message."""

    type: Literal["image_url"] = "image_url"
    image_url: ImageURL

    model_config = {"frozen": True}

    @classmethod
    def from_base64(cls, mime_type: str, data: str) -> "ImagePart":
        """Build an image part referencing base64 data as a data URI."""
        return cls(image_url=ImageURL(url=f"data:{mime_type};base64,{data}"))


ContentPart = Annotated[Union[TextPart, ImagePart], Field(discriminator="type")]


# =============================================================================
# Provider Request Payload
# =============================================================================


class StructuredMessage(BaseModel):
    """One entry of a StructuredMessages payload."""

    role: Literal["system", "user", "assistant"]
    content: Union[str, list[ContentPart]]

    def text_content(self) -> str:
        """Concatenated text of the message, ignoring image parts."""
        if isinstance(self.content, str):
            return self.content
        return "\n".join(part.text for part in self.content if isinstance(part, TextPart))


class TextPrompt(BaseModel):
    """Flat prompt for single-prompt generate calls."""

    kind: Literal["text"] = "text"
    text: str


class StructuredMessages(BaseModel):
    """Structured message list for multimodal chat-completion calls."""

    kind: Literal["structured"] = "structured"
    messages: list[StructuredMessage]


ProviderRequestPayload = Annotated[
    Union[TextPrompt, StructuredMessages], Field(discriminator="kind")
]
