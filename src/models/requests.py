"""
Request Models

This module contains Pydantic models for API request validation.

The attachment model accepts both the canonical field names (kind, data)
and the names sent by the existing web client (type, base64).
"""

from typing import Literal, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


# =============================================================================
# Attachment Model
# =============================================================================


class Attachment(BaseModel):
    """
    A user-supplied file included with a chat message.

    Attributes:
        kind: Attachment category ("image" or "document")
        mime_type: MIME type of the payload (wire name: mimeType)
        name: Original file name
        data: File contents encoded as base64 text
    """

    model_config = ConfigDict(populate_by_name=True)

    kind: Literal["image", "document"] = Field(
        ...,
        validation_alias=AliasChoices("kind", "type"),
        description="Attachment category",
    )
    mime_type: str = Field(
        ...,
        validation_alias=AliasChoices("mimeType", "mime_type"),
        serialization_alias="mimeType",
        description="MIME type of the payload",
    )
    name: str = Field(default="untitled", description="Original file name")
    data: str = Field(
        default="",
        validation_alias=AliasChoices("data", "base64"),
        description="Base64-encoded file contents",
    )


# =============================================================================
# Message Model
# =============================================================================


class ChatMessage(BaseModel):
    """
    Chat message model.

    Attributes:
        role: Message role (user, assistant, system); defaults to user
        content: Message text (optional when attachments are present)
        attachments: Ordered list of attachments
    """

    role: Literal["user", "assistant", "system"] = "user"
    content: Optional[str] = None
    attachments: list[Attachment] = Field(default_factory=list)

    def has_attachments(self) -> bool:
        """Return True if the message carries at least one attachment."""
        return len(self.attachments) > 0


# =============================================================================
# ChatRequest
# =============================================================================


class ChatRequest(BaseModel):
    """
    Body of POST /api/RikoChat.

    An empty, null or missing messages list is accepted here and rejected by
    the chat service with a 400, so the client receives the documented
    error body.
    """

    messages: Optional[list[ChatMessage]] = Field(
        default=None, description="Conversation in chronological order"
    )
