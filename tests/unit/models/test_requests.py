"""
Tests for request and response models.
"""

import re

import pytest
from pydantic import ValidationError

from src.models.requests import Attachment, ChatMessage, ChatRequest
from src.models.responses import ChatReply, ErrorReply, HealthResponse, utc_timestamp


class TestAttachment:
    def test_accepts_web_client_field_names(self):
        attachment = Attachment.model_validate(
            {"type": "document", "mimeType": "text/plain", "name": "a.txt", "base64": "aGk="}
        )

        assert attachment.kind == "document"
        assert attachment.mime_type == "text/plain"
        assert attachment.data == "aGk="

    def test_accepts_canonical_field_names(self):
        attachment = Attachment.model_validate(
            {"kind": "image", "mime_type": "image/png", "data": "AA=="}
        )

        assert attachment.kind == "image"
        assert attachment.name == "untitled"

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValidationError):
            Attachment.model_validate({"type": "video", "mimeType": "video/mp4"})

    def test_serializes_mime_type_alias(self):
        attachment = Attachment(kind="image", mime_type="image/png", data="AA==")

        assert attachment.model_dump(by_alias=True)["mimeType"] == "image/png"


class TestChatMessage:
    def test_role_defaults_to_user(self):
        assert ChatMessage.model_validate({"content": "hi"}).role == "user"

    def test_content_optional(self):
        message = ChatMessage.model_validate({"role": "assistant"})

        assert message.content is None
        assert message.has_attachments() is False

    def test_has_attachments(self):
        message = ChatMessage(attachments=[Attachment(kind="image", mime_type="image/png")])

        assert message.has_attachments() is True


class TestChatRequest:
    def test_messages_optional(self):
        assert ChatRequest.model_validate({}).messages is None

    def test_messages_parsed_in_order(self):
        request = ChatRequest.model_validate(
            {"messages": [{"content": "first"}, {"content": "second"}]}
        )

        assert [m.content for m in request.messages] == ["first", "second"]


class TestResponses:
    def test_utc_timestamp_format(self):
        assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z", utc_timestamp())

    def test_chat_reply_shape(self):
        body = ChatReply(response="Hi there").model_dump()

        assert body["success"] is True
        assert body["response"] == "Hi there"
        assert set(body) == {"success", "response", "timestamp"}

    def test_error_reply_shape(self):
        assert ErrorReply(error="boom").model_dump() == {"success": False, "error": "boom"}

    def test_health_response_defaults(self):
        body = HealthResponse(service="Riko Chat API").model_dump()

        assert body["status"] == "OK"
        assert body["service"] == "Riko Chat API"
