"""
Tests for the chat endpoint - POST /api/RikoChat.

Test Categories:
- 400 for a missing/empty conversation and malformed bodies
- 200 with the formatted reply
- 500 with the upstream error text
- Attachment bodies in the web client's field names
"""

from fastapi.testclient import TestClient

from src.core.exceptions import UpstreamError
from src.models.domain import ImagePart, StructuredMessages, TextPrompt
from src.providers.fake import FakeProvider

CHAT_URL = "/api/RikoChat"


class TestChatValidation:
    def test_empty_messages_returns_400(self, client: TestClient, fake_provider: FakeProvider):
        response = client.post(CHAT_URL, json={"messages": []})

        assert response.status_code == 400
        assert response.json() == {"error": "Messages are required"}
        assert fake_provider.calls == []

    def test_missing_messages_returns_400(self, client: TestClient):
        response = client.post(CHAT_URL, json={})

        assert response.status_code == 400
        assert response.json() == {"error": "Messages are required"}

    def test_null_messages_returns_400(self, client: TestClient):
        response = client.post(CHAT_URL, json={"messages": None})

        assert response.status_code == 400
        assert response.json() == {"error": "Messages are required"}

    def test_unknown_role_returns_400(self, client: TestClient, fake_provider: FakeProvider):
        response = client.post(CHAT_URL, json={"messages": [{"role": "robot", "content": "hi"}]})

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert "role" in body["error"]
        assert fake_provider.calls == []

    def test_messages_must_be_a_list(self, client: TestClient):
        response = client.post(CHAT_URL, json={"messages": "hello"})

        assert response.status_code == 400
        assert response.json()["success"] is False


class TestChatSuccess:
    def test_reply_is_formatted(self, client: TestClient):
        response = client.post(CHAT_URL, json={"messages": [{"role": "user", "content": "Hello"}]})

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["response"] == "Hi there"
        assert body["timestamp"].endswith("Z")

    def test_text_conversation_sends_text_prompt(
        self, client: TestClient, fake_provider: FakeProvider
    ):
        client.post(
            CHAT_URL,
            json={
                "messages": [
                    {"role": "user", "content": "Hi"},
                    {"role": "assistant", "content": "Hello!"},
                    {"content": "Caption?"},
                ]
            },
        )

        payload = fake_provider.last_payload
        assert isinstance(payload, TextPrompt)
        assert payload.text.endswith("user: Hi\nassistant: Hello!\nuser: Caption?")

    def test_image_attachment_uses_client_field_names(
        self, client: TestClient, fake_provider: FakeProvider, png_base64: str
    ):
        response = client.post(
            CHAT_URL,
            json={
                "messages": [
                    {
                        "role": "user",
                        "content": "Rate this",
                        "attachments": [
                            {
                                "type": "image",
                                "mimeType": "image/png",
                                "name": "post.png",
                                "base64": png_base64,
                            }
                        ],
                    }
                ]
            },
        )

        assert response.status_code == 200
        payload = fake_provider.last_payload
        assert isinstance(payload, StructuredMessages)
        image_parts = [p for p in payload.messages[1].content if isinstance(p, ImagePart)]
        assert image_parts[0].image_url.url == f"data:image/png;base64,{png_base64}"

    def test_request_id_is_echoed(self, client: TestClient):
        response = client.post(
            CHAT_URL,
            json={"messages": [{"content": "Hello"}]},
            headers={"X-Request-ID": "req-123"},
        )

        assert response.headers["X-Request-ID"] == "req-123"


class TestChatErrors:
    def test_upstream_error_returns_500(self, client: TestClient, fake_provider: FakeProvider):
        fake_provider.error = UpstreamError(
            "Incorrect API key provided", provider="fake", status_code=401
        )

        response = client.post(CHAT_URL, json={"messages": [{"content": "Hello"}]})

        assert response.status_code == 500
        assert response.json() == {"success": False, "error": "Incorrect API key provided"}

    def test_unexpected_error_returns_500(self, client: TestClient, fake_provider: FakeProvider):
        fake_provider.error = RuntimeError("socket closed")

        response = client.post(CHAT_URL, json={"messages": [{"content": "Hello"}]})

        assert response.status_code == 500
        assert response.json() == {"success": False, "error": "socket closed"}
