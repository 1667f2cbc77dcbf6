"""
Fake LLM Provider - Test Double Implementation

This module provides a FakeProvider that implements the real LLMProvider
interface without making network calls.

This is NOT mocking - it's a proper implementation of the interface. The
FakeProvider can also be used for:
- Local development without API keys
- Demo/sandbox environments
"""

from src.models.domain import ProviderRequestPayload
from src.providers.base import LLMProvider


class FakeProvider(LLMProvider):
    """
    Fake LLM provider with deterministic replies.

    Attributes:
        response_text: Text returned by generate(); "" triggers the fallback reply.
        error: Optional exception raised by generate() (for error testing).
        calls: Payloads received, in order, for test assertions.

    Example:
        >>> provider = FakeProvider(response_text="Hi **there**")
        >>> await provider.generate(TextPrompt(text="Hello"))
        'Hi **there**'

        # For error testing:
        >>> provider = FakeProvider(error=UpstreamError("boom", provider="fake"))
        >>> await provider.generate(payload)  # Raises UpstreamError
    """

    name = "fake"
    display_name = "Fake"

    def __init__(
        self,
        response_text: str = "Fake response for testing",
        error: Exception | None = None,
    ) -> None:
        self.response_text = response_text
        self.error = error
        self.calls: list[ProviderRequestPayload] = []
        self.closed = False

    async def generate(self, payload: ProviderRequestPayload) -> str:
        self.calls.append(payload)

        if self.error is not None:
            raise self.error

        return self.response_text or self.fallback_reply()

    async def aclose(self) -> None:
        self.closed = True

    @property
    def last_payload(self) -> ProviderRequestPayload | None:
        """Most recent payload, or None if generate() was never called."""
        return self.calls[-1] if self.calls else None
