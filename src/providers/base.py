"""
Provider Base Interface

This module defines the abstract base class for all LLM provider bindings.
Every binding exposes the same generate(payload) -> raw text call, so the
rest of the pipeline does not depend on any provider's wire format.

Design Pattern:
- Ports and Adapters (Hexagonal Architecture)
- LLMProvider serves as the "port" (interface)
- Concrete providers (openai.py, gemini.py, fake.py) serve as "adapters"
"""

from abc import ABC, abstractmethod

from src.models.domain import ProviderRequestPayload


class LLMProvider(ABC):
    """
    Abstract base class for LLM provider bindings.

    Attributes:
        name: Short provider identifier used in logs and errors.
        display_name: Human-readable name used in the fallback reply.

    Example:
        >>> class EchoProvider(LLMProvider):
        ...     name = "echo"
        ...     display_name = "Echo"
        ...
        ...     async def generate(self, payload: ProviderRequestPayload) -> str:
        ...         return payload.text
    """

    name: str = "provider"
    display_name: str = "Provider"

    @abstractmethod
    async def generate(self, payload: ProviderRequestPayload) -> str:
        """
        Send the payload upstream and return the raw reply text.

        A single best-effort attempt: no retries, no backoff.

        Args:
            payload: TextPrompt or StructuredMessages.

        Returns:
            Raw reply text, or the fallback reply if the upstream
            response carried no text.

        Raises:
            UpstreamError: On network failure or a non-success status.
        """
        ...

    def fallback_reply(self) -> str:
        """Text returned when a successful response carries no reply."""
        return f"No response from {self.display_name}"

    async def aclose(self) -> None:
        """Release network resources. Default: nothing to release."""
        return None

    async def __aenter__(self) -> "LLMProvider":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()
