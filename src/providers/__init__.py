"""
Providers Package - LLM Provider Bindings

This package contains the abstract provider interface, the concrete
bindings (OpenAI, Gemini), a fake provider for tests, and the factory
that builds the configured binding at startup.
"""

import logging

from src.core.config import Settings
from src.providers.base import LLMProvider
from src.providers.fake import FakeProvider
from src.providers.gemini import GeminiProvider
from src.providers.openai import OpenAIProvider

logger = logging.getLogger(__name__)


def create_provider(settings: Settings) -> LLMProvider:
    """
    Create the provider binding selected in settings.

    Args:
        settings: Application settings containing the provider name and key.

    Returns:
        Configured LLMProvider instance.

    Raises:
        ConfigurationError: If the selected provider has no API key.
    """
    api_key = settings.require_api_key()

    if settings.provider == "gemini":
        provider: LLMProvider = GeminiProvider(
            api_key=api_key,
            model=settings.gemini_model,
            max_tokens=settings.max_tokens,
        )
    else:
        provider = OpenAIProvider(
            api_key=api_key,
            text_model=settings.text_model,
            vision_model=settings.vision_model,
            max_tokens=settings.max_tokens,
            base_url=settings.openai_base_url,
        )

    logger.info(f"Provider initialized: {provider.name}")
    return provider


__all__ = [
    "LLMProvider",
    "OpenAIProvider",
    "GeminiProvider",
    "FakeProvider",
    "create_provider",
]
