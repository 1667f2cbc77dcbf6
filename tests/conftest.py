"""
Pytest configuration and shared fixtures.

This configuration sets up:
- Test markers for categorization
- Settings with fake credentials (no real external services)
- FakeProvider test double and a TestClient wired to it
- Small base64 helpers for attachment fixtures
"""

import base64

import pytest
from fastapi.testclient import TestClient


# =============================================================================
# Test Markers
# =============================================================================


def pytest_configure(config):
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests for service interactions")


# =============================================================================
# Helpers
# =============================================================================


def b64(data: bytes | str) -> str:
    """Base64-encode bytes or UTF-8 text."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    return base64.b64encode(data).decode("ascii")


# 1x1 transparent PNG
PNG_BYTES = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR42mNkYAAAAAYAAjCB0C8AAAAASUVORK5CYII="
)


@pytest.fixture
def png_base64() -> str:
    """Valid base64 for a tiny PNG image."""
    return b64(PNG_BYTES)


# =============================================================================
# Settings Fixture
# =============================================================================


@pytest.fixture
def test_settings():
    """
    Create test settings with safe defaults.

    Returns:
        Settings: Configured settings for testing
    """
    from src.core.config import Settings

    return Settings(
        service_name="Riko Chat API",
        port=3000,
        environment="development",
        provider="openai",
        openai_api_key="test-openai-key",
        gemini_api_key="test-gemini-key",
        bullet_style="number",
        cors_origins="*",
        log_level="INFO",
    )


# =============================================================================
# Provider / Persona Fixtures
# =============================================================================


@pytest.fixture
def fake_provider():
    """
    Create a FakeProvider that replies with markdown to be formatted.

    Returns:
        FakeProvider: Deterministic provider test double
    """
    from src.providers.fake import FakeProvider

    return FakeProvider(response_text="Hi **there**")


@pytest.fixture
def persona():
    """Short persona prompt for readable assertions."""
    from src.core.persona import PersonaPrompt

    return PersonaPrompt(text="You are Riko.")


# =============================================================================
# Application Fixtures
# =============================================================================


@pytest.fixture
def app(test_settings, fake_provider):
    """FastAPI app wired to the fake provider."""
    from src.main import create_app

    return create_app(settings=test_settings, provider=fake_provider)


@pytest.fixture
def client(app):
    """
    TestClient with the application lifespan running.

    Yields:
        TestClient: Client for the test application
    """
    with TestClient(app) as test_client:
        yield test_client
