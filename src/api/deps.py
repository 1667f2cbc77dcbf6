"""
API Dependencies

This module provides FastAPI dependency injection functions for the API layer.

All dependencies resolve objects built once in the application lifespan
and stored on app.state, and can be overridden in tests using FastAPI's
dependency_overrides mechanism.
"""

from fastapi import Request

from src.core.config import Settings
from src.services.chat import ChatService


def get_settings(request: Request) -> Settings:
    """
    Get application settings.

    Returns:
        Settings: The settings the application was created with
    """
    return request.app.state.settings


def get_chat_service(request: Request) -> ChatService:
    """
    Get the ChatService built at startup.

    Returns:
        ChatService: Chat service instance

    Raises:
        RuntimeError: If called before the application lifespan started.
    """
    chat_service = getattr(request.app.state, "chat_service", None)
    if chat_service is None:
        raise RuntimeError("Chat service is not initialized; application startup did not run")
    return chat_service


__all__ = [
    "get_settings",
    "get_chat_service",
]
