"""
Services Package - business logic layer.
"""

from src.services.chat import ChatService

__all__ = ["ChatService"]
