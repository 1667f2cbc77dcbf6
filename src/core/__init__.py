"""
Core module for the Riko Chat Gateway.

This module contains configuration, exceptions, and the persona prompt.
"""

from src.core.config import Settings, get_settings
from src.core.exceptions import (
    AttachmentDecodeError,
    ClientInputError,
    ConfigurationError,
    ErrorCode,
    RikoGatewayException,
    UpstreamError,
)
from src.core.persona import RIKO_PERSONA, PersonaPrompt

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Persona
    "PersonaPrompt",
    "RIKO_PERSONA",
    # Exceptions
    "ErrorCode",
    "RikoGatewayException",
    "ClientInputError",
    "AttachmentDecodeError",
    "UpstreamError",
    "ConfigurationError",
]
