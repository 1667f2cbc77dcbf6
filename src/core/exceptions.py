"""
Custom exceptions for the Riko Chat Gateway.

This module provides the exception hierarchy used across the gateway.
All exceptions inherit from RikoGatewayException and carry an error code
so the API layer can translate them into consistent JSON error bodies.

Taxonomy:
- ClientInputError: bad request from the client (HTTP 400)
- AttachmentDecodeError: unreadable attachment (recovered inside the encoder)
- UpstreamError: provider call failed (HTTP 500)
- ConfigurationError: missing/invalid settings (fatal at startup)
"""

from enum import Enum
from typing import Any


# =============================================================================
# Error Codes
# =============================================================================


class ErrorCode(str, Enum):
    """
    Error codes for gateway exceptions.

    These codes identify error types consistently in logs and API responses.
    """

    GATEWAY_ERROR = "GATEWAY_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    ATTACHMENT_DECODE_ERROR = "ATTACHMENT_DECODE_ERROR"
    UPSTREAM_ERROR = "UPSTREAM_ERROR"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"


# =============================================================================
# Base Exception
# =============================================================================


class RikoGatewayException(Exception):
    """
    Base exception for all gateway errors.

    Attributes:
        message: Text returned to the client or logged.
        error_code: ErrorCode value identifying the failure class.
        Extra keyword arguments are set as attributes.
    """

    def __init__(
        self,
        message: str,
        error_code: str = ErrorCode.GATEWAY_ERROR,
        **kwargs: Any,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code

        for key, value in kwargs.items():
            setattr(self, key, value)


# =============================================================================
# ClientInputError
# =============================================================================


class ClientInputError(RikoGatewayException):
    """
    Exception for invalid client input.

    Raised when the request is well-formed JSON but violates a business
    rule, e.g. an empty conversation. No upstream call is attempted.

    Attributes:
        field: Name of the offending field (if known).
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        error_code: str = ErrorCode.VALIDATION_ERROR,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, error_code, **kwargs)
        self.field = field


# =============================================================================
# AttachmentDecodeError
# =============================================================================


class AttachmentDecodeError(RikoGatewayException):
    """
    Exception for attachments whose payload cannot be decoded.

    Never surfaces as a request failure: the attachment encoder catches it
    and emits an explanatory text fragment instead.

    Attributes:
        attachment_name: File name of the attachment.
    """

    def __init__(
        self,
        message: str,
        attachment_name: str,
        error_code: str = ErrorCode.ATTACHMENT_DECODE_ERROR,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, error_code, **kwargs)
        self.attachment_name = attachment_name


# =============================================================================
# UpstreamError
# =============================================================================


class UpstreamError(RikoGatewayException):
    """
    Exception for LLM provider failures.

    Raised when the provider call fails at the network level or returns
    a non-success status. The message carries the upstream error text.
    Not retried.

    Attributes:
        provider: Name of the provider (e.g., "openai", "gemini").
        status_code: HTTP status code from the provider API (if applicable).
    """

    def __init__(
        self,
        message: str,
        provider: str,
        status_code: int | None = None,
        error_code: str = ErrorCode.UPSTREAM_ERROR,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, error_code, **kwargs)
        self.provider = provider
        self.status_code = status_code


# =============================================================================
# ConfigurationError
# =============================================================================


class ConfigurationError(RikoGatewayException):
    """
    Exception for missing or invalid configuration.

    Raised during application startup (e.g. no provider API key). The
    process refuses to start rather than failing every request.

    Attributes:
        setting: Name of the offending setting (if known).
    """

    def __init__(
        self,
        message: str,
        setting: str | None = None,
        error_code: str = ErrorCode.CONFIGURATION_ERROR,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, error_code, **kwargs)
        self.setting = setting
