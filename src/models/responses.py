"""
Response Models

This module contains Pydantic models for API response serialization.
"""

from datetime import datetime, timezone

from pydantic import BaseModel, Field


def utc_timestamp() -> str:
    """Current UTC time as an ISO-8601 string with millisecond precision."""
    return (
        datetime.now(timezone.utc)
        .isoformat(timespec="milliseconds")
        .replace("+00:00", "Z")
    )


class ChatReply(BaseModel):
    """
    Successful chat response.

    Attributes:
        success: Always True
        response: Formatted assistant reply
        timestamp: ISO-8601 creation time
    """

    success: bool = True
    response: str = Field(..., description="Formatted assistant reply")
    timestamp: str = Field(default_factory=utc_timestamp)


class ErrorReply(BaseModel):
    """Failed chat response."""

    success: bool = False
    error: str = Field(..., description="Human-readable error message")


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str = "OK"
    service: str
    timestamp: str = Field(default_factory=utc_timestamp)
