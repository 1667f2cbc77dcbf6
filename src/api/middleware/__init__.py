"""
Middleware Package - request/response middleware.

Components:
- logging: Request/response logging with correlation IDs
- body_limit: Request body size limit
"""

from src.api.middleware.body_limit import BodySizeLimitMiddleware
from src.api.middleware.logging import RequestLoggingMiddleware, redact_sensitive_headers

__all__ = [
    "BodySizeLimitMiddleware",
    "RequestLoggingMiddleware",
    "redact_sensitive_headers",
]
