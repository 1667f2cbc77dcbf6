"""
Structured Logging

JSON log events via structlog, stamped with the request correlation ID.

configure_logging() runs once (create_app calls it with the configured
level); module loggers are obtained with get_logger(__name__). Stdlib
loggers used by the providers and the attachment encoder share the level.
"""

import contextvars
import logging
import sys
from contextlib import contextmanager
from typing import Iterator, Optional, TextIO

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

_configured = False

_request_id: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar(
    "riko_request_id", default=None
)


# =============================================================================
# Correlation ID
# =============================================================================


def set_correlation_id(correlation_id: str) -> contextvars.Token:
    """Bind a correlation ID to the current context; returns the reset token."""
    return _request_id.set(correlation_id)


def reset_correlation_id(token: contextvars.Token) -> None:
    _request_id.reset(token)


def get_correlation_id() -> Optional[str]:
    return _request_id.get()


@contextmanager
def correlation_id_context(correlation_id: str) -> Iterator[None]:
    """
    Run a block with a correlation ID bound.

    Example:
        >>> with correlation_id_context("req-1"):
        ...     get_logger(__name__).info("chat_request_dispatched")
    """
    token = set_correlation_id(correlation_id)
    try:
        yield
    finally:
        reset_correlation_id(token)


def inject_correlation_id(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """structlog processor: copy the bound correlation ID into the event."""
    correlation_id = _request_id.get()
    if correlation_id is not None:
        event_dict.setdefault("correlation_id", correlation_id)
    return event_dict


# =============================================================================
# Configuration
# =============================================================================


def configure_logging(
    level: str = "INFO",
    stream: Optional[TextIO] = None,
    force: bool = False,
) -> None:
    """
    Configure structlog and the stdlib root logger.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        stream: Destination (default: sys.stdout).
        force: Reconfigure even if already configured (tests).
    """
    global _configured

    if _configured and not force:
        return

    numeric_level = _level_to_int(level)
    output = stream or sys.stdout

    processors: list[Processor] = [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True, key="timestamp"),
        inject_correlation_id,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(ensure_ascii=False),
    ]
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=output),
        cache_logger_on_first_use=False,
    )

    logging.basicConfig(
        level=numeric_level,
        stream=output,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        force=force,
    )

    _configured = True


def reset_logging() -> None:
    """Forget the configured state so the next configure_logging() applies. Tests only."""
    global _configured
    _configured = False


def get_logger(name: str) -> structlog.typing.FilteringBoundLogger:
    """Return a structlog logger with ``logger=<name>`` bound."""
    configure_logging()
    return structlog.get_logger().bind(logger=name)


def _level_to_int(level: str) -> int:
    numeric = logging.getLevelName(level.upper())
    return numeric if isinstance(numeric, int) else logging.INFO
