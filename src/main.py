"""
Riko Chat Gateway - Main Application Entry Point

This module provides the FastAPI application for the Riko Chat Gateway.
The gateway relays a chat conversation to the configured LLM provider and
returns a cleaned, display-ready reply.

Run with:
    uvicorn src.main:app --port 3000
or:
    riko-gateway
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.api.middleware.body_limit import BodySizeLimitMiddleware
from src.api.middleware.logging import RequestLoggingMiddleware
from src.api.routes.chat import router as chat_router
from src.api.routes.health import router as health_router
from src.core.config import Settings, get_settings
from src.core.persona import RIKO_PERSONA, PersonaPrompt
from src.observability.logging import configure_logging, get_logger
from src.pipeline.formatter import ResponseFormatter
from src.pipeline.normalizer import MessageNormalizer
from src.providers import create_provider
from src.providers.base import LLMProvider
from src.services.chat import ChatService

# Application metadata
APP_NAME = "Riko Chat Gateway"
APP_VERSION = "1.0.0"
APP_DESCRIPTION = "Chat relay that normalizes conversations for LLM providers"

logger = get_logger(__name__)


def build_chat_service(
    settings: Settings,
    provider: LLMProvider,
    persona: PersonaPrompt = RIKO_PERSONA,
) -> ChatService:
    """Assemble the chat pipeline from settings and a provider binding."""
    return ChatService(
        normalizer=MessageNormalizer(persona),
        provider=provider,
        formatter=ResponseFormatter(settings.bullet_style),
    )


# =============================================================================
# Lifespan Context Manager
# =============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager for startup/shutdown events.

    Startup resolves the provider credential; a missing key raises
    ConfigurationError here and the server refuses to start.
    """
    settings: Settings = app.state.settings

    provider: Optional[LLMProvider] = app.state.provider
    if provider is None:
        provider = create_provider(settings)
        app.state.provider = provider

    app.state.chat_service = build_chat_service(settings, provider)

    logger.info(
        "startup",
        service=settings.service_name,
        version=APP_VERSION,
        environment=settings.environment,
        provider=provider.name,
        bullet_style=settings.bullet_style,
    )

    yield

    logger.info("shutdown", service=settings.service_name)
    await provider.aclose()
    app.state.chat_service = None


# =============================================================================
# Exception Handlers
# =============================================================================


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed request bodies are client errors (400), reported as one message."""
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{location}: {first.get('msg')}" if location else str(first.get("msg"))
    else:
        message = "Invalid request body"
    return JSONResponse(status_code=400, content={"success": False, "error": message})


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Render HTTP errors in the gateway's JSON error shape."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


# =============================================================================
# Application Factory
# =============================================================================


def create_app(
    settings: Optional[Settings] = None,
    provider: Optional[LLMProvider] = None,
) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        settings: Application settings (default: get_settings()).
        provider: Provider binding to use instead of the configured one
            (tests and local development).

    Returns:
        Configured FastAPI application.
    """
    settings = settings or get_settings()
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=APP_NAME,
        description=APP_DESCRIPTION,
        version=APP_VERSION,
        docs_url="/docs" if settings.environment != "production" else None,
        redoc_url="/redoc" if settings.environment != "production" else None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.provider = provider
    app.state.chat_service = None

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    # Last added runs first: CORS -> logging -> body limit -> routes
    app.add_middleware(BodySizeLimitMiddleware, max_body_bytes=settings.max_body_bytes)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_cors_origins(),
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    app.include_router(health_router)
    app.include_router(chat_router)

    @app.get("/", tags=["Info"])
    async def root() -> dict[str, Any]:
        """Root endpoint returning basic service information."""
        return {
            "service": settings.service_name,
            "version": APP_VERSION,
            "docs": "/docs" if settings.environment != "production" else "disabled",
        }

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app on the configured port."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(app, host="0.0.0.0", port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
