"""
Request Body Size Limit Middleware

Rejects request bodies larger than the configured limit with 413 before
the route handler runs. Inline base64 attachments make chat bodies large,
so the limit is generous (20 MiB by default) but bounded.

Pure ASGI middleware: the declared Content-Length is checked up front and
streamed bodies without one are counted chunk by chunk.
"""

import logging

from starlette.datastructures import Headers
from starlette.exceptions import HTTPException
from starlette.responses import JSONResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send

logger = logging.getLogger(__name__)


def payload_too_large_message(max_body_bytes: int) -> str:
    limit_mb = max_body_bytes / (1024 * 1024)
    return f"Request body too large (limit {limit_mb:g} MB)"


class BodySizeLimitMiddleware:
    """
    ASGI middleware enforcing a maximum request body size.

    Args:
        app: The wrapped ASGI application.
        max_body_bytes: Largest accepted body in bytes.
    """

    def __init__(self, app: ASGIApp, max_body_bytes: int) -> None:
        self.app = app
        self.max_body_bytes = max_body_bytes

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        content_length = Headers(scope=scope).get("content-length")
        if content_length is not None and content_length.isdigit():
            if int(content_length) > self.max_body_bytes:
                logger.warning(
                    f"Rejected request body: {content_length} bytes > {self.max_body_bytes}"
                )
                response = JSONResponse(
                    status_code=413,
                    content={
                        "success": False,
                        "error": payload_too_large_message(self.max_body_bytes),
                    },
                )
                await response(scope, receive, send)
                return

        received = 0

        async def limited_receive() -> Message:
            nonlocal received
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > self.max_body_bytes:
                    # Surfaces through FastAPI's body parsing as an HTTP 413
                    raise HTTPException(
                        status_code=413,
                        detail=payload_too_large_message(self.max_body_bytes),
                    )
            return message

        await self.app(scope, limited_receive, send)
