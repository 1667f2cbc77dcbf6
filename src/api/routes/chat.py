"""
Chat Router - POST /api/RikoChat

Accepts a conversation, runs it through the chat pipeline and returns the
formatted reply.

Status codes:
- 200: {"success": true, "response": ..., "timestamp": ...}
- 400: {"error": "Messages are required"} for a missing/empty conversation
- 500: {"success": false, "error": ...} for upstream or internal failures
"""

import logging
from typing import Optional, Union

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from src.api.deps import get_chat_service
from src.core.exceptions import ClientInputError, UpstreamError
from src.models.requests import ChatRequest
from src.models.responses import ChatReply, ErrorReply
from src.services.chat import ChatService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Chat"])


@router.post(
    "/RikoChat",
    response_model=ChatReply,
    responses={400: {"model": ErrorReply}, 500: {"model": ErrorReply}},
)
async def riko_chat(
    body: Optional[ChatRequest] = None,
    chat_service: ChatService = Depends(get_chat_service),
) -> Union[ChatReply, JSONResponse]:
    """
    Generate a reply for the conversation.

    Args:
        body: Request body with the messages list
        chat_service: Injected chat service dependency

    Returns:
        ChatReply on success, JSONResponse with an error body otherwise
    """
    messages = body.messages if body is not None else None

    try:
        return await chat_service.reply(messages or [])

    except ClientInputError as e:
        return JSONResponse(status_code=400, content={"error": e.message})

    except UpstreamError as e:
        logger.error(
            f"Upstream error: provider={e.provider}, status_code={e.status_code}, "
            f"message={e.message}"
        )
        return JSONResponse(
            status_code=500,
            content=ErrorReply(error=e.message).model_dump(),
        )

    except Exception as e:
        logger.exception(f"Unexpected error during chat request: {type(e).__name__}")
        return JSONResponse(
            status_code=500,
            content=ErrorReply(error=str(e) or "Internal server error").model_dump(),
        )
