"""Text chat endpoint.

Forwards a single user message, wrapped in the fixed system prompt, to the
chat-completion API and returns the reply.
"""

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from src.agent.relay_service import get_relay_service
from src.models.schemas import ChatReply, ChatRequest, ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["chat"])

CHAT_ERROR_MESSAGE = "AI processing error."


@router.post(
    "/chat",
    response_model=ChatReply,
    responses={status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse}},
)
async def chat(request: ChatRequest) -> ChatReply | JSONResponse:
    """Relay a text message to the model.

    Each call builds its prompt from scratch; nothing is remembered between
    requests. An empty message is forwarded unchanged.

    Args:
        request: Body with the user's message.

    Returns:
        ChatReply with the model's text.

    Raises:
        500: The model call failed (returned as ErrorResponse).
    """
    try:
        relay_service = get_relay_service()
        reply = await relay_service.reply_to_text(request.message)
    except Exception:
        logger.exception("Chat relay failed")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(error=CHAT_ERROR_MESSAGE).model_dump(),
        )

    logger.info(f"Relayed chat message ({len(request.message)} chars in, {len(reply)} out)")
    return ChatReply(reply=reply)
