from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Sender(str, Enum):
    """Who produced a chat turn."""

    USER = "user"
    ASSISTANT = "assistant"


class ChatTurn(BaseModel):
    """One entry in the displayed conversation.

    Attributes:
        sender: The speaker (user or assistant).
        text: The displayed text.
    """

    model_config = ConfigDict(frozen=True)

    sender: Sender
    text: str


class ChatRequest(BaseModel):
    """Request payload for the text endpoint.

    Attributes:
        message: User's text, forwarded as-is (may be empty).
    """

    message: str


class ChatReply(BaseModel):
    """Successful reply from either endpoint.

    Attributes:
        reply: The model's response text.
    """

    reply: str


class ErrorResponse(BaseModel):
    """Generic failure body.

    Attributes:
        error: Fixed human-readable message for the endpoint.
    """

    error: str = Field(..., description="Human-readable error message")
