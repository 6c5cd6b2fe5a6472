"""Pydantic models for API requests and responses.

Provides type safety, validation, and automatic OpenAPI documentation.

Models:
    - Sender: Speaker of a chat turn
    - ChatTurn: Individual entry in the client's conversation log
    - ChatRequest: Incoming text message
    - ChatReply: Model reply returned by both endpoints
    - ErrorResponse: Generic failure body
"""

from src.models.schemas import ChatReply, ChatRequest, ChatTurn, ErrorResponse, Sender

__all__ = ["ChatReply", "ChatRequest", "ChatTurn", "ErrorResponse", "Sender"]
