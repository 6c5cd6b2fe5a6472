"""Chat Relay - a thin web chat client in front of a chat-completion API.

Combines FastAPI for the HTTP relay, the OpenAI SDK for model calls,
NiceGUI for the chat page, and Pydantic for data validation.

Components:
    - api: HTTP endpoints for text and file relays
    - agent: Prompt construction and the model client
    - storage: Request-scoped temporary upload files
    - ui: Web interface for chat interactions
    - models: Request/response schemas
"""

__version__ = "0.1.0"
