"""FastAPI endpoints for the chat relay.

Async request handling with one awaited model call per request.

Endpoints:
    - GET /health: Service health status
    - POST /chat: Relay a text message
    - POST /upload: Relay an uploaded file for analysis
"""

from src.api.app import app, create_app

__all__ = ["app", "create_app"]
