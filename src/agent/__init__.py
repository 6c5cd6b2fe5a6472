"""Model-facing side of the relay.

Responsibilities:
    - Fixed system prompt and per-request prompt construction
    - Text and image (base64 data URI) user content
    - One awaited chat-completion call per request, no retries

Maintains clean separation from the HTTP layer.
"""

from src.agent.config import RelayConfig, get_relay_config
from src.agent.relay_service import RelayError, RelayService, get_relay_service

__all__ = [
    "RelayConfig",
    "RelayError",
    "RelayService",
    "get_relay_config",
    "get_relay_service",
]
