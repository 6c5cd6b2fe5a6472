"""Relay service wrapping the OpenAI chat-completion client.

Core module for forwarding prompts to the external model.

Architecture Decisions:

1. **Stateless** - Every call receives the full prompt. No session storage,
   no conversation memory, nothing shared between requests except the HTTP
   client itself.

2. **Singleton Pattern** - The AsyncOpenAI client holds a connection pool.
   The singleton reuses it across all requests rather than recreating it
   per-request.

3. **Service Wrapper** - Decouples the API layer from the SDK. Routes only see
   ``complete(messages) -> str`` and a single error type.

4. **No retries** - The SDK's built-in retries are disabled so that each
   request makes exactly one call to the model.
"""

import logging
from pathlib import Path

from openai import AsyncOpenAI

from src.agent.config import RelayConfig, get_relay_config
from src.agent.prompts import PromptMessages, text_prompt, upload_prompt

logger = logging.getLogger(__name__)


class RelayError(Exception):
    """Raised when the model returns no usable reply."""

    pass


class RelayService:
    """Service forwarding prompts to the chat-completion API.

    Wraps AsyncOpenAI with:
    - Config-driven model, key and base URL
    - Singleton lifecycle management
    - Extraction of the first choice's text
    """

    def __init__(self, config: RelayConfig | None = None) -> None:
        """Initialize the relay service.

        Args:
            config: Optional relay configuration.
                    Loads from environment if not provided.
        """
        self._config = config or get_relay_config()
        self._client = self._create_client()

    def _create_client(self) -> AsyncOpenAI:
        """Create the OpenAI client.

        Returns:
            AsyncOpenAI client bound to the configured key and base URL.
        """
        return AsyncOpenAI(
            api_key=self._config.api_key,
            base_url=self._config.base_url,
            max_retries=0,
        )

    @property
    def upload_dir(self) -> Path:
        return self._config.upload_dir

    async def complete(self, messages: PromptMessages) -> str:
        """Send a prompt to the model and return its reply.

        Args:
            messages: Role-tagged chat messages.

        Returns:
            Text of the first completion choice.

        Raises:
            RelayError: If the response carries no choices or no content.
        """
        completion = await self._client.chat.completions.create(
            model=self._config.model_name,
            messages=messages,
        )

        if not completion.choices:
            raise RelayError("Model response contained no choices")

        content = completion.choices[0].message.content
        if content is None:
            raise RelayError("Model response contained no text content")

        return content

    async def reply_to_text(self, message: str) -> str:
        """Get the model's reply to a chat message."""
        return await self.complete(text_prompt(message))

    async def reply_to_file(self, data: bytes, mime_type: str) -> str:
        """Get the model's analysis of an uploaded file.

        Args:
            data: Raw file bytes.
            mime_type: MIME type of the upload; ``image/*`` is sent inline.

        Returns:
            The model's reply.
        """
        return await self.complete(upload_prompt(data, mime_type))


# Module-level singleton instance
_relay_service: RelayService | None = None


def get_relay_service() -> RelayService:
    """Get or create the global relay service.

    Returns:
        The RelayService instance.
    """
    global _relay_service
    if _relay_service is None:
        _relay_service = RelayService()
    return _relay_service
