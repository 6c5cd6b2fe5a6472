"""Pytest fixtures and shared test configuration.

Provides reusable fixtures for unit and integration tests.

Fixtures:
    - completion_create: AsyncMock standing in for chat.completions.create
    - upload_dir: Per-test temporary upload directory
    - relay_service: RelayService wired to the mocked completion call
    - async_client: HTTPX client for API testing with the relay patched in

The external chat-completion API is never called from these fixtures.
"""

from collections.abc import AsyncGenerator, Generator
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import AsyncMock, patch

import pytest
from httpx import ASGITransport, AsyncClient

from src.agent.config import RelayConfig
from src.agent.relay_service import RelayService
from src.api import app


def make_completion(content: str | None) -> SimpleNamespace:
    """Build an object shaped like a chat-completion response."""
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=content))]
    )


def sent_messages(create: AsyncMock) -> list[dict]:
    """Return the messages passed to the most recent completion call."""
    return create.call_args.kwargs["messages"]


@pytest.fixture
def completion_create() -> AsyncMock:
    """Mocked completion call returning a fixed reply."""
    return AsyncMock(return_value=make_completion("stub reply"))


@pytest.fixture
def upload_dir(tmp_path: Path) -> Path:
    """Return a fresh upload directory for the test.

    Returns:
        Path under pytest's tmp_path (not created yet).
    """
    return tmp_path / "uploads"


@pytest.fixture
def relay_service(completion_create: AsyncMock, upload_dir: Path) -> RelayService:
    """Create a RelayService whose OpenAI client is mocked."""
    config = RelayConfig(
        api_key="sk-test-key",
        model_name="gpt-4.1-mini",
        upload_dir=upload_dir,
    )
    with patch("src.agent.relay_service.AsyncOpenAI") as mock_openai:
        mock_openai.return_value.chat.completions.create = completion_create
        return RelayService(config=config)


@pytest.fixture
def patched_relay(relay_service: RelayService) -> Generator[RelayService]:
    """Route both endpoints to the mocked relay service."""
    with (
        patch("src.api.chat.get_relay_service", return_value=relay_service),
        patch("src.api.upload.get_relay_service", return_value=relay_service),
    ):
        yield relay_service


@pytest.fixture
async def async_client(patched_relay: RelayService) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
