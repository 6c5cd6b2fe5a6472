"""HTTP client and conversation state for the chat page.

Kept free of NiceGUI so the request flow can be exercised directly
against the FastAPI app.
"""

import os
from collections.abc import Callable
from dataclasses import dataclass

import httpx

from src.models.schemas import ChatTurn, Sender

API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:8000")


@dataclass
class PendingFile:
    """A file picked in the uploader but not yet sent."""

    name: str
    content: bytes
    mime_type: str


class FileSelection:
    """Holds at most one picked file until a send takes it.

    Taking clears the selection, so a file is uploaded once and a file
    picked while an earlier upload is in flight is kept for the next send.
    """

    def __init__(self) -> None:
        self._file: PendingFile | None = None

    @property
    def selected(self) -> PendingFile | None:
        return self._file

    def select(self, name: str, content: bytes, mime_type: str | None) -> PendingFile:
        self._file = PendingFile(
            name=name, content=content, mime_type=mime_type or "application/octet-stream"
        )
        return self._file

    def take(self) -> PendingFile | None:
        file, self._file = self._file, None
        return file


class RelayClientError(Exception):
    """Raised when the relay cannot be reached or answers with an error."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class RelayClient:
    """Calls the relay's /chat and /upload endpoints."""

    def __init__(
        self,
        base_url: str = API_BASE_URL,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = 120.0,
    ) -> None:
        self._base_url = base_url
        self._transport = transport
        self._timeout = timeout

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._base_url,
            transport=self._transport,
            timeout=self._timeout,
        )

    async def _post(self, path: str, **kwargs) -> str:
        async with self._client() as client:
            try:
                response = await client.post(path, **kwargs)
            except httpx.RequestError as e:
                raise RelayClientError(f"Connection failed: {e}") from e

        if response.is_error:
            try:
                message = response.json().get("error") or f"HTTP {response.status_code}"
            except (ValueError, AttributeError):
                message = f"HTTP {response.status_code}"
            raise RelayClientError(message, status_code=response.status_code)

        try:
            reply = response.json()["reply"]
        except (ValueError, KeyError, TypeError) as e:
            raise RelayClientError(
                "Malformed reply from relay", status_code=response.status_code
            ) from e
        if not isinstance(reply, str):
            raise RelayClientError("Malformed reply from relay", status_code=response.status_code)
        return reply

    async def send_text(self, text: str) -> str:
        """POST a message to /chat and return the reply."""
        return await self._post("/chat", json={"message": text})

    async def send_file(self, filename: str, content: bytes, mime_type: str) -> str:
        """POST a file to /upload as multipart field ``file``."""
        return await self._post(
            "/upload", files={"file": (filename, content, mime_type)}
        )


class ChatSession:
    """Append-only conversation log for one page visit.

    Turns are only ever added; rendering reads ``turns`` and is triggered
    through ``on_change`` after each append.
    """

    def __init__(
        self,
        client: RelayClient | None = None,
        on_change: Callable[[], None] | None = None,
    ) -> None:
        self._client = client or RelayClient()
        self._turns: list[ChatTurn] = []
        self.on_change = on_change

    @property
    def turns(self) -> tuple[ChatTurn, ...]:
        return tuple(self._turns)

    def append(self, sender: Sender, text: str) -> ChatTurn:
        turn = ChatTurn(sender=sender, text=text)
        self._turns.append(turn)
        if self.on_change is not None:
            self.on_change()
        return turn

    async def send_text_message(self, text: str) -> ChatTurn | None:
        """Send a text message and record both sides of the exchange.

        Args:
            text: Raw input; surrounding whitespace is trimmed.

        Returns:
            The assistant turn, or None if the trimmed text was empty.

        Raises:
            RelayClientError: The relay failed. The user turn stays in the log.
        """
        text = text.strip()
        if not text:
            return None

        self.append(Sender.USER, text)
        reply = await self._client.send_text(text)
        return self.append(Sender.ASSISTANT, reply)

    async def send_file(self, filename: str, content: bytes, mime_type: str) -> ChatTurn:
        """Upload a file and record both sides of the exchange.

        Raises:
            RelayClientError: The relay failed. The user turn stays in the log.
        """
        self.append(Sender.USER, f"[Uploaded file: {filename}]")
        reply = await self._client.send_file(filename, content, mime_type)
        return self.append(Sender.ASSISTANT, reply)
