"""Request-scoped temporary storage for uploaded files.

An upload is written to a uniquely named file, read back once, and removed
when the owning request leaves the ``temporary_upload`` scope.
"""

import logging
import uuid
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import UploadFile
from pydantic import BaseModel
from starlette.concurrency import run_in_threadpool

logger = logging.getLogger(__name__)

# Constants
CHUNK_SIZE = 1024 * 1024  # 1MB
DEFAULT_MIME_TYPE = "application/octet-stream"


class UploadedArtifact(BaseModel):
    """An uploaded file stored for the lifetime of one request.

    Attributes:
        path: Location of the temporary file.
        mime_type: MIME type reported by the client.
        filename: Original filename, if the client sent one.
    """

    path: Path
    mime_type: str
    filename: str | None = None

    def read_bytes(self) -> bytes:
        return self.path.read_bytes()


async def _write_upload(file: UploadFile, path: Path) -> int:
    """Copy an upload to disk in chunks.

    File I/O runs in the threadpool so large uploads do not block the loop.

    Returns:
        Number of bytes written.
    """
    written = 0
    out = await run_in_threadpool(path.open, "wb")
    try:
        while chunk := await file.read(CHUNK_SIZE):
            await run_in_threadpool(out.write, chunk)
            written += len(chunk)
    finally:
        await run_in_threadpool(out.close)
    return written


def discard(path: Path) -> None:
    """Remove a temporary file, logging instead of raising on failure."""
    try:
        path.unlink(missing_ok=True)
    except OSError as e:
        logger.warning(f"Failed to remove temporary upload {path}: {e}")


@asynccontextmanager
async def temporary_upload(
    file: UploadFile, upload_dir: Path
) -> AsyncGenerator[UploadedArtifact]:
    """Store an upload for the duration of the ``async with`` block.

    The file is removed on every exit path, including when writing it
    fails or the body raises.

    Args:
        file: The incoming multipart upload.
        upload_dir: Directory for temporary files (created if missing).

    Yields:
        The stored artifact.
    """
    await run_in_threadpool(upload_dir.mkdir, parents=True, exist_ok=True)
    path = upload_dir / uuid.uuid4().hex

    try:
        size = await _write_upload(file, path)
        logger.debug(f"Stored upload {file.filename!r} ({size} bytes) at {path}")
        yield UploadedArtifact(
            path=path,
            mime_type=file.content_type or DEFAULT_MIME_TYPE,
            filename=file.filename,
        )
    finally:
        await run_in_threadpool(discard, path)
