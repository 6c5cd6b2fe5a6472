"""File upload endpoint.

Stores the upload for the duration of the request, asks the model to
analyze it, and removes the file on every exit path.
"""

import logging

from fastapi import APIRouter, UploadFile, status
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from src.agent.relay_service import get_relay_service
from src.models.schemas import ChatReply, ErrorResponse
from src.storage.temp_upload import temporary_upload

logger = logging.getLogger(__name__)

router = APIRouter(tags=["upload"])

UPLOAD_ERROR_MESSAGE = "File processing error."


@router.post(
    "/upload",
    response_model=ChatReply,
    responses={status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse}},
)
async def upload_file(file: UploadFile) -> ChatReply | JSONResponse:
    """Relay an uploaded file to the model for analysis.

    Images (``image/*``) are sent inline as a base64 data URI; every other
    type is read as UTF-8 text and embedded in the prompt.

    Args:
        file: The uploaded file (multipart/form-data field ``file``).

    Returns:
        ChatReply with the model's analysis.

    Raises:
        500: Reading the file or the model call failed (returned as ErrorResponse).
    """
    try:
        relay_service = get_relay_service()
        async with temporary_upload(file, relay_service.upload_dir) as artifact:
            data = await run_in_threadpool(artifact.read_bytes)
            reply = await relay_service.reply_to_file(data, artifact.mime_type)
    except Exception:
        logger.exception(f"File relay failed for {file.filename!r}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(error=UPLOAD_ERROR_MESSAGE).model_dump(),
        )

    logger.info(f"Relayed upload {file.filename!r} ({file.content_type})")
    return ChatReply(reply=reply)
