"""
Shared FastAPI dependencies for the Summer Toolbox backend.
Centralizes common dependencies to eliminate code duplication.
"""

import logging
from typing import Any, Dict

from fastapi import Depends, HTTPException, Request, UploadFile

from api.exceptions import PayloadTooLargeException
from core.constants import APIConstants
from core.history_buffer import HistoryBuffer
from services.codec_service import CodecService
from services.image_service import ImageService

logger = logging.getLogger(__name__)

UPLOAD_CHUNK_SIZE = 1024 * 1024


def get_history_buffer(request: Request) -> HistoryBuffer:
    """
    Get HistoryBuffer instance from app state.

    Raises:
        HTTPException: If the buffer was not initialized
    """
    try:
        return request.app.state.history_buffer
    except AttributeError as e:
        logger.error(f"History buffer not initialized in app state: {e}")
        raise HTTPException(
            status_code=500, detail="Internal server error: History buffer not initialized"
        )


def get_config(request: Request) -> Dict[str, Any]:
    """
    Get application configuration.

    Args:
        request: FastAPI request object

    Returns:
        Configuration dictionary
    """
    try:
        return request.app.state.config
    except AttributeError:
        logger.warning("Config not found in app state, using defaults")
        return {}


def get_max_upload_mb(config: Dict[str, Any] = Depends(get_config)) -> int:
    """Configured upload limit in MB."""
    return config.get("image", {}).get("max_upload_mb", APIConstants.DEFAULT_MAX_UPLOAD_MB)


def check_upload_size(size_bytes: int, max_upload_mb: int) -> None:
    """
    Reject payloads above the configured limit.

    Raises:
        PayloadTooLargeException: If size_bytes exceeds max_upload_mb
    """
    if size_bytes > max_upload_mb * 1024 * 1024:
        raise PayloadTooLargeException(size_bytes, max_upload_mb)


async def read_upload(file: UploadFile, max_upload_mb: int) -> bytes:
    """
    Read an uploaded file in chunks, stopping as soon as the limit is passed.

    Raises:
        PayloadTooLargeException: If the upload is too large
    """
    chunks = []
    size_bytes = 0
    while True:
        chunk = await file.read(UPLOAD_CHUNK_SIZE)
        if not chunk:
            break
        size_bytes += len(chunk)
        check_upload_size(size_bytes, max_upload_mb)
        chunks.append(chunk)
    return b"".join(chunks)


# Service layer dependencies
def get_image_service() -> ImageService:
    """
    Get image service instance.

    Returns:
        ImageService instance
    """
    return ImageService()


def get_codec_service(
    history_buffer: HistoryBuffer = Depends(get_history_buffer),
) -> CodecService:
    """
    Get codec service instance.

    Args:
        history_buffer: History buffer dependency

    Returns:
        CodecService instance
    """
    return CodecService(history_buffer=history_buffer)
