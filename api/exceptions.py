"""
API exception handling.

Domain errors travel up from the core untouched and are rendered into
HTTP responses here, at the outermost surface.
"""

import functools
import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from core.enums import ConversionErrorKind
from core.exceptions import CodecError, ConversionError

logger = logging.getLogger(__name__)

CONVERSION_ERROR_STATUS = {
    ConversionErrorKind.UNSUPPORTED_FORMAT: 400,
    ConversionErrorKind.INVALID_DIMENSIONS: 400,
    ConversionErrorKind.DECODE: 422,
    ConversionErrorKind.ENCODE: 422,
}


class RecordNotFoundException(HTTPException):
    """History record does not exist"""

    def __init__(self, record_id: str):
        super().__init__(status_code=404, detail=f"History record {record_id} not found")


class PayloadTooLargeException(HTTPException):
    """Upload exceeds the configured size limit"""

    def __init__(self, size_bytes: int, max_upload_mb: int):
        super().__init__(
            status_code=413,
            detail=f"Upload of {size_bytes} bytes exceeds the {max_upload_mb} MB limit",
        )


def safe_endpoint(func):
    """
    Decorator for endpoints that turns unexpected exceptions into 500s.

    HTTPException and domain errors are re-raised so that their registered
    handlers produce the response.
    """

    @functools.wraps(func)
    async def wrapper(*args, **kwargs):
        try:
            return await func(*args, **kwargs)
        except (HTTPException, ConversionError, CodecError):
            raise
        except Exception as e:
            logger.error(f"Unhandled error in {func.__name__}: {e}", exc_info=True)
            raise HTTPException(status_code=500, detail=f"Internal server error: {str(e)}")

    return wrapper


async def conversion_error_handler(request: Request, exc: ConversionError) -> JSONResponse:
    status_code = CONVERSION_ERROR_STATUS.get(exc.kind, 500)
    logger.warning(f"Image conversion failed ({exc.kind.value}): {exc.message}")
    return JSONResponse(status_code=status_code, content=exc.to_dict())


async def codec_error_handler(request: Request, exc: CodecError) -> JSONResponse:
    logger.info(f"{exc.operation.value} rejected input: {exc.message}")
    return JSONResponse(status_code=422, content=exc.to_dict())


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Global exception: {exc}", exc_info=True)
    return JSONResponse(status_code=500, content={"detail": f"Internal server error: {str(exc)}"})


def register_exception_handlers(app: FastAPI) -> None:
    """Attach domain error handlers to the application."""
    app.add_exception_handler(ConversionError, conversion_error_handler)
    app.add_exception_handler(CodecError, codec_error_handler)
    app.add_exception_handler(Exception, global_exception_handler)
