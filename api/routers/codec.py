"""
Codec API Router - URL, Unicode, Base64 and HTML entity conversions
"""

import logging

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile

from api.dependencies import get_codec_service, get_max_upload_mb, read_upload
from api.exceptions import safe_endpoint
from core.enums import CodecOperation
from schemas import CodecRequest, CodecResponse, FileEncodeResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/operations")
async def list_operations() -> dict:
    """List available text codec operations"""
    return {"operations": [op.value for op in CodecOperation.text_operations()]}


@router.post("/base64/file")
@safe_endpoint
async def encode_file(
    file: UploadFile = File(...),
    codec_service=Depends(get_codec_service),
    max_upload_mb: int = Depends(get_max_upload_mb),
) -> FileEncodeResponse:
    """Base64-encode an uploaded file (no data URL prefix)"""
    data = await read_upload(file, max_upload_mb)
    filename = file.filename or "upload"

    result = codec_service.encode_file(filename, data)

    return FileEncodeResponse(
        filename=filename,
        size_bytes=len(data),
        output=result.output,
        history_id=result.history_id,
    )


@router.post("/{operation}")
@safe_endpoint
async def run_codec(
    operation: CodecOperation,
    request: CodecRequest,
    codec_service=Depends(get_codec_service),
) -> CodecResponse:
    """
    Run a text codec and record it in history.

    Args:
        operation: Codec operation, e.g. url_encode or base64_decode
        request: Input text
        codec_service: Codec service dependency

    Returns:
        CodecResponse with the output and the history record ID
    """
    if operation not in CodecOperation.text_operations():
        raise HTTPException(
            status_code=400, detail=f"{operation.value} is not a text codec operation"
        )

    result = codec_service.run(operation, request.text)

    return CodecResponse(
        operation=result.operation,
        input=result.input,
        output=result.output,
        history_id=result.history_id,
    )
