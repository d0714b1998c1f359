"""
JSON Formatter API Router - Pretty-print and minify JSON documents
"""

import logging

from fastapi import APIRouter, Depends

from api.dependencies import get_codec_service
from api.exceptions import safe_endpoint
from schemas import CodecRequest, CodecResponse, JsonFormatRequest

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/format")
@safe_endpoint
async def format_json(
    request: JsonFormatRequest, codec_service=Depends(get_codec_service)
) -> CodecResponse:
    """Pretty-print JSON with the requested indent, optionally sorting keys"""
    result = codec_service.format_json(
        request.text, indent=request.indent, sort_keys=request.sort_keys
    )

    return CodecResponse(
        operation=result.operation,
        input=result.input,
        output=result.output,
        history_id=result.history_id,
    )


@router.post("/minify")
@safe_endpoint
async def minify_json(
    request: CodecRequest, codec_service=Depends(get_codec_service)
) -> CodecResponse:
    """Minify JSON"""
    result = codec_service.minify_json(request.text)

    return CodecResponse(
        operation=result.operation,
        input=result.input,
        output=result.output,
        history_id=result.history_id,
    )
