"""
Image API Router - Image format conversion
"""

import logging
from pathlib import Path
from typing import List

from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.responses import Response

from api.dependencies import (
    check_upload_size,
    get_image_service,
    get_max_upload_mb,
    read_upload,
)
from api.exceptions import safe_endpoint
from core.image.converters import ConversionRequest, ImageConverters
from schemas import ImageConvertRequest, ImageConvertResponse, ImageFormatInfo

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/formats")
@safe_endpoint
async def list_formats(image_service=Depends(get_image_service)) -> List[ImageFormatInfo]:
    """List supported target formats"""
    return [ImageFormatInfo(**f) for f in image_service.supported_formats()]


@router.post("/convert")
@safe_endpoint
async def convert_image(
    file: UploadFile = File(..., description="Source image"),
    format: str = Form(..., description="Target format: png, jpeg, jpg, ico or svg"),
    width: int = Form(..., gt=0),
    height: int = Form(..., gt=0),
    image_service=Depends(get_image_service),
    max_upload_mb: int = Depends(get_max_upload_mb),
) -> Response:
    """
    Convert an uploaded image and return the encoded bytes.

    The image is resized to exactly width x height (aspect ratio is not
    kept) and re-encoded. The response body is the converted file with the
    target format's media type.

    Args:
        file: Uploaded source image in any common raster format
        format: Target format tag
        width: Target width in pixels
        height: Target height in pixels
        image_service: Image service dependency

    Returns:
        Raw converted image
    """
    # Unknown formats are rejected before the upload is read
    ConversionRequest.parse(b"", format, width, height)

    image_data = await read_upload(file, max_upload_mb)
    result, processing_time_ms = image_service.convert(image_data, format, width, height)

    filename = f"{Path(file.filename or 'image').stem}.{result.format.value}"

    return Response(
        content=result.data,
        media_type=result.media_type,
        headers={
            "Content-Disposition": f'attachment; filename="{filename}"',
            "X-Processing-Time-Ms": str(processing_time_ms),
        },
    )


@router.post("/convert/base64")
@safe_endpoint
async def convert_image_base64(
    request: ImageConvertRequest,
    image_service=Depends(get_image_service),
    max_upload_mb: int = Depends(get_max_upload_mb),
) -> ImageConvertResponse:
    """
    Convert a base64-encoded image and return the result as base64.

    Args:
        request: Image payload, target format and dimensions
        image_service: Image service dependency

    Returns:
        ImageConvertResponse with the encoded output
    """
    # base64 inflates by 4/3; compare the decoded size
    check_upload_size(len(request.image_base64) * 3 // 4, max_upload_mb)

    result, processing_time_ms = image_service.convert_base64(
        request.image_base64, request.format, request.width, request.height
    )

    return ImageConvertResponse(
        format=result.format.value,
        media_type=result.media_type,
        width=result.width,
        height=result.height,
        size_bytes=result.size_bytes,
        data_base64=ImageConverters.to_base64(result.data),
        processing_time_ms=processing_time_ms,
    )
