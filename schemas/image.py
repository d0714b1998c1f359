"""
Image conversion API models.

This module contains models for image operations:
- Base64 conversion requests and responses
- Supported format listing
"""

from typing import List

from pydantic import BaseModel, Field


class ImageConvertRequest(BaseModel):
    """Request to convert a base64-encoded image"""

    image_base64: str = Field(..., description="Source image bytes, base64 encoded")
    format: str = Field(..., description="Target format: png, jpeg, jpg, ico or svg")
    width: int = Field(..., gt=0, description="Target width in pixels")
    height: int = Field(..., gt=0, description="Target height in pixels")


class ImageConvertResponse(BaseModel):
    """Response from image conversion"""

    format: str
    media_type: str
    width: int
    height: int
    size_bytes: int
    data_base64: str
    processing_time_ms: int


class ImageFormatInfo(BaseModel):
    """Supported target format"""

    format: str
    media_type: str
    aliases: List[str] = []
    raster: bool
