"""
Image Service - Business logic for image format conversion.

Wraps the core ImageConverter with request validation, base64 transport
and timing for the HTTP layer.
"""

import logging
import time
from typing import Optional, Tuple, Union

from core.enums import ImageFormat
from core.image.converters import (
    ConversionRequest,
    ConversionResult,
    ImageConverter,
    ImageConverters,
)

logger = logging.getLogger(__name__)


class ImageService:
    """Service for image conversion operations."""

    def __init__(self, converter: Optional[ImageConverter] = None):
        """
        Initialize image service.

        Args:
            converter: Converter instance (a fresh one if omitted)
        """
        self.converter = converter or ImageConverter()

    def convert(
        self,
        image_data: bytes,
        format: Union[str, ImageFormat],
        width: int,
        height: int,
    ) -> Tuple[ConversionResult, int]:
        """
        Convert raw image bytes.

        The format and dimensions are validated before the image is decoded.

        Args:
            image_data: Source image bytes
            format: Target format tag
            width: Target width in pixels
            height: Target height in pixels

        Returns:
            Tuple of (conversion result, processing_time_ms)

        Raises:
            ConversionError: On any conversion failure
        """
        request = ConversionRequest.parse(image_data, format, width, height)

        start = time.perf_counter()
        result = self.converter.convert(request)
        processing_time_ms = int((time.perf_counter() - start) * 1000)

        return result, processing_time_ms

    def convert_base64(
        self,
        image_base64: str,
        format: Union[str, ImageFormat],
        width: int,
        height: int,
    ) -> Tuple[ConversionResult, int]:
        """
        Convert a base64-encoded image.

        Raises:
            ConversionError: DecodeError for invalid base64, otherwise as convert()
        """
        # Reject bad tags before paying for the base64 decode
        ConversionRequest.parse(b"", format, width, height)

        image_data = ImageConverters.from_base64(image_base64)
        return self.convert(image_data, format, width, height)

    @staticmethod
    def supported_formats() -> list:
        """List target formats with their media types and aliases."""
        return [
            {
                "format": f.value,
                "media_type": f.media_type,
                "aliases": ["jpg"] if f is ImageFormat.JPEG else [],
                "raster": f.is_raster,
            }
            for f in ImageFormat
        ]
