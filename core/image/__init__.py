"""
Image conversion utilities.

This package provides:
- converters: Target format encoders and the ImageConverter orchestrator
- processors: Decoding, exact resizing and RGBA pixel access
"""

from core.image.converters import (
    ConversionRequest,
    ConversionResult,
    ImageConverter,
    ImageConverters,
    convert_image,
)
from core.image.processors import decode_image, resize_exact, to_rgba_array

__all__ = [
    "ConversionRequest",
    "ConversionResult",
    "ImageConverter",
    "ImageConverters",
    "convert_image",
    "decode_image",
    "resize_exact",
    "to_rgba_array",
]
