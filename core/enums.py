"""
Centralized enums for the Summer Toolbox backend.

All enums live here so that schemas, services and routers share a single
definition.
"""

from enum import Enum
from typing import Optional


class ImageFormat(str, Enum):
    """Target formats supported by the image converter."""

    PNG = "png"
    JPEG = "jpeg"
    ICO = "ico"
    SVG = "svg"

    @classmethod
    def from_tag(cls, tag: str) -> Optional["ImageFormat"]:
        """
        Resolve a format tag to an ImageFormat.

        Matching is case-sensitive; "jpg" is accepted as an alias of "jpeg".

        Args:
            tag: Format tag as sent by the client

        Returns:
            ImageFormat, or None if the tag is not recognized
        """
        if tag == "jpg":
            return cls.JPEG
        try:
            return cls(tag)
        except ValueError:
            return None

    @property
    def media_type(self) -> str:
        """MIME type of the encoded output."""
        return _MEDIA_TYPES[self]

    @property
    def is_raster(self) -> bool:
        return self is not ImageFormat.SVG


_MEDIA_TYPES = {
    ImageFormat.PNG: "image/png",
    ImageFormat.JPEG: "image/jpeg",
    ImageFormat.ICO: "image/x-icon",
    ImageFormat.SVG: "image/svg+xml",
}


class ConversionErrorKind(str, Enum):
    """Failure categories of an image conversion."""

    DECODE = "decode_error"
    UNSUPPORTED_FORMAT = "unsupported_format"
    ENCODE = "encode_error"
    INVALID_DIMENSIONS = "invalid_dimensions"


class CodecOperation(str, Enum):
    """Text conversions exposed to the UI and recorded in history."""

    URL_ENCODE = "url_encode"
    URL_DECODE = "url_decode"
    UNICODE_ENCODE = "unicode_encode"
    UNICODE_DECODE = "unicode_decode"
    BASE64_ENCODE = "base64_encode"
    BASE64_DECODE = "base64_decode"
    BASE64_FILE_ENCODE = "base64_file_encode"
    HTML_ENCODE = "html_encode"
    HTML_DECODE = "html_decode"
    JSON_FORMAT = "json_format"
    JSON_MINIFY = "json_minify"

    @classmethod
    def text_operations(cls) -> list["CodecOperation"]:
        """Operations that take a single text argument."""
        return [
            op
            for op in cls
            if op not in (cls.BASE64_FILE_ENCODE, cls.JSON_FORMAT, cls.JSON_MINIFY)
        ]
