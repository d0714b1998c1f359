"""
Domain exceptions for image conversion and text codecs.

These carry a kind and a message and are only rendered to strings at the
HTTP boundary (see api.exceptions).
"""

from core.enums import CodecOperation, ConversionErrorKind


class ConversionError(Exception):
    """Base error for image conversion failures."""

    kind: ConversionErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"error": self.kind.value, "detail": self.message}


class DecodeError(ConversionError):
    """Input bytes are not a recognizable image."""

    kind = ConversionErrorKind.DECODE


class UnsupportedFormatError(ConversionError):
    """Requested target format is not in the supported set."""

    kind = ConversionErrorKind.UNSUPPORTED_FORMAT

    def __init__(self, format_tag: str):
        super().__init__(f"Unsupported format: {format_tag}")
        self.format_tag = format_tag


class EncodeError(ConversionError):
    """Target encoder rejected the resized pixel data."""

    kind = ConversionErrorKind.ENCODE


class InvalidDimensionsError(ConversionError):
    """Requested width or height is not a positive integer."""

    kind = ConversionErrorKind.INVALID_DIMENSIONS

    def __init__(self, width: int, height: int):
        super().__init__(f"Invalid target dimensions: {width}x{height} (both must be positive)")
        self.width = width
        self.height = height


class CodecError(Exception):
    """A text codec could not process its input."""

    def __init__(self, operation: CodecOperation, message: str):
        super().__init__(message)
        self.operation = operation
        self.message = message

    def to_dict(self) -> dict:
        return {"error": "codec_error", "operation": self.operation.value, "detail": self.message}
