"""
Image format conversion.

Decodes an arbitrary input image, resizes it to the requested box and
re-encodes it as one of the supported target formats:
- PNG (lossless, encoder defaults)
- JPEG (quality 90)
- ICO (single image of the requested size)
- SVG (one 1x1 rect per visible pixel)
"""

import base64
import io
import logging
from dataclasses import dataclass
from typing import Union

import numpy as np
from PIL import Image

from core.constants import ImageConstants
from core.enums import ImageFormat
from core.exceptions import (
    DecodeError,
    EncodeError,
    InvalidDimensionsError,
    UnsupportedFormatError,
)
from core.image.processors import decode_image, resize_exact, to_rgba_array

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConversionRequest:
    """Input parameters of a single conversion."""

    image_data: bytes
    format: ImageFormat
    width: int
    height: int

    @classmethod
    def parse(
        cls, image_data: bytes, format: Union[str, ImageFormat], width: int, height: int
    ) -> "ConversionRequest":
        """
        Validate raw parameters before any decode work happens.

        Raises:
            UnsupportedFormatError: If format is not a supported tag
            InvalidDimensionsError: If width or height is not positive
        """
        image_format = format if isinstance(format, ImageFormat) else ImageFormat.from_tag(format)
        if image_format is None:
            raise UnsupportedFormatError(str(format))

        if width <= 0 or height <= 0:
            raise InvalidDimensionsError(width, height)

        return cls(image_data=image_data, format=image_format, width=width, height=height)


@dataclass(frozen=True)
class ConversionResult:
    """Encoded output of a conversion."""

    data: bytes
    format: ImageFormat
    width: int
    height: int

    @property
    def media_type(self) -> str:
        return self.format.media_type

    @property
    def size_bytes(self) -> int:
        return len(self.data)


def _format_alpha(alpha: int) -> str:
    # Shortest single-precision form: 255 -> "1", 128 -> "0.5019608"
    opacity = np.float32(alpha) / np.float32(255)
    return np.format_float_positional(opacity, trim="-")


class ImageConverters:
    """Encoders for each supported target format."""

    @staticmethod
    def to_png(image: Image.Image) -> bytes:
        buffer = io.BytesIO()
        image.save(buffer, format="PNG")
        return buffer.getvalue()

    @staticmethod
    def to_jpeg(image: Image.Image, quality: int = ImageConstants.JPEG_QUALITY) -> bytes:
        """
        Encode image as JPEG.

        JPEG has no alpha channel, so RGBA/LA/palette inputs are flattened
        to RGB first.
        """
        if image.mode not in ImageConstants.JPEG_MODES:
            image = image.convert("RGB")

        buffer = io.BytesIO()
        image.save(buffer, format="JPEG", quality=quality)
        return buffer.getvalue()

    @staticmethod
    def to_ico(image: Image.Image) -> bytes:
        """
        Encode image as an icon holding a single entry of the image's size.

        Raises:
            EncodeError: If either side exceeds the 256 pixel ICO limit
        """
        width, height = image.size
        limit = ImageConstants.ICO_MAX_DIMENSION
        if width > limit or height > limit:
            raise EncodeError(
                f"ICO encoding failed: {width}x{height} exceeds the maximum icon size of "
                f"{limit}x{limit}"
            )

        buffer = io.BytesIO()
        image.save(buffer, format="ICO", sizes=[(width, height)])
        return buffer.getvalue()

    @staticmethod
    def to_svg(image: Image.Image) -> bytes:
        """
        Synthesize an SVG document with one unit rect per visible pixel.

        Pixels are visited in row-major order (y outer, x inner). Pixels whose
        alpha is exactly zero are skipped; any other alpha is carried through
        as the rgba() opacity. Adjacent pixels of the same color are not
        merged.

        Args:
            image: Image already resized to the target canvas

        Returns:
            UTF-8 encoded SVG document
        """
        width, height = image.size
        pixels = to_rgba_array(image)

        parts = [
            f'<svg width="{width}" height="{height}" viewBox="0 0 {width} {height}" '
            f'xmlns="{ImageConstants.SVG_NAMESPACE}">'
        ]

        # np.nonzero walks the grid in C order, i.e. row by row
        ys, xs = np.nonzero(pixels[:, :, 3])
        for y, x in zip(ys.tolist(), xs.tolist()):
            r, g, b, a = (int(v) for v in pixels[y, x])
            parts.append(
                f'<rect x="{x}" y="{y}" width="1" height="1" '
                f'fill="rgba({r},{g},{b},{_format_alpha(a)})" />'
            )

        parts.append("</svg>")
        return "".join(parts).encode("utf-8")

    @staticmethod
    def to_base64(data: bytes) -> str:
        """Encode output bytes for JSON transport."""
        return base64.b64encode(data).decode("utf-8")

    @staticmethod
    def from_base64(base64_string: str) -> bytes:
        """
        Decode a base64 image payload.

        Raises:
            DecodeError: If the payload is not valid base64
        """
        try:
            return base64.b64decode(base64_string, validate=True)
        except ValueError as e:
            raise DecodeError(f"Invalid base64 image payload: {e}") from e


class ImageConverter:
    """Decode, resize and re-encode images."""

    _ENCODERS = {
        ImageFormat.PNG: ImageConverters.to_png,
        ImageFormat.JPEG: ImageConverters.to_jpeg,
        ImageFormat.ICO: ImageConverters.to_ico,
        ImageFormat.SVG: ImageConverters.to_svg,
    }

    def convert(self, request: ConversionRequest) -> ConversionResult:
        """
        Run a conversion.

        Args:
            request: Validated conversion request

        Returns:
            ConversionResult with the encoded bytes

        Raises:
            DecodeError: If the input cannot be decoded
            EncodeError: If the target encoder rejects the resized image
        """
        image = decode_image(request.image_data)
        source_size = image.size

        resized = resize_exact(image, request.width, request.height)

        encoder = self._ENCODERS[request.format]
        try:
            data = encoder(resized)
        except EncodeError:
            raise
        except Exception as e:
            raise EncodeError(f"{request.format.value.upper()} encoding failed: {e}") from e

        logger.info(
            f"Converted {source_size[0]}x{source_size[1]} {image.format or image.mode} image to "
            f"{request.format.value} {request.width}x{request.height} ({len(data)} bytes)"
        )

        return ConversionResult(
            data=data, format=request.format, width=request.width, height=request.height
        )


def convert_image(image_data: bytes, format: str, width: int, height: int) -> bytes:
    """
    Convert an encoded image to the given format and exact dimensions.

    The format tag is validated before the input is decoded.

    Args:
        image_data: Source image bytes in any format Pillow can read
        format: One of "png", "jpeg", "jpg", "ico", "svg"
        width: Target width in pixels
        height: Target height in pixels

    Returns:
        Encoded bytes in the target format

    Raises:
        ConversionError: One of DecodeError, UnsupportedFormatError,
            EncodeError or InvalidDimensionsError
    """
    request = ConversionRequest.parse(image_data, format, width, height)
    return ImageConverter().convert(request).data
