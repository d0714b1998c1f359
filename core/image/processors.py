"""
Image processing operations.

Handles the pixel-level steps of a conversion:
- Decoding raw bytes into a Pillow image
- Exact-size resizing
- RGBA pixel grid extraction
"""

import io
import logging

import numpy as np
from PIL import Image

from core.constants import ImageConstants
from core.exceptions import DecodeError

logger = logging.getLogger(__name__)


def _to_8bit_grayscale(image: Image.Image) -> Image.Image:
    """Scale a 16-bit (or 32-bit int/float) grayscale image to 8-bit L."""
    pixels = np.clip(np.asarray(image, dtype=np.float64), 0, ImageConstants.WIDE_GRAYSCALE_MAX)
    # 0..65535 -> 0..255, rounded
    scaled = np.floor(pixels / 257 + 0.5).astype(np.uint8)
    return Image.fromarray(scaled)


def decode_image(image_data: bytes) -> Image.Image:
    """
    Decode raw encoded bytes into a fully loaded image.

    16-bit grayscale is scaled down to 8-bit L. Palette, bilevel and other
    exotic modes are normalized to RGBA so that Lanczos resampling applies
    to every input.

    Args:
        image_data: Encoded image in any format Pillow can read

    Returns:
        Decoded PIL Image

    Raises:
        DecodeError: If the bytes are not a readable image
    """
    try:
        image = Image.open(io.BytesIO(image_data))
        image.load()
        if image.mode in ImageConstants.WIDE_GRAYSCALE_MODES:
            image = _to_8bit_grayscale(image)
        if image.mode not in ImageConstants.RESIZABLE_MODES:
            image = image.convert("RGBA")
    except Exception as e:
        logger.debug(f"Failed to decode {len(image_data)} bytes: {e}")
        raise DecodeError(f"Unable to decode image: {e}") from e

    return image


def resize_exact(image: Image.Image, width: int, height: int) -> Image.Image:
    """
    Resize image to exactly width x height with Lanczos resampling.

    Aspect ratio is not preserved; the image is stretched or squashed to
    fill the requested box.
    """
    return image.resize((width, height), Image.Resampling.LANCZOS)


def to_rgba_array(image: Image.Image) -> np.ndarray:
    """
    Convert image to an RGBA pixel grid.

    Returns:
        uint8 array of shape (height, width, 4)
    """
    if image.mode != "RGBA":
        image = image.convert("RGBA")
    return np.asarray(image, dtype=np.uint8)
