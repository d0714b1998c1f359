"""
Pytest configuration and fixtures for Summer Toolbox tests
"""

import io

import pytest
from PIL import Image, ImageDraw

from core.history_buffer import HistoryBuffer
from services.codec_service import CodecService
from services.image_service import ImageService


def _encode(image: Image.Image, format: str = "PNG") -> bytes:
    """Encode a PIL image to bytes"""
    buffer = io.BytesIO()
    image.save(buffer, format=format)
    return buffer.getvalue()


@pytest.fixture
def test_image():
    """Create a 40x30 RGB test image with some content"""
    image = Image.new("RGB", (40, 30), (20, 40, 60))
    draw = ImageDraw.Draw(image)
    draw.rectangle((5, 5, 20, 20), fill=(255, 255, 255))
    draw.ellipse((22, 8, 36, 26), fill=(200, 30, 30))
    return image


@pytest.fixture
def png_bytes(test_image):
    """Test image encoded as PNG"""
    return _encode(test_image, "PNG")


@pytest.fixture
def jpeg_bytes(test_image):
    """Test image encoded as JPEG"""
    return _encode(test_image, "JPEG")


@pytest.fixture
def red_pixel_png():
    """1x1 fully opaque red pixel"""
    return _encode(Image.new("RGBA", (1, 1), (255, 0, 0, 255)))


@pytest.fixture
def transparent_png():
    """2x2 fully transparent image"""
    return _encode(Image.new("RGBA", (2, 2), (0, 0, 0, 0)))


@pytest.fixture
def invalid_bytes():
    """Bytes that are not any image container"""
    return b"this is definitely not an image"


@pytest.fixture
def history_buffer():
    """Create HistoryBuffer instance for testing"""
    return HistoryBuffer(max_size=50)


@pytest.fixture
def codec_service(history_buffer):
    """Create CodecService instance for testing"""
    return CodecService(history_buffer=history_buffer)


@pytest.fixture
def image_service():
    """Create ImageService instance for testing"""
    return ImageService()
