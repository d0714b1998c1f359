"""
Constants and configuration values for the Summer Toolbox backend.
Centralizes all magic numbers and configuration constants.
"""


# Image Conversion Constants
class ImageConstants:
    """Constants related to image conversion."""

    # Encoder settings
    JPEG_QUALITY = 90
    ICO_MAX_DIMENSION = 256

    # Modes Pillow can resize with Lanczos without a palette round-trip
    RESIZABLE_MODES = ("RGB", "RGBA", "L", "LA")
    # 16-bit and wider single-channel modes, scaled down to 8-bit on decode
    WIDE_GRAYSCALE_MODES = ("I;16", "I;16L", "I;16B", "I;16N", "I", "F")
    WIDE_GRAYSCALE_MAX = 65535
    JPEG_MODES = ("RGB", "L", "CMYK")

    # SVG synthesis
    SVG_NAMESPACE = "http://www.w3.org/2000/svg"


# History Constants
class HistoryConstants:
    """Constants for the codec operation history."""

    DEFAULT_BUFFER_SIZE = 50
    MIN_BUFFER_SIZE = 1
    MAX_BUFFER_SIZE = 1000
    DEFAULT_RECENT_LIMIT = 10
    ID_PREFIX = "hist_"


# Codec Constants
class CodecConstants:
    """Constants for text codecs."""

    # Characters left untouched by URL encoding (RFC 3986 unreserved set,
    # quote() always keeps letters, digits and "_.-~")
    URL_SAFE_CHARS = ""
    UNICODE_ESCAPE_PREFIX = "\\u"
    UNICODE_ESCAPE_DIGITS = 4

    JSON_DEFAULT_INDENT = 2
    JSON_MAX_INDENT = 8


# API Constants
class APIConstants:
    """Constants for API endpoints."""

    DEFAULT_MAX_UPLOAD_MB = 50
    MAX_RECENT_LIMIT = 100


# System Constants
class SystemConstants:
    """Constants for system operations."""

    # Logging
    LOG_LEVEL_DEFAULT = "INFO"
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # Server
    DEFAULT_HOST = "127.0.0.1"
    DEFAULT_PORT = 8765
    DEFAULT_CORS_ORIGINS = [
        "tauri://localhost",
        "http://tauri.localhost",
        "http://localhost:1420",
    ]
