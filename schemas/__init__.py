"""
Schemas Package

This package contains all Pydantic schemas for request validation and
response serialization, organized by domain.
"""

# Re-export enums from centralized location for convenience
from core.enums import CodecOperation, ImageFormat

# Codec models
from .codec import CodecRequest, CodecResponse, FileEncodeResponse, JsonFormatRequest

# History models
from .history import HistoryRecordModel, HistoryResponse

# Image models
from .image import ImageConvertRequest, ImageConvertResponse, ImageFormatInfo

# System models
from .system import DebugSettings, SystemStatus

# Explicitly declare public API for re-export
__all__ = [
    # Codec models
    "CodecRequest",
    "CodecResponse",
    "FileEncodeResponse",
    "JsonFormatRequest",
    # History models
    "HistoryRecordModel",
    "HistoryResponse",
    # Image models
    "ImageConvertRequest",
    "ImageConvertResponse",
    "ImageFormatInfo",
    # System models
    "DebugSettings",
    "SystemStatus",
    # Enums (re-exported from core.enums)
    "CodecOperation",
    "ImageFormat",
]
