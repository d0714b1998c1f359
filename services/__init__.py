"""
Service layer for the Summer Toolbox backend.
"""

from .codec_service import CodecResult, CodecService
from .image_service import ImageService

__all__ = ["CodecResult", "CodecService", "ImageService"]
