"""
API Routers for the Summer Toolbox backend
"""

from . import codec, formatter, history, image, system

__all__ = ["codec", "formatter", "history", "image", "system"]
