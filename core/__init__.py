"""
Core modules for Summer Toolbox
"""

from .history_buffer import HistoryBuffer, HistoryRecord

__all__ = [
    "HistoryBuffer",
    "HistoryRecord",
]
