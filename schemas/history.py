"""
History API models.
"""

from datetime import datetime
from typing import Any, Dict, List

from pydantic import BaseModel

from core.enums import CodecOperation


class HistoryRecordModel(BaseModel):
    """Single codec operation record"""

    id: str
    timestamp: datetime
    operation: CodecOperation
    input: str
    output: str


class HistoryResponse(BaseModel):
    """Recent history with statistics"""

    records: List[HistoryRecordModel]
    statistics: Dict[str, Any]
