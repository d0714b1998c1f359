"""
System API models.
"""

from typing import Any, Dict

from pydantic import BaseModel


class SystemStatus(BaseModel):
    """System status"""

    status: str
    uptime: float
    memory_usage: Dict[str, float]
    history_usage: Dict[str, Any]


class DebugSettings(BaseModel):
    """Debug settings"""

    enabled: bool
    log_level: str
