"""
History Buffer - Circular buffer for codec operation history
"""

import logging
import uuid
from collections import Counter, deque
from dataclasses import dataclass
from datetime import datetime
from threading import RLock
from typing import Any, Dict, List, Optional

from core.constants import HistoryConstants
from core.enums import CodecOperation

logger = logging.getLogger(__name__)


@dataclass
class HistoryRecord:
    """Single codec operation record"""

    id: str
    timestamp: datetime
    operation: CodecOperation
    input: str
    output: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "timestamp": self.timestamp.isoformat(),
            "operation": self.operation.value,
            "input": self.input,
            "output": self.output,
        }


class HistoryBuffer:
    """Circular buffer keeping the most recent codec operations"""

    def __init__(self, max_size: int = HistoryConstants.DEFAULT_BUFFER_SIZE):
        """
        Initialize History Buffer

        Args:
            max_size: Maximum number of records to keep; the oldest record is
                dropped when a new one is added to a full buffer
        """
        self.max_size = max_size
        self.buffer: deque = deque(maxlen=max_size)

        # Statistics (not reduced by eviction)
        self.total_operations = 0

        # Thread safety (RLock allows reentrant locking)
        self.lock = RLock()

        logger.info(f"History Buffer initialized with max size: {max_size}")

    def add_record(self, operation: CodecOperation, input: str, output: str) -> str:
        """
        Add an operation record to history

        Args:
            operation: Codec operation that produced the output
            input: Operation input (file name for file encodes)
            output: Operation output

        Returns:
            Record ID
        """
        with self.lock:
            record_id = f"{HistoryConstants.ID_PREFIX}{uuid.uuid4().hex[:8]}"

            record = HistoryRecord(
                id=record_id,
                timestamp=datetime.now(),
                operation=operation,
                input=input,
                output=output,
            )

            self.buffer.append(record)
            self.total_operations += 1

            logger.debug(f"Added history record {record_id}: {operation.value}")
            return record_id

    def get_record(self, record_id: str) -> Optional[HistoryRecord]:
        """Get specific record by ID"""
        with self.lock:
            for record in self.buffer:
                if record.id == record_id:
                    return record
        return None

    def get_recent(
        self,
        limit: int = HistoryConstants.DEFAULT_RECENT_LIMIT,
        operation_filter: Optional[CodecOperation] = None,
    ) -> List[HistoryRecord]:
        """
        Get recent records, newest first

        Args:
            limit: Maximum number of records to return
            operation_filter: Only return records of this operation

        Returns:
            List of history records
        """
        with self.lock:
            records = list(reversed(self.buffer))

            if operation_filter:
                records = [r for r in records if r.operation == operation_filter]

            return records[:limit]

    def delete_record(self, record_id: str) -> bool:
        """
        Delete a single record

        Returns:
            True if the record existed
        """
        with self.lock:
            for record in self.buffer:
                if record.id == record_id:
                    self.buffer.remove(record)
                    logger.debug(f"Deleted history record {record_id}")
                    return True
        return False

    def get_statistics(self) -> Dict[str, Any]:
        """Get history statistics"""
        with self.lock:
            per_operation = Counter(r.operation.value for r in self.buffer)

            return {
                "total": self.total_operations,
                "buffer_usage": len(self.buffer),
                "buffer_max": self.max_size,
                "by_operation": dict(per_operation),
                "last_operation_at": (
                    self.buffer[-1].timestamp.isoformat() if self.buffer else None
                ),
            }

    def clear(self):
        """Clear all history"""
        with self.lock:
            self.buffer.clear()
            self.total_operations = 0

            logger.info("History buffer cleared")

    def export_to_dict(self) -> Dict[str, Any]:
        """Export history to dictionary, newest first"""
        with self.lock:
            return {
                "records": [r.to_dict() for r in reversed(self.buffer)],
                "statistics": self.get_statistics(),
            }
