"""
History API Router - Codec operation history management
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_history_buffer
from api.exceptions import RecordNotFoundException, safe_endpoint
from core.constants import APIConstants, HistoryConstants
from core.enums import CodecOperation
from schemas import HistoryRecordModel, HistoryResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def _to_model(record) -> HistoryRecordModel:
    return HistoryRecordModel(
        id=record.id,
        timestamp=record.timestamp,
        operation=record.operation,
        input=record.input,
        output=record.output,
    )


@router.get("/recent")
@safe_endpoint
async def get_recent_history(
    limit: int = Query(
        HistoryConstants.DEFAULT_RECENT_LIMIT, ge=1, le=APIConstants.MAX_RECENT_LIMIT
    ),
    operation: Optional[CodecOperation] = Query(None),
    history_buffer=Depends(get_history_buffer),
) -> HistoryResponse:
    """Get recent codec operations, newest first"""
    records = history_buffer.get_recent(limit, operation)

    return HistoryResponse(
        records=[_to_model(r) for r in records],
        statistics=history_buffer.get_statistics(),
    )


@router.post("/clear")
@safe_endpoint
async def clear_history(history_buffer=Depends(get_history_buffer)) -> dict:
    """Clear all history"""
    history_buffer.clear()

    return {"success": True, "message": "History cleared"}


@router.get("/statistics")
@safe_endpoint
async def get_statistics(history_buffer=Depends(get_history_buffer)) -> dict:
    """Get history statistics"""
    return history_buffer.get_statistics()


@router.get("/export")
@safe_endpoint
async def export_history(history_buffer=Depends(get_history_buffer)) -> dict:
    """Export the full history with statistics"""
    return history_buffer.export_to_dict()


@router.get("/{record_id}")
@safe_endpoint
async def get_record(
    record_id: str, history_buffer=Depends(get_history_buffer)
) -> HistoryRecordModel:
    """Get a single history record"""
    record = history_buffer.get_record(record_id)
    if record is None:
        raise RecordNotFoundException(record_id)

    return _to_model(record)


@router.delete("/{record_id}")
@safe_endpoint
async def delete_record(record_id: str, history_buffer=Depends(get_history_buffer)) -> dict:
    """Delete a single history record"""
    if not history_buffer.delete_record(record_id):
        raise RecordNotFoundException(record_id)

    logger.info(f"Deleted history record {record_id}")
    return {"success": True, "id": record_id}
