"""
Text codec API models.

This module contains request and response models for the encoder/decoder
and JSON formatter tools.
"""

from pydantic import BaseModel, Field

from core.constants import CodecConstants
from core.enums import CodecOperation


class CodecRequest(BaseModel):
    """Text to run through a codec"""

    text: str


class CodecResponse(BaseModel):
    """Result of a codec operation"""

    operation: CodecOperation
    input: str
    output: str
    history_id: str


class FileEncodeResponse(BaseModel):
    """Base64 encoding of an uploaded file"""

    filename: str
    size_bytes: int
    output: str
    history_id: str


class JsonFormatRequest(BaseModel):
    """JSON document to pretty-print"""

    text: str
    indent: int = Field(
        CodecConstants.JSON_DEFAULT_INDENT, ge=0, le=CodecConstants.JSON_MAX_INDENT
    )
    sort_keys: bool = False
