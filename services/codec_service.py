"""
Codec Service - Business logic for text encoding tools.

Runs the text codecs and records every successful operation in the
history buffer, the way the toolbox UI keeps its recent conversions.
"""

import logging
from dataclasses import dataclass

from core import codecs
from core.constants import CodecConstants
from core.enums import CodecOperation
from core.history_buffer import HistoryBuffer

logger = logging.getLogger(__name__)


@dataclass
class CodecResult:
    """Outcome of a codec operation"""

    operation: CodecOperation
    input: str
    output: str
    history_id: str


class CodecService:
    """Service for text codec operations."""

    def __init__(self, history_buffer: HistoryBuffer):
        """
        Initialize codec service.

        Args:
            history_buffer: History buffer receiving successful operations
        """
        self.history_buffer = history_buffer

    def _record(self, operation: CodecOperation, input: str, output: str) -> CodecResult:
        history_id = self.history_buffer.add_record(operation, input, output)
        return CodecResult(operation=operation, input=input, output=output, history_id=history_id)

    def run(self, operation: CodecOperation, text: str) -> CodecResult:
        """
        Run a single-argument text codec.

        Raises:
            ValueError: If operation is not a text codec
            CodecError: If the input is rejected (nothing is recorded)
        """
        output = codecs.run_text_codec(operation, text)
        return self._record(operation, text, output)

    def encode_file(self, filename: str, data: bytes) -> CodecResult:
        """
        Base64-encode an uploaded file.

        The file name, not its content, is recorded as the history input.
        """
        output = codecs.base64_encode_bytes(data)
        logger.info(f"Base64-encoded file {filename} ({len(data)} bytes)")
        return self._record(CodecOperation.BASE64_FILE_ENCODE, filename, output)

    def format_json(
        self,
        text: str,
        indent: int = CodecConstants.JSON_DEFAULT_INDENT,
        sort_keys: bool = False,
    ) -> CodecResult:
        """Pretty-print JSON text."""
        output = codecs.json_format(text, indent=indent, sort_keys=sort_keys)
        return self._record(CodecOperation.JSON_FORMAT, text, output)

    def minify_json(self, text: str) -> CodecResult:
        """Minify JSON text."""
        output = codecs.json_minify(text)
        return self._record(CodecOperation.JSON_MINIFY, text, output)
