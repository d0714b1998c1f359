"""
Text codecs.

Stateless string conversions used by the encoder/decoder tools:
- URL percent-encoding
- Unicode escape sequences (\\uXXXX)
- Base64 (standard alphabet, padded, UTF-8 payloads)
- HTML entities
- JSON pretty-printing and minification

Every decoder raises CodecError on malformed input; nothing is silently
replaced.
"""

import base64
import binascii
import html
import json
import logging
import string
from typing import Callable, Dict
from urllib.parse import quote, unquote

from core.constants import CodecConstants
from core.enums import CodecOperation
from core.exceptions import CodecError

logger = logging.getLogger(__name__)

_HEX_DIGITS = set(string.hexdigits)


# URL
def url_encode(text: str) -> str:
    """Percent-encode everything except ASCII letters, digits and "-_.~"."""
    try:
        return quote(text, safe=CodecConstants.URL_SAFE_CHARS)
    except UnicodeEncodeError as e:
        raise CodecError(CodecOperation.URL_ENCODE, f"Text is not encodable as UTF-8: {e}") from e


def url_decode(text: str) -> str:
    """
    Decode percent-escapes. "+" is left as-is and malformed escapes are
    kept literally.

    Raises:
        CodecError: If the decoded bytes are not valid UTF-8
    """
    try:
        return unquote(text, encoding="utf-8", errors="strict")
    except UnicodeDecodeError as e:
        raise CodecError(CodecOperation.URL_DECODE, f"Invalid UTF-8 sequence: {e}") from e


# Unicode escapes
def unicode_encode(text: str) -> str:
    """
    Escape every character as \\uXXXX (upper-case hex).

    Characters outside the BMP are written as a UTF-16 surrogate pair so the
    output can be decoded again.
    This deliberately differs from tools that emit the bare code point
    (\\u1F600 for U+1F600), which no \\uXXXX decoder can read back.
    """
    escaped = []
    for char in text:
        code_point = ord(char)
        if code_point > 0xFFFF:
            code_point -= 0x10000
            units = (0xD800 + (code_point >> 10), 0xDC00 + (code_point & 0x3FF))
        else:
            units = (code_point,)
        escaped.extend(f"\\u{unit:04X}" for unit in units)
    return "".join(escaped)


def _read_escape(text: str, pos: int) -> int:
    """Read the 4 hex digits following a \\u at pos; return the code unit."""
    start = pos + len(CodecConstants.UNICODE_ESCAPE_PREFIX)
    digits = text[start : start + CodecConstants.UNICODE_ESCAPE_DIGITS]
    if len(digits) < CodecConstants.UNICODE_ESCAPE_DIGITS:
        raise CodecError(CodecOperation.UNICODE_DECODE, "Incomplete unicode escape sequence")
    if not all(c in _HEX_DIGITS for c in digits):
        raise CodecError(CodecOperation.UNICODE_DECODE, f"Invalid hex digits: {digits}")
    return int(digits, 16)


def unicode_decode(text: str) -> str:
    """
    Replace \\uXXXX escapes with their characters; other text passes through.

    Raises:
        CodecError: On truncated escapes, non-hex digits or unpaired
            surrogates
    """
    prefix = CodecConstants.UNICODE_ESCAPE_PREFIX
    step = len(prefix) + CodecConstants.UNICODE_ESCAPE_DIGITS
    result = []
    pos = 0

    while pos < len(text):
        if not text.startswith(prefix, pos):
            result.append(text[pos])
            pos += 1
            continue

        unit = _read_escape(text, pos)
        pos += step

        if 0xD800 <= unit <= 0xDBFF and text.startswith(prefix, pos):
            low = _read_escape(text, pos)
            if 0xDC00 <= low <= 0xDFFF:
                result.append(chr(0x10000 + ((unit - 0xD800) << 10) + (low - 0xDC00)))
                pos += step
                continue

        if 0xD800 <= unit <= 0xDFFF:
            raise CodecError(
                CodecOperation.UNICODE_DECODE, f"Invalid unicode code point: U+{unit:04X}"
            )
        result.append(chr(unit))

    return "".join(result)


# Base64
def base64_encode(text: str) -> str:
    """Base64-encode the UTF-8 bytes of text."""
    try:
        data = text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise CodecError(
            CodecOperation.BASE64_ENCODE, f"Text is not encodable as UTF-8: {e}"
        ) from e
    return base64_encode_bytes(data)


def base64_encode_bytes(data: bytes) -> str:
    """Base64-encode raw bytes (no data URL prefix)."""
    return base64.b64encode(data).decode("ascii")


def base64_decode(text: str) -> str:
    """
    Decode standard, padded Base64 into a UTF-8 string.

    Raises:
        CodecError: On characters outside the alphabet, bad padding or a
            payload that is not UTF-8 text
    """
    try:
        data = base64.b64decode(text, validate=True)
    except binascii.Error as e:
        raise CodecError(CodecOperation.BASE64_DECODE, f"Invalid base64 input: {e}") from e

    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise CodecError(
            CodecOperation.BASE64_DECODE, f"Decoded data is not valid UTF-8: {e}"
        ) from e


# HTML entities
def html_encode(text: str) -> str:
    """Escape &, <, >, double and single quotes."""
    return html.escape(text, quote=True)


def html_decode(text: str) -> str:
    """Resolve named and numeric character references."""
    return html.unescape(text)


# JSON
def _load_json(text: str, operation: CodecOperation):
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise CodecError(operation, f"Invalid JSON: {e}") from e


def json_format(
    text: str, indent: int = CodecConstants.JSON_DEFAULT_INDENT, sort_keys: bool = False
) -> str:
    """
    Pretty-print a JSON document.

    Args:
        text: JSON source
        indent: Spaces per level; 0 produces single-line output
        sort_keys: Sort object keys at every level

    Raises:
        CodecError: If text is not valid JSON
    """
    if not 0 <= indent <= CodecConstants.JSON_MAX_INDENT:
        raise CodecError(
            CodecOperation.JSON_FORMAT,
            f"Indent must be between 0 and {CodecConstants.JSON_MAX_INDENT}",
        )
    data = _load_json(text, CodecOperation.JSON_FORMAT)
    return json.dumps(data, indent=indent or None, sort_keys=sort_keys, ensure_ascii=False)


def json_minify(text: str) -> str:
    """Re-serialize a JSON document without insignificant whitespace."""
    data = _load_json(text, CodecOperation.JSON_MINIFY)
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)


TEXT_CODECS: Dict[CodecOperation, Callable[[str], str]] = {
    CodecOperation.URL_ENCODE: url_encode,
    CodecOperation.URL_DECODE: url_decode,
    CodecOperation.UNICODE_ENCODE: unicode_encode,
    CodecOperation.UNICODE_DECODE: unicode_decode,
    CodecOperation.BASE64_ENCODE: base64_encode,
    CodecOperation.BASE64_DECODE: base64_decode,
    CodecOperation.HTML_ENCODE: html_encode,
    CodecOperation.HTML_DECODE: html_decode,
}


def run_text_codec(operation: CodecOperation, text: str) -> str:
    """
    Apply a single-argument text codec.

    Raises:
        ValueError: If operation does not take a plain text argument
        CodecError: If the codec rejects the input
    """
    codec = TEXT_CODECS.get(operation)
    if codec is None:
        raise ValueError(f"{operation.value} is not a text codec operation")

    output = codec(text)
    logger.debug(f"{operation.value}: {len(text)} chars -> {len(output)} chars")
    return output
