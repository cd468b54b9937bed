# -*- coding: utf-8 -*-
"""Location: ./toonkit/codec.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

TOON (Token-Oriented Object Notation) encode/decode entry points.

TOON is a compact, indentation-based encoding of the JSON data model designed
for LLM prompts. Uniform arrays of objects become CSV-like tables, scalar
arrays fit on one line, and strings are quoted only when they would be
ambiguous.

Examples:
    >>> from toonkit.codec import encode, decode
    >>> data = {"users": [{"id": 1, "name": "Alice", "role": "admin"}, {"id": 2, "name": "Bob", "role": "user"}]}
    >>> print(encode(data))
    users[2]{id,name,role}:
      1,Alice,admin
      2,Bob,user
    >>> decode(encode(data)) == data
    True
    >>> decode("[invalid]", {"strict": False})
    []
"""

# Standard
import logging
from typing import Any, Tuple

# Third-Party
import orjson

# First-Party
from toonkit.constants import OPEN_BRACKET
from toonkit.decoder import decode_text
from toonkit.encoder import encode_value
from toonkit.errors import InvalidJsonError, ToonDecodeError, ToonEncodeError
from toonkit.normalize import normalize_value
from toonkit.options import DecodeOptions, DecodeOptionsLike, EncodeOptionsLike, resolve_decode_options, resolve_encode_options
from toonkit.values import JsonValue

logger = logging.getLogger(__name__)


def encode(value: Any, options: EncodeOptionsLike = None) -> str:
    """Encode a Python value to TOON.

    Args:
        value: Any value :func:`toonkit.normalize.normalize_value` accepts.
        options: EncodeOptions, a mapping of option fields, or None for settings defaults.

    Returns:
        TOON document text.

    Raises:
        TypeError: If the value has no TOON representation.
        ValueError: If the value contains a reference cycle.
        ToonEncodeError: If the value is nested too deeply to encode.

    Examples:
        >>> encode({"a": {"b": {"c": 123}}}, {"flatten": True})
        'a.b.c: 123'
        >>> encode([1, 2, 3], {"delimiter": "tab", "length_marker": True})
        '[#3\\t]: 1\\t2\\t3'
        >>> encode("hello")
        'hello'
    """
    resolved = resolve_encode_options(options)
    try:
        return encode_value(normalize_value(value), resolved)
    except RecursionError as exc:
        raise ToonEncodeError("Value is nested too deeply to encode") from exc


def decode(text: str, options: DecodeOptionsLike = None) -> JsonValue:
    """Decode TOON text to a Python value.

    In strict mode the first error is raised. In lenient mode malformed lines
    are skipped, and a document that still cannot be decoded yields ``[]`` if
    it starts with ``[`` and ``{}`` otherwise.

    Args:
        text: TOON document.
        options: DecodeOptions, a mapping of option fields, or None for settings defaults.

    Returns:
        Decoded value.

    Raises:
        ToonDecodeError: On malformed or too deeply nested input in strict mode.

    Examples:
        >>> decode("tags[2]: reading,gaming")
        {'tags': ['reading', 'gaming']}
        >>> decode("")
        {}
        >>> decode("42")
        42
    """
    resolved = resolve_decode_options(options)
    try:
        return _decode_bounded(text, resolved)
    except ToonDecodeError as exc:
        if resolved.strict:
            raise
        fallback: JsonValue = [] if text.lstrip().startswith(OPEN_BRACKET) else {}
        logger.warning("Discarding undecodable TOON document: %s", exc)
        return fallback


def _decode_bounded(text: str, options: DecodeOptions) -> JsonValue:
    """Decode a document, reporting runaway nesting as a decode error.

    Args:
        text: TOON document.
        options: Resolved decoding options.

    Returns:
        Decoded value.

    Raises:
        ToonDecodeError: On malformed input or nesting deeper than the interpreter stack allows.
    """
    try:
        return decode_text(text, options)
    except RecursionError as exc:
        raise ToonDecodeError("Document is nested too deeply to decode") from exc


def encode_json(json_text: str, options: EncodeOptionsLike = None) -> str:
    """Encode a JSON document to TOON.

    Args:
        json_text: JSON text.
        options: Encoding options.

    Returns:
        TOON document text.

    Raises:
        InvalidJsonError: If ``json_text`` is not valid JSON.

    Examples:
        >>> encode_json('{"tags": ["a", "b"]}')
        'tags[2]: a,b'
    """
    try:
        value = orjson.loads(json_text)
    except orjson.JSONDecodeError as exc:
        raise InvalidJsonError(f"Invalid JSON input: {exc}") from exc
    return encode(value, options)


def decode_to_json(text: str, options: DecodeOptionsLike = None, *, pretty: bool = False) -> str:
    """Decode TOON text and serialize the result as JSON.

    Integers are limited to the range orjson can write, -2**63 through
    2**64 - 1. Larger integers decode fine but fail here.

    Args:
        text: TOON document.
        options: Decoding options.
        pretty: Indent the JSON output by two spaces.

    Returns:
        JSON text.

    Raises:
        ToonEncodeError: If the decoded value cannot be serialized as JSON,
            including integers outside the 64-bit range.

    Examples:
        >>> decode_to_json("a: 1\\nb[2]: x,y")
        '{"a":1,"b":["x","y"]}'
    """
    value = decode(text, options)
    try:
        payload = orjson.dumps(value, option=orjson.OPT_INDENT_2 if pretty else 0)
    except orjson.JSONEncodeError as exc:
        raise ToonEncodeError(f"Decoded value is not JSON serializable: {exc}") from exc
    return payload.decode("utf-8")


def estimate_token_savings(json_text: str) -> Tuple[int, int, float]:
    """Estimate token savings from JSON to TOON conversion.

    This is a rough estimate based on byte count, not actual tokenization.
    Actual savings depend on the specific tokenizer used.

    Args:
        json_text: Original JSON string.

    Returns:
        Tuple of (json_bytes, toon_bytes, savings_percent).

    Examples:
        >>> json_len, toon_len, savings = estimate_token_savings('{"users": [{"id": 1, "name": "alice"}, {"id": 2, "name": "bob"}]}')
        >>> savings > 0
        True
        >>> estimate_token_savings("not json")
        (8, 8, 0.0)
    """
    try:
        toon_text = encode_json(json_text)
    except (InvalidJsonError, TypeError, ValueError) as exc:
        logger.debug("Token savings estimate skipped: %s", exc)
        return (len(json_text), len(json_text), 0.0)
    json_len = len(json_text.encode("utf-8"))
    toon_len = len(toon_text.encode("utf-8"))
    savings = ((json_len - toon_len) / json_len) * 100 if json_len > 0 else 0.0
    return (json_len, toon_len, savings)
