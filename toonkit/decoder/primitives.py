# -*- coding: utf-8 -*-
"""Location: ./toonkit/decoder/primitives.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Scalar token parsing.
"""

# Standard
from typing import Optional

# First-Party
from toonkit.constants import DECODE_NUMBER_RE, DOUBLE_QUOTE, FALSE_LITERAL, NULL_LITERAL, TRUE_LITERAL
from toonkit.decoder.scanner import find_closing_quote
from toonkit.errors import ToonDecodeError, UnterminatedQuoteError
from toonkit.util.strings import unescape
from toonkit.values import JsonPrimitive

_LITERALS = {NULL_LITERAL: None, TRUE_LITERAL: True, FALSE_LITERAL: False}


def parse_primitive(token: str, strict: bool = True, line: Optional[int] = None) -> JsonPrimitive:
    """Infer the scalar value of a token.

    Literals come first, then quoted strings, then numbers; anything else is
    returned verbatim as a string. An empty token is the empty string.

    Args:
        token: Raw token text.
        strict: Reject bad escapes and text after a closing quote.
        line: Line number used in error messages.

    Returns:
        None, bool, int, float or str.

    Raises:
        UnterminatedQuoteError: If a quoted token has no closing quote.
        ToonDecodeError: In strict mode, on malformed quoted tokens.

    Examples:
        >>> parse_primitive("null"), parse_primitive("true"), parse_primitive("42")
        (None, True, 42)
        >>> parse_primitive("-1.5e2"), parse_primitive('"42"'), parse_primitive("")
        (-150.0, '42', '')
        >>> parse_primitive("05"), parse_primitive("1_000"), parse_primitive("hello world")
        ('05', '1_000', 'hello world')
    """
    token = token.strip()
    if not token:
        return ""
    if token in _LITERALS:
        return _LITERALS[token]
    if token.startswith(DOUBLE_QUOTE):
        end = find_closing_quote(token, 0)
        if end == -1:
            raise UnterminatedQuoteError(f"Unterminated string: {token}", line)
        if end != len(token) - 1:
            if strict:
                raise ToonDecodeError(f"Unexpected characters after closing quote: {token}", line)
            return token
        return unescape(token[1:end], strict, line)
    if DECODE_NUMBER_RE.fullmatch(token):
        if any(char in token for char in ".eE"):
            return float(token)
        return int(token)
    return token
