# -*- coding: utf-8 -*-
"""Location: ./toonkit/util/strings.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

String quoting and escaping policy.

A string value is written bare whenever the decoder would read it back as the
same string, and quoted otherwise. Keys follow a narrower rule: they are bare
only when they look like identifiers (dots allowed, for folded keys).

Examples:
    >>> from toonkit.util.strings import encode_string, encode_key
    >>> encode_string("hello world")
    'hello world'
    >>> encode_string("a,b")
    '"a,b"'
    >>> encode_string("a,b", "|")
    'a,b'
    >>> encode_key("user.name"), encode_key("full name")
    ('user.name', '"full name"')
"""

# Standard
from typing import Optional

# First-Party
from toonkit.constants import (
    BACKSLASH,
    DEFAULT_DELIMITER,
    DOUBLE_QUOTE,
    ESCAPES,
    LEADING_ZERO_RE,
    LIST_ITEM_MARKER,
    NUMERIC_LIKE_RE,
    QUOTE_TRIGGER_CHARS,
    RESERVED_LITERALS,
    UNESCAPES,
    UNQUOTED_KEY_RE,
)
from toonkit.errors import ToonDecodeError


def is_safe_unquoted(value: str, delimiter: str = DEFAULT_DELIMITER) -> bool:
    """Determine if a string value can be written without quotes.

    A string must be quoted if it:
    - Is empty or has leading/trailing whitespace
    - Is one of the literals null, true, false
    - Looks like a number, including signed or zero-padded forms
    - Contains a colon, quote, backslash, bracket or brace
    - Contains a control character
    - Contains the active delimiter
    - Starts with the list item marker

    Args:
        value: String to check.
        delimiter: Active delimiter character.

    Returns:
        True if the string can be emitted bare.

    Examples:
        >>> is_safe_unquoted("hello")
        True
        >>> is_safe_unquoted("")
        False
        >>> is_safe_unquoted("true")
        False
        >>> is_safe_unquoted("1e5"), is_safe_unquoted("+7"), is_safe_unquoted("007")
        (False, False, False)
        >>> is_safe_unquoted("-dash")
        False
        >>> is_safe_unquoted("a|b"), is_safe_unquoted("a|b", "|")
        (True, False)
        >>> is_safe_unquoted("café au lait")
        True
    """
    if not value or value != value.strip():
        return False
    if value in RESERVED_LITERALS:
        return False
    if NUMERIC_LIKE_RE.fullmatch(value) or LEADING_ZERO_RE.fullmatch(value):
        return False
    if value.startswith(LIST_ITEM_MARKER):
        return False
    if delimiter in value:
        return False
    for char in value:
        if char in QUOTE_TRIGGER_CHARS or ord(char) < 0x20:
            return False
    return True


def is_valid_unquoted_key(key: str) -> bool:
    """Check whether a key can be written without quotes.

    Args:
        key: Object key.

    Returns:
        True if the key matches ``[A-Za-z_][A-Za-z0-9_.]*``.

    Examples:
        >>> is_valid_unquoted_key("_id"), is_valid_unquoted_key("a.b.c")
        (True, True)
        >>> is_valid_unquoted_key("1st"), is_valid_unquoted_key("")
        (False, False)
    """
    return UNQUOTED_KEY_RE.fullmatch(key) is not None


def escape(value: str) -> str:
    """Escape backslash, double quote, newline, carriage return and tab.

    Other control characters are kept as-is; they are only legal inside quotes.

    Args:
        value: Raw string.

    Returns:
        Escaped string without surrounding quotes.

    Examples:
        >>> print(escape('say "hi"'))
        say \\"hi\\"
        >>> escape("plain")
        'plain'
    """
    for raw, escaped in ESCAPES:
        value = value.replace(raw, escaped)
    return value


def unescape(value: str, strict: bool = True, line: Optional[int] = None) -> str:
    """Reverse :func:`escape`, also accepting ``\\b`` and ``\\f``.

    Args:
        value: Content of a quoted string, without the quotes.
        strict: Raise on unknown escape sequences instead of keeping them verbatim.
        line: Line number used in error messages.

    Returns:
        Unescaped string.

    Raises:
        ToonDecodeError: If strict and an escape sequence is invalid.

    Examples:
        >>> unescape(escape('tab\\there "q"')) == 'tab\\there "q"'
        True
        >>> unescape("a\\\\qb", strict=False)
        'a\\\\qb'
    """
    if BACKSLASH not in value:
        return value
    out = []
    i = 0
    length = len(value)
    while i < length:
        char = value[i]
        if char != BACKSLASH:
            out.append(char)
            i += 1
            continue
        if i + 1 >= length:
            if strict:
                raise ToonDecodeError("Unterminated escape sequence at end of string", line)
            out.append(char)
            break
        nxt = value[i + 1]
        if nxt in UNESCAPES:
            out.append(UNESCAPES[nxt])
        elif strict:
            raise ToonDecodeError(f"Invalid escape sequence: \\{nxt}", line)
        else:
            out.append(char + nxt)
        i += 2
    return "".join(out)


def quote(value: str) -> str:
    """Wrap a string in double quotes, escaping its content.

    Args:
        value: Raw string.

    Returns:
        Quoted string.

    Examples:
        >>> quote("")
        '""'
    """
    return f"{DOUBLE_QUOTE}{escape(value)}{DOUBLE_QUOTE}"


def encode_string(value: str, delimiter: str = DEFAULT_DELIMITER) -> str:
    """Encode a string value, quoting only when necessary.

    Args:
        value: String to encode.
        delimiter: Active delimiter character.

    Returns:
        TOON string representation.
    """
    if is_safe_unquoted(value, delimiter):
        return value
    return quote(value)


def encode_key(key: str) -> str:
    """Encode an object key, quoting it unless it is identifier-like.

    Args:
        key: Object key.

    Returns:
        TOON key representation.
    """
    if is_valid_unquoted_key(key):
        return key
    return quote(key)
