# -*- coding: utf-8 -*-
"""Location: ./toonkit/encoder/headers.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Array header rendering: ``key[#N<delim>]{f1<delim>f2}:``.
"""

# Standard
from typing import Optional, Sequence

# First-Party
from toonkit.constants import CLOSE_BRACE, CLOSE_BRACKET, COLON, DEFAULT_DELIMITER, LENGTH_MARKER, OPEN_BRACE, OPEN_BRACKET
from toonkit.util.strings import encode_key


def format_header(
    length: int,
    key: Optional[str] = None,
    fields: Optional[Sequence[str]] = None,
    delimiter: str = DEFAULT_DELIMITER,
    length_marker: bool = False,
) -> str:
    """Render an array header.

    The delimiter is written inside the brackets only when it is not the
    default comma. Field names are key-encoded and joined with the delimiter.

    Args:
        length: Number of array elements.
        key: Owning object key, or None for root and list item arrays.
        fields: Tabular field names, or None.
        delimiter: Active delimiter character.
        length_marker: Prefix the length with ``#``.

    Returns:
        Header text ending in ``:``.

    Examples:
        >>> format_header(3, "tags")
        'tags[3]:'
        >>> format_header(2, "users", ["id", "name"])
        'users[2]{id,name}:'
        >>> format_header(2, None, ["a", "b"], "|", True)
        '[#2|]{a|b}:'
        >>> format_header(1, "my key")
        '"my key"[1]:'
    """
    parts = []
    if key is not None:
        parts.append(encode_key(key))
    parts.append(OPEN_BRACKET)
    if length_marker:
        parts.append(LENGTH_MARKER)
    parts.append(str(length))
    if delimiter != DEFAULT_DELIMITER:
        parts.append(delimiter)
    parts.append(CLOSE_BRACKET)
    if fields:
        parts.append(OPEN_BRACE + delimiter.join(encode_key(field) for field in fields) + CLOSE_BRACE)
    parts.append(COLON)
    return "".join(parts)
