# -*- coding: utf-8 -*-
"""Location: ./toonkit/encoder/primitives.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Scalar encoding.
"""

# Standard
from typing import Any, Iterable

# First-Party
from toonkit.constants import DEFAULT_DELIMITER, FALSE_LITERAL, NULL_LITERAL, TRUE_LITERAL
from toonkit.errors import ToonEncodeError
from toonkit.util.numbers import format_number
from toonkit.util.strings import encode_string
from toonkit.values import is_number


def encode_primitive(value: Any, delimiter: str = DEFAULT_DELIMITER) -> str:
    """Encode a scalar value.

    Args:
        value: None, bool, number or string.
        delimiter: Active delimiter, which forces quoting of strings containing it.

    Returns:
        TOON scalar text.

    Raises:
        ToonEncodeError: If the value is not a scalar.

    Examples:
        >>> encode_primitive(None), encode_primitive(False), encode_primitive(1.50)
        ('null', 'false', '1.5')
        >>> encode_primitive("null")
        '"null"'
    """
    if value is None:
        return NULL_LITERAL
    if isinstance(value, bool):
        return TRUE_LITERAL if value else FALSE_LITERAL
    if is_number(value):
        return format_number(value)
    if isinstance(value, str):
        return encode_string(value, delimiter)
    raise ToonEncodeError(f"Object of type {type(value).__name__} is not a TOON primitive")


def join_encoded_values(values: Iterable[Any], delimiter: str = DEFAULT_DELIMITER) -> str:
    """Encode scalars and join them with the delimiter.

    Args:
        values: Scalar values.
        delimiter: Active delimiter character.

    Returns:
        Delimited text.

    Examples:
        >>> join_encoded_values([1, "a b", True, "x,y"])
        '1,a b,true,"x,y"'
        >>> join_encoded_values(["x,y", "z"], "|")
        'x,y|z'
    """
    return delimiter.join(encode_primitive(value, delimiter) for value in values)
