# -*- coding: utf-8 -*-
"""Location: ./toonkit/values.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Value model shared by the encoder and the decoder.

A TOON value is plain Python data: ``None``, ``bool``, ``int``/``float``/
``Decimal``, ``str``, ``list`` and ``dict`` with string keys. The helpers
below classify values the same way on both sides of the codec.

Examples:
    >>> is_primitive(None), is_primitive(True), is_primitive("x"), is_primitive([])
    (True, True, True, False)
    >>> is_array_of_primitives([1, "a", None])
    True
    >>> is_array_of_arrays([[1], []])
    True
    >>> is_array_of_objects([{"a": 1}, {}])
    True
"""

# Standard
from decimal import Decimal
from typing import Any, Dict, List, Union

JsonPrimitive = Union[str, int, float, Decimal, bool, None]
JsonObject = Dict[str, Any]
JsonArray = List[Any]
JsonValue = Union[JsonPrimitive, JsonArray, JsonObject]

# Indentation depth of an output or input line
Depth = int


def is_primitive(value: Any) -> bool:
    """Return True for scalar values (null, bool, number, string).

    Args:
        value: Value to classify.

    Returns:
        True if the value is a TOON scalar.
    """
    return value is None or isinstance(value, (str, bool, int, float, Decimal))


def is_number(value: Any) -> bool:
    """Return True for numbers, never for booleans.

    Args:
        value: Value to classify.

    Returns:
        True if the value is an ``int``, ``float`` or ``Decimal``.

    Examples:
        >>> is_number(1), is_number(1.5), is_number(True)
        (True, True, False)
    """
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


def is_array(value: Any) -> bool:
    """Return True for lists."""
    return isinstance(value, list)


def is_object(value: Any) -> bool:
    """Return True for dicts."""
    return isinstance(value, dict)


def is_array_of_primitives(value: Any) -> bool:
    """Return True if value is a list whose items are all scalars."""
    return is_array(value) and all(is_primitive(item) for item in value)


def is_array_of_arrays(value: Any) -> bool:
    """Return True if value is a list whose items are all lists."""
    return is_array(value) and all(is_array(item) for item in value)


def is_array_of_objects(value: Any) -> bool:
    """Return True if value is a list whose items are all dicts."""
    return is_array(value) and all(is_object(item) for item in value)
