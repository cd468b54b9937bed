# -*- coding: utf-8 -*-
"""Location: ./toonkit/normalize.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Host value normalization.

Turns arbitrary Python objects into the value model the encoder accepts
(None, bool, int, float, Decimal, str, list, dict). Converters are tried in
order; the first one that recognizes the value wins.

Examples:
    >>> from datetime import date
    >>> from enum import Enum
    >>> class Color(Enum):
    ...     RED = "red"
    >>> normalize_value({"when": date(2025, 1, 2), "color": Color.RED, "ids": (1, 2)})
    {'when': '2025-01-02', 'color': 'red', 'ids': [1, 2]}
    >>> normalize_value(float("nan")) is None
    True
    >>> normalize_value(b"hi")
    'aGk='
"""

# Standard
import base64
from collections.abc import Iterable, Mapping
import dataclasses
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
import math
import numbers
from pathlib import PurePath
from typing import Any, Callable, List, Optional, Set, Tuple
import uuid

# Third-Party
from pydantic import BaseModel

# Marker returned by converters that do not handle a value
_SKIP = object()

Converter = Callable[[Any, Set[int]], Any]


def _normalize_scalar(value: Any, seen: Set[int]) -> Any:
    """Pass through scalars and enum values, mapping non-finite numbers to None.

    Args:
        value: Value to convert.
        seen: Ids of containers on the current path.

    Returns:
        Normalized scalar, or the skip marker.
    """
    if isinstance(value, Enum):
        return _normalize(value.value, seen)
    if value is None or isinstance(value, (bool, str)):
        return value
    if isinstance(value, int):
        return int(value)
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, Decimal):
        return value if value.is_finite() else None
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, numbers.Real):
        return _normalize_scalar(float(value), seen)
    return _SKIP


def _normalize_text_like(value: Any, seen: Set[int]) -> Any:
    """Render temporal, identifier, path and binary values as text.

    Args:
        value: Value to convert.
        seen: Ids of containers on the current path.

    Returns:
        Normalized value, or the skip marker.
    """
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, (uuid.UUID, PurePath)):
        return str(value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return base64.b64encode(bytes(value)).decode("ascii")
    return _SKIP


def _normalize_model(value: Any, seen: Set[int]) -> Any:
    """Dump pydantic models and dataclass instances to mappings.

    Args:
        value: Value to convert.
        seen: Ids of containers on the current path.

    Returns:
        Normalized mapping, or the skip marker.
    """
    if isinstance(value, BaseModel):
        return _normalize_container(value, value.model_dump(mode="python"), seen)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        fields = {field.name: getattr(value, field.name) for field in dataclasses.fields(value)}
        return _normalize_container(value, fields, seen)
    return _SKIP


def _normalize_collection(value: Any, seen: Set[int]) -> Any:
    """Convert mappings and other iterables.

    Args:
        value: Value to convert.
        seen: Ids of containers on the current path.

    Returns:
        Normalized dict or list, or the skip marker.
    """
    if isinstance(value, Mapping):
        return _normalize_container(value, value, seen)
    if isinstance(value, Iterable):
        return _normalize_container(value, list(value), seen)
    return _SKIP


def _normalize_object(value: Any, seen: Set[int]) -> Any:
    """Fall back to the public attributes of plain objects.

    Args:
        value: Value to convert.
        seen: Ids of containers on the current path.

    Returns:
        Normalized mapping, or the skip marker.
    """
    attributes = getattr(value, "__dict__", None)
    if isinstance(attributes, dict):
        public = {name: attr for name, attr in attributes.items() if not name.startswith("_")}
        return _normalize_container(value, public, seen)
    return _SKIP


_CONVERTERS: Tuple[Converter, ...] = (
    _normalize_scalar,
    _normalize_text_like,
    _normalize_model,
    _normalize_collection,
    _normalize_object,
)


def _normalize_container(owner: Any, content: Any, seen: Set[int]) -> Any:
    """Normalize the content of a container, guarding against cycles.

    Args:
        owner: Original container, used for cycle detection.
        content: Mapping or list holding the container's items.
        seen: Ids of containers on the current path.

    Returns:
        Normalized dict or list.

    Raises:
        ValueError: If the container contains itself.
    """
    marker = id(owner)
    if marker in seen:
        raise ValueError("Circular reference detected")
    seen.add(marker)
    try:
        if isinstance(content, Mapping):
            return {str(key): _normalize(item, seen) for key, item in content.items()}
        items: List[Any] = [_normalize(item, seen) for item in content]
        return items
    finally:
        seen.discard(marker)


def _normalize(value: Any, seen: Set[int]) -> Any:
    """Run the converter chain on one value.

    Args:
        value: Value to convert.
        seen: Ids of containers on the current path.

    Returns:
        Normalized value.

    Raises:
        TypeError: If no converter handles the value.
    """
    for converter in _CONVERTERS:
        result = converter(value, seen)
        if result is not _SKIP:
            return result
    raise TypeError(f"Object of type {type(value).__name__} is not TOON serializable")


def normalize_value(value: Any, seen: Optional[Set[int]] = None) -> Any:
    """Convert a host value into the TOON value model.

    Args:
        value: Any Python object.
        seen: Ids of containers already being normalized; callers normally omit it.

    Returns:
        Value built from None, bool, int, float, Decimal, str, list and dict.

    Raises:
        TypeError: If a value has no TOON representation.
        ValueError: If a container contains itself.

    Examples:
        >>> normalize_value({1: {"x", }})
        {'1': ['x']}
        >>> loop = []
        >>> loop.append(loop)
        >>> normalize_value(loop)
        Traceback (most recent call last):
        ...
        ValueError: Circular reference detected
    """
    return _normalize(value, set() if seen is None else seen)
