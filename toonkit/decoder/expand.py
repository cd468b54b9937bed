# -*- coding: utf-8 -*-
"""Location: ./toonkit/decoder/expand.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Dotted key expansion, the decode-side inverse of key folding.

Examples:
    >>> target = {}
    >>> insert_value(target, split_expandable_key("a.b.c"), 1)
    >>> insert_value(target, split_expandable_key("a.b.d"), 2)
    >>> target
    {'a': {'b': {'c': 1, 'd': 2}}}
    >>> split_expandable_key("a.b-c") is None
    True
"""

# Standard
import logging
from typing import Any, Dict, List, Optional, Sequence

# First-Party
from toonkit.constants import IDENTIFIER_SEGMENT_RE
from toonkit.errors import PathExpansionError
from toonkit.values import is_object

logger = logging.getLogger(__name__)


def split_expandable_key(key: str) -> Optional[List[str]]:
    """Split a dotted key whose segments are all identifiers.

    Args:
        key: Unquoted object key.

    Returns:
        Segments, or None if the key has no dot or a segment is not an identifier.

    Examples:
        >>> split_expandable_key("user.name"), split_expandable_key("name")
        (['user', 'name'], None)
        >>> split_expandable_key("a..b") is None
        True
    """
    if "." not in key:
        return None
    segments = key.split(".")
    if all(IDENTIFIER_SEGMENT_RE.fullmatch(segment) for segment in segments):
        return segments
    return None


def insert_value(target: Dict[str, Any], segments: Sequence[str], value: Any, strict: bool = True, line: Optional[int] = None) -> None:
    """Insert a value at a key path, creating and merging objects on the way.

    Args:
        target: Object to insert into.
        segments: Key path.
        value: Value to store at the end of the path.
        strict: Raise on conflicts instead of letting the new value win.
        line: Line number used in error messages.

    Raises:
        PathExpansionError: In strict mode, when the path crosses a non-object
            or an object would collide with a non-object.

    Examples:
        >>> target = {"a": 1}
        >>> insert_value(target, ["a", "b"], 2)
        Traceback (most recent call last):
        ...
        toonkit.errors.PathExpansionError: Cannot expand 'a.b': 'a' already holds a non-object value
        >>> insert_value(target, ["a", "b"], 2, strict=False)
        >>> target
        {'a': {'b': 2}}
    """
    node = target
    for index, segment in enumerate(segments[:-1]):
        if segment not in node:
            node[segment] = {}
        elif not is_object(node[segment]):
            path = ".".join(segments[: index + 1])
            if strict:
                raise PathExpansionError(f"Cannot expand '{'.'.join(segments)}': '{path}' already holds a non-object value", line)
            logger.debug("Overwriting %s while expanding %s", path, ".".join(segments))
            node[segment] = {}
        node = node[segment]

    last = segments[-1]
    if last in node:
        existing = node[last]
        if is_object(existing) and is_object(value):
            merge_objects(existing, value, strict, line)
            return
        if strict:
            raise PathExpansionError(f"Cannot expand '{'.'.join(segments)}': key already holds a value", line)
        logger.debug("Overwriting %s during path expansion", ".".join(segments))
    node[last] = value


def merge_objects(target: Dict[str, Any], source: Dict[str, Any], strict: bool = True, line: Optional[int] = None) -> None:
    """Deep-merge ``source`` into ``target``.

    Args:
        target: Object receiving the fields.
        source: Object providing the fields.
        strict: Raise on conflicts instead of letting ``source`` win.
        line: Line number used in error messages.
    """
    for key, value in source.items():
        insert_value(target, [key], value, strict, line)
