# -*- coding: utf-8 -*-
"""Location: ./toonkit/encoder/arrays.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Array encoding.

An array is rendered with exactly one strategy, picked in this order:

1. All scalars: inline ``key[N]: v1,v2,v3``
2. All arrays of scalars: one ``- [M]: ...`` line per element
3. Uniform objects with scalar values: tabular ``key[N]{f1,f2}:`` plus one row per element
4. Anything else: list items, one ``- `` entry per element

Examples:
    >>> from toonkit.encoder.writer import LineWriter
    >>> from toonkit.options import EncodeOptions
    >>> writer = LineWriter(2)
    >>> encode_array("users", [{"id": 1, "name": "Alice"}, {"name": "Bob", "id": 2}], writer, 0, EncodeOptions())
    >>> print(writer.to_string())
    users[2]{id,name}:
      1,Alice
      2,Bob
"""

# Standard
import logging
from typing import Any, Dict, List, Optional, Sequence

# First-Party
from toonkit.constants import SPACE
from toonkit.encoder import objects
from toonkit.encoder.headers import format_header
from toonkit.encoder.primitives import encode_primitive, join_encoded_values
from toonkit.encoder.writer import LineWriter
from toonkit.options import EncodeOptions
from toonkit.values import Depth, is_array, is_array_of_arrays, is_array_of_objects, is_array_of_primitives, is_object, is_primitive

logger = logging.getLogger(__name__)


def encode_array(key: Optional[str], value: List[Any], writer: LineWriter, depth: Depth, options: EncodeOptions) -> None:
    """Encode an array, choosing the most compact strategy.

    Args:
        key: Owning object key, or None for root and list item arrays.
        value: Array to encode.
        writer: Output buffer.
        depth: Indentation level of the header line.
        options: Encoding options.
    """
    delimiter = options.delimiter.value

    if is_array_of_primitives(value):
        writer.push(depth, encode_inline_array_line(value, delimiter, key, options.length_marker))
        return

    if is_array_of_arrays(value) and all(is_array_of_primitives(item) for item in value):
        encode_array_of_arrays_as_list_items(key, value, writer, depth, options)
        return

    if is_array_of_objects(value):
        header = detect_tabular_header(value)
        if header:
            encode_array_of_objects_as_tabular(key, value, header, writer, depth, options)
            return
        logger.debug("Array %r is not tabular, using list items", key)

    encode_mixed_array_as_list_items(key, value, writer, depth, options)


def encode_inline_array_line(value: Sequence[Any], delimiter: str, key: Optional[str] = None, length_marker: bool = False) -> str:
    """Render a scalar array on a single line.

    Args:
        value: Scalar values.
        delimiter: Active delimiter character.
        key: Owning object key, if any.
        length_marker: Prefix the length with ``#``.

    Returns:
        Header followed by the joined values; header only when empty.

    Examples:
        >>> encode_inline_array_line(["reading", "gaming"], ",", "tags")
        'tags[2]: reading,gaming'
        >>> encode_inline_array_line([], ",", "tags")
        'tags[0]:'
        >>> encode_inline_array_line([1, 2], "|", None, True)
        '[#2|]: 1|2'
    """
    header = format_header(len(value), key, None, delimiter, length_marker)
    if not value:
        return header
    return header + SPACE + join_encoded_values(value, delimiter)


def encode_array_of_arrays_as_list_items(key: Optional[str], value: List[List[Any]], writer: LineWriter, depth: Depth, options: EncodeOptions) -> None:
    """Encode an array whose elements are all scalar arrays.

    Args:
        key: Owning object key, if any.
        value: Array of scalar arrays.
        writer: Output buffer.
        depth: Indentation level of the header line.
        options: Encoding options.

    Examples:
        >>> from toonkit.options import EncodeOptions
        >>> writer = LineWriter(2)
        >>> encode_array_of_arrays_as_list_items("pairs", [[1, 2], []], writer, 0, EncodeOptions())
        >>> print(writer.to_string())
        pairs[2]:
          - [2]: 1,2
          - [0]:
    """
    delimiter = options.delimiter.value
    writer.push(depth, format_header(len(value), key, None, delimiter, options.length_marker))
    for item in value:
        writer.push_list_item(depth + 1, encode_inline_array_line(item, delimiter, None, options.length_marker))


def detect_tabular_header(rows: Sequence[Dict[str, Any]]) -> List[str]:
    """Find the shared field list of an array of objects.

    The first row's keys are the candidate header. Every row must have the
    same number of keys and hold a scalar under each candidate key; key order
    within rows does not matter.

    Args:
        rows: Array of objects.

    Returns:
        Field names in first-row order, or an empty list when not tabular.

    Examples:
        >>> detect_tabular_header([{"a": 1, "b": 2}, {"b": 3, "a": 4}])
        ['a', 'b']
        >>> detect_tabular_header([{"a": 1}, {"a": 1, "b": 2}])
        []
        >>> detect_tabular_header([{"a": [1]}, {"a": [2]}])
        []
        >>> detect_tabular_header([{}, {}])
        []
    """
    if not rows or not is_object(rows[0]) or not rows[0]:
        return []
    header = list(rows[0].keys())
    width = len(header)
    for row in rows:
        if not is_object(row) or len(row) != width:
            return []
        for field in header:
            if field not in row or not is_primitive(row[field]):
                return []
    return header


def encode_array_of_objects_as_tabular(
    key: Optional[str],
    rows: Sequence[Dict[str, Any]],
    header: Sequence[str],
    writer: LineWriter,
    depth: Depth,
    options: EncodeOptions,
) -> None:
    """Encode uniform objects as a header plus one delimited row per object.

    Args:
        key: Owning object key, if any.
        rows: Objects sharing the header's key set.
        header: Field names.
        writer: Output buffer.
        depth: Indentation level of the header line.
        options: Encoding options.
    """
    delimiter = options.delimiter.value
    writer.push(depth, format_header(len(rows), key, header, delimiter, options.length_marker))
    for row in rows:
        # Fields follow header order, not the row's own order
        writer.push(depth + 1, join_encoded_values((row[field] for field in header if field in row), delimiter))


def encode_mixed_array_as_list_items(key: Optional[str], value: List[Any], writer: LineWriter, depth: Depth, options: EncodeOptions) -> None:
    """Encode a non-uniform array as ``- `` list items.

    Args:
        key: Owning object key, if any.
        value: Array to encode.
        writer: Output buffer.
        depth: Indentation level of the header line.
        options: Encoding options.

    Examples:
        >>> from toonkit.options import EncodeOptions
        >>> writer = LineWriter(2)
        >>> encode_mixed_array_as_list_items("items", [1, {"a": 1, "b": 2}, ["x"]], writer, 0, EncodeOptions())
        >>> print(writer.to_string())
        items[3]:
          - 1
          - a: 1
            b: 2
          - [1]: x
    """
    delimiter = options.delimiter.value
    writer.push(depth, format_header(len(value), key, None, delimiter, options.length_marker))
    item_depth = depth + 1
    for item in value:
        if is_primitive(item):
            writer.push_list_item(item_depth, encode_primitive(item, delimiter))
        elif is_array_of_primitives(item):
            writer.push_list_item(item_depth, encode_inline_array_line(item, delimiter, None, options.length_marker))
        elif is_array(item):
            first_line = len(writer)
            encode_array(None, item, writer, item_depth, options)
            writer.mark_list_item(first_line, item_depth)
        else:
            objects.encode_object_as_list_item(item, writer, item_depth, options)
