# -*- coding: utf-8 -*-
"""Location: ./toonkit/encoder/objects.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Object encoding.

Fields are written in insertion order. Scalars go on the key line, arrays are
handed to the array encoder, and nested objects are indented one level below
their ``key:`` line.

Examples:
    >>> from toonkit.encoder.writer import LineWriter
    >>> from toonkit.options import EncodeOptions
    >>> writer = LineWriter(2)
    >>> encode_object({"user": {"id": 1, "tags": ["a", "b"]}, "empty": {}}, writer, 0, EncodeOptions())
    >>> print(writer.to_string())
    user:
      id: 1
      tags[2]: a,b
    empty:
"""

# Standard
from typing import AbstractSet, Any, Dict, Optional

# First-Party
from toonkit.constants import COLON, LIST_ITEM_MARKER, SPACE
from toonkit.encoder import arrays
from toonkit.encoder.flatten import join_path, try_fold_key_chain
from toonkit.encoder.primitives import encode_primitive
from toonkit.encoder.writer import LineWriter
from toonkit.options import EncodeOptions
from toonkit.util.strings import encode_key
from toonkit.values import Depth, is_array, is_primitive


def encode_object(
    value: Dict[str, Any],
    writer: LineWriter,
    depth: Depth,
    options: EncodeOptions,
    root_literal_keys: Optional[AbstractSet[str]] = None,
    path_prefix: Optional[str] = None,
    remaining_depth: Optional[int] = None,
) -> None:
    """Encode the fields of an object at the given depth.

    Args:
        value: Object to encode.
        writer: Output buffer.
        depth: Indentation level of the fields.
        options: Encoding options.
        root_literal_keys: Dotted keys present at the scope root; computed from
            ``value`` when it starts a new scope.
        path_prefix: Dotted path of ``value`` inside the current scope.
        remaining_depth: Fold budget left for this object.
    """
    if root_literal_keys is None:
        root_literal_keys = frozenset(key for key in value if "." in key)
    if remaining_depth is None:
        remaining_depth = options.flatten_depth

    for key, field_value in value.items():
        encode_key_value_pair(key, field_value, writer, depth, options, value, root_literal_keys, path_prefix, remaining_depth)


def encode_key_value_pair(
    key: str,
    value: Any,
    writer: LineWriter,
    depth: Depth,
    options: EncodeOptions,
    parent: Optional[Dict[str, Any]] = None,
    root_literal_keys: AbstractSet[str] = frozenset(),
    path_prefix: Optional[str] = None,
    remaining_depth: Optional[int] = None,
) -> None:
    """Encode a single ``key: value`` field.

    Args:
        key: Field key.
        value: Field value.
        writer: Output buffer.
        depth: Indentation level of the field.
        options: Encoding options.
        parent: Enclosing object, used for fold collision checks.
        root_literal_keys: Dotted keys present at the scope root.
        path_prefix: Dotted path of the enclosing object.
        remaining_depth: Fold budget left.
    """
    if remaining_depth is None:
        remaining_depth = options.flatten_depth

    if options.flatten and not is_primitive(value) and not is_array(value):
        siblings = [other for other in parent if other != key] if parent else []
        fold = try_fold_key_chain(key, value, siblings, root_literal_keys, path_prefix, remaining_depth)
        if fold is not None:
            _encode_field(fold.key, fold.value, writer, depth, options, root_literal_keys, fold.path, remaining_depth - fold.segment_count)
            return

    _encode_field(key, value, writer, depth, options, root_literal_keys, join_path(path_prefix, key), remaining_depth)


def _encode_field(
    key: str,
    value: Any,
    writer: LineWriter,
    depth: Depth,
    options: EncodeOptions,
    root_literal_keys: AbstractSet[str],
    path: str,
    remaining_depth: int,
) -> None:
    """Write a field whose key is final (already folded or not foldable).

    Args:
        key: Key as it will appear in the output, before quoting.
        value: Field value.
        writer: Output buffer.
        depth: Indentation level of the field.
        options: Encoding options.
        root_literal_keys: Dotted keys present at the scope root.
        path: Dotted path of this field.
        remaining_depth: Fold budget for nested objects.
    """
    encoded_key = encode_key(key)
    if is_primitive(value):
        writer.push(depth, encoded_key + COLON + SPACE + encode_primitive(value, options.delimiter.value))
    elif is_array(value):
        arrays.encode_array(key, value, writer, depth, options)
    else:
        writer.push(depth, encoded_key + COLON)
        if value:
            encode_object(value, writer, depth + 1, options, root_literal_keys, path, remaining_depth)


def encode_object_as_list_item(value: Dict[str, Any], writer: LineWriter, depth: Depth, options: EncodeOptions) -> None:
    """Encode an object as a list item.

    The first field shares the ``- `` line; the remaining fields sit one level
    deeper. An empty object is a bare ``-``.

    Args:
        value: Object to encode.
        writer: Output buffer.
        depth: Indentation level of the ``- `` line.
        options: Encoding options.

    Examples:
        >>> from toonkit.options import EncodeOptions
        >>> writer = LineWriter(2)
        >>> encode_object_as_list_item({"id": 1, "tags": ["x"], "meta": {"a": 1}}, writer, 0, EncodeOptions())
        >>> encode_object_as_list_item({}, writer, 0, EncodeOptions())
        >>> print(writer.to_string())
        - id: 1
          tags[1]: x
          meta:
            a: 1
        -
    """
    if not value:
        writer.push(depth, LIST_ITEM_MARKER)
        return
    first_line = len(writer)
    encode_object(value, writer, depth + 1, options)
    writer.mark_list_item(first_line, depth)
