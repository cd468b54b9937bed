# -*- coding: utf-8 -*-
"""Location: ./toonkit/encoder/__init__.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

TOON encoder: value model to text.

Examples:
    >>> from toonkit.options import EncodeOptions
    >>> encode_value({"tags": ["reading", "gaming"]}, EncodeOptions())
    'tags[2]: reading,gaming'
    >>> encode_value("a,b", EncodeOptions(delimiter="pipe"))
    'a,b'
    >>> encode_value({}, EncodeOptions())
    ''
"""

# First-Party
from toonkit.encoder.arrays import encode_array
from toonkit.encoder.objects import encode_object
from toonkit.encoder.primitives import encode_primitive
from toonkit.encoder.writer import LineWriter
from toonkit.errors import ToonEncodeError
from toonkit.options import EncodeOptions
from toonkit.values import is_array, is_object, is_primitive, JsonValue

__all__ = ["encode_value", "LineWriter"]


def encode_value(value: JsonValue, options: EncodeOptions) -> str:
    """Encode an already normalized value.

    Args:
        value: Value built from None, bool, numbers, str, list and dict.
        options: Encoding options.

    Returns:
        TOON document text.

    Raises:
        ToonEncodeError: If the value contains a non-model type.
    """
    if is_primitive(value):
        return encode_primitive(value, options.delimiter.value)
    writer = LineWriter(options.indent)
    if is_array(value):
        encode_array(None, value, writer, 0, options)
    elif is_object(value):
        encode_object(value, writer, 0, options)
    else:
        raise ToonEncodeError(f"Object of type {type(value).__name__} is not TOON serializable")
    return writer.to_string()
