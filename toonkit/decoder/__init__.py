# -*- coding: utf-8 -*-
"""Location: ./toonkit/decoder/__init__.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

TOON decoder: text to value model.

Examples:
    >>> from toonkit.options import DecodeOptions
    >>> decode_text("tags[2]: reading,gaming", DecodeOptions())
    {'tags': ['reading', 'gaming']}
    >>> decode_text("a.b: 1", DecodeOptions(expand_paths="safe"))
    {'a': {'b': 1}}
"""

# First-Party
from toonkit.decoder.parser import Parser
from toonkit.decoder.scanner import scan_lines
from toonkit.options import DecodeOptions
from toonkit.values import JsonValue

__all__ = ["decode_text", "Parser"]


def decode_text(text: str, options: DecodeOptions) -> JsonValue:
    """Decode a TOON document without lenient top-level fallback.

    Args:
        text: TOON document.
        options: Decoding options.

    Returns:
        Decoded value.

    Raises:
        ToonDecodeError: On malformed input.
    """
    lines = scan_lines(text, options.indent, options.strict)
    return Parser(lines, options).parse_document()
