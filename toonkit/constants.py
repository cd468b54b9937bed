# -*- coding: utf-8 -*-
"""Location: ./toonkit/constants.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Shared TOON literals and precompiled patterns.

Every table in this module is immutable (strings, frozensets, compiled
patterns) so encoder and decoder calls running in parallel threads can read
them without synchronization.

Examples:
    >>> LIST_ITEM_PREFIX
    '- '
    >>> sorted(RESERVED_LITERALS)
    ['false', 'null', 'true']
    >>> bool(DECODE_NUMBER_RE.match("-12.5e3"))
    True
    >>> bool(DECODE_NUMBER_RE.match("05"))
    False
"""

# Standard
import re

# =============================================================================
# Literals
# =============================================================================

NULL_LITERAL = "null"
TRUE_LITERAL = "true"
FALSE_LITERAL = "false"
RESERVED_LITERALS = frozenset({NULL_LITERAL, TRUE_LITERAL, FALSE_LITERAL})

LIST_ITEM_MARKER = "-"
LIST_ITEM_PREFIX = "- "
LENGTH_MARKER = "#"

COLON = ":"
SPACE = " "
DOUBLE_QUOTE = '"'
BACKSLASH = "\\"
OPEN_BRACKET = "["
CLOSE_BRACKET = "]"
OPEN_BRACE = "{"
CLOSE_BRACE = "}"

COMMA = ","
TAB = "\t"
PIPE = "|"
DEFAULT_DELIMITER = COMMA
DELIMITER_CHARS = frozenset({COMMA, TAB, PIPE})

DEFAULT_INDENT = 2

# Characters that can never appear in an unquoted string value
STRUCTURAL_CHARS = frozenset("[]{}")
QUOTE_TRIGGER_CHARS = frozenset(':"\\') | STRUCTURAL_CHARS

# =============================================================================
# Escapes
# =============================================================================

# Emitted by the encoder; order matters only for readability, each entry is one char
ESCAPES = (
    ("\\", "\\\\"),
    ('"', '\\"'),
    ("\n", "\\n"),
    ("\r", "\\r"),
    ("\t", "\\t"),
)

# Accepted by the decoder after a backslash
UNESCAPES = {
    "\\": "\\",
    '"': '"',
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "b": "\b",
    "f": "\f",
}

# =============================================================================
# Patterns
# =============================================================================

# Strings the decoder could read back as numbers (superset: sign, leading zeros)
NUMERIC_LIKE_RE = re.compile(r"^[+-]?\d+(?:\.\d+)?(?:[eE][+-]?\d+)?$", re.ASCII)

# Octal-looking / leading-zero integers, always quoted
LEADING_ZERO_RE = re.compile(r"^[+-]?0\d+$", re.ASCII)

# Number grammar accepted by the primitive parser
DECODE_NUMBER_RE = re.compile(r"^-?(?:0|[1-9]\d*)(?:\.\d+)?(?:[eE][+-]?\d+)?$", re.ASCII)

# Keys that may be written without quotes
UNQUOTED_KEY_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_.]*$")

# One segment of a folded or expandable dotted key
IDENTIFIER_SEGMENT_RE = re.compile(r"^[A-Za-z_]\w*$", re.ASCII)
