# -*- coding: utf-8 -*-
"""Location: ./toonkit/__init__.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

toonkit: TOON (Token-Oriented Object Notation) encoder and decoder.

Examples:
    >>> import toonkit
    >>> toonkit.encode({"tags": ["reading", "gaming"]})
    'tags[2]: reading,gaming'
    >>> toonkit.decode("tags[2]: reading,gaming")
    {'tags': ['reading', 'gaming']}
"""

# Standard
import logging

# First-Party
from toonkit.codec import decode, decode_to_json, encode, encode_json, estimate_token_savings
from toonkit.config import get_settings, Settings
from toonkit.errors import (
    ArrayLengthError,
    InvalidJsonError,
    MalformedHeaderError,
    PathExpansionError,
    ToonDecodeError,
    ToonEncodeError,
    ToonError,
    ToonIndentationError,
    UnterminatedQuoteError,
)
from toonkit.normalize import normalize_value
from toonkit.options import DecodeOptions, Delimiter, EncodeOptions, PathExpansion

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ArrayLengthError",
    "decode",
    "decode_to_json",
    "DecodeOptions",
    "Delimiter",
    "encode",
    "encode_json",
    "EncodeOptions",
    "estimate_token_savings",
    "get_settings",
    "InvalidJsonError",
    "MalformedHeaderError",
    "normalize_value",
    "PathExpansion",
    "PathExpansionError",
    "Settings",
    "ToonDecodeError",
    "ToonEncodeError",
    "ToonError",
    "ToonIndentationError",
    "UnterminatedQuoteError",
]
