# -*- coding: utf-8 -*-
"""Location: ./toonkit/errors.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

TOON error hierarchy.

Decoding errors subclass ``ValueError`` so callers that already guard
``json.loads``-style calls with ``except ValueError`` keep working.

Examples:
    >>> from toonkit.errors import MalformedHeaderError, ToonDecodeError
    >>> err = MalformedHeaderError("Invalid array header: [x]", line=3)
    >>> str(err)
    'Invalid array header: [x] (line 3)'
    >>> isinstance(err, ToonDecodeError), isinstance(err, ValueError)
    (True, True)
"""

# Standard
from typing import Optional


class ToonError(Exception):
    """Base class for every error raised by toonkit.

    Examples:
        >>> str(ToonError("boom"))
        'boom'
    """


class ToonEncodeError(ToonError):
    """Raised when a value cannot be represented in TOON."""


class ToonDecodeError(ToonError, ValueError):
    """Raised when TOON text cannot be decoded.

    Attributes:
        message: Human readable description without location.
        line: 1-based line number of the offending line, when known.
    """

    def __init__(self, message: str, line: Optional[int] = None) -> None:
        """Initialize the error.

        Args:
            message: Description of the problem.
            line: 1-based line number, if the error is tied to a line.
        """
        self.message = message
        self.line = line
        super().__init__(f"{message} (line {line})" if line is not None else message)


class MalformedHeaderError(ToonDecodeError):
    """Array header bracket or field syntax does not match the grammar."""


class ToonIndentationError(ToonDecodeError):
    """Unexpected depth jump, tab indentation, or partial indentation."""


class UnterminatedQuoteError(ToonDecodeError):
    """A quoted key or value is missing its closing quote."""


class ArrayLengthError(ToonDecodeError):
    """Declared array length or tabular width disagrees with the body."""


class PathExpansionError(ToonDecodeError):
    """A dotted key cannot be expanded without overwriting an existing value."""


class InvalidJsonError(ToonDecodeError):
    """JSON text handed to or produced by the JSON convenience helpers is invalid."""
