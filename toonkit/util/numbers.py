# -*- coding: utf-8 -*-
"""Location: ./toonkit/util/numbers.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Canonical number formatting.

Numbers are written in plain decimal notation: no exponent, no trailing
fractional zeros, no bare trailing dot, and ``-0`` collapses to ``0``.

Examples:
    >>> from decimal import Decimal
    >>> format_number(42), format_number(-0.0), format_number(2.50)
    ('42', '0', '2.5')
    >>> format_number(1e-7), format_number(1e21)
    ('0.0000001', '1000000000000000000000')
    >>> format_number(Decimal("1.2300")), format_number(Decimal("1E+3"))
    ('1.23', '1000')
"""

# Standard
from decimal import Decimal
import math
from typing import Union

# First-Party
from toonkit.constants import NULL_LITERAL

Number = Union[int, float, Decimal]


def _strip_fraction(text: str) -> str:
    """Drop trailing fractional zeros and a dangling decimal point.

    Args:
        text: Plain decimal text.

    Returns:
        Trimmed decimal text.
    """
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_number(value: Number) -> str:
    """Format a number as canonical TOON text.

    Non-finite values render as ``null``; they are normally turned into
    ``None`` by normalization before reaching the encoder.

    Args:
        value: Integer, float or Decimal.

    Returns:
        Decimal text without exponent.

    Examples:
        >>> format_number(3.0)
        '3'
        >>> format_number(float("nan"))
        'null'
        >>> format_number(-1.5)
        '-1.5'
    """
    if isinstance(value, int):
        return str(int(value))
    if isinstance(value, float):
        if not math.isfinite(value):
            return NULL_LITERAL
        if value == 0:
            return "0"
        if value.is_integer():
            return str(int(value))
        return _strip_fraction(format(Decimal(repr(value)), "f"))
    if not value.is_finite():
        return NULL_LITERAL
    if value == 0:
        return "0"
    text = _strip_fraction(format(value, "f"))
    return "0" if text in ("-0", "") else text
