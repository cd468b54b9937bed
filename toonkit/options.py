# -*- coding: utf-8 -*-
"""Location: ./toonkit/options.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Encoding and decoding options.

Both option records are frozen pydantic models: they are validated once,
passed by value through every encode/decode call, and never mutated.

Examples:
    >>> from toonkit.options import Delimiter, EncodeOptions, DecodeOptions
    >>> opts = EncodeOptions(delimiter="pipe", length_marker=True)
    >>> opts.delimiter is Delimiter.PIPE, opts.indent
    (True, 2)
    >>> DecodeOptions().strict
    True
    >>> try:
    ...     opts.indent = 4
    ... except Exception as e:
    ...     print(type(e).__name__)
    ValidationError
"""

# Standard
from enum import Enum
import sys
from typing import Any, Mapping, Union

# Third-Party
from pydantic import BaseModel, ConfigDict, Field, field_validator

# First-Party
from toonkit.constants import COMMA, DEFAULT_INDENT, PIPE, TAB

# Effectively unlimited fold depth
UNLIMITED_FLATTEN_DEPTH = sys.maxsize


class Delimiter(str, Enum):
    """Separator for inline array values and tabular row fields.

    Attributes:
        COMMA (str): Default delimiter, implicit in headers.
        TAB (str): Tab delimiter, marked inside header brackets.
        PIPE (str): Pipe delimiter, marked inside header brackets.
    """

    COMMA = COMMA
    TAB = TAB
    PIPE = PIPE


class PathExpansion(str, Enum):
    """Decode-side handling of dotted keys.

    Attributes:
        OFF (str): Dotted keys stay literal.
        SAFE (str): Unquoted dotted keys made of identifier segments expand into nested objects.
    """

    OFF = "off"
    SAFE = "safe"


_DELIMITER_NAMES = {"comma": Delimiter.COMMA, "tab": Delimiter.TAB, "pipe": Delimiter.PIPE}


def _coerce_delimiter(value: Any) -> Any:
    """Map delimiter names ("comma", "tab", "pipe") to enum members.

    Args:
        value: Raw delimiter setting.

    Returns:
        A Delimiter member for known names, else the value unchanged for pydantic to validate.

    Examples:
        >>> _coerce_delimiter("TAB")
        <Delimiter.TAB: '\\t'>
        >>> _coerce_delimiter(",")
        ','
    """
    if isinstance(value, str) and not isinstance(value, Delimiter):
        return _DELIMITER_NAMES.get(value.strip().lower(), value)
    return value


class EncodeOptions(BaseModel):
    """Options for TOON encoding.

    Attributes:
        indent: Spaces per indentation level.
        delimiter: Delimiter for inline arrays and tabular rows.
        length_marker: Prefix array lengths with ``#``.
        flatten: Fold chains of single-key objects into dotted keys.
        flatten_depth: Maximum number of segments in one folded key.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    indent: int = Field(default=DEFAULT_INDENT, ge=1, description="Spaces per indentation level")
    delimiter: Delimiter = Field(default=Delimiter.COMMA, description="Array value delimiter")
    length_marker: bool = Field(default=False, description="Prefix array lengths with '#'")
    flatten: bool = Field(default=False, description="Fold single-key object chains into dotted keys")
    flatten_depth: int = Field(default=UNLIMITED_FLATTEN_DEPTH, ge=0, description="Max segments per folded key")

    @field_validator("delimiter", mode="before")
    @classmethod
    def validate_delimiter(cls, v: Any) -> Any:
        """Accept delimiter names as well as delimiter characters.

        Args:
            v: Raw delimiter value.

        Returns:
            Value ready for enum validation.
        """
        return _coerce_delimiter(v)


class DecodeOptions(BaseModel):
    """Options for TOON decoding.

    Attributes:
        indent: Spaces per indentation level expected in the input.
        delimiter: Delimiter assumed for headers without an explicit marker.
        strict: Raise on the first error instead of recovering.
        expand_paths: Expand unquoted dotted keys into nested objects.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    indent: int = Field(default=DEFAULT_INDENT, ge=1, description="Spaces per indentation level")
    delimiter: Delimiter = Field(default=Delimiter.COMMA, description="Default array value delimiter")
    strict: bool = Field(default=True, description="Fail on malformed input")
    expand_paths: PathExpansion = Field(default=PathExpansion.OFF, description="Dotted key expansion mode")

    @field_validator("delimiter", mode="before")
    @classmethod
    def validate_delimiter(cls, v: Any) -> Any:
        """Accept delimiter names as well as delimiter characters.

        Args:
            v: Raw delimiter value.

        Returns:
            Value ready for enum validation.
        """
        return _coerce_delimiter(v)

    @field_validator("expand_paths", mode="before")
    @classmethod
    def validate_expand_paths(cls, v: Any) -> Any:
        """Accept expansion modes case-insensitively.

        Args:
            v: Raw expansion mode.

        Returns:
            Lower-cased mode string, or the value unchanged.
        """
        if isinstance(v, str) and not isinstance(v, PathExpansion):
            return v.strip().lower()
        return v


EncodeOptionsLike = Union[EncodeOptions, Mapping[str, Any], None]
DecodeOptionsLike = Union[DecodeOptions, Mapping[str, Any], None]


def resolve_encode_options(options: EncodeOptionsLike = None) -> EncodeOptions:
    """Resolve encoding options, filling defaults from settings.

    Args:
        options: Options instance, a mapping of option fields, or None.

    Returns:
        A validated EncodeOptions instance.

    Examples:
        >>> resolve_encode_options({"indent": 4}).indent
        4
        >>> opts = EncodeOptions()
        >>> resolve_encode_options(opts) is opts
        True
    """
    if isinstance(options, EncodeOptions):
        return options
    base = _settings_encode_defaults()
    if not options:
        return base
    overrides = EncodeOptions.model_validate(dict(options)).model_dump(exclude_unset=True)
    return base.model_copy(update=overrides)


def resolve_decode_options(options: DecodeOptionsLike = None) -> DecodeOptions:
    """Resolve decoding options, filling defaults from settings.

    Args:
        options: Options instance, a mapping of option fields, or None.

    Returns:
        A validated DecodeOptions instance.

    Examples:
        >>> resolve_decode_options({"strict": False}).strict
        False
    """
    if isinstance(options, DecodeOptions):
        return options
    base = _settings_decode_defaults()
    if not options:
        return base
    overrides = DecodeOptions.model_validate(dict(options)).model_dump(exclude_unset=True)
    return base.model_copy(update=overrides)


def _settings_encode_defaults() -> EncodeOptions:
    """Build default encode options from the cached settings.

    Returns:
        EncodeOptions built from the active settings.
    """
    # First-Party
    from toonkit.config import get_settings  # pylint: disable=import-outside-toplevel

    return get_settings().encode_options()


def _settings_decode_defaults() -> DecodeOptions:
    """Build default decode options from the cached settings.

    Returns:
        DecodeOptions built from the active settings.
    """
    # First-Party
    from toonkit.config import get_settings  # pylint: disable=import-outside-toplevel

    return get_settings().decode_options()

