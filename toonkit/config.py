# -*- coding: utf-8 -*-
"""Location: ./toonkit/config.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

toonkit Configuration.
This module defines process-wide defaults for the codec using Pydantic.
It loads configuration from environment variables with sensible defaults.

Environment variables:
- TOON_INDENT: Spaces per indentation level (default: 2)
- TOON_DELIMITER: Array delimiter, "comma", "tab" or "pipe" (default: "comma")
- TOON_LENGTH_MARKER: Prefix array lengths with '#' (default: False)
- TOON_FLATTEN: Fold single-key object chains into dotted keys (default: False)
- TOON_FLATTEN_DEPTH: Max segments per folded key (default: unlimited)
- TOON_STRICT: Strict decoding (default: True)
- TOON_EXPAND_PATHS: Dotted key expansion on decode, "off" or "safe" (default: "off")
- TOON_LOG_LEVEL: Level of the "toonkit" logger (default: "WARNING")

Examples:
    >>> from toonkit.config import Settings
    >>> s = Settings(delimiter="pipe", flatten=True)
    >>> s.encode_options().delimiter.value
    '|'
    >>> s.encode_options().flatten
    True
    >>> Settings(log_level="debug").log_level
    'DEBUG'
    >>> try:
    ...     Settings(log_level="loud")
    ... except ValueError:
    ...     print('error')
    error
"""

# Standard
from functools import lru_cache
import logging
from typing import Any

# Third-Party
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# First-Party
from toonkit.constants import DEFAULT_INDENT
from toonkit.options import _coerce_delimiter, DecodeOptions, Delimiter, EncodeOptions, PathExpansion, UNLIMITED_FLATTEN_DEPTH

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Codec defaults, read from ``TOON_*`` environment variables or ``.env``."""

    indent: int = Field(default=DEFAULT_INDENT, ge=1, description="Spaces per indentation level")
    delimiter: Delimiter = Field(default=Delimiter.COMMA, description="Array value delimiter")
    length_marker: bool = Field(default=False, description="Prefix array lengths with '#'")
    flatten: bool = Field(default=False, description="Fold single-key object chains on encode")
    flatten_depth: int = Field(default=UNLIMITED_FLATTEN_DEPTH, ge=0, description="Max segments per folded key")
    strict: bool = Field(default=True, description="Fail on malformed input when decoding")
    expand_paths: PathExpansion = Field(default=PathExpansion.OFF, description="Dotted key expansion on decode")
    log_level: str = Field(default="WARNING", description="Level of the toonkit logger")

    model_config = SettingsConfigDict(env_prefix="TOON_", env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore")

    @field_validator("delimiter", mode="before")
    @classmethod
    def validate_delimiter(cls, v: Any) -> Any:
        """Accept delimiter names such as ``tab`` from the environment.

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

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Normalize and validate the log level value.

        The value is uppercased before validation so that "debug", "Debug",
        etc. are all accepted as "DEBUG".

        Args:
            v (str): The log level string provided via configuration or environment.

        Returns:
            str: The validated and normalized (uppercase) log level.

        Raises:
            ValueError: If the provided value is not one of
                {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}.
        """
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_up = str(v).upper()
        if v_up not in allowed:
            raise ValueError(f"Invalid log_level: {v}")
        return v_up

    def encode_options(self) -> EncodeOptions:
        """Build encoding options from these settings.

        Returns:
            EncodeOptions: Frozen encoding options.
        """
        return EncodeOptions(
            indent=self.indent,
            delimiter=self.delimiter,
            length_marker=self.length_marker,
            flatten=self.flatten,
            flatten_depth=self.flatten_depth,
        )

    def decode_options(self) -> DecodeOptions:
        """Build decoding options from these settings.

        Returns:
            DecodeOptions: Frozen decoding options.

        Examples:
            >>> Settings(strict=False, expand_paths="SAFE").decode_options().expand_paths.value
            'safe'
        """
        return DecodeOptions(
            indent=self.indent,
            delimiter=self.delimiter,
            strict=self.strict,
            expand_paths=self.expand_paths,
        )


@lru_cache()
def get_settings(**kwargs: Any) -> Settings:
    """Get cached settings instance.

    Args:
        **kwargs: Keyword arguments to pass to the Settings setup.

    Returns:
        Settings: A cached instance of the Settings class.

    Examples:
        >>> settings = get_settings()
        >>> isinstance(settings, Settings)
        True
        >>> get_settings() is settings
        True
    """
    cfg = Settings(**kwargs)
    logging.getLogger("toonkit").setLevel(cfg.log_level)
    logger.debug("Loaded toonkit settings: %s", cfg.model_dump())
    return cfg
