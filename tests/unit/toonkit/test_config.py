# -*- coding: utf-8 -*-
"""Location: ./tests/unit/toonkit/test_config.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Unit tests for settings and option resolution.
"""

# Standard
import logging

# Third-Party
from pydantic import ValidationError
import pytest

# First-Party
from toonkit import decode, DecodeOptions, Delimiter, encode, EncodeOptions, PathExpansion
from toonkit.config import get_settings, Settings
from toonkit.options import resolve_decode_options, resolve_encode_options, UNLIMITED_FLATTEN_DEPTH


class TestSettings:
    """Test Settings defaults and environment loading."""

    def test_defaults(self):
        """Defaults match the documented option defaults."""
        settings = Settings()
        assert settings.indent == 2
        assert settings.delimiter is Delimiter.COMMA
        assert settings.length_marker is False
        assert settings.flatten is False
        assert settings.flatten_depth == UNLIMITED_FLATTEN_DEPTH
        assert settings.strict is True
        assert settings.expand_paths is PathExpansion.OFF
        assert settings.log_level == "WARNING"

    def test_environment_overrides(self, monkeypatch):
        """TOON_* variables override defaults."""
        monkeypatch.setenv("TOON_INDENT", "4")
        monkeypatch.setenv("TOON_DELIMITER", "TAB")
        monkeypatch.setenv("TOON_STRICT", "false")
        monkeypatch.setenv("TOON_EXPAND_PATHS", "Safe")
        settings = Settings()
        assert settings.indent == 4
        assert settings.delimiter is Delimiter.TAB
        assert settings.strict is False
        assert settings.expand_paths is PathExpansion.SAFE

    def test_env_file(self, tmp_path):
        """A .env file in the working directory is read."""
        (tmp_path / ".env").write_text("TOON_LENGTH_MARKER=true\n", encoding="utf-8")
        assert Settings().length_marker is True

    @pytest.mark.parametrize(
        ("field", "value"),
        [("log_level", "LOUD"), ("delimiter", "semicolon"), ("indent", 0), ("expand_paths", "always")],
    )
    def test_invalid_values(self, field, value):
        """Invalid settings fail validation."""
        with pytest.raises(ValidationError):
            Settings(**{field: value})

    def test_log_level_normalized(self):
        """Log levels are accepted in any case."""
        assert Settings(log_level="info").log_level == "INFO"

    def test_get_settings_is_cached(self):
        """get_settings returns one shared instance until the cache is cleared."""
        first = get_settings()
        assert get_settings() is first
        get_settings.cache_clear()
        assert get_settings() is not first

    def test_get_settings_sets_logger_level(self, monkeypatch):
        """The toonkit logger follows TOON_LOG_LEVEL."""
        monkeypatch.setenv("TOON_LOG_LEVEL", "debug")
        get_settings()
        assert logging.getLogger("toonkit").level == logging.DEBUG


class TestDefaultsFlowIntoCodec:
    """Settings supply defaults for calls without explicit options."""

    def test_env_delimiter_used_by_encode(self, monkeypatch):
        """TOON_DELIMITER changes the default encode delimiter."""
        monkeypatch.setenv("TOON_DELIMITER", "pipe")
        assert encode(["a", "b"]) == "[2|]: a|b"

    def test_env_strict_used_by_decode(self, monkeypatch):
        """TOON_STRICT=false makes decode lenient by default."""
        monkeypatch.setenv("TOON_STRICT", "false")
        assert decode("tags[3]: a,b") == {"tags": ["a", "b"]}

    def test_explicit_options_override_settings(self, monkeypatch):
        """Explicit mappings override only the fields they name."""
        monkeypatch.setenv("TOON_DELIMITER", "pipe")
        monkeypatch.setenv("TOON_LENGTH_MARKER", "true")
        assert encode(["a", "b"], {"delimiter": "comma"}) == "[#2]: a,b"

    def test_options_instance_ignores_settings(self, monkeypatch):
        """A full options instance is used as given."""
        monkeypatch.setenv("TOON_DELIMITER", "pipe")
        assert encode(["a", "b"], EncodeOptions()) == "[2]: a,b"


class TestOptions:
    """Test the option models."""

    def test_delimiter_names_and_characters(self):
        """Delimiters may be given by name or by character."""
        assert EncodeOptions(delimiter="tab").delimiter is Delimiter.TAB
        assert EncodeOptions(delimiter="|").delimiter is Delimiter.PIPE
        assert DecodeOptions(delimiter=Delimiter.COMMA).delimiter is Delimiter.COMMA

    @pytest.mark.parametrize("overrides", [{"indent": 0}, {"flatten_depth": -1}, {"delimiter": ";"}, {"unknown": 1}])
    def test_invalid_encode_options(self, overrides):
        """Out of range values and unknown fields are rejected."""
        with pytest.raises(ValidationError):
            EncodeOptions(**overrides)

    def test_invalid_decode_mapping(self):
        """Mappings are validated during resolution."""
        with pytest.raises(ValidationError):
            resolve_decode_options({"expand_paths": "sometimes"})

    def test_options_are_frozen(self):
        """Option instances cannot be mutated."""
        options = DecodeOptions()
        with pytest.raises(ValidationError):
            options.strict = False

    def test_resolution_merges_over_settings(self, monkeypatch):
        """Mapping resolution starts from settings defaults."""
        monkeypatch.setenv("TOON_INDENT", "4")
        resolved = resolve_encode_options({"flatten": True})
        assert resolved.indent == 4
        assert resolved.flatten is True
        assert resolve_decode_options(None).indent == 4
