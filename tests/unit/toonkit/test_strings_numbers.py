# -*- coding: utf-8 -*-
"""Location: ./tests/unit/toonkit/test_strings_numbers.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Unit tests for the string quoting and number formatting policies.
"""

# Standard
from decimal import Decimal

# Third-Party
import pytest

# First-Party
from toonkit.errors import ToonDecodeError
from toonkit.util.numbers import format_number
from toonkit.util.strings import encode_key, encode_string, escape, is_safe_unquoted, is_valid_unquoted_key, unescape


class TestIsSafeUnquoted:
    """Test the unquoted string predicate."""

    @pytest.mark.parametrize(
        "value",
        ["hello", "hello world", "café", "user_name", "a.b", "x-y", "1.5.3", ".5", "Infinity", "#tag"],
    )
    def test_safe_strings(self, value):
        """Plain text is safe to emit bare."""
        assert is_safe_unquoted(value) is True

    @pytest.mark.parametrize(
        "value",
        [
            "",
            " leading",
            "trailing ",
            "null",
            "true",
            "false",
            "42",
            "-3.5",
            "+7",
            "1e10",
            "2E-3",
            "007",
            "-dash",
            "-",
            "a:b",
            'say "hi"',
            "back\\slash",
            "[x]",
            "{y}",
            "line\nbreak",
            "tab\there",
            "bell\x07",
            "a,b",
        ],
    )
    def test_unsafe_strings(self, value):
        """Ambiguous or structural strings need quotes."""
        assert is_safe_unquoted(value) is False

    def test_delimiter_sensitivity(self):
        """Only the active delimiter forces quoting."""
        assert is_safe_unquoted("a|b", ",") is True
        assert is_safe_unquoted("a|b", "|") is False
        assert is_safe_unquoted("a,b", "|") is True


class TestKeys:
    """Test key encoding."""

    @pytest.mark.parametrize("key", ["id", "_private", "user.name", "a1.b2"])
    def test_identifier_keys_bare(self, key):
        """Identifier-like keys stay bare."""
        assert is_valid_unquoted_key(key)
        assert encode_key(key) == key

    @pytest.mark.parametrize(
        ("key", "expected"),
        [("full name", '"full name"'), ("1st", '"1st"'), ("", '""'), ("a-b", '"a-b"'), ('q"k', '"q\\"k"')],
    )
    def test_other_keys_quoted(self, key, expected):
        """Everything else is quoted and escaped."""
        assert encode_key(key) == expected


class TestEscaping:
    """Test escape and unescape."""

    def test_escape_sequences(self):
        """The five escapable characters are escaped."""
        assert escape('\\"\n\r\t') == '\\\\\\"\\n\\r\\t'

    def test_unescape_reverses_escape(self):
        """unescape(escape(s)) == s."""
        text = 'a\\b "c"\nd\re\tf'
        assert unescape(escape(text)) == text

    def test_unescape_backspace_and_formfeed(self):
        """Backspace and form feed escapes are accepted."""
        assert unescape("a\\bb\\fc") == "a\bb\fc"

    def test_unescape_invalid_strict(self):
        """Unknown escapes fail in strict mode."""
        with pytest.raises(ToonDecodeError, match="Invalid escape"):
            unescape("bad\\x")

    def test_unescape_invalid_lenient(self):
        """Unknown escapes are kept verbatim in lenient mode."""
        assert unescape("bad\\x", strict=False) == "bad\\x"

    def test_encode_string_quotes_and_escapes(self):
        """Unsafe strings are wrapped and escaped."""
        assert encode_string("line\nbreak") == '"line\\nbreak"'
        assert encode_string("plain") == "plain"
        assert encode_string("") == '""'

    def test_other_control_characters_kept_raw(self):
        """Control characters without an escape stay raw inside quotes."""
        assert encode_string("bell\x07") == '"bell\x07"'


class TestFormatNumber:
    """Test canonical number text."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (0, "0"),
            (42, "42"),
            (-17, "-17"),
            (10**30, "1" + "0" * 30),
            (0.0, "0"),
            (-0.0, "0"),
            (3.0, "3"),
            (3.14, "3.14"),
            (-2.5, "-2.5"),
            (1e-7, "0.0000001"),
            (1.5e-10, "0.00000000015"),
            (1e21, "1000000000000000000000"),
            (0.1 + 0.2, "0.30000000000000004"),
            (Decimal("1.2300"), "1.23"),
            (Decimal("-0.00"), "0"),
            (Decimal("1E+3"), "1000"),
            (Decimal("12.5E-3"), "0.0125"),
        ],
    )
    def test_format(self, value, expected):
        """Numbers render without exponent or trailing zeros."""
        assert format_number(value) == expected

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf"), Decimal("NaN"), Decimal("-Infinity")])
    def test_non_finite_is_null(self, value):
        """Non-finite numbers render as null."""
        assert format_number(value) == "null"
