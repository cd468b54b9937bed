# -*- coding: utf-8 -*-
"""Location: ./toonkit/decoder/scanner.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Line and token scanning for the decoder.

All scanners here are quote-aware: text between unescaped double quotes is
never treated as structure, and a backslash inside quotes escapes the next
character.

Examples:
    >>> find_unquoted_colon('"a:b": c')
    5
    >>> split_delimited('1,"x,y",', ",")
    ['1', '"x,y"', '']
    >>> header = parse_header("users[2]{id,name}:", ",")
    >>> header.key, header.length, header.fields
    ('users', 2, ['id', 'name'])
"""

# Standard
import logging
from typing import List, NamedTuple, Optional, Tuple

# First-Party
from toonkit.constants import (
    BACKSLASH,
    CLOSE_BRACE,
    CLOSE_BRACKET,
    COLON,
    DELIMITER_CHARS,
    DOUBLE_QUOTE,
    LENGTH_MARKER,
    LIST_ITEM_MARKER,
    LIST_ITEM_PREFIX,
    OPEN_BRACE,
    OPEN_BRACKET,
    SPACE,
    TAB,
)
from toonkit.errors import MalformedHeaderError, ToonDecodeError, ToonIndentationError, UnterminatedQuoteError
from toonkit.util.strings import unescape
from toonkit.values import Depth

logger = logging.getLogger(__name__)


# =============================================================================
# Lines
# =============================================================================


class ParsedLine(NamedTuple):
    """A non-blank input line.

    Attributes:
        depth: Indentation level.
        content: Text after the indentation, trailing spaces removed.
        number: 1-based line number in the document.
        blank_before: Whether one or more blank lines precede this line.
    """

    depth: Depth
    content: str
    number: int
    blank_before: bool = False


def scan_lines(text: str, indent: int, strict: bool = True) -> List[ParsedLine]:
    """Split a document into indented lines, dropping blank ones.

    Args:
        text: TOON document.
        indent: Spaces per indentation level.
        strict: Reject tabs and partial indentation instead of tolerating them.

    Returns:
        Non-blank lines in document order. Blank lines are dropped but
        flagged on the line that follows them.

    Raises:
        ToonIndentationError: In strict mode, on tab or partial indentation.

    Examples:
        >>> [(l.depth, l.content) for l in scan_lines("a:\\r\\n  b: 1\\n\\n", 2)]
        [(0, 'a:'), (1, 'b: 1')]
        >>> scan_lines("a:\\n   b: 1", 2)
        Traceback (most recent call last):
        ...
        toonkit.errors.ToonIndentationError: Indentation must be a multiple of 2 spaces (line 2)
        >>> [l.depth for l in scan_lines("a:\\n   b: 1", 2, strict=False)]
        [0, 1]
    """
    lines: List[ParsedLine] = []
    blank_pending = False
    for number, raw in enumerate(text.split("\n"), start=1):
        if raw.endswith("\r"):
            raw = raw[:-1]
        if not raw.strip():
            blank_pending = True
            continue
        stripped = raw.lstrip(SPACE + TAB)
        leading = raw[: len(raw) - len(stripped)]
        if TAB in leading:
            if strict:
                raise ToonIndentationError("Tabs are not allowed in indentation", number)
            logger.debug("Ignoring tab indentation on line %d", number)
        spaces = leading.count(SPACE)
        if spaces % indent and strict:
            raise ToonIndentationError(f"Indentation must be a multiple of {indent} spaces", number)
        lines.append(ParsedLine(spaces // indent, stripped.rstrip(SPACE), number, blank_pending))
        blank_pending = False
    return lines


def is_list_item(content: str) -> bool:
    """Return True for ``-`` and ``- ...`` lines.

    Examples:
        >>> is_list_item("- a"), is_list_item("-"), is_list_item("-5")
        (True, True, False)
    """
    return content == LIST_ITEM_MARKER or content.startswith(LIST_ITEM_PREFIX)


# =============================================================================
# Quote-aware scanning
# =============================================================================


def find_closing_quote(text: str, start: int) -> int:
    """Find the closing quote of a string opened at ``start``.

    Args:
        text: Text to scan.
        start: Index of the opening quote.

    Returns:
        Index of the closing quote, or -1 if the string is unterminated.

    Examples:
        >>> find_closing_quote('"a\\\\"b" rest', 0)
        5
        >>> find_closing_quote('"open', 0)
        -1
    """
    i = start + 1
    length = len(text)
    while i < length:
        char = text[i]
        if char == BACKSLASH:
            i += 2
            continue
        if char == DOUBLE_QUOTE:
            return i
        i += 1
    return -1


def find_unquoted_colon(text: str, line: Optional[int] = None) -> int:
    """Find the first colon outside double quotes.

    Args:
        text: Line content.
        line: Line number used in error messages.

    Returns:
        Index of the colon, or -1 if there is none.

    Raises:
        UnterminatedQuoteError: If a quote opened before any colon is never closed.
    """
    i = 0
    length = len(text)
    while i < length:
        char = text[i]
        if char == DOUBLE_QUOTE:
            end = find_closing_quote(text, i)
            if end == -1:
                raise UnterminatedQuoteError("Unterminated string", line)
            i = end + 1
            continue
        if char == COLON:
            return i
        i += 1
    return -1


def split_delimited(text: str, delimiter: str, line: Optional[int] = None) -> List[str]:
    """Split delimited values, ignoring delimiters inside quotes.

    Tokens are stripped of surrounding whitespace but keep their quotes. A
    trailing delimiter yields an empty trailing token.

    Args:
        text: Delimited text.
        delimiter: Delimiter character.
        line: Line number used in error messages.

    Returns:
        Raw tokens.

    Raises:
        UnterminatedQuoteError: If a quoted token is never closed.

    Examples:
        >>> split_delimited('a | "b|c" |d', "|")
        ['a', '"b|c"', 'd']
        >>> split_delimited("", ",")
        []
    """
    if not text.strip():
        return []
    tokens = []
    start = 0
    i = 0
    length = len(text)
    while i < length:
        char = text[i]
        if char == DOUBLE_QUOTE:
            end = find_closing_quote(text, i)
            if end == -1:
                raise UnterminatedQuoteError("Unterminated string", line)
            i = end + 1
            continue
        if char == delimiter:
            tokens.append(text[start:i].strip())
            start = i + 1
        i += 1
    tokens.append(text[start:].strip())
    return tokens


def parse_key(text: str, strict: bool = True, line: Optional[int] = None) -> Tuple[str, bool]:
    """Parse an object key.

    Args:
        text: Key text, possibly quoted.
        strict: Reject malformed keys.
        line: Line number used in error messages.

    Returns:
        Tuple of the key and whether it was quoted.

    Raises:
        ToonDecodeError: On empty or malformed keys.

    Examples:
        >>> parse_key("name"), parse_key('"full name"')
        (('name', False), ('full name', True))
    """
    text = text.strip()
    if text.startswith(DOUBLE_QUOTE):
        end = find_closing_quote(text, 0)
        if end == -1:
            raise UnterminatedQuoteError("Unterminated quoted key", line)
        if end != len(text) - 1 and strict:
            raise ToonDecodeError(f"Unexpected characters after quoted key: {text}", line)
        return unescape(text[1:end], strict, line), True
    if not text and strict:
        raise ToonDecodeError("Empty key", line)
    return text, False


# =============================================================================
# Array headers
# =============================================================================


class ArrayHeader(NamedTuple):
    """A parsed ``key[N<delim>]{fields}:`` header.

    Attributes:
        key: Owning key, or None for root and list item arrays.
        key_quoted: Whether the key was written in quotes.
        length: Declared element count.
        delimiter: Delimiter for values and rows of this array.
        fields: Tabular field names, or None.
        inline: Text after the colon, stripped; empty when the body follows on later lines.
    """

    key: Optional[str]
    key_quoted: bool
    length: int
    delimiter: str
    fields: Optional[List[str]]
    inline: str


def parse_header(content: str, default_delimiter: str, strict: bool = True, line: Optional[int] = None) -> Optional[ArrayHeader]:
    """Parse an array header at the start of a line.

    Args:
        content: Line content.
        default_delimiter: Delimiter used when the brackets carry no marker.
        strict: Reject malformed keys and field names.
        line: Line number used in error messages.

    Returns:
        ArrayHeader, or None if the line is not an array header.

    Raises:
        MalformedHeaderError: If the line starts like a header but breaks its grammar.
        UnterminatedQuoteError: If a quoted key or field is never closed.

    Examples:
        >>> parse_header("tags[#3|]: a|b|c", ",")
        ArrayHeader(key='tags', key_quoted=False, length=3, delimiter='|', fields=None, inline='a|b|c')
        >>> parse_header("name: x", ",") is None
        True
        >>> parse_header("[invalid]", ",")
        Traceback (most recent call last):
        ...
        toonkit.errors.MalformedHeaderError: Invalid array length in header: [invalid]
    """
    key: Optional[str] = None
    key_quoted = False
    if content.startswith(DOUBLE_QUOTE):
        end = find_closing_quote(content, 0)
        if end == -1:
            raise UnterminatedQuoteError("Unterminated quoted key", line)
        if not content.startswith(OPEN_BRACKET, end + 1):
            return None
        key = unescape(content[1:end], strict, line)
        key_quoted = True
        pos = end + 1
    else:
        bracket = content.find(OPEN_BRACKET)
        if bracket == -1:
            return None
        prefix = content[:bracket]
        if COLON in prefix or DOUBLE_QUOTE in prefix or any(char.isspace() for char in prefix):
            return None
        key = prefix or None
        pos = bracket

    # "[" then optional "#", digits, optional delimiter marker, "]"
    pos += 1
    if content.startswith(LENGTH_MARKER, pos):
        pos += 1
    digits_start = pos
    while pos < len(content) and content[pos] in "0123456789":
        pos += 1
    if pos == digits_start:
        raise MalformedHeaderError(f"Invalid array length in header: {content}", line)
    length = int(content[digits_start:pos])

    delimiter = default_delimiter
    if pos < len(content) and content[pos] in DELIMITER_CHARS:
        delimiter = content[pos]
        pos += 1
    if not content.startswith(CLOSE_BRACKET, pos):
        raise MalformedHeaderError(f"Missing ']' in array header: {content}", line)
    pos += 1

    fields: Optional[List[str]] = None
    if content.startswith(OPEN_BRACE, pos):
        close = _find_unquoted(content, CLOSE_BRACE, pos + 1, line)
        if close == -1:
            raise MalformedHeaderError(f"Missing '}}' in array header: {content}", line)
        fields = [parse_key(token, strict, line)[0] for token in split_delimited(content[pos + 1 : close], delimiter, line)]
        if not fields:
            raise MalformedHeaderError(f"Empty field list in array header: {content}", line)
        pos = close + 1

    if not content.startswith(COLON, pos):
        raise MalformedHeaderError(f"Missing ':' after array header: {content}", line)
    inline = content[pos + 1 :].strip(SPACE)
    return ArrayHeader(key, key_quoted, length, delimiter, fields, inline)


def _find_unquoted(text: str, target: str, start: int, line: Optional[int]) -> int:
    """Find ``target`` outside quotes, scanning from ``start``.

    Args:
        text: Text to scan.
        target: Character to look for.
        start: Index to start at.
        line: Line number used in error messages.

    Returns:
        Index of ``target``, or -1.

    Raises:
        UnterminatedQuoteError: If a quote is never closed.
    """
    i = start
    while i < len(text):
        char = text[i]
        if char == DOUBLE_QUOTE:
            end = find_closing_quote(text, i)
            if end == -1:
                raise UnterminatedQuoteError("Unterminated string", line)
            i = end + 1
            continue
        if char == target:
            return i
        i += 1
    return -1
