# -*- coding: utf-8 -*-
"""Location: ./toonkit/decoder/parser.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Indentation-aware recursive descent parser.

The parser walks a list of scanned lines with a cursor. Objects own every
following line at their field depth, arrays read their body according to
their header, and list items open objects whose fields sit one level below
the ``- `` marker.

Examples:
    >>> from toonkit.options import DecodeOptions
    >>> from toonkit.decoder.scanner import scan_lines
    >>> text = "users[2]{id,name}:\\n  1,Alice\\n  2,Bob"
    >>> Parser(scan_lines(text, 2), DecodeOptions()).parse_document()
    {'users': [{'id': 1, 'name': 'Alice'}, {'id': 2, 'name': 'Bob'}]}
"""

# Standard
import logging
from typing import Any, Dict, List, Optional

# First-Party
from toonkit.constants import LIST_ITEM_MARKER, LIST_ITEM_PREFIX
from toonkit.decoder.expand import insert_value, split_expandable_key
from toonkit.decoder.primitives import parse_primitive
from toonkit.decoder.scanner import ArrayHeader, find_unquoted_colon, is_list_item, parse_header, parse_key, ParsedLine, split_delimited
from toonkit.errors import ArrayLengthError, ToonDecodeError, ToonIndentationError
from toonkit.options import DecodeOptions, PathExpansion
from toonkit.values import Depth, JsonArray, JsonObject, JsonValue

logger = logging.getLogger(__name__)


class Parser:
    """Single-use parser over the lines of one document."""

    def __init__(self, lines: List[ParsedLine], options: DecodeOptions) -> None:
        """Initialize the parser.

        Args:
            lines: Output of :func:`toonkit.decoder.scanner.scan_lines`.
            options: Decoding options.
        """
        self.lines = lines
        self.pos = 0
        self.strict = options.strict
        self.delimiter = options.delimiter.value
        self.expand_paths = options.expand_paths is PathExpansion.SAFE

    # -------------------------------------------------------------------------
    # Cursor
    # -------------------------------------------------------------------------

    def peek(self) -> Optional[ParsedLine]:
        """Return the current line without consuming it."""
        if self.pos < len(self.lines):
            return self.lines[self.pos]
        return None

    def advance(self) -> ParsedLine:
        """Consume and return the current line."""
        line = self.lines[self.pos]
        self.pos += 1
        return line

    def _recover(self, error: ToonDecodeError, start: int, depth: Depth) -> None:
        """Skip past a malformed entry in lenient mode.

        The failing line and every line nested below it are dropped.

        Args:
            error: The decoding error.
            start: Cursor position where the entry began.
            depth: Depth of the entry.

        Raises:
            ToonDecodeError: The original error, in strict mode.
        """
        if self.strict:
            raise error
        logger.debug("Skipping malformed line: %s", error)
        if self.pos == start:
            self.pos += 1
        while self.pos < len(self.lines) and self.lines[self.pos].depth > depth:
            self.pos += 1

    def _blank_line_inside(self, kind: str, line: ParsedLine) -> None:
        """Reject a blank line between two items of an array.

        Args:
            kind: Array form, used in the message.
            line: First line after the blank run.

        Raises:
            ToonDecodeError: In strict mode.
        """
        if self.strict:
            raise ToonDecodeError(f"Blank line inside {kind}", line.number)
        logger.debug("Ignoring blank line inside %s before line %d", kind, line.number)

    # -------------------------------------------------------------------------
    # Document
    # -------------------------------------------------------------------------

    def parse_document(self) -> JsonValue:
        """Parse the whole document.

        Returns:
            Root value: an object, an array, or a single primitive.

        Raises:
            ToonDecodeError: On malformed input in strict mode, and on a
                malformed root header in either mode.
        """
        first = self.peek()
        if first is None:
            return {}

        header = parse_header(first.content, self.delimiter, self.strict, first.number)
        if header is not None and header.key is None:
            self.advance()
            value = self.parse_array_body(header, first.depth, first.number)
            trailing = self.peek()
            if trailing is not None:
                self._recover(ToonDecodeError("Unexpected content after root array", trailing.number), self.pos, -1)
            return value

        if header is None and find_unquoted_colon(first.content, first.number) == -1:
            self.advance()
            value = parse_primitive(first.content, self.strict, first.number)
            extra = self.peek()
            if extra is not None:
                self._recover(ToonDecodeError("Multiple root values", extra.number), self.pos, -1)
            return value

        return self.parse_object(0)

    # -------------------------------------------------------------------------
    # Objects
    # -------------------------------------------------------------------------

    def parse_object(self, depth: Depth) -> JsonObject:
        """Parse consecutive fields at ``depth`` into a new object.

        Args:
            depth: Field depth.

        Returns:
            Parsed object.
        """
        result: JsonObject = {}
        self.parse_fields_into(result, depth)
        return result

    def parse_fields_into(self, target: Dict[str, Any], depth: Depth) -> None:
        """Parse fields at ``depth`` until a shallower line.

        Args:
            target: Object receiving the fields.
            depth: Field depth.

        Raises:
            ToonIndentationError: In strict mode, on a line deeper than ``depth``.
        """
        while True:
            line = self.peek()
            if line is None or line.depth < depth:
                return
            start = self.pos
            try:
                if line.depth > depth:
                    raise ToonIndentationError(f"Unexpected indentation, expected depth {depth}", line.number)
                self.advance()
                self.parse_field(line.content, line.number, depth, target)
            except ToonDecodeError as exc:
                self._recover(exc, start, depth)

    def parse_field(self, content: str, number: int, depth: Depth, target: Dict[str, Any]) -> None:
        """Parse one field whose line was already consumed.

        Args:
            content: Field text (without any list item marker).
            number: Line number of the field.
            depth: Logical depth of the field.
            target: Object receiving the field.

        Raises:
            ToonDecodeError: If the field is malformed.
        """
        header = parse_header(content, self.delimiter, self.strict, number)
        if header is not None:
            if header.key is None:
                raise ToonDecodeError("Array header without a key inside an object", number)
            value = self.parse_array_body(header, depth, number)
            self.assign(target, header.key, header.key_quoted, value, number)
            return

        colon = find_unquoted_colon(content, number)
        if colon == -1:
            raise ToonDecodeError(f"Missing colon after key: {content}", number)
        key, quoted = parse_key(content[:colon], self.strict, number)
        rest = content[colon + 1 :].strip()
        if rest:
            value = parse_primitive(rest, self.strict, number)
        else:
            following = self.peek()
            if following is not None and following.depth > depth:
                value = self.parse_object(depth + 1)
            else:
                value = {}
        self.assign(target, key, quoted, value, number)

    def assign(self, target: Dict[str, Any], key: str, quoted: bool, value: Any, number: int) -> None:
        """Store a field, expanding dotted keys when enabled.

        Args:
            target: Object receiving the field.
            key: Parsed key.
            quoted: Whether the key was quoted.
            value: Field value.
            number: Line number of the field.
        """
        if not self.expand_paths:
            target[key] = value
            return
        segments = None if quoted else split_expandable_key(key)
        insert_value(target, segments or [key], value, self.strict, number)

    # -------------------------------------------------------------------------
    # Arrays
    # -------------------------------------------------------------------------

    def parse_array_body(self, header: ArrayHeader, depth: Depth, number: int) -> JsonArray:
        """Parse the body of an array whose header was already consumed.

        Args:
            header: Parsed header.
            depth: Logical depth of the header.
            number: Line number of the header.

        Returns:
            Array items.

        Raises:
            ArrayLengthError: In strict mode, if the item count differs from the header.
        """
        if header.fields is not None:
            items = self.parse_tabular_rows(header, depth)
        elif header.inline:
            items = [parse_primitive(token, self.strict, number) for token in split_delimited(header.inline, header.delimiter, number)]
        else:
            items = self.parse_block_items(header, depth)

        if len(items) != header.length:
            message = f"Array declares {header.length} items but has {len(items)}"
            if self.strict:
                raise ArrayLengthError(message, number)
            logger.debug("%s (line %d)", message, number)
        return items

    def parse_block_items(self, header: ArrayHeader, depth: Depth) -> List[Any]:
        """Parse array items on the lines below a header with no inline values.

        Args:
            header: Parsed header.
            depth: Logical depth of the header.

        Returns:
            Array items; empty when nothing is nested below the header.
        """
        following = self.peek()
        if following is None or following.depth <= depth:
            return []
        if following.depth == depth + 1 and not is_list_item(following.content):
            self.advance()
            return [parse_primitive(token, self.strict, following.number) for token in split_delimited(following.content, header.delimiter, following.number)]
        return self.parse_list_items(header, depth + 1)

    def parse_tabular_rows(self, header: ArrayHeader, depth: Depth) -> List[Dict[str, Any]]:
        """Parse delimited rows one level below a tabular header.

        Args:
            header: Parsed header with fields.
            depth: Logical depth of the header.

        Returns:
            One object per row.

        Raises:
            ArrayLengthError: In strict mode, if a row width differs from the field count.
            ToonDecodeError: In strict mode, on a blank line between rows.
        """
        fields = header.fields or []
        rows: List[Dict[str, Any]] = []
        started = False
        while True:
            line = self.peek()
            if line is None or line.depth <= depth:
                return rows
            start = self.pos
            try:
                if started and line.blank_before:
                    self._blank_line_inside("tabular array", line)
                if line.depth > depth + 1:
                    raise ToonIndentationError("Unexpected indentation in tabular rows", line.number)
                self.advance()
                started = True
                tokens = split_delimited(line.content, header.delimiter, line.number)
                if len(tokens) != len(fields):
                    raise ArrayLengthError(f"Row has {len(tokens)} values but header declares {len(fields)} fields", line.number)
                rows.append({field: parse_primitive(token, self.strict, line.number) for field, token in zip(fields, tokens)})
            except ToonDecodeError as exc:
                self._recover(exc, start, depth + 1)

    def parse_list_items(self, header: ArrayHeader, item_depth: Depth) -> List[Any]:
        """Parse ``- `` items at ``item_depth``.

        Args:
            header: Parsed header of the enclosing array.
            item_depth: Depth of the ``- `` lines.

        Returns:
            Array items.

        Raises:
            ToonDecodeError: In strict mode, on a blank line between items.
        """
        items: List[Any] = []
        started = False
        while True:
            line = self.peek()
            if line is None or line.depth < item_depth:
                return items
            start = self.pos
            try:
                if started and line.blank_before:
                    self._blank_line_inside("list array", line)
                if line.depth > item_depth:
                    raise ToonIndentationError(f"Unexpected indentation, expected depth {item_depth}", line.number)
                if not is_list_item(line.content):
                    raise ToonDecodeError(f"Expected list item in array of {header.length}: {line.content}", line.number)
                self.advance()
                started = True
                items.append(self.parse_list_item(line, item_depth))
            except ToonDecodeError as exc:
                self._recover(exc, start, item_depth)

    def parse_list_item(self, line: ParsedLine, item_depth: Depth) -> JsonValue:
        """Parse the value of a consumed ``- `` line.

        Args:
            line: The list item line.
            item_depth: Depth of the ``- `` line.

        Returns:
            Item value: an object, an array or a primitive.
        """
        if line.content == LIST_ITEM_MARKER:
            return {}
        rest = line.content[len(LIST_ITEM_PREFIX) :]

        header = parse_header(rest, self.delimiter, self.strict, line.number)
        if header is not None and header.key is None:
            return self.parse_array_body(header, item_depth, line.number)

        if header is not None or find_unquoted_colon(rest, line.number) != -1:
            item: Dict[str, Any] = {}
            self.parse_field(rest, line.number, item_depth + 1, item)
            self.parse_fields_into(item, item_depth + 1)
            return item

        return parse_primitive(rest, self.strict, line.number)
