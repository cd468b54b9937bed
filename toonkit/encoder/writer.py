# -*- coding: utf-8 -*-
"""Location: ./toonkit/encoder/writer.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Line accumulator for the encoder.

Each encode call owns one LineWriter and threads it through the recursive
encoding functions. Lines are stored with their depth and indented only when
the document is joined.

Examples:
    >>> writer = LineWriter(2)
    >>> writer.push(0, "users:")
    >>> writer.push(1, "name: Ada")
    >>> print(writer.to_string())
    users:
      name: Ada
"""

# Standard
from typing import List, Tuple

# First-Party
from toonkit.constants import LIST_ITEM_PREFIX
from toonkit.values import Depth


class LineWriter:
    """Ordered buffer of ``(depth, content)`` output lines."""

    def __init__(self, indent: int) -> None:
        """Create an empty writer.

        Args:
            indent: Spaces per indentation level.
        """
        self._indentation = " " * indent
        self._lines: List[Tuple[Depth, str]] = []

    def __len__(self) -> int:
        return len(self._lines)

    def push(self, depth: Depth, content: str) -> None:
        """Append a line at the given depth.

        Args:
            depth: Indentation level.
            content: Line text without indentation.
        """
        self._lines.append((depth, content))

    def push_list_item(self, depth: Depth, content: str) -> None:
        """Append a ``- `` prefixed line at the given depth.

        Args:
            depth: Indentation level of the list item.
            content: Item text.
        """
        self._lines.append((depth, LIST_ITEM_PREFIX + content))

    def mark_list_item(self, index: int, depth: Depth) -> None:
        """Move an already written line onto a list item marker.

        Used to put the first line of an object or array on the ``- `` line
        after it was encoded one level deeper.

        Args:
            index: Position of the line in the buffer.
            depth: Indentation level of the list item.

        Examples:
            >>> writer = LineWriter(2)
            >>> writer.push(2, "id: 1")
            >>> writer.push(2, "name: Ada")
            >>> writer.mark_list_item(0, 1)
            >>> print(writer.to_string())
              - id: 1
                name: Ada
        """
        _, content = self._lines[index]
        self._lines[index] = (depth, LIST_ITEM_PREFIX + content)

    def to_string(self) -> str:
        """Join the buffered lines into a document.

        Returns:
            Lines joined with ``\\n``, without a trailing newline.
        """
        return "\n".join(self._indentation * depth + content for depth, content in self._lines)
