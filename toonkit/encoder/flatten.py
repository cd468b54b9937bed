# -*- coding: utf-8 -*-
"""Location: ./toonkit/encoder/flatten.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Key folding.

A chain of objects that each hold exactly one key collapses into a single
dotted key::

    {"a": {"b": {"c": 1}}}   ->   a.b.c: 1

Folding is skipped whenever the dotted key could be confused with a key that
is already present, so decoding with path expansion restores the nesting.

Examples:
    >>> result = try_fold_key_chain("a", {"b": {"c": 1}}, [], frozenset(), None, 10)
    >>> result.key, result.value, result.segment_count
    ('a.b.c', 1, 3)
    >>> try_fold_key_chain("a", {"b": {"c": 1}}, ["a.b"], frozenset(), None, 10) is None
    True
"""

# Standard
import logging
from typing import AbstractSet, Any, Iterable, NamedTuple, Optional

# First-Party
from toonkit.constants import IDENTIFIER_SEGMENT_RE
from toonkit.values import is_object

logger = logging.getLogger(__name__)


class FoldResult(NamedTuple):
    """Outcome of a successful fold.

    Attributes:
        key: Dotted key made of the collected segments.
        value: Value at the end of the chain; a non-empty dict is a tail to encode nested.
        segment_count: Number of segments in ``key``.
        path: Absolute dotted path of the folded key.
    """

    key: str
    value: Any
    segment_count: int
    path: str


def join_path(prefix: Optional[str], key: str) -> str:
    """Append a key to a dotted path.

    Args:
        prefix: Path of the enclosing object, or None at scope root.
        key: Key to append.

    Returns:
        Dotted path.

    Examples:
        >>> join_path(None, "a"), join_path("a", "b")
        ('a', 'a.b')
    """
    return f"{prefix}.{key}" if prefix else key


def paths_overlap(left: str, right: str) -> bool:
    """Return True when two dotted paths are equal or one prefixes the other.

    Examples:
        >>> paths_overlap("a.b", "a.b.c"), paths_overlap("a.b", "a.bc")
        (True, False)
    """
    return left == right or left.startswith(right + ".") or right.startswith(left + ".")


def try_fold_key_chain(
    key: str,
    value: Any,
    sibling_keys: Iterable[str],
    root_literal_keys: AbstractSet[str],
    path_prefix: Optional[str],
    remaining_depth: int,
) -> Optional[FoldResult]:
    """Try to fold a chain of single-key objects into one dotted key.

    Args:
        key: Key of the field being encoded.
        value: Field value.
        sibling_keys: Other keys of the enclosing object.
        root_literal_keys: Dotted keys written literally at the scope root.
        path_prefix: Dotted path of the enclosing object.
        remaining_depth: Maximum number of segments the folded key may have.

    Returns:
        FoldResult, or None when the field must be encoded without folding.

    Examples:
        >>> try_fold_key_chain("a", {"b": 1, "c": 2}, [], frozenset(), None, 10) is None
        True
        >>> try_fold_key_chain("a", {"b-c": 1}, [], frozenset(), None, 10) is None
        True
        >>> try_fold_key_chain("a", {"b": {"c": {"d": 1}}}, [], frozenset(), None, 2).value
        {'c': {'d': 1}}
    """
    if not is_object(value) or remaining_depth < 2:
        return None

    segments = [key]
    current = value
    while is_object(current) and len(current) == 1 and len(segments) < remaining_depth:
        ((child_key, child_value),) = current.items()
        segments.append(child_key)
        current = child_value

    if len(segments) < 2:
        return None
    if not all(IDENTIFIER_SEGMENT_RE.fullmatch(segment) for segment in segments):
        return None

    folded = ".".join(segments)
    path = join_path(path_prefix, folded)
    for sibling in sibling_keys:
        if paths_overlap(folded, sibling):
            logger.debug("Not folding %s: collides with sibling key %s", folded, sibling)
            return None
    for literal in root_literal_keys:
        if paths_overlap(path, literal):
            logger.debug("Not folding %s: collides with literal key %s", path, literal)
            return None

    return FoldResult(folded, current, len(segments), path)
