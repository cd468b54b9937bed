# -*- coding: utf-8 -*-
"""Location: ./tests/unit/toonkit/test_roundtrip.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Round-trip, idempotence, quoting and thread-safety properties of the codec.
"""

# Standard
from concurrent.futures import ThreadPoolExecutor
import itertools

# Third-Party
import pytest

# First-Party
from toonkit import decode, encode
from toonkit.util.strings import is_safe_unquoted

SAMPLE = {
    "id": 7,
    "name": "Ada Lovelace",
    "active": True,
    "score": 98.5,
    "ratio": -0.125,
    "big": 12345678901234567890,
    "nothing": None,
    "tags": ["math", "poetry"],
    "empty_list": [],
    "empty_obj": {},
    "users": [
        {"id": 1, "name": "Alice", "role": "admin"},
        {"id": 2, "name": "Bob", "role": "user"},
    ],
    "matrix": [[1, 2], [3, 4], []],
    "mixed": [1, "two", {"three": 3, "four": [4]}, [5, 6], [{"deep": True}], {}],
    "tricky": [
        "",
        " padded ",
        "true",
        "null",
        "42",
        "-7",
        "05",
        "1e5",
        "-dash",
        "a,b",
        "a|b",
        "x:y",
        'quote"d',
        "back\\slash",
        "line\nbreak",
        "tab\there",
        "[bracket]",
        "{brace}",
        "unicode ✓ ü",
    ],
    "nested": {"level1": {"level2": {"level3": "deep"}}},
    "weird keys": {"with space": 1, "1numeric": 2, "": 3, "dotted.key": 4, "quote\"key": 5},
    "groups": [{"users": [{"id": 1}, {"id": 2}], "name": "g"}, {"users": [], "name": "h"}],
    "list_of_lists": [[1, [2, [3]]], [[{"a": 1}, {"a": 2}]]],
}

OPTION_GRID = [
    {"delimiter": delimiter, "indent": indent, "length_marker": marker}
    for delimiter, indent, marker in itertools.product(["comma", "tab", "pipe"], [2, 4], [False, True])
]


class TestRoundTrip:
    """decode(encode(v)) == v."""

    def test_default_options(self):
        """The sample survives a round trip with default options."""
        assert decode(encode(SAMPLE)) == SAMPLE

    @pytest.mark.parametrize("options", OPTION_GRID)
    def test_option_grid(self, options):
        """The sample survives every delimiter, indent and marker combination."""
        assert decode(encode(SAMPLE, options), {"indent": options["indent"]}) == SAMPLE

    @pytest.mark.parametrize(
        "value",
        [None, True, 0, -3, 2.5, "", "hello", "123", [], {}, [[]], [{}], [None, None], {"a": [{}]}, [[], [1]]],
    )
    def test_small_values(self, value):
        """Edge values survive a round trip."""
        assert decode(encode(value)) == value

    def test_whole_floats_coalesce_to_int(self):
        """Whole-valued floats come back as integers."""
        decoded = decode(encode({"x": 3.0}))
        assert decoded == {"x": 3}
        assert isinstance(decoded["x"], int)


class TestIdempotence:
    """encode(decode(encode(v))) == encode(v)."""

    @pytest.mark.parametrize("options", OPTION_GRID + [{"flatten": True}])
    def test_reencode(self, options):
        """Re-encoding a decoded document reproduces the same text."""
        decode_options = {"indent": options.get("indent", 2)}
        first = encode(SAMPLE, options)
        assert encode(decode(first, decode_options), options) == first

    def test_reencode_with_float_coalescing(self):
        """Re-encoding is stable even when floats coalesce."""
        first = encode({"values": [1.0, 2.50, -0.0, 1e21]})
        assert first == "values[4]: 1,2.5,0,1000000000000000000000"
        assert encode(decode(first)) == first


class TestQuotingMinimality:
    """A string is quoted iff it is not safe unquoted."""

    @pytest.mark.parametrize("text", SAMPLE["tricky"] + ["plain", "hello world", "x-y", "café"])
    @pytest.mark.parametrize("delimiter", [",", "\t", "|"])
    def test_quoted_iff_unsafe(self, text, delimiter):
        """Field values are quoted exactly when the predicate fails."""
        name = {",": "comma", "\t": "tab", "|": "pipe"}[delimiter]
        rendered = encode({"v": text}, {"delimiter": name})[len("v: ") :]
        assert rendered.startswith('"') is (not is_safe_unquoted(text, delimiter))

    def test_delimiter_change_only_affects_delimiter_strings(self):
        """Switching delimiter only changes quoting of strings containing either delimiter."""
        assert encode(["a|b", "c,d", "plain"]) == '[3]: a|b,"c,d",plain'
        assert encode(["a|b", "c,d", "plain"], {"delimiter": "pipe"}) == '[3|]: "a|b"|c,d|plain'


class TestTabularBoundary:
    """Uniform rows are tabular; one extra key is not."""

    def test_uniform_rows_tabular(self):
        """Identical key sets with scalars encode tabular."""
        assert encode([{"a": 1, "b": 2}, {"a": 3, "b": 4}]).startswith("[2]{a,b}:")

    def test_extra_key_breaks_table(self):
        """One row with an extra key forces list items."""
        assert encode([{"a": 1, "b": 2}, {"a": 3, "b": 4, "c": 5}]).startswith("[2]:\n  - a: 1")


class TestConcurrency:
    """Independent calls may run in parallel threads."""

    def test_parallel_encode_decode(self):
        """Threaded results match sequential results."""
        payloads = [{"id": i, "rows": [{"n": i, "s": f"v{i}"}, {"n": i + 1, "s": "x,y"}], "nested": {"k": [i, {"d": i}]}} for i in range(200)]
        option_sets = [{"delimiter": "comma"}, {"delimiter": "pipe", "flatten": True}, {"delimiter": "tab", "length_marker": True}]
        jobs = [(payload, option_sets[i % len(option_sets)]) for i, payload in enumerate(payloads)]

        def work(job):
            payload, options = job
            text = encode(payload, options)
            return text, decode(text, {"expand_paths": "safe"} if options.get("flatten") else None)

        sequential = [work(job) for job in jobs]
        with ThreadPoolExecutor(max_workers=8) as pool:
            threaded = list(pool.map(work, jobs))

        assert threaded == sequential
        assert all(decoded == payload for (_, decoded), payload in zip(threaded, payloads))
