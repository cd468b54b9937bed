# -*- coding: utf-8 -*-
"""Location: ./tests/unit/toonkit/test_normalize.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Unit tests for host value normalization.
"""

# Standard
from dataclasses import dataclass, field
from datetime import date, datetime, time, timezone
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from pathlib import PurePosixPath
from typing import List
import uuid

# Third-Party
from pydantic import BaseModel
import pytest

# First-Party
from toonkit import encode
from toonkit.normalize import normalize_value


class Status(str, Enum):
    """Status values used in tests."""

    ACTIVE = "active"
    DISABLED = "disabled"


class Priority(Enum):
    LOW = 1
    HIGH = 2


class Owner(BaseModel):
    """Pydantic model used in tests."""

    name: str
    joined: date
    status: Status = Status.ACTIVE


@dataclass
class Point:
    x: int
    y: int
    labels: List[str] = field(default_factory=list)


class Plain:
    def __init__(self):
        self.name = "plain"
        self.count = 2
        self._secret = "hidden"


class TestScalars:
    """Test scalar conversions."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (None, None),
            (True, True),
            (7, 7),
            (2.5, 2.5),
            ("text", "text"),
            (float("nan"), None),
            (float("inf"), None),
            (Decimal("NaN"), None),
            (Decimal("1.50"), Decimal("1.50")),
            (Fraction(1, 4), 0.25),
            (Status.ACTIVE, "active"),
            (Priority.HIGH, 2),
        ],
    )
    def test_scalar(self, value, expected):
        """Scalars pass through, non-finite numbers become None and enums unwrap."""
        assert normalize_value(value) == expected

    def test_bool_stays_bool(self):
        """Booleans are not turned into integers."""
        assert normalize_value(False) is False

    def test_temporal_values(self):
        """Dates and times use ISO 8601 text."""
        moment = datetime(2025, 3, 4, 5, 6, 7, tzinfo=timezone.utc)
        assert normalize_value(moment) == "2025-03-04T05:06:07+00:00"
        assert normalize_value(date(2025, 3, 4)) == "2025-03-04"
        assert normalize_value(time(12, 30)) == "12:30:00"

    def test_identifiers_and_paths(self):
        """UUIDs and paths render as strings."""
        ident = uuid.UUID("12345678-1234-5678-1234-567812345678")
        assert normalize_value(ident) == "12345678-1234-5678-1234-567812345678"
        assert normalize_value(PurePosixPath("/tmp/x.txt")) == "/tmp/x.txt"

    def test_bytes_base64(self):
        """Binary data is base64 encoded."""
        assert normalize_value(b"\x00\xff") == "AP8="
        assert normalize_value(bytearray(b"hi")) == "aGk="


class TestContainers:
    """Test container conversions."""

    def test_tuples_sets_and_generators(self):
        """Iterables become lists."""
        assert normalize_value((1, 2)) == [1, 2]
        assert normalize_value({3}) == [3]
        assert normalize_value(x * 2 for x in range(3)) == [0, 2, 4]

    def test_mapping_keys_become_strings(self):
        """Mapping keys are stringified in insertion order."""
        assert list(normalize_value({2: "b", 1: "a"}).items()) == [("2", "b"), ("1", "a")]

    def test_pydantic_model(self):
        """Models are dumped and their fields normalized."""
        owner = Owner(name="Ada", joined=date(1815, 12, 10))
        assert normalize_value(owner) == {"name": "Ada", "joined": "1815-12-10", "status": "active"}

    def test_dataclass(self):
        """Dataclass fields are used in declaration order."""
        assert normalize_value(Point(1, 2, ["a"])) == {"x": 1, "y": 2, "labels": ["a"]}

    def test_plain_object_public_attributes(self):
        """Plain objects expose their public attributes only."""
        assert normalize_value(Plain()) == {"name": "plain", "count": 2}

    def test_shared_reference_is_not_a_cycle(self):
        """The same container may appear twice side by side."""
        shared = [1]
        assert normalize_value({"a": shared, "b": shared}) == {"a": [1], "b": [1]}

    def test_cycle_detected(self):
        """A container that contains itself is rejected."""
        data = {"name": "loop"}
        data["self"] = data
        with pytest.raises(ValueError, match="Circular reference"):
            normalize_value(data)

    def test_unsupported_type(self):
        """Values with no representation raise TypeError."""
        with pytest.raises(TypeError, match="not TOON serializable"):
            normalize_value(object())


class TestEncodeNormalizes:
    """encode() normalizes before encoding."""

    def test_models_in_tables(self):
        """Models in a list encode as table rows."""
        owners = [Owner(name="Ada", joined=date(1815, 12, 10)), Owner(name="Alan", joined=date(1912, 6, 23), status=Status.DISABLED)]
        assert encode({"owners": owners}) == "owners[2]{name,joined,status}:\n  Ada,1815-12-10,active\n  Alan,1912-06-23,disabled"

    def test_dataclass_root(self):
        """A dataclass encodes like a mapping."""
        assert encode(Point(1, 2)) == "x: 1\ny: 2\nlabels[0]:"
