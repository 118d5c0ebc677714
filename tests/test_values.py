"""Tests for pathextract.values — the typed value variants and Match."""

from datetime import UTC, datetime, timedelta

import pytest

from pathextract.values import (
    Absent,
    Bool,
    Bytes,
    Duration,
    Int,
    Match,
    String,
    Timestamp,
    to_json,
)


def _describe(value: object) -> str:
    match value:
        case Absent():
            return "absent"
        case Bool():
            return "literal"
        case Int(n):
            return f"int {n}"
        case String(s):
            return f"string {s}"
        case Bytes(raw):
            return f"bytes {raw.hex()}"
        case Duration(delta):
            return f"duration {delta.total_seconds()}"
        case Timestamp(when):
            return f"timestamp {when.year}"
    return "unknown"


class TestVariants:
    def test_kinds(self) -> None:
        assert Absent.kind == "absent"
        assert Bool.kind == "bool"
        assert Int.kind == "int"
        assert String.kind == "string"
        assert Bytes.kind == "bytes"
        assert Duration.kind == "duration"
        assert Timestamp.kind == "timestamp"

    def test_defaults(self) -> None:
        assert Absent().value is None
        assert Bool().value is True

    def test_frozen(self) -> None:
        value = Int(1)
        with pytest.raises(AttributeError):
            value.value = 2  # type: ignore[misc]

    def test_pattern_matching(self) -> None:
        assert _describe(Absent()) == "absent"
        assert _describe(Bool(True)) == "literal"
        assert _describe(Int(5)) == "int 5"
        assert _describe(String("x")) == "string x"
        assert _describe(Bytes(b"\x01")) == "bytes 01"
        assert _describe(Duration(timedelta(seconds=2))) == "duration 2.0"
        assert _describe(Timestamp(datetime(2014, 1, 1, tzinfo=UTC))) == "timestamp 2014"

    def test_equality_by_variant(self) -> None:
        assert Bytes(b"a") != String("a")
        assert Int(1) == Int(1)


class TestToJson:
    def test_plain_payloads(self) -> None:
        assert to_json(Absent()) is None
        assert to_json(Bool(True)) is True
        assert to_json(Int(-3)) == -3
        assert to_json(String("s")) == "s"

    def test_bytes_as_hex(self) -> None:
        assert to_json(Bytes(b"\xde\xad")) == "dead"

    def test_duration_as_milliseconds(self) -> None:
        assert to_json(Duration(timedelta(seconds=1, milliseconds=5))) == 1005

    def test_timestamp_as_iso(self) -> None:
        when = datetime(2014, 10, 1, 14, 15, 38, tzinfo=UTC)
        assert to_json(Timestamp(when)) == "2014-10-01T14:15:38Z"


class TestMatch:
    def test_sequence_protocol(self) -> None:
        match = Match((Int(1), String("a")))
        assert len(match) == 2
        assert match[0] == Int(1)
        assert list(match) == [Int(1), String("a")]

    def test_python(self) -> None:
        match = Match((Absent(), Bool(True), Bytes(b"x")))
        assert match.python() == [None, True, b"x"]

    def test_to_json(self) -> None:
        match = Match((Absent(), Bytes(b"\x01"), Duration(timedelta(milliseconds=7))))
        assert match.to_json() == [None, "01", 7]

    def test_empty(self) -> None:
        assert len(Match()) == 0
        assert Match().python() == []
