"""Typed extraction results.

Each decoded segment becomes one variant of ``Value``, a closed set of
frozen dataclasses.  Consumers discriminate with structural pattern
matching instead of ``isinstance`` chains or unchecked casts::

    for value in extract("/users/42", "^users^I"):
        match value:
            case Int(n):
                ...
            case Bool():
                ...

``Match`` is the ordered sequence produced by one ``extract`` call.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any, ClassVar, TypeAlias


@dataclass(frozen=True, slots=True)
class Absent:
    """An ignored segment (``X``)."""

    kind: ClassVar[str] = "absent"
    value: None = None


@dataclass(frozen=True, slots=True)
class Bool:
    """Result of a literal match (``^text^``). Always ``True``."""

    kind: ClassVar[str] = "bool"
    value: bool = True


@dataclass(frozen=True, slots=True)
class Int:
    kind: ClassVar[str] = "int"
    value: int


@dataclass(frozen=True, slots=True)
class String:
    """A verbatim segment (``S``) or a joined path tail (``P``)."""

    kind: ClassVar[str] = "string"
    value: str


@dataclass(frozen=True, slots=True)
class Bytes:
    kind: ClassVar[str] = "bytes"
    value: bytes


@dataclass(frozen=True, slots=True)
class Duration:
    kind: ClassVar[str] = "duration"
    value: timedelta


@dataclass(frozen=True, slots=True)
class Timestamp:
    """An absolute instant, always timezone-aware in UTC."""

    kind: ClassVar[str] = "timestamp"
    value: datetime


Value: TypeAlias = Absent | Bool | Int | String | Bytes | Duration | Timestamp


def to_json(value: Value) -> Any:
    """Render a single value as a JSON-safe object.

    Bytes become lowercase hex, durations integer milliseconds, and
    timestamps ISO-8601 strings with a ``Z`` suffix.
    """
    match value:
        case Bytes(raw):
            return raw.hex()
        case Duration(delta):
            return delta // timedelta(milliseconds=1)
        case Timestamp(when):
            return when.astimezone(UTC).isoformat().replace("+00:00", "Z")
        case _:
            return value.value


@dataclass(frozen=True, slots=True)
class Match:
    """Result of a successful extraction.

    Holds one value per consumed path segment, in path order.
    """

    values: tuple[Value, ...] = ()

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.values)

    def __getitem__(self, index: int) -> Value:
        return self.values[index]

    def python(self) -> list[Any]:
        """Return the plain payloads (``None``, ``True``, ``int``, ``str``, ...)."""
        return [v.value for v in self.values]

    def to_json(self) -> list[Any]:
        """Return a JSON-safe list of payloads."""
        return [to_json(v) for v in self.values]
