"""Per-directive segment decoders.

Built-in decoders for the one-character directive tags.  Each decoder
takes one path segment and returns a typed ``Value``; it raises
``ValueError`` (or a subclass) when the segment is not valid input.
The literal (``^text^``) and path-tail (``P``) directives need more than
the segment and are handled by the extractor itself.
"""

import base64
import binascii
import re
from collections.abc import Callable
from datetime import UTC, datetime, timedelta

from pathextract.values import Absent, Bytes, Duration, Int, String, Timestamp, Value

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)

# ASCII only: str.isdigit() and int() also accept other Unicode digits
_INTEGER = re.compile(r"[+-]?[0-9]+", re.ASCII)
_BASE64URL = re.compile(r"[A-Za-z0-9_-]*={0,2}", re.ASCII)
_HEX = re.compile(r"(?:[0-9A-Fa-f]{2})*", re.ASCII)


def parse_integer(s: str) -> int:
    """Parse a base-10 signed integer, rejecting whitespace and underscores."""
    if not _INTEGER.fullmatch(s):
        msg = f"invalid base-10 integer: {s!r}"
        raise ValueError(msg)
    return int(s)


def decode_ignore(s: str) -> Absent:
    return Absent()


def decode_int(s: str) -> Int:
    return Int(parse_integer(s))


def decode_string(s: str) -> String:
    return String(s)


def decode_base64(s: str) -> Bytes:
    """URL-safe base64 with mandatory ``=`` padding."""
    if not _BASE64URL.fullmatch(s) or len(s) % 4:
        msg = f"invalid url-safe base64: {s!r}"
        raise ValueError(msg)
    try:
        return Bytes(base64.urlsafe_b64decode(s))
    except binascii.Error as exc:
        raise ValueError(str(exc)) from exc


def decode_hex(s: str) -> Bytes:
    if not _HEX.fullmatch(s):
        msg = f"invalid hex: {s!r}"
        raise ValueError(msg)
    return Bytes(bytes.fromhex(s))


def decode_milliseconds(s: str) -> Duration:
    return Duration(_timedelta(milliseconds=parse_integer(s)))


def decode_seconds(s: str) -> Duration:
    return Duration(_timedelta(seconds=parse_integer(s)))


def decode_epoch_milliseconds(s: str) -> Timestamp:
    """Epoch milliseconds, UTC.

    Uses floor division for the seconds part, so the microsecond remainder
    is never negative: ``-1`` is 1969-12-31T23:59:59.999Z, one millisecond
    before the epoch.
    """
    millis = parse_integer(s)
    seconds, remainder = divmod(millis, 1000)
    return Timestamp(_from_epoch(seconds, remainder * 1000))


def decode_epoch_seconds(s: str) -> Timestamp:
    return Timestamp(_from_epoch(parse_integer(s), 0))


def _timedelta(**kwargs: int) -> timedelta:
    try:
        return timedelta(**kwargs)
    except OverflowError as exc:
        raise ValueError(str(exc)) from exc


def _from_epoch(seconds: int, microseconds: int) -> datetime:
    try:
        return EPOCH + timedelta(seconds=seconds, microseconds=microseconds)
    except OverflowError as exc:
        raise ValueError(str(exc)) from exc


# tag -> (kind, decoder) for each single-character directive
DECODERS: dict[str, tuple[str, Callable[[str], Value]]] = {
    "X": ("ignore", decode_ignore),
    "I": ("int", decode_int),
    "S": ("string", decode_string),
    "B": ("base64", decode_base64),
    "H": ("hex", decode_hex),
    "d": ("milliseconds", decode_milliseconds),
    "D": ("seconds", decode_seconds),
    "e": ("epoch milliseconds", decode_epoch_milliseconds),
    "E": ("epoch seconds", decode_epoch_seconds),
}

LITERAL_KIND = "literal"
PATH_TAIL_TAG = "P"


def decode_segment(s: str, tag: str) -> Value:
    """Decode segment *s* with the decoder registered for *tag*.

    Raises ``ValueError`` if the segment cannot be decoded.
    Raises ``KeyError`` if *tag* is not a registered decoder.
    """
    _, decoder = DECODERS[tag]
    return decoder(s)
