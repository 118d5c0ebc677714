"""pathextract exception hierarchy.

Shared across the directive cursor, the decoders, the extractor, and
dataclass binding so every module raises and catches the same types.
Catching ``ExtractError`` means "this path does not match this pattern".
"""

from dataclasses import dataclass


class ExtractError(Exception):
    """Base for all pathextract errors."""


@dataclass(frozen=True, slots=True)
class PatternExhausted(ExtractError):
    """The path has more segments than the pattern has directives."""

    offset: int
    segments: int = 0

    def __str__(self) -> str:
        return (
            f"Ran off the end of pattern string at offset {self.offset} "
            f"(segment {self.segments})"
        )


@dataclass(frozen=True, slots=True)
class DecodeError(ExtractError):
    """A segment could not be converted to the type its directive demands.

    ``kind`` names the directive (``"int"``, ``"base64"``, ``"literal"``, ...)
    and ``offset`` is its position in the pattern string.
    """

    kind: str
    offset: int
    segment: str = ""

    def __str__(self) -> str:
        return f"Could not extract {self.kind} at offset {self.offset}: {self.segment!r}"


@dataclass(frozen=True, slots=True)
class MalformedPattern(ExtractError):
    """A literal directive has no closing ``^`` delimiter."""

    offset: int
    pattern: str = ""

    def __str__(self) -> str:
        return f"Bad pattern for literal at offset {self.offset}, no ending ^ delimiter: {self.pattern!r}"


@dataclass(frozen=True, slots=True)
class UnknownDirective(ExtractError):
    """A pattern character is not one of the recognized tags."""

    char: str
    offset: int
    pattern: str = ""

    def __str__(self) -> str:
        return f"Unrecognized pattern {self.char!r} at offset {self.offset}: {self.pattern!r}"


class BindingError(ExtractError):
    """Raised when a Match cannot populate the target dataclass."""
