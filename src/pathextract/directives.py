"""Directive cursor over a pattern string.

A pattern is a run of one-character directive tags, except the literal
directive, which spans ``^text^``.  The cursor walks the pattern left to
right, one directive per call, with two states:

- *boundary*: the next character starts a directive
- *literal*: inside a ``^...^`` span, collecting the expected text

The pattern is re-walked on every extraction; nothing is cached.
"""

from dataclasses import dataclass

from pathextract.errors import MalformedPattern

LITERAL_DELIMITER = "^"

_BOUNDARY = 0
_LITERAL = 1


@dataclass(frozen=True, slots=True)
class Directive:
    """One pattern element.

    ``offset`` is where the directive starts in the pattern and ``width``
    how many pattern characters it occupies (``len(literal) + 2`` for a
    literal, 1 otherwise).
    """

    tag: str
    offset: int
    width: int = 1
    literal: str | None = None


class DirectiveCursor:
    """Reads directives from a pattern string in order.

    Usage::

        cursor = DirectiveCursor("X^users^I")
        while not cursor.at_end:
            directive = cursor.advance()
    """

    __slots__ = ("_offset", "_pattern")

    def __init__(self, pattern: str) -> None:
        self._pattern = pattern
        self._offset = 0

    @property
    def pattern(self) -> str:
        return self._pattern

    @property
    def offset(self) -> int:
        """Pattern offset of the next directive."""
        return self._offset

    @property
    def at_end(self) -> bool:
        return self._offset >= len(self._pattern)

    def advance(self) -> Directive:
        """Read the directive at the current offset and move past it.

        Raises ``MalformedPattern`` for a literal with no closing delimiter.
        Raises ``IndexError`` if the cursor is already at the end.
        """
        if self.at_end:
            msg = f"No directive at offset {self._offset}"
            raise IndexError(msg)

        start = self._offset
        state = _BOUNDARY
        text: list[str] = []

        for position in range(start, len(self._pattern)):
            char = self._pattern[position]
            if state == _BOUNDARY:
                if char != LITERAL_DELIMITER:
                    self._offset = position + 1
                    return Directive(tag=char, offset=start)
                state = _LITERAL
            elif char == LITERAL_DELIMITER:
                literal = "".join(text)
                self._offset = position + 1
                return Directive(
                    tag=LITERAL_DELIMITER,
                    offset=start,
                    width=len(literal) + 2,
                    literal=literal,
                )
            else:
                text.append(char)

        raise MalformedPattern(offset=start, pattern=self._pattern)


def parse_pattern(pattern: str) -> list[Directive]:
    """Parse every directive in *pattern* up front.

    Useful for validating a pattern before use; ``extract`` itself reads
    directives lazily, so trailing content after ``P`` is never parsed.
    """
    cursor = DirectiveCursor(pattern)
    directives: list[Directive] = []
    while not cursor.at_end:
        directives.append(cursor.advance())
    return directives
