"""Positional value extraction from URL paths.

``extract`` decodes a slash-delimited path into typed values, one per
segment, following a pattern string of directive tags::

    X         ignore                      -> Absent
    ^text^    exact match of "text"       -> Bool
    I         base-10 integer             -> Int
    S         string                      -> String
    B         url-safe base64             -> Bytes
    H         hex                         -> Bytes
    d         milliseconds                -> Duration
    D         seconds                     -> Duration
    e         epoch milliseconds (UTC)    -> Timestamp
    E         epoch seconds (UTC)         -> Timestamp
    P         rest of the path, joined    -> String (must be last)

There are no optional segments and no backtracking: the pattern must
cover every segment, and the first failure ends the extraction.
"""

import logging

from pathextract.decoders import (
    DECODERS,
    LITERAL_KIND,
    PATH_TAIL_TAG,
    decode_segment,
)
from pathextract.directives import LITERAL_DELIMITER, DirectiveCursor
from pathextract.errors import DecodeError, PatternExhausted, UnknownDirective
from pathextract.values import Bool, Match, String, Value

logger = logging.getLogger("pathextract")


def split_path(path: str) -> tuple[list[str], bool]:
    """Strip one leading and one trailing ``/`` and split into segments.

    Returns the segments and whether a trailing slash was stripped.

    Examples::

        "/a/b/"  -> (["a", "b"], True)
        "a//c"   -> (["a", "", "c"], False)
        ""       -> ([""], False)
        "//"     -> ([""], True)
    """
    if path.startswith("/"):
        path = path[1:]
    trailing_slash = path.endswith("/")
    if trailing_slash:
        path = path[:-1]
    return path.split("/"), trailing_slash


def extract(path: str, pattern: str) -> Match:
    """Extract typed values from *path* according to *pattern*.

    Returns a ``Match`` with one value per consumed segment.
    Raises ``PatternExhausted`` if the path has more segments than the
    pattern has directives.
    Raises ``DecodeError`` if a segment does not decode as its directive's type.
    Raises ``MalformedPattern`` if a literal directive is never closed.
    Raises ``UnknownDirective`` for an unrecognized tag.
    """
    segments, trailing_slash = split_path(path)
    cursor = DirectiveCursor(pattern)
    values: list[Value] = []

    for index, segment in enumerate(segments):
        if cursor.at_end:
            logger.debug("Pattern %r exhausted at segment %d of %r", pattern, index, path)
            raise PatternExhausted(offset=cursor.offset, segments=index)

        directive = cursor.advance()

        if directive.tag == PATH_TAIL_TAG:
            tail = "/".join(segments[index:])
            if trailing_slash:
                tail += "/"
            logger.debug("Path tail at offset %d captured %r", directive.offset, tail)
            values.append(String(tail))
            return Match(tuple(values))

        if directive.tag == LITERAL_DELIMITER:
            if segment != directive.literal:
                raise DecodeError(kind=LITERAL_KIND, offset=directive.offset, segment=segment)
            values.append(Bool(True))
            continue

        if directive.tag not in DECODERS:
            raise UnknownDirective(char=directive.tag, offset=directive.offset, pattern=pattern)

        try:
            values.append(decode_segment(segment, directive.tag))
        except ValueError as exc:
            kind, _ = DECODERS[directive.tag]
            logger.debug("Could not decode %r as %s at offset %d", segment, kind, directive.offset)
            raise DecodeError(kind=kind, offset=directive.offset, segment=segment) from exc

    return Match(tuple(values))
