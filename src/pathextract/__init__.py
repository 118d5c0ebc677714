"""pathextract — positional value extraction for URL path segments.

Decodes a slash-delimited path into typed values using a compact pattern
of one-character directives.  Stateless and side-effect free: every call
re-walks its pattern, so extraction is safe from any number of threads.

Basic usage::

    from pathextract import extract

    match = extract("/users/42/TWFu", "^users^IB")
    match.python()  # [True, 42, b"Man"]

Binding onto a dataclass::

    from pathextract import extract_into

    user = extract_into(UserPath, "/users/42", "^users^I")
"""

# Declare free-threading support (PEP 703)
_Py_mod_gil = 0

__version__ = "0.1.0.dev0"
__all__ = [
    "Absent",
    "BindingError",
    "Bool",
    "Bytes",
    "CLIConfig",
    "DecodeError",
    "Duration",
    "ExtractError",
    "Int",
    "MalformedPattern",
    "Match",
    "PatternExhausted",
    "String",
    "Timestamp",
    "UnknownDirective",
    "Value",
    "extract",
    "extract_into",
    "parse_pattern",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import pathextract`` fast while providing a clean top-level API.
    """
    if name == "extract":
        from pathextract.extractor import extract

        return extract

    if name == "extract_into":
        from pathextract.binding import extract_into

        return extract_into

    if name == "parse_pattern":
        from pathextract.directives import parse_pattern

        return parse_pattern

    if name == "CLIConfig":
        from pathextract.config import CLIConfig

        return CLIConfig

    if name in ("Absent", "Bool", "Bytes", "Duration", "Int", "Match", "String", "Timestamp", "Value"):
        from pathextract import values as _values

        return getattr(_values, name)

    if name in (
        "BindingError",
        "DecodeError",
        "ExtractError",
        "MalformedPattern",
        "PatternExhausted",
        "UnknownDirective",
    ):
        from pathextract import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
