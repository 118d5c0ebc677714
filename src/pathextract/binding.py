"""Typed binding of extracted values onto dataclasses.

Populates a dataclass instance from a ``Match``, so a handler can receive
``UserPath(user_id=42, since=...)`` instead of a positional list::

    @dataclass(frozen=True, slots=True)
    class UserPath:
        user_id: int
        since: datetime

    user = extract_into(UserPath, "/users/42/1412172938", "^users^IE")

Values that carry no data (``Absent`` from ``X`` and ``Bool`` from a
literal) are skipped.  The remaining payloads bind to the dataclass's
``init`` fields in declaration order.  Fields with defaults may be left
unbound; surplus values or missing required fields raise ``BindingError``.
"""

from __future__ import annotations

import dataclasses
from typing import Any, TypeVar

from pathextract.errors import BindingError
from pathextract.extractor import extract
from pathextract.values import Absent, Bool, Match

T = TypeVar("T")


def is_bindable_dataclass(annotation: Any) -> bool:
    """Return True if *annotation* is a dataclass type (not an instance).

    Excludes pathextract's own value types, which are never binding targets.
    """
    if not isinstance(annotation, type) or not dataclasses.is_dataclass(annotation):
        return False

    module = getattr(annotation, "__module__", "") or ""
    return not module.startswith("pathextract.")


def bind_match(cls: type[T], match: Match) -> T:
    """Create an instance of *cls* from the data-carrying values in *match*."""
    if not is_bindable_dataclass(cls):
        msg = f"{cls!r} is not a dataclass type"
        raise TypeError(msg)

    payloads = [v.value for v in match if not isinstance(v, (Absent, Bool))]
    fields = [f for f in dataclasses.fields(cls) if f.init]

    if len(payloads) > len(fields):
        msg = f"{cls.__name__} has {len(fields)} fields but the path yielded {len(payloads)} values"
        raise BindingError(msg)

    kwargs: dict[str, Any] = {}
    for f, payload in zip(fields, payloads, strict=False):
        kwargs[f.name] = payload

    missing = [
        f.name
        for f in fields[len(payloads) :]
        if f.default is dataclasses.MISSING and f.default_factory is dataclasses.MISSING
    ]
    if missing:
        msg = f"{cls.__name__} is missing values for: {', '.join(missing)}"
        raise BindingError(msg)

    return cls(**kwargs)


def extract_into(cls: type[T], path: str, pattern: str) -> T:
    """Extract *path* with *pattern* and bind the result onto *cls*.

    Raises any ``ExtractError`` from extraction, or ``BindingError`` when
    the values do not fit the dataclass.
    """
    return bind_match(cls, extract(path, pattern))
