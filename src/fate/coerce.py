"""Normalization of arbitrary input into error records and log messages."""

from __future__ import annotations

import json
from typing import Any, Iterator

from fate.errors import OutcomeError


def flatten(value: Any) -> Iterator[Any]:
    """Yield the atomic values of ``value``, descending into lists and tuples.

    Nesting is flattened completely and order is preserved.
    """
    if isinstance(value, (list, tuple)):
        for item in value:
            yield from flatten(item)
    else:
        yield value


def is_stringable(value: Any) -> bool:
    """True when the value's type provides its own ``__str__``."""
    if value is None:
        return False
    to_string = getattr(type(value), "__str__", None)
    if not callable(to_string):
        return False
    return to_string is not object.__str__


def dump_json(value: Any) -> str:
    """``json.dumps`` that never raises; unencodable values fall back to repr."""
    try:
        return json.dumps(value, default=repr)
    except (TypeError, ValueError):
        return repr(value)


def to_error(value: Any) -> BaseException:
    if isinstance(value, BaseException):
        return value
    if is_stringable(value):
        return OutcomeError(str(value))
    return OutcomeError(dump_json(value))


def to_message(value: Any) -> str:
    if isinstance(value, str):
        return value
    if is_stringable(value):
        return str(value)
    return dump_json(value)
