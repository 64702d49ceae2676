"""Core value types for the formatting runtime.

A value supplied by the caller is dynamically typed. It is inspected once
per placeholder, in the orchestrator, to pick a specifier; each renderer
then checks only the narrow domain it accepts.

    text        -> str
    integer     -> int (bool excluded: True is not a number here)
    floating    -> float
    codepoints  -> list/tuple of int (char specifier only)

Python 3.11+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TypeAlias, TypeGuard

from fmtengine.enums import Specifier

__all__ = [
    "FormatValue",
    "NamedArgs",
    "PositionalArgs",
    "infer_specifier",
    "is_codepoints",
    "is_float",
    "is_integer",
    "is_number",
]

# Any value is accepted; unknown types render through str().
FormatValue: TypeAlias = object

PositionalArgs: TypeAlias = Sequence[FormatValue]
NamedArgs: TypeAlias = Mapping[str, FormatValue]


def is_integer(value: object) -> TypeGuard[int]:
    """True for int values, excluding bool."""
    return isinstance(value, int) and not isinstance(value, bool)


def is_float(value: object) -> TypeGuard[float]:
    """True for float values."""
    return isinstance(value, float)


def is_number(value: object) -> TypeGuard[int | float]:
    """True for the locale-number domain: int or float."""
    return is_integer(value) or is_float(value)


def is_codepoints(value: object) -> TypeGuard[Sequence[int]]:
    """True for a list or tuple made only of ints."""
    return isinstance(value, (list, tuple)) and all(is_integer(item) for item in value)


def infer_specifier(value: object) -> Specifier | None:
    """Default specifier for a value written without one.

    Returns:
        STRING for text, DECIMAL for integers, GENERAL_LOWER for floats,
        None for anything else (rendered verbatim through str()).
    """
    match value:
        case bool():
            return None
        case str():
            return Specifier.STRING
        case int():
            return Specifier.DECIMAL
        case float():
            return Specifier.GENERAL_LOWER
        case _:
            return None
