"""Text and character rendering for the 's' and 'c' specifiers.

Truncation counts grapheme clusters, so a precision never splits an
emoji sequence or a base letter from its combining marks.

Python 3.11+.
"""

from __future__ import annotations

import sys

from fmtengine.constants import ELLIPSIS
from fmtengine.core import count_graphemes, take_graphemes, trim_trailing_whitespace
from fmtengine.diagnostics import ErrorTemplate, RangeError, TypeMismatchError
from fmtengine.enums import Specifier
from fmtengine.syntax import Placeholder

from .value_types import is_codepoints, is_integer

__all__ = ["render_char", "render_string", "truncate"]


def truncate(text: str, precision: int, *, ellipsis: bool) -> str:
    """Cut ``text`` to at most ``precision`` grapheme clusters.

    With ``ellipsis``, a cut text ends in the ellipsis marker, counted in the
    limit, and trailing whitespace before the marker is trimmed. A limit
    shorter than the marker itself yields the empty string.

    Examples:
        >>> truncate("hello world", 5, ellipsis=True)
        'hell…'
        >>> truncate("hello world", 5, ellipsis=False)
        'hello'
        >>> truncate("hi", 5, ellipsis=True)
        'hi'
    """
    if count_graphemes(text) <= precision:
        return text
    if not ellipsis:
        return take_graphemes(text, precision)

    keep = precision - count_graphemes(ELLIPSIS)
    if keep < 0:
        return ""
    return trim_trailing_whitespace(take_graphemes(text, keep)) + ELLIPSIS


def render_string(value: object, placeholder: Placeholder, *, precision: int | None) -> str:
    """Render text for the string specifier.

    Raises:
        TypeMismatchError: Value is not a str
    """
    if not isinstance(value, str):
        diag = ErrorTemplate.type_mismatch(
            "str",
            type(value).__name__,
            Specifier.STRING,
            placeholder=placeholder.source,
            span=placeholder.span,
        )
        raise TypeMismatchError(diag)
    if precision is None:
        return value
    return truncate(value, precision, ellipsis=placeholder.alternate)


def render_char(value: object, placeholder: Placeholder) -> str:
    """Render an int codepoint, or a list/tuple of them, for the char specifier.

    Raises:
        TypeMismatchError: Value is neither an int nor a sequence of ints
        RangeError: A codepoint lies outside 0..0x10FFFF
    """
    where = {"placeholder": placeholder.source, "span": placeholder.span}
    if is_integer(value):
        codepoints: list[int] = [value]
    elif is_codepoints(value):
        codepoints = list(value)
    else:
        diag = ErrorTemplate.type_mismatch(
            "int or sequence of int", type(value).__name__, Specifier.CHAR, **where
        )
        raise TypeMismatchError(diag)

    for codepoint in codepoints:
        if not 0 <= codepoint <= sys.maxunicode:
            raise RangeError(ErrorTemplate.codepoint_out_of_range(codepoint, **where))
    return "".join(map(chr, codepoints))
