"""Grapheme cluster segmentation.

Truncation and alignment widths are measured in user-perceived characters
(extended grapheme clusters per UAX #29), not code points: a flag emoji or
a base letter with combining marks counts as one.

Segmentation is delegated to the ``regex`` package (``\\X``).

Thread Safety:
    All functions are pure; the compiled pattern is immutable.

Python 3.11+.
"""

from __future__ import annotations

import regex

__all__ = [
    "count_graphemes",
    "split_graphemes",
    "take_graphemes",
    "trim_trailing_whitespace",
]

_GRAPHEME: regex.Pattern[str] = regex.compile(r"\X")


def split_graphemes(text: str) -> list[str]:
    """Split text into extended grapheme clusters.

    Example:
        >>> split_graphemes("ab")
        ['a', 'b']
    """
    return _GRAPHEME.findall(text)


def count_graphemes(text: str) -> int:
    """Number of grapheme clusters in text."""
    if text.isascii():
        # ASCII has no multi-codepoint clusters except CRLF.
        return len(text) - text.count("\r\n")
    return len(split_graphemes(text))


def take_graphemes(text: str, count: int) -> str:
    """Return the first ``count`` grapheme clusters of text."""
    if count <= 0:
        return ""
    return "".join(split_graphemes(text)[:count])


def trim_trailing_whitespace(text: str) -> str:
    """Remove trailing whitespace."""
    return text.rstrip()
