"""Final width/fill/alignment pass applied to every rendered field.

Width is measured in grapheme clusters, and a multi-character fill counts
as one unit per repetition.

Python 3.11+.
"""

from __future__ import annotations

from fmtengine.constants import DEFAULT_FILL
from fmtengine.core import count_graphemes
from fmtengine.enums import Align

__all__ = ["align_text"]


def align_text(text: str, width: int | None, align: Align, fill: str | None = None) -> str:
    """Pad ``text`` to ``width`` with ``fill`` according to ``align``.

    Text already at least ``width`` clusters long is returned unchanged, as
    is any text under the reserved alignment marker.

    Examples:
        >>> align_text("ab", 6, Align.RIGHT, "*")
        '****ab'
        >>> align_text("ab", 6, Align.CENTER, "*")
        '**ab**'
        >>> align_text("ab", 5, Align.CENTER, "*")
        '*ab**'
    """
    if width is None:
        return text
    padding = width - count_graphemes(text)
    if padding <= 0:
        return text

    unit = DEFAULT_FILL if fill is None else fill
    match align:
        case Align.LEFT:
            return text + unit * padding
        case Align.RIGHT:
            return unit * padding + text
        case Align.CENTER:
            left = padding // 2
            return unit * left + text + unit * (padding - left)
        case Align.RESERVED:
            return text
