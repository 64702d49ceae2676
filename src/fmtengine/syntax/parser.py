"""Placeholder parser.

Turns grammar matches into Placeholder nodes and splits a template into
literal text and placeholders.

Thread Safety:
    All functions are pure; safe for concurrent use.

Python 3.11+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING

from fmtengine.diagnostics import SourceSpan
from fmtengine.enums import Align, Sign, Specifier

from .ast import ArgumentRef, Placeholder, SizeSpec
from .grammar import PLACEHOLDER_PATTERN

if TYPE_CHECKING:
    import regex

__all__ = ["iter_segments", "parse_placeholder", "parse_placeholders"]

logger = logging.getLogger(__name__)


def _parse_size(token: str | None) -> SizeSpec | None:
    """Literal digits become int, '{ref}' becomes an ArgumentRef."""
    if token is None:
        return None
    if token[0] == "{":
        return ArgumentRef.parse(token[1:-1])
    return int(token)


def parse_placeholder(match: regex.Match[str], template: str) -> Placeholder:
    """Build a Placeholder from a PLACEHOLDER_PATTERN match.

    Args:
        match: Match object produced on ``template``
        template: Template the match was found in (for line/column)

    Returns:
        Immutable Placeholder with every field resolved from the text
    """
    groups = match.groupdict()
    align = groups["align"]
    sign = groups["sign"]
    spec = groups["spec"]
    return Placeholder(
        source=match.group(0),
        span=SourceSpan.from_offsets(template, match.start(), match.end()),
        argument=ArgumentRef.parse(groups["ref"]),
        fill=groups["fill"],
        align=Align(align) if align else None,
        sign=Sign(sign) if sign else None,
        alternate=groups["alt"] is not None,
        zero=groups["zero"] is not None,
        width=_parse_size(groups["width"]),
        group=groups["group"],
        precision=_parse_size(groups["precision"]),
        specifier=Specifier(spec) if spec else None,
        suffix=groups["suffix"],
    )


def iter_segments(template: str) -> Iterator[str | Placeholder]:
    """Split a template into literal text and placeholders, left to right.

    Literal runs are yielded as str (never empty), placeholders as
    Placeholder nodes. Joining the literals with each placeholder's
    ``source`` reproduces the template exactly.

    Example:
        >>> [type(s).__name__ for s in iter_segments("a{}b")]
        ['str', 'Placeholder', 'str']
    """
    pos = 0
    for match in PLACEHOLDER_PATTERN.finditer(template):
        if match.start() > pos:
            yield _literal(template, pos, match.start())
        yield parse_placeholder(match, template)
        pos = match.end()
    if pos < len(template):
        yield _literal(template, pos, len(template))


def parse_placeholders(template: str) -> tuple[Placeholder, ...]:
    """Return every placeholder of a template, in order.

    Introspection helper: no arguments are resolved.
    """
    return tuple(s for s in iter_segments(template) if isinstance(s, Placeholder))


def _literal(template: str, start: int, end: int) -> str:
    text = template[start:end]
    if "{" in text:
        logger.debug(
            "Unrecognised placeholder left as literal text at offset %d: %r",
            start + text.index("{"),
            text,
        )
    return text
