"""Template syntax package.

Provides the placeholder grammar, the placeholder AST and the parser that
splits a template into literal text and placeholders.

Python 3.11+.
"""

from .ast import ArgumentRef, Placeholder, RefKind, SizeSpec
from .grammar import PLACEHOLDER_PATTERN
from .parser import iter_segments, parse_placeholder, parse_placeholders

__all__ = [
    "PLACEHOLDER_PATTERN",
    "ArgumentRef",
    "Placeholder",
    "RefKind",
    "SizeSpec",
    "iter_segments",
    "parse_placeholder",
    "parse_placeholders",
]
