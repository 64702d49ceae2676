"""Core utilities shared across syntax and runtime layers.

This package provides foundational utilities that the runtime layer
(rendering, alignment) depends on:

    core <- syntax <- runtime

Exports:
    count_graphemes: Grapheme cluster count
    take_graphemes: First N grapheme clusters
    trim_trailing_whitespace: Strip trailing whitespace

Python 3.11+.
"""

from .graphemes import count_graphemes, split_graphemes, take_graphemes, trim_trailing_whitespace

__all__ = [
    "count_graphemes",
    "split_graphemes",
    "take_graphemes",
    "trim_trailing_whitespace",
]
