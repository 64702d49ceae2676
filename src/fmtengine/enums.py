"""Enumerations for fmtengine type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so a parsed grammar token can be
passed straight to the constructor: Align("<") is Align.LEFT.

Python 3.11+.
"""

from enum import StrEnum


class Align(StrEnum):
    """Alignment marker of a placeholder.

    StrEnum provides automatic string conversion: str(Align.LEFT) == "<"
    """

    LEFT = "<"
    """Pad on the right: {:<8}"""

    RIGHT = ">"
    """Pad on the left: {:>8}"""

    CENTER = "^"
    """Split padding, smaller half on the left: {:^8}"""

    RESERVED = "|"
    """Accepted by the grammar, applies no padding: {:|8}"""


class Sign(StrEnum):
    """Sign mode for numeric specifiers."""

    MINUS = "-"
    """Only negative values carry a sign (default)."""

    ALWAYS = "+"
    """Nonnegative values carry a plus sign."""

    SPACE = " "
    """Nonnegative values carry a leading space."""


class Specifier(StrEnum):
    """Type specifier of a placeholder."""

    CHAR = "c"
    STRING = "s"
    BINARY = "b"
    OCTAL = "o"
    DECIMAL = "d"
    HEX_LOWER = "x"
    HEX_UPPER = "X"
    FIXED_LOWER = "f"
    FIXED_UPPER = "F"
    EXP_LOWER = "e"
    EXP_UPPER = "E"
    GENERAL_LOWER = "g"
    GENERAL_UPPER = "G"
    LOCALE_NUMBER = "n"

    @property
    def is_numeric(self) -> bool:
        """True for every specifier rendered by a number renderer."""
        return self not in (Specifier.CHAR, Specifier.STRING)

    @property
    def is_upper(self) -> bool:
        """True for specifiers whose output is upper-cased after rendering."""
        return self in (Specifier.FIXED_UPPER, Specifier.EXP_UPPER, Specifier.GENERAL_UPPER)


__all__ = [
    "Align",
    "Sign",
    "Specifier",
]
