"""Placeholder AST node definitions.

A template is flat: literal text and placeholders. Only placeholders need
structure, so the tree is two levels deep (Placeholder -> ArgumentRef).

Python 3.11+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import StrEnum

from fmtengine.diagnostics import SourceSpan
from fmtengine.enums import Align, Sign, Specifier

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    "RefKind",
    "ArgumentRef",
    "Placeholder",
    "SizeSpec",
]

_QUOTES: str = "'\""


class RefKind(StrEnum):
    """Kind of argument reference."""

    AUTO = "auto"
    """Empty reference: {} consumes the next positional argument."""

    INDEX = "index"
    """Decimal index: {2} consumes positional argument 2."""

    NAME = "name"
    """Identifier or quoted key: {user}, {'full name'}."""


@dataclass(frozen=True, slots=True)
class ArgumentRef:
    """Reference to a caller-supplied value.

    Attributes:
        kind: Reference kind
        raw: Reference text exactly as written in the template
        index: Positional index (INDEX only)
        name: Lookup key with quotes stripped and doubled quotes collapsed (NAME only)

    Example:
        >>> ArgumentRef.parse("'it''s'")
        ArgumentRef(kind=<RefKind.NAME: 'name'>, raw="'it''s'", index=None, name="it's")
    """

    kind: RefKind
    raw: str
    index: int | None = None
    name: str | None = None

    @classmethod
    def parse(cls, raw: str) -> "ArgumentRef":
        """Classify reference text matched by the grammar."""
        if not raw:
            return cls(RefKind.AUTO, raw)
        if raw.isascii() and raw.isdigit():
            return cls(RefKind.INDEX, raw, index=int(raw))
        if raw[0] in _QUOTES:
            quote = raw[0]
            return cls(RefKind.NAME, raw, name=raw[1:-1].replace(quote * 2, quote))
        return cls(RefKind.NAME, raw, name=raw)


# Width and precision are either literal digits or a braced back-reference.
SizeSpec = int | ArgumentRef


@dataclass(frozen=True, slots=True)
class Placeholder:
    """One parsed placeholder occurrence.

    Fields are fully determined by the grammar; nothing here depends on the
    argument values.

    Attributes:
        source: Literal placeholder text, braces included
        span: Location in the template
        argument: Value reference
        fill: Fill text (may be several code points for composite glyphs)
        align: Alignment marker, None when not written
        sign: Sign mode, None when not written
        alternate: '#' flag
        zero: '0' flag
        width: Literal width or back-reference
        group: Group separator character (',' or '_')
        precision: Literal precision or back-reference
        specifier: Type specifier, None to infer from the value
        suffix: Trailing quoted text. Reserved: parsed but never rendered.
    """

    source: str
    span: SourceSpan
    argument: ArgumentRef
    fill: str | None = None
    align: Align | None = None
    sign: Sign | None = None
    alternate: bool = False
    zero: bool = False
    width: SizeSpec | None = None
    group: str | None = None
    precision: SizeSpec | None = None
    specifier: Specifier | None = None
    suffix: str | None = None
