"""Placeholder grammar.

Informal grammar (whitespace allowed just inside the outer braces):

    { argRef [: [[fill]align] [sign] [#] [0] [width] [group] [.precision] [type] [suffix]] }

    argRef    := "" | [0-9]+ | identifier | 'quoted' | "quoted"
    identifier:= (letter | "_") (letter | digit | "_" | ".")*     (Unicode classes)
    align     := "<" | ">" | "^" | "|"
    sign      := "-" | "+" | " "
    width     := [0-9]+ | "{" argRef "}"
    group     := "," | "_"
    precision := [0-9]+ | "{" argRef "}"
    type      := c s b o d x X f F e E g G n
    suffix    := 'quoted' | "quoted"                              (reserved)

Inside a quoted reference or suffix, a doubled quote is a literal quote.
There is no escape for a literal brace: text that fails to match stays
literal, a lone "{" included.

Uses the ``regex`` package for Unicode property classes (\\p{L}, \\p{Nd}),
which the standard ``re`` module does not support.

Python 3.11+.
"""

from __future__ import annotations

import regex

__all__ = ["PLACEHOLDER_PATTERN", "REFERENCE_PATTERN"]

# Argument reference alternatives. Digits are ASCII only: int() must accept them.
REFERENCE_PATTERN: str = (
    r"[0-9]*"
    r"|[_\p{L}][_.\p{L}\p{Nd}]*"
    r"|'(?:''|[^'])*'"
    r'|"(?:""|[^"])*"'
)

_SIZE: str = rf"[0-9]+|\{{(?:{REFERENCE_PATTERN})\}}"

PLACEHOLDER_PATTERN: regex.Pattern[str] = regex.compile(
    r"\{\s*"
    rf"(?P<ref>{REFERENCE_PATTERN})"
    r"(?::"
    r"(?:(?P<fill>[^}]+)?(?P<align>[<>^|]))?"
    r"(?P<sign>[-+ ])?"
    r"(?P<alt>\#)?"
    r"(?P<zero>0)?"
    rf"(?P<width>{_SIZE})?"
    r"(?P<group>[_,])?"
    rf"(?:\.(?P<precision>{_SIZE}))?"
    r"(?P<spec>[csbodxXfFeEgGn])?"
    r"""(?P<suffix>'(?:''|[^'])*'|"(?:""|[^"])*")?"""
    r")?"
    r"\s*\}"
)
