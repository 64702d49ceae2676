"""Locale-number rendering for the 'n' specifier.

Same pipeline as the generic numeric renderer, but digits, separators,
exponent marker and sign glyphs come from the locale context (Babel/CLDR).

Floats are first rendered at the requested significant-digit precision
with the generic algorithm; that text decides scientific versus plain form
and the exact fraction digit count, and its digits are handed to Babel as
a Decimal so Babel only re-renders them with locale glyphs.

Zero padding formats the value zero through Babel at the target width,
then splices the padding from that string. The zero string is grouped the
same way as the real result, so padding continues the locale grouping.

Python 3.11+. Uses Babel for i18n.
"""

from __future__ import annotations

import math
from decimal import Decimal

from fmtengine.constants import DEFAULT_FLOAT_PRECISION
from fmtengine.diagnostics import (
    ErrorTemplate,
    TypeMismatchError,
    UnsupportedCombinationError,
)
from fmtengine.enums import Specifier
from fmtengine.syntax import Placeholder

from .locale_context import LocaleContext, NumberSymbols
from .numbers import format_significant, resolve_sign
from .value_types import is_float, is_number

__all__ = ["render_locale_number"]


def _integer_count(text: str, symbols: NumberSymbols) -> int:
    """Length of the integer portion, group separators included."""
    for marker in (symbols.decimal, symbols.exponential):
        found = text.find(marker)
        if found != -1:
            return found
    return len(text)


def _zero_padding(
    ctx: LocaleContext,
    text: str,
    sign: str,
    width: int,
    grouping: bool,
    placeholder: Placeholder,
) -> str:
    """Zero digits (and separators) that bring ``sign + text`` up to ``width``."""
    needed = width - len(sign) - len(text)
    if needed <= 0:
        return ""
    zeros = ctx.format_number(0, integer_digits=width, grouping=grouping, placeholder=placeholder)
    end = len(zeros) - _integer_count(text, ctx.symbols)
    return zeros[max(end - needed, 0) : end]


def render_locale_number(
    value: object,
    placeholder: Placeholder,
    ctx: LocaleContext,
    *,
    width: int | None,
    precision: int | None,
) -> str:
    """Render an int or float with locale glyphs, without alignment.

    Args:
        value: Resolved argument value
        placeholder: Parsed placeholder (flags, group, sign)
        ctx: Locale context supplying Babel formatting and glyphs
        width: Resolved width (zero padding target)
        precision: Resolved significant-digit precision (floats only)

    Returns:
        Locale-formatted number; the aligner pads the result afterwards

    Raises:
        TypeMismatchError: Value is neither int nor float
        UnsupportedCombinationError: Precision given for an int value
        LocaleFormattingError: Babel rejected the request

    Examples:
        >>> from fmtengine.syntax import parse_placeholders
        >>> ph = parse_placeholders("{:,n}")[0]
        >>> render_locale_number(1234567, ph, LocaleContext.create("de_DE"),
        ...                      width=None, precision=None)
        '1.234.567'
    """
    spec = Specifier.LOCALE_NUMBER
    where = {"placeholder": placeholder.source, "span": placeholder.span}

    if not is_number(value):
        diag = ErrorTemplate.type_mismatch("number", type(value).__name__, spec, **where)
        raise TypeMismatchError(diag)

    floating = is_float(value)
    if not floating and precision is not None:
        raise UnsupportedCombinationError(
            ErrorTemplate.precision_not_allowed(spec, for_integer=True, **where)
        )

    symbols = ctx.symbols
    negative = value < 0 or (floating and math.copysign(1.0, value) < 0)
    sign = resolve_sign(negative, placeholder.sign, plus=symbols.plus, minus=symbols.minus)

    if floating and not math.isfinite(value):
        return "nan" if math.isnan(value) else f"{sign}inf"

    grouping = placeholder.group == ","
    scientific = False

    if floating:
        digits = format_significant(
            abs(value), DEFAULT_FLOAT_PRECISION if precision is None else precision
        )
        mantissa, marker, exponent = digits.partition("e")
        if not placeholder.alternate and "." in mantissa:
            mantissa = mantissa.rstrip("0").removesuffix(".")
        fraction_digits = len(mantissa.partition(".")[2])
        scientific = bool(marker)
        text = ctx.format_number(
            Decimal(mantissa + marker + exponent),
            fraction_digits=fraction_digits,
            scientific=scientific,
            grouping=grouping,
            placeholder=placeholder,
        )
        if placeholder.alternate and fraction_digits == 0:
            cut = text.find(symbols.exponential) if scientific else -1
            cut = len(text) if cut == -1 else cut
            text = text[:cut] + symbols.decimal + text[cut:]
    else:
        text = ctx.format_number(abs(value), grouping=grouping, placeholder=placeholder)

    if placeholder.zero and width is not None:
        padding = _zero_padding(
            ctx, text, sign, width, grouping and not scientific, placeholder
        )
        text = padding + text
        if text.startswith(symbols.group):
            text = symbols.zero + text

    return sign + text
