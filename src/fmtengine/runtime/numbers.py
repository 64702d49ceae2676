"""Generic numeric rendering for the radix and float specifiers.

Covers b, o, d, x, X (integers) and f, F, e, E, g, G (floats). The
locale-number specifier has its own renderer (locale_numbers.py) because
its glyphs come from CLDR data instead of fixed ASCII characters.

Pipeline (one pass, left to right):
    1. type check          value must be in the specifier's domain
    2. legality check      precision / '#' / ',' per specifier
    3. sign                '-' for negatives, else '+', ' ' or nothing
    4. non-finite          'nan' (unsigned), sign + 'inf'; no zero padding
    5. conversion          radix digits or fixed/exponential/significant text
    6. strip sign          reattached in step 11
    7. trim zeros          general specifier without '#'
    8. mandatory point     float specifiers with '#'
    9. zero padding        bypasses fill and alignment
   10. grouping            integer part only
   11. reassemble          sign + prefix + digits

Specifier table:
    spec  domain  precision  '#'             ','   group size
    b     int     no         no              no    4
    o     int     no         no              no    4
    x X   int     no         '0x' prefix     no    4
    d     int     no         no              yes   3
    f F   float   yes        point           yes   3
    e E   float   yes        point           yes   3
    g G   float   yes (>=1)  point, keep 0s  yes   3

Python 3.11+.
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Literal

from fmtengine.constants import (
    DECIMAL_GROUP_SIZE,
    DEFAULT_FLOAT_PRECISION,
    HEX_ALTERNATE_PREFIX,
    RADIX_GROUP_SIZE,
)
from fmtengine.diagnostics import (
    ErrorTemplate,
    TypeMismatchError,
    UnsupportedCombinationError,
)
from fmtengine.enums import Sign, Specifier
from fmtengine.syntax import Placeholder

from .value_types import is_float, is_integer

__all__ = [
    "NUMBER_STYLES",
    "NumberStyle",
    "format_significant",
    "group_digits",
    "render_number",
    "resolve_sign",
]

# Exponent marker as produced by Python's float formatting: 'e' then a sign.
# Hex digits contain 'e' but never a sign, so this cannot misfire on them.
_EXPONENT: re.Pattern[str] = re.compile(r"e[+-]")

Converter = Callable[[int | float, int | None], str]


def format_significant(value: float, precision: int) -> str:
    """Render ``value`` with ``precision`` significant digits.

    Chooses fixed or exponential form like the 'g' presentation type
    (exponential when the exponent is < -4 or >= precision) but keeps
    trailing zeros, and never leaves a bare trailing point.

    Examples:
        >>> format_significant(2.5, 6)
        '2.50000'
        >>> format_significant(1234567.0, 3)
        '1.23e+06'
        >>> format_significant(100.0, 3)
        '100'
    """
    text = format(value, f"#.{precision}g")
    mantissa, marker, exponent = text.partition("e")
    return mantissa.removesuffix(".") + marker + exponent


def _radix(code: str) -> Converter:
    return lambda value, _precision: format(value, code)


def _float(code: str) -> Converter:
    def convert(value: int | float, precision: int | None) -> str:
        digits = DEFAULT_FLOAT_PRECISION if precision is None else precision
        return format(value, f".{digits}{code}")

    return convert


def _significant(value: int | float, precision: int | None) -> str:
    return format_significant(
        float(value), DEFAULT_FLOAT_PRECISION if precision is None else precision
    )


@dataclass(frozen=True, slots=True)
class NumberStyle:
    """Per-specifier rules for the generic numeric renderer.

    Attributes:
        domain: Accepted value type
        convert: Magnitude conversion (value, precision) -> text
        precision_allowed: Precision may be given
        alternate_allowed: '#' may be given
        comma_group_allowed: ',' grouping may be given ('_' always may)
        group_size: Digits per group
        alternate_prefix: Prefix emitted when '#' is given
        trim_zeros: Strip trailing fractional zeros unless '#' is given
        point_on_alternate: '#' forces a decimal point
    """

    domain: Literal["int", "float"]
    convert: Converter
    precision_allowed: bool = True
    alternate_allowed: bool = True
    comma_group_allowed: bool = True
    group_size: int = DECIMAL_GROUP_SIZE
    alternate_prefix: str = ""
    trim_zeros: bool = False
    point_on_alternate: bool = False


_RADIX_RULES = {
    "domain": "int",
    "precision_allowed": False,
    "comma_group_allowed": False,
    "group_size": RADIX_GROUP_SIZE,
}

NUMBER_STYLES: dict[Specifier, NumberStyle] = {
    Specifier.BINARY: NumberStyle(convert=_radix("b"), alternate_allowed=False, **_RADIX_RULES),
    Specifier.OCTAL: NumberStyle(convert=_radix("o"), alternate_allowed=False, **_RADIX_RULES),
    Specifier.HEX_LOWER: NumberStyle(
        convert=_radix("x"), alternate_prefix=HEX_ALTERNATE_PREFIX, **_RADIX_RULES
    ),
    Specifier.HEX_UPPER: NumberStyle(
        convert=_radix("X"), alternate_prefix=HEX_ALTERNATE_PREFIX, **_RADIX_RULES
    ),
    Specifier.DECIMAL: NumberStyle(
        domain="int", convert=_radix("d"), precision_allowed=False, alternate_allowed=False
    ),
    Specifier.FIXED_LOWER: NumberStyle(
        domain="float", convert=_float("f"), point_on_alternate=True
    ),
    Specifier.FIXED_UPPER: NumberStyle(
        domain="float", convert=_float("f"), point_on_alternate=True
    ),
    Specifier.EXP_LOWER: NumberStyle(domain="float", convert=_float("e"), point_on_alternate=True),
    Specifier.EXP_UPPER: NumberStyle(domain="float", convert=_float("e"), point_on_alternate=True),
    Specifier.GENERAL_LOWER: NumberStyle(
        domain="float", convert=_significant, trim_zeros=True, point_on_alternate=True
    ),
    Specifier.GENERAL_UPPER: NumberStyle(
        domain="float", convert=_significant, trim_zeros=True, point_on_alternate=True
    ),
}


def resolve_sign(negative: bool, sign: Sign | None, plus: str = "+", minus: str = "-") -> str:
    """Sign text for a value.

    Negative values always carry ``minus``; nonnegative values carry
    ``plus``, a space, or nothing depending on the sign mode.
    """
    if negative:
        return minus
    match sign:
        case Sign.ALWAYS:
            return plus
        case Sign.SPACE:
            return " "
        case _:
            return ""


def group_digits(digits: str, separator: str, size: int) -> str:
    """Insert ``separator`` every ``size`` characters, counting from the right.

    Example:
        >>> group_digits("1234567", ",", 3)
        '1,234,567'
    """
    head = len(digits) % size or size
    chunks = [digits[:head]]
    chunks.extend(digits[i : i + size] for i in range(head, len(digits), size))
    return separator.join(chunks)


def _check_combination(
    style: NumberStyle,
    placeholder: Placeholder,
    spec: Specifier,
    precision: int | None,
) -> None:
    where = {"placeholder": placeholder.source, "span": placeholder.span}
    if precision is not None and not style.precision_allowed:
        raise UnsupportedCombinationError(ErrorTemplate.precision_not_allowed(spec, **where))
    if placeholder.alternate and not style.alternate_allowed:
        raise UnsupportedCombinationError(ErrorTemplate.alternate_form_not_allowed(spec, **where))
    if placeholder.group == "," and not style.comma_group_allowed:
        raise UnsupportedCombinationError(
            ErrorTemplate.grouping_not_allowed(",", spec, **where)
        )


def _is_negative(value: int | float) -> bool:
    # copysign catches -0.0, which compares equal to 0.
    return value < 0 or (isinstance(value, float) and math.copysign(1.0, value) < 0)


def render_number(
    value: object,
    spec: Specifier,
    placeholder: Placeholder,
    *,
    width: int | None,
    precision: int | None,
) -> str:
    """Render a number for a radix or float specifier, without alignment.

    Args:
        value: Resolved argument value
        spec: One of the specifiers in NUMBER_STYLES
        placeholder: Parsed placeholder (flags, group, sign)
        width: Resolved width (zero padding target)
        precision: Resolved precision

    Returns:
        Sign, prefix and digits; the aligner pads the result afterwards

    Raises:
        TypeMismatchError: Value outside the specifier's domain
        UnsupportedCombinationError: Option forbidden for the specifier
    """
    style = NUMBER_STYLES[spec]

    in_domain = is_integer(value) if style.domain == "int" else is_float(value)
    if not in_domain:
        diag = ErrorTemplate.type_mismatch(
            style.domain,
            type(value).__name__,
            spec,
            placeholder=placeholder.source,
            span=placeholder.span,
        )
        raise TypeMismatchError(diag)
    number: int | float = value  # type: ignore[assignment]

    _check_combination(style, placeholder, spec, precision)

    sign = resolve_sign(_is_negative(number), placeholder.sign)

    if isinstance(number, float) and not math.isfinite(number):
        text = "nan" if math.isnan(number) else f"{sign}inf"
        return text.upper() if spec.is_upper else text

    text = style.convert(number, precision).lstrip("-")

    if style.trim_zeros and not placeholder.alternate and "." in text:
        mantissa, marker, exponent = text.partition("e")
        text = mantissa.rstrip("0").removesuffix(".") + marker + exponent

    if style.point_on_alternate and placeholder.alternate and "." not in text:
        mantissa, marker, exponent = text.partition("e")
        text = f"{mantissa}.{marker}{exponent}"

    prefix = style.alternate_prefix if placeholder.alternate else ""
    min_width = (width or 0) - len(sign) - len(prefix)
    padded = placeholder.zero and len(text) < min_width
    if padded:
        text = text.rjust(min_width, "0")

    group = placeholder.group
    if group is not None:
        found = text.find(".")
        if found == -1:
            exp = _EXPONENT.search(text)
            found = exp.start() if exp else len(text)
        text = group_digits(text[:found], group, style.group_size) + text[found:]

        if padded:
            # Padding zeros that pushed grouping past the width are dropped,
            # keeping one leading zero in front of a separator.
            overflow = len(text) - min_width
            text = text[:overflow].lstrip("0" + group) + text[overflow:]
            if text.startswith(group):
                text = "0" + text

    text = f"{sign}{prefix}{text}"
    return text.upper() if spec.is_upper else text
