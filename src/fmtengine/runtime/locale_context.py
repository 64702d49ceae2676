"""Locale context for locale-number rendering.

This module provides locale-aware number formatting without global state
mutation. Uses Babel for CLDR-compliant digits, separators and signs.

Architecture:
    - LocaleContext: Immutable locale configuration container
    - NumberSymbols: The locale glyphs the renderer splices around Babel output
    - No dependency on Python's locale module (avoids global state)
    - Each TemplateFormatter owns its LocaleContext (locale isolation)

Babel is driven with CLDR pattern strings built from digit counts:

    integer digits  '0' per required digit, '#' for the rest of the grouping
                    template ('#,##0' style); '0' only when grouping is off
    fraction digits '.' + '0' per digit, omitted for zero digits
    scientific      '0.000E0' (one integer digit, never grouped)

Python 3.11+. Uses Babel for i18n.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from babel import Locale, UnknownLocaleError
from babel import numbers as babel_numbers

from fmtengine.constants import FALLBACK_LOCALE
from fmtengine.diagnostics import ErrorTemplate, LocaleFormattingError
from fmtengine.locale_utils import normalize_locale
from fmtengine.syntax import Placeholder

__all__ = ["LocaleContext", "NumberSymbols"]

logger = logging.getLogger(__name__)

_NO_GROUPING: int = 1000


@dataclass(frozen=True, slots=True)
class NumberSymbols:
    """Locale glyphs used around a rendered number.

    Attributes:
        decimal: Decimal separator ('.' for en, ',' for de)
        group: Grouping separator (',' for en, '.' for de, U+00A0 for fr)
        minus: Minus sign
        plus: Plus sign
        exponential: Exponent marker ('E' for most locales)
        zero: Zero digit (Babel renders Latin digits)
    """

    decimal: str
    group: str
    minus: str
    plus: str
    exponential: str
    zero: str = "0"


def _integer_pattern(min_digits: int, grouping: tuple[int, int] | None) -> str:
    """CLDR integer pattern with ``min_digits`` required digits.

    The pattern is long enough to carry both grouping sizes, so Babel
    reads back the same primary/secondary grouping the locale defines.

    Example:
        >>> _integer_pattern(1, (3, 3))
        '#,###,##0'
        >>> _integer_pattern(4, (3, 2))
        '#,#0,000'
        >>> _integer_pattern(3, None)
        '000'
    """
    if grouping is None:
        return "0" * max(min_digits, 1)
    primary, secondary = grouping
    total = max(min_digits, primary + secondary + 1)
    digits = "#" * (total - min_digits) + "0" * min_digits
    chunks = [digits[-primary:]]
    rest = digits[:-primary]
    while rest:
        chunks.append(rest[-secondary:])
        rest = rest[:-secondary]
    return ",".join(reversed(chunks))


@dataclass(frozen=True, slots=True)
class LocaleContext:
    """Immutable locale configuration for locale-number rendering.

    Use LocaleContext.create() factory to construct instances with proper
    validation. Direct construction bypasses it.

    Examples:
        >>> ctx = LocaleContext.create('en-US')
        >>> ctx.format_number(1234.5, fraction_digits=1, grouping=True)
        '1,234.5'

        >>> ctx = LocaleContext.create('de-DE')
        >>> ctx.format_number(1234.5, fraction_digits=1, grouping=True)
        '1.234,5'

        >>> # Invalid locales fall back to en_US with warning logged
        >>> ctx = LocaleContext.create('invalid-locale')
        >>> ctx.is_fallback
        True

    Thread Safety:
        LocaleContext is immutable and holds no cache. Babel locale objects
        are read-only after parsing, so one instance may be shared.
    """

    locale_code: str
    _babel_locale: Locale
    is_fallback: bool = False

    @classmethod
    def create(cls, locale_code: str) -> LocaleContext:
        """Create LocaleContext with graceful fallback for invalid locales.

        For unknown or invalid locales, logs a warning and falls back to
        en_US. Use create_or_raise() for strict validation.

        Args:
            locale_code: BCP 47 or POSIX locale identifier (e.g., 'en-US', 'de_DE')

        Returns:
            LocaleContext instance. For unknown/invalid locales, uses en_US
            rules while preserving the original locale_code for debugging.
        """
        try:
            babel_locale = Locale.parse(normalize_locale(locale_code))
        except UnknownLocaleError as e:
            logger.warning(
                "Unknown locale '%s': %s. Falling back to %s", locale_code, e, FALLBACK_LOCALE
            )
        except (ValueError, TypeError) as e:
            logger.warning(
                "Invalid locale format '%s': %s. Falling back to %s",
                locale_code,
                e,
                FALLBACK_LOCALE,
            )
        else:
            return cls(locale_code=locale_code, _babel_locale=babel_locale)

        return cls(
            locale_code=locale_code,
            _babel_locale=Locale.parse(FALLBACK_LOCALE),
            is_fallback=True,
        )

    @classmethod
    def create_or_raise(cls, locale_code: str) -> LocaleContext:
        """Create LocaleContext or raise on validation failure.

        Args:
            locale_code: BCP 47 or POSIX locale identifier

        Returns:
            LocaleContext instance with valid locale

        Raises:
            ValueError: If locale code is invalid or unknown
        """
        try:
            babel_locale = Locale.parse(normalize_locale(locale_code))
        except UnknownLocaleError as e:
            msg = f"Unknown locale identifier '{locale_code}': {e}"
            raise ValueError(msg) from None
        except (ValueError, TypeError) as e:
            msg = f"Invalid locale format '{locale_code}': {e}"
            raise ValueError(msg) from None
        return cls(locale_code=locale_code, _babel_locale=babel_locale)

    @property
    def babel_locale(self) -> Locale:
        """Pre-validated Babel Locale object for this context."""
        return self._babel_locale

    @property
    def symbols(self) -> NumberSymbols:
        """Number glyphs of this locale."""
        loc = self._babel_locale
        return NumberSymbols(
            decimal=babel_numbers.get_decimal_symbol(loc),
            group=babel_numbers.get_group_symbol(loc),
            minus=babel_numbers.get_minus_sign_symbol(loc),
            plus=babel_numbers.get_plus_sign_symbol(loc),
            exponential=babel_numbers.get_exponential_symbol(loc),
        )

    @property
    def grouping(self) -> tuple[int, int] | None:
        """Primary and secondary grouping sizes of the locale's decimal pattern.

        (3, 3) for most locales; (3, 2) for Indian-style grouping; None when
        the locale pattern does not group.
        """
        primary, secondary = self._babel_locale.decimal_formats[None].grouping
        # Babel reports an ungrouped pattern with a size of 1000.
        if primary >= _NO_GROUPING:
            return None
        return primary, secondary

    def format_number(
        self,
        value: int | float | Decimal,
        *,
        integer_digits: int = 1,
        fraction_digits: int = 0,
        scientific: bool = False,
        grouping: bool = False,
        placeholder: Placeholder | None = None,
    ) -> str:
        """Format a nonnegative number with exact digit counts.

        Args:
            value: Number to format; callers pass the magnitude
            integer_digits: Minimum integer digits (zero-padded by Babel)
            fraction_digits: Exact fraction digits
            scientific: Use the scientific pattern (one integer digit)
            grouping: Apply the locale's digit grouping (ignored when scientific)
            placeholder: Placeholder being rendered, for error diagnostics

        Returns:
            Number text with locale digits and separators, without sign

        Raises:
            LocaleFormattingError: Babel rejected the value or pattern

        Examples:
            >>> ctx = LocaleContext.create('en-US')
            >>> ctx.format_number(0, integer_digits=5, grouping=True)
            '00,000'
            >>> ctx.format_number(Decimal('1.23e+06'), fraction_digits=2, scientific=True)
            '1.23E6'
        """
        fraction = f".{'0' * fraction_digits}" if fraction_digits > 0 else ""
        if scientific:
            pattern = f"0{fraction}E0"
        else:
            groups = self.grouping if grouping else None
            pattern = _integer_pattern(integer_digits, groups) + fraction

        logger.debug("Locale %s: formatting %r with pattern %r", self.locale_code, value, pattern)

        try:
            return str(babel_numbers.format_decimal(value, format=pattern, locale=self._babel_locale))
        except (ValueError, TypeError, InvalidOperation, AttributeError, KeyError) as e:
            diag = ErrorTemplate.locale_formatting_failed(
                value,
                self.locale_code,
                str(e),
                placeholder=placeholder.source if placeholder else None,
                span=placeholder.span if placeholder else None,
            )
            raise LocaleFormattingError(diag) from e
