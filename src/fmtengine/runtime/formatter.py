"""TemplateFormatter - Main API for template formatting.

Walks a template once, left to right. For each placeholder:

    1. resolve the value, then the width, then the precision reference
    2. infer the specifier from the value when none was written
    3. render with the specifier's renderer
    4. align the rendered text

Formatting is all-or-nothing: the first failing placeholder raises and no
partial output is returned.

Python 3.11+. External dependency: Babel (CLDR locale data).
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from fmtengine.constants import MIN_PRECISION, MIN_SIGNIFICANT_PRECISION, MIN_WIDTH
from fmtengine.enums import Align, Specifier
from fmtengine.locale_utils import get_system_locale
from fmtengine.syntax import Placeholder, iter_segments

from .align import align_text
from .context import FormatContext
from .locale_context import LocaleContext
from .locale_numbers import render_locale_number
from .numbers import render_number
from .strings import render_char, render_string
from .value_types import FormatValue, infer_specifier

__all__ = ["TemplateFormatter", "format_template"]

_SIGNIFICANT_SPECIFIERS: frozenset[Specifier] = frozenset(
    {Specifier.GENERAL_LOWER, Specifier.GENERAL_UPPER, Specifier.LOCALE_NUMBER}
)


class TemplateFormatter:
    """Template formatter bound to one locale.

    The locale only affects the locale-number specifier ('n'); every other
    specifier renders fixed ASCII output.

    Thread Safety:
        Immutable after construction. Each format() call builds its own
        FormatContext, so one formatter may be shared across threads.

    Examples:
        >>> formatter = TemplateFormatter("en_US")
        >>> formatter.format("{} has {:,d} items", ["cart", 1234])
        'cart has 1,234 items'
        >>> formatter.format("{name:>6}", named={"name": "ab"})
        '    ab'
    """

    __slots__ = ("_locale_context",)

    def __init__(self, locale: str | None = None) -> None:
        """Initialize formatter for a locale.

        Args:
            locale: BCP-47 or POSIX locale code; None detects the system locale.
                Unknown codes fall back to en_US with a logged warning.
        """
        code = get_system_locale() if locale is None else locale
        self._locale_context = LocaleContext.create(code)

    @classmethod
    def for_system_locale(cls) -> TemplateFormatter:
        """Create a formatter for the detected system locale."""
        return cls(get_system_locale())

    @property
    def locale(self) -> str:
        """Locale code the formatter was created with."""
        return self._locale_context.locale_code

    @property
    def locale_context(self) -> LocaleContext:
        """Locale context used for the locale-number specifier."""
        return self._locale_context

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return f"TemplateFormatter(locale={self.locale!r})"

    def format(
        self,
        template: str,
        positional: Sequence[FormatValue] | None = None,
        named: Mapping[str, FormatValue] | None = None,
    ) -> str:
        """Substitute every placeholder of ``template``.

        Args:
            template: Template text
            positional: Values for automatic and indexed references
            named: Values for identifier and quoted references

        Returns:
            Formatted text

        Raises:
            FormatError: First placeholder that cannot be rendered (one of
                its subclasses; see fmtengine.diagnostics.errors)
        """
        ctx = FormatContext(positional=positional, named=named)
        return "".join(
            segment if isinstance(segment, str) else self._render(segment, ctx)
            for segment in iter_segments(template)
        )

    def _render(self, placeholder: Placeholder, ctx: FormatContext) -> str:
        value = ctx.resolve(placeholder.argument, placeholder)
        width = ctx.resolve_size(placeholder.width, "Width", placeholder, minimum=MIN_WIDTH)

        spec = placeholder.specifier or infer_specifier(value)
        minimum = MIN_SIGNIFICANT_PRECISION if spec in _SIGNIFICANT_SPECIFIERS else MIN_PRECISION
        precision = ctx.resolve_size(
            placeholder.precision, "Precision", placeholder, minimum=minimum
        )

        match spec:
            case None:
                text = str(value)
            case Specifier.STRING:
                text = render_string(value, placeholder, precision=precision)
            case Specifier.CHAR:
                text = render_char(value, placeholder)
            case Specifier.LOCALE_NUMBER:
                text = render_locale_number(
                    value, placeholder, self._locale_context, width=width, precision=precision
                )
            case _:
                text = render_number(value, spec, placeholder, width=width, precision=precision)

        align = placeholder.align
        if align is None:
            align = Align.RIGHT if spec is not None and spec.is_numeric else Align.LEFT
        return align_text(text, width, align, placeholder.fill)


def format_template(
    template: str,
    positional: Sequence[FormatValue] | None = None,
    named: Mapping[str, FormatValue] | None = None,
    *,
    locale: str | None = None,
) -> str:
    """Format ``template`` in one call.

    Args:
        template: Template text
        positional: Values for automatic and indexed references
        named: Values for identifier and quoted references
        locale: Locale for the 'n' specifier; None detects the system locale

    Returns:
        Formatted text

    Raises:
        FormatError: First placeholder that cannot be rendered

    Examples:
        >>> format_template("{1}{}", ["a", "b", "c"])
        'bc'
        >>> format_template("{:+06d}", [42])
        '+00042'
    """
    return TemplateFormatter(locale).format(template, positional, named)
