"""Formatting runtime package.

Provides argument resolution, the per-specifier renderers, the aligner and
the TemplateFormatter API. Depends on syntax package for parsing.

Python 3.11+.
"""

from .align import align_text
from .context import FormatContext
from .formatter import TemplateFormatter, format_template
from .locale_context import LocaleContext, NumberSymbols
from .locale_numbers import render_locale_number
from .numbers import NUMBER_STYLES, NumberStyle, format_significant, render_number
from .strings import render_char, render_string, truncate
from .value_types import FormatValue, infer_specifier

__all__ = [
    "NUMBER_STYLES",
    "FormatContext",
    "FormatValue",
    "LocaleContext",
    "NumberStyle",
    "NumberSymbols",
    "TemplateFormatter",
    "align_text",
    "format_significant",
    "format_template",
    "infer_specifier",
    "render_char",
    "render_locale_number",
    "render_number",
    "render_string",
    "truncate",
]
