"""fmtengine - Runtime string formatting with a format-spec mini-language.

Substitutes placeholders such as ``{}``, ``{1}``, ``{name:*^10}`` or
``{:+08,.2f}`` in a template with positional or named values, including
grapheme-aware truncation and locale-aware numbers (CLDR via Babel).

Public API:
    format_template - Format a template in one call
    TemplateFormatter - Reusable formatter bound to one locale
    parse_placeholders - Parse a template into Placeholder records
    FormatValue - Type alias for values accepted by formatting

Exceptions:
    FormatError - Base exception class
    MissingBundleError - Positional or named arguments not supplied
    IndexOutOfRangeError - Positional index out of range
    MissingKeyError - Named key absent
    TypeMismatchError - Value type incompatible with the specifier
    RangeError - Width, precision or codepoint out of range
    UnsupportedCombinationError - Option forbidden for the specifier
    LocaleFormattingError - Locale number formatting failed

Submodules:
    fmtengine.syntax - Placeholder grammar, AST and parser
    fmtengine.diagnostics - Error types, codes and diagnostic formatting
    fmtengine.runtime.locale_context - LocaleContext for locale numbers
"""

from .diagnostics import (
    FormatError,
    IndexOutOfRangeError,
    LocaleFormattingError,
    MissingBundleError,
    MissingKeyError,
    RangeError,
    TypeMismatchError,
    UnsupportedCombinationError,
)
from .runtime import FormatValue, TemplateFormatter, format_template
from .syntax import parse_placeholders

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError  # noqa: E402, I001
from importlib.metadata import version as _get_version  # noqa: E402

try:
    __version__ = _get_version("fmtengine")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "FormatError",
    "FormatValue",
    "IndexOutOfRangeError",
    "LocaleFormattingError",
    "MissingBundleError",
    "MissingKeyError",
    "RangeError",
    "TemplateFormatter",
    "TypeMismatchError",
    "UnsupportedCombinationError",
    "__version__",
    "format_template",
    "parse_placeholders",
]
