"""fmtengine exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.
Each concrete error also derives from the closest builtin exception, so
callers may catch either ``MissingKeyError`` or ``LookupError``.

Python 3.11+. Zero external dependencies.
"""

from .codes import Diagnostic, ErrorCategory

__all__ = [
    "FormatError",
    "IndexOutOfRangeError",
    "LocaleFormattingError",
    "MissingBundleError",
    "MissingKeyError",
    "RangeError",
    "TypeMismatchError",
    "UnsupportedCombinationError",
]


class FormatError(Exception):
    """Base exception for all formatting errors.

    Attributes:
        diagnostic: Structured diagnostic information (None for plain messages)
        placeholder: Literal source text of the offending placeholder, if known
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize FormatError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)

    @property
    def placeholder(self) -> str | None:
        """Source text of the placeholder the error was raised for."""
        return self.diagnostic.placeholder if self.diagnostic else None

    @property
    def category(self) -> ErrorCategory | None:
        """Error category derived from the diagnostic code."""
        return self.diagnostic.code.category if self.diagnostic else None


class MissingBundleError(FormatError, LookupError):
    """Positional or named arguments referenced but not supplied.

    Example:
        format_template("{name}", positional=["x"])  # no named mapping
    """


class IndexOutOfRangeError(FormatError, IndexError):
    """Positional index at or beyond the length of the positional arguments."""


class MissingKeyError(FormatError, LookupError):
    """Named key absent from the named arguments."""


class TypeMismatchError(FormatError, TypeError):
    """Value type incompatible with the specifier.

    Also raised when a width or precision back-reference resolves to a
    non-integer value.
    """


class RangeError(FormatError, ValueError):
    """Resolved value outside its allowed range.

    Examples:
    - Width or precision below the specifier's minimum
    - Char specifier value outside the Unicode codepoint range
    """


class UnsupportedCombinationError(FormatError, ValueError):
    """Precision, alternate form or grouping requested where forbidden."""


class LocaleFormattingError(FormatError, ValueError):
    """The locale number formatter rejected the request.

    Wraps the underlying Babel exception as ``__cause__``.
    """
