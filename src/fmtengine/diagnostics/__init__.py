"""Diagnostic system for formatting errors.

Provides structured error diagnostics with codes, spans and hints.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.11+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory, SourceSpan
from .errors import (
    FormatError,
    IndexOutOfRangeError,
    LocaleFormattingError,
    MissingBundleError,
    MissingKeyError,
    RangeError,
    TypeMismatchError,
    UnsupportedCombinationError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorCategory",
    "ErrorTemplate",
    "FormatError",
    "IndexOutOfRangeError",
    "LocaleFormattingError",
    "MissingBundleError",
    "MissingKeyError",
    "OutputFormat",
    "RangeError",
    "SourceSpan",
    "TypeMismatchError",
    "UnsupportedCombinationError",
]
