"""Tests for diagnostics: codes, spans, templates, formatter and errors."""

from __future__ import annotations

import json

import pytest

from fmtengine import (
    FormatError,
    IndexOutOfRangeError,
    LocaleFormattingError,
    MissingBundleError,
    MissingKeyError,
    RangeError,
    TypeMismatchError,
    UnsupportedCombinationError,
    format_template,
)
from fmtengine.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    ErrorCategory,
    ErrorTemplate,
    OutputFormat,
    SourceSpan,
)

# ============================================================================
# Codes and Spans
# ============================================================================


class TestDiagnosticCode:
    """Code numbering and categories."""

    @pytest.mark.parametrize(
        ("code", "category"),
        [
            (DiagnosticCode.KEY_NOT_FOUND, ErrorCategory.REFERENCE),
            (DiagnosticCode.TYPE_MISMATCH, ErrorCategory.TYPE),
            (DiagnosticCode.SIZE_BELOW_MINIMUM, ErrorCategory.RANGE),
            (DiagnosticCode.SIZE_ABOVE_MAXIMUM, ErrorCategory.RANGE),
            (DiagnosticCode.GROUPING_NOT_ALLOWED, ErrorCategory.COMBINATION),
            (DiagnosticCode.LOCALE_FORMATTING_FAILED, ErrorCategory.LOCALE),
        ],
    )
    def test_category(self, code: DiagnosticCode, category: ErrorCategory) -> None:
        """Category follows the thousand block."""
        assert code.category == category

    def test_codes_unique(self) -> None:
        """No two codes share a value."""
        values = [code.value for code in DiagnosticCode]
        assert len(values) == len(set(values))


class TestSourceSpan:
    """SourceSpan validation and construction."""

    def test_from_offsets_first_line(self) -> None:
        """Column is 1-based on the first line."""
        span = SourceSpan.from_offsets("ab{x}", 2, 5)
        assert (span.line, span.column) == (1, 3)

    def test_from_offsets_later_line(self) -> None:
        """Lines are counted by newlines before start."""
        span = SourceSpan.from_offsets("a\nb\n{x}", 4, 7)
        assert (span.line, span.column) == (3, 1)

    @pytest.mark.parametrize(
        ("start", "end", "line", "column"),
        [(-1, 0, 1, 1), (5, 4, 1, 1), (0, 0, 0, 1), (0, 0, 1, 0)],
    )
    def test_invalid(self, start: int, end: int, line: int, column: int) -> None:
        """Invariants are enforced at construction."""
        with pytest.raises(ValueError, match="SourceSpan"):
            SourceSpan(start=start, end=end, line=line, column=column)


# ============================================================================
# Formatter
# ============================================================================


class TestDiagnosticFormatter:
    """Rust, simple and JSON output."""

    @pytest.fixture
    def diagnostic(self) -> Diagnostic:
        """A key lookup failure with a span."""
        return ErrorTemplate.key_not_found(
            "user", placeholder="{user}", span=SourceSpan.from_offsets("Hi {user}", 3, 9)
        )

    def test_rust(self, diagnostic: Diagnostic) -> None:
        """Compiler-style multi-line output."""
        assert DiagnosticFormatter().format(diagnostic) == (
            "error[KEY_NOT_FOUND]: Key 'user' is missing in named arguments\n"
            "  --> {user} at line 1, column 4\n"
            "  = argument: user\n"
            "  = help: Pass 'user' in the named arguments mapping"
        )

    def test_simple(self, diagnostic: Diagnostic) -> None:
        """One line with code and placeholder."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        assert formatter.format(diagnostic) == (
            "KEY_NOT_FOUND: {user} Key 'user' is missing in named arguments"
        )

    def test_json(self, diagnostic: Diagnostic) -> None:
        """JSON carries code, category and span."""
        data = json.loads(DiagnosticFormatter(output_format=OutputFormat.JSON).format(diagnostic))
        assert data["code"] == "KEY_NOT_FOUND"
        assert data["code_value"] == 1004
        assert data["category"] == "reference"
        assert data["placeholder"] == "{user}"
        assert (data["line"], data["column"], data["start"], data["end"]) == (1, 4, 3, 9)

    def test_color_wraps_label(self, diagnostic: Diagnostic) -> None:
        """With color, only the "error" label carries ANSI codes."""
        first, *_ = DiagnosticFormatter(color=True).format(diagnostic).split("\n")
        assert first == (
            "\033[1;31merror\033[0m[KEY_NOT_FOUND]: Key 'user' is missing in named arguments"
        )

    def test_control_characters_escaped(self) -> None:
        """A newline in a key cannot forge extra output lines."""
        diagnostic = ErrorTemplate.key_not_found("a\nb", placeholder="{'a\nb'}")
        first, *_ = DiagnosticFormatter().format(diagnostic).split("\n")
        assert first == "error[KEY_NOT_FOUND]: Key 'a\\x0ab' is missing in named arguments"

    def test_sanitize_truncates(self) -> None:
        """Sanitized output is cut to max_content_length."""
        diagnostic = ErrorTemplate.key_not_found("k" * 200)
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE, sanitize=True)
        assert formatter.format(diagnostic).endswith("...")

    def test_format_all(self, diagnostic: Diagnostic) -> None:
        """Multiple diagnostics are separated by a blank line."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        assert formatter.format_all([diagnostic, diagnostic]).count("\n\n") == 1


# ============================================================================
# Exceptions
# ============================================================================


class TestFormatErrors:
    """Exception hierarchy and diagnostics carried by errors."""

    @pytest.mark.parametrize(
        ("error_type", "builtin"),
        [
            (MissingBundleError, LookupError),
            (IndexOutOfRangeError, IndexError),
            (MissingKeyError, LookupError),
            (TypeMismatchError, TypeError),
            (RangeError, ValueError),
            (UnsupportedCombinationError, ValueError),
            (LocaleFormattingError, ValueError),
        ],
    )
    def test_hierarchy(self, error_type: type[FormatError], builtin: type[Exception]) -> None:
        """Each error is a FormatError and its closest builtin."""
        assert issubclass(error_type, FormatError)
        assert issubclass(error_type, builtin)

    def test_plain_message(self) -> None:
        """A plain message carries no diagnostic."""
        error = FormatError("boom")
        assert str(error) == "boom"
        assert error.diagnostic is None
        assert error.placeholder is None
        assert error.category is None

    def test_error_from_format_call(self) -> None:
        """Errors raised while formatting point at the placeholder."""
        with pytest.raises(MissingKeyError) as exc_info:
            format_template("Hi {user}", named={})
        error = exc_info.value
        assert error.placeholder == "{user}"
        assert error.category == ErrorCategory.REFERENCE
        assert "  --> {user} at line 1, column 4" in str(error)

    def test_type_mismatch_details(self) -> None:
        """Type mismatches record expected and received types."""
        with pytest.raises(TypeMismatchError) as exc_info:
            format_template("{0:x}", ["ff"])
        diagnostic = exc_info.value.diagnostic
        assert diagnostic is not None
        assert diagnostic.expected_type == "int"
        assert diagnostic.received_type == "str"
        assert diagnostic.specifier == "x"
        assert "Expected int, passed str" in str(exc_info.value)
