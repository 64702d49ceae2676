"""Records describing a formatting failure.

DiagnosticCode numbers every failure kind, SourceSpan locates the
placeholder, and Diagnostic bundles both with the message and details.
Python 3.11+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
    "SourceSpan",
]


class ErrorCategory(StrEnum):
    """Error categorization for FormatError subclasses.

    Inherits from ``StrEnum`` so that ``str(category)`` and direct string
    comparisons work without accessing ``.value``.

    Categories:
        REFERENCE: Argument bundle, index or key could not be resolved
        TYPE: Value type incompatible with the specifier
        RANGE: Resolved size or codepoint outside its allowed range
        COMBINATION: Option not allowed with the specifier
        LOCALE: Locale collaborator rejected the request
    """

    REFERENCE = "reference"
    TYPE = "type"
    RANGE = "range"
    COMBINATION = "combination"
    LOCALE = "locale"


class DiagnosticCode(Enum):
    """Numbered failure kinds; the thousands digit is the category.

    Blocks:
        1000-1999: Reference errors (missing bundles, indices, keys)
        2000-2999: Type errors (value or size reference of the wrong type)
        3000-3999: Range errors (sizes below minimum, invalid codepoints)
        4000-4999: Combination errors (option forbidden for specifier)
        5000-5999: Locale errors (locale formatting failures)
    """

    # Reference errors (1000-1999)
    POSITIONAL_ARGS_MISSING = 1001
    NAMED_ARGS_MISSING = 1002
    INDEX_OUT_OF_RANGE = 1003
    KEY_NOT_FOUND = 1004

    # Type errors (2000-2999)
    TYPE_MISMATCH = 2001
    SIZE_NOT_INTEGER = 2002

    # Range errors (3000-3999)
    SIZE_BELOW_MINIMUM = 3001
    CODEPOINT_OUT_OF_RANGE = 3002
    SIZE_ABOVE_MAXIMUM = 3003

    # Combination errors (4000-4999)
    PRECISION_NOT_ALLOWED = 4001
    ALTERNATE_FORM_NOT_ALLOWED = 4002
    GROUPING_NOT_ALLOWED = 4003

    # Locale errors (5000-5999)
    LOCALE_FORMATTING_FAILED = 5001

    @property
    def category(self) -> ErrorCategory:
        """Category derived from the code's thousand block."""
        return _CATEGORY_BY_BLOCK[self.value // 1000]


_CATEGORY_BY_BLOCK: dict[int, ErrorCategory] = {
    1: ErrorCategory.REFERENCE,
    2: ErrorCategory.TYPE,
    3: ErrorCategory.RANGE,
    4: ErrorCategory.COMBINATION,
    5: ErrorCategory.LOCALE,
}


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Where a placeholder sits in its template.

    Offsets count code points (Python string indices); line and column
    start at 1.

    Attributes:
        start: Offset of the opening brace
        end: Offset just past the closing brace
        line: Line of ``start``
        column: Column of ``start``
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Reject negative offsets, inverted ranges and zero-based positions."""
        problems = (
            (self.start < 0, f"start must be >= 0, got {self.start}"),
            (self.end < self.start, f"end ({self.end}) must be >= start ({self.start})"),
            (self.line < 1, f"line is 1-based, got {self.line}"),
            (self.column < 1, f"column is 1-based, got {self.column}"),
        )
        for failed, detail in problems:
            if failed:
                msg = f"SourceSpan.{detail}"
                raise ValueError(msg)

    @classmethod
    def from_offsets(cls, source: str, start: int, end: int) -> "SourceSpan":
        """Build a span, computing line and column of ``start`` in ``source``."""
        line = source.count("\n", 0, start) + 1
        column = start - (source.rfind("\n", 0, start) + 1) + 1
        return cls(start=start, end=end, line=line, column=column)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """One formatting failure, ready to render or inspect.

    Every FormatError raised while formatting carries one, so tools can
    read the code and span instead of parsing message text.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        placeholder: Literal source text of the offending placeholder
        span: Placeholder location in the template
        hint: Suggestion for fixing the error
        argument_name: Argument reference that caused the error
        expected_type: Expected type or domain
        received_type: Actual runtime type received
        specifier: Type specifier in effect when the error occurred
    """

    code: DiagnosticCode
    message: str
    placeholder: str | None = None
    span: SourceSpan | None = None
    hint: str | None = None
    argument_name: str | None = None
    expected_type: str | None = None
    received_type: str | None = None
    specifier: str | None = None

    def __str__(self) -> str:
        """The bare message, without location or details."""
        return self.message

    def format_error(self) -> str:
        """Multi-line compiler-style rendering (DiagnosticFormatter, rust layout).

        Example output:
            error[INDEX_OUT_OF_RANGE]: Index #3 out of range of positional arguments (2 given)
              --> {3:>8} at line 1, column 7
              = help: Pass at least 4 positional arguments

        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
