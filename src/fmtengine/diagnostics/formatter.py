"""Rendering of Diagnostic records for humans and tools.

Three layouts share one set of detail fields:

    rust    multi-line, compiler style (used for exception messages)
    simple  one line: CODE: {placeholder} message
    json    one object per diagnostic

Python 3.11+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]

# Control characters are escaped so a hostile template cannot forge
# extra lines in log output.
_CONTROL_ESCAPES: dict[int, str] = {
    code: f"\\x{code:02x}" for code in (*range(0x00, 0x20), 0x7F)
}

# (label in rust output, Diagnostic attribute), in display order.
_DETAILS: tuple[tuple[str, str], ...] = (
    ("specifier", "specifier"),
    ("argument", "argument_name"),
    ("expected", "expected_type"),
    ("received", "received_type"),
    ("help", "hint"),
)

# Bold red.
_ANSI_ERROR: str = "\033[1;31merror\033[0m"


class OutputFormat(StrEnum):
    """Layout produced by DiagnosticFormatter."""

    RUST = "rust"
    SIMPLE = "simple"
    JSON = "json"


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Turns diagnostics into text.

    Attributes:
        output_format: Layout to produce
        sanitize: Cut long user-supplied text to ``max_content_length``
        color: Wrap the "error" label in ANSI codes (rust layout only)
        max_content_length: Cut-off used when sanitizing

    Example:
        >>> diagnostic = ErrorTemplate.key_not_found("user", placeholder="{user}")
        >>> print(DiagnosticFormatter().format(diagnostic))
        error[KEY_NOT_FOUND]: Key 'user' is missing in named arguments
          --> {user}
          = argument: user
          = help: Pass 'user' in the named arguments mapping
        >>> print(DiagnosticFormatter(output_format=OutputFormat.SIMPLE).format(diagnostic))
        KEY_NOT_FOUND: {user} Key 'user' is missing in named arguments
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    color: bool = False
    max_content_length: int = 100

    def format(self, diagnostic: Diagnostic) -> str:
        """Render one diagnostic in the configured layout."""
        match self.output_format:
            case OutputFormat.RUST:
                return self._rust(diagnostic)
            case OutputFormat.SIMPLE:
                return self._simple(diagnostic)
            case OutputFormat.JSON:
                return self._json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Render several diagnostics, one blank line between them."""
        return "\n\n".join(map(self.format, diagnostics))

    def _rust(self, diagnostic: Diagnostic) -> str:
        heading = _ANSI_ERROR if self.color else "error"

        lines = [f"{heading}[{diagnostic.code.name}]: {self._clean(diagnostic.message)}"]

        if diagnostic.placeholder is not None:
            where = self._clean(diagnostic.placeholder)
            span = diagnostic.span
            if span is not None:
                where = f"{where} at line {span.line}, column {span.column}"
            lines.append(f"  --> {where}")

        for label, attribute in _DETAILS:
            value = getattr(diagnostic, attribute)
            if value:
                lines.append(f"  = {label}: {self._clean(value)}")

        return "\n".join(lines)

    def _simple(self, diagnostic: Diagnostic) -> str:
        text = self._clean(diagnostic.message)
        if diagnostic.placeholder is not None:
            text = f"{self._clean(diagnostic.placeholder)} {text}"
        return f"{diagnostic.code.name}: {text}"

    def _json(self, diagnostic: Diagnostic) -> str:
        payload: dict[str, str | int] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "category": str(diagnostic.code.category),
            "message": self._truncate(diagnostic.message),
        }
        if diagnostic.placeholder is not None:
            payload["placeholder"] = self._truncate(diagnostic.placeholder)

        span = diagnostic.span
        if span is not None:
            payload.update(line=span.line, column=span.column, start=span.start, end=span.end)

        for _label, attribute in _DETAILS:
            value = getattr(diagnostic, attribute)
            if value:
                payload[attribute] = self._truncate(value)

        return json.dumps(payload, ensure_ascii=False)

    def _clean(self, text: str) -> str:
        return self._truncate(text.translate(_CONTROL_ESCAPES))

    def _truncate(self, text: str) -> str:
        if not self.sanitize or len(text) <= self.max_content_length:
            return text
        return f"{text[: self.max_content_length]}..."
