"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.11+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Every template takes the placeholder source text and span as keywords so
    the rendered error always points at the offending placeholder.
    """

    @staticmethod
    def positional_args_missing(
        *, placeholder: str | None = None, span: SourceSpan | None = None
    ) -> Diagnostic:
        """Positional reference used without positional arguments.

        Returns:
            Diagnostic for POSITIONAL_ARGS_MISSING
        """
        return Diagnostic(
            code=DiagnosticCode.POSITIONAL_ARGS_MISSING,
            message="Positional arguments are missing",
            placeholder=placeholder,
            span=span,
            hint="Pass a sequence of positional arguments or use named references",
        )

    @staticmethod
    def named_args_missing(
        *, placeholder: str | None = None, span: SourceSpan | None = None
    ) -> Diagnostic:
        """Named reference used without named arguments.

        Returns:
            Diagnostic for NAMED_ARGS_MISSING
        """
        return Diagnostic(
            code=DiagnosticCode.NAMED_ARGS_MISSING,
            message="Named arguments are missing",
            placeholder=placeholder,
            span=span,
            hint="Pass a mapping of named arguments or use positional references",
        )

    @staticmethod
    def index_out_of_range(
        index: int,
        count: int,
        *,
        placeholder: str | None = None,
        span: SourceSpan | None = None,
    ) -> Diagnostic:
        """Positional index beyond the supplied arguments.

        Args:
            index: Requested index (explicit or automatic)
            count: Number of positional arguments supplied

        Returns:
            Diagnostic for INDEX_OUT_OF_RANGE
        """
        msg = f"Index #{index} out of range of positional arguments ({count} given)"
        return Diagnostic(
            code=DiagnosticCode.INDEX_OUT_OF_RANGE,
            message=msg,
            placeholder=placeholder,
            span=span,
            argument_name=str(index),
            hint=f"Pass at least {index + 1} positional arguments",
        )

    @staticmethod
    def key_not_found(
        key: str, *, placeholder: str | None = None, span: SourceSpan | None = None
    ) -> Diagnostic:
        """Named key absent from the named arguments.

        Args:
            key: Key after quote stripping

        Returns:
            Diagnostic for KEY_NOT_FOUND
        """
        msg = f"Key '{key}' is missing in named arguments"
        return Diagnostic(
            code=DiagnosticCode.KEY_NOT_FOUND,
            message=msg,
            placeholder=placeholder,
            span=span,
            argument_name=key,
            hint=f"Pass '{key}' in the named arguments mapping",
        )

    @staticmethod
    def type_mismatch(
        expected: str,
        received: str,
        specifier: str | None,
        *,
        placeholder: str | None = None,
        span: SourceSpan | None = None,
    ) -> Diagnostic:
        """Value type incompatible with the specifier.

        Args:
            expected: Expected domain (e.g. "int", "float", "int or float")
            received: Runtime type name of the value

        Returns:
            Diagnostic for TYPE_MISMATCH
        """
        msg = f"Expected {expected}, passed {received}"
        return Diagnostic(
            code=DiagnosticCode.TYPE_MISMATCH,
            message=msg,
            placeholder=placeholder,
            span=span,
            expected_type=expected,
            received_type=received,
            specifier=specifier,
        )

    @staticmethod
    def size_not_integer(
        name: str,
        received: str,
        *,
        placeholder: str | None = None,
        span: SourceSpan | None = None,
    ) -> Diagnostic:
        """Width or precision back-reference resolved to a non-integer.

        Args:
            name: "Width" or "Precision"
            received: Runtime type name of the resolved value

        Returns:
            Diagnostic for SIZE_NOT_INTEGER
        """
        msg = f"{name} must be int, passed {received}"
        return Diagnostic(
            code=DiagnosticCode.SIZE_NOT_INTEGER,
            message=msg,
            placeholder=placeholder,
            span=span,
            argument_name=name.lower(),
            expected_type="int",
            received_type=received,
        )

    @staticmethod
    def size_below_minimum(
        name: str,
        value: int,
        minimum: int,
        *,
        placeholder: str | None = None,
        span: SourceSpan | None = None,
    ) -> Diagnostic:
        """Resolved width or precision below its minimum.

        Returns:
            Diagnostic for SIZE_BELOW_MINIMUM
        """
        msg = f"{name} must be >= {minimum}, passed {value}"
        return Diagnostic(
            code=DiagnosticCode.SIZE_BELOW_MINIMUM,
            message=msg,
            placeholder=placeholder,
            span=span,
            argument_name=name.lower(),
        )

    @staticmethod
    def size_above_maximum(
        name: str,
        value: int,
        maximum: int,
        *,
        placeholder: str | None = None,
        span: SourceSpan | None = None,
    ) -> Diagnostic:
        """Resolved width or precision above the supported maximum.

        Returns:
            Diagnostic for SIZE_ABOVE_MAXIMUM
        """
        msg = f"{name} must be <= {maximum}, passed {value}"
        return Diagnostic(
            code=DiagnosticCode.SIZE_ABOVE_MAXIMUM,
            message=msg,
            placeholder=placeholder,
            span=span,
            argument_name=name.lower(),
            hint=f"Use a {name.lower()} of at most {maximum}",
        )

    @staticmethod
    def codepoint_out_of_range(
        codepoint: int, *, placeholder: str | None = None, span: SourceSpan | None = None
    ) -> Diagnostic:
        """Char specifier value is not a Unicode codepoint.

        Returns:
            Diagnostic for CODEPOINT_OUT_OF_RANGE
        """
        msg = f"Codepoint {codepoint} is outside the range 0..0x10FFFF"
        return Diagnostic(
            code=DiagnosticCode.CODEPOINT_OUT_OF_RANGE,
            message=msg,
            placeholder=placeholder,
            span=span,
            specifier="c",
        )

    @staticmethod
    def precision_not_allowed(
        specifier: str,
        *,
        for_integer: bool = False,
        placeholder: str | None = None,
        span: SourceSpan | None = None,
    ) -> Diagnostic:
        """Precision given for a specifier that forbids it.

        Args:
            specifier: The type specifier
            for_integer: Precision is only forbidden because the value is an int

        Returns:
            Diagnostic for PRECISION_NOT_ALLOWED
        """
        target = f"int with format specifier '{specifier}'" if for_integer else (
            f"format specifier '{specifier}'"
        )
        return Diagnostic(
            code=DiagnosticCode.PRECISION_NOT_ALLOWED,
            message=f"Precision not allowed with {target}",
            placeholder=placeholder,
            span=span,
            specifier=specifier,
            hint="Remove the '.precision' part of the placeholder",
        )

    @staticmethod
    def alternate_form_not_allowed(
        specifier: str, *, placeholder: str | None = None, span: SourceSpan | None = None
    ) -> Diagnostic:
        """Alternate form '#' given for a specifier that forbids it.

        Returns:
            Diagnostic for ALTERNATE_FORM_NOT_ALLOWED
        """
        msg = f"Alternate form (#) not allowed with format specifier '{specifier}'"
        return Diagnostic(
            code=DiagnosticCode.ALTERNATE_FORM_NOT_ALLOWED,
            message=msg,
            placeholder=placeholder,
            span=span,
            specifier=specifier,
        )

    @staticmethod
    def grouping_not_allowed(
        group: str,
        specifier: str,
        *,
        placeholder: str | None = None,
        span: SourceSpan | None = None,
    ) -> Diagnostic:
        """Group option given for a specifier that forbids it.

        Returns:
            Diagnostic for GROUPING_NOT_ALLOWED
        """
        msg = f"Group option '{group}' not allowed with format specifier '{specifier}'"
        return Diagnostic(
            code=DiagnosticCode.GROUPING_NOT_ALLOWED,
            message=msg,
            placeholder=placeholder,
            span=span,
            specifier=specifier,
            hint="Use '_' to group radix digits",
        )

    @staticmethod
    def locale_formatting_failed(
        value: object,
        locale_code: str,
        reason: str,
        *,
        placeholder: str | None = None,
        span: SourceSpan | None = None,
    ) -> Diagnostic:
        """Locale number formatter rejected the value or pattern.

        Returns:
            Diagnostic for LOCALE_FORMATTING_FAILED
        """
        msg = f"Number formatting failed for '{value}' in locale '{locale_code}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_FORMATTING_FAILED,
            message=msg,
            placeholder=placeholder,
            span=span,
            specifier="n",
        )
