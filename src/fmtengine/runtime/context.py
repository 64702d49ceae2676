"""Per-call formatting context: argument and size resolution.

A FormatContext is created for each top-level formatting call and
discarded when the call returns or raises. It owns the Resolution Cursor,
the auto-increment pointer into the positional arguments.

Cursor semantics:
    {}   consumes positional[cursor], then cursor += 1
    {i}  consumes positional[i],      then cursor = i + 1

Automatic and manual references may be interleaved; a manual index moves
the automatic cursor to just after it.

Thread Safety:
    Not shared. Each call gets a fresh context, so concurrent calls never
    observe each other's cursor.

Python 3.11+.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from fmtengine.constants import MAX_SIZE, MIN_WIDTH
from fmtengine.diagnostics import (
    ErrorTemplate,
    IndexOutOfRangeError,
    MissingBundleError,
    MissingKeyError,
    RangeError,
    TypeMismatchError,
)
from fmtengine.syntax import ArgumentRef, Placeholder, RefKind, SizeSpec

from .value_types import FormatValue, is_integer

__all__ = ["FormatContext"]


@dataclass(slots=True)
class FormatContext:
    """Explicit context for one formatting call.

    Attributes:
        positional: Positional arguments, None when not supplied
        named: Named arguments, None when not supplied
        cursor: Next automatic positional index
    """

    positional: Sequence[FormatValue] | None = None
    named: Mapping[str, FormatValue] | None = None
    cursor: int = 0

    def resolve(self, ref: ArgumentRef, placeholder: Placeholder) -> FormatValue:
        """Fetch the value a reference points at.

        Raises:
            MissingBundleError: Referenced bundle kind was not supplied
            IndexOutOfRangeError: Positional index beyond the arguments
            MissingKeyError: Named key absent
        """
        match ref.kind:
            case RefKind.AUTO:
                return self._by_index(self.cursor, placeholder)
            case RefKind.INDEX:
                assert ref.index is not None
                return self._by_index(ref.index, placeholder)
            case RefKind.NAME:
                assert ref.name is not None
                return self._by_name(ref.name, placeholder)

    def resolve_size(
        self,
        size: SizeSpec | None,
        name: str,
        placeholder: Placeholder,
        *,
        minimum: int = MIN_WIDTH,
    ) -> int | None:
        """Resolve a literal or back-referenced width/precision.

        Args:
            size: Literal int, back-reference, or None when not written
            name: "Width" or "Precision" (for messages)
            placeholder: Placeholder being rendered
            minimum: Smallest accepted value

        Returns:
            The size, or None when the placeholder carries none

        Raises:
            TypeMismatchError: Back-reference resolved to a non-integer
            RangeError: Size below minimum or above MAX_SIZE
        """
        if size is None:
            return None

        if isinstance(size, ArgumentRef):
            value = self.resolve(size, placeholder)
            if not is_integer(value):
                diag = ErrorTemplate.size_not_integer(
                    name,
                    type(value).__name__,
                    placeholder=placeholder.source,
                    span=placeholder.span,
                )
                raise TypeMismatchError(diag)
            resolved = value
        else:
            resolved = size

        if resolved < minimum:
            diag = ErrorTemplate.size_below_minimum(
                name, resolved, minimum, placeholder=placeholder.source, span=placeholder.span
            )
            raise RangeError(diag)
        if resolved > MAX_SIZE:
            diag = ErrorTemplate.size_above_maximum(
                name, resolved, MAX_SIZE, placeholder=placeholder.source, span=placeholder.span
            )
            raise RangeError(diag)
        return resolved

    def _by_index(self, index: int, placeholder: Placeholder) -> FormatValue:
        if self.positional is None:
            diag = ErrorTemplate.positional_args_missing(
                placeholder=placeholder.source, span=placeholder.span
            )
            raise MissingBundleError(diag)

        if index >= len(self.positional):
            diag = ErrorTemplate.index_out_of_range(
                index, len(self.positional), placeholder=placeholder.source, span=placeholder.span
            )
            raise IndexOutOfRangeError(diag)

        self.cursor = index + 1
        return self.positional[index]

    def _by_name(self, key: str, placeholder: Placeholder) -> FormatValue:
        if self.named is None:
            diag = ErrorTemplate.named_args_missing(
                placeholder=placeholder.source, span=placeholder.span
            )
            raise MissingBundleError(diag)

        if key not in self.named:
            diag = ErrorTemplate.key_not_found(
                key, placeholder=placeholder.source, span=placeholder.span
            )
            raise MissingKeyError(diag)

        return self.named[key]
