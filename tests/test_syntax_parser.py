"""Tests for the placeholder grammar and parser.

Covers reference forms, every format-spec field, back-references for width
and precision, source spans, and text that stays literal.
"""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from fmtengine.enums import Align, Sign, Specifier
from fmtengine.syntax import (
    ArgumentRef,
    Placeholder,
    RefKind,
    iter_segments,
    parse_placeholders,
)


def _single(template: str) -> Placeholder:
    placeholders = parse_placeholders(template)
    assert len(placeholders) == 1
    return placeholders[0]


# ============================================================================
# Argument References
# ============================================================================


class TestArgumentReferences:
    """Reference text classification."""

    def test_empty_reference_is_automatic(self) -> None:
        """{} is an automatic reference."""
        ph = _single("{}")
        assert ph.argument.kind == RefKind.AUTO
        assert ph.argument.raw == ""

    def test_digits_are_index(self) -> None:
        """{12} is an explicit index."""
        ph = _single("{12}")
        assert ph.argument.kind == RefKind.INDEX
        assert ph.argument.index == 12

    def test_identifier_is_name(self) -> None:
        """{user.name} is a named reference including the dot."""
        ph = _single("{user.name}")
        assert ph.argument.kind == RefKind.NAME
        assert ph.argument.name == "user.name"

    def test_unicode_identifier(self) -> None:
        """Identifiers accept Unicode letters and digits."""
        ph = _single("{имя2}")
        assert ph.argument.name == "имя2"

    def test_underscore_identifier(self) -> None:
        """Identifiers may start with an underscore."""
        assert _single("{_private}").argument.name == "_private"

    def test_single_quoted_with_escape(self) -> None:
        """Doubled single quotes collapse to one."""
        ph = _single("{'it''s'}")
        assert ph.argument.kind == RefKind.NAME
        assert ph.argument.name == "it's"
        assert ph.argument.raw == "'it''s'"

    def test_double_quoted_with_escape(self) -> None:
        """Doubled double quotes collapse to one."""
        assert _single('{"say ""hi"""}').argument.name == 'say "hi"'

    def test_quoted_may_contain_spaces_and_braces(self) -> None:
        """Quoted keys may hold characters identifiers cannot."""
        assert _single("{'full name: }'}").argument.name == "full name: }"

    def test_parse_classmethod(self) -> None:
        """ArgumentRef.parse classifies raw text directly."""
        assert ArgumentRef.parse("") == ArgumentRef(RefKind.AUTO, "")
        assert ArgumentRef.parse("3") == ArgumentRef(RefKind.INDEX, "3", index=3)
        assert ArgumentRef.parse("x") == ArgumentRef(RefKind.NAME, "x", name="x")

    def test_whitespace_inside_braces(self) -> None:
        """Whitespace just inside the braces is allowed."""
        ph = _single("{  name  }")
        assert ph.argument.name == "name"
        assert ph.source == "{  name  }"


# ============================================================================
# Format Spec Fields
# ============================================================================


class TestFormatSpecFields:
    """Every optional field of the format spec."""

    def test_no_spec_has_defaults(self) -> None:
        """A bare placeholder carries no options."""
        ph = _single("{}")
        assert ph.fill is None
        assert ph.align is None
        assert ph.sign is None
        assert ph.alternate is False
        assert ph.zero is False
        assert ph.width is None
        assert ph.group is None
        assert ph.precision is None
        assert ph.specifier is None
        assert ph.suffix is None

    def test_fill_and_align(self) -> None:
        """Fill text precedes the alignment marker."""
        ph = _single("{:*^10}")
        assert ph.fill == "*"
        assert ph.align == Align.CENTER
        assert ph.width == 10

    def test_multi_character_fill(self) -> None:
        """Fill may be several characters."""
        ph = _single("{:ab<8}")
        assert ph.fill == "ab"
        assert ph.align == Align.LEFT

    def test_align_without_fill(self) -> None:
        """Alignment marker alone leaves fill unset."""
        ph = _single("{:>5}")
        assert ph.fill is None
        assert ph.align == Align.RIGHT

    def test_alignment_character_as_fill(self) -> None:
        """The last alignment character is the marker."""
        ph = _single("{:<<5}")
        assert ph.fill == "<"
        assert ph.align == Align.LEFT

    def test_reserved_align(self) -> None:
        """The reserved marker parses."""
        assert _single("{:|5}").align == Align.RESERVED

    @pytest.mark.parametrize(
        ("template", "sign"),
        [("{:+d}", Sign.ALWAYS), ("{:-d}", Sign.MINUS), ("{: d}", Sign.SPACE)],
    )
    def test_sign(self, template: str, sign: Sign) -> None:
        """All three sign modes parse."""
        assert _single(template).sign == sign

    def test_all_fields(self) -> None:
        """Fields in grammar order."""
        ph = _single("{0:_>+#012,.3f}")
        assert ph.argument.index == 0
        assert ph.fill == "_"
        assert ph.align == Align.RIGHT
        assert ph.sign == Sign.ALWAYS
        assert ph.alternate is True
        assert ph.zero is True
        assert ph.width == 12
        assert ph.group == ","
        assert ph.precision == 3
        assert ph.specifier == Specifier.FIXED_LOWER

    def test_zero_flag_then_width(self) -> None:
        """A leading zero is the zero flag, the rest is the width."""
        ph = _single("{:05d}")
        assert ph.zero is True
        assert ph.width == 5

    def test_width_starting_with_nonzero(self) -> None:
        """Width 10 does not set the zero flag."""
        ph = _single("{:10}")
        assert ph.zero is False
        assert ph.width == 10

    def test_underscore_group(self) -> None:
        """Underscore is a group character."""
        assert _single("{:_x}").group == "_"

    @pytest.mark.parametrize("spec", list("csbodxXfFeEgGn"))
    def test_every_specifier(self, spec: str) -> None:
        """Every specifier letter parses."""
        assert _single(f"{{:{spec}}}").specifier == Specifier(spec)

    def test_suffix_is_recorded(self) -> None:
        """A quoted suffix is parsed and kept verbatim."""
        ph = _single("{:s'unit'}")
        assert ph.specifier == Specifier.STRING
        assert ph.suffix == "'unit'"


# ============================================================================
# Back-References
# ============================================================================


class TestSizeBackReferences:
    """Width and precision taken from arguments."""

    def test_automatic_width(self) -> None:
        """{:{}} takes the width from the next positional argument."""
        ph = _single("{:{}}")
        assert ph.width == ArgumentRef(RefKind.AUTO, "")

    def test_indexed_width_and_named_precision(self) -> None:
        """Both sizes may reference arguments."""
        ph = _single("{:{1}.{prec}f}")
        assert ph.width == ArgumentRef(RefKind.INDEX, "1", index=1)
        assert ph.precision == ArgumentRef(RefKind.NAME, "prec", name="prec")

    def test_quoted_back_reference(self) -> None:
        """Quoted references work inside size braces."""
        ph = _single("{:.{'p'}f}")
        assert ph.precision == ArgumentRef(RefKind.NAME, "'p'", name="p")


# ============================================================================
# Segments and Spans
# ============================================================================


class TestSegments:
    """Splitting templates into literals and placeholders."""

    def test_literal_only(self) -> None:
        """Text without placeholders is one literal."""
        assert list(iter_segments("plain text")) == ["plain text"]

    def test_empty_template(self) -> None:
        """Empty template yields nothing."""
        assert list(iter_segments("")) == []

    def test_mixed(self) -> None:
        """Literals surround placeholders."""
        segments = list(iter_segments("a{}b{x}c"))
        assert segments[0] == "a"
        assert isinstance(segments[1], Placeholder)
        assert segments[2] == "b"
        assert isinstance(segments[3], Placeholder)
        assert segments[4] == "c"

    def test_lone_brace_stays_literal(self) -> None:
        """An unmatched brace is literal text."""
        assert list(iter_segments("a { b")) == ["a { b"]
        assert list(iter_segments("a } b")) == ["a } b"]

    def test_invalid_spec_stays_literal(self) -> None:
        """A placeholder with an unknown specifier is not recognised."""
        assert parse_placeholders("{:z}") == ()
        assert parse_placeholders("{12abc}") == ()

    def test_adjacent_placeholders(self) -> None:
        """Placeholders may touch."""
        assert len(parse_placeholders("{}{}{}")) == 3

    def test_span_line_and_column(self) -> None:
        """Spans carry offsets and 1-based line/column."""
        ph = _single("ab\ncd {x} ef")
        assert ph.span.start == 6
        assert ph.span.end == 9
        assert ph.span.line == 2
        assert ph.span.column == 4

    @given(st.text())
    def test_segments_reproduce_template(self, template: str) -> None:
        """Joining literals and placeholder sources reproduces the template."""
        rebuilt = "".join(
            s if isinstance(s, str) else s.source for s in iter_segments(template)
        )
        assert rebuilt == template

    @given(st.text(alphabet=st.characters(exclude_characters="{")))
    def test_no_open_brace_no_placeholders(self, template: str) -> None:
        """Templates without '{' have no placeholders."""
        assert parse_placeholders(template) == ()
