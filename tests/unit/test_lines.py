"""Tests for the line classifier and line cursor."""

from apml.core.lines import LineCursor, LineKind, classify_line, indent_of


class TestClassifyLine:
    """Tests for single-line classification."""

    def test_blank_and_whitespace_only(self):
        assert classify_line("").kind == LineKind.BLANK
        assert classify_line("    ").kind == LineKind.BLANK

    def test_comment_keeps_indent(self):
        info = classify_line("    # note")
        assert info.kind == LineKind.COMMENT
        assert info.indent == 4
        assert not info.is_significant

    def test_property_with_value(self):
        info = classify_line('  title: "Hi"')
        assert info.kind == LineKind.PROPERTY
        assert info.key == "title"
        assert info.value == '"Hi"'
        assert info.indent == 2

    def test_bare_key(self):
        info = classify_line("relationships:")
        assert info.kind == LineKind.PROPERTY
        assert info.is_bare_key

    def test_literal_marker(self):
        info = classify_line("  text: |")
        assert info.kind == LineKind.LITERAL_MARKER
        assert info.key == "text"

    def test_header_has_whitespace_before_colon(self):
        info = classify_line("show post_card:")
        assert info.kind == LineKind.HEADER
        assert info.keyword == "show"

    def test_header_with_inline_text(self):
        info = classify_line("show title: Hello: world")
        assert info.kind == LineKind.HEADER
        assert info.keyword == "show"

    def test_other(self):
        info = classify_line("draft -> published")
        assert info.kind == LineKind.OTHER
        assert info.keyword == "draft"


class TestIndentation:
    """Leading whitespace is counted character by character."""

    def test_spaces(self):
        assert indent_of("    x") == 4

    def test_tab_counts_as_one(self):
        assert indent_of("\tx") == 1
        assert classify_line("\t\tshow x:").indent == 2


class TestLineCursor:
    """Tests for cursor bookkeeping."""

    def test_reads_past_end_return_empty(self):
        cursor = LineCursor("a")
        cursor.advance()
        assert not cursor.has_more()
        assert cursor.current() == ""

    def test_line_number_is_one_indexed(self):
        cursor = LineCursor("a\nb")
        assert cursor.line_number == 1
        cursor.advance()
        assert cursor.line_number == 2

    def test_peek_significant_does_not_move(self):
        cursor = LineCursor("\n# c\n  value: 1\n")
        info = cursor.peek_significant()
        assert info is not None
        assert info.key == "value"
        assert cursor.pos == 0

    def test_peek_significant_none_at_end(self):
        cursor = LineCursor("\n# only comments\n")
        assert cursor.peek_significant() is None

    def test_skip_insignificant(self):
        cursor = LineCursor("\n  # c\nx")
        cursor.skip_insignificant()
        assert cursor.current() == "x"
