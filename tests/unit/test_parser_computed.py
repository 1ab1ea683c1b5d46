"""Tests for computed value parsing."""

import pytest

from apml.core import ir
from apml.core.dsl_parser_impl import parse_apml
from apml.core.errors import ParseError


def _computed(text: str) -> ir.ComputedValue:
    doc = parse_apml(text)
    assert len(doc.computed) == 1
    return doc.computed[0]


class TestInlineComputed:
    """computed <Name>: <expression>"""

    def test_inline_expression(self):
        value = _computed("computed total: price * quantity\n")
        assert value.name == "total"
        assert value.expression == "price * quantity"
        assert value.value is None
        assert value.source == "price * quantity"

    def test_inline_literal(self):
        value = _computed(
            """
computed summary: |
  items.filter(i => i.done)
       .length
next_thing:
"""
        )
        assert value.expression == "items.filter(i => i.done)\n     .length"


class TestBlockComputed:
    """computed <Name>: followed by value/format/cache properties"""

    def test_block_properties(self):
        value = _computed(
            """
computed rate:
  value: done / total
  format: percentage
  cache: true
"""
        )
        assert value.expression is None
        assert value.value == "done / total"
        assert value.format == ir.ComputedFormat.PERCENTAGE
        assert value.cache is True
        assert value.source == "done / total"

    def test_cache_other_than_true_is_false(self):
        value = _computed("computed x:\n  value: 1\n  cache: yes\n")
        assert value.cache is False

    def test_unknown_format_ignored(self):
        value = _computed("computed x:\n  value: 1\n  format: roman\n")
        assert value.format is None
        assert value.value == "1"

    def test_value_literal_block(self):
        value = _computed(
            """
computed label:
  value: |
    first
      second

    third
  format: number
"""
        )
        assert value.value == "first\n  second\n\nthird"
        assert value.format == ir.ComputedFormat.NUMBER

    def test_two_line_literal(self):
        value = _computed("computed greeting:\n  value: |\n    line one\n    line two\n")
        assert value.value == "line one\nline two"

    def test_empty_block(self):
        value = _computed("computed pending:\ndata A:\n  x: text\n")
        assert value == ir.ComputedValue(name="pending")
        assert value.source is None

    def test_both_syntaxes_yield_same_source(self):
        inline = _computed("computed t: a + b\n")
        block = _computed("computed t:\n  value: a + b\n")
        assert inline.source == block.source


class TestMalformedComputed:
    """Header errors."""

    @pytest.mark.parametrize("header", ["computed: x", "computed :"])
    def test_missing_name_is_fatal(self, header):
        with pytest.raises(ParseError) as exc_info:
            parse_apml(header + "\n")
        assert "Invalid computed declaration" in str(exc_info.value)
