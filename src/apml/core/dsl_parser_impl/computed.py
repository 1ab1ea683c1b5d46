"""
Computed value parsing for APML.

Two syntaxes declare the same construct:

    computed total: a + b

    computed total:
      value: a + b
      format: currency
      cache: true

``value`` (and the inline expression) may also be a ``|`` literal block.
"""

import logging
import re
from typing import TYPE_CHECKING, Any

from .. import ir
from ..lines import LITERAL_MARKER, LineKind

logger = logging.getLogger(__name__)

COMPUTED_HEADER_RE = re.compile(r"^computed\s+(\w+)\s*:(.*)$")

COMPUTED_FORMATS = {f.value: f for f in ir.ComputedFormat}


class ComputedParserMixin:
    """
    Mixin providing computed value parsing.

    Note: This mixin expects to be combined with BaseParser via multiple inheritance.
    """

    if TYPE_CHECKING:
        advance: Any
        error: Any
        current_info: Any
        block_baseline: Any
        scoped_lines: Any
        read_literal_block: Any

    def parse_computed(self) -> ir.ComputedValue:
        """Parse a computed declaration at the cursor."""
        header = self.current_info()
        match = COMPUTED_HEADER_RE.match(header.text)
        if not match:
            self.error(f"Invalid computed declaration: '{header.text}'", header)

        name = match.group(1)
        inline = match.group(2).strip()
        self.advance()

        # computed name: | (literal expression)
        if inline == LITERAL_MARKER:
            return ir.ComputedValue(name=name, expression=self.read_literal_block(header.indent))

        # computed name: expression
        if inline:
            return ir.ComputedValue(name=name, expression=inline)

        # computed name: (block)
        value: str | None = None
        format: ir.ComputedFormat | None = None
        cache: bool | None = None

        baseline = self.block_baseline(header.indent)
        if baseline is None:
            return ir.ComputedValue(name=name)

        for info in self.scoped_lines(baseline, sibling=True):
            if info.kind == LineKind.LITERAL_MARKER and info.key == "value":
                self.advance()
                value = self.read_literal_block(info.indent)

            elif info.kind == LineKind.PROPERTY and info.value:
                if info.key == "value":
                    value = info.value
                elif info.key == "format":
                    format = COMPUTED_FORMATS.get(info.value)
                    if format is None:
                        logger.debug("Ignoring unknown format for %s: %s", name, info.value)
                elif info.key == "cache":
                    cache = info.value == "true"

        return ir.ComputedValue(name=name, value=value, format=format, cache=cache)
