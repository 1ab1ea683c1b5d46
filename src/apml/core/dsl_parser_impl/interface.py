"""
Interface parsing for APML.

Handles ``interface <Name>:`` blocks and the recursive display tree inside
them: ``show`` elements, ``when``/``if`` conditionals with an optional
``else:`` branch, and ``for_each`` iterations.
"""

import logging
import re
from typing import TYPE_CHECKING, Any

from .. import ir
from ..lines import LineInfo, LineKind

logger = logging.getLogger(__name__)

INTERFACE_HEADER_RE = re.compile(r"^interface\s+(\w+)\s*:")
# show <Kind>[ <Name>]:[ inline text]
SHOW_HEADER_RE = re.compile(r"^show\s+(\w+)(?:\s+(\w+))?\s*:(.*)$")
# when <Condition>:  /  if <Condition>:
CONDITION_HEADER_RE = re.compile(r"^(when|if)\s+(.+):$")
FOR_EACH_HEADER_RE = re.compile(r"^for_each\s+(\w+)\s+in\s+(.+?)\s*:$")
EVENT_HANDLER_RE = re.compile(r"^on\s+\w+\s*:")
ELSE_RE = re.compile(r"^else\s*:$")

ELEMENT_KEYWORDS = frozenset({"show", "when", "if", "for_each"})
SKIPPED_SECTIONS = frozenset({"pagination", "template"})


class InterfaceParserMixin:
    """
    Mixin providing interface and display element parsing.

    Note: This mixin expects to be combined with BaseParser via multiple inheritance.
    """

    if TYPE_CHECKING:
        cursor: Any
        advance: Any
        error: Any
        current_info: Any
        block_baseline: Any
        scoped_lines: Any
        skip_block: Any
        read_literal_block: Any
        is_bare_section: Any

    def parse_interface(self) -> ir.InterfaceSection:
        """Parse an interface declaration at the cursor."""
        header = self.current_info()
        match = INTERFACE_HEADER_RE.match(header.text)
        if not match:
            self.error(f"Invalid interface declaration: '{header.text}'", header)

        name = match.group(1)
        self.advance()

        elements, _ = self.parse_element_body(header.indent)
        return ir.InterfaceSection(name=name, elements=elements)

    def parse_element_body(self, header_indent: int) -> tuple[list[ir.UIElement], dict[str, str]]:
        """
        Parse the sibling list that follows an element header.

        Each line is interpreted, in priority order, as a nested element
        header, an ``on <event>:`` handler (body skipped), a bare
        ``pagination:``/``template:`` section (body skipped), or a
        ``key: value`` property. Anything else is skipped.

        Returns:
            Tuple of (child elements, properties)
        """
        children: list[ir.UIElement] = []
        properties: dict[str, str] = {}

        baseline = self.block_baseline(header_indent)
        if baseline is None:
            return children, properties

        for info in self.scoped_lines(baseline, sibling=True):
            if info.keyword in ELEMENT_KEYWORDS:
                children.append(self.parse_ui_element(info))

            elif EVENT_HANDLER_RE.match(info.text):
                self.advance()
                self.skip_block(info.indent)

            elif self.is_bare_section(info, SKIPPED_SECTIONS):
                self.advance()
                self.skip_block(info.indent)

            elif ELSE_RE.match(info.text):
                # else: without a preceding conditional
                logger.debug("Skipping orphan else at line %d", self.cursor.line_number)
                self.advance()
                self.skip_block(info.indent)

            elif info.kind == LineKind.LITERAL_MARKER:
                self.advance()
                properties[info.key] = self.read_literal_block(info.indent)

            elif info.kind == LineKind.PROPERTY and info.value:
                properties[info.key] = info.value

        return children, properties

    def parse_ui_element(self, info: LineInfo) -> ir.UIElement:
        """Parse the element whose header is at the cursor."""
        if info.keyword == "show":
            return self.parse_show_element(info)
        if info.keyword == "for_each":
            return self.parse_iteration_element(info)
        return self.parse_conditional_element(info)

    def parse_show_element(self, header: LineInfo) -> ir.ShowElement:
        """Parse ``show <Kind>:``, ``show <Kind> <Name>:`` or ``show <Kind>: <text>``."""
        match = SHOW_HEADER_RE.match(header.text)
        if not match:
            self.error(f"Invalid show statement: '{header.text}'", header)

        element_name = match.group(1)
        explicit_name = match.group(2)
        inline = match.group(3).strip()
        self.advance()

        children, properties = self.parse_element_body(header.indent)

        if inline:
            properties = {"text": inline, **properties}
        if explicit_name:
            properties = {"id": explicit_name, **properties}

        return ir.ShowElement(
            element_name=element_name,
            name=explicit_name or element_name,
            properties=properties,
            children=children,
        )

    def parse_conditional_element(self, header: LineInfo) -> ir.ConditionalElement:
        """Parse ``when <Condition>:`` / ``if <Condition>:`` plus an optional ``else:``."""
        match = CONDITION_HEADER_RE.match(header.text)
        if not match or not match.group(2).strip():
            self.error(f"Invalid {header.keyword} statement: '{header.text}'", header)

        kind = match.group(1)
        condition = match.group(2).strip()
        self.advance()

        then, _ = self.parse_element_body(header.indent)

        otherwise = None
        upcoming = self.cursor.peek_significant()
        if (
            upcoming is not None
            and upcoming.indent == header.indent
            and ELSE_RE.match(upcoming.text)
        ):
            self.cursor.skip_insignificant()
            self.advance()
            otherwise, _ = self.parse_element_body(header.indent)

        return ir.ConditionalElement(type=kind, condition=condition, then=then, else_=otherwise)

    def parse_iteration_element(self, header: LineInfo) -> ir.IterationElement:
        """Parse ``for_each <item> in <collection>:``."""
        match = FOR_EACH_HEADER_RE.match(header.text)
        if not match:
            self.error(f"Invalid for_each statement: '{header.text}'", header)

        item_name = match.group(1)
        collection = match.group(2).strip()
        self.advance()

        body, _ = self.parse_element_body(header.indent)
        return ir.IterationElement(item_name=item_name, collection=collection, body=body)
