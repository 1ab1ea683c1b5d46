"""
Base parser class for APML.

Provides the line cursor plumbing and the block scope primitives shared by all
parser mixins. Every block-shaped construct is read through ``scoped_lines``.
"""

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import NoReturn

from ..errors import make_parse_error
from ..lines import LineCursor, LineInfo, LineKind, classify_line

logger = logging.getLogger(__name__)


class BaseParser:
    """
    Base parser class with cursor and block utilities.

    Two block policies exist:

    - owned body: member lines are indented strictly deeper than the header
      (``scoped_lines(header_indent)``); used by data, logic and skipped bodies.
    - sibling list: the first child fixes a baseline and members are indented
      at least that deep (``scoped_lines(baseline, sibling=True)``); used by
      interface, show, conditional and computed bodies.
    """

    def __init__(self, text: str, file: Path | None = None):
        """
        Initialize parser.

        Args:
            text: Full source text, newline separated
            file: Source file path (for error reporting)
        """
        self.cursor = LineCursor(text)
        self.file = file

    def current_info(self) -> LineInfo:
        return self.cursor.current_info()

    def advance(self) -> None:
        self.cursor.advance()

    def error(self, message: str, info: LineInfo | None = None) -> NoReturn:
        """Raise a fatal ParseError located at the cursor line."""
        raw = self.cursor.current()
        if info is None:
            info = classify_line(raw)
        raise make_parse_error(
            message,
            self.file,
            self.cursor.line_number,
            info.indent + 1,
            snippet=raw,
        )

    def block_baseline(self, header_indent: int) -> int | None:
        """
        Find the baseline of a sibling-list block.

        Args:
            header_indent: Indentation of the header that opens the block

        Returns:
            Indentation of the first significant line after the cursor, or None
            if that line is not deeper than the header (the block is empty)
        """
        upcoming = self.cursor.peek_significant()
        if upcoming is None or upcoming.indent <= header_indent:
            return None
        return upcoming.indent

    def scoped_lines(self, base_indent: int, *, sibling: bool = False) -> Iterator[LineInfo]:
        """
        Yield the significant lines of a block, starting at the cursor.

        Blank and comment lines are skipped. The scan stops, without consuming
        the line, at the first significant line outside the block or at end of
        input. A consumer may advance the cursor itself or recurse into a
        nested block; if it leaves the cursor where it was, the line is
        skipped.

        Args:
            base_indent: Header indentation (owned body) or baseline (sibling list)
            sibling: Use the greater-than-or-equal sibling-list policy
        """
        cursor = self.cursor
        while cursor.has_more():
            info = cursor.current_info()
            if not info.is_significant:
                cursor.advance()
                continue
            if info.indent < base_indent or (not sibling and info.indent == base_indent):
                return
            pos = cursor.pos
            yield info
            if cursor.pos == pos:
                cursor.advance()

    def skip_block(self, header_indent: int) -> list[str]:
        """
        Consume the owned body of the header just passed.

        Returns:
            The stripped text of the consumed significant lines
        """
        return [info.text for info in self.scoped_lines(header_indent)]

    def read_literal_block(self, marker_indent: int) -> str:
        """
        Read a ``|`` literal block following the marker line.

        Lines are taken verbatim down to (not including) the first non-blank
        line indented less than the literal's first line. Indentation is
        re-based on that first line.

        Args:
            marker_indent: Indentation of the ``key: |`` line

        Returns:
            Captured lines joined with newlines and trimmed
        """
        cursor = self.cursor
        captured: list[str] = []
        literal_indent: int | None = None

        while cursor.has_more():
            raw = cursor.current()
            if not raw.strip():
                if literal_indent is not None:
                    captured.append("")
                cursor.advance()
                continue
            indent = cursor.indent_of(raw)
            if literal_indent is None:
                if indent <= marker_indent:
                    break
                literal_indent = indent
            elif indent < literal_indent:
                break
            captured.append(raw[literal_indent:])
            cursor.advance()

        return "\n".join(captured).strip()

    def skip_unknown(self, info: LineInfo) -> None:
        """Consume an unrecognised line together with any body it owns."""
        logger.debug("Skipping unrecognised line %d: %s", self.cursor.line_number, info.text)
        self.advance()
        self.skip_block(info.indent)

    @staticmethod
    def is_bare_section(info: LineInfo, names: frozenset[str]) -> bool:
        return info.kind == LineKind.PROPERTY and info.is_bare_key and info.key in names
