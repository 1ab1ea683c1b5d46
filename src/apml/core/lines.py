"""
Line cursor and line classifier for APML source.

APML has no braces or terminators: structure comes from indentation alone.
The parser therefore works on whole lines rather than tokens. The cursor does
positional bookkeeping only; the classifier looks at one line at a time and
knows nothing about the surrounding document.
"""

import re
from dataclasses import dataclass
from enum import Enum

# `key: value` or bare `key:`
PROPERTY_RE = re.compile(r"^(\w+):\s*(.*)$")
# First word of a line
KEYWORD_RE = re.compile(r"^(\w+)")

LITERAL_MARKER = "|"


class LineKind(Enum):
    """Classification of a single source line."""

    BLANK = "blank"
    COMMENT = "comment"
    # key: |
    LITERAL_MARKER = "literal_marker"
    # key: value, or a bare key:
    PROPERTY = "property"
    # keyword name...: with whitespace before the colon
    HEADER = "header"
    OTHER = "other"


@dataclass(frozen=True)
class LineInfo:
    """
    A classified line.

    Attributes:
        kind: Line classification
        indent: Count of leading whitespace characters
        text: The line with surrounding whitespace removed
        keyword: First word of the line, if it starts with a word character
        key: Property key for PROPERTY and LITERAL_MARKER lines
        value: Property value (may be empty) for PROPERTY lines
    """

    kind: LineKind
    indent: int
    text: str
    keyword: str | None = None
    key: str | None = None
    value: str | None = None

    @property
    def is_significant(self) -> bool:
        """Blank and comment lines never affect block structure."""
        return self.kind not in (LineKind.BLANK, LineKind.COMMENT)

    @property
    def is_bare_key(self) -> bool:
        """A ``key:`` line with nothing after the colon."""
        return self.kind == LineKind.PROPERTY and not self.value


def indent_of(line: str) -> int:
    """Return the count of leading whitespace characters."""
    return len(line) - len(line.lstrip())


def classify_line(line: str) -> LineInfo:
    """
    Classify a raw source line.

    Header detection only looks at the shape of the line: a header has
    whitespace somewhere before its final colon (``show post_card:``), while a
    property has a single word before its first colon (``title: "Hi"``).
    """
    indent = indent_of(line)
    text = line.strip()

    if not text:
        return LineInfo(LineKind.BLANK, indent, text)
    if text.startswith("#"):
        return LineInfo(LineKind.COMMENT, indent, text)

    keyword_match = KEYWORD_RE.match(text)
    keyword = keyword_match.group(1) if keyword_match else None

    prop = PROPERTY_RE.match(text)
    if prop:
        key, value = prop.group(1), prop.group(2).strip()
        if value == LITERAL_MARKER:
            return LineInfo(LineKind.LITERAL_MARKER, indent, text, keyword, key, value)
        return LineInfo(LineKind.PROPERTY, indent, text, keyword, key, value)

    if keyword and ":" in text and re.search(r"\s", text.split(":", 1)[0]):
        return LineInfo(LineKind.HEADER, indent, text, keyword)

    return LineInfo(LineKind.OTHER, indent, text, keyword)


class LineCursor:
    """
    Ordered view over source lines with a current position.

    Reads past the end return an empty string instead of raising, so scan
    loops terminate cleanly at end of input.
    """

    def __init__(self, text: str):
        self.lines = text.split("\n")
        self.pos = 0

    def current(self) -> str:
        """Get the line at the cursor, or an empty string past the end."""
        if self.pos >= len(self.lines):
            return ""
        return self.lines[self.pos]

    def current_info(self) -> LineInfo:
        return classify_line(self.current())

    def advance(self) -> None:
        """Move forward one line."""
        self.pos += 1

    def has_more(self) -> bool:
        return self.pos < len(self.lines)

    def skip_insignificant(self) -> None:
        """Advance past blank and comment lines."""
        while self.has_more() and not self.current_info().is_significant:
            self.advance()

    def peek_significant(self) -> LineInfo | None:
        """
        Classify the next non-blank, non-comment line without moving.

        Returns:
            LineInfo of that line, or None if only blank/comment lines remain
        """
        for line in self.lines[self.pos :]:
            info = classify_line(line)
            if info.is_significant:
                return info
        return None

    @property
    def line_number(self) -> int:
        """1-indexed line number of the cursor position."""
        return self.pos + 1

    @staticmethod
    def indent_of(line: str) -> int:
        return indent_of(line)
