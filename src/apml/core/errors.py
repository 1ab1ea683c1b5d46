"""
Error types for APML parsing, validation, and code generation.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


class ApmlError(Exception):
    """Base exception for all APML errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class ParseError(ApmlError):
    """
    Raised when APML source cannot be parsed.

    Only malformed headers are fatal: a line that starts with a recognised
    keyword but is missing its identifier, condition, or trailing colon.
    Unknown constructs, properties, and modifiers never raise.
    """

    pass


class ValidationError(ApmlError):
    """
    Raised when a parsed document fails semantic checks.

    Examples:
    - Duplicate data model names
    - Field referencing an undeclared model
    """

    pass


class BackendError(ApmlError):
    """
    Raised when a backend fails to generate output.

    Examples:
    - Unknown backend name
    - Output directory issues
    """

    pass


@dataclass
class ErrorContext:
    """
    Context information for an error, including source location.

    Attributes:
        file: Path to the source file, when known
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        snippet: Optional source line(s) around the error
    """

    file: Path | None
    line: int
    column: int
    snippet: str | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "app.apml:10:5"
        """
        location = f"{self.file or '<input>'}:{self.line}:{self.column}"
        if self.snippet:
            return f"{location}\n{self._format_snippet()}"
        return location

    def _format_snippet(self) -> str:
        """Format the snippet with a line number gutter and an error marker."""
        if not self.snippet:
            return ""

        prefix = f"{self.line:4d} | "
        marker_pos = len(prefix) + self.column - 1
        return f"{prefix}{self.snippet}\n{' ' * marker_pos}^^^"


def make_parse_error(
    message: str,
    file: Path | None,
    line: int,
    column: int,
    snippet: str | None = None,
) -> ParseError:
    """
    Helper to create a ParseError with context.

    Args:
        message: Error description
        file: Source file path (None for in-memory text)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        snippet: Optional code snippet

    Returns:
        ParseError with context attached
    """
    context = ErrorContext(file=file, line=line, column=column, snippet=snippet)
    return ParseError(message, context)


def make_validation_error(message: str, file: Path | None = None) -> ValidationError:
    """Helper to create a ValidationError, with a file-level context when known."""
    if file:
        return ValidationError(message, ErrorContext(file=file, line=1, column=1))
    return ValidationError(message)
